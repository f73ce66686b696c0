"""
FastAPI dependencies shared by the resource routers.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from .storage import Storage


def get_storage(request: Request) -> Storage:
    """
    Dependency function to get the storage of the running application.

    Returns the instance the app was created with (see ``create_app``), so
    each test can hand in a fresh ``MemStorage``.
    """
    return request.app.state.storage


def parse_id_filter(value: Optional[str], param: str) -> Optional[int]:
    """
    Turn an integer query filter into an id.

    A missing or empty parameter (``?patientId=``) means "no filter", so the
    next filter in a list endpoint's precedence order applies. Anything else
    must be a whole number; otherwise the request is rejected with 400 like
    any other invalid input.
    """
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise RequestValidationError([{
            "type": "int_parsing",
            "loc": ("query", param),
            "msg": "Input should be a valid integer, unable to parse string as an integer",
            "input": value,
        }])
