"""
Department module: schemas, service functions and routes for hospital departments.
"""
