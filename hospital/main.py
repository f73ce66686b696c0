"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import Settings, settings as default_settings
from .storage import Storage, MemStorage
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .departments.router import router as departments_router
from .doctors.router import router as doctors_router
from .patients.router import router as patients_router
from .appointments.router import router as appointments_router
from .medical_records.router import router as medical_records_router
from .dashboard.router import router as dashboard_router

# Configure logging
logging.basicConfig(level=default_settings.log_level)
logger = logging.getLogger(__name__)


def create_app(storage: Optional[Storage] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around one storage instance.

    Args:
        storage: Storage backing every route; a fresh MemStorage when omitted
        settings: Settings to use; the environment-loaded settings when omitted

    Returns:
        FastAPI: Configured application
    """
    settings = settings or default_settings
    if storage is None:
        storage = MemStorage(seed=settings.seed_departments)

    app = FastAPI(
        title=settings.app_name,
        description="API for managing hospital departments, doctors, patients, appointments and medical records",
        version=settings.app_version
    )
    app.state.storage = storage

    # Register exception handlers
    register_exception_handlers(app)

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware
    setup_middlewares(app)

    # Include routers
    prefix = settings.api_prefix
    app.include_router(departments_router, prefix=f"{prefix}/departments", tags=["Departments"])
    app.include_router(doctors_router, prefix=f"{prefix}/doctors", tags=["Doctors"])
    app.include_router(patients_router, prefix=f"{prefix}/patients", tags=["Patients"])
    app.include_router(appointments_router, prefix=f"{prefix}/appointments", tags=["Appointments"])
    app.include_router(medical_records_router, prefix=f"{prefix}/medical-records", tags=["Medical Records"])
    app.include_router(dashboard_router, prefix=f"{prefix}/dashboard", tags=["Dashboard"])

    # Root endpoint
    @app.get("/")
    def root():
        """
        Root endpoint for API health check.

        Returns:
            dict: Simple welcome message
        """
        return {"message": f"Welcome to {settings.app_name}", "version": settings.app_version}

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """
        Health check endpoint for monitoring.

        Returns:
            dict: Health status information
        """
        return {"status": "healthy", "storage": "memory"}

    logger.info(f"🚀 {settings.app_name} ready with {type(storage).__name__}")
    return app


app = create_app()
