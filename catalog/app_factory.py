"""Entry points for the public and admin FastAPI apps (``uvicorn catalog.app_factory:create_app --factory``)."""
from catalog.app import create_app
from catalog.admin_app import create_admin_app

__all__ = ["create_app", "create_admin_app"]
