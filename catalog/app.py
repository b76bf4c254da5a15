"""Public read-only API: course catalog and published blog posts."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.routers import blog as blog_router
from catalog.routers import courses as courses_router
from catalog.services.container import Catalog, get_catalog

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, no sniffing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    """Factory compatible with ``uvicorn --factory``; tests pass their own Catalog."""
    catalog = catalog or get_catalog()
    settings = catalog.settings
    app = FastAPI(title="TNQDO Catalog API")
    app.state.catalog = catalog

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:8000", "http://127.0.0.1:8000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    @app.get("/health")
    def health():
        return {"status": "ok", "backend": settings.storage_backend}

    app.include_router(courses_router.router)
    app.include_router(blog_router.router)
    logger.info("Public app created (env=%s)", settings.app_env)
    return app
