from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse

from catalog.app import SecurityHeadersMiddleware
from catalog.routers import admin as admin_router
from catalog.routers.responses import get_catalog as catalog_of
from catalog.services.container import Catalog, get_catalog
from catalog.services.session_service import (
    admin_token,
    clear_admin_cookie,
    current_admin,
    set_admin_cookie,
)

logger = logging.getLogger(__name__)


def create_admin_app(catalog: Optional[Catalog] = None) -> FastAPI:
    catalog = catalog or get_catalog()
    app = FastAPI(title="TNQDO Catalog Admin API")
    app.state.catalog = catalog
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=catalog.settings.app_env == "prod")

    # ---------------------- auth ----------------------
    @app.post("/login")
    def do_login(request: Request, email: str = Form(...), password: str = Form(...)):
        token = catalog_of(request).sessions.login(email, password)
        if not token:
            raise HTTPException(401, "Invalid credentials")
        logger.info("Admin %s logged in", email)
        resp = JSONResponse({"success": True})
        set_admin_cookie(resp, token, catalog_of(request).settings)
        return resp

    @app.get("/logout")
    def logout(request: Request):
        catalog_of(request).sessions.logout(admin_token(request))
        resp = RedirectResponse("/session", status_code=303)
        clear_admin_cookie(resp)
        return resp

    @app.get("/session")
    def session_info(request: Request):
        auth = current_admin(request, catalog_of(request).sessions)
        info = auth.get_session_info()
        info["displayName"] = auth.get_display_name() if auth.is_authenticated() else None
        return info

    app.include_router(admin_router.router)
    return app
