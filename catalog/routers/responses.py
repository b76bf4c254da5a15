"""Translate service result objects into HTTP responses."""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from catalog.services.container import Catalog
from catalog.services.results import (
    COURSE_NOT_FOUND,
    INVALID_BACKUP,
    NOT_AUTHENTICATED,
    POST_NOT_FOUND,
)

_STATUS_BY_ERROR = {
    NOT_AUTHENTICATED: 401,
    COURSE_NOT_FOUND: 404,
    POST_NOT_FOUND: 404,
    INVALID_BACKUP: 400,
}


def get_catalog(request: Request) -> Catalog:
    catalog = getattr(getattr(request.app, "state", None), "catalog", None)
    if catalog is None:
        raise RuntimeError("Catalog not configured")
    return catalog


def raise_for_error(error: str | None) -> None:
    if error is None:
        return
    raise HTTPException(_STATUS_BY_ERROR.get(error, 500), error)


def serialize(value: Any) -> Any:
    """Records go out in their stored (camelCase) document form."""
    if isinstance(value, list):
        return [serialize(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value
