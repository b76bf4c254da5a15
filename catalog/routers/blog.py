from __future__ import annotations

from fastapi import APIRouter, Request

from catalog.routers.responses import get_catalog, raise_for_error, serialize
from catalog.services.blog_service import BlogService

router = APIRouter(prefix="/api/blog", tags=["blog"])


def _blog_service(request: Request) -> BlogService:
    catalog = get_catalog(request)
    return catalog.blog_service(catalog.sessions.auth_for(None))


@router.get("")
def list_posts(request: Request):
    result = _blog_service(request).get_all_posts()
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/featured")
def featured_posts(request: Request, limit: int = 3):
    result = _blog_service(request).get_featured_posts(limit)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/recent")
def recent_posts(request: Request, limit: int = 5):
    result = _blog_service(request).get_recent_posts(limit)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/categories")
def categories(request: Request):
    result = _blog_service(request).get_categories()
    raise_for_error(result.error)
    return result.data


@router.get("/search")
def search_posts(request: Request, q: str = "", category: str = ""):
    result = _blog_service(request).search_posts(q, category)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/category/{category}")
def posts_by_category(category: str, request: Request):
    result = _blog_service(request).get_posts_by_category(category)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/{slug}")
def post_detail(slug: str, request: Request):
    # Counts a view on every successful read.
    result = _blog_service(request).get_post_by_slug(slug)
    raise_for_error(result.error)
    return serialize(result.data)
