from __future__ import annotations

from fastapi import APIRouter, Request

from catalog.routers.responses import get_catalog, raise_for_error, serialize
from catalog.services.course_service import CourseService

router = APIRouter(prefix="/api/courses", tags=["courses"])


def _course_service(request: Request) -> CourseService:
    catalog = get_catalog(request)
    return catalog.course_service(catalog.sessions.auth_for(None))


@router.get("")
def list_courses(request: Request):
    result = _course_service(request).get_all_courses()
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/featured")
def featured_courses(request: Request, limit: int = 3):
    result = _course_service(request).get_featured_courses(limit)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/search")
def search_courses(request: Request, q: str = "", level: str = ""):
    result = _course_service(request).search_courses(q, level)
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/{course_id}")
def course_detail(course_id: str, request: Request):
    result = _course_service(request).get_course_by_id(course_id)
    raise_for_error(result.error)
    return serialize(result.data)
