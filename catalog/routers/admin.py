"""
Admin course and blog management.

Every write goes through the services, which check the admin session bound to
the ``admin_session`` cookie; an anonymous call comes back as 401.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from catalog.routers.responses import get_catalog, raise_for_error, serialize
from catalog.services.blog_service import BlogService
from catalog.services.course_service import CourseService
from catalog.services.results import NOT_AUTHENTICATED
from catalog.services.session_service import current_admin

router = APIRouter(tags=["admin"])

BACKUP_FILENAME = "tnqdo-courses-backup.json"


def _course_service(request: Request) -> CourseService:
    catalog = get_catalog(request)
    return catalog.course_service(current_admin(request, catalog.sessions))


def _blog_service(request: Request) -> BlogService:
    catalog = get_catalog(request)
    return catalog.blog_service(current_admin(request, catalog.sessions))


# ---------------------- courses ----------------------
@router.get("/courses")
def admin_list_courses(request: Request):
    result = _course_service(request).get_all_courses_admin()
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/courses/export")
def export_courses(request: Request):
    result = _course_service(request).export_courses()
    raise_for_error(result.error)
    return Response(
        content=result.data,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{BACKUP_FILENAME}"'},
    )


@router.post("/courses/import")
async def import_courses(request: Request):
    body = (await request.body()).decode("utf-8", errors="replace")
    # Storage writes are blocking; keep them off the event loop.
    result = await run_in_threadpool(_course_service(request).import_courses, body)
    raise_for_error(result.error)
    return {"success": True}


@router.post("/courses/clear")
def clear_courses(request: Request):
    result = _course_service(request).clear_courses()
    raise_for_error(result.error)
    return {"success": True}


@router.get("/courses/{course_id}")
def admin_course_detail(course_id: str, request: Request):
    result = _course_service(request).get_admin_course_detail(course_id)
    raise_for_error(result.error)
    return serialize(result.data)


@router.post("/courses", status_code=201)
def create_course(payload: dict, request: Request):
    result = _course_service(request).create_course(payload)
    raise_for_error(result.error)
    return serialize(result.data)


@router.put("/courses/{course_id}")
def update_course(course_id: str, payload: dict, request: Request):
    result = _course_service(request).update_course(course_id, payload)
    raise_for_error(result.error)
    return serialize(result.data)


@router.delete("/courses/{course_id}")
def delete_course(course_id: str, request: Request):
    result = _course_service(request).delete_course(course_id)
    raise_for_error(result.error)
    return {"success": True}


# ---------------------- blog ----------------------
@router.get("/blog")
def admin_list_posts(request: Request):
    result = _blog_service(request).get_all_posts_admin()
    raise_for_error(result.error)
    return serialize(result.data)


@router.get("/blog/{post_id}")
def admin_post_detail(post_id: str, request: Request):
    service = _blog_service(request)
    if not service.auth.is_authenticated():
        raise HTTPException(401, NOT_AUTHENTICATED)
    result = service.get_post_by_id(post_id)
    raise_for_error(result.error)
    return serialize(result.data)


@router.post("/blog", status_code=201)
def create_post(payload: dict, request: Request):
    result = _blog_service(request).create_post(payload)
    raise_for_error(result.error)
    return serialize(result.data)


@router.put("/blog/{post_id}")
def update_post(post_id: str, payload: dict, request: Request):
    result = _blog_service(request).update_post(post_id, payload)
    raise_for_error(result.error)
    return serialize(result.data)


@router.delete("/blog/{post_id}")
def delete_post(post_id: str, request: Request):
    result = _blog_service(request).delete_post(post_id)
    raise_for_error(result.error)
    return {"success": True}
