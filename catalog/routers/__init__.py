"""
FastAPI routers grouped by collection (courses, blog, admin).

Each module exposes an APIRouter included by ``catalog.app`` or
``catalog.admin_app``. Routers reach their collaborators through
``request.app.state.catalog`` and turn service results into HTTP responses.
"""
