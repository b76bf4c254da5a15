"""
Core utilities shared across the catalog backend.

This package hosts configuration (``config``), password hashing
(``security``), the event notifier (``events``), field-name casing helpers
(``casing``) and timestamp helpers (``utils``). Repositories and services
depend on these primitives instead of importing FastAPI or storage layers.
"""
