"""
High-level use cases for the catalog.

Service modules orchestrate repositories, the admin auth collaborator and the
event notifier. They return ``Result`` / ``OperationResult`` objects instead
of raising, so routers and views only ever check ``.error``.
"""
