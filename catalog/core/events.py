"""
In-process publish/subscribe channel used to tell read-side views to reload.

The notifier is owned by the composition root and injected into services
(writers) and into whatever renders data (readers); repositories never hold
references to their consumers.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

COURSES_UPDATED = "courses:updated"
COURSE_CREATED = "course:created"
COURSE_UPDATED = "course:updated"
COURSE_DELETED = "course:deleted"
BLOG_UPDATED = "blog:updated"
BLOG_CREATED = "blog:created"
BLOG_DELETED = "blog:deleted"

ALL_TOPICS = (
    COURSES_UPDATED,
    COURSE_CREATED,
    COURSE_UPDATED,
    COURSE_DELETED,
    BLOG_UPDATED,
    BLOG_CREATED,
    BLOG_DELETED,
)

Handler = Callable[[Any], None]


class EventNotifier:
    """Synchronous observer registry keyed by topic name."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, topic: str, handler: Handler) -> None:
        # Duplicates are kept: each call adds one more delivery.
        self._handlers.setdefault(topic, []).append(handler)

    def unsubscribe(self, topic: str, handler: Handler) -> None:
        handlers = self._handlers.get(topic)
        if not handlers:
            return
        remaining = [h for h in handlers if h != handler]
        if remaining:
            self._handlers[topic] = remaining
        else:
            del self._handlers[topic]

    def publish(self, topic: str, payload: Any = None) -> int:
        """
        Deliver ``payload`` to every handler registered for ``topic``, in order.

        The handler list is snapshotted first, so subscribe/unsubscribe calls
        made during dispatch only affect later publishes. A failing handler is
        logged and skipped. Returns how many handlers ran without raising.
        """
        delivered = 0
        for handler in list(self._handlers.get(topic, ())):
            try:
                handler(payload)
            except Exception:
                logger.exception("Event handler %r failed for topic %s", handler, topic)
                continue
            delivered += 1
        return delivered

    def handler_count(self, topic: str) -> int:
        return len(self._handlers.get(topic, ()))

    def clear(self) -> None:
        self._handlers.clear()
