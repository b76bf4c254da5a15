from __future__ import annotations

import logging
import sys
from pathlib import Path

# Make the catalog package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core import events
from catalog.core.events import EventNotifier


def test_handlers_run_in_registration_order():
    notifier = EventNotifier()
    calls = []
    notifier.subscribe(events.COURSES_UPDATED, lambda payload: calls.append(("a", payload)))
    notifier.subscribe(events.COURSES_UPDATED, lambda payload: calls.append(("b", payload)))

    delivered = notifier.publish(events.COURSES_UPDATED, {"id": "course-1"})

    assert delivered == 2
    assert calls == [("a", {"id": "course-1"}), ("b", {"id": "course-1"})]


def test_publish_without_subscribers_is_a_no_op():
    assert EventNotifier().publish(events.BLOG_DELETED, "post-1") == 0


def test_duplicate_subscriptions_deliver_twice_and_unsubscribe_removes_all():
    notifier = EventNotifier()
    calls = []

    def handler(payload):
        calls.append(payload)

    notifier.subscribe(events.BLOG_UPDATED, handler)
    notifier.subscribe(events.BLOG_UPDATED, handler)
    notifier.publish(events.BLOG_UPDATED, 1)
    assert calls == [1, 1]

    notifier.unsubscribe(events.BLOG_UPDATED, handler)
    notifier.publish(events.BLOG_UPDATED, 2)
    assert calls == [1, 1]
    assert notifier.handler_count(events.BLOG_UPDATED) == 0


def test_unsubscribe_unknown_handler_is_harmless():
    notifier = EventNotifier()
    notifier.unsubscribe(events.COURSE_CREATED, print)
    assert notifier.handler_count(events.COURSE_CREATED) == 0


def test_unsubscribe_during_dispatch_only_affects_later_publishes():
    notifier = EventNotifier()
    calls = []

    def first(payload):
        calls.append("first")

    def second(payload):
        calls.append("second")
        notifier.unsubscribe(events.COURSES_UPDATED, first)

    notifier.subscribe(events.COURSES_UPDATED, first)
    notifier.subscribe(events.COURSES_UPDATED, second)

    notifier.publish(events.COURSES_UPDATED)
    assert calls == ["first", "second"]

    notifier.publish(events.COURSES_UPDATED)
    assert calls == ["first", "second", "second"]


def test_failing_handler_is_logged_and_does_not_stop_delivery(caplog):
    notifier = EventNotifier()
    calls = []

    def broken(payload):
        raise RuntimeError("boom")

    notifier.subscribe(events.COURSE_DELETED, broken)
    notifier.subscribe(events.COURSE_DELETED, calls.append)

    with caplog.at_level(logging.ERROR, logger="catalog.core.events"):
        delivered = notifier.publish(events.COURSE_DELETED, "course-3")

    assert delivered == 1
    assert calls == ["course-3"]
    assert "course:deleted" in caplog.text


def test_topics_are_independent():
    notifier = EventNotifier()
    calls = []
    notifier.subscribe(events.BLOG_CREATED, calls.append)
    notifier.publish(events.COURSE_CREATED, "course-1")
    assert calls == []
    assert len(set(events.ALL_TOPICS)) == 7
