from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the catalog package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core.casing import keys_to_camel, keys_to_snake, to_camel, to_snake
from catalog.domain.slugs import generate_slug, is_valid_slug


@pytest.mark.parametrize(
    "camel, snake",
    [("isActive", "is_active"), ("createdAt", "created_at"), ("authorAvatar", "author_avatar"), ("id", "id")],
)
def test_field_names_translate_both_ways(camel, snake):
    assert to_snake(camel) == snake
    assert to_camel(snake) == camel


def test_key_mapping_is_shallow():
    document = {"isPublished": True, "author": {"avatarUrl": "x"}}
    row = keys_to_snake(document)
    assert row == {"is_published": True, "author": {"avatarUrl": "x"}}
    assert keys_to_camel(row) == document


@pytest.mark.parametrize(
    "title, slug",
    [
        ("Lộ Trình Học JLPT N5 Trong 3 Tháng", "lo-trinh-hoc-jlpt-n5-trong-3-thang"),
        ("Văn Hóa Làm Việc Tại Nhật Bản", "van-hoa-lam-viec-tai-nhat-ban"),
        ("Đi   du lịch -- Nhật!", "di-du-lich-nhat"),
        ("", ""),
    ],
)
def test_generate_slug(title, slug):
    assert generate_slug(title) == slug


def test_is_valid_slug():
    assert is_valid_slug("5-meo-hoc-kanji-hieu-qua")
    assert not is_valid_slug("Có dấu")
    assert not is_valid_slug("double--hyphen")
    assert not is_valid_slug(None)
