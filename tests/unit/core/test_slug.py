"""Unit tests for core/utils/slug.py and the slug registry"""

import pytest

from mdrender.core.models import SlugRegistry
from mdrender.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("spaced   out", "spaced-out"),
    ("snake_case kept", "snake_case-kept"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


def test_slugify_preserves_hyphens():
    """slugify keeps existing hyphens intact."""
    assert slugify("already-slugified") == "already-slugified"


def test_slugify_strips_leading_trailing_hyphens():
    """slugify strips leading/trailing hyphens from result."""
    assert slugify("- dashed -") == "dashed"


def test_slugify_emoji_only_is_empty():
    """Emoji carry no word characters, so the slug is empty."""
    assert slugify("🚀 🔥") == ""


def test_registry_appends_count_on_repeat():
    """Repeated base slugs get -2, -3, ... suffixes."""
    slugs = SlugRegistry()
    assert [slugs.claim("intro") for _ in range(3)] == ["intro", "intro-2", "intro-3"]


def test_registry_empty_slug_fallback():
    """An empty slug falls back to heading-N where N is registry size + 1."""
    slugs = SlugRegistry()
    slugs.claim("intro")
    assert slugs.claim("") == "heading-2"
