"""Unit tests for core/utils/emoji.py"""

import pytest

from mdrender.core.utils.emoji import SHORTCODES, is_bullet_glyph, replace_shortcodes


def test_shortcode_table_is_immutable():
    with pytest.raises(TypeError):
        SHORTCODES[":new:"] = "x"


def test_replace_known_and_unknown():
    assert replace_shortcodes(":tada: at 12:30:45 :nope:") == "🎉 at 12:30:45 :nope:"


@pytest.mark.parametrize("token,expected", [
    ("🚀", True),
    ("❤️", True),
    ("ℹ️", True),
    ("-", False),
    ("*", False),
    ("a", False),
    ("🚀🚀", False),
    ("", False),
])
def test_is_bullet_glyph(token, expected):
    assert is_bullet_glyph(token) is expected
