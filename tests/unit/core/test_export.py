"""Unit tests for core/export.py"""

from mdrender.core.export import build_css, build_document
from mdrender.core.models import Typography


def test_build_css_empty_without_typography():
    assert build_css(None) == ""
    assert build_css(Typography()) == ""


def test_build_css_body_and_headings():
    css = build_css(Typography(font="Georgia", line_height=1.5, body_size=16, h2_size=24))
    assert css == (
        "body { font-family: Georgia; line-height: 1.5; font-size: 16px; }\n"
        "h2 { font-size: 24px; }"
    )


def test_build_css_headings_only():
    assert build_css(Typography(h1_size=30)) == "h1 { font-size: 30px; }"


def test_build_document_without_style():
    html = build_document("<p>x</p>", "T")
    assert "<style>" not in html
    assert "<body>\n<p>x</p>\n</body>" in html
    assert '<meta charset="utf-8">' in html


def test_build_document_escapes_title():
    assert "<title>&lt;b&gt;</title>" in build_document("", "<b>")


def test_build_document_with_style():
    html = build_document("", "T", Typography(bodySize=14))
    assert "<style>\nbody { font-size: 14px; }\n</style>" in html
