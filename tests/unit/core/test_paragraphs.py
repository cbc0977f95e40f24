"""Unit tests for core/paragraphs.py"""

from mdrender.core.models import Line, LineKind
from mdrender.core.paragraphs import assemble_paragraphs


def test_run_joined_with_spaces():
    lines = [Line(LineKind.text, "one"), Line(LineKind.text, "two")]
    assert assemble_paragraphs(lines) == "<p>one two</p>"


def test_blank_line_splits_paragraphs():
    lines = [Line(LineKind.text, "one"), Line(LineKind.blank), Line(LineKind.text, "two")]
    assert assemble_paragraphs(lines) == "<p>one</p>\n<p>two</p>"


def test_structural_lines_flush_and_pass_through():
    lines = [
        Line(LineKind.text, "intro"),
        Line(LineKind.rule, "<hr>"),
        Line(LineKind.table, "<table></table>"),
        Line(LineKind.text, "outro"),
    ]
    assert assemble_paragraphs(lines) == "<p>intro</p>\n<hr>\n<table></table>\n<p>outro</p>"


def test_quote_text_wrapped_inside_blockquote():
    lines = [
        Line(LineKind.quote_open, "<blockquote>"),
        Line(LineKind.quote_text, "said"),
        Line(LineKind.quote_text, ""),
        Line(LineKind.quote_text, "again"),
        Line(LineKind.quote_close, "</blockquote>"),
    ]
    assert assemble_paragraphs(lines) == "<blockquote>\n<p>said</p>\n<p>again</p>\n</blockquote>"


def test_no_empty_paragraphs():
    lines = [Line(LineKind.blank), Line(LineKind.text, "   "), Line(LineKind.blank)]
    assert assemble_paragraphs(lines) == ""
