"""Unit tests for core/inline.py"""

import pytest

from mdrender.core.inline import rewrite_footnote_refs, rewrite_inline, rewrite_spans
from mdrender.core.models import FootnoteRegistry, Line, LineKind


@pytest.mark.parametrize("text,expected", [
    ("***both***", "<strong><em>both</em></strong>"),
    ("**bold**", "<strong>bold</strong>"),
    ("*italic*", "<em>italic</em>"),
    ("~~gone~~", "<del>gone</del>"),
    ("![cat](cat.png)", '<img src="cat.png" alt="cat" />'),
    ("<https://example.com>", '<a href="https://example.com">https://example.com</a>'),
    ("<me@example.org>", '<a href="mailto:me@example.org">me@example.org</a>'),
    ("[docs](https://docs.io)", '<a href="https://docs.io">docs</a>'),
])
def test_span_rules(text, expected):
    assert rewrite_spans(text) == expected


def test_bold_and_italic_mixed():
    assert rewrite_spans("**a** and *b*") == "<strong>a</strong> and <em>b</em>"


def test_image_not_rewritten_as_link():
    """Images run before links so ![..](..) never becomes an anchor."""
    out = rewrite_spans("![alt](x.png) [t](y)")
    assert out == '<img src="x.png" alt="alt" /> <a href="y">t</a>'


def test_footnote_numbering_first_seen():
    footnotes = FootnoteRegistry()
    out = rewrite_footnote_refs("[^b] [^a] [^b]", footnotes)
    assert footnotes.referenced == ["b", "a"]
    assert out.count('href="#fn-b"') == 2
    assert "[1]" in out and "[2]" in out
    assert out.count("[1]") == 2


def test_footnote_reference_markup():
    out = rewrite_footnote_refs("x[^note]", FootnoteRegistry())
    assert out == 'x<sup class="footnote-ref"><a href="#fn-note" id="fnref-note">[1]</a></sup>'


def test_rewrite_inline_preserves_kinds():
    lines = [Line(LineKind.list_item, "<li>**a**</li>"), Line(LineKind.blank)]
    out = rewrite_inline(lines, FootnoteRegistry())
    assert out[0] == Line(LineKind.list_item, "<li><strong>a</strong></li>")
    assert out[1] == Line(LineKind.blank)


def test_spans_do_not_cross_lines():
    lines = [Line(LineKind.text, "**open"), Line(LineKind.text, "close**")]
    out = rewrite_inline(lines, FootnoteRegistry())
    assert [line.text for line in out] == ["**open", "close**"]
