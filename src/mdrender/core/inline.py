"""Span-level rewriting: emphasis, strikethrough, images, links, footnote references"""

import re
from dataclasses import replace

from mdrender.core.models import FootnoteRegistry, Line


# Order matters: *** before ** before *, images before links.
SPAN_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r'\*\*\*(.+?)\*\*\*'), r'<strong><em>\1</em></strong>'),
    (re.compile(r'\*\*(.+?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'\*(.+?)\*'), r'<em>\1</em>'),
    (re.compile(r'~~([^~]+)~~'), r'<del>\1</del>'),
    (re.compile(r'!\[([^\]]*)\]\(([^)]+)\)'), r'<img src="\2" alt="\1" />'),
    (re.compile(r'<(https?://[^>]+)>'), r'<a href="\1">\1</a>'),
    (re.compile(r'<([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})>'), r'<a href="mailto:\1">\1</a>'),
    (re.compile(r'\[([^\]]+)\]\(([^)]+)\)'), r'<a href="\2">\1</a>'),
)

FOOTNOTE_REF_RE = re.compile(r'\[\^(\w+)\]')


def rewrite_spans(text: str) -> str:
    """Apply every span rule except footnote references."""
    for pattern, template in SPAN_RULES:
        text = pattern.sub(template, text)
    return text


def rewrite_footnote_refs(text: str, footnotes: FootnoteRegistry) -> str:
    """Number references by first sight; repeats reuse the number and anchor."""
    def _ref(m: re.Match) -> str:
        note_id = m.group(1)
        number = footnotes.reference(note_id)
        return f'<sup class="footnote-ref"><a href="#fn-{note_id}" id="fnref-{note_id}">[{number}]</a></sup>'

    return FOOTNOTE_REF_RE.sub(_ref, text)


def rewrite_inline(lines: list[Line], footnotes: FootnoteRegistry) -> list[Line]:
    """Rewrite the text of every line, preserving kinds."""
    return [
        replace(line, text=rewrite_footnote_refs(rewrite_spans(line.text), footnotes))
        if line.text else line
        for line in lines
    ]
