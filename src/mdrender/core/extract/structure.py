"""Single-line and short multi-line constructs: headings, rules, tables, definition lists, footnotes"""

import re

from mdrender.core.extract.literals import SENTINEL_CLOSE, SENTINEL_OPEN, plain_text
from mdrender.core.models import FootnoteRegistry, Line, LineKind, Literals, SlugRegistry
from mdrender.core.utils.slug import slugify


FOOTNOTE_DEF_RE = re.compile(r'^\[\^(\w+)\]:\s*(.+)$')
HEADING_RE = re.compile(r'^(#{1,6}) (.*)$')
RULE_RE = re.compile(r'^[ \t]*(?:-{3,}|\*{3,}|_{3,})[ \t]*$')
TABLE_ROW_RE = re.compile(r'^\s*\|.+\|[ \t]*$')
TABLE_SEP_RE = re.compile(r'^\s*\|[\s:|-]+\|[ \t]*$')
DEFINITION_RE = re.compile(r'^:\s+(.+)$')
# A fenced code block or display math standing alone on its line.
BLOCK_LITERAL_RE = re.compile(
    f'^\\s*{SENTINEL_OPEN}(?:CB|DM)\\d+{SENTINEL_CLOSE}\\s*$'
)


def _cells(row: str) -> list[str]:
    """Split a |-delimited row into trimmed, non-empty cells."""
    return [c.strip() for c in row.split('|') if c.strip()]


def _alignment(cell: str) -> str:
    if cell.startswith(':') and cell.endswith(':'):
        return 'center'
    if cell.endswith(':'):
        return 'right'
    return 'left'


def _is_separator(line: str) -> bool:
    return bool(TABLE_SEP_RE.match(line)) and '-' in line


def _table_html(header: str, separator: str, rows: list[str]) -> str:
    """Render a table; cells beyond the alignment row default to left."""
    aligns = [_alignment(c) for c in _cells(separator)]

    def _row(cells: list[str], tag: str) -> str:
        return ''.join(
            f'<{tag} style="text-align: {aligns[i] if i < len(aligns) else "left"}">{c}</{tag}>'
            for i, c in enumerate(cells)
        )

    head = _row(_cells(header), 'th')
    body = ''.join(f'<tr>{_row(cells, "td")}</tr>' for cells in map(_cells, rows) if cells)
    return f'<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>'


def _heading(match: re.Match, literals: Literals, slugs: SlugRegistry) -> Line:
    level = len(match.group(1))
    text = match.group(2).rstrip()
    slug = slugs.claim(slugify(plain_text(text, literals)))
    return Line(LineKind.heading, f'<h{level} id="{slug}">{text}</h{level}>')


def _append_definition(out: list[Line], term: str, definition: str) -> None:
    """Add a dt/dd pair, merging into a directly preceding definition list."""
    pair = f'<dt>{term}</dt><dd>{definition}</dd>'
    if out and out[-1].kind == LineKind.definition_list:
        out[-1] = Line(LineKind.definition_list, out[-1].text[:-len('</dl>')] + pair + '</dl>')
    else:
        out.append(Line(LineKind.definition_list, f'<dl>{pair}</dl>'))


def transform_structure(text: str, literals: Literals) -> tuple[list[Line], FootnoteRegistry]:
    """Split text into typed lines, rewriting structural constructs.

    Footnote definitions are removed from the flow (leaving a blank line) and
    recorded; references are numbered later by the inline pass.
    """
    footnotes = FootnoteRegistry()
    slugs = SlugRegistry()
    lines = text.split('\n')
    out: list[Line] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if m := FOOTNOTE_DEF_RE.match(line):
            footnotes.definitions[m.group(1)] = m.group(2)
            out.append(Line(LineKind.blank))
        elif m := HEADING_RE.match(line):
            out.append(_heading(m, literals, slugs))
        elif RULE_RE.match(line):
            out.append(Line(LineKind.rule, '<hr>'))
        elif (TABLE_ROW_RE.match(line) and i + 2 < len(lines)
                and _is_separator(lines[i + 1]) and TABLE_ROW_RE.match(lines[i + 2])):
            end = i + 2
            while end < len(lines) and TABLE_ROW_RE.match(lines[end]):
                end += 1
            out.append(Line(LineKind.table, _table_html(line, lines[i + 1], lines[i + 2:end])))
            i = end
            continue
        elif line.strip() and i + 1 < len(lines) and (d := DEFINITION_RE.match(lines[i + 1])):
            _append_definition(out, line, d.group(1))
            i += 2
            continue
        elif BLOCK_LITERAL_RE.match(line):
            out.append(Line(LineKind.block_literal, line.strip()))
        elif not line.strip():
            out.append(Line(LineKind.blank))
        else:
            out.append(Line(LineKind.text, line))
        i += 1

    return out, footnotes
