"""Line-by-line block state machine for lists and blockquotes"""

import re
from dataclasses import dataclass
from typing import Optional

from mdrender.core.models import Line, LineKind, ListType
from mdrender.core.utils.emoji import is_bullet_glyph


QUOTE_RE = re.compile(r'^((?:\s*>\s*)+)(.*)$')
INDENT_RE = re.compile(r'^(\s*)')

TASK_RE = re.compile(r'^[-*]\s\[([ xX])\]\s(.*)$')
UNORDERED_RE = re.compile(r'^[-*]\s(.*)$')
EMOJI_RE = re.compile(r'^(\S+)\s+(.+)$')
DECIMAL_RE = re.compile(r'^(\d+)\.\s(.*)$')
LOWER_ALPHA_RE = re.compile(r'^([a-z])\.\s(.*)$')
UPPER_ALPHA_RE = re.compile(r'^([A-Z])\.\s(.*)$')
# Capped at x so ordinary words are never read as numerals.
ROMAN_RE = re.compile(r'^(i{1,3}|iv|v|vi{0,3}|ix|x)\.\s(.*)$', re.IGNORECASE)

# Lines already rewritten by the structural pass; they end every open block.
BLOCK_BOUNDARIES = frozenset({
    LineKind.heading, LineKind.rule, LineKind.table, LineKind.definition_list,
    LineKind.block_literal,
})


@dataclass(frozen=True)
class ListItem:
    list_type: ListType
    html: str


@dataclass(frozen=True)
class _OpenList:
    list_type: ListType
    indent: int


class ListStack:
    """Open lists, innermost last; indent strictly increases going deeper."""

    def __init__(self) -> None:
        self._entries: list[_OpenList] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def top(self) -> Optional[_OpenList]:
        return self._entries[-1] if self._entries else None

    def push(self, list_type: ListType, indent: int) -> Line:
        self._entries.append(_OpenList(list_type, indent))
        return Line(LineKind.list_open, f'<{list_type.tag} class="list-{list_type.value}">')

    def pop(self) -> Line:
        entry = self._entries.pop()
        return Line(LineKind.list_close, f'</{entry.list_type.tag}>')

    def close_deeper(self, indent: int) -> list[Line]:
        """Close every list nested deeper than indent."""
        closed = []
        while self._entries and self._entries[-1].indent > indent:
            closed.append(self.pop())
        return closed

    def close_all(self) -> list[Line]:
        return [self.pop() for _ in range(len(self._entries))]

    def enter(self, list_type: ListType, indent: int) -> list[Line]:
        """Transition for a list item of list_type at indent."""
        out = self.close_deeper(indent)
        top = self.top
        if top is None or top.indent < indent:
            out.append(self.push(list_type, indent))
        elif top.list_type != list_type:
            out.append(self.pop())
            out.append(self.push(list_type, indent))
        return out


class QuoteStack:
    """Blockquote nesting; a pure depth counter."""

    def __init__(self) -> None:
        self._depth = 0

    def __len__(self) -> int:
        return self._depth

    def to_depth(self, depth: int) -> list[Line]:
        out = []
        while self._depth > depth:
            self._depth -= 1
            out.append(Line(LineKind.quote_close, '</blockquote>'))
        while self._depth < depth:
            self._depth += 1
            out.append(Line(LineKind.quote_open, '<blockquote>'))
        return out

    def close_all(self) -> list[Line]:
        return self.to_depth(0)


def classify_item(line: str) -> Optional[ListItem]:
    """Classify a left-trimmed line as a list item, or None.

    Precedence: task, unordered, emoji (only when unordered did not match),
    decimal, lower-alpha, upper-alpha, lower-roman.
    """
    if m := TASK_RE.match(line):
        checked = ' checked' if m.group(1).lower() == 'x' else ''
        return ListItem(ListType.task, (
            f'<li class="task-list-item"><input type="checkbox"{checked} disabled />'
            f'<span>{m.group(2)}</span></li>'
        ))
    if m := UNORDERED_RE.match(line):
        return ListItem(ListType.disc, f'<li>{m.group(1)}</li>')
    if (m := EMOJI_RE.match(line)) and is_bullet_glyph(m.group(1)):
        glyph = m.group(1)
        return ListItem(ListType.emoji, (
            f'<li data-emoji="{glyph}" class="emoji-list-item">'
            f'<span class="emoji-bullet">{glyph}</span> {m.group(2)}</li>'
        ))
    if m := DECIMAL_RE.match(line):
        return ListItem(ListType.decimal, f'<li data-number="{m.group(1)}">{m.group(2)}</li>')
    if m := LOWER_ALPHA_RE.match(line):
        return ListItem(ListType.lower_alpha, f'<li data-letter="{m.group(1)}">{m.group(2)}</li>')
    if m := UPPER_ALPHA_RE.match(line):
        return ListItem(ListType.upper_alpha, f'<li data-letter="{m.group(1)}">{m.group(2)}</li>')
    if m := ROMAN_RE.match(line):
        return ListItem(ListType.lower_roman, f'<li data-roman="{m.group(1)}">{m.group(2)}</li>')
    return None


def build_blocks(lines: list[Line]) -> list[Line]:
    """Open and close lists and blockquotes around the structural line stream.

    Blank lines close nothing, so loose lists and quotes may span them.
    Both stacks are empty on return.
    """
    lists, quotes = ListStack(), QuoteStack()
    out: list[Line] = []

    for line in lines:
        if line.kind in BLOCK_BOUNDARIES:
            out += lists.close_all() + quotes.close_all()
            out.append(line)
            continue
        if line.kind == LineKind.blank:
            out.append(line)
            continue

        if m := QUOTE_RE.match(line.text):
            out += lists.close_all()
            out += quotes.to_depth(m.group(1).count('>'))
            out.append(Line(LineKind.quote_text, m.group(2)))
            continue

        item = classify_item(line.text.lstrip())
        if item is not None:
            out += quotes.close_all()
            indent = len(INDENT_RE.match(line.text).group(1))
            out += lists.enter(item.list_type, indent)
            out.append(Line(LineKind.list_item, item.html))
            continue

        out += lists.close_all() + quotes.close_all()
        out.append(line)

    out += lists.close_all() + quotes.close_all()
    return out
