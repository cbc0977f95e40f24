"""Literal extraction: protect code, math and escapes behind sentinel tokens"""

import re
from typing import Callable

from mdrender.core.models import Literal, LiteralKind, Literals
from mdrender.core.utils.emoji import replace_shortcodes


# Private-use code points; stripped from input so sentinels never collide with content.
SENTINEL_OPEN = '\ue000'
SENTINEL_CLOSE = '\ue001'
SENTINEL_RE = re.compile(r'\ue000(CB|IC|DM|IM|ES)(\d+)\ue001')

FENCE_RE = re.compile(r'```(.*?)```', re.DOTALL)
INLINE_CODE_RE = re.compile(r'`([^`\n]+?)`')
COMMENT_RE = re.compile(r'<!--.*?-->', re.DOTALL)
DISPLAY_MATH_RE = re.compile(r'\$\$(.+?)\$\$', re.DOTALL)
INLINE_MATH_RE = re.compile(r'\$([^$\n]+?)\$')
ESCAPE_RE = re.compile(r'\\([\\`*_{}\[\]()#+\-.!|~])')

MAX_LANGUAGE_LEN = 20


def sentinel(kind: LiteralKind, index: int) -> str:
    return f"{SENTINEL_OPEN}{kind.value}{index}{SENTINEL_CLOSE}"


def _store(literals: Literals, kind: LiteralKind, content: str, language: str = '') -> str:
    table = literals.table(kind)
    token = sentinel(kind, len(table))
    table[token] = Literal(kind=kind, content=content, language=language)
    return token


def _split_language(body: str) -> tuple[str, str]:
    """Return (language, code); a short whitespace-free first line is a language tag."""
    language = ''
    newline = body.find('\n')
    if newline > -1:
        first = body[:newline].strip()
        if first and len(first) < MAX_LANGUAGE_LEN and not re.search(r'\s', first):
            language, body = first, body[newline + 1:]
    return language, re.sub(r'^\n+|\n+$', '', body)


def extract_literals(text: str) -> tuple[str, Literals]:
    """Replace protected regions with sentinels. Returns (text, placeholder tables).

    Code is extracted before math so a `$` inside code is never a delimiter;
    display math before inline math since `$...$` also matches `$$...$$`.
    """
    literals = Literals()
    text = text.replace(SENTINEL_OPEN, '').replace(SENTINEL_CLOSE, '')

    def _fence(m: re.Match) -> str:
        language, code = _split_language(m.group(1))
        return _store(literals, LiteralKind.code_block, code, language)

    text = FENCE_RE.sub(_fence, text)
    text = INLINE_CODE_RE.sub(lambda m: _store(literals, LiteralKind.inline_code, m.group(1)), text)
    text = COMMENT_RE.sub('', text)
    text = DISPLAY_MATH_RE.sub(lambda m: _store(literals, LiteralKind.display_math, m.group(1)), text)
    text = INLINE_MATH_RE.sub(lambda m: _store(literals, LiteralKind.inline_math, m.group(1).strip()), text)
    text = ESCAPE_RE.sub(lambda m: _store(literals, LiteralKind.escape, m.group(1)), text)
    return replace_shortcodes(text), literals


def substitute(text: str, literals: Literals, kind: LiteralKind, render: Callable[[Literal], str]) -> str:
    """Replace every sentinel of one kind with render(literal)."""
    table = literals.table(kind)
    if not table:
        return text

    def _replace(m: re.Match) -> str:
        found = table.get(m.group(0))
        return render(found) if found is not None else m.group(0)

    return SENTINEL_RE.sub(_replace, text)


def plain_text(text: str, literals: Literals) -> str:
    """Resolve every sentinel back to its raw source content."""
    def _replace(m: re.Match) -> str:
        found = literals.table(LiteralKind(m.group(1))).get(m.group(0))
        return found.content if found is not None else ''

    return SENTINEL_RE.sub(_replace, text)
