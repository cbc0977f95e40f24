"""Placeholder restoration: code, inline code, math, escapes, then footnotes and cleanup"""

import logging
import re
from dataclasses import replace

from mdrender.core.extract.literals import SENTINEL_CLOSE, SENTINEL_OPEN, plain_text, substitute
from mdrender.core.inline import rewrite_spans
from mdrender.core.models import FootnoteRegistry, Literal, LiteralKind, Literals, ParseOptions
from mdrender.core.render.highlight import HighlightError, highlight
from mdrender.core.render.typeset import MathRenderError, render_math
from mdrender.core.utils.html import escape_html


logger = logging.getLogger(__name__)

MISSING_FOOTNOTE = "Missing footnote content"

CODE_PARAGRAPH_RE = re.compile(
    f'<p>({SENTINEL_OPEN}{LiteralKind.code_block.value}\\d+{SENTINEL_CLOSE})</p>'
)
DISPLAY_MATH_PARAGRAPH_RE = re.compile(
    r'<p>(<div class="math-display[^"]*"[^>]*>(?:(?!</div>).)*</div>)</p>', re.DOTALL
)
EMPTY_PARAGRAPH_RE = re.compile(r'<p>\s*</p>')


def render_code_block(literal: Literal, enable_highlight: bool) -> str:
    """Render a fenced block; highlighting failures fall back to escaped text."""
    code = escape_html(literal.content)
    if enable_highlight and literal.language:
        try:
            code = highlight(literal.content, literal.language)
        except HighlightError as e:
            logger.debug("Highlight fallback: %s", e)
    language = escape_html(literal.language)
    language_class = f"language-{language}" if language else ""
    return (
        f'<pre><div class="code-header"><span class="code-language">{language or "code"}</span></div>'
        f'<code class="{language_class}">{code}</code></pre>'
    )


def render_math_literal(literal: Literal, options: ParseOptions) -> str:
    """Typeset a math literal, or emit a data-carrying placeholder when math is off."""
    display = literal.kind == LiteralKind.display_math
    tag, css, delim = ('div', 'math-display', '$$') if display else ('span', 'math-inline', '$')
    source = escape_html(literal.content)

    if not options.enable_math:
        return f'<{tag} class="{css}" data-math="{source}">{delim}{source}{delim}</{tag}>'
    try:
        rendered = render_math(literal.content, display, options.enable_chemistry)
    except MathRenderError as e:
        logger.debug("Math fallback for %r: %s", literal.content, e)
        return (
            f'<{tag} class="{css} math-error" title="Math error: {escape_html(str(e))}">'
            f'{delim}{source}{delim}</{tag}>'
        )
    return f'<{tag} class="{css}">{rendered}</{tag}>'


def render_footnotes(footnotes: FootnoteRegistry) -> str:
    """Footnotes section in first-referenced order, each entry linking back."""
    items = ''.join(
        f'<li id="fn-{note_id}">{rewrite_spans(footnotes.definitions.get(note_id, MISSING_FOOTNOTE))} '
        f'<a href="#fnref-{note_id}" class="footnote-backref">↩</a></li>'
        for note_id in footnotes.referenced
    )
    return f'<hr><div class="footnotes"><ol>{items}</ol></div>'


def restore(html: str, literals: Literals, footnotes: FootnoteRegistry, options: ParseOptions) -> str:
    """Resolve sentinels in reverse extraction order and finish the document.

    The footnotes section is appended first so sentinels inside definitions
    are resolved along with the body.
    """
    if footnotes.referenced:
        html = f'{html}\n{render_footnotes(footnotes)}' if html else render_footnotes(footnotes)

    html = CODE_PARAGRAPH_RE.sub(r'\1', html)
    html = substitute(html, literals, LiteralKind.code_block,
                      lambda lit: render_code_block(lit, options.enable_highlight))
    html = substitute(html, literals, LiteralKind.inline_code,
                      lambda lit: f'<code>{escape_html(lit.content)}</code>')
    def _math(lit: Literal) -> str:
        # Inline code is extracted first, so a formula may still hold its sentinels.
        return render_math_literal(replace(lit, content=plain_text(lit.content, literals)), options)

    for kind in (LiteralKind.display_math, LiteralKind.inline_math):
        html = substitute(html, literals, kind, _math)
    html = substitute(html, literals, LiteralKind.escape, lambda lit: lit.content)

    html = DISPLAY_MATH_PARAGRAPH_RE.sub(r'\1', html)
    return EMPTY_PARAGRAPH_RE.sub('', html)
