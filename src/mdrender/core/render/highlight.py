"""Source-code highlighting via Pygments"""

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


_FORMATTER = HtmlFormatter(nowrap=True)


class HighlightError(Exception):
    """No highlighter is available for the requested language."""


def highlight(code: str, language: str) -> str:
    """Return token-span HTML for code (no wrapping element)."""
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound as e:
        raise HighlightError(f"Unknown language: {language}") from e
    return pygments_highlight(code, lexer, _FORMATTER).rstrip('\n')
