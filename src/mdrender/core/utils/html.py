"""HTML escaping shared by the extract and restore phases"""

from markdown_it.common.utils import escapeHtml


def escape_html(text: str) -> str:
    """Escape &, <, >, double and single quotes."""
    return escapeHtml(text).replace("'", "&#039;")
