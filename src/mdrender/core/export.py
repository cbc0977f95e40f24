"""Standalone export: wrap rendered HTML in a full page styled from typography settings"""

from typing import Optional

from mdrender.core.models import Typography
from mdrender.core.utils.html import escape_html


def build_css(typography: Optional[Typography]) -> str:
    """Return CSS rules for the configured typography; empty when nothing is set."""
    if typography is None:
        return ""
    body = []
    if typography.font:
        body.append(f"font-family: {typography.font};")
    if typography.line_height:
        body.append(f"line-height: {typography.line_height};")
    if typography.body_size:
        body.append(f"font-size: {typography.body_size}px;")

    rules = [f"body {{ {' '.join(body)} }}"] if body else []
    for level in range(1, 7):
        size = getattr(typography, f"h{level}_size")
        if size:
            rules.append(f"h{level} {{ font-size: {size}px; }}")
    return "\n".join(rules)


def build_document(body: str, title: str, typography: Optional[Typography] = None) -> str:
    """Return an HTML5 page around body, with a <style> block only if typography yields rules."""
    css = build_css(typography)
    style = f"<style>\n{css}\n</style>\n" if css else ""
    return (
        "<!DOCTYPE html>\n"
        '<html>\n<head>\n<meta charset="utf-8">\n'
        f"<title>{escape_html(title)}</title>\n"
        f"{style}"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )
