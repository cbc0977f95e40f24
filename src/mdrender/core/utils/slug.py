"""Slug generation for heading identifiers"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = re.sub(r'[^\w\s-]', '', text.lower()).strip()
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
