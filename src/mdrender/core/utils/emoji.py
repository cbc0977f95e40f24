"""Emoji shortcode substitution and emoji-bullet detection"""

import re
from types import MappingProxyType

import emoji


SHORTCODES = MappingProxyType({
    ':smile:': '😊', ':heart:': '❤️', ':thumbsup:': '👍', ':fire:': '🔥',
    ':rocket:': '🚀', ':star:': '⭐', ':check:': '✅', ':cross:': '❌',
    ':warning:': '⚠️', ':info:': 'ℹ️', ':book:': '📖', ':bulb:': '💡',
    ':pencil:': '✏️', ':clipboard:': '📋', ':folder:': '📁', ':lock:': '🔒',
    ':unlock:': '🔓', ':key:': '🔑', ':hammer:': '🔨', ':wrench:': '🔧',
    ':gear:': '⚙️', ':chart:': '📊', ':mag:': '🔍', ':bell:': '🔔',
    ':email:': '📧', ':phone:': '📞', ':calendar:': '📅', ':clock:': '🕐',
    ':hourglass:': '⏳', ':checkmark:': '✓', ':cool:': '😎', ':tada:': '🎉',
})

SHORTCODE_RE = re.compile(r':(\w+):')
VARIATION_SELECTOR = '\ufe0f'


def replace_shortcodes(text: str) -> str:
    """Swap known :name: shortcodes for glyphs; unknown ones pass through."""
    return SHORTCODE_RE.sub(lambda m: SHORTCODES.get(m.group(0), m.group(0)), text)


def is_bullet_glyph(token: str) -> bool:
    """True if token is exactly one emoji, optionally followed by a variation selector."""
    if not token:
        return False
    if emoji.is_emoji(token):
        return True
    return token.endswith(VARIATION_SELECTOR) and emoji.is_emoji(token[:-1])
