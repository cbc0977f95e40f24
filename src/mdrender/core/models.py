"""Intermediate data models for the render pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Typography(BaseModel):
    """Presentation hints carried on the option surface; used for standalone pages."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    font:        Optional[str] = None
    line_height: Optional[float] = Field(default=None, gt=0)
    body_size:   Optional[int] = Field(default=None, gt=0, description="Base font size in pixels")
    h1_size:     Optional[int] = Field(default=None, gt=0)
    h2_size:     Optional[int] = Field(default=None, gt=0)
    h3_size:     Optional[int] = Field(default=None, gt=0)
    h4_size:     Optional[int] = Field(default=None, gt=0)
    h5_size:     Optional[int] = Field(default=None, gt=0)
    h6_size:     Optional[int] = Field(default=None, gt=0)


class ParseOptions(BaseModel):
    """Public option surface for parse(); accepts snake_case or camelCase keys."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    enable_math:      bool = True
    enable_chemistry: bool = Field(default=True, description="Trust chemistry commands in math")
    enable_highlight: bool = True
    typography:       Optional[Typography] = None


class LiteralKind(str, Enum):
    """Protected literal categories; value doubles as the sentinel tag."""
    code_block = "CB"
    inline_code = "IC"
    display_math = "DM"
    inline_math = "IM"
    escape = "ES"


class LineKind(str, Enum):
    """Line categories flowing through the structural, block and paragraph phases."""
    text = "text"
    blank = "blank"
    heading = "heading"
    rule = "rule"
    table = "table"
    definition_list = "definition_list"
    block_literal = "block_literal"
    list_open = "list_open"
    list_close = "list_close"
    list_item = "list_item"
    quote_open = "quote_open"
    quote_close = "quote_close"
    quote_text = "quote_text"


# Lines a paragraph may be built from; everything else except blank is structural.
PROSE_KINDS = frozenset({LineKind.text, LineKind.quote_text})


class ListType(str, Enum):
    disc = "disc"
    task = "task"
    emoji = "emoji"
    decimal = "decimal"
    lower_alpha = "lower-alpha"
    upper_alpha = "upper-alpha"
    lower_roman = "lower-roman"

    @property
    def tag(self) -> str:
        return "ul" if self in (ListType.disc, ListType.task, ListType.emoji) else "ol"


@dataclass(frozen=True)
class Line:
    kind: LineKind
    text: str = ""


@dataclass(frozen=True)
class Literal:
    """A protected region: raw content plus kind-specific metadata."""
    kind:     LiteralKind
    content:  str
    language: str = ""     # fenced code only


@dataclass
class Literals:
    """Placeholder tables for one parse call, keyed by sentinel token."""
    tables: dict[LiteralKind, dict[str, Literal]] = field(
        default_factory=lambda: {kind: {} for kind in LiteralKind}
    )

    def table(self, kind: LiteralKind) -> dict[str, Literal]:
        return self.tables[kind]


@dataclass
class FootnoteRegistry:
    """Footnote definitions by id plus referenced ids in first-seen order."""
    definitions: dict[str, str] = field(default_factory=dict)
    referenced:  list[str] = field(default_factory=list)

    def reference(self, note_id: str) -> int:
        """Record a reference and return its 1-based display number."""
        if note_id not in self.referenced:
            self.referenced.append(note_id)
        return self.referenced.index(note_id) + 1


@dataclass
class SlugRegistry:
    """Base slug -> occurrence count; guarantees unique heading ids."""
    counts: dict[str, int] = field(default_factory=dict)

    def claim(self, slug: str) -> str:
        if not slug:
            slug = f"heading-{len(self.counts) + 1}"
        if slug in self.counts:
            self.counts[slug] += 1
            return f"{slug}-{self.counts[slug]}"
        self.counts[slug] = 1
        return slug
