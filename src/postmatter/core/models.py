"""Document, block, and diagnostic models for parsed posts"""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from postmatter.core.utils.dates import parse_date


class BlockKind(str, Enum):
    """Restrict body blocks to the segment types a post is split into"""
    prose = "prose"
    heading = "heading"
    code = "code"


class FenceStyle(str, Enum):
    """Marker family that opened a code block"""
    liquid = "liquid"       # {% highlight lang %} ... {% endhighlight %}
    backtick = "backtick"   # ```lang ... ```
    tilde = "tilde"         # ~~~lang ... ~~~


class WarningCode(str, Enum):
    duplicate_key = "duplicate_key"
    unclosed_fence = "unclosed_fence"
    stray_fence_close = "stray_fence_close"
    unknown_key = "unknown_key"
    missing_recommended = "missing_recommended"
    empty_value = "empty_value"
    empty_body = "empty_body"


class FrontMatterEntry(BaseModel):
    """A single key: value line of the header, duplicates included."""
    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    line: int                           # 1-based line in the source file


class Block(BaseModel):
    """A single typed segment of a post body."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    content: str                        # raw source, fence marker lines included
    line: int                           # 1-based line in the source file
    level: Optional[int] = None         # heading level (1-6); None for non-headings
    lang: Optional[str] = None          # code blocks only
    fence: Optional[FenceStyle] = None  # code blocks only
    closed: bool = True                 # False when the closing marker is missing

    @property
    def code(self) -> str:
        """Text between the fence markers; content unchanged for non-code blocks."""
        if self.kind != BlockKind.code:
            return self.content
        lines = self.content.split('\n')
        inner = lines[1:-1] if self.closed else lines[1:]
        return '\n'.join(inner)


class Document(BaseModel):
    """Parsed post: flat front matter plus an ordered body of opaque blocks."""
    model_config = ConfigDict(frozen=True)

    path: Optional[str] = None
    front_matter: Mapping[str, str]    # read-only view; last value wins on duplicate keys
    entries: tuple[FrontMatterEntry, ...] = ()
    body: tuple[Block, ...] = ()
    body_text: str = ""
    body_line: int = 1

    @field_validator("front_matter", mode="after")
    @classmethod
    def _freeze_front_matter(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("front_matter")
    def _dump_front_matter(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def title(self) -> Optional[str]:
        return self.front_matter.get('title')

    @property
    def layout(self) -> Optional[str]:
        return self.front_matter.get('layout')

    @property
    def date(self) -> Optional[datetime]:
        value = self.front_matter.get('date')
        return parse_date(value) if value else None

    @property
    def categories(self) -> list[str]:
        return self.front_matter.get('categories', '').split()

    @property
    def code_blocks(self) -> list[Block]:
        return [b for b in self.body if b.kind == BlockKind.code]

    def headings(self, level: Optional[int] = None) -> list[Block]:
        """Return heading blocks, optionally only those at the given level."""
        return [
            b for b in self.body
            if b.kind == BlockKind.heading and (level is None or b.level == level)
        ]

    @property
    def top_level_headings(self) -> list[Block]:
        """Headings at the shallowest level present in the body."""
        levels = [b.level for b in self.headings()]
        return self.headings(min(levels)) if levels else []


class DocumentWarning(BaseModel):
    """Non-fatal diagnostic reported by validate()."""
    model_config = ConfigDict(frozen=True)

    code: WarningCode
    message: str
    path: Optional[str] = None
    line: Optional[int] = None

    def __str__(self) -> str:
        where = f"{self.path or '<string>'}:{self.line or 0}"
        return f"{where}: warning [{self.code.value}] {self.message}"
