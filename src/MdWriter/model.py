from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, List, Tuple, Union

from . import md_format


class InvalidHeadingLevel(ValueError):
    """Raised when a heading level falls outside 1..6."""

    def __init__(self, level: int) -> None:
        super().__init__(
            f"Heading level must be between {md_format.MIN_HEADING_LEVEL} "
            f"and {md_format.MAX_HEADING_LEVEL}, got {level}"
        )
        self.level = level


class Spacing(enum.Enum):
    """Blank-line behaviour of a top-level block."""

    TIGHT = "tight"
    LOOSE = "loose"


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes.

    Every builder method returns a new node; existing nodes are never changed.
    """

    def bold(self) -> Bold:
        return Bold(self)

    def italic(self) -> Italic:
        return Italic(self)

    def link_to(self, url: str) -> Link:
        return Link(self, url)

    def append(self, other: str | InlineElement) -> Sequence:
        return Sequence(_parts_of(self) + _parts_of(as_inline(other)))

    def heading(self, level: int = 1) -> Heading:
        return Heading(level=level, content=self)

    def paragraph(self) -> Paragraph:
        return Paragraph(fragments=(self,))


@dataclass(frozen=True)
class Plain(InlineElement):
    text: str


@dataclass(frozen=True)
class Bold(InlineElement):
    inner: InlineElement


@dataclass(frozen=True)
class Italic(InlineElement):
    inner: InlineElement


@dataclass(frozen=True)
class Link(InlineElement):
    inner: InlineElement
    url: str


@dataclass(frozen=True)
class Sequence(InlineElement):
    parts: Tuple[InlineElement, ...] = ()


def text(value: str) -> Plain:
    return Plain(value)


def as_inline(value: str | InlineElement) -> InlineElement:
    if isinstance(value, InlineElement):
        return value
    if isinstance(value, str):
        return Plain(value)
    raise TypeError(f"Cannot use {type(value).__name__} as inline content")


def _parts_of(element: InlineElement) -> Tuple[InlineElement, ...]:
    if isinstance(element, Sequence):
        return element.parts
    return (element,)


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""

    spacing: ClassVar[Spacing] = Spacing.TIGHT


@dataclass(frozen=True)
class Heading(Block):
    level: int
    content: InlineElement

    def __post_init__(self) -> None:
        if not md_format.MIN_HEADING_LEVEL <= self.level <= md_format.MAX_HEADING_LEVEL:
            raise InvalidHeadingLevel(self.level)

    def append(self, other: str | InlineElement) -> Heading:
        return replace(self, content=self.content.append(other))


@dataclass(frozen=True)
class Paragraph(Block):
    spacing: ClassVar[Spacing] = Spacing.LOOSE

    fragments: Tuple[InlineElement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fragments", tuple(as_inline(f) for f in self.fragments))

    def append(self, other: str | InlineElement) -> Paragraph:
        return replace(self, fragments=self.fragments + (as_inline(other),))


@dataclass(frozen=True)
class RawInline(Block):
    """Inline content written directly as its own line."""

    content: InlineElement


ListItem = Union[InlineElement, "ListBlock"]


@dataclass(frozen=True)
class ListBlock(Block):
    spacing: ClassVar[Spacing] = Spacing.LOOSE

    ordered: bool = False
    title: InlineElement | None = None
    items: Tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        # Strings become Plain; anything else that is not inline or a list is rejected here.
        if self.title is not None:
            object.__setattr__(self, "title", as_inline(self.title))
        object.__setattr__(self, "items", tuple(_as_item(item) for item in self.items))

    def with_title(self, title: str | InlineElement) -> ListBlock:
        return replace(self, title=as_inline(title))

    def with_item(self, item: str | InlineElement | ListBlock) -> ListBlock:
        return replace(self, items=self.items + (_as_item(item),))


def _as_item(item: str | InlineElement | ListBlock) -> ListItem:
    if isinstance(item, ListBlock):
        return item
    return as_inline(item)


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
