from __future__ import annotations

import logging
from typing import Any, List

import yaml

from .model import (
    Block,
    Document,
    Heading,
    InlineElement,
    ListBlock,
    Paragraph,
    Plain,
    RawInline,
    Sequence,
)

logger = logging.getLogger(__name__)

_ORDERED_KEYS = ("ordered_list", "numbered_list")
_BULLET_KEYS = ("bullet_list", "unordered_list")


def parse_yaml_document(text: str) -> Document:
    """Parse a constrained YAML structure into an internal Document AST."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping with defined fields.")

    blocks: List[Block] = []

    body = data.get("body")
    if isinstance(body, list):
        blocks.extend(_parse_body_sequence(body))
        logger.debug("Parsed %d blocks from body sequence", len(blocks))
        return Document(blocks=blocks, metadata={"source": "yaml"})

    for key, value in data.items():
        if key in {"title", "heading"}:
            if value:
                blocks.append(Heading(level=1, content=_inline(value)))
        elif key == "subtitle":
            if value:
                blocks.append(Heading(level=2, content=_inline(value)))
        elif key in {"context", "paragraph"}:
            if value:
                blocks.extend(_paragraphs_from_text(str(value)))
        elif key in _ORDERED_KEYS:
            if value:
                blocks.append(_list_block(value, ordered=True))
        elif key in _BULLET_KEYS:
            if value:
                blocks.append(_list_block(value, ordered=False))

    return Document(blocks=blocks, metadata={"source": "yaml"})


def _parse_body_sequence(body: list) -> list[Block]:
    """Parse an ordered list of block descriptors."""
    blocks: list[Block] = []
    for entry in body:
        if isinstance(entry, str):
            blocks.extend(_paragraphs_from_text(entry))
            continue
        if not isinstance(entry, dict):
            continue
        if "heading" in entry:
            if entry["heading"]:
                blocks.append(Heading(level=int(entry.get("level", 1)), content=_inline(entry["heading"])))
        elif "paragraph" in entry:
            if entry["paragraph"]:
                blocks.append(Paragraph(fragments=_fragments(entry["paragraph"])))
        elif "raw" in entry:
            if entry["raw"]:
                blocks.append(RawInline(_inline(entry["raw"])))
        else:
            ordered = _list_kind(entry)
            if ordered is not None:
                key = _ORDERED_KEYS if ordered else _BULLET_KEYS
                value = next(entry[k] for k in key if k in entry)
                blocks.append(_list_block(value, ordered=ordered))
    return blocks


def _list_kind(entry: dict) -> bool | None:
    if any(k in entry for k in _ORDERED_KEYS):
        return True
    if any(k in entry for k in _BULLET_KEYS):
        return False
    return None


def _list_block(value: Any, ordered: bool) -> ListBlock:
    """Build a list from either a bare item sequence or a ``{title, items}`` mapping."""
    block = ListBlock(ordered=ordered)
    if isinstance(value, dict):
        if value.get("title"):
            block = block.with_title(_inline(value["title"]))
        items = value.get("items") or []
    else:
        items = value
    for item in _normalize_list(items):
        nested = _list_kind(item) if isinstance(item, dict) else None
        if nested is not None:
            key = _ORDERED_KEYS if nested else _BULLET_KEYS
            nested_value = next(item[k] for k in key if k in item)
            block = block.with_item(_list_block(nested_value, ordered=nested))
        else:
            block = block.with_item(_inline(item))
    return block


def _inline(value: Any) -> InlineElement:
    """Convert an inline descriptor (string, sequence or markup mapping) to inline nodes."""
    if value is None:
        raise ValueError("Inline value is empty")
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(_inline(part) for part in value))
    if isinstance(value, dict):
        if "link" in value:
            if "url" not in value:
                raise ValueError(f"Link descriptor needs a url: {value!r}")
            return _inline(value["link"]).link_to(str(value["url"]))
        if "bold" in value:
            return _inline(value["bold"]).bold()
        if "italic" in value:
            return _inline(value["italic"]).italic()
        raise ValueError(f"Unknown inline descriptor: {value!r}")
    return Plain(str(value))


def _fragments(value: Any) -> tuple[InlineElement, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(_inline(part) for part in value)
    return (_inline(value),)


def _paragraphs_from_text(text: str) -> list[Paragraph]:
    """Split text into paragraphs on blank lines.

    Surrounding whitespace is trimmed so a paragraph never starts an indented
    code block.
    """
    parts = [p for p in text.split("\n\n") if p.strip()]
    return [Plain(part.strip()).paragraph() for part in parts]


def _normalize_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
