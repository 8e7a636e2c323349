from __future__ import annotations

from . import md_format
from .inline import render_inline
from .model import Block, Heading, ListBlock, Paragraph, RawInline, Sequence


def render_block(block: Block) -> list[str]:
    """Render one block into its Markdown lines, without line terminators."""
    if isinstance(block, Heading):
        return [_render_heading(block)]
    if isinstance(block, Paragraph):
        return [render_inline(Sequence(block.fragments))]
    if isinstance(block, RawInline):
        return [render_inline(block.content)]
    if isinstance(block, ListBlock):
        return render_list(block)
    raise TypeError(f"Unsupported block: {type(block).__name__}")


def _render_heading(heading: Heading) -> str:
    return md_format.HEADING_MARKER * heading.level + " " + render_inline(heading.content)


def render_list(block: ListBlock, depth: int = 0) -> list[str]:
    """Render a list and its nested lists.

    The title is only emitted for the outermost list; a nested list's title is
    the label line of the item that holds it.
    """
    if depth < 0:
        raise ValueError(f"List depth must be non-negative, got {depth}")
    lines: list[str] = []
    if depth == 0 and block.title is not None:
        lines.append(render_inline(block.title))

    indent = " " * (md_format.INDENT_WIDTH * (depth + 1))
    marker = md_format.ORDERED_MARKER if block.ordered else md_format.BULLET_MARKER
    for item in block.items:
        if isinstance(item, ListBlock):
            label = render_inline(item.title) if item.title is not None else ""
            lines.append(indent + marker + label)
            lines.extend(render_list(item, depth + 1))
        else:
            lines.append(indent + marker + render_inline(item))
    return lines
