from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Protocol, Union

from . import md_format
from .model import Block, Document, InlineElement, RawInline, Spacing, as_inline
from .renderer_markdown import render_block

logger = logging.getLogger(__name__)

Renderable = Union[str, InlineElement, Block]


class ByteSink(Protocol):
    def write(self, data: bytes) -> int | None:
        ...


class WriterReleasedError(RuntimeError):
    """Raised when a writer is used after its sink was handed back."""


def as_block(renderable: Renderable) -> Block:
    if isinstance(renderable, Block):
        return renderable
    if isinstance(renderable, (str, InlineElement)):
        return RawInline(as_inline(renderable))
    raise TypeError(f"Cannot write {type(renderable).__name__} as Markdown")


def _write_fully(sink: ByteSink, data: bytes) -> None:
    """Keep writing until the sink has taken every byte.

    Raw sinks may accept only part of a buffer. A sink that takes nothing
    (``None`` from a non-blocking stream, or ``0``) raises ``BlockingIOError``
    carrying the number of bytes already written.
    """
    view = memoryview(data)
    written = 0
    while written < len(data):
        count = sink.write(view[written:])
        if not count:
            raise BlockingIOError(0, "Sink accepted no bytes", written)
        written += count


class MarkdownWriter:
    """Streams blocks as Markdown into a byte sink.

    Loose blocks (paragraphs, lists) get one blank line in front of them
    unless they are the first thing written; tight blocks (headings, raw
    inline lines) never do. Each block is rendered, written and flushed
    before ``write`` returns. Errors raised by the sink propagate unchanged,
    and the writer only records a block once the sink has accepted it.

    Example:
        writer = MarkdownWriter(io.BytesIO())
        writer.write(text("Heading").heading(1))
        writer.write(text("Body text").paragraph())
        data = writer.into_inner().getvalue()
    """

    def __init__(self, sink: ByteSink) -> None:
        self._sink: ByteSink | None = sink
        self._last_spacing: Spacing | None = None
        self.blocks_written = 0

    def write(self, renderable: Renderable) -> None:
        sink = self._require_sink()
        block = as_block(renderable)
        lines = render_block(block)
        payload = "".join(line + md_format.LINE_END for line in lines)
        if self._last_spacing is not None and block.spacing is Spacing.LOOSE:
            payload = md_format.LINE_END + payload

        if payload:
            _write_fully(sink, payload.encode(md_format.ENCODING))
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()
        logger.debug("Wrote %s block (%d lines)", type(block).__name__, len(lines))

        self._last_spacing = block.spacing
        self.blocks_written += 1

    def write_all(self, renderables: Iterable[Renderable]) -> None:
        for renderable in renderables:
            self.write(renderable)

    def into_inner(self) -> ByteSink:
        """Hand the sink back to the caller; the writer cannot be used afterwards."""
        sink = self._require_sink()
        self._sink = None
        return sink

    def _require_sink(self) -> ByteSink:
        if self._sink is None:
            raise WriterReleasedError("Markdown writer has already released its sink")
        return self._sink


def render_markdown(renderables: Iterable[Renderable]) -> str:
    """Render blocks into a Markdown string using an in-memory sink."""
    writer = MarkdownWriter(io.BytesIO())
    writer.write_all(renderables)
    buffer = writer.into_inner()
    return buffer.getvalue().decode(md_format.ENCODING)


def render_document(doc: Document, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as handle:
        writer = MarkdownWriter(handle)
        writer.write_all(doc.blocks)
        writer.into_inner()
    logger.debug("Saved %d blocks to %s", writer.blocks_written, output_path)
    return output_path
