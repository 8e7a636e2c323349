from __future__ import annotations

from . import md_format
from .escape import escape
from .model import Bold, InlineElement, Italic, Link, Plain, Sequence


def render_inline(content: InlineElement) -> str:
    """Render an inline tree to a single Markdown string.

    Wrappers nest in construction order, so the outermost wrapper's markers
    enclose everything produced by the inner ones.
    """
    if isinstance(content, Plain):
        return escape(content.text)
    if isinstance(content, Bold):
        return md_format.BOLD_MARKER + render_inline(content.inner) + md_format.BOLD_MARKER
    if isinstance(content, Italic):
        return md_format.ITALIC_MARKER + render_inline(content.inner) + md_format.ITALIC_MARKER
    if isinstance(content, Link):
        return f"[{render_inline(content.inner)}]({escape(content.url)})"
    if isinstance(content, Sequence):
        return "".join(render_inline(part) for part in content.parts)
    raise TypeError(f"Unsupported inline element: {type(content).__name__}")
