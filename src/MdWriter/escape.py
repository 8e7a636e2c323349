"""Markdown escaping for raw text and link destinations."""

from __future__ import annotations

import re

from . import md_format

_ESCAPE_RE = re.compile("([" + re.escape(md_format.ESCAPE_CHARS) + "])")


def escape(raw: str) -> str:
    """Backslash-escape every reserved punctuation character in ``raw``.

    Text that already contains escapes is not special-cased, so calling this
    twice escapes the inserted backslashes again.
    """
    return _ESCAPE_RE.sub(r"\\\1", raw)
