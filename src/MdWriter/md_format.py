from __future__ import annotations

# Punctuation that is backslash-escaped in text and link destinations.
ESCAPE_CHARS = "\\`*_{}[]()#+-.!"

# Each nesting level consumes the width of an ordered marker.
INDENT_WIDTH = 3

ORDERED_MARKER = "1. "
BULLET_MARKER = "* "

HEADING_MARKER = "#"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

BOLD_MARKER = "**"
ITALIC_MARKER = "*"

ENCODING = "utf-8"
LINE_END = "\n"
OUTPUT_SUFFIX = ".md"
