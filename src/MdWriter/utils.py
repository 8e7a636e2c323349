from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from . import md_format

STDOUT = "-"


def configure_logging(verbose: bool = False) -> None:
    """Configure a console logger on stderr, leaving stdout free for Markdown."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str]) -> Path | None:
    """Pick the Markdown destination; ``None`` means stdout.

    A directory receives ``<input stem>.md``; no output writes next to the input.
    """
    if output == STDOUT:
        return None
    if output:
        out_path = Path(output).expanduser()
        if out_path.is_dir():
            out_path = out_path / f"{input_path.stem}{md_format.OUTPUT_SUFFIX}"
        return out_path
    return input_path.with_suffix(md_format.OUTPUT_SUFFIX)
