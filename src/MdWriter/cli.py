from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import md_format, yaml_parser
from .utils import configure_logging, resolve_output_path
from .writer import MarkdownWriter, render_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="MdWriter",
        description="Render a YAML document description into Markdown.",
    )
    parser.add_argument("input", type=str, help="Path to YAML file")
    parser.add_argument("-o", "--output", type=str, help="Output Markdown path, or '-' for stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    logging.info("Reading %s", input_path)
    yaml_text = input_path.read_text(encoding=md_format.ENCODING)
    logging.debug("YAML length: %d chars", len(yaml_text))

    logging.info("Parsing YAML...")
    document = yaml_parser.parse_yaml_document(yaml_text)

    output_path = resolve_output_path(input_path, args.output)
    if output_path is None:
        logging.info("Rendering Markdown to stdout")
        writer = MarkdownWriter(sys.stdout.buffer)
        writer.write_all(document.blocks)
        writer.into_inner()
        return

    logging.info("Rendering Markdown to %s", output_path)
    render_document(document, output_path=output_path)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
