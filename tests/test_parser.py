import textwrap

import pytest

from MdWriter import yaml_parser
from MdWriter.model import Heading, InvalidHeadingLevel, ListBlock, Paragraph, Plain, RawInline
from MdWriter.writer import render_markdown


def test_parse_yaml_structure():
    yaml_text = textwrap.dedent(
        """
        title: "Heading"
        subtitle: "Section"
        context: |
          First paragraph.

          Second paragraph.
        ordered_list:
          title: numbered list
          items:
            - item 1
            - bold: bold
            - bullet_list:
                title: nested bullet list
                items:
                  - [{bold: bold}, {italic: italic}]
        """
    )
    document = yaml_parser.parse_yaml_document(yaml_text)
    assert document.metadata == {"source": "yaml"}
    assert isinstance(document.blocks[0], Heading) and document.blocks[0].level == 1
    assert isinstance(document.blocks[1], Heading) and document.blocks[1].level == 2
    assert isinstance(document.blocks[2], Paragraph)
    assert document.blocks[2].fragments == (Plain("First paragraph."),)
    assert isinstance(document.blocks[3], Paragraph)
    assert isinstance(document.blocks[4], ListBlock) and document.blocks[4].ordered
    assert isinstance(document.blocks[4].items[2], ListBlock)
    assert not document.blocks[4].items[2].ordered

    assert render_markdown(document.blocks) == (
        "# Heading\n"
        "## Section\n"
        "\n"
        "First paragraph\\.\n"
        "\n"
        "Second paragraph\\.\n"
        "\n"
        "numbered list\n"
        "   1. item 1\n"
        "   1. **bold**\n"
        "   1. nested bullet list\n"
        "      * **bold***italic*\n"
    )


def test_parse_body_sequence():
    yaml_text = textwrap.dedent(
        """
        body:
          - heading: Links
            level: 2
          - paragraph:
              - "Links: "
              - link: {bold: Rust}
                url: https://rust-lang.org
          - raw: plain line
          - Some text
          - bullet_list: [a, b]
        """
    )
    document = yaml_parser.parse_yaml_document(yaml_text)
    assert [type(block) for block in document.blocks] == [Heading, Paragraph, RawInline, Paragraph, ListBlock]
    assert render_markdown(document.blocks) == (
        "## Links\n"
        "\n"
        "Links: [**Rust**](https://rust\\-lang\\.org)\n"
        "plain line\n"
        "\n"
        "Some text\n"
        "\n"
        "   * a\n"
        "   * b\n"
    )


def test_invalid_heading_level_is_rejected():
    with pytest.raises(InvalidHeadingLevel):
        yaml_parser.parse_yaml_document("body:\n  - heading: Too deep\n    level: 9\n")


def test_root_must_be_mapping():
    with pytest.raises(ValueError):
        yaml_parser.parse_yaml_document("- just\n- a list\n")


@pytest.mark.parametrize(
    "descriptor",
    ["{underline: x}", "{link: x}"],
)
def test_bad_inline_descriptor(descriptor):
    with pytest.raises(ValueError):
        yaml_parser.parse_yaml_document(f"body:\n  - raw: {descriptor}\n")


def test_empty_yaml_gives_empty_document():
    assert yaml_parser.parse_yaml_document("").blocks == []


def test_empty_body_entries_are_skipped():
    document = yaml_parser.parse_yaml_document("body:\n  - heading:\n  - paragraph:\n  - raw: ''\n  - Kept\n")
    assert render_markdown(document.blocks) == "Kept\n"


def test_empty_list_item_is_rejected():
    with pytest.raises(ValueError):
        yaml_parser.parse_yaml_document("bullet_list:\n  - a\n  -\n")


def test_paragraph_whitespace_is_trimmed():
    document = yaml_parser.parse_yaml_document('context: "    indented\\n\\n  second  "\n')
    assert render_markdown(document.blocks) == "indented\n\nsecond\n"
