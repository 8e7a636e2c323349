from pathlib import Path

import pytest

from MdWriter.cli import main
from MdWriter.utils import resolve_output_path

YAML_TEXT = "title: Report\ncontext: Done.\nbullet_list:\n  - one\n  - two\n"
EXPECTED = "# Report\n\nDone\\.\n\n   * one\n   * two\n"


def _write_input(tmp_path: Path) -> Path:
    path = tmp_path / "report.yaml"
    path.write_text(YAML_TEXT, encoding="utf-8")
    return path


def test_cli_writes_next_to_input(tmp_path: Path):
    main([str(_write_input(tmp_path))])
    assert (tmp_path / "report.md").read_text(encoding="utf-8") == EXPECTED


def test_cli_output_directory(tmp_path: Path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    main([str(_write_input(tmp_path)), "-o", str(out_dir), "--verbose"])
    assert (out_dir / "report.md").read_text(encoding="utf-8") == EXPECTED


def test_cli_stdout(tmp_path: Path, capsys):
    main([str(_write_input(tmp_path)), "-o", "-"])
    assert capsys.readouterr().out == EXPECTED


def test_cli_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.yaml")])


def test_resolve_output_path(tmp_path: Path):
    source = tmp_path / "notes.yaml"
    assert resolve_output_path(source, None) == tmp_path / "notes.md"
    assert resolve_output_path(source, "-") is None
    assert resolve_output_path(source, str(tmp_path)) == tmp_path / "notes.md"
    assert resolve_output_path(source, str(tmp_path / "x.md")) == tmp_path / "x.md"
