"""Unit tests for the kiianigen command line."""

from __future__ import annotations

import json

import pytest

from kiianigen.cli.main import build_arg_parser, main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the CLI from an empty directory with a seeded app config."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "kiianigen.json").write_text(
        json.dumps({"output_dir": "json_out", "random_seed": 1}), encoding="utf-8"
    )
    return tmp_path


def test_parser_defaults() -> None:
    """Both positionals are optional."""
    args = build_arg_parser().parse_args([])
    assert args.generator == ""
    assert args.source_dir is None


def test_unknown_generator_lists_catalog(workdir, capsys) -> None:
    """An unknown name prints the catalog and exits cleanly."""
    assert main(["nope"]) == 0
    out = capsys.readouterr().out
    assert "Unknown generator" in out
    assert "kitt2000" in out
    assert "colorBreathe" in out
    assert not (workdir / "json_out").exists()


def test_generates_file(workdir, source_dir, capsys) -> None:
    """A known generator writes one timestamped configuration."""
    assert main(["kitt2000", str(source_dir)]) == 0
    out = capsys.readouterr().out
    assert "Animations are mapped to the following keys:" in out
    assert "Q: kitt2000" in out
    assert "New config json has been saved to file:" in out
    written = list((workdir / "json_out").glob("KType-*-kitt2000.json"))
    assert len(written) == 1


def test_missing_source_fails(workdir, capsys) -> None:
    """A missing configurator dump is reported with exit code 1."""
    assert main(["kitt2000", str(workdir / "missing")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_invalid_app_config(workdir, capsys) -> None:
    """A malformed app config is reported with exit code 1."""
    (workdir / "kiianigen.json").write_text("{", encoding="utf-8")
    assert main(["kitt2000"]) == 1
    assert "Could not load config" in capsys.readouterr().out
