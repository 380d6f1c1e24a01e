"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from calclex.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"format": "json"}

    def test_auto_discover_calclex_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "calclex.toml"
        cfg.write_text("[output]\npositions = true\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"positions": True}

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "calclex.toml"
        cfg.write_text("[output\n")
        with pytest.raises(argparse.ArgumentTypeError, match="invalid config file"):
            load_config(None, tmp_path)


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        prog = tmp_path / "p.calc"
        prog.write_text("")
        opts = resolve_options(build_parser().parse_args([str(prog)]))
        assert opts.format == "text"
        assert opts.positions is False
        assert opts.debug is False

    def test_config_applied(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "json"\npositions = true\n')
        prog = tmp_path / "p.calc"
        prog.write_text("")
        opts = resolve_options(build_parser().parse_args([str(prog)]))
        assert opts.format == "json"
        assert opts.positions is True

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "json"\n')
        prog = tmp_path / "p.calc"
        prog.write_text("")
        opts = resolve_options(build_parser().parse_args([str(prog), "--format", "text"]))
        assert opts.format == "text"

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[output]\npositions = true\n")
        prog = tmp_path / "p.calc"
        prog.write_text("")
        opts = resolve_options(build_parser().parse_args([str(prog), "--config", str(cfg)]))
        assert opts.positions is True

    def test_non_bool_positions_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\npositions = "yes"\n')
        prog = tmp_path / "p.calc"
        prog.write_text("")
        opts = resolve_options(build_parser().parse_args([str(prog)]))
        assert opts.positions is False

    def test_invalid_format_in_config(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "xml"\n')
        prog = tmp_path / "p.calc"
        prog.write_text("")
        with pytest.raises(argparse.ArgumentTypeError, match="xml"):
            resolve_options(build_parser().parse_args([str(prog)]))


class TestConfigExitCodes:
    def test_invalid_format_returns_2(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "xml"\n')
        prog = tmp_path / "p.calc"
        prog.write_text("a")
        assert main([str(prog)]) == 2

    def test_broken_toml_returns_2(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text("not toml at all = = =\n")
        prog = tmp_path / "p.calc"
        prog.write_text("a")
        assert main([str(prog)]) == 2

    def test_config_format_used_end_to_end(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "json"\n')
        prog = tmp_path / "p.calc"
        prog.write_text("a")
        assert main([str(prog)]) == 0
        assert capsys.readouterr().out.lstrip().startswith("[")
