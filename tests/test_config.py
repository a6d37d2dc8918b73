"""Tests for configuration loading."""

import textwrap
from pathlib import Path

import pytest

from rfc4291.config import Config, OutputConfig, load_config


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path):
        config_file = tmp_path / "rfc4291.toml"
        config_file.write_text(textwrap.dedent("""\
            [output]
            format = "exploded"

            [input]
            strip = false
        """))
        config = load_config(config_file)

        assert config.output.format == "exploded"
        assert config.input.strip is False

    def test_empty_config_uses_defaults(self, tmp_path: Path):
        config_file = tmp_path / "rfc4291.toml"
        config_file.write_text("")
        config = load_config(config_file)

        assert config == Config()
        assert config.output.format == "compressed"
        assert config.input.strip is True

    def test_string_path(self, tmp_path: Path):
        config_file = tmp_path / "rfc4291.toml"
        config_file.write_text('[output]\nformat = "hex"\n')
        assert load_config(str(config_file)).output.format == "hex"

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_missing_default_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == Config()

    def test_default_file_in_cwd(self, tmp_path: Path, monkeypatch):
        (tmp_path / "rfc4291.toml").write_text('[output]\nformat = "ptr"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().output.format == "ptr"

    def test_section_not_a_table(self, tmp_path: Path):
        config_file = tmp_path / "rfc4291.toml"
        config_file.write_text('output = "exploded"\n')
        with pytest.raises(ValueError, match=r"\[output\] must be a table"):
            load_config(config_file)

    def test_unknown_format(self, tmp_path: Path):
        config_file = tmp_path / "rfc4291.toml"
        config_file.write_text('[output]\nformat = "binary"\n')
        with pytest.raises(ValueError, match="Unknown output format"):
            load_config(config_file)


class TestOutputConfig:
    def test_default(self):
        assert OutputConfig().format == "compressed"

    def test_invalid(self):
        with pytest.raises(ValueError):
            OutputConfig(format="upper")
