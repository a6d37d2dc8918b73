"""Load command-line configuration from rfc4291.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG = Path("rfc4291.toml")

OUTPUT_FORMATS = ("compressed", "exploded", "hex", "json", "ptr")


@dataclass
class OutputConfig:
    """How the parse command renders each address.

    format is one of OUTPUT_FORMATS:
      compressed  RFC 5952 canonical text
      exploded    eight 4-digit groups
      hex         16-byte binary form as 32 hex digits
      json        JSON string of the canonical text
      ptr         ip6.arpa reverse pointer name
    """

    format: str = "compressed"

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.format!r} "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )


@dataclass
class InputConfig:
    """How command-line address arguments are read."""

    strip: bool = True


@dataclass
class Config:
    """Full configuration loaded from rfc4291.toml."""

    output: OutputConfig = field(default_factory=OutputConfig)
    input: InputConfig = field(default_factory=InputConfig)


def _section(data: dict, name: str) -> dict:
    """Return the named TOML table, or an empty one if absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from a TOML file.

    If config_path is None, reads rfc4291.toml from the current
    directory when present and otherwise returns the defaults. An
    explicitly named file that does not exist raises FileNotFoundError.
    """
    if config_path is None:
        if not DEFAULT_CONFIG.exists():
            return Config()
        config_path = DEFAULT_CONFIG
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    output = _section(data, "output")
    input_section = _section(data, "input")
    return Config(
        output=OutputConfig(format=output.get("format", "compressed")),
        input=InputConfig(strip=input_section.get("strip", True)),
    )
