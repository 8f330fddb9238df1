"""TOML config loading for rfc822addr.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "rfc822addr.toml"


@dataclass
class CanonicalizeConfig:
    default_host: str = ""


@dataclass
class OutputConfig:
    color: bool = True


@dataclass
class ParseConfig:
    trace: bool = False


@dataclass
class AddrConfig:
    canonicalize: CanonicalizeConfig = field(default_factory=CanonicalizeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    parse: ParseConfig = field(default_factory=ParseConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find rfc822addr.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> AddrConfig:
    """Parse an rfc822addr.toml file into an AddrConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = AddrConfig()

    if "canonicalize" in data:
        canon = data["canonicalize"]
        config.canonicalize = CanonicalizeConfig(
            default_host=canon.get("default_host", ""),
        )

    if "output" in data:
        out = data["output"]
        config.output = OutputConfig(
            color=out.get("color", True),
        )

    if "parse" in data:
        prs = data["parse"]
        config.parse = ParseConfig(
            trace=prs.get("trace", False),
        )

    return config
