"""Render configuration persisted as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RenderConfig:
    """How DOT documents are laid out as text."""

    indent: int = 2
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError(f"indent must be a non-negative integer, got {self.indent!r}")


def save_config(config: RenderConfig, path: Path) -> Path:
    """Save a render config as JSON. Returns the written path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "indent": config.indent,
        "trailing_newline": config.trailing_newline,
    }
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


def load_config(path: Path) -> RenderConfig:
    """Load a render config; keys it does not know are ignored."""
    if not path.exists():
        raise FileNotFoundError(f"No config found at {path}")
    data = json.loads(path.read_text())
    return RenderConfig(
        indent=data.get("indent", 2),
        trailing_newline=data.get("trailing_newline", True),
    )
