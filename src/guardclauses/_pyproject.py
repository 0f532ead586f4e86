"""pyproject.toml discovery for the [tool.guardclauses] section."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

TOOL_SECTION = "guardclauses"


def find_pyproject(start: Path | None = None) -> Path | None:
    """Search for pyproject.toml from start (default: cwd) upward.

    Returns:
        Path to pyproject.toml if found, None otherwise.
    """
    origin = start if start is not None else Path.cwd()
    for parent in [origin, *origin.parents]:
        candidate = parent / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def read_tool_section(data: dict[str, Any]) -> dict[str, Any]:
    """Extract [tool.guardclauses] from parsed TOML data, or {} if absent."""
    section = data.get("tool", {}).get(TOOL_SECTION, {})
    return section if isinstance(section, dict) else {}


def load_tool_section(path: Path) -> dict[str, Any]:
    """Load and return the [tool.guardclauses] section of the given file.

    Raises:
        OSError: If the file cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        return read_tool_section(tomllib.load(f))
