"""tablestrainer package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _version_from_pyproject() -> str | None:
    """Version of the nearest source checkout, when running from one."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if pyproject.is_file():
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
            project_version = data.get("project", {}).get("version")
            return str(project_version) if project_version is not None else None
    return None


def _installed_version() -> str:
    try:
        return version("tablestrainer")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _version_from_pyproject() or _installed_version()
