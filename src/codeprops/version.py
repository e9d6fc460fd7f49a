"""Installed distribution version."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


DISTRIBUTION = "codeprops"


def get_version() -> str:
    """Return the codeprops version, or ``0.0.0`` for an uninstalled checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["DISTRIBUTION", "get_version"]
