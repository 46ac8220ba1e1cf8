"""Centralized path resolution for application resources.

Locates the bundled resources directory whether running from a source
checkout or from an installed package.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. quickactions/resources/ next to this package (source tree and pip install)
    2. sys.prefix/resources (bundled builds)

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If the resources directory cannot be found.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at quickactions/utils/paths.py -> parent.parent = quickactions/
    candidate = Path(__file__).resolve().parent.parent / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    candidate = Path(sys.prefix) / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. Searched: quickactions/resources/, sys.prefix/resources/"
    )
