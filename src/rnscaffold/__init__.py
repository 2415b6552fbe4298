"""
Core package for generating React Native app skeletons from page templates.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("rnscaffold")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
