"""
Scaffold output helpers (directory tree and stub files).
"""

from .writer import (
    FilesystemError,
    GenerationStage,
    ScaffoldOptions,
    ScaffoldReport,
    generate_app,
    resolve_app_dir,
)

__all__ = [
    "FilesystemError",
    "GenerationStage",
    "ScaffoldOptions",
    "ScaffoldReport",
    "generate_app",
    "resolve_app_dir",
]
