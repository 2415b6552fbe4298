"""
Shared utility helpers for filesystem and strings.
"""

from .filesystem import ensure_directory, unsafe_name_reason, write_text_file
from .text import component_identifier

__all__ = [
    "ensure_directory",
    "unsafe_name_reason",
    "write_text_file",
    "component_identifier",
]
