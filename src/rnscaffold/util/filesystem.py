"""
Filesystem helpers shared by the scaffold stages.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> bool:
    """
    Ensure a directory exists (parents included).

    Returns:
        True if the directory was created, False if it already existed.
    """
    target = Path(path)
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    return True


_RESERVED_NAMES = {".", ".."}
_FORBIDDEN_CHARACTERS = ("/", "\\", "\x00")


def unsafe_name_reason(value: str) -> Optional[str]:
    """
    Explain why value cannot be used as a single path segment, or return None.
    """
    if not value or not value.strip():
        return "must not be empty"
    if value in _RESERVED_NAMES:
        return f"must not be {value!r}"
    for char in _FORBIDDEN_CHARACTERS:
        if char in value:
            return f"must not contain {char!r}"
    return None


_DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Write text atomically by staging a temp file and renaming."""
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, _DEFAULT_FILE_MODE & ~_current_umask())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        except OSError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file, replacing any existing content.

    The parent directory must already exist; a missing parent raises
    FileNotFoundError instead of being created.
    """
    target = Path(path)
    _atomic_write_text(target, content, encoding=encoding)
    logger.debug("Wrote %s", target)
    return target
