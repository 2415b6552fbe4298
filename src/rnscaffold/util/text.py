"""
Text-related helpers.
"""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def component_identifier(value: str) -> str:
    """
    Turn a component name into a PascalCase JavaScript identifier.

    `about-content` becomes `AboutContent`; a leading digit gets a `C` prefix.
    """
    words = _WORD_PATTERN.findall(value or "")
    identifier = "".join(word[:1].upper() + word[1:] for word in words)
    if not identifier:
        return "Component"
    if identifier[0].isdigit():
        return f"C{identifier}"
    return identifier
