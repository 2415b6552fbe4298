"""
Read page/component declarations out of the HTML-like template markup.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from ..util import unsafe_name_reason

logger = logging.getLogger(__name__)

PAGE_TAG = "page"
COMPONENT_TAG = "component"


class MalformedTemplate(RuntimeError):
    """Raised when template markup is unparseable or misses a required attribute."""

    def __init__(self, message: str, *, element: Optional[str] = None, attribute: Optional[str] = None) -> None:
        super().__init__(message)
        self.element = element
        self.attribute = attribute


@dataclass(frozen=True)
class PageDescriptor:
    """
    One `<page>` element from the template.

    Attributes:
        name: Page name, used as the page directory name.
        title: Descriptive title, never checked against name.
        components: Component names in document order.
    """
    name: str
    title: str
    components: Tuple[str, ...] = field(default_factory=tuple)


def _require(element: Tag, attribute: str, label: str) -> str:
    value = element.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None or not value.strip():
        raise MalformedTemplate(
            f"{label} is missing required attribute '{attribute}'",
            element=label,
            attribute=attribute,
        )
    return value


def _require_name(element: Tag, label: str) -> str:
    value = _require(element, "name", label)
    reason = unsafe_name_reason(value)
    if reason:
        raise MalformedTemplate(
            f"{label} has unusable name {value!r}: {reason}",
            element=label,
            attribute="name",
        )
    return value


def _duplicates(names: List[str]) -> List[str]:
    return [name for name, count in Counter(names).items() if count > 1]


def parse_template(markup: str) -> List[PageDescriptor]:
    """
    Parse template markup into page descriptors.

    Every `<page>` element (document order) yields one PageDescriptor whose
    components are the `name` attributes of its nested `<component>` elements.
    Empty markup yields an empty list. Duplicate names are passed through
    with a warning.

    Args:
        markup: Raw template text.

    Returns:
        Ordered list of PageDescriptor objects.

    Raises:
        MalformedTemplate: If the markup cannot be parsed, a page is nested in
            another page, a required attribute is missing, or a page or
            component name is not a single path segment.
    """
    if not markup or not markup.strip():
        return []

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as exc:
        raise MalformedTemplate(f"Template markup could not be parsed: {exc}") from exc

    pages: List[PageDescriptor] = []
    for index, page_element in enumerate(soup.find_all(PAGE_TAG), start=1):
        label = f"<page> #{index}"
        if page_element.find_parent(PAGE_TAG) is not None:
            raise MalformedTemplate(f"{label} is nested inside another <page>", element=label)

        name = _require_name(page_element, label)
        title = _require(page_element, "title", f"{label} ({name!r})")

        components: List[str] = []
        for position, component_element in enumerate(page_element.find_all(COMPONENT_TAG), start=1):
            component_label = f"<component> #{position} in page {name!r}"
            components.append(_require_name(component_element, component_label))

        for duplicate in _duplicates(components):
            logger.warning("Duplicate component name %r in page %r", duplicate, name)
        pages.append(PageDescriptor(name=name, title=title, components=tuple(components)))

    for duplicate in _duplicates([page.name for page in pages]):
        logger.warning("Duplicate page name %r; its directory will be shared", duplicate)
    logger.debug("Parsed %d page(s) from template", len(pages))
    return pages
