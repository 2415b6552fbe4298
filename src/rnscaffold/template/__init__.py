"""
Template reading (markup to page descriptors).
"""

from .reader import MalformedTemplate, PageDescriptor, parse_template

__all__ = ["MalformedTemplate", "PageDescriptor", "parse_template"]
