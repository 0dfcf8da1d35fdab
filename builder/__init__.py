"""Immutable CSS selector builder and request-tree assembly."""

from builder.assemble import build_selector
from builder.css import SelectorBuilder, combine, css_selector_builder

__all__ = ["SelectorBuilder", "build_selector", "combine", "css_selector_builder"]
