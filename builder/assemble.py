"""Turn a selector description tree into a SelectorBuilder."""

from __future__ import annotations

from typing import Union

from builder.css import SelectorBuilder, combine, css_selector_builder
from models.selectors import CompoundSelector, SimpleSelector


def build_selector(node: Union[SimpleSelector, CompoundSelector]) -> SelectorBuilder:
    """Replay a description tree through the builder.

    Simple nodes add their parts in order, so ordering and singleton errors
    surface exactly as they would from hand-written chains. Compound nodes
    are built depth-first and joined with ``combine``.

    Raises:
        SelectorError: If any simple node breaks the chain rules.
    """
    if isinstance(node, CompoundSelector):
        return combine(
            build_selector(node.left),
            node.combinator,
            build_selector(node.right),
        )

    builder = css_selector_builder
    for part in node.parts:
        builder = builder.add(part.kind, part.value)
    return builder
