"""Fluent, immutable CSS selector builder.

Every chaining call returns a new ``SelectorBuilder``; the receiver is never
modified, so a partially built selector can be reused as the start of several
chains::

    css_selector_builder.id("main").class_("container").class_("editable")
    # -> '#main.container.editable'

    combine(
        css_selector_builder.element("div").id("main"),
        "+",
        css_selector_builder.element("table").id("data"),
    )
    # -> 'div#main + table#data'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from builder.ordering import check_append
from models.fragments import Fragment, PartKind


class SelectorBuilder(BaseModel):
    """One step of a selector chain.

    ``prefix`` holds text produced by ``combine``; ``fragments`` holds the
    parts of the simple selector currently being chained.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    fragments: tuple[Fragment, ...] = ()

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        check_append(self.fragments, kind)
        return SelectorBuilder(
            prefix=self.prefix,
            fragments=self.fragments + (Fragment(kind=kind, value=value),),
        )

    def element(self, name: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._append(PartKind.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        """Append ``[spec]``; ``spec`` is the bracket contents, e.g. ``href$=".png"``."""
        return self._append(PartKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, name)

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a part by kind; same rules as the named methods."""
        return self._append(PartKind(kind), value)

    def stringify(self) -> str:
        return self.prefix + "".join(f.text for f in self.fragments)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return combine(left, combinator, right)

    def __str__(self) -> str:
        return self.stringify()


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    """Join two built selectors with a combinator token.

    The token is padded with one space on each side whatever its content.
    Ordering rules are not applied across the join; the result starts a
    fresh chain after the combined text.
    """
    return SelectorBuilder(
        prefix=f"{left.stringify()} {combinator} {right.stringify()}"
    )


# Shared root builder with no parts.
css_selector_builder = SelectorBuilder()
