"""Selector description tree as Pydantic v2 models with discriminated union.

A request describes a selector either as a simple chain of parts or as two
sub-selectors joined by a combinator token.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from models.fragments import PartKind


class SelectorPart(BaseModel):
    """One part of a simple selector chain, e.g. ``{"kind": "id", "value": "main"}``."""

    model_config = ConfigDict(extra="forbid")

    kind: PartKind
    value: str


class SimpleSelector(BaseModel):
    """Parts replayed in order through the builder."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["simple"]
    parts: list[SelectorPart] = []


class CompoundSelector(BaseModel):
    """Two selectors joined by a combinator (``" "``, ``">"``, ``"+"``, ``"~"``)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["compound"]
    left: "SelectorNode"
    combinator: str
    right: "SelectorNode"


SelectorNode = Annotated[
    Union[SimpleSelector, CompoundSelector],
    Field(discriminator="type"),
]

CompoundSelector.model_rebuild()


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------


def sel_simple(*parts: tuple[str, str]) -> SimpleSelector:
    """Create a simple selector from ``(kind, value)`` pairs."""
    return SimpleSelector(
        type="simple",
        parts=[SelectorPart(kind=kind, value=value) for kind, value in parts],
    )


def sel_compound(
    left: Union[SimpleSelector, CompoundSelector],
    combinator: str,
    right: Union[SimpleSelector, CompoundSelector],
) -> CompoundSelector:
    """Create a compound selector joining two selectors."""
    return CompoundSelector(
        type="compound",
        left=left,
        combinator=combinator,
        right=right,
    )
