"""Selector fragment kinds, their canonical ranks, and the Fragment model.

Canonical order inside one simple selector:
    element#id.class[attribute]:pseudo-class::pseudo-element
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PartKind(str, Enum):
    """Kind of fragment that can appear in a simple selector chain."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


RANK: dict[PartKind, int] = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTRIBUTE: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

# Kinds allowed at most once per chain
SINGLETON_KINDS = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}


class Fragment(BaseModel):
    """One rendered piece of a simple selector, e.g. ``.container``."""

    model_config = ConfigDict(frozen=True)

    kind: PartKind
    value: str

    @property
    def rank(self) -> int:
        return RANK[self.kind]

    @property
    def text(self) -> str:
        return _TEMPLATES[self.kind].format(self.value)
