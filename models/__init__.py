"""Public re-exports of all model types."""

from models.errors import (
    DuplicateSingletonError,
    OrderViolationError,
    SelectorError,
)
from models.fragments import RANK, SINGLETON_KINDS, Fragment, PartKind
from models.rectangle import Rectangle
from models.request import BuildRequest
from models.response import BuildResponse, ErrorResponse
from models.selectors import (
    CompoundSelector,
    SelectorNode,
    SelectorPart,
    SimpleSelector,
    sel_compound,
    sel_simple,
)

__all__ = [
    # Fragments
    "PartKind",
    "Fragment",
    "RANK",
    "SINGLETON_KINDS",
    # Errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    # Selector description tree
    "SelectorPart",
    "SimpleSelector",
    "CompoundSelector",
    "SelectorNode",
    # Selector factories
    "sel_simple",
    "sel_compound",
    # Value objects
    "Rectangle",
    # Request/Response
    "BuildRequest",
    "BuildResponse",
    "ErrorResponse",
]
