"""Errors raised while chaining selector parts."""

from models.fragments import PartKind


class SelectorError(ValueError):
    """Base class for selector construction errors."""

    def __init__(self, message: str, kind: PartKind):
        self.kind = kind
        super().__init__(message)


class DuplicateSingletonError(SelectorError):
    """Raised when element, id or pseudo-element is added twice to one chain."""

    def __init__(self, kind: PartKind):
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector",
            kind,
        )


class OrderViolationError(SelectorError):
    """Raised when a part is added after a part of higher canonical rank."""

    def __init__(self, kind: PartKind, previous: PartKind):
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind,
        )
