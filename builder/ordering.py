"""Chain validation for simple selectors.

Checks are derived from the full fragment list on every append instead of
being carried as counters, so two branches grown from the same parent can
never influence each other.
"""

from __future__ import annotations

import logging

from models.errors import DuplicateSingletonError, OrderViolationError
from models.fragments import RANK, SINGLETON_KINDS, Fragment, PartKind

logger = logging.getLogger("selector")


def last_rank(fragments: tuple[Fragment, ...]) -> int:
    """Return the rank of the most recent fragment, or 0 for an empty chain."""
    if not fragments:
        return 0
    return fragments[-1].rank


def check_append(fragments: tuple[Fragment, ...], kind: PartKind) -> None:
    """Validate appending a part of ``kind`` to ``fragments``.

    Raises:
        OrderViolationError: The last fragment has a higher rank than ``kind``.
        DuplicateSingletonError: ``kind`` is a singleton already in the chain.
    """
    if last_rank(fragments) > RANK[kind]:
        previous = fragments[-1].kind
        logger.debug("rejected %s after %s", kind.value, previous.value)
        raise OrderViolationError(kind, previous)

    if kind in SINGLETON_KINDS and any(f.kind is kind for f in fragments):
        logger.debug("rejected duplicate %s", kind.value)
        raise DuplicateSingletonError(kind)
