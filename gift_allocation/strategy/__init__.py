"""Gift assignment strategies.

Provides the nice-score assignment rule, the shared helpers it is built
from, and the ``AssignmentStrategy`` protocol.

Convenience function ``run`` applies the default strategy to a catalog in a
single call.
"""

from gift_allocation.models import Catalog
from gift_allocation.strategy._common import (
    YOUNG_ADULT_AGE,
    candidate_gifts,
    eligible_children,
    order_by_priority,
    priority_key,
    validate_children,
)
from gift_allocation.strategy._types import AssignmentStrategy
from gift_allocation.strategy.nice_score import NiceScoreStrategy

__all__ = [
    "AssignmentStrategy",
    "NiceScoreStrategy",
    "YOUNG_ADULT_AGE",
    "candidate_gifts",
    "eligible_children",
    "order_by_priority",
    "priority_key",
    "run",
    "validate_children",
]


def run(catalog: Catalog, max_age: int = YOUNG_ADULT_AGE) -> None:
    """Allocate gifts to children by nice score, mutating ``catalog`` in place.

    Parameters
    ----------
    catalog : Catalog
        Children and gifts of this run.
    max_age : int
        Oldest age still served.

    Raises
    ------
    InvalidChildRecord
        If an eligible child lacks a score, budget or preference list.
    """
    NiceScoreStrategy(max_age=max_age)(catalog)
