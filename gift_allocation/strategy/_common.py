"""Shared utilities for gift assignment strategies.

Contains the age-based eligibility filter, record validation, the
priority key used to order children, and candidate selection for a
single preference.
"""

import logging
import math

from gift_allocation.models import Child, Gift, InvalidChildRecord

logger = logging.getLogger(__name__)

YOUNG_ADULT_AGE = 18


def eligible_children(children: list[Child], max_age: int = YOUNG_ADULT_AGE) -> list[Child]:
    """Return a new list without the children older than ``max_age``.

    Parameters
    ----------
    children : list[Child]
        All children in the catalog. Not mutated.
    max_age : int
        Oldest age still served. Children strictly older are dropped.

    Returns
    -------
    list[Child]

    Raises
    ------
    InvalidChildRecord
        If a child has no age.
    """
    for child in children:
        if child.age is None:
            raise InvalidChildRecord(f"Child {child.id!r} has no age.")
    return [child for child in children if child.age <= max_age]


def validate_children(children: list[Child]) -> None:
    """Check that every child can be ranked and served.

    Parameters
    ----------
    children : list[Child]
        Children about to be allocated.

    Raises
    ------
    InvalidChildRecord
        If a child has no ID, score, budget or preference list, or its
        score is not finite.
    """
    for child in children:
        for attr in ("id", "average_score", "assigned_budget", "gifts_preferences"):
            if getattr(child, attr) is None:
                raise InvalidChildRecord(f"Child {child.id!r} has no {attr}.")
        if not math.isfinite(child.average_score):
            raise InvalidChildRecord(f"Child {child.id!r} has a non-finite average_score.")


def priority_key(child: Child) -> tuple[float, int]:
    """Sort key for serving order, to be used with ``reverse=True``.

    Higher scores come first; on equal scores the larger ID comes first.
    """
    return (child.average_score, child.id)


def order_by_priority(children: list[Child]) -> list[Child]:
    """Return children in serving order (descending score, then descending ID)."""
    return sorted(children, key=priority_key, reverse=True)


def candidate_gifts(gifts: list[Gift], preference: str, budget: float) -> list[Gift]:
    """Collect the in-stock, affordable gifts matching one preference.

    Parameters
    ----------
    gifts : list[Gift]
        Gift pool in catalog order, with quantities as currently decremented.
    preference : str
        Category token; matched as a substring of each gift's category.
    budget : float
        Running budget of the child being served.

    Returns
    -------
    list[Gift]
        Matching gifts sorted cheapest first. Equal prices keep catalog order.
    """
    matched = [g for g in gifts if g.matches(preference) and g.price <= budget and g.quantity > 0]
    return sorted(matched, key=lambda g: g.price)
