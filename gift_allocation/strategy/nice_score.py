"""Nice-score assignment rule.

Serves children in descending order of their average score. Each child walks
its preferences in order and takes the cheapest affordable, in-stock gift
matching each one, spending down its budget as it goes.
"""

import logging

from gift_allocation.models import Catalog, Child, Gift
from gift_allocation.strategy._common import (
    YOUNG_ADULT_AGE,
    candidate_gifts,
    eligible_children,
    order_by_priority,
    validate_children,
)

logger = logging.getLogger(__name__)


def _serve_child(child: Child, gifts: list[Gift]) -> int:
    """Assign gifts to one child and persist the budget left over.

    The price of every examined candidate is subtracted from the running
    budget before the ownership check, and is kept even if the candidate is
    rejected because the child already holds it.

    Parameters
    ----------
    child : Child
        Child to serve. ``received_gifts`` and ``assigned_budget`` are mutated.
    gifts : list[Gift]
        Shared gift pool. ``quantity`` of committed gifts is decremented.

    Returns
    -------
    int
        Number of gifts committed to the child.
    """
    budget = child.assigned_budget
    committed = 0
    for preference in child.gifts_preferences:
        for gift in candidate_gifts(gifts, preference, budget):
            budget -= gift.price
            if gift not in child.received_gifts and budget >= 0:
                child.received_gifts.append(gift)
                gift.quantity -= 1
                committed += 1
                logger.debug(
                    "Child %s received %s for '%s' (budget left %.2f)",
                    child.id,
                    gift.id,
                    preference,
                    budget,
                )
                break
        else:
            logger.debug("Child %s: nothing assigned for '%s'", child.id, preference)
    child.assigned_budget = budget
    return committed


class NiceScoreStrategy:
    """Serve children by descending average score.

    Parameters
    ----------
    max_age : int
        Oldest age still served. Older children are left untouched.
    """

    def __init__(self, max_age: int = YOUNG_ADULT_AGE) -> None:
        self.max_age = max_age

    def __call__(self, catalog: Catalog) -> None:
        """Allocate the catalog's gifts to its children in place.

        Parameters
        ----------
        catalog : Catalog
            Populated catalog. Children's budgets and received gifts and
            gifts' quantities are updated.

        Raises
        ------
        InvalidChildRecord
            If an eligible child lacks a score, budget or preference list.
            Raised before anything is mutated.
        """
        children = eligible_children(catalog.children, self.max_age)
        validate_children(children)
        logger.info(
            "Allocating %d gifts to %d children (%d excluded above age %d)",
            len(catalog.gifts),
            len(children),
            len(catalog.children) - len(children),
            self.max_age,
        )

        committed = 0
        for child in order_by_priority(children):
            committed += _serve_child(child, catalog.gifts)

        logger.info("Allocation complete: %d gifts assigned", committed)
