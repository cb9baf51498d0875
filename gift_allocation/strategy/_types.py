"""Type definitions for the assignment strategy protocol."""

from typing import Protocol

from gift_allocation.models import Catalog


class AssignmentStrategy(Protocol):
    """Protocol for gift assignment policies.

    Implementations receive a populated :class:`Catalog` and mutate it in
    place: children's budgets and received gifts, and gifts' quantities.
    """

    def __call__(self, catalog: Catalog) -> None: ...
