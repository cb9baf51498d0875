"""Merit-ordered gift allocation under budget and stock constraints."""

from gift_allocation.adapter import AllocateComponent
from gift_allocation.models import AllocateResult, Catalog, Child, Gift, InvalidChildRecord
from gift_allocation.strategy import AssignmentStrategy, NiceScoreStrategy, run

__all__ = [
    "AllocateComponent",
    "AllocateResult",
    "AssignmentStrategy",
    "Catalog",
    "Child",
    "Gift",
    "InvalidChildRecord",
    "NiceScoreStrategy",
    "run",
]
