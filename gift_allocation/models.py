"""Data models for the gift allocation stage."""

from dataclasses import dataclass, field


class InvalidChildRecord(ValueError):
    """A child record is missing a field the allocator needs to rank or serve it."""


@dataclass(eq=False)
class Gift:
    """A gift in stock.

    Gifts compare by identity, so two distinct gifts with equal fields are
    still different gifts.

    Parameters
    ----------
    id : str
        Gift identifier (the product name in most catalogs).
    category : str
        Category string. A preference matches when it is a substring of it.
    price : float
        Unit price, non-negative.
    quantity : int
        Remaining stock, decremented on every assignment.
    """

    id: str
    category: str
    price: float
    quantity: int

    def __post_init__(self) -> None:
        """Reject negative prices and stock."""
        if self.price < 0:
            raise ValueError(f"Gift {self.id!r}: price must be non-negative.")
        if self.quantity < 0:
            raise ValueError(f"Gift {self.id!r}: quantity must be non-negative.")

    def matches(self, preference: str) -> bool:
        """Return whether ``preference`` is contained in this gift's category."""
        return preference in self.category


@dataclass(eq=False)
class Child:
    """A child taking part in the allocation.

    Parameters
    ----------
    id : int
        Unique identifier, also the tie-break key on equal scores.
    age : int
        Age in years.
    average_score : float | None
        Merit score used to order children.
    assigned_budget : float | None
        Spending ceiling. Overwritten with the remaining budget after allocation.
    gifts_preferences : list[str] | None
        Category tokens in priority order.
    received_gifts : list[Gift]
        Gifts assigned so far.
    """

    id: int
    age: int
    average_score: float | None
    assigned_budget: float | None
    gifts_preferences: list[str] | None
    received_gifts: list[Gift] = field(default_factory=list)


@dataclass
class Catalog:
    """Children and gifts of one allocation run."""

    children: list[Child]
    gifts: list[Gift]


@dataclass
class AllocateResult:
    """Outcome of an allocation run.

    Parameters
    ----------
    received_gifts : dict[int, list[str]]
        Gift IDs received by each child, in assignment order.
    remaining_budgets : dict[int, float | None]
        Budget left to each child after allocation.
    remaining_quantities : dict[str, int]
        Stock left for each gift after allocation.
    """

    received_gifts: dict[int, list[str]]
    remaining_budgets: dict[int, float | None]
    remaining_quantities: dict[str, int]

    def __post_init__(self) -> None:
        """Validate that budgets are reported for exactly the children with gift lists."""
        if set(self.remaining_budgets) != set(self.received_gifts):
            raise ValueError("remaining_budgets keys must match received_gifts")
