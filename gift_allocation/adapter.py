"""ALLOCATE component: gift allocation for the pipeline."""

import logging
from dataclasses import asdict
from typing import Any, Protocol

from gift_allocation.models import AllocateResult, Catalog, Child, Gift
from gift_allocation.strategy import AssignmentStrategy, NiceScoreStrategy

logger = logging.getLogger(__name__)


class PipelineComponent(Protocol):
    """Structural interface for pipeline stage components."""

    def execute(self, event: dict) -> dict:
        """Process event and return result."""
        ...


_CHILD_FIELD_MAP_IN: dict[str, str] = {
    "averageScore": "average_score",
    "assignedBudget": "assigned_budget",
    "giftsPreferences": "gifts_preferences",
}

_GIFT_FIELD_MAP_IN: dict[str, str] = {
    "productName": "id",
}

_CHILD_FIELDS = ("id", "age", "average_score", "assigned_budget", "gifts_preferences")
_GIFT_FIELDS = ("id", "category", "price", "quantity")


def _rename(record: dict[str, Any], field_map: dict[str, str], fields: tuple[str, ...]) -> dict[str, Any]:
    """Map a record's field names to model attribute names and keep the known ones.

    Parameters
    ----------
    record : dict[str, Any]
        Record with incoming (camelCase) field names.
    field_map : dict[str, str]
        Incoming name to attribute name.
    fields : tuple[str, ...]
        Attribute names the model needs.

    Returns
    -------
    dict[str, Any]

    Raises
    ------
    KeyError
        If one of ``fields`` is missing after mapping.
    """
    mapped = {field_map.get(key, key): value for key, value in record.items()}
    return {name: mapped[name] for name in fields}


def _check_unique_ids(kind: str, ids: list[Any]) -> None:
    seen = set()
    for record_id in ids:
        if record_id in seen:
            raise ValueError(f"Duplicate {kind} id: {record_id!r}")
        seen.add(record_id)


def _to_catalog(event: dict) -> Catalog:
    """Build a catalog from an event, copying the records' preference lists.

    Raises
    ------
    ValueError
        If two children or two gifts share an ID.
    """
    children = []
    for record in event["children"]:
        fields = _rename(record, _CHILD_FIELD_MAP_IN, _CHILD_FIELDS)
        if fields["gifts_preferences"] is not None:
            fields["gifts_preferences"] = list(fields["gifts_preferences"])
        children.append(Child(**fields))
    gifts = [Gift(**_rename(g, _GIFT_FIELD_MAP_IN, _GIFT_FIELDS)) for g in event["gifts"]]
    _check_unique_ids("child", [c.id for c in children])
    _check_unique_ids("gift", [g.id for g in gifts])
    return Catalog(children=children, gifts=gifts)


class AllocateComponent(PipelineComponent):
    """Allocate gifts via a pluggable assignment strategy.

    Handles field mapping from incoming records to the entity models, then
    delegates the assignment to the configured strategy.

    Parameters
    ----------
    strategy : AssignmentStrategy, optional
        Assignment policy. Defaults to :class:`NiceScoreStrategy`.
    """

    def __init__(self, strategy: AssignmentStrategy | None = None) -> None:
        self._strategy = strategy or NiceScoreStrategy()

    def execute(self, event: dict) -> dict:
        """Run allocation and return a serialized ``AllocateResult``.

        Parameters
        ----------
        event : dict
            Must contain ``children`` and ``gifts``, lists of record dicts.
            Child records need ``id``, ``age``, ``averageScore``,
            ``assignedBudget`` and ``giftsPreferences``; gift records need
            ``id`` (or ``productName``), ``category``, ``price`` and
            ``quantity``. Other keys are ignored.

        Returns
        -------
        dict
            ``received_gifts``, ``remaining_budgets`` and
            ``remaining_quantities``, keyed by child or gift ID.

        Raises
        ------
        ValueError
            If two children or two gifts share an ID.
        """
        catalog = _to_catalog(event)
        self._strategy(catalog)

        served = sum(1 for child in catalog.children if child.received_gifts)
        logger.info(
            "Allocation complete: %d of %d children received gifts",
            served,
            len(catalog.children),
        )

        return asdict(
            AllocateResult(
                received_gifts={c.id: [g.id for g in c.received_gifts] for c in catalog.children},
                remaining_budgets={c.id: c.assigned_budget for c in catalog.children},
                remaining_quantities={g.id: g.quantity for g in catalog.gifts},
            )
        )
