from __future__ import annotations
from typing import Any, Iterable

from .errors import QuantityNotFound
from .types import Quantity, QuantityKind


def get_from(kind: QuantityKind | str, quantities: Iterable[Any]) -> float:
    """
    Return the value of the first quantity labeled `kind`.
        get_from("distance", [("distance", 23), ("time", 2)])  ->  23.0
    Raises QuantityNotFound when no entry matches; a missing label means the
    collection was built wrong, so there is no default.
    """
    wanted = QuantityKind.parse(kind)
    for item in quantities:
        q = Quantity.of(item)
        if q.kind is wanted:
            return q.value
    raise QuantityNotFound(f"No '{wanted.value}' in quantity collection")
