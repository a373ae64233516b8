# -----------------------------------------------------------------------------
# Solver: quantity-set dispatch for kinecalc
# Responsibilities:
#   • Coerce the caller's (kind, value) pairs into Quantity objects
#   • Build an order-independent key (sorted kind labels) and look it up in
#     the family's catalog table
#   • Raise a typed error for recognized-but-unsolvable or unknown kind-sets
#   • Evaluate the matching closed form and return the new quantities
#   • Solver facade: same pipeline, reported as a SolverResult with a trace
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .catalog import Catalog, load_default_catalog
from .errors import (
    MissingQuantity,
    NumericDomainError,
    SolveError,
    UnrecognizedInput,
    UnsupportedCombination,
)
from .extract import get_from
from .formulas import REGISTRY
from .tracer import Tracer
from .types import FormulaSpec, Quantity

log = logging.getLogger(__name__)

LINEAR = "linear"
CIRCULAR = "circular"

UNSUPPORTED_ERRORS = {
    "missing_quantity": MissingQuantity,
    "unsupported_combination": UnsupportedCombination,
}


def match(family: str, quantities: Iterable[Any], catalog: Catalog | None = None
          ) -> Tuple[FormulaSpec, List[Quantity]]:
    """
    Find the catalog entry for the kinds present in `quantities`.
    Returns (entry, coerced quantities). Raises:
      - UnrecognizedInput: wrong count, repeated kind, or unknown kind-set
      - MissingQuantity / UnsupportedCombination: recognized entry with no formula
    """
    fam = (catalog or load_default_catalog()).family(family)
    given = [Quantity.of(q) for q in quantities]
    labels = [q.kind.value for q in given]

    if len(given) not in fam.sizes:
        raise UnrecognizedInput(
            f"Unknown token: {family} expects {' or '.join(map(str, fam.sizes))} quantities, got {len(given)}")
    if len(set(labels)) != len(labels):
        raise UnrecognizedInput(f"Unknown token: repeated kind in {labels}")

    key = tuple(sorted(labels))
    spec = fam.formulas.get(key)
    if spec is None:
        raise UnrecognizedInput(f"Unknown token: no {family} formula for {list(key)}")
    if not spec.supported:
        log.warning("%s combination %s recognized but not solvable: %s", family, list(key), spec.message)
        raise UNSUPPORTED_ERRORS[spec.error](spec.message)
    log.debug("%s %s matched %s", family, list(key), spec.id)
    return spec, given


def evaluate(spec: FormulaSpec, given: List[Quantity]) -> List[Quantity]:
    # Feed values in the entry's sorted order; the closed forms do not guard
    # their domain, so arithmetic failures are reported here.
    args = [get_from(k, given) for k in spec.given]
    try:
        return REGISTRY[spec.id](*args)
    except (ValueError, ZeroDivisionError) as e:
        log.warning("%s failed on %s: %s", spec.id, args, e)
        raise NumericDomainError(f"{spec.id}: {e} for inputs {dict(zip(spec.key, args))}") from e


def solve(quantities: Iterable[Any], catalog: Catalog | None = None) -> List[Quantity]:
    """
    One-dimensional constant-acceleration solver.
    Takes three of acceleration, distance, time, velocityi, velocityf (any
    order) and returns the other two. When the unknowns include time and the
    relation is quadratic, both roots come back as time1 and time2:
        solve([("distance", 2), ("acceleration", 3.5), ("velocityi", -4.8)])
        -> [Quantity(time1, ...), Quantity(time2, ...), Quantity(velocityf, ...)]
    """
    spec, given = match(LINEAR, quantities, catalog)
    return evaluate(spec, given)


def circular(quantities: Iterable[Any], catalog: Catalog | None = None) -> List[Quantity]:
    """
    Uniform circular motion: two or three of acceleration, force, mass,
    radius, time (period), velocity.
    """
    spec, given = match(CIRCULAR, quantities, catalog)
    return evaluate(spec, given)


def _rows(quantities: List[Quantity]) -> List[Dict[str, Any]]:
    return [{"kind": q.kind.value, "value": q.value, "unit": q.kind.si_unit} for q in quantities]


@dataclass
class SolverResult:
    # Structured response used by the API layer
    ok: bool
    family: str
    selected_formula: Dict[str, Any]
    given: List[Dict[str, Any]]
    results: List[Dict[str, Any]]
    steps: List[str]
    full_trace: List[Dict[str, Any]]
    error: str | None = None
    error_kind: str | None = None
    quantities: List[Quantity] = field(default_factory=list, repr=False)


class Solver:
    def __init__(self, catalog: Catalog | None = None):
        self.catalog = catalog or load_default_catalog()

    def run(self, family: str, quantities: Iterable[Any]) -> SolverResult:
        """
        Dispatch and evaluate without raising for input problems:
          1) record the raw inputs
          2) match the kind-set against the family's table
          3) evaluate and record every produced quantity
        Failures come back as ok=False with error/error_kind set.
        """
        trace = Tracer()
        items = list(quantities)
        trace.add("inputs_raw", {"family": family, "quantities": [_raw(q) for q in items]})
        spec: Optional[FormulaSpec] = None
        given: List[Quantity] = []
        try:
            spec, given = match(family, items, self.catalog)
            trace.add("match", {"formula": spec.id, "key": list(spec.key)})
            out = evaluate(spec, given)
        except SolveError as e:
            trace.add("error", {"kind": e.error_kind, "message": str(e)})
            return SolverResult(
                ok=False, family=family,
                selected_formula=_formula_view(spec),
                given=_rows(given), results=[], steps=[],
                full_trace=trace.steps(),
                error=str(e), error_kind=e.error_kind,
            )

        for q in out:
            trace.add("numeric_eval", {"formula": spec.id, "target": q.kind.value,
                                       "result_si": q.value, "unit": q.kind.si_unit})
        return SolverResult(
            ok=True, family=family,
            selected_formula=_formula_view(spec),
            given=_rows(given), results=_rows(out),
            steps=[f"{spec.id}: {eq}" for eq in spec.eq],
            full_trace=trace.steps(),
            quantities=out,
        )


def _raw(item: Any) -> Any:
    # Trace-friendly echo of whatever the caller passed.
    if isinstance(item, Quantity):
        return list(item.as_tuple())
    if isinstance(item, (list, tuple)):
        return [getattr(x, "value", x) if i == 0 else x for i, x in enumerate(item)]
    return repr(item)


def _formula_view(spec: FormulaSpec | None) -> Dict[str, Any]:
    if spec is None:
        return {}
    return {"id": spec.id, "name": spec.name, "given": list(spec.key),
            "produces": [k.value for k in spec.produces], "eq": spec.eq}
