# -----------------------------------------------------------------------------
# Error kinds raised by the dispatchers and helpers.
# Each carries an `error_kind` code that the Solver facade and the API report,
# so callers can branch on the failure without parsing the message.
# -----------------------------------------------------------------------------

from __future__ import annotations


class SolveError(Exception):
    error_kind = "solve_error"


class MissingQuantity(SolveError):
    # Recognized kind-set that lacks a quantity needed to solve it.
    error_kind = "missing_quantity"


class UnsupportedCombination(SolveError):
    # Recognized kind-set with no formula behind it.
    error_kind = "unsupported_combination"


class UnrecognizedInput(SolveError):
    error_kind = "unrecognized_input"


class NumericDomainError(SolveError):
    # Negative discriminant or division by zero inside a closed form.
    error_kind = "numeric_domain"


class QuantityNotFound(SolveError, LookupError):
    error_kind = "quantity_not_found"
