# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only collector of dispatch steps (inputs, match, results, errors)
#   exported as JSON-friendly dicts for API responses and debugging.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List

@dataclass
class TraceStep:
    kind: str
    detail: Dict[str, Any]

class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []
    def add(self, kind: str, detail: Dict[str, Any]): self._steps.append(TraceStep(kind, detail))
    def steps(self) -> List[Dict[str, Any]]:
        return [{"kind": s.kind, "detail": s.detail} for s in self._steps]
