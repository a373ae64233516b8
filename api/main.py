# --- kinecalc: Formula Solver API (FastAPI) ----------------------------------
# Purpose: Thin HTTP surface over the kinecalc dispatchers, gravitation helper
# and unit ladder. All computation lives in the package; this module only
# validates requests, normalizes optional units, and shapes responses.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
import logging
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from kinecalc.catalog import Catalog, load_default_catalog
from kinecalc.errors import SolveError
from kinecalc.gravitation import force_grav
from kinecalc.solver import CIRCULAR, LINEAR, Solver
from kinecalc.units import UnitError, convert, to_si

# Load .env for external configuration (catalog path, log level, bind address)
load_dotenv()
CATALOG_PATH = os.getenv("CATALOG_PATH")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

logging.basicConfig(level=LOG_LEVEL)
log = logging.getLogger(__name__)

app = FastAPI(title="kinecalc Formula Solver API")

# Catalog + solver are built once; a custom CATALOG_PATH replaces the packaged table
_catalog = Catalog.from_file(CATALOG_PATH) if CATALOG_PATH else load_default_catalog()
_solver = Solver(_catalog)

# ----------------------------- Schemas ----------------------------------------
class QuantityIn(BaseModel):
    # One labeled value; unit is optional and defaults to the kind's SI unit.
    kind: str
    value: float
    unit: Optional[str] = None

class SolveRequest(BaseModel):
    quantities: List[QuantityIn] = Field(default_factory=list)

class GravityRequest(BaseModel):
    mass: float
    other_mass: Optional[float] = None
    distance: Optional[float] = None

class ConvertRequest(BaseModel):
    value: float
    unit: str

# ----------------------------- Helpers ----------------------------------------
def _normalize(req: SolveRequest) -> List[Any]:
    """
    Convert each incoming quantity to SI. Bad units are a client error (422);
    bad kind labels are passed through so the solver reports them as
    unrecognized input.
    """
    out: List[Any] = []
    for q in req.quantities:
        if not q.unit:
            out.append((q.kind, q.value))
            continue
        try:
            out.append(to_si(q.kind, q.value, q.unit))
        except UnitError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except SolveError:
            out.append((q.kind, q.value))
    return out

def _payload(family: str, req: SolveRequest) -> Dict[str, Any]:
    res = _solver.run(family, _normalize(req))
    body = {
        "ok": res.ok,
        "family": res.family,
        "selected_formula": res.selected_formula,
        "given": res.given,
        "results": res.results,
        "steps": res.steps,
        "trace": res.full_trace,
    }
    if not res.ok:
        log.info("%s solve rejected: %s (%s)", family, res.error, res.error_kind)
        body["error"] = res.error
        body["error_kind"] = res.error_kind
    return body

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/catalog")
def list_catalog():
    """List every recognized combination, solvable or not."""
    items = _catalog.list_formulas()
    return {"count": len(items), "items": items}

@app.post("/solve/linear")
def solve_linear(req: SolveRequest):
    return _payload(LINEAR, req)

@app.post("/solve/circular")
def solve_circular(req: SolveRequest):
    return _payload(CIRCULAR, req)

@app.post("/gravity")
def gravity(req: GravityRequest):
    try:
        return {"force": force_grav(req.mass, req.other_mass, req.distance), "unit": "N"}
    except (TypeError, SolveError) as e:
        raise HTTPException(status_code=422, detail=str(e))

@app.post("/convert")
def convert_unit(req: ConvertRequest):
    try:
        out = convert(req.value, req.unit)
    except UnitError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"unit": out.unit, "value": out.value}

# ----------------------------- Launcher ---------------------------------------
def main():
    # uvicorn import path matches `python -m uvicorn api.main:app`
    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
