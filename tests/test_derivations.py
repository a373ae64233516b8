"""
Check the linear closed forms against sympy solutions of the two
constant-acceleration relations:
    vf = vi + a*t
    d  = vi*t + a*t**2/2
"""

import pytest
import sympy as sp

from kinecalc.catalog import load_default_catalog
from kinecalc.solver import solve

a, d, t, vi, vf = sp.symbols("acceleration distance time velocityi velocityf")
SYM = {"acceleration": a, "distance": d, "time": t, "velocityi": vi, "velocityf": vf}
EQS = [sp.Eq(vf, vi + a * t), sp.Eq(d, vi * t + a * t ** 2 / 2)]

# Picked so every discriminant is a perfect square and nothing divides by zero
BASE = {"acceleration": 2, "distance": 12, "time": 3, "velocityi": 1, "velocityf": 7}

LINEAR_SPECS = [s for s in load_default_catalog().family("linear").formulas.values() if s.supported]


@pytest.mark.parametrize("spec", LINEAR_SPECS, ids=lambda s: s.id)
def test_closed_form_matches_symbolic_solution(spec):
    known = {SYM[k]: BASE[k] for k in spec.key}
    unknown = [s for s in SYM.values() if s not in known]
    sols = sp.solve([e.subs(known) for e in EQS], unknown, dict=True)
    sols = [{str(k): float(v) for k, v in s.items()} for s in sols]

    out = {q.kind.value: q.value for q in solve([(k, BASE[k]) for k in spec.key])}

    if "time1" in out:
        # quadratic in t: two roots, each paired with its own velocity
        assert len(sols) == 2
        assert sorted([out["time1"], out["time2"]]) == pytest.approx(sorted(s["time"] for s in sols))
        vel = next(k for k in out if k.startswith("velocity"))
        assert any(
            s[vel] == pytest.approx(out[vel]) and s["time"] in (pytest.approx(out["time1"]), pytest.approx(out["time2"]))
            for s in sols
        )
    else:
        assert len(sols) == 1
        assert out == pytest.approx(sols[0])
