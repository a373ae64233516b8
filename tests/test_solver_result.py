import pytest

from kinecalc.solver import CIRCULAR, LINEAR, Solver


@pytest.fixture(scope="module")
def solver():
    return Solver()


def test_successful_run_reports_formula_steps_and_trace(solver):
    res = solver.run(LINEAR, [("time", 3), ("acceleration", 2), ("velocityi", 1)])
    assert res.ok and res.error is None
    assert res.selected_formula["id"] == "atv1"
    assert res.selected_formula["given"] == ["acceleration", "time", "velocityi"]
    assert [r["kind"] for r in res.results] == ["distance", "velocityf"]
    assert res.results[0]["value"] == pytest.approx(12.0)
    assert res.results[1]["unit"] == "m/s"
    assert all(s.startswith("atv1: ") for s in res.steps)
    assert [t["kind"] for t in res.full_trace] == ["inputs_raw", "match", "numeric_eval", "numeric_eval"]
    assert len(res.quantities) == 2


@pytest.mark.parametrize("family,given,kind", [
    (LINEAR, [("acceleration", 1), ("distance", 2), ("time", 3)], "missing_quantity"),
    (CIRCULAR, [("acceleration", 1), ("force", 2)], "unsupported_combination"),
    (LINEAR, [("mass", 1), ("distance", 2), ("time", 3)], "unrecognized_input"),
    (CIRCULAR, [("radius", 1)], "unrecognized_input"),
    (LINEAR, [("acceleration", 2), ("distance", 100), ("velocityf", 1)], "numeric_domain"),
])
def test_failures_are_reported_not_raised(solver, family, given, kind):
    res = solver.run(family, given)
    assert not res.ok
    assert res.error_kind == kind
    assert res.error
    assert res.results == [] and res.steps == []
    assert res.full_trace[-1]["kind"] == "error"
    assert res.full_trace[-1]["detail"]["kind"] == kind


def test_domain_error_still_names_the_formula(solver):
    res = solver.run(LINEAR, [("acceleration", 0), ("velocityf", 3), ("velocityi", 1)])
    assert res.error_kind == "numeric_domain"
    assert res.selected_formula["id"] == "av2v1"
