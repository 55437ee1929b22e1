import numpy as np
import pytest

from cont_beam.domain.beam import BeamModel
from cont_beam.domain.errors import BeamInputError, IllConditionedSystemError
from cont_beam.domain.loads import DistUniform, PointForce
from cont_beam.engine.segments import build_segments
from cont_beam.engine.three_moment import (
    assemble_system,
    cantilever_end_moment,
    load_moments,
    prescribed_rows,
    solve_support_moments,
    span_areas,
    support_moments,
    support_reactions,
)


def _model(spans, cantilever=False, segments=50):
    return BeamModel.build(
        depth_in=3.5, width_in=1.5, E_psi=1.6e6, I_in4=5.36,
        spans_in=spans, cantilever=cantilever, segments=segments,
    )


def _solve(model, loads):
    grid = build_segments(model)
    areas = span_areas(model, grid, load_moments(model, grid, loads))
    cant = cantilever_end_moment(model, loads)
    return areas, support_moments(model, areas, cant)


def test_two_equal_spans_full_udl():
    w, L = 2.0, 120.0
    model = _model([L, L])
    loads = [DistUniform(span=j, x1_in=0.0, x2_in=L, w_lbin=w) for j in range(2)]
    _, sm = _solve(model, loads)

    np.testing.assert_allclose(sm.values, [0.0, -w * L**2 / 8.0, 0.0], atol=1e-9, rtol=1e-9)
    R = support_reactions(model, loads, sm.values)
    np.testing.assert_allclose(R, [3 * w * L / 8, 10 * w * L / 8, 3 * w * L / 8], rtol=1e-9)


def test_three_equal_spans_full_udl():
    w, L = 1.5, 100.0
    model = _model([L, L, L])
    loads = [DistUniform(span=j, x1_in=0.0, x2_in=L, w_lbin=w) for j in range(3)]
    _, sm = _solve(model, loads)

    assert sm.values[1] == pytest.approx(-w * L**2 / 10.0, rel=1e-9)
    assert sm.values[2] == pytest.approx(-w * L**2 / 10.0, rel=1e-9)
    R = support_reactions(model, loads, sm.values)
    np.testing.assert_allclose(R, np.array([0.4, 1.1, 1.1, 0.4]) * w * L, rtol=1e-9)


def test_point_load_in_first_of_two_spans():
    P, L = 100.0, 10.0
    model = _model([L, L], segments=40)
    _, sm = _solve(model, [PointForce(span=0, x_in=L / 2, P_lb=P)])
    assert sm.values[1] == pytest.approx(-3.0 * P * L / 32.0, rel=1e-9)


def test_unloaded_span_has_no_area():
    model = _model([10.0, 10.0])
    areas, _ = _solve(model, [PointForce(span=0, x_in=5.0, P_lb=10.0)])
    assert areas.A[1] == 0.0
    assert areas.xL[1] == 0.0
    assert areas.xR[1] == 0.0
    assert areas.xL[0] + areas.xR[0] == pytest.approx(10.0)


def test_cantilever_rows_are_prescribed():
    model = _model([20.0, 40.0, 40.0], cantilever=True)
    loads = [PointForce(span=0, x_in=0.0, P_lb=50.0)]
    grid = build_segments(model)
    areas = span_areas(model, grid, load_moments(model, grid, loads))
    cant = cantilever_end_moment(model, loads)
    assert cant == pytest.approx(-1000.0)

    F, delta = assemble_system(model, areas, cant)
    np.testing.assert_array_equal(F[0], [1.0, 0.0, 0.0, 0.0])
    np.testing.assert_array_equal(F[1], [0.0, 1.0, 0.0, 0.0])
    np.testing.assert_array_equal(F[3], [0.0, 0.0, 0.0, 1.0])
    assert delta[1] == cant
    assert F[2, 1] == pytest.approx(40.0 / 5.36)


def test_banded_matches_dense():
    model = _model([30.0, 80.0, 50.0, 120.0])
    loads = [DistUniform(span=j, x1_in=0.0, x2_in=L, w_lbin=1.0 + j) for j, L in enumerate(model.spans_in)]
    grid = build_segments(model)
    areas = span_areas(model, grid, load_moments(model, grid, loads))
    F, delta = assemble_system(model, areas)
    banded = solve_support_moments(F, delta, method="banded")
    dense = solve_support_moments(F, delta, method="dense")
    np.testing.assert_allclose(banded, dense, rtol=1e-10, atol=1e-12 * np.max(np.abs(dense)))
    assert banded[0] == dense[0] == 0.0
    assert banded[-1] == dense[-1] == 0.0


@pytest.mark.parametrize("method", ["banded", "dense"])
def test_prescribed_moments_are_exact(method):
    model = _model([31.62, 31.62, 252.98], cantilever=True)
    loads = [
        DistUniform(span=0, x1_in=15.81, x2_in=31.62, w_lbin=1.896),
        DistUniform(span=0, x1_in=0.0, x2_in=15.81, w_lbin=1.422),
        DistUniform(span=1, x1_in=0.0, x2_in=31.62, w_lbin=1.896),
        DistUniform(span=2, x1_in=31.62, x2_in=252.98, w_lbin=1.422),
    ]
    grid = build_segments(model)
    areas = span_areas(model, grid, load_moments(model, grid, loads))
    cant = cantilever_end_moment(model, loads)
    F, delta = assemble_system(model, areas, cant)

    np.testing.assert_array_equal(prescribed_rows(F), [0, 1, 3])
    M = solve_support_moments(F, delta, method=method)
    assert M[0] == 0.0
    assert M[1] == cant
    assert M[3] == 0.0
    # la fila interior se cumple con los valores impuestos
    assert F[2] @ M == pytest.approx(delta[2], rel=1e-12)


def test_singular_system_is_rejected():
    F = np.array([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(IllConditionedSystemError) as exc:
        solve_support_moments(F, np.array([1.0, 2.0]))
    assert isinstance(exc.value, BeamInputError)


def test_condition_limit_is_configurable():
    F = np.array([[1.0, 0.0], [0.0, 1e-3]])
    solve_support_moments(F, np.ones(2))
    with pytest.raises(IllConditionedSystemError):
        solve_support_moments(F, np.ones(2), cond_limit=100.0)


def test_unknown_solve_method():
    with pytest.raises(ValueError):
        solve_support_moments(np.eye(2), np.ones(2), method="lu")
