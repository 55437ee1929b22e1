import pytest

from cont_beam.domain.loads import DistUniform, PointForce, PointMoment
from cont_beam.engine.cantilever import (
    LeftCantDistUniform,
    LeftCantPointForce,
    LeftCantPointMoment,
    RightCantDistUniform,
    RightCantPointForce,
    RightCantPointMoment,
    left_cant_dist_uniform,
    left_cant_point_force,
    left_cant_point_moment,
    left_cant_rotation,
    right_cant_dist_uniform,
    right_cant_point_force,
    right_cant_point_moment,
    right_cant_rotation,
)
from cont_beam.engine.primitives import left_cantilever_response, right_cantilever_response
from cont_beam.engine.simple_span import simple_point_moment

EPS = 1e-9


def test_left_tip_force():
    P, L = 50.0, 20.0
    c = left_cant_point_force(P, 0.0, L)
    assert c.rr == P
    assert c.mr == pytest.approx(-P * L)
    assert c.EId(0.0) == pytest.approx(-P * L**3 / 3.0)
    assert c.EIs(L) == pytest.approx(0.0, abs=1e-9)
    assert c.EId(L) == pytest.approx(0.0, abs=1e-6)
    assert c.M(0.0) == 0.0


def test_left_full_udl():
    w, L = 1.5, 30.0
    c = left_cant_dist_uniform(w, 0.0, L, L)
    assert c.rr == pytest.approx(w * L)
    assert c.mr == pytest.approx(-w * L**2 / 2.0)
    assert c.V(0.0) == pytest.approx(0.0)
    assert c.M(L) == pytest.approx(c.mr)
    assert c.EId(0.0) == pytest.approx(-w * L**4 / 8.0)
    assert c.EIs(L) == pytest.approx(0.0, abs=1e-6)
    assert c.EId(L) == pytest.approx(0.0, abs=1e-4)


def test_left_partial_udl_is_continuous():
    c = left_cant_dist_uniform(2.0, 5.0, 12.0, 20.0)
    assert c.mr == pytest.approx(-14.0 * (20.0 - 8.5))
    for x in (5.0, 12.0):
        assert c.M(x - EPS) == pytest.approx(c.M(x + EPS), abs=1e-6)
        assert c.EIs(x - EPS) == pytest.approx(c.EIs(x + EPS), abs=1e-5)
        assert c.EId(x - EPS) == pytest.approx(c.EId(x + EPS), abs=1e-4)


def test_left_point_moment_root_is_fixed():
    c = left_cant_point_moment(300.0, 4.0, 10.0)
    assert c.rr == 0.0
    assert c.mr == 300.0
    assert c.M(4.0 + EPS) == pytest.approx(300.0)
    assert c.EIs(10.0) == pytest.approx(0.0, abs=1e-9)
    assert c.EId(10.0) == pytest.approx(0.0, abs=1e-9)


def test_left_root_takes_back_span_rotation():
    Lb = 40.0
    c = left_cant_point_force(50.0, 2.0, 10.0, Lb)
    expected = simple_point_moment(c.mr, 0.0, Lb).EIs(0.0)
    assert expected != 0.0
    assert c.EIs(10.0) == pytest.approx(expected)
    assert c.EId(10.0) == pytest.approx(0.0, abs=1e-6)


def test_right_tip_force():
    P, L = 50.0, 20.0
    c = right_cant_point_force(P, L, L)
    assert c.rl == P
    assert c.ml == pytest.approx(-P * L)
    assert c.EIs(0.0) == 0.0
    assert c.EId(0.0) == 0.0
    assert c.EId(L) == pytest.approx(-P * L**3 / 3.0)


def test_right_full_udl():
    w, L = 1.5, 30.0
    c = right_cant_dist_uniform(w, 0.0, L, L)
    assert c.M(0.0) == pytest.approx(-w * L**2 / 2.0)
    assert c.EId(L) == pytest.approx(-w * L**4 / 8.0)


def test_right_partial_udl_deflection_is_continuous():
    c = right_cant_dist_uniform(2.0, 5.0, 12.0, 20.0)
    for x in (5.0, 12.0):
        assert c.M(x - EPS) == pytest.approx(c.M(x + EPS), abs=1e-6)
        assert c.EIs(x - EPS) == pytest.approx(c.EIs(x + EPS), abs=1e-5)
        assert c.EId(x - EPS) == pytest.approx(c.EId(x + EPS), abs=1e-4)


def test_right_point_moment_and_back_span():
    c = right_cant_point_moment(300.0, 6.0, 10.0)
    assert c.ml == -300.0
    assert c.M(3.0) == -300.0
    assert c.M(8.0) == 0.0

    Lb = 25.0
    d = right_cant_point_moment(300.0, 6.0, 10.0, Lb)
    assert d.EIs(0.0) == pytest.approx(simple_point_moment(300.0, Lb, Lb).EIs(Lb))


def test_rotation_corrections():
    left = left_cant_rotation(0.01, 20.0)
    assert left.EIs(3.0) == pytest.approx(0.01)
    assert left.EId(20.0) == pytest.approx(0.0)
    assert left.EId(0.0) == pytest.approx(-0.2)
    assert left.M(5.0) == 0.0

    right = right_cant_rotation(0.01)
    assert right.EId(0.0) == pytest.approx(0.0)
    assert right.EId(10.0) == pytest.approx(0.1)


@pytest.mark.parametrize(
    "load, cls",
    [
        (PointForce(span=0, x_in=6.0, P_lb=40.0), RightCantPointForce),
        (PointMoment(span=0, x_in=6.0, M_lbin=250.0), RightCantPointMoment),
        (DistUniform(span=0, x1_in=2.0, x2_in=8.0, w_lbin=1.5), RightCantDistUniform),
    ],
)
def test_right_cantilever_dispatch(load, cls):
    L, Lb = 10.0, 30.0
    resp = right_cantilever_response(load, L)
    assert isinstance(resp, cls)
    assert resp.rl == pytest.approx(load.resultant_lb)
    assert resp.EIs(0.0) == 0.0
    assert resp.EId(0.0) == 0.0
    assert resp.M(L) == 0.0

    seeded = right_cantilever_response(load, L, Lb)
    assert seeded.EIs(0.0) == pytest.approx(simple_point_moment(-resp.ml, Lb, Lb).EIs(Lb))


@pytest.mark.parametrize(
    "load, cls",
    [
        (PointForce(span=0, x_in=6.0, P_lb=40.0), LeftCantPointForce),
        (PointMoment(span=0, x_in=6.0, M_lbin=250.0), LeftCantPointMoment),
        (DistUniform(span=0, x1_in=2.0, x2_in=8.0, w_lbin=1.5), LeftCantDistUniform),
    ],
)
def test_left_cantilever_dispatch(load, cls):
    resp = left_cantilever_response(load, 10.0)
    assert isinstance(resp, cls)
    assert resp.rr == pytest.approx(load.resultant_lb)
    assert resp.M(0.0) == 0.0
    assert resp.EIs(10.0) == pytest.approx(0.0, abs=1e-9)
