from __future__ import annotations

from typing import Callable, Dict

from cont_beam.domain.loads import Load, LoadKind
from cont_beam.engine.cantilever import (
    left_cant_dist_uniform,
    left_cant_point_force,
    left_cant_point_moment,
    right_cant_dist_uniform,
    right_cant_point_force,
    right_cant_point_moment,
)
from cont_beam.engine.response import LoadResponse
from cont_beam.engine.simple_span import (
    simple_dist_uniform,
    simple_point_force,
    simple_point_moment,
)

# Despacho por tipo de carga (LoadKind) -> primitiva de respuesta.

_SIMPLE: Dict[LoadKind, Callable[[Load, float], LoadResponse]] = {
    LoadKind.POINT: lambda ld, L: simple_point_force(ld.P_lb, ld.x_in, L),
    LoadKind.POINT_MOMENT: lambda ld, L: simple_point_moment(ld.M_lbin, ld.x_in, L),
    LoadKind.UDL: lambda ld, L: simple_dist_uniform(ld.w_lbin, ld.x1_in, ld.x2_in, L),
}

_LEFT_CANT: Dict[LoadKind, Callable[[Load, float, float], LoadResponse]] = {
    LoadKind.POINT: lambda ld, L, Lb: left_cant_point_force(ld.P_lb, ld.x_in, L, Lb),
    LoadKind.POINT_MOMENT: lambda ld, L, Lb: left_cant_point_moment(ld.M_lbin, ld.x_in, L, Lb),
    LoadKind.UDL: lambda ld, L, Lb: left_cant_dist_uniform(ld.w_lbin, ld.x1_in, ld.x2_in, L, Lb),
}

_RIGHT_CANT: Dict[LoadKind, Callable[[Load, float, float], LoadResponse]] = {
    LoadKind.POINT: lambda ld, L, Lb: right_cant_point_force(ld.P_lb, ld.x_in, L, Lb),
    LoadKind.POINT_MOMENT: lambda ld, L, Lb: right_cant_point_moment(ld.M_lbin, ld.x_in, L, Lb),
    LoadKind.UDL: lambda ld, L, Lb: right_cant_dist_uniform(ld.w_lbin, ld.x1_in, ld.x2_in, L, Lb),
}


def simple_response(load: Load, L: float) -> LoadResponse:
    """Respuesta de la carga con el tramo simplemente apoyado (rl, rr disponibles)."""
    return _SIMPLE[load.kind](load, float(L))


def left_cantilever_response(load: Load, L: float, Lb: float = 0.0) -> LoadResponse:
    """Respuesta con el tramo como voladizo izquierdo (rr, mr disponibles)."""
    return _LEFT_CANT[load.kind](load, float(L), float(Lb))


def right_cantilever_response(load: Load, L: float, Lb: float = 0.0) -> LoadResponse:
    """Respuesta con el tramo como voladizo derecho (rl, ml disponibles)."""
    return _RIGHT_CANT[load.kind](load, float(L), float(Lb))
