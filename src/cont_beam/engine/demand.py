from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from cont_beam.domain.beam import BeamModel
from cont_beam.domain.loads import Load, loads_on_span
from cont_beam.domain.results import DemandGrids, SegmentGrid, frozen_array
from cont_beam.domain.units import lb_to_kip, lbin_to_kipft
from cont_beam.engine.cantilever import left_cant_rotation
from cont_beam.engine.primitives import left_cantilever_response, simple_response
from cont_beam.engine.response import LoadResponse
from cont_beam.engine.simple_span import simple_point_moment

logger = logging.getLogger(__name__)


class _Accumulator:
    """Grillas de V, M, θ, y [muestra, tramo]; solo se suman contribuciones."""

    def __init__(self, n_samples: int, n_spans: int, EI: float):
        shape = (n_samples, n_spans)
        self.V = np.zeros(shape, dtype=float)
        self.M = np.zeros(shape, dtype=float)
        self.slope = np.zeros(shape, dtype=float)
        self.defl = np.zeros(shape, dtype=float)
        self.EI = float(EI)

    def add(self, span: int, resp: LoadResponse, x: np.ndarray) -> None:
        self.V[:, span] += resp.V(x)
        self.M[:, span] += resp.M(x)
        self.slope[:, span] += resp.EIs(x) / self.EI
        self.defl[:, span] += resp.EId(x) / self.EI

    def clear(self, span: int) -> None:
        self.V[:, span] = 0.0
        self.M[:, span] = 0.0
        self.slope[:, span] = 0.0
        self.defl[:, span] = 0.0


def compose_demand(
    model: BeamModel,
    grid: SegmentGrid,
    loads: Sequence[Load],
    M_sup: Sequence[float],
) -> DemandGrids:
    """
    Superposición, en este orden:
      1) cada tramo como simplemente apoyado
      2) voladizo (si corresponde): el tramo 0 se rehace con las primitivas de voladizo
      3) momentos de apoyo: par Mi (x=0) / -Mj (x=L) en cada tramo (salvo el voladizo)
      4) voladizo: giro de cuerpo rígido para igualar el giro del tramo 1 en el apoyo
      5) unidades: M -> kip·ft, V -> kip (θ en rad, y en in)
    """
    M_sup = np.asarray(M_sup, dtype=float)
    acc = _Accumulator(grid.n_samples, model.n_spans, model.EI)

    for j, L in enumerate(model.spans_in):
        x = grid.column(j)
        for ld in loads_on_span(loads, j):
            acc.add(j, simple_response(ld, L), x)

    if model.cantilever:
        L0 = model.spans_in[0]
        x0 = grid.column(0)
        acc.clear(0)
        for ld in loads_on_span(loads, 0):
            acc.add(0, left_cantilever_response(ld, L0, 0.0), x0)

    for j, L in enumerate(model.spans_in):
        if j == 0 and model.cantilever:
            continue
        x = grid.column(j)
        acc.add(j, simple_point_moment(M_sup[j], 0.0, L), x)
        acc.add(j, simple_point_moment(-M_sup[j + 1], L, L), x)

    if model.cantilever and model.n_spans > 1:
        fix = left_cant_rotation(acc.slope[0, 1], model.spans_in[0])
        x0 = grid.column(0)
        acc.slope[:, 0] += fix.EIs(x0)
        acc.defl[:, 0] += fix.EId(x0)
        logger.debug("Voladizo: giro de continuidad = %.6e rad", fix.slope)

    return DemandGrids(
        shear=frozen_array(lb_to_kip(acc.V)),
        moment=frozen_array(lbin_to_kipft(acc.M)),
        slope=frozen_array(acc.slope),
        deflection=frozen_array(acc.defl),
        x_ft=grid.global_ft,
    )
