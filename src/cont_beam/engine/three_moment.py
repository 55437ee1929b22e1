from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np
from scipy import linalg

from cont_beam.domain.beam import BeamModel
from cont_beam.domain.errors import IllConditionedSystemError
from cont_beam.domain.loads import Load, loads_on_span
from cont_beam.domain.results import SegmentGrid, SpanAreas, SupportMoments, frozen_array
from cont_beam.engine.primitives import left_cantilever_response, simple_response
from cont_beam.engine.simpson import simpson

logger = logging.getLogger(__name__)

SOLVE_METHODS = ("banded", "dense")
DEFAULT_COND_LIMIT = 1e12


# -------------------------
# Voladizo: momento en la raíz
# -------------------------
def cantilever_end_moment(model: BeamModel, loads: Sequence[Load]) -> float:
    """Suma de mr (voladizo izquierdo, sin tramo contiguo) de las cargas del tramo 0."""
    if not model.cantilever:
        return 0.0
    L0 = model.spans_in[0]
    return float(sum(left_cantilever_response(ld, L0, 0.0).mr for ld in loads_on_span(loads, 0)))


# -------------------------
# Momentos isostáticos por tramo
# -------------------------
def load_moments(model: BeamModel, grid: SegmentGrid, loads: Sequence[Load]) -> np.ndarray:
    """M(x) de cada tramo como simplemente apoyado, superponiendo sus cargas."""
    M = np.zeros((grid.n_samples, model.n_spans), dtype=float)
    for j, L in enumerate(model.spans_in):
        x = grid.column(j)
        for ld in loads_on_span(loads, j):
            M[:, j] += simple_response(ld, L).M(x)
    return M


def span_areas(model: BeamModel, grid: SegmentGrid, M_load: np.ndarray, *, even: str = "avg") -> SpanAreas:
    """
    Área A del diagrama isostático y su centroide:
      xL = ∫M·x dx / A (desde el apoyo izquierdo), xR = L - xL.
    Tramo sin carga (A == 0) => xL = xR = 0.
    """
    n = model.n_spans
    A = np.zeros(n)
    xL = np.zeros(n)
    xR = np.zeros(n)
    for j, L in enumerate(model.spans_in):
        x = grid.column(j)
        m = M_load[:, j]
        A[j] = simpson(m, x, even=even)
        if A[j] == 0:
            continue
        xL[j] = simpson(m * x, x, even=even) / A[j]
        xR[j] = L - xL[j]
    return SpanAreas(A=frozen_array(A), xL=frozen_array(xL), xR=frozen_array(xR))


# -------------------------
# Sistema de tres momentos
# -------------------------
def assemble_system(model: BeamModel, areas: SpanAreas, cantilever_moment: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Matriz F [(n+1)x(n+1)] y término independiente delta.

    Filas interiores j=1..n-1 (ecuación de tres momentos):
      L[j-1]/I·M[j-1] + 2(L[j-1]/I + L[j]/I)·M[j] + L[j]/I·M[j+1]
        = -6·xL[j-1]·A[j-1]/(L[j-1]·I) - 6·xR[j]·A[j]/(L[j]·I)

    Filas de borde (identidad):
      - sin voladizo: M[0] = 0, M[n] = 0
      - con voladizo: M[0] = 0 (extremo libre), M[1] = momento del voladizo, M[n] = 0
    """
    L = np.asarray(model.spans_in, dtype=float)
    I = float(model.I_in4)
    n = model.n_spans

    size = model.n_supports
    F = np.zeros((size, size), dtype=float)
    delta = np.zeros(size, dtype=float)

    for j in range(1, n):
        F[j, j - 1] = L[j - 1] / I
        F[j, j] = 2.0 * (L[j - 1] / I + L[j] / I)
        F[j, j + 1] = L[j] / I
        delta[j] = (
            -6.0 * areas.xL[j - 1] * areas.A[j - 1] / (L[j - 1] * I)
            - 6.0 * areas.xR[j] * areas.A[j] / (L[j] * I)
        )

    F[0, :] = 0.0
    F[0, 0] = 1.0
    F[n, :] = 0.0
    F[n, n] = 1.0
    delta[0] = 0.0
    delta[n] = 0.0

    if model.cantilever:
        F[1, :] = 0.0
        F[1, 1] = 1.0
        delta[1] = float(cantilever_moment)

    return F, delta


def _to_banded(F: np.ndarray) -> np.ndarray:
    """Forma (1, 1) de scipy.linalg.solve_banded para una matriz tridiagonal."""
    n = F.shape[0]
    ab = np.zeros((3, n), dtype=float)
    ab[0, 1:] = np.diag(F, 1)
    ab[1, :] = np.diag(F)
    ab[2, :-1] = np.diag(F, -1)
    return ab


def prescribed_rows(F: np.ndarray) -> np.ndarray:
    """Índices de las filas identidad (momento de apoyo impuesto)."""
    eye = np.eye(F.shape[0], dtype=float)
    return np.flatnonzero(np.all(F == eye, axis=1))


def solve_support_moments(
    F: np.ndarray,
    delta: np.ndarray,
    *,
    method: str = "banded",
    cond_limit: float = DEFAULT_COND_LIMIT,
) -> np.ndarray:
    """
    Resuelve F·M = delta.

    Las filas identidad no se factorizan: su valor se copia tal cual de delta y
    sus columnas pasan al término independiente; solo se resuelven las
    incógnitas restantes.
    """
    if method not in SOLVE_METHODS:
        raise ValueError(f"Método de resolución inválido: {method!r} (válidos: {', '.join(SOLVE_METHODS)}).")

    F = np.asarray(F, dtype=float)
    delta = np.asarray(delta, dtype=float)

    cond = float(np.linalg.cond(F))
    if not np.isfinite(cond) or cond > cond_limit:
        raise IllConditionedSystemError(
            f"Sistema de tres momentos mal condicionado (cond={cond:.3e}). Revisar longitudes de tramo."
        )

    known = prescribed_rows(F)
    free = np.setdiff1d(np.arange(F.shape[0]), known)

    M = np.zeros(F.shape[0], dtype=float)
    M[known] = delta[known]
    if free.size:
        Ff = F[np.ix_(free, free)]
        rhs = delta[free] - F[np.ix_(free, known)] @ delta[known]
        try:
            if method == "banded":
                M[free] = linalg.solve_banded((1, 1), _to_banded(Ff), rhs)
            else:
                M[free] = np.linalg.solve(Ff, rhs)
        except linalg.LinAlgError as exc:
            raise IllConditionedSystemError("Sistema de tres momentos singular.") from exc

    if not np.all(np.isfinite(M)):
        raise IllConditionedSystemError("Momentos de apoyo no finitos (inf/NaN).")
    return M


def support_moments(
    model: BeamModel,
    areas: SpanAreas,
    cantilever_moment: float = 0.0,
    *,
    method: str = "banded",
    cond_limit: float = DEFAULT_COND_LIMIT,
) -> SupportMoments:
    F, delta = assemble_system(model, areas, cantilever_moment)
    M = solve_support_moments(F, delta, method=method, cond_limit=cond_limit)
    logger.info("Momentos de apoyo [lb·in]: %s", np.array2string(M, precision=4))
    return SupportMoments(
        values=frozen_array(M),
        matrix=frozen_array(F),
        rhs=frozen_array(delta),
        cantilever_moment=float(cantilever_moment),
    )


# -------------------------
# Reacciones
# -------------------------
def simple_reactions(model: BeamModel, loads: Sequence[Load]) -> np.ndarray:
    """[2, n]: fila 0 reacción izquierda, fila 1 reacción derecha de cada tramo isostático."""
    r = np.zeros((2, model.n_spans), dtype=float)
    for j, L in enumerate(model.spans_in):
        for ld in loads_on_span(loads, j):
            resp = simple_response(ld, L)
            r[0, j] += resp.rl
            r[1, j] += resp.rr
    return r


def support_reactions(model: BeamModel, loads: Sequence[Load], M_sup: Sequence[float]) -> np.ndarray:
    """
    Reacción isostática + corrección por diferencia de momentos de apoyo:
      R[j] = rl[j] + rr[j-1] + (M[j+1] - M[j])/L[j] + (M[j-1] - M[j])/L[j-1]
    Los apoyos extremos usan solo el tramo adyacente.
    """
    L = model.spans_in
    n = model.n_spans
    M = np.asarray(M_sup, dtype=float)
    r = simple_reactions(model, loads)

    R: List[float] = []
    for j in range(n + 1):
        val = 0.0
        if j < n:
            val += r[0, j] - M[j] / L[j] + M[j + 1] / L[j]
        if j > 0:
            val += r[1, j - 1] - M[j] / L[j - 1] + M[j - 1] / L[j - 1]
        R.append(val)
    return np.asarray(R, dtype=float)
