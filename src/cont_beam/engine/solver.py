from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from cont_beam.domain.beam import BeamModel
from cont_beam.domain.loads import Load, coerce_loads, total_vertical_load, validate_spans
from cont_beam.domain.results import DemandGrids, SegmentGrid, SpanAreas, SupportMoments, frozen_array
from cont_beam.engine.demand import compose_demand
from cont_beam.engine.segments import build_segments
from cont_beam.engine.three_moment import (
    DEFAULT_COND_LIMIT,
    cantilever_end_moment,
    load_moments,
    span_areas,
    support_moments,
    support_reactions,
)

logger = logging.getLogger(__name__)


class SolverStage(IntEnum):
    NOT_STARTED = 0
    SEGMENTED = 1
    CANTILEVER_MOMENT_KNOWN = 2
    LOAD_MOMENTS_KNOWN = 3
    SUPPORT_MOMENTS_KNOWN = 4
    SUPPORT_REACTIONS_KNOWN = 5


class BeamSolver:
    """
    Viga continua por el teorema de los tres momentos.

    Cada accesor dispara solo las etapas que faltan y el resultado queda
    cacheado (una instancia = un análisis, no se reutiliza con otros datos):

      segmentos -> momento del voladizo -> momentos isostáticos
        -> momentos de apoyo -> reacciones
      momentos de apoyo -> diagramas (V, M, θ, y)

    No es thread-safe: serializar el acceso si se comparte la instancia.
    """

    def __init__(
        self,
        model: BeamModel,
        loads: Iterable[Union[Load, Sequence[object]]],
        *,
        even: str = "avg",
        method: str = "banded",
        cond_limit: float = DEFAULT_COND_LIMIT,
    ):
        self._model = model
        self._loads: List[Load] = coerce_loads(loads)
        validate_spans(self._loads, model.n_spans)

        self._even = even
        self._method = method
        self._cond_limit = float(cond_limit)

        self._stage = SolverStage.NOT_STARTED
        self._segments: Optional[SegmentGrid] = None
        self._cantilever_moment: Optional[float] = None
        self._load_moments: Optional[np.ndarray] = None
        self._areas: Optional[SpanAreas] = None
        self._support_moments: Optional[SupportMoments] = None
        self._support_reactions: Optional[np.ndarray] = None
        self._demand: Optional[DemandGrids] = None

        logger.debug(
            "BeamSolver: %d tramos, %d cargas, voladizo=%s, segmentos=%d",
            model.n_spans, len(self._loads), model.cantilever, model.segments,
        )

    @classmethod
    def from_dimensions(
        cls,
        beam_depth: float,
        beam_width: float,
        beam_modulus: float,
        beam_moment_of_inertia: float,
        beam_spans: Sequence[float],
        beam_loads: Iterable[Union[Load, Sequence[object]]],
        cantilever: bool = False,
        segments: int = 50,
        **options,
    ) -> "BeamSolver":
        """Entrada escalar (in, psi, in^4) + descriptores de carga, como la arma el llamador."""
        model = BeamModel.build(
            depth_in=beam_depth,
            width_in=beam_width,
            E_psi=beam_modulus,
            I_in4=beam_moment_of_inertia,
            spans_in=beam_spans,
            cantilever=cantilever,
            segments=segments,
        )
        return cls(model, beam_loads, **options)

    # -------------------------
    # Etapas
    # -------------------------
    def _ensure(self, stage: SolverStage) -> None:
        while self._stage < stage:
            nxt = SolverStage(self._stage + 1)
            self._run(nxt)
            self._stage = nxt
            logger.debug("Etapa completada: %s", nxt.name)

    def _run(self, stage: SolverStage) -> None:
        m = self._model
        if stage is SolverStage.SEGMENTED:
            self._segments = build_segments(m)
        elif stage is SolverStage.CANTILEVER_MOMENT_KNOWN:
            self._cantilever_moment = cantilever_end_moment(m, self._loads)
        elif stage is SolverStage.LOAD_MOMENTS_KNOWN:
            self._load_moments = frozen_array(load_moments(m, self._segments, self._loads))
        elif stage is SolverStage.SUPPORT_MOMENTS_KNOWN:
            self._areas = span_areas(m, self._segments, self._load_moments, even=self._even)
            self._support_moments = support_moments(
                m, self._areas, self._cantilever_moment,
                method=self._method, cond_limit=self._cond_limit,
            )
        elif stage is SolverStage.SUPPORT_REACTIONS_KNOWN:
            R = support_reactions(m, self._loads, self._support_moments.values)
            self._support_reactions = frozen_array(R)
            logger.info(
                "Reacciones [lb]: %s | residuo ΣR - ΣP = %.3e",
                np.array2string(R, precision=4), float(np.sum(R)) - self.total_load,
            )

    # -------------------------
    # Salidas
    # -------------------------
    @property
    def model(self) -> BeamModel:
        return self._model

    @property
    def loads(self) -> List[Load]:
        return list(self._loads)

    @property
    def stage(self) -> SolverStage:
        return self._stage

    @property
    def segment_grid(self) -> SegmentGrid:
        self._ensure(SolverStage.SEGMENTED)
        return self._segments

    @property
    def beam_segments(self) -> np.ndarray:
        """Grilla global [muestra, tramo] en ft."""
        return self.segment_grid.global_ft

    @property
    def cantilever_moment(self) -> float:
        self._ensure(SolverStage.CANTILEVER_MOMENT_KNOWN)
        return self._cantilever_moment

    @property
    def load_moments(self) -> np.ndarray:
        self._ensure(SolverStage.LOAD_MOMENTS_KNOWN)
        return self._load_moments

    @property
    def span_areas(self) -> SpanAreas:
        self._ensure(SolverStage.SUPPORT_MOMENTS_KNOWN)
        return self._areas

    @property
    def support_moment_system(self) -> SupportMoments:
        self._ensure(SolverStage.SUPPORT_MOMENTS_KNOWN)
        return self._support_moments

    @property
    def support_moments(self) -> np.ndarray:
        """Momentos de apoyo [lb·in], n+1 valores."""
        return self.support_moment_system.values

    @property
    def support_reactions(self) -> np.ndarray:
        """Reacciones de apoyo [lb], n+1 valores."""
        self._ensure(SolverStage.SUPPORT_REACTIONS_KNOWN)
        return self._support_reactions

    @property
    def demand(self) -> DemandGrids:
        if self._demand is None:
            self._ensure(SolverStage.SUPPORT_MOMENTS_KNOWN)
            self._demand = compose_demand(
                self._model, self._segments, self._loads, self._support_moments.values,
            )
        return self._demand

    @property
    def total_load(self) -> float:
        return total_vertical_load(self._loads)

    @property
    def reaction_residual(self) -> float:
        """ΣR - ΣP (debería ser ~0)."""
        return float(np.sum(self.support_reactions) - self.total_load)
