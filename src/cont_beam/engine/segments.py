from __future__ import annotations

import numpy as np

from cont_beam.domain.beam import BeamModel
from cont_beam.domain.results import SegmentGrid, frozen_array
from cont_beam.domain.units import in_to_ft


def local_segments(spans_in, segments: int) -> np.ndarray:
    """segments+1 posiciones equiespaciadas 0..L por tramo -> [muestra, tramo] (in)."""
    spans = np.asarray(spans_in, dtype=float)
    grid = np.empty((int(segments) + 1, spans.size), dtype=float)
    for j, L in enumerate(spans):
        grid[:, j] = np.linspace(0.0, L, int(segments) + 1)
    return grid


def global_segments(local_in: np.ndarray, cumulative_in) -> np.ndarray:
    """Desplaza cada tramo por la suma de los anteriores (cumulative_in = L0, L0+L1, ...) y pasa a ft."""
    offsets = np.concatenate(([0.0], np.asarray(cumulative_in, dtype=float)[:-1]))
    return in_to_ft(local_in + offsets[None, :])


def build_segments(model: BeamModel) -> SegmentGrid:
    local = local_segments(model.spans_in, model.segments)
    return SegmentGrid(
        local_in=frozen_array(local),
        global_ft=frozen_array(global_segments(local, model.cumulative_in)),
    )
