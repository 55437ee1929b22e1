import numpy as np
import pytest

from cont_beam.domain.beam import BeamModel
from cont_beam.engine.segments import build_segments, global_segments


def _model(spans, segments=4):
    return BeamModel.build(depth_in=3.5, width_in=1.5, E_psi=1.6e6, I_in4=5.36, spans_in=spans, segments=segments)


def test_local_grid_is_evenly_spaced_per_span():
    grid = build_segments(_model([10.0, 20.0], segments=4))
    assert grid.local_in.shape == (5, 2)
    np.testing.assert_allclose(grid.local_in[:, 0], [0.0, 2.5, 5.0, 7.5, 10.0])
    np.testing.assert_allclose(grid.local_in[:, 1], [0.0, 5.0, 10.0, 15.0, 20.0])


def test_global_grid_is_cumulative_and_in_feet():
    grid = build_segments(_model([12.0, 24.0, 36.0], segments=2))
    np.testing.assert_allclose(grid.global_ft[:, 0], [0.0, 0.5, 1.0])
    np.testing.assert_allclose(grid.global_ft[:, 1], [1.0, 2.0, 3.0])
    np.testing.assert_allclose(grid.global_ft[:, 2], [3.0, 4.5, 6.0])


def test_grids_are_read_only():
    grid = build_segments(_model([10.0]))
    with pytest.raises(ValueError):
        grid.local_in[0, 0] = 1.0
    with pytest.raises(ValueError):
        grid.global_ft[0, 0] = 1.0


def test_global_offsets_follow_cumulative_lengths():
    model = _model([12.0, 24.0, 36.0], segments=2)
    assert model.cumulative_in == (12.0, 36.0, 72.0)
    np.testing.assert_allclose(
        global_segments(np.zeros((3, 3)), model.cumulative_in)[0],
        [0.0, 1.0, 3.0],
    )
