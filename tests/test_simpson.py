import numpy as np
import pytest

from cont_beam.engine.simpson import simpson


def test_cubic_is_exact_on_odd_uniform_grid():
    x = np.linspace(0.0, 2.0, 11)
    y = 2.0 * x**3 - x**2 + 3.0 * x + 1.0
    exact = 8.0 - 8.0 / 3.0 + 6.0 + 2.0
    assert simpson(y, x) == pytest.approx(exact, abs=1e-9)
    assert simpson(y, dx=0.2) == pytest.approx(exact, abs=1e-9)


def test_quadratic_is_exact_on_irregular_grid():
    x = np.array([0.0, 0.1, 0.3, 0.6, 1.0])
    assert simpson(x**2, x) == pytest.approx(1.0 / 3.0, abs=1e-12)


@pytest.mark.parametrize("even", ["avg", "first", "last"])
def test_linear_is_exact_with_even_samples(even):
    x = np.linspace(0.0, 1.0, 6)
    assert simpson(3.0 * x + 1.0, x, even=even) == pytest.approx(2.5, abs=1e-12)


def test_avg_is_mean_of_first_and_last():
    x = np.linspace(0.0, 3.0, 8)
    y = np.sin(x) + x**3
    first = simpson(y, x, even="first")
    last = simpson(y, x, even="last")
    assert simpson(y, x, even="avg") == pytest.approx(0.5 * (first + last), rel=1e-12)


def test_two_samples_fall_back_to_trapezoid():
    assert simpson([1.0, 3.0], [0.0, 2.0]) == pytest.approx(4.0)


def test_invalid_even_policy():
    with pytest.raises(ValueError):
        simpson(np.ones(4), even="middle")
