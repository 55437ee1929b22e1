from __future__ import annotations

from typing import Optional

import numpy as np

EVEN_POLICIES = ("avg", "first", "last")


def _basic_simpson(y: np.ndarray, start: int, stop: int, x: Optional[np.ndarray], dx: float) -> float:
    """Simpson compuesto sobre los paneles [start, stop+2) de a dos intervalos."""
    if stop < start:
        return 0.0
    step = 2
    y0 = y[start:stop:step]
    y1 = y[start + 1:stop + 1:step]
    y2 = y[start + 2:stop + 2:step]

    if x is None:
        return float(np.sum(y0 + 4.0 * y1 + y2) * dx / 3.0)

    # paso variable
    h = np.diff(x)
    h0 = h[start:stop:step]
    h1 = h[start + 1:stop + 1:step]
    hsum = h0 + h1
    hprod = h0 * h1
    h0divh1 = h0 / h1
    tmp = hsum / 6.0 * (
        y0 * (2.0 - 1.0 / h0divh1)
        + y1 * hsum * hsum / hprod
        + y2 * (2.0 - h0divh1)
    )
    return float(np.sum(tmp))


def simpson(y, x=None, dx: float = 1.0, even: str = "avg") -> float:
    """
    Integral de y(x) por regla de Simpson compuesta.

    Con cantidad impar de muestras se aplica Simpson directo. Con cantidad par
    queda un intervalo suelto, que se resuelve con trapecio:
      - "first": Simpson sobre las primeras N-1 muestras + trapecio al final
      - "last":  trapecio al inicio + Simpson sobre las últimas N-1 muestras
      - "avg":   promedio de ambas

    x puede ser no uniforme; si es None se usa paso constante dx.
    """
    y = np.asarray(y, dtype=float)
    xa = None if x is None else np.asarray(x, dtype=float)
    if xa is not None and xa.shape != y.shape:
        raise ValueError(f"x e y deben tener la misma forma: {xa.shape} != {y.shape}")

    if even not in EVEN_POLICIES:
        raise ValueError(f"Parámetro 'even' inválido: {even!r} (debe ser 'avg', 'last' o 'first').")

    N = int(y.shape[0])
    if N < 2:
        return 0.0
    if N % 2 == 1:
        return _basic_simpson(y, 0, N - 2, xa, dx)

    val = 0.0
    result = 0.0
    if even in ("avg", "first"):
        last_dx = dx if xa is None else float(xa[-1] - xa[-2])
        val += 0.5 * last_dx * (y[-1] + y[-2])
        result = _basic_simpson(y, 0, N - 3, xa, dx)
    if even in ("avg", "last"):
        first_dx = dx if xa is None else float(xa[1] - xa[0])
        val += 0.5 * first_dx * (y[0] + y[1])
        result += _basic_simpson(y, 1, N - 2, xa, dx)
    if even == "avg":
        val /= 2.0
        result /= 2.0
    return float(result + val)
