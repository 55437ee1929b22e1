from __future__ import annotations

from typing import Protocol, Sequence, Tuple, Union

import numpy as np

Positions = Union[float, Sequence[float], np.ndarray]


class LoadResponse(Protocol):
    """
    Respuesta de una carga aislada sobre un tramo, en función de x (desde el
    extremo izquierdo del tramo):

      V(x)   corte
      M(x)   momento flector
      EIs(x) EI·θ (giro por rigidez)
      EId(x) EI·y (flecha por rigidez)

    Aceptan un escalar (devuelven float) o una secuencia (devuelven ndarray).
    """

    def V(self, x: Positions): ...

    def M(self, x: Positions): ...

    def EIs(self, x: Positions): ...

    def EId(self, x: Positions): ...


def _as_positions(x: Positions) -> Tuple[np.ndarray, bool]:
    arr = np.asarray(x, dtype=float)
    return np.atleast_1d(arr), arr.ndim == 0


class PiecewiseEval:
    """
    Adaptador escalar/vector. Cada primitiva implementa los evaluadores
    vectorizados _V_array, _M_array, _EIs_array y _EId_array.
    """

    def _eval(self, fn, x: Positions):
        xs, scalar = _as_positions(x)
        out = np.asarray(fn(xs), dtype=float)
        if out.shape != xs.shape:
            out = np.broadcast_to(out, xs.shape).copy()
        if scalar:
            return float(out[0])
        return out

    def V(self, x: Positions):
        return self._eval(self._V_array, x)

    def M(self, x: Positions):
        return self._eval(self._M_array, x)

    def EIs(self, x: Positions):
        return self._eval(self._EIs_array, x)

    def EId(self, x: Positions):
        return self._eval(self._EId_array, x)
