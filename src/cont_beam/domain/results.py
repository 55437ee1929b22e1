from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np


def frozen_array(a) -> np.ndarray:
    """Copia de solo lectura (los resultados cacheados no se pisan desde afuera)."""
    out = np.array(a, dtype=float, copy=True)
    out.setflags(write=False)
    return out


@dataclass(frozen=True)
class SegmentGrid:
    """
    Posiciones de evaluación [muestra, tramo].
      - local_in: 0..L de cada tramo (in). Se usa en todos los cálculos.
      - global_ft: coordenada continua sobre toda la viga, en ft (solo para salida).
    """
    local_in: np.ndarray
    global_ft: np.ndarray

    @property
    def n_samples(self) -> int:
        return int(self.local_in.shape[0])

    @property
    def n_spans(self) -> int:
        return int(self.local_in.shape[1])

    def column(self, span: int) -> np.ndarray:
        return self.local_in[:, span]


@dataclass(frozen=True)
class SpanAreas:
    """Área del diagrama de momentos isostático y posición de su centroide, por tramo."""
    A: np.ndarray
    xL: np.ndarray   # centroide medido desde el apoyo izquierdo
    xR: np.ndarray   # centroide medido desde el apoyo derecho (L - xL)


@dataclass(frozen=True)
class SupportMoments:
    values: np.ndarray       # lb·in, un valor por apoyo
    matrix: np.ndarray       # matriz de flexibilidad (tres momentos)
    rhs: np.ndarray
    cantilever_moment: float


@dataclass(frozen=True)
class DemandExtreme:
    diagram: str   # "shear" | "moment" | "slope" | "deflection"
    kind: str      # "max" | "min"
    span: int
    x_ft: float
    value: float


_DIAGRAMS = ("shear", "moment", "slope", "deflection")


@dataclass(frozen=True)
class DemandGrids:
    """
    Diagramas finales [muestra, tramo]:
      - shear: kip
      - moment: kip·ft
      - slope: rad
      - deflection: in
    x_ft: grilla global (ft) asociada a cada muestra.
    """
    shear: np.ndarray
    moment: np.ndarray
    slope: np.ndarray
    deflection: np.ndarray
    x_ft: np.ndarray

    def as_tuple(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        return self.shear, self.moment, self.slope, self.deflection

    def extremes(self) -> List[DemandExtreme]:
        """Máximo y mínimo de cada diagrama, con tramo y posición global."""
        out: List[DemandExtreme] = []
        for name in _DIAGRAMS:
            grid = getattr(self, name)
            for kind, flat_idx in (("max", int(np.argmax(grid))), ("min", int(np.argmin(grid)))):
                i, j = np.unravel_index(flat_idx, grid.shape)
                out.append(DemandExtreme(
                    diagram=name,
                    kind=kind,
                    span=int(j),
                    x_ft=float(self.x_ft[i, j]),
                    value=float(grid[i, j]),
                ))
        return out
