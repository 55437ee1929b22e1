from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from cont_beam.domain.errors import BeamInputError


@dataclass(frozen=True)
class BeamModel:
    """
    Viga continua prismática: E e I constantes en todos los tramos.

    Unidades de entrada:
      - depth_in, width_in: in (informativos, no entran en el cálculo)
      - E_psi: psi
      - I_in4: in^4
      - spans_in: longitudes de tramo en in (tramo 0 = izquierda)

    cantilever=True => el tramo 0 se analiza como voladizo (extremo libre en x=0,
    empotramiento/continuidad en el apoyo 1).

    segments: cantidad de subintervalos por tramo (muestras = segments + 1).
    """
    depth_in: float
    width_in: float
    E_psi: float
    I_in4: float
    spans_in: Tuple[float, ...]
    cantilever: bool = False
    segments: int = 50

    def __post_init__(self):
        spans = tuple(float(s) for s in self.spans_in)
        object.__setattr__(self, "spans_in", spans)
        object.__setattr__(self, "cantilever", bool(self.cantilever))

        if not spans:
            raise BeamInputError("La viga necesita al menos un tramo.")
        for j, L in enumerate(spans):
            if not L > 0.0:
                raise BeamInputError(f"Longitud de tramo inválida: spans_in[{j}]={L:g} (debe ser > 0).")
        if int(self.segments) != self.segments or self.segments < 2:
            raise BeamInputError(f"segments={self.segments!r} inválido (entero >= 2).")
        object.__setattr__(self, "segments", int(self.segments))
        if not float(self.E_psi) > 0.0 or not float(self.I_in4) > 0.0:
            raise BeamInputError("E e I deben ser positivos.")

    @classmethod
    def build(
        cls,
        *,
        depth_in: float,
        width_in: float,
        E_psi: float,
        I_in4: float,
        spans_in: Sequence[float],
        cantilever: bool = False,
        segments: int = 50,
    ) -> "BeamModel":
        return cls(
            depth_in=float(depth_in),
            width_in=float(width_in),
            E_psi=float(E_psi),
            I_in4=float(I_in4),
            spans_in=tuple(spans_in),
            cantilever=cantilever,
            segments=segments,
        )

    @property
    def n_spans(self) -> int:
        return len(self.spans_in)

    @property
    def n_supports(self) -> int:
        return len(self.spans_in) + 1

    @property
    def n_samples(self) -> int:
        return self.segments + 1

    @property
    def EI(self) -> float:
        return float(self.E_psi) * float(self.I_in4)

    @property
    def cumulative_in(self) -> Tuple[float, ...]:
        """Suma acumulada de tramos: (L0, L0+L1, ...)."""
        out = []
        acc = 0.0
        for L in self.spans_in:
            acc += L
            out.append(acc)
        return tuple(out)
