from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from cont_beam.domain.errors import LoadInputError, UnknownSpanError

logger = logging.getLogger(__name__)


class LoadKind(str, Enum):
    POINT = "POINT"
    POINT_MOMENT = "POINT_MOMENT"
    UDL = "UDL"


# Convención (positivos):
#   - P, w hacia abajo
#   - M horario en el sentido del esquema original (salto + en M(x))
#   - posiciones locales al tramo: x=0 en el apoyo izquierdo del tramo

@dataclass(frozen=True)
class PointForce:
    span: int
    x_in: float
    P_lb: float
    kind: LoadKind = field(default=LoadKind.POINT, init=False)

    @property
    def resultant_lb(self) -> float:
        return float(self.P_lb)


@dataclass(frozen=True)
class PointMoment:
    span: int
    x_in: float
    M_lbin: float
    kind: LoadKind = field(default=LoadKind.POINT_MOMENT, init=False)

    @property
    def resultant_lb(self) -> float:
        return 0.0


@dataclass(frozen=True)
class DistUniform:
    """
    Distribuida uniforme sobre [x1_in, x2_in] del tramo.
    w2_lbin queda reservado para cargas trapezoidales; hoy solo se usa w_lbin.
    """
    span: int
    x1_in: float
    x2_in: float
    w_lbin: float
    w2_lbin: Optional[float] = None
    kind: LoadKind = field(default=LoadKind.UDL, init=False)

    @property
    def length_in(self) -> float:
        return float(self.x2_in) - float(self.x1_in)

    @property
    def resultant_lb(self) -> float:
        return float(self.w_lbin) * self.length_in

    @property
    def is_ramp(self) -> bool:
        return self.w2_lbin is not None and float(self.w2_lbin) != float(self.w_lbin)


Load = Union[PointForce, PointMoment, DistUniform]


def load_from_raw(raw: Sequence[object]) -> Load:
    """
    Convierte un descriptor crudo {magnitud, magnitud_dup, inicio, fin, tipo, tramo}:

      (P, P, a, a, "POINT", span)
      (M, M, a, a, "POINT_MOMENT", span)
      (w, w, a, b, "UDL", span)
    """
    if isinstance(raw, (str, bytes)) or len(raw) != 6:
        raise LoadInputError(f"Descriptor de carga inválido (se esperan 6 campos): {raw!r}")

    mag, mag_dup, start, end, kind_token, span = raw
    try:
        kind = LoadKind(str(kind_token).strip().upper())
    except ValueError as exc:
        raise LoadInputError(
            f"Tipo de carga desconocido: {kind_token!r} (válidos: POINT, POINT_MOMENT, UDL)."
        ) from exc

    try:
        span_idx = int(span)
        mag = float(mag)
        mag_dup = float(mag_dup)
        start = float(start)
        end = float(end)
    except (TypeError, ValueError) as exc:
        raise LoadInputError(f"Descriptor de carga con valores no numéricos: {raw!r}") from exc

    if kind is LoadKind.POINT:
        return PointForce(span=span_idx, x_in=start, P_lb=mag)
    if kind is LoadKind.POINT_MOMENT:
        return PointMoment(span=span_idx, x_in=start, M_lbin=mag)
    return DistUniform(span=span_idx, x1_in=start, x2_in=end, w_lbin=mag, w2_lbin=mag_dup)


def coerce_loads(items: Iterable[Union[Load, Sequence[object]]]) -> List[Load]:
    """Acepta variantes tipadas o descriptores crudos (mezclados)."""
    out: List[Load] = []
    for it in items:
        if isinstance(it, (PointForce, PointMoment, DistUniform)):
            load = it
        else:
            load = load_from_raw(it)
        if isinstance(load, DistUniform) and load.is_ramp:
            logger.warning(
                "Carga trapezoidal no soportada en tramo %d: se usa w=%g (se ignora w2=%g).",
                load.span, load.w_lbin, load.w2_lbin,
            )
        out.append(load)
    return out


def validate_spans(loads: Iterable[Load], n_spans: int) -> None:
    for ld in loads:
        if not 0 <= int(ld.span) < n_spans:
            raise UnknownSpanError(int(ld.span), n_spans)


def loads_on_span(loads: Iterable[Load], span: int) -> List[Load]:
    return [ld for ld in loads if ld.span == span]


def total_vertical_load(loads: Iterable[Load]) -> float:
    return float(sum(ld.resultant_lb for ld in loads))
