from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cont_beam.engine.response import PiecewiseEval
from cont_beam.engine.simple_span import simple_point_moment

# Voladizos.
#
# Izquierdo (tramo inicial): extremo libre en x=0, raíz en x=L.
#   rr, mr: reacción y momento en la raíz.
#   Lb=0  -> giro y flecha nulos en la raíz.
#   Lb>0  -> el giro en la raíz es el del tramo contiguo (simplemente apoyado,
#            longitud Lb) cargado con mr en su extremo izquierdo.
#
# Derecho (tramo final): raíz en x=0, extremo libre en x=L.
#   rl, ml: reacción y momento en la raíz.
#   Lb>0  -> el giro en la raíz es el del tramo anterior cargado con -ml en su
#            extremo derecho.


def _left_root_rotation(mr: float, Lb: float) -> float:
    if Lb == 0:
        return 0.0
    return simple_point_moment(mr, 0.0, Lb).EIs(0.0)


def _right_root_rotation(ml: float, Lb: float) -> float:
    if Lb == 0:
        return 0.0
    return simple_point_moment(-ml, Lb, Lb).EIs(Lb)


# =============================================================================
# Voladizo izquierdo
# =============================================================================
@dataclass(frozen=True)
class LeftCantPointForceConstants:
    rr: float
    mr: float
    c1: float
    c2: float
    c3: float
    c4: float


def left_cant_point_force_constants(P: float, a: float, L: float, Lb: float) -> LeftCantPointForceConstants:
    rr = P
    mr = -P * (L - a)
    c3 = _left_root_rotation(mr, Lb) + 0.5 * P * (L - a) ** 2
    c4 = P * (L - a) ** 3 / 6.0 - c3 * L
    c1 = c3
    c2 = c3 * a + c4 - c1 * a
    return LeftCantPointForceConstants(rr=rr, mr=mr, c1=c1, c2=c2, c3=c3, c4=c4)


@dataclass(frozen=True)
class LeftCantPointForce(PiecewiseEval):
    P: float
    a: float
    L: float
    Lb: float
    k: LeftCantPointForceConstants

    @property
    def rr(self) -> float:
        return self.k.rr

    @property
    def mr(self) -> float:
        return self.k.mr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x <= self.a, 0.0, -self.P)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x <= self.a, 0.0, -self.P * (x - self.a))

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.c1, -0.5 * self.P * (x - self.a) ** 2 + k.c3)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.c1 * x + k.c2,
            -self.P * (x - self.a) ** 3 / 6.0 + k.c3 * x + k.c4,
        )


def left_cant_point_force(P: float, a: float, L: float, Lb: float = 0.0) -> LeftCantPointForce:
    P, a, L, Lb = float(P), float(a), float(L), float(Lb)
    return LeftCantPointForce(P=P, a=a, L=L, Lb=Lb, k=left_cant_point_force_constants(P, a, L, Lb))


@dataclass(frozen=True)
class LeftCantPointMomentConstants:
    rr: float
    mr: float
    c1: float
    c2: float
    c3: float
    c4: float


def left_cant_point_moment_constants(Ma: float, a: float, L: float, Lb: float) -> LeftCantPointMomentConstants:
    rr = 0.0
    mr = Ma
    c3 = _left_root_rotation(mr, Lb) - Ma * L
    c4 = -0.5 * Ma * L**2 - c3 * L
    c1 = Ma * a + c3
    c2 = 0.5 * Ma * a**2 + c3 * a + c4 - c1 * a
    return LeftCantPointMomentConstants(rr=rr, mr=mr, c1=c1, c2=c2, c3=c3, c4=c4)


@dataclass(frozen=True)
class LeftCantPointMoment(PiecewiseEval):
    Ma: float
    a: float
    L: float
    Lb: float
    k: LeftCantPointMomentConstants

    @property
    def rr(self) -> float:
        return self.k.rr

    @property
    def mr(self) -> float:
        return self.k.mr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x <= self.a, 0.0, self.Ma)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.c1, self.Ma * x + k.c3)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.c1 * x + k.c2, 0.5 * self.Ma * x**2 + k.c3 * x + k.c4)


def left_cant_point_moment(Ma: float, a: float, L: float, Lb: float = 0.0) -> LeftCantPointMoment:
    Ma, a, L, Lb = float(Ma), float(a), float(L), float(Lb)
    return LeftCantPointMoment(Ma=Ma, a=a, L=L, Lb=Lb, k=left_cant_point_moment_constants(Ma, a, L, Lb))


@dataclass(frozen=True)
class LeftCantDistUniformConstants:
    W: float     # resultante w·(b-a)
    xc: float    # posición de la resultante
    rr: float
    mr: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float
    c6: float


def left_cant_dist_uniform_constants(w: float, a: float, b: float, L: float, Lb: float) -> LeftCantDistUniformConstants:
    c = b - a
    W = w * c
    xc = a + 0.5 * c
    rr = W
    mr = -W * (L - xc)
    c5 = _left_root_rotation(mr, Lb) + 0.5 * W * (L - xc) ** 2
    c6 = W * (L - xc) ** 3 / 6.0 - c5 * L
    c3 = -0.5 * W * (b - xc) ** 2 + c5 + w * c**3 / 6.0
    c1 = c3
    c4 = -W * (b - xc) ** 3 / 6.0 + c5 * b + c6 + w * c**4 / 24.0 - c3 * b
    c2 = c3 * a + c4 - c1 * a
    return LeftCantDistUniformConstants(W=W, xc=xc, rr=rr, mr=mr, c1=c1, c2=c2, c3=c3, c4=c4, c5=c5, c6=c6)


@dataclass(frozen=True)
class LeftCantDistUniform(PiecewiseEval):
    w: float
    a: float
    b: float
    L: float
    Lb: float
    k: LeftCantDistUniformConstants

    @property
    def rr(self) -> float:
        return self.k.rr

    @property
    def mr(self) -> float:
        return self.k.mr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(
            x <= self.a,
            0.0,
            np.where(x <= self.b, -self.w * (x - self.a), -self.k.W),
        )

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            0.0,
            np.where(x <= self.b, -0.5 * self.w * (x - self.a) ** 2, -k.W * (x - k.xc)),
        )

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.c1,
            np.where(
                x <= self.b,
                -self.w * (x - self.a) ** 3 / 6.0 + k.c3,
                -0.5 * k.W * (x - k.xc) ** 2 + k.c5,
            ),
        )

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.c1 * x + k.c2,
            np.where(
                x <= self.b,
                -self.w * (x - self.a) ** 4 / 24.0 + k.c3 * x + k.c4,
                -k.W * (x - k.xc) ** 3 / 6.0 + k.c5 * x + k.c6,
            ),
        )


def left_cant_dist_uniform(w: float, a: float, b: float, L: float, Lb: float = 0.0) -> LeftCantDistUniform:
    w, a, b, L, Lb = float(w), float(a), float(b), float(L), float(Lb)
    return LeftCantDistUniform(w=w, a=a, b=b, L=L, Lb=Lb, k=left_cant_dist_uniform_constants(w, a, b, L, Lb))


@dataclass(frozen=True)
class LeftCantRotation(PiecewiseEval):
    """
    Corrección sin carga: giro uniforme `slope` y flecha lineal que se anula en
    la raíz (x=L). Se suma tal cual (sin dividir por EI) para igualar el giro en
    la raíz del voladizo con el del tramo contiguo.
    """
    slope: float
    L: float

    rr = 0.0
    mr = 0.0

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        return np.full_like(x, self.slope, dtype=float)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        return self.slope * x - self.slope * self.L


def left_cant_rotation(slope: float, L: float) -> LeftCantRotation:
    return LeftCantRotation(slope=float(slope), L=float(L))


# =============================================================================
# Voladizo derecho
# =============================================================================
@dataclass(frozen=True)
class RightCantPointForceConstants:
    rl: float
    ml: float
    c1: float
    c2: float
    c3: float
    c4: float


def right_cant_point_force_constants(P: float, a: float, L: float, Lb: float) -> RightCantPointForceConstants:
    rl = P
    ml = -P * a
    c1 = _right_root_rotation(ml, Lb)
    c2 = 0.0
    c3 = 0.5 * rl * a**2 + ml * a + c1
    c4 = -c3 * a + rl * a**3 / 6.0 + 0.5 * ml * a**2 + c1 * a + c2
    return RightCantPointForceConstants(rl=rl, ml=ml, c1=c1, c2=c2, c3=c3, c4=c4)


@dataclass(frozen=True)
class RightCantPointForce(PiecewiseEval):
    P: float
    a: float
    L: float
    Lb: float
    k: RightCantPointForceConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def ml(self) -> float:
        return self.k.ml

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        V = np.where(x <= self.a, self.P, 0.0)
        if self.a == 0.0:
            V = np.where(x == 0.0, 0.0, V)
        return V

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.rl * x + k.ml, 0.0)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, 0.5 * k.rl * x**2 + k.ml * x + k.c1, k.c3)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x**3 / 6.0 + 0.5 * k.ml * x**2 + k.c1 * x + k.c2,
            k.c3 * x + k.c4,
        )


def right_cant_point_force(P: float, a: float, L: float, Lb: float = 0.0) -> RightCantPointForce:
    P, a, L, Lb = float(P), float(a), float(L), float(Lb)
    return RightCantPointForce(P=P, a=a, L=L, Lb=Lb, k=right_cant_point_force_constants(P, a, L, Lb))


@dataclass(frozen=True)
class RightCantPointMomentConstants:
    rl: float
    ml: float
    c1: float
    c2: float
    c3: float
    c4: float


def right_cant_point_moment_constants(Ma: float, a: float, L: float, Lb: float) -> RightCantPointMomentConstants:
    rl = 0.0
    ml = -Ma
    c1 = _right_root_rotation(ml, Lb)
    c2 = 0.0
    c3 = ml * a + c1
    c4 = 0.5 * ml * a**2 + c1 * a + c2 - c3 * a
    return RightCantPointMomentConstants(rl=rl, ml=ml, c1=c1, c2=c2, c3=c3, c4=c4)


@dataclass(frozen=True)
class RightCantPointMoment(PiecewiseEval):
    Ma: float
    a: float
    L: float
    Lb: float
    k: RightCantPointMomentConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def ml(self) -> float:
        return self.k.ml

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x <= self.a, self.k.ml, 0.0)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.ml * x + k.c1, k.c3)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, 0.5 * k.ml * x**2 + k.c1 * x + k.c2, k.c3 * x + k.c4)


def right_cant_point_moment(Ma: float, a: float, L: float, Lb: float = 0.0) -> RightCantPointMoment:
    Ma, a, L, Lb = float(Ma), float(a), float(L), float(Lb)
    return RightCantPointMoment(Ma=Ma, a=a, L=L, Lb=Lb, k=right_cant_point_moment_constants(Ma, a, L, Lb))


@dataclass(frozen=True)
class RightCantDistUniformConstants:
    W: float
    rl: float
    ml: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float
    c6: float


def right_cant_dist_uniform_constants(w: float, a: float, b: float, L: float, Lb: float) -> RightCantDistUniformConstants:
    c = b - a
    W = w * c
    rl = W
    ml = -W * (b - c / 2.0)
    c1 = _right_root_rotation(ml, Lb)
    c2 = 0.0
    c3 = c1
    c4 = c1 * a + c2 - c3 * a
    c5 = 0.5 * W * b**2 + ml * b - w * c**3 / 6.0 + c3
    c6 = W * b**3 / 6.0 + 0.5 * ml * b**2 - w * c**4 / 24.0 + c3 * b + c4 - c5 * b
    return RightCantDistUniformConstants(W=W, rl=rl, ml=ml, c1=c1, c2=c2, c3=c3, c4=c4, c5=c5, c6=c6)


@dataclass(frozen=True)
class RightCantDistUniform(PiecewiseEval):
    w: float
    a: float
    b: float
    L: float
    Lb: float
    k: RightCantDistUniformConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def ml(self) -> float:
        return self.k.ml

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl,
            np.where(x <= self.b, k.rl - self.w * (x - self.a), 0.0),
        )

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x + k.ml,
            np.where(x <= self.b, k.rl * x + k.ml - 0.5 * self.w * (x - self.a) ** 2, 0.0),
        )

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            0.5 * k.rl * x**2 + k.ml * x + k.c1,
            np.where(
                x <= self.b,
                0.5 * k.rl * x**2 + k.ml * x - self.w * (x - self.a) ** 3 / 6.0 + k.c3,
                k.c5,
            ),
        )

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x**3 / 6.0 + 0.5 * k.ml * x**2 + k.c1 * x + k.c2,
            np.where(
                x <= self.b,
                k.rl * x**3 / 6.0 + 0.5 * k.ml * x**2 - self.w * (x - self.a) ** 4 / 24.0 + k.c3 * x + k.c4,
                k.c5 * x + k.c6,
            ),
        )


def right_cant_dist_uniform(w: float, a: float, b: float, L: float, Lb: float = 0.0) -> RightCantDistUniform:
    w, a, b, L, Lb = float(w), float(a), float(b), float(L), float(Lb)
    return RightCantDistUniform(w=w, a=a, b=b, L=L, Lb=Lb, k=right_cant_dist_uniform_constants(w, a, b, L, Lb))


@dataclass(frozen=True)
class RightCantRotation(PiecewiseEval):
    """Corrección sin carga: giro uniforme y flecha nula en la raíz (x=0)."""
    slope: float

    rl = 0.0
    ml = 0.0

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        return np.full_like(x, self.slope, dtype=float)

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        return self.slope * x


def right_cant_rotation(slope: float) -> RightCantRotation:
    return RightCantRotation(slope=float(slope))
