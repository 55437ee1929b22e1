from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cont_beam.engine.response import PiecewiseEval

# Tramo simplemente apoyado, carga aislada.
# Convención: V = dM/dx, M + (tracción abajo), EI·y'' = M, EI·y(0) = EI·y(L) = 0.
# Las constantes de integración se obtienen imponiendo continuidad de giro y
# flecha en los puntos de aplicación (a, b) y flecha nula en ambos apoyos.


# -------------------------
# Carga puntual P en x=a
# -------------------------
@dataclass(frozen=True)
class PointForceConstants:
    rl: float
    rr: float
    c1: float
    c2: float
    c4: float


def point_force_constants(P: float, a: float, L: float) -> PointForceConstants:
    b = L - a
    rl = P * b / L
    rr = P * a / L
    c4 = -rl * a**3 / 3.0 - rr * a**3 / 3.0 + rr * L * a**2 / 2.0
    c2 = -1.0 / L * (c4 + rr * L**3 / 3.0)
    c1 = -rr * a**2 / 2.0 - rl * a**2 / 2.0 + rr * L * a + c2
    return PointForceConstants(rl=rl, rr=rr, c1=c1, c2=c2, c4=c4)


@dataclass(frozen=True)
class SimplePointForce(PiecewiseEval):
    P: float
    a: float
    L: float
    k: PointForceConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def rr(self) -> float:
        return self.k.rr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        V = np.where(x <= self.a, self.k.rl, -self.k.rr)
        if self.a == 0.0:
            # carga sobre el apoyo: el corte arranca en cero
            V = np.where(x == 0.0, 0.0, V)
        return V

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(x <= self.a, k.rl * x, -k.rr * x + k.rr * self.L)

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x**2 / 2.0 + k.c1,
            -k.rr * x**2 / 2.0 + k.rr * self.L * x + k.c2,
        )

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x**3 / 6.0 + k.c1 * x,
            -k.rr * x**3 / 6.0 + k.rr * self.L * x**2 / 2.0 + k.c2 * x + k.c4,
        )


def simple_point_force(P: float, a: float, L: float) -> SimplePointForce:
    P, a, L = float(P), float(a), float(L)
    return SimplePointForce(P=P, a=a, L=L, k=point_force_constants(P, a, L))


# -------------------------
# Momento puntual Ma en x=a
# -------------------------
@dataclass(frozen=True)
class PointMomentConstants:
    rl: float
    rr: float
    c1: float
    c2: float
    c3: float
    c4: float


def point_moment_constants(Ma: float, a: float, L: float) -> PointMomentConstants:
    rr = Ma / L
    rl = -rr
    c2 = -1.0 / L * (Ma * a**2 - 0.5 * Ma * a**2 + rl * L**3 / 6.0 + 0.5 * Ma * L**2)
    c1 = Ma * a + c2
    c3 = 0.0
    c4 = -rl * L**3 / 6.0 - 0.5 * Ma * L**2 - c2 * L
    return PointMomentConstants(rl=rl, rr=rr, c1=c1, c2=c2, c3=c3, c4=c4)


@dataclass(frozen=True)
class SimplePointMoment(PiecewiseEval):
    """
    Momento puntual en un tramo simplemente apoyado.

    Aplicado exactamente sobre un apoyo (a=0 o a=L) M(x) toma el valor del
    momento en ese apoyo: M(0)=Ma si a=0, M(L)=-Ma si a=L. Así un par de
    momentos extremos (Mi en x=0, -Mj en x=L) reproduce Mi..Mj sobre el tramo.
    """
    Ma: float
    a: float
    L: float
    k: PointMomentConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def rr(self) -> float:
        return self.k.rr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        return np.full_like(x, self.k.rl, dtype=float)

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        M = np.where(x <= self.a, k.rl * x, k.rl * x + self.Ma)
        if self.a == 0.0:
            M = np.where(x == 0.0, self.Ma, M)
        if self.a == self.L:
            M = np.where(x == self.L, -self.Ma, M)
        return M

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            0.5 * k.rl * x**2 + k.c1,
            0.5 * k.rl * x**2 + self.Ma * x + k.c2,
        )

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl * x**3 / 6.0 + k.c1 * x + k.c3,
            k.rl * x**3 / 6.0 + 0.5 * self.Ma * x**2 + k.c2 * x + k.c4,
        )


def simple_point_moment(Ma: float, a: float, L: float) -> SimplePointMoment:
    Ma, a, L = float(Ma), float(a), float(L)
    return SimplePointMoment(Ma=Ma, a=a, L=L, k=point_moment_constants(Ma, a, L))


# -------------------------
# Distribuida uniforme w sobre [a, b]
# -------------------------
@dataclass(frozen=True)
class DistUniformConstants:
    rl: float
    rr: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float
    c6: float
    c7: float
    c8: float
    c9: float


def dist_uniform_constants(w: float, a: float, b: float, L: float) -> DistUniformConstants:
    c = b - a
    rr = w * c * (a + c / 2.0) / L
    rl = w * c - rr

    # M(x): c1 (x<=a), c2 (a<x<=b), c3 (x>b)
    c1 = 0.0
    c2 = -w * a**2 / 2.0
    c3 = rr * L

    # flecha: c7 (y(0)=0), c8 (continuidad en a), c9 (continuidad en b), c6 (y(L)=0)
    c7 = 0.0
    c8 = -c1 * a**2 / 2.0 + c2 * a**2 / 2.0 + 5.0 * w * a**4 / 24.0 + c7
    c9 = (
        -rl * b**3 / 3.0 - rr * b**3 / 3.0 + w * b**4 / 8.0 - w * a * b**3 / 3.0
        - c2 * b**2 / 2.0 + c3 * b**2 / 2.0 + c8
    )
    c6 = rr * L**2 / 6.0 - c3 * L / 2.0 - c9 / L

    # giro: continuidad en b (c5) y en a (c4)
    c5 = (
        -rl * b**2 / 2.0 + w * b**3 / 6.0 - w * a * b**2 / 2.0 - rr * b**2 / 2.0
        + c3 * b - c2 * b + c6
    )
    c4 = w * a**3 / 3.0 + c2 * a + c5 - c1 * a
    return DistUniformConstants(rl=rl, rr=rr, c1=c1, c2=c2, c3=c3, c4=c4, c5=c5, c6=c6, c7=c7, c8=c8, c9=c9)


@dataclass(frozen=True)
class SimpleDistUniform(PiecewiseEval):
    w: float
    a: float
    b: float
    L: float
    k: DistUniformConstants

    @property
    def rl(self) -> float:
        return self.k.rl

    @property
    def rr(self) -> float:
        return self.k.rr

    def _V_array(self, x: np.ndarray) -> np.ndarray:
        k = self.k
        return np.where(
            x <= self.a,
            k.rl,
            np.where(x <= self.b, k.rl - self.w * (x - self.a), -k.rr),
        )

    def _M_array(self, x: np.ndarray) -> np.ndarray:
        k, w, a = self.k, self.w, self.a
        return np.where(
            x <= a,
            k.rl * x + k.c1,
            np.where(
                x <= self.b,
                k.rl * x - w * x**2 / 2.0 + w * a * x + k.c2,
                -k.rr * x + k.c3,
            ),
        )

    def _EIs_array(self, x: np.ndarray) -> np.ndarray:
        k, w, a = self.k, self.w, self.a
        return np.where(
            x <= a,
            k.rl * x**2 / 2.0 + k.c1 * x + k.c4,
            np.where(
                x <= self.b,
                k.rl * x**2 / 2.0 - w * x**3 / 6.0 + w * a * x**2 / 2.0 + k.c2 * x + k.c5,
                -k.rr * x**2 / 2.0 + k.c3 * x + k.c6,
            ),
        )

    def _EId_array(self, x: np.ndarray) -> np.ndarray:
        k, w, a = self.k, self.w, self.a
        return np.where(
            x <= a,
            k.rl * x**3 / 6.0 + k.c1 * x**2 / 2.0 + k.c4 * x + k.c7,
            np.where(
                x <= self.b,
                k.rl * x**3 / 6.0 - w * x**4 / 24.0 + w * a * x**3 / 6.0
                + k.c2 * x**2 / 2.0 + k.c5 * x + k.c8,
                -k.rr * x**3 / 6.0 + k.c3 * x**2 / 2.0 + k.c6 * x + k.c9,
            ),
        )


def simple_dist_uniform(w: float, a: float, b: float, L: float) -> SimpleDistUniform:
    w, a, b, L = float(w), float(a), float(b), float(L)
    return SimpleDistUniform(w=w, a=a, b=b, L=L, k=dist_uniform_constants(w, a, b, L))
