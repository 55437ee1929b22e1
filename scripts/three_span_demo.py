# path: scripts/three_span_demo.py
import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from cont_beam.engine.solver import BeamSolver
from cont_beam.services.logging_setup import setup_logging

logger = setup_logging()

# Vigueta 3.5" x 1.5", E=1.6e6 psi, I=5.36 in^4
# Caso 1: alero en voladizo + 2 tramos (zona PV 1.896 lb/in, zona no PV 1.422 lb/in)
CASE_CANTILEVER = dict(
    spans=[31.62, 31.62, 252.98],
    loads=[
        # tramo 0 (voladizo)
        (1.896, 1.896, 15.81, 31.62, "UDL", 0),
        (1.422, 1.422, 0.00, 15.81, "UDL", 0),
        # tramo 1
        (1.896, 1.896, 0.00, 31.62, "UDL", 1),
        # tramo 2
        (1.896, 1.896, 0.00, 31.62, "UDL", 2),
        (1.422, 1.422, 31.62, 252.98, "UDL", 2),
    ],
    cantilever=True,
)

# Caso 2: sin voladizo
CASE_CONTINUOUS = dict(
    spans=[63.24, 252.98],
    loads=[
        (1.896, 1.896, 15.81, 63.24, "UDL", 0),
        (1.422, 1.422, 0.00, 15.81, "UDL", 0),
        (1.896, 1.896, 0.00, 31.62, "UDL", 1),
        (1.422, 1.422, 31.62, 252.98, "UDL", 1),
    ],
    cantilever=False,
)

# Caso 3: caso 1 antes de instalar PV (toda la viga 1.422 lb/in)
CASE_CANTILEVER_PRE_PV = dict(
    spans=[31.62, 31.62, 252.98],
    loads=[
        (1.422, 1.422, 0.00, 31.62, "UDL", 0),
        (1.422, 1.422, 0.00, 31.62, "UDL", 1),
        (1.422, 1.422, 0.00, 252.98, "UDL", 2),
    ],
    cantilever=True,
)

# Caso 4: caso 2 antes de instalar PV
CASE_CONTINUOUS_PRE_PV = dict(
    spans=[63.24, 252.98],
    loads=[
        (1.422, 1.422, 0.00, 63.24, "UDL", 0),
        (1.422, 1.422, 0.00, 252.98, "UDL", 1),
    ],
    cantilever=False,
)

CASES = {
    "voladizo": CASE_CANTILEVER,
    "continua": CASE_CONTINUOUS,
    "voladizo (pre PV)": CASE_CANTILEVER_PRE_PV,
    "continua (pre PV)": CASE_CONTINUOUS_PRE_PV,
}


def _print_grid(title, grid):
    print(f"========= {title} =========")
    for j in range(grid.shape[1]):
        print("=========SPAN START=========")
        for v in grid[:, j]:
            print(v)
        print("=========SPAN END=========")


def run(case, segments=50):
    solver = BeamSolver.from_dimensions(
        3.5, 1.5, 1600000.00, 5.36,
        case["spans"], case["loads"], case["cantilever"], segments,
    )
    d = solver.demand
    _print_grid("SHEAR [kip]", d.shear)
    print("Momentos de apoyo [lb·in]:", solver.support_moments)
    print("Reacciones [lb]:", solver.support_reactions)
    for ex in d.extremes():
        print(f"{ex.diagram:>10} {ex.kind}: {ex.value:.6g} (tramo {ex.span}, x={ex.x_ft:.3f} ft)")
    return solver


if __name__ == "__main__":
    for name, case in CASES.items():
        logger.info("Caso: %s", name)
        run(case)
