from __future__ import annotations

# Entradas: in, lb, lb·in, lb/in, psi, in^4
# Salidas:  ft (posiciones), kip (corte), kip·ft (momento), rad, in

IN_PER_FT = 12.0
LB_PER_KIP = 1000.0
LBIN_PER_KIPFT = IN_PER_FT * LB_PER_KIP


def lbin_to_kipft(m_lbin):
    return m_lbin / LBIN_PER_KIPFT


def lb_to_kip(v_lb):
    return v_lb / LB_PER_KIP


def in_to_ft(x_in):
    return x_in / IN_PER_FT
