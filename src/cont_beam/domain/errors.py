from __future__ import annotations


class BeamInputError(ValueError):
    """Datos de entrada que violan el contrato del motor (geometría, material, cargas)."""


class LoadInputError(BeamInputError):
    """Descriptor de carga mal formado o con tipo desconocido."""


class UnknownSpanError(LoadInputError):
    """La carga referencia un tramo que no existe."""

    def __init__(self, span: int, n_spans: int):
        self.span = span
        self.n_spans = n_spans
        super().__init__(
            f"La carga referencia un tramo desconocido: span={span} (tramos válidos: 0..{n_spans - 1})."
        )


class IllConditionedSystemError(BeamInputError):
    """Sistema de tres momentos singular o mal condicionado."""
