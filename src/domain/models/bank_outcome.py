"""
Modelo de dominio: Resultado de procesar un banco.

Hay exactamente un BankOutcome por banco de entrada: o trae la
Selection exitosa, o trae el error que impidió calcularla.
"""

from dataclasses import dataclass

from src.domain.exceptions import InsufficientLengthError
from src.domain.models.selection import Selection


@dataclass(frozen=True)
class BankFailure:
    """Entrada de la lista de fallas: qué banco falló y por qué."""

    bank_index: int
    """Posición (0-based) del banco en la entrada."""

    error: InsufficientLengthError

    def __str__(self) -> str:
        return f"Error in bank {self.bank_index + 1}: {self.error}"


@dataclass(frozen=True)
class BankOutcome:
    """Resultado (éxito o falla) de un banco individual."""

    bank_index: int
    """Posición (0-based) del banco en la entrada."""

    selection: Selection | None = None
    """Selección óptima. None si el banco falló."""

    error: InsufficientLengthError | None = None
    """Motivo de la falla. None si el banco tuvo éxito."""

    line_number: int | None = None
    """Línea del archivo de origen, si se conoce."""

    def __post_init__(self) -> None:
        if (self.selection is None) == (self.error is None):
            raise ValueError(
                "Un BankOutcome debe tener exactamente uno de selection o error"
            )

    @property
    def is_success(self) -> bool:
        return self.selection is not None

    @property
    def joltage(self) -> int | None:
        """Valor de la selección, o None si el banco falló."""
        return self.selection.value if self.selection is not None else None

    def to_failure(self) -> BankFailure:
        """Convierte un outcome fallido en su entrada de la lista de fallas."""
        if self.error is None:
            raise ValueError(f"El banco {self.bank_index} no falló")
        return BankFailure(bank_index=self.bank_index, error=self.error)
