"""
Modelo de dominio: Resultado agregado de una corrida.

Es el objeto que el agregador entrega al CLI y al escritor de reportes.
"""

from dataclasses import dataclass

from src.domain.models.bank_outcome import BankFailure, BankOutcome


@dataclass(frozen=True)
class AggregateResult:
    """Total de joltage de todos los bancos exitosos más la lista de fallas."""

    k: int
    """Cantidad de baterías seleccionadas por banco en esta corrida."""

    total: int
    """Suma de los joltages exitosos. `int` de Python: precisión arbitraria."""

    failures: tuple[BankFailure, ...] = ()
    """Bancos fallidos, ordenados por índice de banco."""

    outcomes: tuple[BankOutcome, ...] = ()
    """Todos los resultados individuales, en el orden de la entrada."""

    @property
    def num_banks(self) -> int:
        return len(self.outcomes)

    @property
    def num_successful(self) -> int:
        return sum(1 for o in self.outcomes if o.is_success)

    @property
    def num_failed(self) -> int:
        return len(self.failures)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"El total no puede ser negativo: {self.total}")
