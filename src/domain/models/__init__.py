"""
Modelos de dominio del proyecto battery-joltage.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import DigitSequence, Selection, AggregateResult
"""

from src.domain.models.aggregate_result import AggregateResult
from src.domain.models.bank_outcome import BankFailure, BankOutcome
from src.domain.models.digit_sequence import DigitSequence
from src.domain.models.selection import EMPTY_SELECTION, Selection

__all__ = [
    "AggregateResult",
    "BankFailure",
    "BankOutcome",
    "DigitSequence",
    "EMPTY_SELECTION",
    "Selection",
]
