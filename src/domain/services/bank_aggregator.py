"""
Servicio de dominio: Agregador de bancos.

Corre el selector sobre cada banco de forma independiente, suma los
joltages exitosos en un total de precisión arbitraria y junta las fallas
sin abortar la corrida.

Flujo en dos fases:
1. MAP: se calcula el BankOutcome de cada banco. Como ningún banco depende
   de otro, esta fase puede correr en paralelo (ThreadPoolExecutor).
2. FOLD: se recorren los outcomes en orden de banco y se acumulan el total
   y la lista de fallas. Esta fase es secuencial, así que no hay estado
   compartido entre hilos y la lista de fallas sale siempre en el orden
   de la entrada.
"""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from src.domain.exceptions import InsufficientLengthError
from src.domain.models.aggregate_result import AggregateResult
from src.domain.models.bank_outcome import BankFailure, BankOutcome
from src.domain.models.digit_sequence import DigitSequence
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.max_subsequence import Selector, select_max


def evaluate_bank(
    bank_index: int, bank: DigitSequence, k: int, selector: Selector = select_max
) -> BankOutcome:
    """Calcula el outcome de un solo banco.

    Solo InsufficientLengthError se convierte en falla; cualquier otra
    excepción es un bug y se propaga.
    """
    try:
        selection = selector(bank, k)
    except InsufficientLengthError as e:
        return BankOutcome(bank_index=bank_index, error=e, line_number=bank.line_number)
    return BankOutcome(
        bank_index=bank_index, selection=selection, line_number=bank.line_number
    )


def fold_outcomes(outcomes: Sequence[BankOutcome], k: int) -> AggregateResult:
    """Reduce los outcomes a un AggregateResult.

    Los outcomes se ordenan por bank_index antes de acumular, así el
    resultado no depende del orden en que llegaron.
    """
    ordenados = sorted(outcomes, key=lambda o: o.bank_index)
    total = 0
    failures: list[BankFailure] = []

    for outcome in ordenados:
        if outcome.selection is not None:
            total += outcome.selection.value
        else:
            failures.append(outcome.to_failure())

    return AggregateResult(
        k=k,
        total=total,
        failures=tuple(failures),
        outcomes=tuple(ordenados),
    )


def aggregate(
    banks: Sequence[DigitSequence],
    k: int,
    selector: Selector = select_max,
    max_workers: int = 1,
) -> AggregateResult:
    """Procesa todos los bancos y devuelve el total y las fallas.

    Args:
        banks: Bancos a procesar. El índice de cada banco es su posición.
        k: Cantidad de baterías a elegir por banco (>= 0).
        selector: Estrategia de selección (select_max o select_max_scan).
        max_workers: Hilos para la fase MAP. 1 = secuencial.

    Returns:
        AggregateResult. Si ningún banco tuvo éxito el total es 0; eso
        no es un error.

    Raises:
        ValueError: Si k < 0 o max_workers < 1.
    """
    if k < 0:
        raise ValueError(f"k no puede ser negativo: {k}")
    if max_workers < 1:
        raise ValueError(f"max_workers debe ser >= 1: {max_workers}")

    if max_workers > 1 and len(banks) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(banks))) as pool:
            futures = [
                pool.submit(evaluate_bank, i, bank, k, selector)
                for i, bank in enumerate(banks)
            ]
            outcomes = [future.result() for future in futures]
    else:
        # Sin hilos: no vale la pena el overhead
        outcomes = [evaluate_bank(i, bank, k, selector) for i, bank in enumerate(banks)]

    return fold_outcomes(outcomes, k)


class BankAggregator:
    """Agrega bancos y reporta cada resultado a la bitácora.

    Recibe sus dependencias por constructor. No sabe qué selector ni qué
    logger concreto se usan.
    """

    def __init__(
        self,
        logger: ProcessLogger,
        selector: Selector = select_max,
        max_workers: int = 1,
    ) -> None:
        """
        Args:
            logger: Bitácora donde se registra cada banco.
            selector: Estrategia de selección.
            max_workers: Hilos para la fase MAP.
        """
        self._logger = logger
        self._selector = selector
        self._max_workers = max_workers

    def run(self, banks: Sequence[DigitSequence], k: int) -> AggregateResult:
        """Agrega los bancos y registra los eventos de la corrida."""
        result = aggregate(
            banks, k, selector=self._selector, max_workers=self._max_workers
        )

        # Se registra después del FOLD para que el orden sea el de la entrada
        for outcome in result.outcomes:
            if outcome.selection is not None:
                self._logger.log_bank_result(
                    outcome.bank_index, str(outcome.selection), outcome.selection.value
                )
            elif outcome.error is not None:
                self._logger.log_bank_failed(outcome.bank_index, outcome.error)

        self._logger.log_run_complete(k, result.total, result.num_banks, result.num_failed)
        return result
