"""
Servicio de dominio: Selector de la subsecuencia máxima de k dígitos.

Dado un banco y un k, elige exactamente k dígitos SIN reordenarlos de
forma que el número que forman sea el mayor posible.

Probar todas las combinaciones son C(L, k) casos (con L=100 y k=12, más
de 10^15). Aquí hay dos variantes lineales/casi lineales:

- select_max (por defecto): una pasada con una pila monótona. O(L) tiempo,
  O(k) memoria.
- select_max_scan: para cada posición de salida busca el máximo en la
  ventana que todavía deja suficientes dígitos. O(L·k).

Desempate: ambas se quedan con la aparición MÁS A LA IZQUIERDA entre
dígitos iguales. Por eso devuelven exactamente la misma Selection
(mismos dígitos y mismos índices) para la misma entrada.
"""

from collections.abc import Callable

from src.domain.exceptions import InsufficientLengthError
from src.domain.models.digit_sequence import DigitSequence
from src.domain.models.selection import EMPTY_SELECTION, Selection

Selector = Callable[[DigitSequence, int], Selection]
"""Firma común de las estrategias de selección."""


def _check_trivial(sequence: DigitSequence, k: int) -> Selection | None:
    """Resuelve los casos borde comunes a todas las estrategias.

    Returns:
        La Selection si el caso es trivial, None si hay que calcularla.

    Raises:
        ValueError: Si k es negativo.
        InsufficientLengthError: Si el banco tiene menos de k dígitos.
    """
    if k < 0:
        raise ValueError(f"k no puede ser negativo: {k}")
    if k == 0:
        return EMPTY_SELECTION

    length = len(sequence)
    if length < k:
        raise InsufficientLengthError(required=k, available=length)
    if length == k:
        return Selection(digits=sequence.digits, indices=tuple(range(length)))
    return None


def select_max(sequence: DigitSequence, k: int) -> Selection:
    """Selecciona los k dígitos que forman el número más grande (pila monótona).

    Se recorre el banco de izquierda a derecha con una pila de a lo más k
    dígitos. Para cada dígito entrante `d`:

    1. Mientras el tope de la pila sea ESTRICTAMENTE menor que `d` y quitarlo
       todavía permita completar k dígitos con lo que queda por leer
       (incluyendo `d`), se saca el tope.
    2. Si la pila tiene menos de k elementos, se mete `d`; si no, `d` se
       descarta para siempre.

    La pila nunca tiene más elementos de los que se pueden completar a k con
    la entrada restante, así que al terminar tiene exactamente k dígitos.

    Args:
        sequence: Banco de baterías.
        k: Cantidad de baterías a elegir (>= 0).

    Returns:
        Selection con k dígitos y sus índices de origen.

    Raises:
        InsufficientLengthError: Si len(sequence) < k.
        ValueError: Si k < 0.

    Ejemplos:
        >>> select_max(DigitSequence.from_string("811"), 2).value
        81
    """
    trivial = _check_trivial(sequence, k)
    if trivial is not None:
        return trivial

    digits = sequence.digits
    length = len(digits)
    stack: list[int] = []  # índices

    for i, d in enumerate(digits):
        remaining = length - i
        while stack and digits[stack[-1]] < d and len(stack) - 1 + remaining >= k:
            stack.pop()
        if len(stack) < k:
            stack.append(i)

    return Selection(
        digits=tuple(digits[i] for i in stack),
        indices=tuple(stack),
    )


def select_max_scan(sequence: DigitSequence, k: int) -> Selection:
    """Selecciona los k dígitos con búsquedas repetidas del máximo. O(L·k).

    Para la posición de salida `p` (0..k-1) se busca el máximo entre
    `start` y `L - (k - p - 1)` (exclusivo): más a la derecha ya no
    quedarían dígitos suficientes para las posiciones siguientes. Se toma
    la primera aparición del máximo y la búsqueda sigue después de ella.

    Mismos casos borde y mismo desempate que select_max.
    """
    trivial = _check_trivial(sequence, k)
    if trivial is not None:
        return trivial

    digits = sequence.digits
    length = len(digits)
    chosen: list[int] = []
    start = 0

    for position in range(k):
        search_end = length - (k - position - 1)
        best = start
        for i in range(start + 1, search_end):
            if digits[i] > digits[best]:
                best = i
                if digits[best] == 9:
                    break
        chosen.append(best)
        start = best + 1

    return Selection(
        digits=tuple(digits[i] for i in chosen),
        indices=tuple(chosen),
    )
