"""
Modelo de dominio: Selección de k baterías de un banco.

Una Selection es el resultado del selector: los k dígitos elegidos y
las posiciones de donde salieron. Guardar las posiciones permite
verificar el invariante de orden sin volver a la secuencia original.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """Dígitos elegidos de un banco, en el orden en que aparecían."""

    digits: tuple[int, ...]
    """Dígitos elegidos, de izquierda a derecha."""

    indices: tuple[int, ...]
    """Posición (0-based) de cada dígito en la secuencia original.
    Siempre estrictamente creciente."""

    @property
    def k(self) -> int:
        """Cantidad de baterías elegidas."""
        return len(self.digits)

    @property
    def value(self) -> int:
        """Valor numérico (joltage) de leer los dígitos de izquierda a derecha.

        Se acumula en un `int` de Python, que no tiene límite de bits:
        con k=12 el resultado ya no cabe en 32 bits y con k grande
        tampoco en 64.
        """
        result = 0
        for d in self.digits:
            result = result * 10 + d
        return result

    def __post_init__(self) -> None:
        """Valida longitudes, rango de dígitos y orden de los índices."""
        if len(self.digits) != len(self.indices):
            raise ValueError(
                f"digits ({len(self.digits)}) e indices ({len(self.indices)}) "
                "deben tener la misma longitud"
            )
        for d in self.digits:
            if not 0 <= d <= 9:
                raise ValueError(f"Dígito fuera de rango: {d}")
        for anterior, siguiente in zip(self.indices, self.indices[1:]):
            if siguiente <= anterior:
                raise ValueError(
                    f"Los índices deben ser estrictamente crecientes: {self.indices}"
                )

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


EMPTY_SELECTION = Selection(digits=(), indices=())
"""Selección vacía (k=0). Su valor es 0."""
