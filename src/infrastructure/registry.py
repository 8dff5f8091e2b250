"""
Registro de estrategias de selección disponibles.

Centraliza la relación nombre_estrategia → función selectora.
Agregar una nueva estrategia requiere solo 2 pasos:
1. Escribir la función con la firma Selector (DigitSequence, k) -> Selection.
2. Registrarla aquí con register() o agregarla a create_default_registry().

El CLI no sabe qué estrategias existen: solo pide "dame la estrategia
'scan'" y el registro se la da.
"""

from src.domain.services.max_subsequence import Selector, select_max, select_max_scan

DEFAULT_STRATEGY = "stack"


class SelectorRegistry:
    """Registro de estrategias de selección."""

    def __init__(self) -> None:
        self._selectors: dict[str, Selector] = {}

    def register(self, name: str, selector: Selector) -> None:
        """Registra una estrategia. La clave es el nombre en minúsculas.

        Raises:
            ValueError: Si ya existe una estrategia con ese nombre.
        """
        key = name.lower()
        if key in self._selectors:
            raise ValueError(
                f"Ya existe una estrategia registrada como '{key}': "
                f"{self._selectors[key].__name__}. "
                f"No se puede registrar {selector.__name__}."
            )
        self._selectors[key] = selector

    def get(self, name: str) -> Selector | None:
        """Obtiene la estrategia por nombre (case-insensitive).

        Returns:
            La función selectora, o None si no existe.
        """
        return self._selectors.get(name.lower())

    @property
    def available_strategies(self) -> list[str]:
        """Lista de estrategias registradas."""
        return sorted(self._selectors.keys())

    def __len__(self) -> int:
        return len(self._selectors)


def create_default_registry() -> SelectorRegistry:
    """Crea un registro con las estrategias incluidas.

    - 'stack': pila monótona, O(L). Por defecto.
    - 'scan': búsqueda repetida del máximo, O(L·k).
    """
    registry = SelectorRegistry()
    registry.register(DEFAULT_STRATEGY, select_max)
    registry.register("scan", select_max_scan)
    return registry
