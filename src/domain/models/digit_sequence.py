"""
Modelo de dominio: Secuencia de dígitos (un banco de baterías).

Cada línea válida del archivo de entrada se convierte en una
DigitSequence. Es el objeto que consume el selector.

Decisiones de diseño:
- Se usa `tuple` (no `list`) para que la secuencia sea inmutable de
  verdad: frozen=True solo impide reasignar el atributo, no mutar una
  lista interna.
- `line_number` es solo informativo (para reportes). Nunca interviene
  en la selección.
"""

from dataclasses import dataclass
from collections.abc import Iterator


@dataclass(frozen=True)
class DigitSequence:
    """Secuencia ordenada de dígitos 0-9 tal como aparecen en la línea."""

    digits: tuple[int, ...]
    """Dígitos en el orden original de izquierda a derecha."""

    line_number: int | None = None
    """Línea (1-based) del archivo de donde salió el banco.
    None si la secuencia no viene de un archivo (por ejemplo, en tests)."""

    def __post_init__(self) -> None:
        """Valida que todos los elementos sean dígitos enteros 0-9."""
        if not isinstance(self.digits, tuple):
            # Se normaliza a tupla; object.__setattr__ porque es frozen
            object.__setattr__(self, "digits", tuple(self.digits))
        for i, d in enumerate(self.digits):
            if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
                raise ValueError(f"Dígito inválido en la posición {i}: {d!r}")

    @classmethod
    def from_string(cls, text: str, line_number: int | None = None) -> "DigitSequence":
        """Construye la secuencia desde un string que YA contiene solo dígitos.

        No valida caracteres: para texto crudo se usa parse_digit_line.
        """
        return cls(tuple(int(c) for c in text), line_number)

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self) -> Iterator[int]:
        return iter(self.digits)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)
