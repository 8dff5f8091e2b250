"""
Servicio de dominio: Validador de secuencias de dígitos.

Convierte una línea de texto crudo en una DigitSequence, o la rechaza
con InvalidCharacterError indicando qué carácter y en qué columna.

Las líneas en blanco NO son bancos de longitud cero: es la fuente de
bancos (o quien llame) la que las descarta antes de llegar aquí.
"""

from src.domain.exceptions import InvalidCharacterError
from src.domain.models.digit_sequence import DigitSequence
from src.domain.shared.text_cleaner import is_ascii_digit, is_blank_line


def parse_digit_line(line: str, line_number: int | None = None) -> DigitSequence:
    """Convierte una línea en una secuencia de dígitos.

    Args:
        line: Texto de la línea. Se recortan espacios al inicio y al final.
        line_number: Línea del archivo (1-based), solo para trazabilidad.
                    Si se pasa, también se adjunta al error.

    Returns:
        DigitSequence con un dígito por carácter de la línea recortada.

    Raises:
        InvalidCharacterError: Si algún carácter no es un dígito ASCII.
                              `column` es 0-based dentro de la línea recortada.
        ValueError: Si la línea está en blanco.

    Ejemplos:
        >>> parse_digit_line("  811  ").digits
        (8, 1, 1)
    """
    if is_blank_line(line):
        raise ValueError("Una línea en blanco no es un banco; se debe omitir antes")

    trimmed = line.strip()
    digits: list[int] = []
    for column, char in enumerate(trimmed):
        if not is_ascii_digit(char):
            raise InvalidCharacterError(column, char, line_number)
        digits.append(ord(char) - ord("0"))

    return DigitSequence(tuple(digits), line_number)
