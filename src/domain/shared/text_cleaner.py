"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar las líneas leídas del archivo
de entrada antes de que el validador las convierta en bancos.

Estas funciones NO tienen lógica de negocio (no saben de baterías ni de
joltage). Solo operan sobre strings puros.
"""

_BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Quita la marca BOM de UTF-8 al inicio del texto, si existe.

    Algunos editores en Windows guardan los .txt con BOM; sin quitarla,
    el primer banco del archivo fallaría con un carácter inválido.

    Ejemplos:
        >>> strip_bom("\\ufeff987")
        '987'
        >>> strip_bom("987")
        '987'
    """
    return text[1:] if text.startswith(_BOM) else text


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Los archivos pueden usar \\r\\n (Windows), \\r (Mac antiguo), o \\n (Unix).
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def is_blank_line(line: str) -> bool:
    """Indica si una línea está vacía o solo tiene espacios en blanco.

    Ejemplos:
        >>> is_blank_line("   \\t ")
        True
        >>> is_blank_line(" 12 ")
        False
    """
    return not line.strip()


def is_ascii_digit(char: str) -> bool:
    """Indica si el carácter es un dígito ASCII 0-9.

    str.isdigit() no sirve: acepta dígitos de otros alfabetos ('٣', '²').

    Ejemplos:
        >>> is_ascii_digit("7")
        True
        >>> is_ascii_digit("٣")
        False
    """
    return len(char) == 1 and "0" <= char <= "9"
