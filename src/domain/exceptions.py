"""
Excepciones de dominio del proyecto battery-joltage.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque permiten que el agregador distinga entre "el banco es demasiado
corto" (recuperable: se anota y se sigue) y "el archivo está corrupto"
(fatal para la corrida), y que el CLI decida el código de salida.

Jerarquía:
    JoltageBaseError
    ├── InvalidCharacterError       → Una línea contiene algo que no es dígito
    ├── InsufficientLengthError     → El banco tiene menos de k baterías
    ├── InputFileNotFoundError      → El archivo de entrada no existe
    ├── InputReadError              → Error de E/S al leer la entrada
    └── OutputError                 → Error al generar el reporte
"""

from pathlib import Path


class JoltageBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    El CLI captura `JoltageBaseError` para convertir cualquier error
    conocido en un mensaje legible y un código de salida.
    """


class InvalidCharacterError(JoltageBaseError):
    """Se lanza cuando una línea de banco contiene un carácter que no es
    un dígito ASCII.

    `column` es la posición (0-based) dentro de la línea ya recortada.
    `line_number` (1-based) solo se conoce cuando la línea viene de un
    archivo; si no, queda en None.
    """

    def __init__(self, column: int, character: str, line_number: int | None = None):
        self.column = column
        self.character = character
        self.line_number = line_number
        if line_number is not None:
            mensaje = (
                f"Invalid character '{character}' found on line {line_number} "
                f"(column {column})"
            )
        else:
            mensaje = f"Invalid character '{character}' found at column {column}"
        super().__init__(mensaje)


class InsufficientLengthError(JoltageBaseError):
    """Se lanza cuando un banco tiene menos baterías que las requeridas.

    Es el único error recuperable: el agregador lo registra en la lista
    de fallas y continúa con el siguiente banco.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            "Insufficient batteries for joltage calculation: "
            f"found {available}, need at least {required}"
        )


class InputFileNotFoundError(JoltageBaseError):
    """Se lanza cuando el archivo de entrada no existe."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"Input file not found: {self.path}")


class InputReadError(JoltageBaseError):
    """Se lanza cuando falla la lectura del archivo de entrada.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - La ruta es un directorio.
    - El archivo no es texto UTF-8.
    """

    def __init__(self, path: Path | str, causa: str):
        self.path = str(path)
        self.causa = causa
        super().__init__(f"I/O error while reading input '{self.path}': {causa}")


class OutputError(JoltageBaseError):
    """Se lanza cuando falla la generación del reporte de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
