"""
Puerto de entrada: Fuente de bancos.

Define el contrato para obtener los bancos (secuencias de dígitos) de
alguna entrada externa. Hoy solo existe el adaptador de archivo de texto:

    BankSource (interfaz)
    └── TextFileBankSource     → un banco por línea, líneas en blanco omitidas

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un adaptador
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.digit_sequence import DigitSequence


class BankSource(ABC):
    """Interfaz para leer bancos de una entrada."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si esta fuente puede leer el archivo dado."""
        ...

    @abstractmethod
    def read_banks(self, file_path: Path) -> list[DigitSequence]:
        """Lee y valida todos los bancos del archivo.

        Returns:
            Lista de DigitSequence en el orden del archivo. Vacía si el
            archivo no tiene bancos.

        Raises:
            InputFileNotFoundError: Si el archivo no existe.
            InputReadError: Si falla la lectura.
            InvalidCharacterError: En la primera línea con un carácter
                                  que no es dígito (con line_number).
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para logging. Ejemplo: 'text-file'."""
        ...
