"""
Adaptador de entrada: Fuente de bancos desde un archivo de texto.

Formato: un banco por línea, cada línea una cadena de dígitos.

Este adaptador:
1. Abre el archivo como UTF-8 (quitando BOM si existe).
2. Omite las líneas en blanco (no son bancos de longitud cero).
3. Valida cada línea con parse_digit_line.
4. Ante la primera línea inválida aborta la lectura: un carácter que no
   es dígito indica un archivo corrupto, no un banco faltante.
"""

from pathlib import Path

from src.domain.exceptions import InputFileNotFoundError, InputReadError
from src.domain.models.digit_sequence import DigitSequence
from src.domain.ports.bank_source import BankSource
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.sequence_validator import parse_digit_line
from src.domain.shared.text_cleaner import (
    is_blank_line,
    normalize_line_endings,
    strip_bom,
)


class TextFileBankSource(BankSource):
    """Lee bancos de un archivo de texto plano, uno por línea."""

    def __init__(self, logger: ProcessLogger | None = None) -> None:
        """
        Args:
            logger: Bitácora opcional para registrar líneas omitidas y el
                   conteo de bancos leídos.
        """
        self._logger = logger

    @property
    def name(self) -> str:
        return "text-file"

    def can_handle(self, file_path: Path) -> bool:
        """Acepta cualquier ruta que no sea un directorio.

        La entrada del puzzle no tiene extensión fija (input, input.txt,
        example.in), así que solo se descartan directorios.
        """
        return not file_path.is_dir()

    def read_banks(self, file_path: Path) -> list[DigitSequence]:
        if self._logger is not None:
            self._logger.log_file_received(file_path, self.name)

        text = self._read_text(file_path)
        return self.parse_text(text, file_path)

    def parse_text(self, text: str, file_path: Path | None = None) -> list[DigitSequence]:
        """Convierte el contenido completo del archivo en bancos.

        Separado de read_banks para poder probarlo sin tocar disco.

        Raises:
            InvalidCharacterError: Con line_number (1-based) de la línea inválida.
        """
        banks: list[DigitSequence] = []
        text = normalize_line_endings(strip_bom(text))

        lines = text.split("\n")
        # El \n final del archivo no es una línea en blanco
        if lines and lines[-1] == "":
            lines.pop()

        for line_number, line in enumerate(lines, start=1):
            if is_blank_line(line):
                if self._logger is not None and file_path is not None:
                    self._logger.log_line_skipped(file_path, line_number, "línea en blanco")
                continue
            # parse_digit_line adjunta line_number al InvalidCharacterError
            banks.append(parse_digit_line(line, line_number))

        if self._logger is not None and file_path is not None:
            self._logger.log_banks_loaded(file_path, len(banks))
        return banks

    @staticmethod
    def _read_text(file_path: Path) -> str:
        """Lee el archivo completo, traduciendo los errores de E/S al dominio."""
        try:
            return file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise InputFileNotFoundError(file_path)
        except UnicodeDecodeError as e:
            raise InputReadError(file_path, f"no es texto UTF-8 ({e.reason})")
        except OSError as e:
            raise InputReadError(file_path, e.strerror or str(e))
