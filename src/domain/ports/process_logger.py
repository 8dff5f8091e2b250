"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante una corrida del
calculador de joltage.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se leyeron 200 bancos" (no "INFO: 200 lines")
- "El banco 7 es demasiado corto" (no "WARNING: short line")

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos de negocio. En tests se usa un logger en memoria
para hacer asserts sobre los eventos.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Lectura de bancos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, source_name: str) -> None:
        """Registra que se recibió un archivo de entrada.

        Args:
            file_path: Ruta del archivo.
            source_name: Nombre de la fuente que lo va a leer ('text-file').
        """
        ...

    @abstractmethod
    def log_line_skipped(self, file_path: Path, line_number: int, reason: str) -> None:
        """Registra que una línea del archivo se omitió (por ejemplo, en blanco)."""
        ...

    @abstractmethod
    def log_banks_loaded(self, file_path: Path, num_banks: int) -> None:
        """Registra cuántos bancos válidos se leyeron del archivo."""
        ...

    # --- Fase 2: Selección ---

    @abstractmethod
    def log_bank_result(self, bank_index: int, selected: str, joltage: int) -> None:
        """Registra el resultado exitoso de un banco.

        Args:
            bank_index: Posición (0-based) del banco.
            selected: Dígitos elegidos, como string.
            joltage: Valor numérico de la selección.
        """
        ...

    @abstractmethod
    def log_bank_failed(self, bank_index: int, error: Exception) -> None:
        """Registra que un banco no pudo procesarse (falla recuperable)."""
        ...

    @abstractmethod
    def log_run_complete(self, k: int, total: int, num_banks: int, num_failed: int) -> None:
        """Registra el fin de la agregación."""
        ...

    # --- Errores fatales ---

    @abstractmethod
    def log_error(self, file_path: Path | None, error: Exception) -> None:
        """Registra un error que impide completar la corrida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de toda la corrida.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'lineas_omitidas': int,
                'bancos_leidos': int,
                'bancos_exitosos': int,
                'bancos_con_error': int,
                'total_joltage': int,
                'errores': List[dict],  # [{banco|archivo, error}]
            }
        """
        ...
