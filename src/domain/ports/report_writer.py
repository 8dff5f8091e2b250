"""
Puerto de salida: Escritor de reportes.

Define el contrato para escribir el resultado de una corrida en algún
formato persistente (Excel, CSV, etc.). El dominio solo produce un
AggregateResult y se lo pasa a quien implemente este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.aggregate_result import AggregateResult


class ReportWriter(ABC):
    """Interfaz para escribir resultados de una corrida."""

    @abstractmethod
    def write(self, result: AggregateResult, output_path: Path) -> Path:
        """Escribe el resultado agregado.

        Args:
            result: Resultado de la agregación.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
