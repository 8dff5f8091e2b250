"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumen): k, conteo de bancos y total de joltage.
- Hoja 2 (Bancos): detalle de cada banco (selección, joltage o error).

Los joltages y el total se escriben como TEXTO: Excel guarda los números
como float de 64 bits y con más de 15 dígitos perdería precisión (con
k=12 y cientos de bancos el total ya tiene 15 dígitos).
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.aggregate_result import AggregateResult
from src.domain.ports.report_writer import ReportWriter


class ExcelWriter(ReportWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(self, result: AggregateResult, output_path: Path) -> Path:
        """Escribe el resultado de una corrida a Excel.

        Args:
            result: Resultado agregado de la corrida.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(result, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS: Generación del Excel
    # =================================================================

    @staticmethod
    def build_frames(result: AggregateResult) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Construye los DataFrames de las hojas Resumen y Bancos."""
        filas_bancos = []
        for outcome in result.outcomes:
            filas_bancos.append(
                {
                    "Banco": outcome.bank_index + 1,
                    "Línea": outcome.line_number if outcome.line_number is not None else "",
                    "Estado": "OK" if outcome.is_success else "ERROR",
                    "Selección": str(outcome.selection) if outcome.selection is not None else "",
                    "Joltage": str(outcome.joltage) if outcome.joltage is not None else "",
                    "Error": str(outcome.error) if outcome.error is not None else "",
                }
            )

        columnas = ["Banco", "Línea", "Estado", "Selección", "Joltage", "Error"]
        df_bancos = pd.DataFrame(filas_bancos, columns=columnas)

        df_resumen = pd.DataFrame(
            [
                {
                    "Baterías por banco": result.k,
                    "Bancos": result.num_banks,
                    "Exitosos": result.num_successful,
                    "Con error": result.num_failed,
                    "Total Joltage": str(result.total),
                }
            ]
        )
        return df_resumen, df_bancos

    def _escribir_excel(self, result: AggregateResult, output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        df_resumen, df_bancos = self.build_frames(result)

        # --- Escribir Excel con xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            # Hoja 1: Resumen
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")

            # Hoja 2: Bancos
            df_bancos.to_excel(writer, index=False, sheet_name="Bancos")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_bancos = writer.sheets["Bancos"]

            # Formato texto para que Excel no convierta los joltages a float
            text_format = workbook.add_format({"num_format": "@"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 18)  # Baterías por banco
            ws_resumen.set_column("B:D", 10)  # Conteos
            ws_resumen.set_column("E:E", 24, text_format)  # Total Joltage

            # --- Formato Hoja Bancos ---
            ws_bancos.set_column("A:B", 8)  # Banco / Línea
            ws_bancos.set_column("C:C", 8)  # Estado
            ws_bancos.set_column("D:E", 24, text_format)  # Selección / Joltage
            ws_bancos.set_column("F:F", 70)  # Error
