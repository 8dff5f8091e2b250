"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Debugging de archivos de entrada.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si False, no imprime el resultado de cada banco
                    (útil con archivos de cientos de líneas). Los contadores
                    se llevan igual.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._lineas_omitidas: int = 0
        self._bancos_leidos: int = 0
        self._bancos_exitosos: int = 0
        self._total_joltage: int = 0
        self._errores: list[dict] = []

    # --- Fase 1: Lectura ---

    def log_file_received(self, file_path: Path, source_name: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({source_name})")

    def log_line_skipped(self, file_path: Path, line_number: int, reason: str) -> None:
        self._lineas_omitidas += 1
        if self._verbose:
            print(f"  ⏭️  Omitida: {file_path.name} línea {line_number} — {reason}")

    def log_banks_loaded(self, file_path: Path, num_banks: int) -> None:
        self._bancos_leidos += num_banks
        print(f"  🔋 Bancos leídos: {num_banks} — {file_path.name}")

    # --- Fase 2: Selección ---

    def log_bank_result(self, bank_index: int, selected: str, joltage: int) -> None:
        self._bancos_exitosos += 1
        self._total_joltage += joltage
        if self._verbose:
            print(f"  ✅ Bank {bank_index + 1}: Maximum Joltage = {joltage}")

    def log_bank_failed(self, bank_index: int, error: Exception) -> None:
        self._errores.append({"banco": bank_index + 1, "error": str(error)})
        print(f"  ❌ Error in bank {bank_index + 1}: {error}")

    def log_run_complete(self, k: int, total: int, num_banks: int, num_failed: int) -> None:
        print(
            f"\n📊 Selección de {k} baterías completada — "
            f"{num_banks} bancos, {num_failed} con error"
        )

    # --- Errores fatales ---

    def log_error(self, file_path: Path | None, error: Exception) -> None:
        nombre = file_path.name if file_path is not None else "-"
        self._errores.append({"archivo": nombre, "error": str(error)})
        print(f"  ❌ Error: {nombre} — {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "lineas_omitidas": self._lineas_omitidas,
            "bancos_leidos": self._bancos_leidos,
            "bancos_exitosos": self._bancos_exitosos,
            "bancos_con_error": sum(1 for e in self._errores if "banco" in e),
            "total_joltage": self._total_joltage,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final de la corrida."""
        summary = self.get_summary()
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {summary['archivos_recibidos']}")
        print(f"  Líneas omitidas:      {summary['lineas_omitidas']}")
        print(f"  Bancos leídos:        {summary['bancos_leidos']}")
        print(f"  Bancos exitosos:      {summary['bancos_exitosos']}")
        print(f"  Bancos con error:     {summary['bancos_con_error']}")
        print(f"  TOTAL OUTPUT JOLTAGE: {summary['total_joltage']}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                origen = f"banco {err['banco']}" if "banco" in err else err["archivo"]
                print(f"    - {origen}: {err['error']}")

        print("=" * 60)
