"""
Tests para ConsoleLogger.

Se captura stdout con capsys y se verifican los contadores del resumen.
"""

from pathlib import Path

import pytest

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import InputFileNotFoundError, InsufficientLengthError


class TestConsoleLogger:
    """Tests unitarios para ConsoleLogger."""

    @pytest.fixture
    def logger(self):
        return ConsoleLogger()

    def test_resumen_de_una_corrida(self, logger):
        path = Path("input.txt")
        logger.log_file_received(path, "text-file")
        logger.log_line_skipped(path, 2, "línea en blanco")
        logger.log_banks_loaded(path, 3)
        logger.log_bank_result(0, "91", 91)
        logger.log_bank_failed(1, InsufficientLengthError(required=2, available=1))
        logger.log_bank_result(2, "88", 88)
        logger.log_run_complete(2, 179, 3, 1)

        summary = logger.get_summary()

        assert summary["archivos_recibidos"] == 1
        assert summary["lineas_omitidas"] == 1
        assert summary["bancos_leidos"] == 3
        assert summary["bancos_exitosos"] == 2
        assert summary["bancos_con_error"] == 1
        assert summary["total_joltage"] == 179
        assert summary["errores"][0]["banco"] == 2

    def test_imprime_resultado_por_banco(self, logger, capsys):
        logger.log_bank_result(0, "98", 98)
        out = capsys.readouterr().out
        assert "Bank 1: Maximum Joltage = 98" in out

    def test_modo_silencioso_no_imprime_bancos(self, capsys):
        logger = ConsoleLogger(verbose=False)
        logger.log_bank_result(0, "98", 98)
        assert capsys.readouterr().out == ""
        assert logger.get_summary()["total_joltage"] == 98

    def test_fallas_se_imprimen_aun_en_modo_silencioso(self, capsys):
        logger = ConsoleLogger(verbose=False)
        logger.log_bank_failed(4, InsufficientLengthError(required=12, available=3))
        out = capsys.readouterr().out
        assert "Error in bank 5" in out
        assert "found 3, need at least 12" in out

    def test_error_fatal_no_cuenta_como_banco(self, logger):
        logger.log_error(Path("x.txt"), InputFileNotFoundError("x.txt"))
        summary = logger.get_summary()
        assert summary["bancos_con_error"] == 0
        assert summary["errores"] == [
            {"archivo": "x.txt", "error": "Input file not found: x.txt"}
        ]

    def test_print_summary(self, logger, capsys):
        logger.log_bank_result(0, "91", 91)
        logger.log_bank_failed(1, InsufficientLengthError(required=2, available=1))
        capsys.readouterr()

        logger.print_summary()

        out = capsys.readouterr().out
        assert "TOTAL OUTPUT JOLTAGE: 91" in out
        assert "ERRORES" in out
        assert "banco 2" in out
