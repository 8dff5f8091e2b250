"""
Tests para ExcelWriter.

Se escribe el reporte a un archivo temporal y se lee de vuelta con pandas
para verificar las dos hojas.
"""

import pandas as pd
import pytest

from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import OutputError
from src.domain.models.digit_sequence import DigitSequence
from src.domain.services.bank_aggregator import aggregate


@pytest.fixture
def result():
    banks = [
        DigitSequence.from_string("987654321111111", line_number=1),
        DigitSequence.from_string("5", line_number=3),
        DigitSequence.from_string("818181911112111", line_number=4),
    ]
    return aggregate(banks, 12)


class TestExcelWriter:
    """Tests unitarios para ExcelWriter."""

    @pytest.fixture
    def writer(self):
        return ExcelWriter()

    def test_build_frames(self, writer, result):
        df_resumen, df_bancos = writer.build_frames(result)

        assert df_resumen.loc[0, "Total Joltage"] == str(987654321111 + 888911112111)
        assert df_resumen.loc[0, "Con error"] == 1
        assert list(df_bancos["Estado"]) == ["OK", "ERROR", "OK"]
        assert list(df_bancos["Línea"]) == [1, 3, 4]
        assert df_bancos.loc[1, "Error"].startswith("Insufficient batteries")

    def test_build_frames_sin_bancos(self, writer):
        df_resumen, df_bancos = writer.build_frames(aggregate([], 2))
        assert df_bancos.empty
        assert df_resumen.loc[0, "Total Joltage"] == "0"

    def test_escribe_dos_hojas(self, writer, result, tmp_path):
        path = writer.write(result, tmp_path / "reporte.xlsx")

        assert path.exists()
        hojas = pd.read_excel(path, sheet_name=None, dtype=str)
        assert set(hojas) == {"Resumen", "Bancos"}
        assert hojas["Resumen"].loc[0, "Total Joltage"] == "1876565433222"
        assert list(hojas["Bancos"]["Joltage"].fillna("")) == [
            "987654321111",
            "",
            "888911112111",
        ]

    def test_agrega_extension(self, writer, result, tmp_path):
        path = writer.write(result, tmp_path / "reporte")
        assert path.suffix == ".xlsx"
        assert path.exists()

    def test_crea_directorios(self, writer, result, tmp_path):
        path = writer.write(result, tmp_path / "a" / "b" / "reporte.xlsx")
        assert path.exists()

    def test_error_de_escritura(self, writer, result, tmp_path):
        bloqueo = tmp_path / "archivo"
        bloqueo.write_text("no soy directorio")

        with pytest.raises(OutputError):
            writer.write(result, bloqueo / "reporte.xlsx")
