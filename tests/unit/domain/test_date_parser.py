"""
Tests para control_tower.domain.shared.date_parser

Las liberaciones traen la fecha en ISO ("2025-07-25") casi siempre; las
filas antiguas usan DD/MM/YYYY. MM/DD/YYYY nunca se adivina.
"""

from datetime import date

from control_tower.domain.shared.date_parser import (
    convert_date_format,
    extract_dates,
    parse_iso_date,
    to_iso_date,
)


class TestConvertDateFormat:
    def test_dd_mm_yyyy(self):
        assert convert_date_format("25/07/2025") == "2025-07-25"

    def test_un_digito(self):
        assert convert_date_format("5/7/2025") == "2025-07-05"

    def test_espacios_alrededor(self):
        assert convert_date_format("  11/09/2025 ") == "2025-09-11"

    def test_iso_no_se_acepta(self):
        """Solo convierte DD/MM/YYYY; una fecha ya ISO devuelve None."""
        assert convert_date_format("2025-07-25") is None

    def test_fecha_inexistente(self):
        assert convert_date_format("31/02/2025") is None

    def test_mes_dia_no_se_adivina(self):
        assert convert_date_format("07/25/2025") is None

    def test_texto_extra(self):
        assert convert_date_format("25/07/2025 aprox") is None

    def test_vacio(self):
        assert convert_date_format("") is None


class TestExtractDates:
    def test_varias_fechas_en_orden(self):
        assert extract_dates("Fecha: 2025-07-25 / pago 2025-08-07") == [
            "2025-07-25",
            "2025-08-07",
        ]

    def test_duplicados(self):
        assert extract_dates("2025-07-25 y 2025-07-25") == ["2025-07-25", "2025-07-25"]

    def test_sin_guiones(self):
        assert extract_dates("20250725") == []

    def test_vacio(self):
        assert extract_dates("") == []


class TestToIsoDate:
    def test_iso_con_comentario(self):
        assert to_iso_date("2025-07-25 (ejecutada)") == "2025-07-25"

    def test_dd_mm_yyyy(self):
        assert to_iso_date("11/09/2025") == "2025-09-11"

    def test_texto_crudo(self):
        assert to_iso_date("  por definir ") == "por definir"

    def test_vacio(self):
        assert to_iso_date("") == ""


class TestParseIsoDate:
    def test_valida(self):
        assert parse_iso_date("2025-07-25") == date(2025, 7, 25)

    def test_fecha_inexistente(self):
        assert parse_iso_date("2025-02-30") is None

    def test_no_iso(self):
        assert parse_iso_date("por definir") is None

    def test_vacio(self):
        assert parse_iso_date("") is None
