"""
Tests para control_tower.domain.shared.text_cleaner

Los textos de prueba imitan celdas reales de la columna
"5. Info Gnal + Info Compra Int": viñetas con guion, etiquetas en
mayúsculas, líneas de guiones como separadores.
"""

import re

from control_tower.domain.shared.text_cleaner import (
    capitalize_words,
    clean_text,
    extract_after_label,
    extract_between,
    extract_lines_containing,
    normalize_line_endings,
    normalize_whitespace,
    sanitize_name,
    split_into_blocks,
    strip_accents,
)


class TestNormalizeWhitespace:
    def test_colapsa_espacios_y_saltos(self):
        assert normalize_whitespace("  CHINA ZHESHANG\n  BANK  ") == "CHINA ZHESHANG BANK"

    def test_tabs(self):
        assert normalize_whitespace("USD\t\tNA") == "USD NA"

    def test_vacio(self):
        assert normalize_whitespace("") == ""

    def test_solo_espacios(self):
        assert normalize_whitespace(" \n\t ") == ""


class TestNormalizeLineEndings:
    def test_windows(self):
        assert normalize_line_endings("a\r\nb") == "a\nb"

    def test_mac_clasico(self):
        assert normalize_line_endings("a\rb\r\nc") == "a\nb\nc"

    def test_vacio(self):
        assert normalize_line_endings("") == ""


class TestStripAccents:
    def test_quita_tildes(self):
        assert strip_accents("Liberación México") == "Liberacion Mexico"

    def test_conserva_letra_base_de_enie(self):
        assert strip_accents("España") == "Espana"

    def test_vacio(self):
        assert strip_accents("") == ""


class TestCleanText:
    def test_caracteres_tipograficos(self):
        """Comillas y guiones largos que llegan al copiar desde Word/Sheets."""
        assert (
            clean_text("CHINA ZHESHANG BANK CO., LTD.—(XI’AN BRANCH) ★")
            == "CHINA ZHESHANG BANK CO., LTD.-(XI'AN BRANCH)"
        )

    def test_conserva_acentos(self):
        assert clean_text("DIRECCIÓN: Bogotá") == "DIRECCIÓN: Bogotá"

    def test_espacio_no_break(self):
        assert clean_text("USD\u00a0NA") == "USD NA"

    def test_caracteres_de_control(self):
        assert clean_text("MALE\x00SAS") == "MALE SAS"

    def test_vacio(self):
        assert clean_text("") == ""


class TestCapitalizeWords:
    def test_mayusculas(self):
        assert capitalize_words("ZONA FRANCA") == "Zona Franca"

    def test_con_acento(self):
        assert capitalize_words("méxico") == "México"

    def test_conserva_espacios_dobles(self):
        assert capitalize_words("a  b") == "A  B"

    def test_palabras_tras_tab_y_salto(self):
        assert capitalize_words("ZONA\tFRANCA\nBOGOTÁ") == "Zona\tFranca\nBogotá"

    def test_vacio(self):
        assert capitalize_words("") == ""


class TestSanitizeName:
    def test_quita_puntuacion(self):
        assert sanitize_name("ADVANCED GEAR, S.A.S. (CO)") == "ADVANCED GEAR SAS CO"

    def test_conserva_acentos(self):
        assert sanitize_name("José  Pérez & Cía.") == "José Pérez Cía"

    def test_vacio(self):
        assert sanitize_name("") == ""


class TestExtractLinesContaining:
    TEXTO = "- CLIENTE: MALE\n- PAÍS IMPORTADOR: MÉXICO\n  nombre cliente: otro  \n"

    def test_literal_sin_mayusculas(self):
        assert extract_lines_containing(self.TEXTO, "cliente") == [
            "- CLIENTE: MALE",
            "nombre cliente: otro",
        ]

    def test_regex_compilado(self):
        assert extract_lines_containing(self.TEXTO, re.compile(r"^- PA[IÍ]S")) == [
            "- PAÍS IMPORTADOR: MÉXICO"
        ]

    def test_literal_con_caracteres_de_regex(self):
        """Un str se busca literal: el '+' no es cuantificador."""
        assert extract_lines_containing("Info Gnal + Info\notra", "Gnal + Info") == [
            "Info Gnal + Info"
        ]

    def test_sin_coincidencias(self):
        assert extract_lines_containing(self.TEXTO, "SWIFT") == []

    def test_vacio(self):
        assert extract_lines_containing("", "x") == []


class TestExtractAfterLabel:
    def test_valor_hasta_fin_de_linea(self):
        texto = "- SWIFT: ZJCBCN2N\n- ICOTERM COMPRA: FOB"
        assert extract_after_label(texto, "SWIFT") == "ZJCBCN2N"

    def test_sin_mayusculas_y_espacio_antes_del_delimitador(self):
        assert extract_after_label("swift : abc123", "SWIFT") == "abc123"

    def test_etiqueta_ausente(self):
        assert extract_after_label("- CLIENTE: MALE", "SWIFT") is None

    def test_etiqueta_sin_valor(self):
        assert extract_after_label("- OBSERVACIONES: \n- OTRA: x", "OBSERVACIONES") == ""

    def test_delimitador_personalizado(self):
        assert extract_after_label("MONEDA = USD", "MONEDA", "=") == "USD"

    def test_etiqueta_literal(self):
        """La etiqueta no se interpreta como regex."""
        assert extract_after_label("TOTAL (USD): 500", "TOTAL (USD)") == "500"

    def test_vacio(self):
        assert extract_after_label("", "SWIFT") is None


class TestSplitIntoBlocks:
    def test_separador_literal(self):
        assert split_into_blocks("a\n---\n\n---\nb", "---") == ["a", "b"]

    def test_separador_regex(self):
        texto = "giro 1\n-----------\ngiro 2\n------\ngiro 3"
        separador = re.compile(r"^-{3,}$", re.MULTILINE)
        assert split_into_blocks(texto, separador) == ["giro 1", "giro 2", "giro 3"]

    def test_sin_separador_en_texto(self):
        assert split_into_blocks("  un bloque  ", "---") == ["un bloque"]

    def test_vacio(self):
        assert split_into_blocks("", "---") == []


class TestExtractBetween:
    def test_entre_marcadores(self):
        assert extract_between("xx[INI] abc [FIN]yy", "[INI]", "[FIN]") == " abc "

    def test_primer_fin_despues_del_inicio(self):
        assert extract_between("FIN a INI b FIN c FIN", "INI", "FIN") == " b "

    def test_marcadores_invertidos(self):
        assert extract_between("FIN texto INI", "INI", "FIN") is None

    def test_falta_marcador(self):
        assert extract_between("INI texto", "INI", "FIN") is None

    def test_vacio(self):
        assert extract_between("", "INI", "FIN") is None
