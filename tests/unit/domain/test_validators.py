"""
Tests para control_tower.domain.shared.validators
"""

from control_tower.domain.shared.validators import (
    is_valid_account_number,
    is_valid_operation_text,
    is_valid_swift_code,
)


class TestIsValidSwiftCode:
    def test_ocho_caracteres(self):
        assert is_valid_swift_code("ZJCBCN2N") is True

    def test_once_caracteres(self):
        assert is_valid_swift_code("ZJCBCN2NXXX") is True

    def test_minusculas_y_espacios(self):
        assert is_valid_swift_code("  zjcbcn2n ") is True

    def test_muy_corto(self):
        assert is_valid_swift_code("1234") is False

    def test_diez_caracteres(self):
        assert is_valid_swift_code("ZJCBCN2NXX") is False

    def test_pais_con_digito(self):
        assert is_valid_swift_code("ZJCB1N2N") is False

    def test_vacio(self):
        assert is_valid_swift_code("") is False


class TestIsValidAccountNumber:
    def test_solo_digitos(self):
        assert is_valid_account_number("46587966666") is True

    def test_con_espacios_y_guiones(self):
        assert is_valid_account_number("7910 0000 1142-0100035262") is True

    def test_muy_corto(self):
        assert is_valid_account_number("12345") is False

    def test_muy_largo(self):
        assert is_valid_account_number("1" * 35) is False

    def test_con_letras(self):
        assert is_valid_account_number("ABC123456") is False

    def test_vacio(self):
        assert is_valid_account_number("") is False


class TestIsValidOperationText:
    def test_bloque_completo(self):
        texto = (
            "- CLIENTE: MALE\n- PAÍS IMPORTADOR: MÉXICO\n"
            "- VALOR TOTAL DE COMPRA: 80000\n"
        )
        assert is_valid_operation_text(texto) is True

    def test_pais_sin_acento(self):
        texto = "- CLIENTE: MALE\n- PAIS IMPORTADOR: MEXICO\n- OBSERVACIONES: ninguna"
        assert is_valid_operation_text(texto) is True

    def test_una_sola_etiqueta(self):
        texto = "- CLIENTE: MALE " + "x" * 60
        assert is_valid_operation_text(texto) is False

    def test_texto_corto(self):
        assert is_valid_operation_text("CLIENTE: A, PAIS: B") is False

    def test_exactamente_cincuenta_caracteres(self):
        texto = "CLIENTE VALOR".ljust(50, ".")
        assert len(texto) == 50
        assert is_valid_operation_text(texto) is False

    def test_vacio(self):
        assert is_valid_operation_text("") is False
