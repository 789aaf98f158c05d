"""
Tests para control_tower.domain.shared.trade_terms
"""

from control_tower.domain.shared.trade_terms import (
    extract_currency_code,
    extract_incoterm,
    extract_payment_terms,
    normalize_country_name,
)


class TestExtractCurrencyCode:
    def test_con_ruido(self):
        assert extract_currency_code("USD NA") == "USD"

    def test_minusculas(self):
        assert extract_currency_code("pago en eur") == "EUR"

    def test_palabra_completa(self):
        assert extract_currency_code("USDT") is None

    def test_desconocida(self):
        assert extract_currency_code("dólares") is None

    def test_vacio(self):
        assert extract_currency_code("") is None


class TestExtractIncoterm:
    def test_con_lugar(self):
        assert extract_incoterm("fob - Shanghai") == "FOB"

    def test_dap(self):
        assert extract_incoterm("DAP - ZONA FRANCA") == "DAP"

    def test_dat_antiguo(self):
        assert extract_incoterm("DAT") == "DAT"

    def test_palabra_completa(self):
        assert extract_incoterm("FOBS") is None

    def test_vacio(self):
        assert extract_incoterm("") is None


class TestNormalizeCountryName:
    def test_alias_con_acento(self):
        assert normalize_country_name("MÉXICO") == "México"

    def test_alias_sin_acento(self):
        assert normalize_country_name("mexico") == "México"

    def test_alias_en_ingles(self):
        assert normalize_country_name("usa") == "Estados Unidos"

    def test_espacios(self):
        assert normalize_country_name("  china  ") == "China"

    def test_desconocido_formato_titulo(self):
        assert normalize_country_name("ZONA FRANCA") == "Zona Franca"

    def test_vacio(self):
        assert normalize_country_name("") == ""


class TestExtractPaymentTerms:
    def test_con_acento(self):
        texto = "- TÉRMINOS DE PAGO: 30% ADVANCE / 70% AGAINST BL COPY\n- OTRO: x"
        assert extract_payment_terms(texto) == "30% ADVANCE / 70% AGAINST BL COPY"

    def test_sin_acento(self):
        assert extract_payment_terms("TERMINOS DE PAGO: 100% anticipado") == "100% anticipado"

    def test_en_ingles(self):
        assert extract_payment_terms("payment terms: net 30") == "net 30"

    def test_etiqueta_vacia(self):
        assert extract_payment_terms("TÉRMINOS DE PAGO:   \nX") is None

    def test_sin_etiqueta(self):
        assert extract_payment_terms("CLIENTE: MALE") is None
