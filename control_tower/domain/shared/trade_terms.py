"""
Tablas y extractores de términos de comercio exterior.

Contiene las listas cerradas que usa el negocio: códigos de moneda,
Incoterms 2010/2020 y alias de países. Las tablas son datos; para
agregar un alias nuevo se edita la tabla, no la lógica.
"""

import re

from control_tower.domain.shared.text_cleaner import (
    capitalize_words,
    normalize_whitespace,
    strip_accents,
)

CURRENCY_CODES: tuple[str, ...] = (
    "USD",
    "EUR",
    "GBP",
    "COP",
    "MXN",
    "JPY",
    "CAD",
    "AUD",
    "CHF",
    "CNY",
)

# Incoterms 2010 + 2020 (DAT fue reemplazado por DPU, pero sigue
# apareciendo en operaciones viejas).
INCOTERMS: tuple[str, ...] = (
    "EXW",
    "FCA",
    "FAS",
    "FOB",
    "CFR",
    "CIF",
    "CPT",
    "CIP",
    "DAT",
    "DAP",
    "DPU",
    "DDP",
)

_CURRENCY_PATTERN: re.Pattern[str] = re.compile(
    r"\b(" + "|".join(CURRENCY_CODES) + r")\b", re.IGNORECASE
)

_INCOTERM_PATTERN: re.Pattern[str] = re.compile(r"\b(" + "|".join(INCOTERMS) + r")\b", re.IGNORECASE)

_PAYMENT_TERMS_PATTERN: re.Pattern[str] = re.compile(
    r"(?:T[ÉE]RMINOS DE PAGO|CONDICIONES DE PAGO|PAYMENT TERMS)[ \t]*:[ \t]*([^\n]*)",
    re.IGNORECASE,
)

# Clave: nombre en mayúsculas y sin acentos. Valor: forma canónica.
_COUNTRY_ALIASES: dict[str, str] = {
    "MEXICO": "México",
    "MX": "México",
    "COLOMBIA": "Colombia",
    "CO": "Colombia",
    "CHINA": "China",
    "CN": "China",
    "USA": "Estados Unidos",
    "US": "Estados Unidos",
    "EEUU": "Estados Unidos",
    "EE.UU.": "Estados Unidos",
    "EE UU": "Estados Unidos",
    "ESTADOS UNIDOS": "Estados Unidos",
    "UNITED STATES": "Estados Unidos",
    "UK": "Reino Unido",
    "UNITED KINGDOM": "Reino Unido",
    "REINO UNIDO": "Reino Unido",
    "GERMANY": "Alemania",
    "ALEMANIA": "Alemania",
    "SPAIN": "España",
    "ESPANA": "España",
    "FRANCE": "Francia",
    "FRANCIA": "Francia",
    "ITALY": "Italia",
    "ITALIA": "Italia",
    "BRAZIL": "Brasil",
    "BRASIL": "Brasil",
    "PERU": "Perú",
    "PANAMA": "Panamá",
    "CANADA": "Canadá",
    "JAPAN": "Japón",
    "JAPON": "Japón",
    "SOUTH KOREA": "Corea del Sur",
    "COREA": "Corea del Sur",
    "COREA DEL SUR": "Corea del Sur",
    "TAIWAN": "Taiwán",
    "TURKEY": "Turquía",
    "TURQUIA": "Turquía",
    "INDIA": "India",
    "VIETNAM": "Vietnam",
    "ECUADOR": "Ecuador",
    "CHILE": "Chile",
    "ARGENTINA": "Argentina",
}


def extract_currency_code(text: str) -> str | None:
    """Devuelve el primer código de moneda ISO conocido (como palabra completa).

    Ejemplos:
        >>> extract_currency_code("USD NA")
        'USD'
        >>> extract_currency_code("dólares") is None
        True
    """
    if not text:
        return None
    match = _CURRENCY_PATTERN.search(text)
    return match.group(1).upper() if match else None


def extract_incoterm(text: str) -> str | None:
    """Devuelve el primer Incoterm de la lista blanca presente como palabra completa.

    Ejemplos:
        >>> extract_incoterm("fob - Shanghai")
        'FOB'
        >>> extract_incoterm("FOBS") is None
        True
    """
    if not text:
        return None
    match = _INCOTERM_PATTERN.search(text)
    return match.group(1).upper() if match else None


def normalize_country_name(country_name: str) -> str:
    """Normaliza un nombre de país a su forma de visualización.

    Los alias conocidos (con o sin acentos, en español o inglés) se
    traducen a la forma canónica. Un país desconocido se devuelve con
    espacios colapsados y en formato título.

    Ejemplos:
        >>> normalize_country_name("MÉXICO")
        'México'
        >>> normalize_country_name("usa")
        'Estados Unidos'
        >>> normalize_country_name("ZONA FRANCA")
        'Zona Franca'
    """
    nombre = normalize_whitespace(country_name)
    if not nombre:
        return ""

    clave = strip_accents(nombre).upper()
    if clave in _COUNTRY_ALIASES:
        return _COUNTRY_ALIASES[clave]

    return capitalize_words(nombre)


def extract_payment_terms(text: str) -> str | None:
    """Devuelve el texto que sigue a la etiqueta de términos de pago, sin estructurar.

    Reconoce "TÉRMINOS DE PAGO", "TERMINOS DE PAGO", "CONDICIONES DE PAGO"
    y "PAYMENT TERMS". None si no hay etiqueta o si está vacía.

    Ejemplos:
        >>> extract_payment_terms("- TÉRMINOS DE PAGO: 30% ADVANCE / 70% AGAINST BL COPY")
        '30% ADVANCE / 70% AGAINST BL COPY'
    """
    if not text:
        return None
    match = _PAYMENT_TERMS_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1).strip() or None

