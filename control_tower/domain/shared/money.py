"""
Utilidades para montos y porcentajes.

CONTEXTO DEL PROBLEMA:
Los montos de la columna de información general llegan escritos a mano
por el equipo comercial, sin un formato fijo:

- "80000"            → lo más común
- "98,470"           → coma como separador de miles
- "1,234,567.89"     → miles + decimales
- "40000 USD"        → con moneda pegada
- "1234,5"           → coma decimal (usuarios en Colombia)

SOLUCIÓN:
Un solo tokenizador numérico (_numeric_token) que localiza el primer
número del texto y lo normaliza a la forma "1234.5". A partir de él:
- extract_number devuelve float (utilidad genérica de texto).
- parse_amount devuelve Decimal (montos del modelo de dominio).
"""

import re
from decimal import Decimal, InvalidOperation

# Primero se intenta el formato con miles agrupados ("98,470.50"),
# después un número simple con decimal opcional ("80000", "1234,5").
_NUMBER_PATTERN: re.Pattern[str] = re.compile(r"\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:[.,]\d+)?")

_PERCENTAGE_PATTERN: re.Pattern[str] = re.compile(r"(?<!\d)(\d+(?:[.,]\d+)?)%")


def _numeric_token(text: str) -> str | None:
    """Localiza el primer número del texto y lo devuelve normalizado ("1234.5")."""
    if not text:
        return None

    match = _NUMBER_PATTERN.search(text)
    if match is None:
        return None

    token = match.group(0)
    if "," in token and "." in token:
        # "1,234,567.89": las comas son de miles
        return token.replace(",", "")
    if re.fullmatch(r"\d{1,3}(?:,\d{3})+", token):
        # "98,470": miles sin decimales
        return token.replace(",", "")
    # "1234,5": coma decimal
    return token.replace(",", ".")


def extract_number(text: str) -> float | None:
    """Extrae el primer valor numérico de un texto.

    Ejemplos:
        >>> extract_number("VALOR: 98,470 USD")
        98470.0
        >>> extract_number("1,234,567.89")
        1234567.89
        >>> extract_number("sin monto") is None
        True
    """
    token = _numeric_token(text)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def extract_percentage(text: str) -> float | None:
    """Extrae el número que va inmediatamente antes de un '%'.

    Ejemplos:
        >>> extract_percentage("30% del total")
        30.0
        >>> extract_percentage("30,5%")
        30.5
        >>> extract_percentage("treinta por ciento") is None
        True
    """
    if not text:
        return None
    match = _PERCENTAGE_PATTERN.search(text)
    if match is None:
        return None
    return float(match.group(1).replace(",", "."))


def parse_amount(text: str) -> Decimal:
    """Convierte el primer número del texto a Decimal; Decimal("0") si no hay.

    Es la variante "segura" que usa el parser de operaciones: un monto
    ausente o ilegible se representa con cero, nunca con una excepción.
    Un cero en valor_total_compra significa "no encontrado".

    Ejemplos:
        >>> parse_amount("40000 USD")
        Decimal('40000')
        >>> parse_amount("N/A")
        Decimal('0')
    """
    token = _numeric_token(text)
    if token is None:
        return Decimal("0")
    try:
        return Decimal(token)
    except InvalidOperation:
        return Decimal("0")


def format_money(amount: Decimal) -> str:
    """Formatea un Decimal como string monetario legible.

    Se usa en la bitácora para reportar discrepancias de giros.

    Ejemplos:
        >>> format_money(Decimal("80000"))
        '$80,000.00'
        >>> format_money(Decimal("-1500.5"))
        '-$1,500.50'
    """
    amount = amount.quantize(Decimal("0.01"))
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"
