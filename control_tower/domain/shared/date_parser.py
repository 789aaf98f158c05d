"""
Conversión de fechas del texto de operaciones.

Las fechas de liberaciones se escriben casi siempre en ISO
("2025-07-25"), pero algunas filas antiguas usan "25/07/2025".

Regla fija: solo se acepta DD/MM/YYYY como formato alternativo.
"07/25/2025" NO se reinterpreta como MM/DD/YYYY; se devuelve None para
no adivinar entre formatos ambiguos.
"""

import re
from datetime import date

_ISO_DATE_PATTERN: re.Pattern[str] = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")

_DMY_PATTERN: re.Pattern[str] = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def extract_dates(text: str) -> list[str]:
    """Devuelve todas las subcadenas YYYY-MM-DD en orden de aparición (con duplicados).

    Ejemplos:
        >>> extract_dates("Fecha: 2025-07-25 / pago 2025-08-07")
        ['2025-07-25', '2025-08-07']
    """
    if not text:
        return []
    return [match.group(0) for match in _ISO_DATE_PATTERN.finditer(text)]


def convert_date_format(date_string: str) -> str | None:
    """Convierte DD/MM/YYYY a YYYY-MM-DD.

    Returns:
        Fecha ISO si el texto es exactamente DD/MM/YYYY y corresponde a
        una fecha real del calendario. None en cualquier otro caso,
        incluido un texto que ya está en ISO.

    Ejemplos:
        >>> convert_date_format("25/07/2025")
        '2025-07-25'
        >>> convert_date_format("2025-07-25") is None
        True
        >>> convert_date_format("31/02/2025") is None
        True
    """
    if not date_string:
        return None

    match = _DMY_PATTERN.match(date_string.strip())
    if match is None:
        return None

    day, month, year = int(match.group(1)), int(match.group(2)), int(match.group(3))
    fecha = _build_date(year, month, day)
    if fecha is None:
        return None
    return fecha.isoformat()


def to_iso_date(text: str) -> str:
    """Normaliza el valor de un campo "Fecha" a ISO cuando es posible.

    Orden de intento:
    1. Primera fecha ISO contenida en el texto.
    2. Conversión DD/MM/YYYY del primer token.
    3. Texto crudo (sin espacios en los extremos).

    Ejemplos:
        >>> to_iso_date("2025-07-25 (ejecutada)")
        '2025-07-25'
        >>> to_iso_date("11/09/2025")
        '2025-09-11'
        >>> to_iso_date("por definir")
        'por definir'
    """
    if not text:
        return ""

    fechas = extract_dates(text)
    if fechas:
        return fechas[0]

    valor = text.strip()
    primer_token = valor.split()[0] if valor.split() else ""
    convertida = convert_date_format(primer_token)
    if convertida is not None:
        return convertida

    return valor


def parse_iso_date(text: str) -> date | None:
    """Convierte un string YYYY-MM-DD exacto a `date`; None si no es válido."""
    if not text:
        return None

    match = _ISO_DATE_PATTERN.fullmatch(text.strip())
    if match is None:
        return None

    return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _build_date(year: int, month: int, day: int) -> date | None:
    """Construye un `date`; None si la combinación no existe (31 de febrero, mes 13)."""
    try:
        return date(year, month, day)
    except ValueError:
        return None
