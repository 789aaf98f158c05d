"""
Extracción de datos de contacto (teléfonos y correos) en texto libre.
"""

import re

# Un "+" opcional, un dígito, y luego dígitos/espacios/guiones/paréntesis/puntos
# en la misma línea, terminando en dígito.
_PHONE_CANDIDATE: re.Pattern[str] = re.compile(r"\+?\d[\d \-().]{5,}\d")

# La parte local solo puede empezar al inicio de una racha de caracteres
# válidos y tiene longitudes acotadas (64 local, 63 por etiqueta de dominio).
_EMAIL_PATTERN: re.Pattern[str] = re.compile(
    r"(?<![A-Za-z0-9._%+\-])[A-Za-z0-9._%+\-]{1,64}"
    r"@[A-Za-z0-9\-]{1,63}(?:\.[A-Za-z0-9\-]{1,63})*\.[A-Za-z]{2,24}\b"
)

_MIN_PHONE_DIGITS = 7
_MAX_PHONE_DIGITS = 15


def extract_phone_numbers(text: str) -> list[str]:
    """Devuelve los números telefónicos encontrados, solo dígitos (y '+' inicial).

    Se aceptan candidatos con 7 a 15 dígitos una vez eliminados los
    separadores.

    Ejemplos:
        >>> extract_phone_numbers("Tel: +57 (1) 555-1234 / 300 123 4567")
        ['+5715551234', '3001234567']
    """
    if not text:
        return []

    telefonos: list[str] = []
    for match in _PHONE_CANDIDATE.finditer(text):
        candidato = match.group(0)
        digitos = re.sub(r"\D", "", candidato)
        if not _MIN_PHONE_DIGITS <= len(digitos) <= _MAX_PHONE_DIGITS:
            continue
        prefijo = "+" if candidato.startswith("+") else ""
        telefonos.append(prefijo + digitos)

    return telefonos


def extract_emails(text: str) -> list[str]:
    """Devuelve los correos electrónicos en orden de aparición.

    Ejemplos:
        >>> extract_emails("contacto: compras@male.com.co, pagos@vigor.cn")
        ['compras@male.com.co', 'pagos@vigor.cn']
    """
    if not text:
        return []
    return _EMAIL_PATTERN.findall(text)
