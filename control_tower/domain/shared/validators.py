"""
Predicados de validación de formato.

Son heurísticas de forma, no validaciones contra una fuente oficial:
un SWIFT "válido" aquí es uno con la estructura correcta, no uno que
exista en el directorio de SWIFT.
"""

import re

# 4 letras (banco) + 2 letras (país) + 2 alfanuméricos (plaza)
# + 3 alfanuméricos opcionales (sucursal).
_SWIFT_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}(?:[A-Z0-9]{3})?$")

_ACCOUNT_PATTERN: re.Pattern[str] = re.compile(r"^\d{6,34}$")

# Palabras clave mínimas de una celda de operación. Se necesitan al
# menos dos de los tres grupos.
_OPERATION_KEYWORDS: list[tuple[str, ...]] = [
    ("CLIENTE",),
    ("PAÍS", "PAIS"),
    ("VALOR",),
]

_MIN_OPERATION_TEXT_LENGTH = 50


def is_valid_swift_code(text: str) -> bool:
    """Indica si el texto tiene forma de código SWIFT/BIC de 8 u 11 caracteres.

    Ejemplos:
        >>> is_valid_swift_code("ZJCBCN2N")
        True
        >>> is_valid_swift_code("ZJCBCN2NXXX")
        True
        >>> is_valid_swift_code("1234")
        False
    """
    if not text:
        return False
    return _SWIFT_PATTERN.match(text.strip().upper()) is not None


def is_valid_account_number(text: str) -> bool:
    """Indica si el texto parece un número de cuenta (6 a 34 dígitos).

    Se ignoran espacios y guiones, que es como suelen escribirse las
    cuentas locales y los IBAN agrupados.

    Ejemplos:
        >>> is_valid_account_number("7910 0000 1142-0100035262")
        True
        >>> is_valid_account_number("12345")
        False
    """
    if not text:
        return False
    limpio = re.sub(r"[\s\-]", "", text)
    return _ACCOUNT_PATTERN.match(limpio) is not None


def is_valid_operation_text(text: str) -> bool:
    """Filtro previo: ¿la celda parece un bloque de información de operación?

    Verdadero si el texto tiene más de 50 caracteres y contiene al menos
    dos de las etiquetas CLIENTE, PAÍS (o PAIS) y VALOR.

    El parser NO llama a esta función; la usa quien decide qué filas
    vale la pena parsear (el procesador por lotes).
    """
    if not text or len(text) <= _MIN_OPERATION_TEXT_LENGTH:
        return False

    texto_upper = text.upper()
    encontrados = sum(
        1 for variantes in _OPERATION_KEYWORDS if any(v in texto_upper for v in variantes)
    )
    return encontrados >= 2
