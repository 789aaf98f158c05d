"""
Tablas de etiquetas del parser de operaciones.

Cada campo tiene una lista ORDENADA de PatronCampo: se prueban en orden
y gana el primero que produce un valor no vacío. El orden es parte del
contrato: primero la etiqueta canónica, al final los sinónimos y los
errores de tipeo observados en el CSV ("ICOTERM" en lugar de
"INCOTERM"). Reordenar una tabla cambia el resultado sobre textos
ambiguos.

Para agregar una variante nueva basta con agregar una fila a la tabla
correspondiente; el parser no cambia.

FORMATO DE UNA ETIQUETA:
    [- ]ETIQUETA: valor

El guion de viñeta es opcional. El valor termina en el fin de línea o
donde empieza otra etiqueta conocida (hay filas del CSV que llegaron
con todo el bloque en una sola línea).
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from control_tower.domain.shared.money import parse_amount
from control_tower.domain.shared.text_cleaner import normalize_whitespace
from control_tower.domain.shared.trade_terms import normalize_country_name

_FLAGS = re.IGNORECASE | re.MULTILINE

# Inicio de etiqueta: principio de línea o después de espacio/viñeta.
# Evita que "BANCO" matchee dentro de "DATOS BANCARIOS".
_INICIO = r"(?:^|(?<=[\s\-*•]))"

_VINETA = r"(?:[-•*][ \t]*)?"

# Todas las etiquetas que pueden cortar un valor escrito en la misma línea.
_ETIQUETAS_CONOCIDAS: list[str] = [
    r"NOMBRE CLIENTE",
    r"CLIENTE",
    r"PA[IÍ]S IMPORTADOR",
    r"PA[IÍ]S EXPORTADOR",
    r"VALOR TOTAL DE COMPRA",
    r"VALOR TOTAL",
    r"MONEDA DE PAGO SOLICITADO",
    r"MONEDA DE PAGO",
    r"T[ÉE]RMINOS DE PAGO",
    r"PAYMENT TERMS",
    r"BENEFICIARIO",
    r"BANCO",
    r"DIRECCI[OÓ]N",
    r"N[UÚ]MERO DE CUENTA",
    r"SWIFT",
    r"I[NC]?COTERMS?[ \t]+(?:DE[ \t]+)?(?:COMPRA|VENTA)",
    r"OBSERVACIONES",
    r"VALOR SOLICITADO",
    r"N[UÚ]MERO DE GIRO",
    r"PORCENTAJE DE GIRO",
    r"ESTADO(?:[ \t]+DE)?(?:[ \t]+GIRO)?",
    r"Inconvenientes",
    r"Descripci[oó]n(?:[ \t]+de)?[ \t]+inconvenientes",
    r"Calificaci[oó]n",
]

# Corte de un valor en la etiqueta siguiente escrita en la misma línea.
# El lookbehind hace que cada racha de espacios se pruebe una sola vez,
# desde su primer carácter.
_SIGUIENTE_ETIQUETA = re.compile(
    r"(?<![ \t])[ \t]+" + _VINETA + r"(?:" + "|".join(_ETIQUETAS_CONOCIDAS) + r")[ \t]*:",
    _FLAGS,
)


def cortar_en_siguiente_etiqueta(valor: str) -> str:
    """Recorta el valor donde empieza otra etiqueta conocida y quita los
    espacios de los extremos.

    Ejemplos:
        >>> cortar_en_siguiente_etiqueta(" ACME SAS - PAÍS IMPORTADOR: COLOMBIA")
        'ACME SAS'
    """
    corte = _SIGUIENTE_ETIQUETA.search(valor)
    if corte is not None:
        valor = valor[: corte.start()]
    return valor.strip()


@dataclass(frozen=True)
class PatronCampo:
    """Una variante de etiqueta y cómo convertir lo que captura."""

    patron: re.Pattern[str]
    """Regex con un grupo nombrado 'valor'."""

    transformar: Callable[[str], object] = normalize_whitespace
    """Conversión del texto capturado (monto, país normalizado, etc.)."""

    cortar_valor: bool = False
    """Si es True, el valor capturado se recorta en la siguiente etiqueta
    conocida antes de transformarlo."""

    def extraer(self, texto: str) -> object | None:
        """Valor transformado de la primera coincidencia; None si no hay."""
        match = self.patron.search(texto)
        if match is None:
            return None
        valor = match.group("valor")
        if self.cortar_valor:
            valor = cortar_en_siguiente_etiqueta(valor)
        return self.transformar(valor)


def etiqueta(
    label: str, transformar: Callable[[str], object] = normalize_whitespace
) -> PatronCampo:
    """Construye el PatronCampo de una etiqueta 'LABEL: valor'.

    Args:
        label: Fragmento regex de la etiqueta (sin los dos puntos).
        transformar: Conversión del valor capturado.
    """
    # Captura codiciosa hasta el fin de línea; el recorte se hace en Python.
    patron = re.compile(_INICIO + label + r"[ \t]*:(?P<valor>[^\n]*)", _FLAGS)
    return PatronCampo(patron, transformar, cortar_valor=True)


def buscar_primero(texto: str, patrones: list[PatronCampo], default: object) -> object:
    """Recorre la tabla en orden y devuelve el primer valor no vacío."""
    for patron in patrones:
        valor = patron.extraer(texto)
        if valor:
            return valor
    return default


# ============================================================
# DATOS GENERALES
# ============================================================

CLIENTE: list[PatronCampo] = [
    etiqueta(r"CLIENTE"),
    etiqueta(r"NOMBRE CLIENTE"),
]

PAIS_IMPORTADOR: list[PatronCampo] = [
    etiqueta(r"PA[IÍ]S IMPORTADOR", normalize_country_name),
    etiqueta(r"DESTINO", normalize_country_name),
]

PAIS_EXPORTADOR: list[PatronCampo] = [
    etiqueta(r"PA[IÍ]S EXPORTADOR", normalize_country_name),
    etiqueta(r"ORIGEN", normalize_country_name),
]

VALOR_TOTAL_COMPRA: list[PatronCampo] = [
    etiqueta(r"VALOR TOTAL DE COMPRA", parse_amount),
    etiqueta(r"VALOR TOTAL", parse_amount),
    etiqueta(r"MONTO", parse_amount),
]

# El valor se guarda tal cual ("USD NA"): el token extra es ruido del
# formulario pero el dashboard lo muestra así.
MONEDA_PAGO: list[PatronCampo] = [
    etiqueta(r"MONEDA DE PAGO SOLICITADO"),
    etiqueta(r"MONEDA DE PAGO"),
    etiqueta(r"MONEDA"),
    etiqueta(r"CURRENCY"),
]

TERMINOS_PAGO: list[PatronCampo] = [
    etiqueta(r"T[ÉE]RMINOS DE PAGO"),
    etiqueta(r"PAYMENT TERMS"),
]

# ============================================================
# DATOS BANCARIOS (se buscan solo dentro del bloque bancario)
# ============================================================

INICIO_BLOQUE_BANCARIO = re.compile(r"DATOS BANCARIOS(?:[ \t]*\*{3,})?", _FLAGS)
FIN_BLOQUE_BANCARIO = re.compile(r"^[ \t]*(?:\*{3,}|-{3,})[ \t]*$", re.MULTILINE)

BENEFICIARIO: list[PatronCampo] = [etiqueta(r"BENEFICIARIO")]
BANCO: list[PatronCampo] = [etiqueta(r"BANCO")]
DIRECCION_BANCO: list[PatronCampo] = [etiqueta(r"DIRECCI[OÓ]N")]
NUMERO_CUENTA: list[PatronCampo] = [etiqueta(r"N[UÚ]MERO DE CUENTA")]
SWIFT: list[PatronCampo] = [etiqueta(r"SWIFT")]

# ============================================================
# INCOTERMS
# ============================================================
# Solo se conserva el código inicial de 3-4 letras: "FOB - SHANGHAI" → "FOB".
# No se valida contra la lista de Incoterms oficiales.

_VARIANTES_INCOTERM: list[str] = [
    r"INCOTERM",
    r"INCOTERMS",
    r"ICOTERM",
    r"ICOTERMS",
    r"I[NC]?COTERMS?",
]


def _incoterm(variante: str, lado: str) -> PatronCampo:
    patron = re.compile(
        _INICIO
        + variante
        + r"[ \t]+(?:DE[ \t]+)?"
        + lado
        + r"[ \t]*:[ \t]*(?P<valor>[A-Za-z]{3,4})(?=[\s\-]|\Z)",
        _FLAGS,
    )
    return PatronCampo(patron, str.upper)


INCOTERM_COMPRA: list[PatronCampo] = [_incoterm(v, "COMPRA") for v in _VARIANTES_INCOTERM]
INCOTERM_VENTA: list[PatronCampo] = [_incoterm(v, "VENTA") for v in _VARIANTES_INCOTERM]

# ============================================================
# GIROS
# ============================================================

SEPARADOR_SEGMENTOS = re.compile(r"^[ \t]*(?:-{3,}|_{3,})[ \t]*$", re.MULTILINE)
INICIO_GIRO = re.compile(r"(?=" + _INICIO + r"VALOR SOLICITADO[ \t]*:)", _FLAGS)
SEGMENTO_BANCARIO = re.compile(r"DATOS BANCARIOS|N[UÚ]MERO DE CUENTA", re.IGNORECASE)

VALOR_SOLICITADO: list[PatronCampo] = [etiqueta(r"VALOR SOLICITADO", parse_amount)]
NUMERO_GIRO: list[PatronCampo] = [etiqueta(r"N[UÚ]MERO DE GIRO")]
PORCENTAJE_GIRO: list[PatronCampo] = [etiqueta(r"PORCENTAJE DE GIRO")]
ESTADO_GIRO: list[PatronCampo] = [
    etiqueta(r"ESTADO DE GIRO"),
    etiqueta(r"ESTADO GIRO"),
    etiqueta(r"ESTADO"),
]

# ============================================================
# LIBERACIONES
# ============================================================

INICIO_LIBERACION = re.compile(r"(?=" + _INICIO + r"Liberaci[oó]n\b)", _FLAGS)
ENCABEZADO_LIBERACION = re.compile(
    _INICIO + r"Liberaci[oó]n\b[ \t]*(?:N[°º.o]*[ \t]*)?(?P<numero>\d{1,6}(?!\d))?", _FLAGS
)


def _monto_liberacion(label: str) -> PatronCampo:
    # El monto puede venir en la línea siguiente a la etiqueta.
    patron = re.compile(
        _INICIO
        + label
        + r"[ \t]*:[ \t]*(?:\n[ \t]*)?"
        + _VINETA
        + r"(?P<valor>\d[\d.,]*)",
        _FLAGS,
    )
    return PatronCampo(patron, parse_amount)


CAPITAL: list[PatronCampo] = [
    _monto_liberacion(r"Capital"),
    _monto_liberacion(r"Monto"),
    _monto_liberacion(r"Valor liberado"),
]

# La fecha también puede venir en la línea siguiente, pero solo si esa
# línea empieza con un dígito (si no, sería la etiqueta siguiente).
FECHA_LIBERACION: list[PatronCampo] = [
    PatronCampo(
        re.compile(
            _INICIO
            + r"Fecha[ \t]*:[ \t]*(?:\n[ \t]*"
            + _VINETA
            + r"(?=\d))?(?P<valor>[^\n]*)",
            _FLAGS,
        ),
        str.strip,
    ),
]

# ============================================================
# RETROALIMENTACIÓN (solo después del marcador NPS)
# ============================================================

MARCADOR_NPS = re.compile(r"\bNPS\b")

INCONVENIENTES: list[PatronCampo] = [
    etiqueta(r"(?<!ci[oó]n )(?<!de )Inconvenientes"),
]

DESCRIPCION_INCONVENIENTES: list[PatronCampo] = [
    etiqueta(r"Descripci[oó]n(?:[ \t]+de)?[ \t]+inconvenientes"),
]

# "Calificación (1 mala - 5 buena): 5" → se salta el paréntesis.
CALIFICACION = re.compile(
    r"Calificaci[oó]n[^:\n]{0,80}:[ \t]*(?P<valor>\d{1,3})(?!\d)", re.IGNORECASE
)

RESPUESTAS_AFIRMATIVAS = frozenset({"si", "yes", "true", "verdadero"})
