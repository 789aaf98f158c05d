"""
Utilidades de limpieza y recorte de texto.

Funciones reutilizables para normalizar el texto libre de la columna
"Info Gnal + Info Compra Int" antes de que el parser de operaciones
lo procese, y para recortar secciones o valores etiquetados.

Estas funciones NO tienen lógica de negocio (no saben de giros ni de
liberaciones). Solo operan sobre strings puros.
"""

import re
import unicodedata

# Comillas tipográficas, guiones largos y espacios especiales que llegan
# desde Excel/Google Sheets al exportar el CSV.
_REEMPLAZOS: dict[str, str] = {
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
    "–": "-",
    "—": "-",
    " ": " ",
    "\t": " ",
}

# Todo lo que no sea letra (incluye acentos), dígito, espacio o la
# puntuación que aparece en nombres y direcciones bancarias.
_CARACTERES_ESPECIALES: re.Pattern[str] = re.compile(r"[^\w\s.,;:\-/#()&'\"%+@]")

_NOMBRE_NO_PERMITIDO: re.Pattern[str] = re.compile(r"[^0-9A-Za-zÀ-ÖØ-öø-ÿ\s]")

_PALABRA: re.Pattern[str] = re.compile(r"\S+")


def normalize_whitespace(text: str) -> str:
    """Colapsa cualquier secuencia de espacios (incluye saltos de línea) en uno solo.

    Ejemplos:
        >>> normalize_whitespace("  CHINA ZHESHANG\\n  BANK  ")
        'CHINA ZHESHANG BANK'
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Reemplaza caracteres de control por espacio, excepto \\n, \\r y \\t.

    Ejemplos:
        >>> remove_non_printable("MALE\\x00SAS")
        'MALE SAS'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Las celdas del CSV llegan con \\r\\n cuando se exportan desde Windows
    y con \\r sueltos cuando pasaron por Excel para Mac.
    """
    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_accents(text: str) -> str:
    """Quita diacríticos conservando la letra base.

    Ejemplos:
        >>> strip_accents("Liberación México")
        'Liberacion Mexico'
    """
    if not text:
        return ""
    descompuesto = unicodedata.normalize("NFD", text)
    return "".join(c for c in descompuesto if unicodedata.category(c) != "Mn")


def clean_text(text: str) -> str:
    """Elimina caracteres especiales conservando lo necesario para nombres y direcciones.

    Secuencia:
    1. Normaliza comillas tipográficas, guiones largos, tabs y espacios no-break.
    2. Elimina caracteres de control.
    3. Elimina símbolos fuera del conjunto permitido (letras, dígitos,
       espacios y . , ; : - / # ( ) & ' " % + @).

    Ejemplos:
        >>> clean_text("CHINA ZHESHANG BANK CO., LTD.—(XI’AN BRANCH) ★")
        "CHINA ZHESHANG BANK CO., LTD.-(XI'AN BRANCH)"
    """
    if not text:
        return ""
    for old, new in _REEMPLAZOS.items():
        text = text.replace(old, new)
    text = remove_non_printable(text)
    text = _CARACTERES_ESPECIALES.sub("", text)
    return text.strip()


def capitalize_words(text: str) -> str:
    """Pone en mayúscula la primera letra de cada palabra y el resto en minúscula.

    Ejemplos:
        >>> capitalize_words("ZONA FRANCA")
        'Zona Franca'
        >>> capitalize_words("méxico")
        'México'
    """
    if not text:
        return ""
    return _PALABRA.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], text.lower())


def sanitize_name(name: str) -> str:
    """Deja solo letras (con acentos), dígitos y espacios; colapsa espacios.

    Ejemplos:
        >>> sanitize_name("ADVANCED GEAR, S.A.S. (CO)")
        'ADVANCED GEAR SAS CO'
    """
    if not name:
        return ""
    return normalize_whitespace(_NOMBRE_NO_PERMITIDO.sub("", name))


def extract_lines_containing(text: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Devuelve las líneas que contienen el patrón, en orden y con duplicados.

    Si `pattern` es str se busca como subcadena literal sin distinguir
    mayúsculas. Si es un regex compilado se usa `search` tal cual.
    Las líneas se devuelven sin espacios en los extremos.
    """
    if not text:
        return []

    lineas = normalize_line_endings(text).split("\n")

    if isinstance(pattern, str):
        buscado = pattern.lower()
        return [linea.strip() for linea in lineas if buscado in linea.lower()]

    return [linea.strip() for linea in lineas if pattern.search(linea)]


def extract_after_label(text: str, label: str, delimiter: str = ":") -> str | None:
    """Extrae el texto que sigue a `label` + `delimiter` hasta el fin de la línea.

    La etiqueta se busca literal y sin distinguir mayúsculas. Entre la
    etiqueta y el delimitador se toleran espacios (no saltos de línea).

    Returns:
        El valor sin espacios en los extremos ("" si la etiqueta existe
        pero no tiene valor). None si la etiqueta no aparece.

    Ejemplos:
        >>> extract_after_label("- SWIFT: ZJCBCN2N\\n- ICOTERM COMPRA: FOB", "SWIFT")
        'ZJCBCN2N'
    """
    if not text or not label:
        return None

    patron = re.compile(
        rf"{re.escape(label)}[ \t]*{re.escape(delimiter)}[ \t]*([^\n]*)",
        re.IGNORECASE,
    )
    match = patron.search(normalize_line_endings(text))
    if match is None:
        return None
    return match.group(1).strip()


def split_into_blocks(text: str, separator: str | re.Pattern[str]) -> list[str]:
    """Divide el texto por un separador literal o regex.

    Cada bloque se devuelve sin espacios en los extremos y los bloques
    vacíos se descartan. El orden original se conserva.
    """
    if not text:
        return []

    if isinstance(separator, str):
        if not separator:
            return [text.strip()] if text.strip() else []
        partes = text.split(separator)
    else:
        partes = separator.split(text)

    return [parte.strip() for parte in partes if parte and parte.strip()]


def extract_between(text: str, start_marker: str, end_marker: str) -> str | None:
    """Extrae el texto estrictamente entre dos marcadores.

    Se toma la primera aparición de `start_marker` y la primera aparición
    de `end_marker` posterior a ella.

    Returns:
        Texto entre los marcadores (sin incluirlos ni recortarlo).
        None si falta alguno de los marcadores o están invertidos.
    """
    if not text or not start_marker or not end_marker:
        return None

    start_idx = text.find(start_marker)
    if start_idx == -1:
        return None

    start_idx += len(start_marker)
    end_idx = text.find(end_marker, start_idx)
    if end_idx == -1:
        return None

    return text[start_idx:end_idx]
