"""
Modelo de dominio: Fila de operación leída del CSV.

Es el "puente" entre el adaptador que lee el archivo (pandas) y el
procesador por lotes, igual que una página de texto lo es entre un
extractor y un parser: el procesador no sabe de dónde salió el texto.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilaOperacion:
    """Una fila del CSV de operaciones, ya decodificada."""

    numero_fila: int
    """Número de fila de datos (1-indexed, sin contar el encabezado)."""

    texto: str
    """Contenido crudo de la columna de información general."""

    nombre: str = ""
    """Nombre de la operación (columna 'Nombre'), vacío si no existe."""

    @property
    def is_empty(self) -> bool:
        """Indica si la celda de información no tiene texto útil."""
        return not self.texto.strip()
