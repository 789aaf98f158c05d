"""
Puerto de entrada: Fuente de operaciones.

Define el contrato para leer las filas de operaciones de un archivo.
Hoy el único adaptador es PandasCsvSource (exportación CSV del tablero);
el procesador por lotes itera por las fuentes registradas y usa la
primera cuyo can_handle devuelva True.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from control_tower.domain.models.fila_operacion import FilaOperacion


class OperationSource(ABC):
    """Interfaz para leer filas de operaciones de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si esta fuente puede leer el archivo dado."""
        ...

    @abstractmethod
    def read(self, file_path: Path) -> list[FilaOperacion]:
        """Lee el archivo y devuelve una FilaOperacion por fila de datos.

        Args:
            file_path: Ruta al archivo.

        Returns:
            Filas en el orden del archivo, con numero_fila 1-indexed.

        Raises:
            LecturaError: Si el archivo no se puede leer.
            FormatoInvalidoError: Si falta la columna de información.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para logging."""
        ...
