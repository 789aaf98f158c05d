"""
Puerto de salida: Escritor de resultados.

El procesador por lotes no decide el formato de salida: produce un
ResultadoLote y se lo pasa a quien implemente este puerto (Excel para
el equipo de comercio exterior, JSON para la API del tablero).
"""

from abc import ABC, abstractmethod
from pathlib import Path

from control_tower.domain.models.resultado_lote import ResultadoLote


class OutputWriter(ABC):
    """Interfaz para escribir el resultado de un lote."""

    @abstractmethod
    def write(self, resultado: ResultadoLote, output_path: Path) -> Path:
        """Escribe el resultado de un archivo de operaciones.

        Args:
            resultado: Operaciones parseadas de un CSV.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Nombre del formato para el registro. Ejemplo: 'xlsx', 'json'."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Extensión con punto que se agrega a la ruta de salida."""
        ...
