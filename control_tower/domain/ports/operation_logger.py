"""
Puerto de salida: Bitácora de procesamiento.

Define los EVENTOS de negocio del procesamiento por lotes ("se descartó
la fila 7", "los giros no cuadran con el valor total"), no niveles de
logging. La implementación decide si imprime a consola, escribe a
archivo o acumula en memoria para los tests.

El parser de operaciones no usa este puerto: es puro.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class OperationLogger(ABC):
    """Interfaz para la bitácora de procesamiento de operaciones."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, num_filas: int) -> None:
        """Registra que se leyó un archivo y cuántas filas de datos trae."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado (extensión no soportada, etc.)."""
        ...

    # --- Filas ---

    @abstractmethod
    def log_row_skipped(self, file_path: Path, numero_fila: int, reason: str) -> None:
        """Registra que una fila no se parseó.

        Args:
            file_path: Archivo de origen.
            numero_fila: Fila de datos (1-indexed).
            reason: Ejemplo: "Celda vacía", "No parece texto de operación".
        """
        ...

    @abstractmethod
    def log_row_parsed(
        self, file_path: Path, numero_fila: int, num_giros: int, num_liberaciones: int
    ) -> None:
        """Registra una fila parseada con el tamaño de sus calendarios."""
        ...

    @abstractmethod
    def log_validation_mismatch(
        self,
        file_path: Path,
        numero_fila: int,
        field: str,
        expected: str,
        actual: str,
    ) -> None:
        """Registra una discrepancia en la validación cruzada.

        Se usa cuando la suma de giros no coincide con el valor total de
        compra. Es una advertencia: la fila se conserva.

        Args:
            file_path: Archivo donde se encontró la discrepancia.
            numero_fila: Fila con la discrepancia.
            field: Campo validado (ej: 'valor_total_compra').
            expected: Valor declarado en el texto.
            actual: Valor calculado (suma de giros).
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Salida ---

    @abstractmethod
    def log_export_complete(self, output_path: Path, num_operaciones: int) -> None:
        """Registra que se generó el archivo de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_descartados': int,
                'filas_parseadas': int,
                'filas_descartadas': int,
                'discrepancias': int,
                'errores': list[dict],  # [{archivo, tipo, error}]
            }
        """
        ...
