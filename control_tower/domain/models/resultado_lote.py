"""
Modelo de dominio: Resultado del procesamiento de un archivo CSV.

Es el objeto que fluye entre el procesador por lotes y los escritores
de salida (Excel, JSON). Cualquier cambio aquí impacta ambos extremos.
"""

from dataclasses import dataclass
from decimal import Decimal

from control_tower.domain.models.operation_info import OperationInfo


@dataclass(frozen=True)
class OperacionProcesada:
    """Una fila ya parseada, con su trazabilidad al CSV."""

    numero_fila: int
    nombre: str
    info: OperationInfo

    def to_dict(self) -> dict:
        return {
            "fila": self.numero_fila,
            "nombre": self.nombre,
            "info": self.info.to_dict(),
        }


@dataclass(frozen=True)
class ResultadoLote:
    """Resultado completo de un archivo de operaciones."""

    archivo_origen: str
    """Nombre del archivo CSV procesado."""

    operaciones: list[OperacionProcesada]
    """Operaciones parseadas, en el orden de las filas del CSV."""

    filas_leidas: int
    """Total de filas de datos del archivo."""

    filas_descartadas: int = 0
    """Filas vacías o que no pasaron el filtro is_valid_operation_text."""

    @property
    def num_operaciones(self) -> int:
        return len(self.operaciones)

    @property
    def valor_total_compra(self) -> Decimal:
        """Suma de valor_total_compra de todas las operaciones."""
        return sum((op.info.valor_total_compra for op in self.operaciones), Decimal("0"))

    @property
    def operaciones_con_discrepancia(self) -> list[OperacionProcesada]:
        """Operaciones con giros cuya suma no coincide con el valor total.

        Solo cuenta operaciones con al menos un giro y valor total > 0;
        las que no tienen calendario de giros no son discrepancias.
        """
        return [
            op
            for op in self.operaciones
            if op.info.giros
            and op.info.valor_total_compra > Decimal("0")
            and not op.info.giros_cuadran
        ]

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.filas_descartadas < 0:
            raise ValueError(f"filas_descartadas no puede ser negativo: {self.filas_descartadas}")
        if len(self.operaciones) + self.filas_descartadas > self.filas_leidas:
            raise ValueError(
                f"Se reportan más filas ({len(self.operaciones)} procesadas + "
                f"{self.filas_descartadas} descartadas) que las leídas ({self.filas_leidas})"
            )
