"""
Modelo de dominio: Giro (desembolso parcial al proveedor).

Cada giro corresponde a un segmento del texto delimitado por líneas de
guiones que contiene la etiqueta "VALOR SOLICITADO".
"""

from dataclasses import dataclass
from decimal import Decimal

from control_tower.domain.models.estado_proceso import EstadoProceso


@dataclass(frozen=True)
class Giro:
    """Un desembolso programado al proveedor."""

    valor_solicitado: Decimal
    """Monto solicitado. Siempre > 0: un segmento sin monto no produce Giro."""

    numero_giro: str = ""
    """Etiqueta libre de secuencia. Ejemplo: '1er Giro a Proveedor'."""

    porcentaje_giro: str = ""
    """Texto libre del porcentaje. Ejemplo: '30% del total'.
    No se convierte a número porque a veces trae comentarios."""

    estado: str = EstadoProceso.PENDIENTE.value
    """Estado del giro. 'pendiente' cuando el texto no indica otro."""

    def to_dict(self) -> dict:
        """Representación JSON con las claves que consume el dashboard."""
        return {
            "valorSolicitado": float(self.valor_solicitado),
            "numeroGiro": self.numero_giro,
            "porcentajeGiro": self.porcentaje_giro,
            "estado": self.estado,
        }
