"""
Modelo de dominio: Liberación de capital.

Una liberación es un tramo de capital liberado (pago/amortización) con
su fecha. Se extrae de segmentos con encabezado "Liberación N".
"""

from dataclasses import dataclass
from decimal import Decimal

from control_tower.domain.models.estado_proceso import EstadoProceso


@dataclass(frozen=True)
class Liberacion:
    """Un tramo de liberación de capital."""

    numero: int
    """Posición en la secuencia (1-based). Sale del encabezado
    'Liberación N'; si no trae número, es la posición de aparición."""

    capital: Decimal
    """Monto liberado. Siempre > 0."""

    fecha: str = ""
    """Fecha ISO 'YYYY-MM-DD' si se pudo interpretar; texto crudo si no."""

    estado: str = EstadoProceso.PENDIENTE.value
    """'completado' si la fecha ya pasó respecto a la fecha de referencia
    del parseo; 'pendiente' en cualquier otro caso."""

    def to_dict(self) -> dict:
        """Representación JSON con las claves que consume el dashboard."""
        return {
            "numero": self.numero,
            "capital": float(self.capital),
            "fecha": self.fecha,
            "estado": self.estado,
        }
