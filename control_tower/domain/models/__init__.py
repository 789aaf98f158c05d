"""
Modelos de dominio del proyecto control-tower-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from control_tower.domain.models import OperationInfo, Giro, Liberacion
"""

from control_tower.domain.models.estado_proceso import EstadoProceso
from control_tower.domain.models.fila_operacion import FilaOperacion
from control_tower.domain.models.giro import Giro
from control_tower.domain.models.liberacion import Liberacion
from control_tower.domain.models.operation_info import OperationInfo
from control_tower.domain.models.resultado_lote import OperacionProcesada, ResultadoLote

__all__ = [
    "EstadoProceso",
    "FilaOperacion",
    "Giro",
    "Liberacion",
    "OperacionProcesada",
    "OperationInfo",
    "ResultadoLote",
]
