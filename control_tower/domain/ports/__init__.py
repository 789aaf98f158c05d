"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from control_tower.domain.ports import OperationSource, OutputWriter
"""

from control_tower.domain.ports.operation_logger import OperationLogger
from control_tower.domain.ports.operation_source import OperationSource
from control_tower.domain.ports.output_writer import OutputWriter

__all__ = [
    "OperationLogger",
    "OperationSource",
    "OutputWriter",
]
