"""
Adaptador de salida: Escritor de JSON.

Genera un arreglo JSON con un elemento por operación:

    {"fila": 7, "nombre": "PRUEBA 2", "info": {...OperationInfo.to_dict()...}}

Las claves de `info` son las camelCase que consume el tablero.
"""

import json
from pathlib import Path

from control_tower.domain.exceptions import OutputError
from control_tower.domain.models.resultado_lote import ResultadoLote
from control_tower.domain.ports.output_writer import OutputWriter


class JsonWriter(OutputWriter):
    """Genera archivos JSON UTF-8 (sin escapar acentos)."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def extension(self) -> str:
        return ".json"

    def write(self, resultado: ResultadoLote, output_path: Path) -> Path:
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        datos = [op.to_dict() for op in resultado.operaciones]
        try:
            with output_path.open("w", encoding="utf-8") as f:
                json.dump(datos, f, ensure_ascii=False, indent=self._indent)
        except OSError as e:
            raise OutputError(str(output_path), str(e))

        return output_path
