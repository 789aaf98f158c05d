"""
Servicio de dominio: Procesador por lotes de operaciones.

Orquesta el procesamiento de un archivo exportado del tablero:
1. Selecciona la OperationSource adecuada (can_handle).
2. Lee las filas.
3. Descarta las filas vacías o que no parecen texto de operación
   (is_valid_operation_text).
4. Parsea cada fila con el parser de operaciones.
5. Valida de forma cruzada la suma de giros contra el valor total.
6. Devuelve un ResultadoLote.

La validación cruzada solo ADVIERTE: una operación cuyos giros no
cuadran se conserva y se registra en la bitácora. Una fila mala nunca
detiene el lote.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from pathlib import Path

from control_tower.domain.exceptions import ControlTowerBaseError
from control_tower.domain.models.fila_operacion import FilaOperacion
from control_tower.domain.models.resultado_lote import OperacionProcesada, ResultadoLote
from control_tower.domain.ports.operation_logger import OperationLogger
from control_tower.domain.ports.operation_source import OperationSource
from control_tower.domain.services.operation_info_parser import OperationInfoParser
from control_tower.domain.shared.money import format_money
from control_tower.domain.shared.validators import is_valid_operation_text


class OperationBatchProcessor:
    """Procesa un archivo de operaciones y produce un ResultadoLote.

    Recibe sus dependencias por constructor. No sabe qué fuente concreta
    se está usando, solo conoce el puerto OperationSource.
    """

    def __init__(
        self,
        sources: Sequence[OperationSource],
        logger: OperationLogger,
        fecha_referencia: date | None = None,
        parser: OperationInfoParser | None = None,
    ) -> None:
        """
        Args:
            sources: Fuentes disponibles, en orden de prioridad.
            logger: Bitácora de procesamiento.
            fecha_referencia: Fecha para decidir el estado de las
                liberaciones. None = todas 'pendiente'.
            parser: Parser de operaciones (por defecto, el estándar).
        """
        self._sources = sources
        self._logger = logger
        self._fecha_referencia = fecha_referencia
        self._parser = parser or OperationInfoParser()

    def process_file(self, file_path: Path) -> ResultadoLote | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            ResultadoLote si el archivo se pudo leer (aunque todas sus
            filas se hayan descartado). None si ninguna fuente lo maneja
            o si la lectura falló.
        """
        source = self._find_source(file_path)
        if source is None:
            self._logger.log_file_skipped(
                file_path, f"Ninguna fuente puede manejar '{file_path.suffix}'"
            )
            return None

        try:
            filas = source.read(file_path)
        except ControlTowerBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        self._logger.log_file_received(file_path, len(filas))

        operaciones: list[OperacionProcesada] = []
        descartadas = 0
        for fila in filas:
            operacion = self._process_row(file_path, fila)
            if operacion is None:
                descartadas += 1
            else:
                operaciones.append(operacion)

        return ResultadoLote(
            archivo_origen=file_path.name,
            operaciones=operaciones,
            filas_leidas=len(filas),
            filas_descartadas=descartadas,
        )

    def process_files(self, file_paths: Sequence[Path]) -> list[ResultadoLote]:
        """Procesa varios archivos; devuelve solo los resultados exitosos."""
        resultados: list[ResultadoLote] = []
        for file_path in file_paths:
            resultado = self.process_file(file_path)
            if resultado is not None:
                resultados.append(resultado)
        return resultados

    def _find_source(self, file_path: Path) -> OperationSource | None:
        for source in self._sources:
            if source.can_handle(file_path):
                return source
        return None

    def _process_row(self, file_path: Path, fila: FilaOperacion) -> OperacionProcesada | None:
        if fila.is_empty:
            self._logger.log_row_skipped(file_path, fila.numero_fila, "Celda vacía")
            return None

        if not is_valid_operation_text(fila.texto):
            self._logger.log_row_skipped(
                file_path, fila.numero_fila, "No parece texto de operación"
            )
            return None

        info = self._parser.parse(fila.texto, self._fecha_referencia)
        self._logger.log_row_parsed(
            file_path, fila.numero_fila, len(info.giros), len(info.liberaciones)
        )

        # Validación cruzada: solo si hay giros y un valor total extraído.
        if info.giros and info.valor_total_compra > Decimal("0") and not info.giros_cuadran:
            self._logger.log_validation_mismatch(
                file_path,
                fila.numero_fila,
                "valor_total_compra",
                format_money(info.valor_total_compra),
                format_money(info.total_giros),
            )

        return OperacionProcesada(numero_fila=fila.numero_fila, nombre=fila.nombre, info=info)
