"""
Adaptador de salida: Logger a consola.

Implementación simple de OperationLogger que imprime eventos a stdout
con un formato consistente y acumula las métricas para el resumen final.

Útil para ejecución manual desde terminal. Un FileLogger o un logger
para el backend del tablero implementaría la misma interfaz sin cambiar
el dominio.
"""

from pathlib import Path

from control_tower.domain.ports.operation_logger import OperationLogger


class ConsoleLogger(OperationLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Si es True, imprime también cada fila parseada.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_descartados: int = 0
        self._filas_parseadas: int = 0
        self._filas_descartadas: int = 0
        self._total_giros: int = 0
        self._total_liberaciones: int = 0
        self._discrepancias: list[dict] = []
        self._errores: list[dict] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, num_filas: int) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({num_filas} filas)")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    # --- Filas ---

    def log_row_skipped(self, file_path: Path, numero_fila: int, reason: str) -> None:
        self._filas_descartadas += 1
        if self._verbose:
            print(f"  ⏭️  Fila {numero_fila} descartada ({file_path.name}): {reason}")

    def log_row_parsed(
        self, file_path: Path, numero_fila: int, num_giros: int, num_liberaciones: int
    ) -> None:
        self._filas_parseadas += 1
        self._total_giros += num_giros
        self._total_liberaciones += num_liberaciones
        if self._verbose:
            print(
                f"  ✅ Fila {numero_fila} ({file_path.name}): "
                f"{num_giros} giros, {num_liberaciones} liberaciones"
            )

    def log_validation_mismatch(
        self,
        file_path: Path,
        numero_fila: int,
        field: str,
        expected: str,
        actual: str,
    ) -> None:
        self._discrepancias.append(
            {
                "archivo": file_path.name,
                "fila": numero_fila,
                "campo": field,
                "esperado": expected,
                "calculado": actual,
            }
        )
        print(
            f"  ⚠️  Discrepancia en {file_path.name}, fila {numero_fila}: "
            f"{field} esperado: {expected}, suma de giros: {actual}"
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append(
            {
                "archivo": file_path.name,
                "tipo": type(error).__name__,
                "error": str(error),
            }
        )
        print(f"  ❌ Error: {file_path.name}: {error}")

    # --- Salida ---

    def log_export_complete(self, output_path: Path, num_operaciones: int) -> None:
        print(f"  💾 Generado: {output_path} ({num_operaciones} operaciones)")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "filas_parseadas": self._filas_parseadas,
            "filas_descartadas": self._filas_descartadas,
            "total_giros": self._total_giros,
            "total_liberaciones": self._total_liberaciones,
            "discrepancias": len(self._discrepancias),
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  Filas parseadas:      {self._filas_parseadas}")
        print(f"  Filas descartadas:    {self._filas_descartadas}")
        print(f"  Giros extraídos:      {self._total_giros}")
        print(f"  Liberaciones:         {self._total_liberaciones}")
        print(f"  Discrepancias giros:  {len(self._discrepancias)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
