"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel con 3 hojas:
- Operaciones: una fila por operación con los campos generales,
  bancarios, incoterms, retroalimentación y totales calculados.
- Giros: una fila por giro, con la fila del CSV de donde salió.
- Liberaciones: una fila por liberación.

Los montos viajan como Decimal en el dominio y se convierten a float
solo aquí, al construir los DataFrames.
"""

from pathlib import Path

import pandas as pd

from control_tower.domain.exceptions import OutputError
from control_tower.domain.models.resultado_lote import ResultadoLote
from control_tower.domain.ports.output_writer import OutputWriter


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    @property
    def format_name(self) -> str:
        return "xlsx"

    @property
    def extension(self) -> str:
        return ".xlsx"

    def write(self, resultado: ResultadoLote, output_path: Path) -> Path:
        """Escribe el resultado de un lote a Excel.

        Args:
            resultado: Operaciones parseadas de un CSV.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(resultado, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _filas_operaciones(resultado: ResultadoLote) -> list[dict]:
        filas = []
        for op in resultado.operaciones:
            info = op.info
            filas.append(
                {
                    "Fila": op.numero_fila,
                    "Nombre": op.nombre,
                    "Cliente": info.cliente,
                    "País Importador": info.pais_importador,
                    "País Exportador": info.pais_exportador,
                    "Valor Total Compra": float(info.valor_total_compra),
                    "Moneda": info.moneda_pago,
                    "Términos de Pago": info.terminos_pago,
                    "Beneficiario": info.beneficiario,
                    "Banco": info.banco,
                    "Dirección Banco": info.direccion_banco,
                    "Número de Cuenta": info.numero_cuenta,
                    "SWIFT": info.swift,
                    "SWIFT Válido": info.swift_valido,
                    "Incoterms": info.incoterms_display,
                    "Total Giros": float(info.total_giros),
                    "Giros Cuadran": info.giros_cuadran,
                    "Total Liberaciones": float(info.total_liberaciones),
                    "Inconvenientes": info.inconvenientes,
                    "Descripción Inconvenientes": info.descripcion_inconvenientes or "",
                    "Calificación": info.calificacion,
                }
            )
        return filas

    @staticmethod
    def _filas_giros(resultado: ResultadoLote) -> list[dict]:
        filas = []
        for op in resultado.operaciones:
            for giro in op.info.giros:
                filas.append(
                    {
                        "Fila": op.numero_fila,
                        "Cliente": op.info.cliente,
                        "Número de Giro": giro.numero_giro,
                        "Valor Solicitado": float(giro.valor_solicitado),
                        "Porcentaje": giro.porcentaje_giro,
                        "Estado": giro.estado,
                    }
                )
        return filas

    @staticmethod
    def _filas_liberaciones(resultado: ResultadoLote) -> list[dict]:
        filas = []
        for op in resultado.operaciones:
            for lib in op.info.liberaciones:
                filas.append(
                    {
                        "Fila": op.numero_fila,
                        "Cliente": op.info.cliente,
                        "Liberación": lib.numero,
                        "Capital": float(lib.capital),
                        "Fecha": lib.fecha,
                        "Estado": lib.estado,
                    }
                )
        return filas

    def _escribir_excel(self, resultado: ResultadoLote, output_path: Path) -> None:
        # Columnas explícitas para que una hoja vacía conserve el encabezado.
        df_operaciones = pd.DataFrame(
            self._filas_operaciones(resultado), columns=_COLUMNAS_OPERACIONES
        )
        df_giros = pd.DataFrame(self._filas_giros(resultado), columns=_COLUMNAS_GIROS)
        df_liberaciones = pd.DataFrame(
            self._filas_liberaciones(resultado), columns=_COLUMNAS_LIBERACIONES
        )

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_operaciones.to_excel(writer, index=False, sheet_name="Operaciones")
            df_giros.to_excel(writer, index=False, sheet_name="Giros")
            df_liberaciones.to_excel(writer, index=False, sheet_name="Liberaciones")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_operaciones = writer.sheets["Operaciones"]
            ws_giros = writer.sheets["Giros"]
            ws_liberaciones = writer.sheets["Liberaciones"]

            # Texto para conservar ceros iniciales en cuentas y SWIFT
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Hoja Operaciones ---
            ws_operaciones.set_column("A:A", 6)  # Fila
            ws_operaciones.set_column("B:C", 25)  # Nombre, Cliente
            ws_operaciones.set_column("D:E", 16)  # Países
            ws_operaciones.set_column("F:F", 18, money_format)  # Valor Total
            ws_operaciones.set_column("G:G", 10)  # Moneda
            ws_operaciones.set_column("H:H", 40)  # Términos de Pago
            ws_operaciones.set_column("I:K", 25)  # Beneficiario, Banco, Dirección
            ws_operaciones.set_column("L:M", 18, text_format)  # Cuenta, SWIFT
            ws_operaciones.set_column("N:O", 12)  # SWIFT Válido, Incoterms
            ws_operaciones.set_column("P:P", 16, money_format)  # Total Giros
            ws_operaciones.set_column("Q:Q", 12)  # Giros Cuadran
            ws_operaciones.set_column("R:R", 18, money_format)  # Total Liberaciones
            ws_operaciones.set_column("S:S", 14)  # Inconvenientes
            ws_operaciones.set_column("T:T", 50)  # Descripción
            ws_operaciones.set_column("U:U", 12)  # Calificación

            # --- Hoja Giros ---
            ws_giros.set_column("A:A", 6)
            ws_giros.set_column("B:C", 25)
            ws_giros.set_column("D:D", 18, money_format)
            ws_giros.set_column("E:E", 20)
            ws_giros.set_column("F:F", 12)

            # --- Hoja Liberaciones ---
            ws_liberaciones.set_column("A:A", 6)
            ws_liberaciones.set_column("B:B", 25)
            ws_liberaciones.set_column("C:C", 10)
            ws_liberaciones.set_column("D:D", 18, money_format)
            ws_liberaciones.set_column("E:F", 12)


_COLUMNAS_OPERACIONES = [
    "Fila",
    "Nombre",
    "Cliente",
    "País Importador",
    "País Exportador",
    "Valor Total Compra",
    "Moneda",
    "Términos de Pago",
    "Beneficiario",
    "Banco",
    "Dirección Banco",
    "Número de Cuenta",
    "SWIFT",
    "SWIFT Válido",
    "Incoterms",
    "Total Giros",
    "Giros Cuadran",
    "Total Liberaciones",
    "Inconvenientes",
    "Descripción Inconvenientes",
    "Calificación",
]

_COLUMNAS_GIROS = ["Fila", "Cliente", "Número de Giro", "Valor Solicitado", "Porcentaje", "Estado"]

_COLUMNAS_LIBERACIONES = ["Fila", "Cliente", "Liberación", "Capital", "Fecha", "Estado"]
