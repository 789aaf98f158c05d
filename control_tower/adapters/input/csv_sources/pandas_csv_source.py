"""
Adaptador de entrada: Fuente CSV con pandas.

Lee la exportación CSV del tablero de operaciones. Cada fila trae, entre
muchas otras columnas, el bloque de texto libre
"5. Info Gnal + Info Compra Int" que procesa el parser.

DETALLES DEL ARCHIVO REAL:
- Exportado desde Google Sheets: UTF-8, a veces con BOM.
- Las celdas de información son multilínea (entre comillas).
- Los encabezados a veces llegan con espacios dobles o al final, así que
  las columnas se buscan sin distinguir espacios ni mayúsculas.
- Todo se lee como texto (dtype=str) para que pandas no convierta
  cuentas o montos a número ni celdas vacías a NaN.
"""

from pathlib import Path

import pandas as pd

from control_tower.domain.exceptions import FormatoInvalidoError, LecturaError
from control_tower.domain.models.fila_operacion import FilaOperacion
from control_tower.domain.ports.operation_source import OperationSource

COLUMNA_INFO_DEFAULT = "5. Info Gnal + Info Compra Int"
COLUMNA_NOMBRE_DEFAULT = "Nombre"


class PandasCsvSource(OperationSource):
    """Lee filas de operaciones de un CSV con pandas."""

    def __init__(
        self,
        columna_info: str = COLUMNA_INFO_DEFAULT,
        columna_nombre: str = COLUMNA_NOMBRE_DEFAULT,
        separador: str = ",",
    ) -> None:
        """
        Args:
            columna_info: Encabezado de la columna con el texto libre.
            columna_nombre: Encabezado de la columna con el nombre de la
                           operación. Si no existe, el nombre queda vacío.
            separador: Separador de campos del CSV.
        """
        self._columna_info = columna_info
        self._columna_nombre = columna_nombre
        self._separador = separador

    @property
    def name(self) -> str:
        return "pandas-csv"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".csv"

    def read(self, file_path: Path) -> list[FilaOperacion]:
        df = self._leer_dataframe(file_path)

        columna_info = _buscar_columna(df.columns, self._columna_info)
        if columna_info is None:
            raise FormatoInvalidoError(
                str(file_path),
                f"CSV con columna '{self._columna_info}'",
                f"Columnas encontradas: {list(df.columns)}",
            )
        columna_nombre = _buscar_columna(df.columns, self._columna_nombre)

        filas: list[FilaOperacion] = []
        for numero, (_, row) in enumerate(df.iterrows(), start=1):
            filas.append(
                FilaOperacion(
                    numero_fila=numero,
                    texto=row[columna_info],
                    nombre=row[columna_nombre].strip() if columna_nombre else "",
                )
            )
        return filas

    def _leer_dataframe(self, file_path: Path) -> pd.DataFrame:
        try:
            return pd.read_csv(
                file_path,
                sep=self._separador,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
            )
        except (OSError, UnicodeDecodeError) as e:
            raise LecturaError(str(file_path), str(e))
        except pd.errors.EmptyDataError:
            raise LecturaError(str(file_path), "El archivo está vacío")
        except pd.errors.ParserError as e:
            raise LecturaError(str(file_path), f"CSV mal formado: {e}")


def _clave_columna(nombre: str) -> str:
    return " ".join(str(nombre).split()).casefold()


def _buscar_columna(columnas: pd.Index, buscada: str) -> str | None:
    """Encuentra la columna ignorando espacios repetidos y mayúsculas."""
    clave = _clave_columna(buscada)
    for columna in columnas:
        if _clave_columna(columna) == clave:
            return columna
    return None
