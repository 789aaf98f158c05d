"""
Excepciones de dominio del proyecto control-tower-parser.

El parser de operaciones NUNCA lanza excepciones: un campo que no se
encuentra queda vacío. Estas excepciones son para las capas de afuera
(lectura del CSV, escritura de resultados), donde el procesador por
lotes necesita distinguir "el archivo no se puede leer" de "al archivo
le falta la columna" para registrarlo en la bitácora y seguir.

Jerarquía:
    ControlTowerBaseError
    ├── FormatoInvalidoError    → El archivo no tiene el formato esperado
    ├── LecturaError            → No se pudo leer el archivo
    └── OutputError             → Error al generar el archivo de salida
"""


class ControlTowerBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class FormatoInvalidoError(ControlTowerBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un CSV pero el archivo es un .xlsx.
    - El CSV no trae la columna "5. Info Gnal + Info Compra Int".
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        self.detalle = detalle
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class LecturaError(ControlTowerBaseError):
    """Se lanza cuando falla la lectura de un archivo de entrada.

    Esto puede pasar porque:
    - El archivo no existe o no hay permisos de lectura.
    - La codificación no es UTF-8.
    - pandas no puede tokenizar el CSV (comillas sin cerrar, etc.).
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(ControlTowerBaseError):
    """Se lanza cuando falla la generación del archivo de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
