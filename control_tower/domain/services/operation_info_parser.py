"""
Servicio de dominio: Parser de la información general de una operación.

Convierte el texto libre de la columna "5. Info Gnal + Info Compra Int"
en un OperationInfo. El texto viene de un formulario que cada analista
llena a su manera, así que el parser es tolerante:

1. Normaliza saltos de línea y colapsa líneas en blanco repetidas.
2. Campos generales: tablas de etiquetas ordenadas (field_patterns),
   gana la primera variante que encuentra algo.
3. Datos bancarios: solo dentro del bloque *****DATOS BANCARIOS*****,
   para que "BANCO:" no matchee en otra parte del texto.
4. Incoterms: compra y venta por separado, tolerando "ICOTERM".
5. Giros y liberaciones: el texto se parte en segmentos por líneas de
   guiones y cada segmento se parsea de forma independiente.
6. Retroalimentación: solo el texto después del marcador "NPS".

REGLA DE ORO: nunca lanza excepciones. Un campo que no se encuentra
queda en su valor por defecto (ver OperationInfo) y los demás campos
se siguen extrayendo. Decidir si la fila "sirve" es responsabilidad de
quien llama (is_valid_operation_text, validación cruzada de giros).

El parser es puro: no lee el reloj ni escribe en la bitácora. El estado
de las liberaciones depende de `fecha_referencia`, que pasa el llamador.
"""

import re
from datetime import date
from decimal import Decimal

from control_tower.domain.models.estado_proceso import EstadoProceso
from control_tower.domain.models.giro import Giro
from control_tower.domain.models.liberacion import Liberacion
from control_tower.domain.models.operation_info import OperationInfo
from control_tower.domain.services import field_patterns as fp
from control_tower.domain.shared.date_parser import parse_iso_date, to_iso_date
from control_tower.domain.shared.text_cleaner import normalize_line_endings, strip_accents

_LINEAS_EN_BLANCO = re.compile(r"\n{3,}")
_PRIMERA_PALABRA = re.compile(r"\w+")


class OperationInfoParser:
    """Extrae un OperationInfo de un bloque de texto libre.

    Las tablas de etiquetas son atributos de clase para poder extenderlas
    en una subclase sin tocar el flujo de extracción.
    """

    CLIENTE = fp.CLIENTE
    PAIS_IMPORTADOR = fp.PAIS_IMPORTADOR
    PAIS_EXPORTADOR = fp.PAIS_EXPORTADOR
    VALOR_TOTAL_COMPRA = fp.VALOR_TOTAL_COMPRA
    MONEDA_PAGO = fp.MONEDA_PAGO
    TERMINOS_PAGO = fp.TERMINOS_PAGO
    INCOTERM_COMPRA = fp.INCOTERM_COMPRA
    INCOTERM_VENTA = fp.INCOTERM_VENTA

    def parse(self, text: str, fecha_referencia: date | None = None) -> OperationInfo:
        """Parsea un bloque de información de operación.

        Args:
            text: Contenido crudo de la celda del CSV.
            fecha_referencia: Fecha contra la que se decide si una
                liberación ya se ejecutó. Sin ella, todas quedan
                'pendiente'.

        Returns:
            OperationInfo completo; los campos no encontrados quedan en
            su valor por defecto. Texto vacío o que no es str devuelve
            OperationInfo.vacia().
        """
        if not isinstance(text, str):
            return OperationInfo.vacia()

        texto = self._normalizar(text)
        if not texto:
            return OperationInfo.vacia()

        bloque_bancario = self._bloque_bancario(texto)
        inconvenientes, descripcion, calificacion = self._extraer_retroalimentacion(texto)

        return OperationInfo(
            cliente=fp.buscar_primero(texto, self.CLIENTE, ""),
            pais_importador=fp.buscar_primero(texto, self.PAIS_IMPORTADOR, ""),
            pais_exportador=fp.buscar_primero(texto, self.PAIS_EXPORTADOR, ""),
            valor_total_compra=fp.buscar_primero(texto, self.VALOR_TOTAL_COMPRA, Decimal("0")),
            moneda_pago=fp.buscar_primero(texto, self.MONEDA_PAGO, ""),
            terminos_pago=fp.buscar_primero(texto, self.TERMINOS_PAGO, ""),
            beneficiario=fp.buscar_primero(bloque_bancario, fp.BENEFICIARIO, ""),
            banco=fp.buscar_primero(bloque_bancario, fp.BANCO, ""),
            direccion_banco=fp.buscar_primero(bloque_bancario, fp.DIRECCION_BANCO, ""),
            numero_cuenta=fp.buscar_primero(bloque_bancario, fp.NUMERO_CUENTA, ""),
            swift=fp.buscar_primero(bloque_bancario, fp.SWIFT, ""),
            incoterm_compra=fp.buscar_primero(texto, self.INCOTERM_COMPRA, ""),
            incoterm_venta=fp.buscar_primero(texto, self.INCOTERM_VENTA, ""),
            giros=self._extraer_giros(texto),
            liberaciones=self._extraer_liberaciones(texto, fecha_referencia),
            inconvenientes=inconvenientes,
            descripcion_inconvenientes=descripcion,
            calificacion=calificacion,
        )

    # ============================================================
    # MÉTODOS PRIVADOS
    # ============================================================

    @staticmethod
    def _normalizar(text: str) -> str:
        texto = normalize_line_endings(text)
        texto = _LINEAS_EN_BLANCO.sub("\n\n", texto)
        return texto.strip()

    @staticmethod
    def _bloque_bancario(texto: str) -> str:
        """Recorta el texto entre el marcador DATOS BANCARIOS y la
        siguiente línea de asteriscos o guiones.

        Si no hay marcador se devuelve el texto completo: hay filas
        donde los datos bancarios vienen sin encabezado.
        """
        inicio = fp.INICIO_BLOQUE_BANCARIO.search(texto)
        if inicio is None:
            return texto

        resto = texto[inicio.end():]
        fin = fp.FIN_BLOQUE_BANCARIO.search(resto)
        if fin is None:
            return resto
        return resto[: fin.start()]

    @staticmethod
    def _segmentos(texto: str, inicio_registro: re.Pattern[str]) -> list[str]:
        """Parte el texto por líneas de guiones y luego antes de cada
        inicio de registro, por si dos registros quedaron sin separador."""
        segmentos: list[str] = []
        for segmento in fp.SEPARADOR_SEGMENTOS.split(texto):
            segmentos.extend(parte for parte in inicio_registro.split(segmento) if parte.strip())
        return segmentos

    def _extraer_giros(self, texto: str) -> list[Giro]:
        giros: list[Giro] = []
        for segmento in self._segmentos(texto, fp.INICIO_GIRO):
            giro = self._parsear_giro(segmento)
            if giro is not None:
                giros.append(giro)
        return giros

    @staticmethod
    def _parsear_giro(segmento: str) -> Giro | None:
        """Un segmento produce Giro solo si trae VALOR SOLICITADO > 0."""
        if fp.SEGMENTO_BANCARIO.search(segmento):
            return None

        valor = fp.buscar_primero(segmento, fp.VALOR_SOLICITADO, Decimal("0"))
        if valor <= 0:
            return None

        estado = EstadoProceso.desde_texto(fp.buscar_primero(segmento, fp.ESTADO_GIRO, ""))
        return Giro(
            valor_solicitado=valor,
            numero_giro=fp.buscar_primero(segmento, fp.NUMERO_GIRO, ""),
            porcentaje_giro=fp.buscar_primero(segmento, fp.PORCENTAJE_GIRO, ""),
            estado=estado.value,
        )

    def _extraer_liberaciones(
        self, texto: str, fecha_referencia: date | None
    ) -> list[Liberacion]:
        liberaciones: list[Liberacion] = []
        for segmento in self._segmentos(texto, fp.INICIO_LIBERACION):
            encabezado = fp.ENCABEZADO_LIBERACION.search(segmento)
            if encabezado is None:
                continue

            capital = fp.buscar_primero(segmento, fp.CAPITAL, Decimal("0"))
            if capital <= 0:
                continue

            if encabezado.group("numero"):
                numero = int(encabezado.group("numero"))
            else:
                numero = len(liberaciones) + 1

            fecha = to_iso_date(fp.buscar_primero(segmento, fp.FECHA_LIBERACION, ""))
            liberaciones.append(
                Liberacion(
                    numero=numero,
                    capital=capital,
                    fecha=fecha,
                    estado=self._estado_liberacion(fecha, fecha_referencia).value,
                )
            )
        return liberaciones

    @staticmethod
    def _estado_liberacion(fecha: str, fecha_referencia: date | None) -> EstadoProceso:
        if fecha_referencia is None:
            return EstadoProceso.PENDIENTE
        fecha_liberacion = parse_iso_date(fecha)
        if fecha_liberacion is not None and fecha_liberacion <= fecha_referencia:
            return EstadoProceso.COMPLETADO
        return EstadoProceso.PENDIENTE

    @staticmethod
    def _extraer_retroalimentacion(texto: str) -> tuple[bool, str | None, int | None]:
        """Lee Inconvenientes / Descripción / Calificación después de "NPS".

        Sin marcador NPS no hay retroalimentación: (False, None, None).
        """
        marcador = fp.MARCADOR_NPS.search(texto)
        if marcador is None:
            return False, None, None
        cola = texto[marcador.end():]

        respuesta = fp.buscar_primero(cola, fp.INCONVENIENTES, "")
        primera = _PRIMERA_PALABRA.search(strip_accents(respuesta).lower())
        inconvenientes = primera is not None and primera.group(0) in fp.RESPUESTAS_AFIRMATIVAS

        descripcion = fp.buscar_primero(cola, fp.DESCRIPCION_INCONVENIENTES, None)

        calificacion = None
        match = fp.CALIFICACION.search(cola)
        if match:
            valor = int(match.group("valor"))
            if 1 <= valor <= 5:
                calificacion = valor

        return inconvenientes, descripcion, calificacion


_PARSER = OperationInfoParser()


def parse_operation_info(text: str, fecha_referencia: date | None = None) -> OperationInfo:
    """Atajo funcional: parsea con las tablas de etiquetas por defecto.

    Ejemplo:
        >>> info = parse_operation_info("- CLIENTE: MALE\\n- VALOR TOTAL DE COMPRA: 80000")
        >>> info.cliente, info.valor_total_compra
        ('MALE', Decimal('80000'))
    """
    return _PARSER.parse(text, fecha_referencia)
