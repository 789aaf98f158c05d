"""
Tests para los modelos de dominio.

Verifican valores por defecto, propiedades derivadas, serialización
camelCase e inmutabilidad.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from control_tower.domain.models import (
    EstadoProceso,
    FilaOperacion,
    Giro,
    Liberacion,
    OperacionProcesada,
    OperationInfo,
    ResultadoLote,
)


def _info_con_giros(valor_total: str, *montos: str) -> OperationInfo:
    return OperationInfo(
        cliente="MALE",
        valor_total_compra=Decimal(valor_total),
        giros=[Giro(valor_solicitado=Decimal(m)) for m in montos],
    )


class TestEstadoProceso:
    def test_valores_string(self):
        assert EstadoProceso.COMPLETADO == "completado"
        assert EstadoProceso.EN_PROCESO.value == "en_proceso"

    @pytest.mark.parametrize(
        "texto, esperado",
        [
            ("Pagado", EstadoProceso.COMPLETADO),
            ("EJECUTADA", EstadoProceso.COMPLETADO),
            ("En trámite", EstadoProceso.EN_PROCESO),
            ("en_proceso", EstadoProceso.EN_PROCESO),
            ("Cancelado", EstadoProceso.RECHAZADO),
            ("pendiente", EstadoProceso.PENDIENTE),
        ],
    )
    def test_desde_texto(self, texto, esperado):
        assert EstadoProceso.desde_texto(texto) is esperado

    def test_texto_desconocido_es_pendiente(self):
        assert EstadoProceso.desde_texto("quién sabe") is EstadoProceso.PENDIENTE

    def test_vacio_es_pendiente(self):
        assert EstadoProceso.desde_texto("") is EstadoProceso.PENDIENTE
        assert EstadoProceso.desde_texto(None) is EstadoProceso.PENDIENTE


class TestGiro:
    def test_valores_por_defecto(self):
        giro = Giro(valor_solicitado=Decimal("20000"))
        assert giro.numero_giro == ""
        assert giro.porcentaje_giro == ""
        assert giro.estado == "pendiente"

    def test_to_dict(self):
        giro = Giro(
            valor_solicitado=Decimal("20000"),
            numero_giro="1er Giro a Proveedor",
            porcentaje_giro="30% del total",
        )
        assert giro.to_dict() == {
            "valorSolicitado": 20000.0,
            "numeroGiro": "1er Giro a Proveedor",
            "porcentajeGiro": "30% del total",
            "estado": "pendiente",
        }

    def test_inmutable(self):
        giro = Giro(valor_solicitado=Decimal("1"))
        with pytest.raises(FrozenInstanceError):
            giro.estado = "completado"


class TestLiberacion:
    def test_to_dict(self):
        lib = Liberacion(numero=1, capital=Decimal("40000"), fecha="2025-07-25")
        assert lib.to_dict() == {
            "numero": 1,
            "capital": 40000.0,
            "fecha": "2025-07-25",
            "estado": "pendiente",
        }


class TestOperationInfo:
    def test_vacia(self):
        info = OperationInfo.vacia()
        assert info.cliente == ""
        assert info.valor_total_compra == Decimal("0")
        assert info.giros == []
        assert info.liberaciones == []
        assert info.inconvenientes is False
        assert info.descripcion_inconvenientes is None
        assert info.calificacion is None

    def test_vacia_no_comparte_listas(self):
        assert OperationInfo.vacia().giros is not OperationInfo.vacia().giros

    def test_totales(self):
        info = OperationInfo(
            giros=[Giro(Decimal("20000")), Giro(Decimal("60000"))],
            liberaciones=[Liberacion(1, Decimal("40000")), Liberacion(2, Decimal("20000"))],
        )
        assert info.total_giros == Decimal("80000")
        assert info.total_liberaciones == Decimal("60000")

    def test_giros_cuadran(self):
        assert _info_con_giros("80000", "20000", "60000").giros_cuadran is True

    def test_giros_no_cuadran(self):
        assert _info_con_giros("100000", "20000", "60000").giros_cuadran is False

    def test_sin_giros_no_cuadra(self):
        assert _info_con_giros("80000").giros_cuadran is False

    def test_progreso_pagos_parcial(self):
        info = _info_con_giros("100000", "20000", "60000")
        assert info.progreso_pagos == 80
        assert info.valor_pendiente == Decimal("20000")

    def test_progreso_pagos_redondea_hacia_arriba(self):
        assert _info_con_giros("200", "1").progreso_pagos == 1

    def test_progreso_pagos_sin_valor_total(self):
        info = _info_con_giros("0", "5000")
        assert info.progreso_pagos == 0
        assert info.valor_pendiente == Decimal("-5000")

    @pytest.mark.parametrize(
        "capitales, esperado",
        [
            (["40000", "39500"], True),
            (["40000", "41000"], True),
            (["40000", "38000"], False),
        ],
    )
    def test_liberaciones_completas_con_tolerancia(self, capitales, esperado):
        info = OperationInfo(
            valor_total_compra=Decimal("80000"),
            liberaciones=[Liberacion(i, Decimal(c)) for i, c in enumerate(capitales, start=1)],
        )
        assert info.liberaciones_completas() is esperado

    def test_liberaciones_tolerancia_personalizada(self):
        info = OperationInfo(
            valor_total_compra=Decimal("80000"),
            liberaciones=[Liberacion(1, Decimal("79990"))],
        )
        assert info.diferencia_liberaciones == Decimal("10")
        assert info.liberaciones_completas(Decimal("5")) is False

    def test_swift_valido(self):
        assert OperationInfo(swift="BSHANGBB").swift_valido is True
        assert OperationInfo(swift="4567896").swift_valido is False

    @pytest.mark.parametrize(
        "compra, venta, esperado",
        [
            ("FOB", "DAP", "FOB / DAP"),
            ("FOB", "", "FOB"),
            ("", "CIF", "CIF"),
            ("", "", ""),
        ],
    )
    def test_incoterms_display(self, compra, venta, esperado):
        info = OperationInfo(incoterm_compra=compra, incoterm_venta=venta)
        assert info.incoterms_display == esperado

    def test_to_dict_claves_camel_case(self):
        datos = _info_con_giros("80000", "20000").to_dict()
        assert datos["valorTotalCompra"] == 80000.0
        assert datos["giros"] == [
            {
                "valorSolicitado": 20000.0,
                "numeroGiro": "",
                "porcentajeGiro": "",
                "estado": "pendiente",
            }
        ]
        assert set(datos) == {
            "cliente",
            "paisImportador",
            "paisExportador",
            "valorTotalCompra",
            "monedaPago",
            "terminosPago",
            "beneficiario",
            "banco",
            "direccionBanco",
            "numeroCuenta",
            "swift",
            "incotermCompra",
            "incotermVenta",
            "giros",
            "liberaciones",
            "inconvenientes",
            "descripcionInconvenientes",
            "calificacion",
        }


class TestFilaOperacion:
    def test_vacia(self):
        assert FilaOperacion(numero_fila=1, texto="  \n ").is_empty is True

    def test_con_texto(self):
        fila = FilaOperacion(numero_fila=1, texto="CLIENTE: MALE")
        assert fila.is_empty is False
        assert fila.nombre == ""


class TestResultadoLote:
    def _operacion(self, fila: int, info: OperationInfo) -> OperacionProcesada:
        return OperacionProcesada(numero_fila=fila, nombre=f"OP {fila}", info=info)

    def test_totales(self):
        resultado = ResultadoLote(
            archivo_origen="ops.csv",
            operaciones=[
                self._operacion(1, _info_con_giros("80000", "20000", "60000")),
                self._operacion(2, _info_con_giros("100000", "20000", "60000")),
                self._operacion(3, _info_con_giros("5000")),
            ],
            filas_leidas=5,
            filas_descartadas=2,
        )
        assert resultado.num_operaciones == 3
        assert resultado.valor_total_compra == Decimal("185000")
        assert [op.numero_fila for op in resultado.operaciones_con_discrepancia] == [2]

    def test_mas_filas_de_las_leidas(self):
        with pytest.raises(ValueError, match="más filas"):
            ResultadoLote(
                archivo_origen="ops.csv",
                operaciones=[self._operacion(1, OperationInfo())],
                filas_leidas=1,
                filas_descartadas=1,
            )

    def test_descartadas_negativas(self):
        with pytest.raises(ValueError, match="negativo"):
            ResultadoLote(
                archivo_origen="ops.csv", operaciones=[], filas_leidas=0, filas_descartadas=-1
            )

    def test_operacion_to_dict(self):
        op = self._operacion(7, OperationInfo(cliente="MALE"))
        datos = op.to_dict()
        assert datos["fila"] == 7
        assert datos["nombre"] == "OP 7"
        assert datos["info"]["cliente"] == "MALE"
