"""
Modelo de dominio: Información estructurada de una operación.

Es el resultado del parser de operaciones: un OperationInfo por cada
celda "5. Info Gnal + Info Compra Int" del CSV.

Convenciones de "no encontrado":
- Campos de texto → "" (cadena vacía).
- valor_total_compra → Decimal("0"). Un cero significa que no se pudo
  extraer, no que la operación valga cero.
- descripcion_inconvenientes / calificacion → None.
- giros / liberaciones → lista vacía (válido: no todas las operaciones
  tienen calendario de desembolsos todavía).
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from control_tower.domain.models.giro import Giro
from control_tower.domain.models.liberacion import Liberacion
from control_tower.domain.shared.validators import is_valid_swift_code

TOLERANCIA_LIBERACIONES = Decimal("1000")


@dataclass(frozen=True)
class OperationInfo:
    """Campos extraídos del bloque de texto libre de una operación."""

    # --- Datos generales ---

    cliente: str = ""
    pais_importador: str = ""
    pais_exportador: str = ""
    valor_total_compra: Decimal = Decimal("0")
    moneda_pago: str = ""
    """Token tal como viene (puede traer ruido, ej: 'USD NA')."""
    terminos_pago: str = ""

    # --- Datos bancarios del beneficiario ---

    beneficiario: str = ""
    banco: str = ""
    direccion_banco: str = ""
    numero_cuenta: str = ""
    swift: str = ""
    """Valor tal como aparece en el texto. Usar `swift_valido` para saber
    si tiene forma de SWIFT/BIC."""

    # --- Incoterms (independientes entre sí) ---

    incoterm_compra: str = ""
    incoterm_venta: str = ""

    # --- Calendarios ---

    giros: list[Giro] = field(default_factory=list)
    """Giros en el orden en que aparecen en el texto."""

    liberaciones: list[Liberacion] = field(default_factory=list)
    """Liberaciones en el orden en que aparecen en el texto."""

    # --- Retroalimentación (bloque NPS) ---

    inconvenientes: bool = False
    descripcion_inconvenientes: str | None = None
    calificacion: int | None = None
    """Entero 1-5. None si no aparece o está fuera de rango."""

    @classmethod
    def vacia(cls) -> "OperationInfo":
        """Registro con todos los campos en su valor por defecto."""
        return cls()

    # --- Propiedades derivadas ---

    @property
    def total_giros(self) -> Decimal:
        """Suma de valor_solicitado de todos los giros."""
        return sum((g.valor_solicitado for g in self.giros), Decimal("0"))

    @property
    def total_liberaciones(self) -> Decimal:
        """Suma del capital de todas las liberaciones."""
        return sum((lib.capital for lib in self.liberaciones), Decimal("0"))

    @property
    def giros_cuadran(self) -> bool:
        """Verificación cruzada: ¿la suma de giros es igual al valor total de compra?

        El parser nunca la exige. Es un chequeo para el procesador por
        lotes y para los tests; una operación sin giros no cuadra.
        """
        return bool(self.giros) and self.total_giros == self.valor_total_compra

    @property
    def progreso_pagos(self) -> int:
        """Porcentaje entero del valor total cubierto por los giros.

        Redondeo half-up; puede pasar de 100 si los giros exceden el
        total. 0 si no hay valor total extraído.
        """
        if self.valor_total_compra <= 0:
            return 0
        porcentaje = self.total_giros * 100 / self.valor_total_compra
        return int(porcentaje.to_integral_value(rounding=ROUND_HALF_UP))

    @property
    def valor_pendiente(self) -> Decimal:
        """Valor total menos la suma de giros (negativo si se giró de más)."""
        return self.valor_total_compra - self.total_giros

    @property
    def diferencia_liberaciones(self) -> Decimal:
        """Diferencia absoluta entre el valor total y el capital liberado."""
        return abs(self.valor_total_compra - self.total_liberaciones)

    def liberaciones_completas(self, tolerancia: Decimal = TOLERANCIA_LIBERACIONES) -> bool:
        """¿El capital liberado cubre el valor total, con la tolerancia dada?

        Args:
            tolerancia: Diferencia máxima aceptada (por defecto 1000,
                para absorber redondeos de los analistas).
        """
        return self.diferencia_liberaciones <= tolerancia

    @property
    def swift_valido(self) -> bool:
        """Indica si el SWIFT extraído tiene forma de código de 8 u 11 caracteres."""
        return is_valid_swift_code(self.swift)

    @property
    def incoterms_display(self) -> str:
        """Texto 'COMPRA / VENTA' para mostrar.

        Si solo hay uno se devuelve ese; si no hay ninguno, "". El
        fallback "FOB / CIF" del dashboard es decisión de la UI.
        """
        return " / ".join(i for i in (self.incoterm_compra, self.incoterm_venta) if i)

    def to_dict(self) -> dict:
        """Representación JSON con las claves camelCase que sirve la API.

        Los Decimal se convierten a float solo aquí, en la frontera de salida.
        """
        return {
            "cliente": self.cliente,
            "paisImportador": self.pais_importador,
            "paisExportador": self.pais_exportador,
            "valorTotalCompra": float(self.valor_total_compra),
            "monedaPago": self.moneda_pago,
            "terminosPago": self.terminos_pago,
            "beneficiario": self.beneficiario,
            "banco": self.banco,
            "direccionBanco": self.direccion_banco,
            "numeroCuenta": self.numero_cuenta,
            "swift": self.swift,
            "incotermCompra": self.incoterm_compra,
            "incotermVenta": self.incoterm_venta,
            "giros": [g.to_dict() for g in self.giros],
            "liberaciones": [lib.to_dict() for lib in self.liberaciones],
            "inconvenientes": self.inconvenientes,
            "descripcionInconvenientes": self.descripcion_inconvenientes,
            "calificacion": self.calificacion,
        }
