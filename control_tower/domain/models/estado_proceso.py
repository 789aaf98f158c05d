"""
Modelo de dominio: Estado de un proceso (giro, liberación).

Los valores son los mismos strings que consume el dashboard
("pendiente", "completado", ...), por eso el Enum hereda de str.
"""

from enum import Enum

from control_tower.domain.shared.text_cleaner import strip_accents


class EstadoProceso(str, Enum):
    """Estado de un giro o de una liberación."""

    PENDIENTE = "pendiente"
    EN_PROCESO = "en_proceso"
    COMPLETADO = "completado"
    RECHAZADO = "rechazado"

    @classmethod
    def desde_texto(cls, texto: str | None) -> "EstadoProceso":
        """Traduce la etiqueta escrita a mano en el CSV a un EstadoProceso.

        Se compara sin acentos ni mayúsculas. Cualquier texto que no esté
        en la tabla (o vacío) se considera PENDIENTE.

        Ejemplos:
            >>> EstadoProceso.desde_texto("Pagado")
            <EstadoProceso.COMPLETADO: 'completado'>
            >>> EstadoProceso.desde_texto("En trámite")
            <EstadoProceso.EN_PROCESO: 'en_proceso'>
        """
        if not texto:
            return cls.PENDIENTE

        clave = " ".join(strip_accents(texto).lower().replace("_", " ").split())
        return _SINONIMOS.get(clave, cls.PENDIENTE)


_SINONIMOS: dict[str, EstadoProceso] = {
    "pendiente": EstadoProceso.PENDIENTE,
    "por girar": EstadoProceso.PENDIENTE,
    "en proceso": EstadoProceso.EN_PROCESO,
    "en tramite": EstadoProceso.EN_PROCESO,
    "en curso": EstadoProceso.EN_PROCESO,
    "completado": EstadoProceso.COMPLETADO,
    "completada": EstadoProceso.COMPLETADO,
    "pagado": EstadoProceso.COMPLETADO,
    "pagada": EstadoProceso.COMPLETADO,
    "girado": EstadoProceso.COMPLETADO,
    "ejecutado": EstadoProceso.COMPLETADO,
    "ejecutada": EstadoProceso.COMPLETADO,
    "listo": EstadoProceso.COMPLETADO,
    "rechazado": EstadoProceso.RECHAZADO,
    "rechazada": EstadoProceso.RECHAZADO,
    "cancelado": EstadoProceso.RECHAZADO,
    "cancelada": EstadoProceso.RECHAZADO,
}
