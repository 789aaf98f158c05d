"""
Registro de escritores de salida disponibles.

Centraliza la relación formato → writer. El CLI pide "dame el writer
para json" sin saber qué clases existen; agregar un formato nuevo es
crear la clase que implemente OutputWriter y registrarla en
create_default_registry().
"""

from control_tower.domain.ports.output_writer import OutputWriter


class WriterRegistry:
    """Registro de escritores de salida por formato."""

    def __init__(self) -> None:
        self._writers: dict[str, OutputWriter] = {}

    def register(self, writer: OutputWriter) -> None:
        """Registra un writer. La clave es writer.format_name (minúsculas).

        Raises:
            ValueError: Si ya existe un writer para ese formato.
        """
        name = writer.format_name.lower()
        if name in self._writers:
            raise ValueError(
                f"Ya existe un writer registrado para '{name}': "
                f"{type(self._writers[name]).__name__}. "
                f"No se puede registrar {type(writer).__name__}."
            )
        self._writers[name] = writer

    def get(self, format_name: str) -> OutputWriter | None:
        """Obtiene el writer para un formato (case-insensitive); None si no existe."""
        return self._writers.get(format_name.lower())

    @property
    def available_formats(self) -> list[str]:
        """Lista de formatos con writer disponible."""
        return sorted(self._writers.keys())

    def __len__(self) -> int:
        return len(self._writers)


def create_default_registry() -> WriterRegistry:
    """Crea un registro con todos los writers disponibles."""
    registry = WriterRegistry()

    from control_tower.adapters.output.writers.excel_writer import ExcelWriter

    registry.register(ExcelWriter())

    from control_tower.adapters.output.writers.json_writer import JsonWriter

    registry.register(JsonWriter())

    return registry
