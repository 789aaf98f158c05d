"""
Tests para WriterRegistry.
"""

import pytest

from control_tower.adapters.output.writers.excel_writer import ExcelWriter
from control_tower.adapters.output.writers.json_writer import JsonWriter
from control_tower.infrastructure.registry import WriterRegistry, create_default_registry


class TestWriterRegistry:
    def test_registro_por_defecto(self):
        registry = create_default_registry()
        assert registry.available_formats == ["json", "xlsx"]
        assert len(registry) == 2

    def test_get_sin_distinguir_mayusculas(self):
        registry = create_default_registry()
        assert isinstance(registry.get("XLSX"), ExcelWriter)
        assert isinstance(registry.get("json"), JsonWriter)

    def test_formato_desconocido(self):
        assert create_default_registry().get("pdf") is None

    def test_registro_duplicado(self):
        registry = WriterRegistry()
        registry.register(JsonWriter())
        with pytest.raises(ValueError, match="json"):
            registry.register(JsonWriter(indent=None))

    def test_registro_vacio(self):
        registry = WriterRegistry()
        assert len(registry) == 0
        assert registry.available_formats == []
