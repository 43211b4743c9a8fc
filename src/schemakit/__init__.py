# schemakit/__init__.py
from schemakit.core.compiler import CompilerSettings, JsonSchemaCompiler
from schemakit.core.errors import SchemaError, SchemaKitError, ValidationError
from schemakit.core.export.json_schema import JSONSchemaExporter
from schemakit.core.export.shape import ShapeExporter, export_shapes
from schemakit.core.export.shape_registry import ShapeRegistry
from schemakit.core.schema.factory import S

__all__ = [
    "S",
    "CompilerSettings",
    "JsonSchemaCompiler",
    "JSONSchemaExporter",
    "ShapeExporter",
    "ShapeRegistry",
    "export_shapes",
    "SchemaError",
    "SchemaKitError",
    "ValidationError",
]
