"""Admin backend boilerplate generator driven by JS schema files."""

from .errors import GoosError, SchemaError, TemplateNotFoundError, UnknownDataTypeError
from .generator import (
    GeneratedFile,
    GenerationFailure,
    GenerationReport,
    GeneratorConfig,
    SchemaGenerator,
)
from .schema import parse_schema_file, parse_schema_text

__all__ = [
    "GeneratedFile",
    "GenerationFailure",
    "GenerationReport",
    "GeneratorConfig",
    "GoosError",
    "SchemaError",
    "SchemaGenerator",
    "TemplateNotFoundError",
    "UnknownDataTypeError",
    "parse_schema_file",
    "parse_schema_text",
]
