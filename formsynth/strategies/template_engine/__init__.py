"""Template engine strategies.

Implements placeholder parsing, field validation and schema/component
synthesis for extracted document text.
"""

from formsynth.strategies.template_engine.models import (
    FieldType,
    ParsedTemplate,
    TableSchema,
    TemplateField,
    ValidationResult,
)
from formsynth.strategies.template_engine.parser import RecursiveTemplateParser
from formsynth.strategies.template_engine.synthesizer import SchemaSynthesizer
from formsynth.strategies.template_engine.type_inference import infer_field_type
from formsynth.strategies.template_engine.validator import FieldCompatibilityValidator

__all__ = [
    "FieldType",
    "ParsedTemplate",
    "TableSchema",
    "TemplateField",
    "ValidationResult",
    "RecursiveTemplateParser",
    "FieldCompatibilityValidator",
    "SchemaSynthesizer",
    "infer_field_type",
]
