"""Concrete strategy implementations."""

from formsynth.strategies.template_engine import (
    FieldCompatibilityValidator,
    RecursiveTemplateParser,
    SchemaSynthesizer,
)

__all__ = [
    "RecursiveTemplateParser",
    "FieldCompatibilityValidator",
    "SchemaSynthesizer",
]
