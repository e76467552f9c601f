"""Abstract base classes for template engine strategies."""

from formsynth.interfaces.template import (
    BaseFieldValidator,
    BaseSchemaSynthesizer,
    BaseTemplateParser,
)

__all__ = [
    "BaseTemplateParser",
    "BaseFieldValidator",
    "BaseSchemaSynthesizer",
]
