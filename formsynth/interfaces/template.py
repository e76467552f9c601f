"""Template parsing and synthesis interfaces.

Defines abstract base classes for the stages of the template engine:
parsing extracted text, validating the discovered fields and
synthesizing a table schema with form components.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formsynth.strategies.template_engine.models import (
        FormBlock,
        ParsedTemplate,
        ScreenDefinition,
        TableSchema,
        TemplateField,
        ValidationResult,
    )


class BaseTemplateParser(ABC):
    """Abstract base class for template parsing strategies.

    Example:
        ```python
        class RecursiveTemplateParser(BaseTemplateParser):
            def parse(self, text: str) -> ParsedTemplate:
                # Scan placeholders and recurse into blocks
                pass
        ```
    """

    @abstractmethod
    def parse(self, text: str) -> ParsedTemplate:
        """Parse extracted document text into template fields.

        Args:
            text: Plain text extracted from a document.

        Returns:
            A ParsedTemplate with deduplicated fields and summary metadata.
        """
        ...


class BaseFieldValidator(ABC):
    """Abstract base class for field compatibility checks."""

    @abstractmethod
    def validate(self, fields: Sequence[TemplateField]) -> ValidationResult:
        """Partition fields into compatible and skipped ones.

        Args:
            fields: Fields as discovered by a parser.

        Returns:
            A ValidationResult with advisory warnings for skipped fields.
        """
        ...


class BaseSchemaSynthesizer(ABC):
    """Abstract base class for schema and component synthesis."""

    @abstractmethod
    def create_table(self, fields: Sequence[TemplateField], table_name: str) -> TableSchema:
        """Build a table schema from compatible fields."""
        ...

    @abstractmethod
    def create_form_block(
        self,
        fields: Sequence[TemplateField],
        table: TableSchema,
        template_name: str,
    ) -> FormBlock:
        """Build a form block bound to ``table`` holding one component per field."""
        ...

    @abstractmethod
    def create_screen(
        self,
        fields: Sequence[TemplateField],
        table: TableSchema,
        template_name: str,
    ) -> ScreenDefinition:
        """Build a routable screen wrapping the form block."""
        ...
