"""Field compatibility validator.

Partitions parsed fields into those that map onto a flat table column and
those that cannot (nested, conditional, looped or of an unknown type).
"""

import logging
from collections.abc import Sequence

from formsynth.interfaces.template import BaseFieldValidator
from formsynth.strategies.template_engine.models import (
    ColumnType,
    FieldType,
    TemplateField,
    ValidationResult,
)

logger = logging.getLogger(__name__)

FIELD_TO_COLUMN_TYPE: dict[str, ColumnType] = {
    FieldType.TEXT.value: ColumnType.STRING,
    FieldType.EMAIL.value: ColumnType.STRING,
    FieldType.PHONE.value: ColumnType.STRING,
    FieldType.NUMBER.value: ColumnType.NUMBER,
    FieldType.DATE.value: ColumnType.DATETIME,
    FieldType.BOOLEAN.value: ColumnType.BOOLEAN,
    FieldType.URL.value: ColumnType.STRING,
}


def _complexity(field: TemplateField) -> str | None:
    """Name the provenance flag that makes a field complex, nested first."""
    if field.is_nested:
        return "nested"
    if field.is_conditional:
        return "conditional"
    if field.is_loop:
        return "loop"
    return None


class FieldCompatibilityValidator(BaseFieldValidator):
    """Keeps simple, flat, typed fields and explains why others are skipped."""

    def validate(self, fields: Sequence[TemplateField]) -> ValidationResult:
        """Partition fields into compatible and skipped ones.

        Args:
            fields: Fields in discovery order.

        Returns:
            ValidationResult whose compatible and skipped lists together
            hold every input field exactly once.
        """
        compatible: list[TemplateField] = []
        skipped: list[TemplateField] = []
        warnings: list[str] = []

        for field in fields:
            complexity = _complexity(field)
            if complexity is not None:
                skipped.append(field)
                warnings.append(f"Skipped complex field: {field.name} ({complexity})")
            elif field.type not in FIELD_TO_COLUMN_TYPE:
                skipped.append(field)
                warnings.append(f"Skipped unsupported field type: {field.name} ({field.type})")
            else:
                compatible.append(field)

        logger.info(
            f"Validated {len(fields)} fields: {len(compatible)} compatible, "
            f"{len(skipped)} skipped"
        )

        return ValidationResult(
            compatible_fields=compatible,
            skipped_fields=skipped,
            warnings=warnings,
            has_compatible_fields=bool(compatible),
        )
