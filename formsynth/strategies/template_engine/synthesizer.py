"""Schema and component synthesizer strategy.

Turns compatible template fields into a normalized table schema and a
form block of input components bound to that table, wrapped in a
routable screen.
"""

import logging
import re
import uuid
from collections.abc import Callable, Sequence
from typing import Any

from formsynth.interfaces.template import BaseSchemaSynthesizer
from formsynth.strategies.template_engine.models import (
    ColumnConstraints,
    ColumnDefinition,
    ColumnType,
    ComponentKind,
    DataSource,
    FieldType,
    FormBlock,
    FormComponent,
    ScreenDefinition,
    TableSchema,
    TemplateField,
)
from formsynth.strategies.template_engine.validator import FIELD_TO_COLUMN_TYPE

logger = logging.getLogger(__name__)

FIELD_TO_COMPONENT: dict[str, ComponentKind] = {
    FieldType.TEXT.value: ComponentKind.STRING_INPUT,
    FieldType.EMAIL.value: ComponentKind.STRING_INPUT,
    FieldType.PHONE.value: ComponentKind.STRING_INPUT,
    FieldType.NUMBER.value: ComponentKind.NUMBER_INPUT,
    FieldType.DATE.value: ComponentKind.DATETIME_INPUT,
    FieldType.BOOLEAN.value: ComponentKind.BOOLEAN_INPUT,
    FieldType.URL.value: ComponentKind.STRING_INPUT,
}

TYPE_PLACEHOLDERS: dict[str, str] = {
    FieldType.EMAIL.value: "Enter email address",
    FieldType.PHONE.value: "Enter phone number",
    FieldType.URL.value: "Enter URL",
}

ID_COLUMN = "_id"


def _generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``ta_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"


def route_for(template_name: str) -> str:
    """Derive a screen route from a template name.

    ``"Customer Registration Form"`` becomes ``"/customer-registration-form"``.
    """
    return "/" + re.sub(r"\s+", "-", template_name.strip().lower())


def _is_complex(field: TemplateField) -> bool:
    return field.is_nested or field.is_conditional or field.is_loop


class SchemaSynthesizer(BaseSchemaSynthesizer):
    """Builds table schemas, form components and screens from fields.

    Callers are expected to pass the validator's compatible fields. Fields
    that still carry a provenance flag are skipped and unknown types fall
    back to a string column.
    """

    def __init__(self, id_factory: Callable[[str], str] = _generate_id) -> None:
        """Initialize the synthesizer.

        Args:
            id_factory: Returns a new identifier for the given prefix
                (``ta`` for tables, ``comp`` for components).
        """
        self._new_id = id_factory

    def create_table(self, fields: Sequence[TemplateField], table_name: str) -> TableSchema:
        """Build a table schema with an ``_id`` column plus one column per field.

        Args:
            fields: Compatible fields in discovery order.
            table_name: Name of the table.

        Returns:
            A TableSchema whose primary display is the first text field.
        """
        schema: dict[str, ColumnDefinition] = {
            ID_COLUMN: ColumnDefinition(
                name=ID_COLUMN,
                type=ColumnType.STRING,
                autocolumn=True,
                constraints=ColumnConstraints(presence=False),
            )
        }

        for field in fields:
            if _is_complex(field):
                logger.debug(f"Skipping complex field in table synthesis: {field.name}")
                continue
            schema[field.name] = self._column_for(field)

        primary_display = next(
            (
                field.name
                for field in fields
                if field.type == FieldType.TEXT.value and not _is_complex(field)
            ),
            ID_COLUMN,
        )

        table = TableSchema(
            id=self._new_id("ta"),
            name=table_name,
            schema_=schema,
            primary_display=primary_display,
        )
        logger.info(
            f"Synthesized table '{table_name}' with {len(schema)} columns "
            f"(primary display: {primary_display})"
        )
        return table

    def create_components(self, fields: Sequence[TemplateField]) -> list[FormComponent]:
        """Build one form-input component per field, in field order."""
        return [
            self._component_for(field) for field in fields if not _is_complex(field)
        ]

    def create_form_block(
        self,
        fields: Sequence[TemplateField],
        table: TableSchema,
        template_name: str,
    ) -> FormBlock:
        """Build a create-form block bound to ``table``.

        Args:
            fields: Compatible fields in discovery order.
            table: The table the form writes to.
            template_name: Human readable template name used for titles.

        Returns:
            A FormBlock holding the components as children.
        """
        return FormBlock(
            id=f"form_{table.id}",
            instance_name=f"{template_name} - Form block",
            data_source=DataSource(label=table.name, table_id=table.id),
            title=f"{template_name} Form",
            children=self.create_components(fields),
        )

    def create_screen(
        self,
        fields: Sequence[TemplateField],
        table: TableSchema,
        template_name: str,
    ) -> ScreenDefinition:
        """Build a screen routed from the template name around the form block."""
        return ScreenDefinition(
            id=f"screen_{table.id}",
            name=f"{template_name} Form",
            route=route_for(template_name),
            form_block=self.create_form_block(fields, table, template_name),
        )

    @staticmethod
    def _column_for(field: TemplateField) -> ColumnDefinition:
        column_type = FIELD_TO_COLUMN_TYPE.get(field.type, ColumnType.STRING)
        constraints = ColumnConstraints(
            presence=field.required,
            email=True if field.type == FieldType.EMAIL.value else None,
            url=True if field.type == FieldType.URL.value else None,
        )
        return ColumnDefinition(
            name=field.name,
            type=column_type,
            constraints=constraints,
            date_only=True if field.type == FieldType.DATE.value else None,
        )

    def _component_for(self, field: TemplateField) -> FormComponent:
        kind = FIELD_TO_COMPONENT.get(field.type, ComponentKind.STRING_INPUT)
        label = field.name
        placeholder = TYPE_PLACEHOLDERS.get(field.type, f"Enter {field.name}")
        props: dict[str, Any] = {}

        if field.type == FieldType.BOOLEAN.value:
            props["text"] = field.name
            label = ""
        elif field.type == FieldType.DATE.value:
            props.update({"enableTime": False, "timeOnly": False, "ignoreTimezones": False})

        return FormComponent(
            id=self._new_id("comp"),
            component=kind,
            instance_name=field.name,
            field=field.name,
            label=label,
            placeholder=placeholder,
            props=props,
        )
