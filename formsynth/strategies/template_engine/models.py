"""Template engine domain models.

Pydantic models for parsed templates, validation results and the
synthesized table schema and form components. Attributes are snake_case;
``model_dump(by_alias=True)`` yields the camelCase transport shape.
"""

import enum
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldType(str, enum.Enum):
    """Semantic type inferred for a template field."""

    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    NUMBER = "number"
    BOOLEAN = "boolean"
    URL = "url"


class ColumnType(str, enum.Enum):
    """Column type of the synthesized table schema."""

    STRING = "string"
    NUMBER = "number"
    DATETIME = "datetime"
    BOOLEAN = "boolean"


class ComponentKind(str, enum.Enum):
    """Form-input component kinds."""

    STRING_INPUT = "string-input"
    NUMBER_INPUT = "number-input"
    DATETIME_INPUT = "datetime-input"
    BOOLEAN_INPUT = "boolean-input"
    FORM_BLOCK = "form-block"


class _EngineModel(BaseModel):
    """Immutable model serialized with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )


# =============================================================================
# Parsing
# =============================================================================


class TemplateField(_EngineModel):
    """A placeholder discovered in the template text."""

    name: str = Field(description="Leaf identifier of the field")
    type: str = Field(default=FieldType.TEXT.value, description="Inferred semantic type")
    required: bool = Field(default=True, description="False when found inside a conditional or loop")
    path: str | None = Field(default=None, description="Fully-qualified dotted path")
    is_nested: bool = False
    is_conditional: bool = False
    is_loop: bool = False
    condition: str | None = Field(default=None, description="Guard expression, 'NOT ' prefixed when negated")
    loop_variable: str | None = Field(default=None, description="Iteration source expression")
    description: str | None = Field(default=None, description="Provenance note")

    @property
    def dedup_key(self) -> str:
        """Key that collapses repeated occurrences of the same field."""
        return self.path or self.name


class ParsedTemplate(_EngineModel):
    """Aggregate result of parsing one template text."""

    fields: list[TemplateField] = Field(default_factory=list)
    conditionals: list[str] = Field(default_factory=list)
    loops: list[str] = Field(default_factory=list)
    nested_objects: list[str] = Field(default_factory=list)
    total_placeholders: int = 0
    warnings: list[str] = Field(default_factory=list)


class ValidationResult(_EngineModel):
    """Partition of a field list into compatible and skipped fields."""

    compatible_fields: list[TemplateField] = Field(default_factory=list)
    skipped_fields: list[TemplateField] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    has_compatible_fields: bool = False


# =============================================================================
# Synthesis
# =============================================================================


class ColumnConstraints(_EngineModel):
    """Constraints attached to a table column."""

    presence: bool = False
    email: bool | None = None
    url: bool | None = None


class ColumnDefinition(_EngineModel):
    """One column of the synthesized table."""

    name: str
    type: ColumnType
    autocolumn: bool = False
    constraints: ColumnConstraints = Field(default_factory=ColumnConstraints)
    date_only: bool | None = None


class TableSchema(_EngineModel):
    """Normalized table schema derived from compatible fields."""

    id: str = Field(alias="_id")
    name: str
    type: str = "table"
    schema_: dict[str, ColumnDefinition] = Field(default_factory=dict, alias="schema")
    primary_display: str = "_id"


class FormComponent(_EngineModel):
    """Form-input component bound to one table column."""

    id: str = Field(alias="_id")
    component: ComponentKind = Field(alias="_component")
    instance_name: str = Field(alias="_instanceName")
    field: str
    label: str
    placeholder: str
    disabled: bool = False
    readonly: bool = False
    props: dict[str, Any] = Field(default_factory=dict)


class DataSource(_EngineModel):
    """Table binding of a form block."""

    label: str
    table_id: str
    type: str = "table"


class FormBlock(_EngineModel):
    """Container holding the form components of one table."""

    id: str = Field(alias="_id")
    component: ComponentKind = Field(default=ComponentKind.FORM_BLOCK, alias="_component")
    instance_name: str = Field(alias="_instanceName")
    data_source: DataSource
    action_type: str = "Create"
    title: str
    button_position: str = "bottom"
    children: list[FormComponent] = Field(default_factory=list, alias="_children")


class ScreenDefinition(_EngineModel):
    """Routable screen wrapping a form block."""

    id: str = Field(alias="_id")
    name: str
    route: str
    role_id: str = "BASIC"
    form_block: FormBlock


class TemplateAnalysis(_EngineModel):
    """Everything derived from one named template."""

    name: str
    description: str
    parsed: ParsedTemplate
    validation: ValidationResult
    table: TableSchema | None = None
    screen: ScreenDefinition | None = None
    created_at: datetime
