"""Unit tests for the schema and component synthesizer."""

import pytest

from formsynth.strategies.template_engine import TemplateField
from formsynth.strategies.template_engine.synthesizer import route_for


@pytest.fixture
def compatible_fields(registration_fields):
    """The eight flat registration fields."""
    return registration_fields[:8]


class TestCreateTable:
    """Test suite for table schema synthesis."""

    def test_column_count(self, synthesizer, compatible_fields):
        """Test that N fields give N+1 columns including _id."""
        table = synthesizer.create_table(compatible_fields, "Customer Data")

        assert len(table.schema_) == len(compatible_fields) + 1
        assert list(table.schema_)[0] == "_id"
        assert table.name == "Customer Data"
        assert table.id == "ta_1"

    def test_id_column(self, synthesizer, compatible_fields):
        """Test the autogenerated identifier column."""
        column = synthesizer.create_table(compatible_fields, "T").schema_["_id"]

        assert column.type == "string"
        assert column.autocolumn is True
        assert column.constraints.presence is False

    def test_column_types_and_constraints(self, synthesizer, compatible_fields):
        """Test the field-type to column-type mapping and extra constraints."""
        schema = synthesizer.create_table(compatible_fields, "T").schema_

        assert {name: column.type for name, column in schema.items()} == {
            "_id": "string",
            "firstName": "string",
            "lastName": "string",
            "email": "string",
            "phone": "string",
            "birthDate": "datetime",
            "age": "number",
            "newsletter": "boolean",
            "website": "string",
        }
        assert schema["email"].constraints.email is True
        assert schema["website"].constraints.url is True
        assert schema["birthDate"].date_only is True
        assert schema["firstName"].date_only is None
        assert schema["firstName"].constraints.presence is True
        assert schema["phone"].constraints.presence is False

    def test_primary_display_is_first_text_field(self, synthesizer, compatible_fields):
        """Test primary display selection."""
        table = synthesizer.create_table(compatible_fields, "T")

        assert table.primary_display == "firstName"

    def test_primary_display_falls_back_to_id(self, synthesizer):
        """Test the fallback when no text field exists."""
        fields = [
            TemplateField(name="email", type="email"),
            TemplateField(name="age", type="number"),
        ]

        assert synthesizer.create_table(fields, "T").primary_display == "_id"

    def test_complex_fields_are_skipped(self, synthesizer, registration_fields):
        """Test that fields with provenance flags never become columns."""
        table = synthesizer.create_table(registration_fields, "T")

        assert "address" not in table.schema_
        assert "discount" not in table.schema_
        assert "itemName" not in table.schema_

    def test_unknown_type_falls_back_to_string(self, synthesizer):
        """Test the string fallback for unmapped types."""
        table = synthesizer.create_table([TemplateField(name="photo", type="image")], "T")

        assert table.schema_["photo"].type == "string"

    def test_transport_shape(self, synthesizer, compatible_fields):
        """Test the serialized table keys."""
        data = synthesizer.create_table(compatible_fields, "T").model_dump(
            by_alias=True, exclude_none=True
        )

        assert data["_id"] == "ta_1"
        assert data["type"] == "table"
        assert data["primaryDisplay"] == "firstName"
        assert data["schema"]["birthDate"]["dateOnly"] is True
        assert data["schema"]["email"]["constraints"] == {"presence": True, "email": True}


class TestCreateComponents:
    """Test suite for form component synthesis."""

    def test_component_kinds(self, synthesizer, compatible_fields):
        """Test the field-type to component-kind mapping."""
        components = synthesizer.create_components(compatible_fields)

        assert [c.component for c in components] == [
            "string-input",
            "string-input",
            "string-input",
            "string-input",
            "datetime-input",
            "number-input",
            "boolean-input",
            "string-input",
        ]
        assert [c.field for c in components] == [f.name for f in compatible_fields]

    def test_default_label_and_placeholder(self, synthesizer):
        """Test defaults for a text field."""
        (component,) = synthesizer.create_components([TemplateField(name="firstName")])

        assert component.label == "firstName"
        assert component.placeholder == "Enter firstName"
        assert component.instance_name == "firstName"
        assert component.disabled is False
        assert component.readonly is False
        assert component.props == {}

    @pytest.mark.parametrize(
        ("field_type", "placeholder"),
        [
            ("email", "Enter email address"),
            ("phone", "Enter phone number"),
            ("url", "Enter URL"),
        ],
    )
    def test_type_specific_placeholders(self, synthesizer, field_type, placeholder):
        """Test placeholder copy for email, phone and url inputs."""
        (component,) = synthesizer.create_components(
            [TemplateField(name="contact", type=field_type)]
        )

        assert component.placeholder == placeholder

    def test_boolean_input(self, synthesizer):
        """Test that boolean inputs show the name inline with an empty label."""
        (component,) = synthesizer.create_components(
            [TemplateField(name="newsletter", type="boolean")]
        )

        assert component.label == ""
        assert component.props == {"text": "newsletter"}

    def test_date_input_has_no_time(self, synthesizer):
        """Test date inputs default to date only."""
        (component,) = synthesizer.create_components(
            [TemplateField(name="birthDate", type="date")]
        )

        assert component.props == {
            "enableTime": False,
            "timeOnly": False,
            "ignoreTimezones": False,
        }


class TestFormBlockAndScreen:
    """Test suite for form block and screen synthesis."""

    def test_form_block_bound_to_table(self, synthesizer, compatible_fields):
        """Test the form block binding, titles and child order."""
        table = synthesizer.create_table(compatible_fields, "Customer Registration Data")

        block = synthesizer.create_form_block(compatible_fields, table, "Customer Registration")

        assert block.id == "form_ta_1"
        assert block.component == "form-block"
        assert block.title == "Customer Registration Form"
        assert block.instance_name == "Customer Registration - Form block"
        assert block.action_type == "Create"
        assert block.data_source.table_id == table.id
        assert block.data_source.label == "Customer Registration Data"
        assert [c.field for c in block.children] == [f.name for f in compatible_fields]

    def test_screen(self, synthesizer, compatible_fields):
        """Test the screen wrapping the form block."""
        table = synthesizer.create_table(compatible_fields, "T")

        screen = synthesizer.create_screen(compatible_fields, table, "Customer Registration Form")

        assert screen.id == "screen_ta_1"
        assert screen.route == "/customer-registration-form"
        assert screen.role_id == "BASIC"
        assert len(screen.form_block.children) == len(compatible_fields)

    @pytest.mark.parametrize(
        ("name", "route"),
        [
            ("Invoice", "/invoice"),
            ("  Purchase   Order ", "/purchase-order"),
            ("Lease\tAgreement", "/lease-agreement"),
        ],
    )
    def test_route_for(self, name, route):
        """Test route slugs derived from template names."""
        assert route_for(name) == route
