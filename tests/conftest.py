"""Pytest fixtures for the template engine tests."""

import itertools

import pytest

from formsynth.core.config import Settings
from formsynth.core.factory import ComponentFactory
from formsynth.strategies.template_engine import (
    FieldCompatibilityValidator,
    RecursiveTemplateParser,
    SchemaSynthesizer,
    TemplateField,
)


# =============================================================================
# Component Fixtures
# =============================================================================


@pytest.fixture
def parser() -> RecursiveTemplateParser:
    """Parser with default settings."""
    return RecursiveTemplateParser()


@pytest.fixture
def validator() -> FieldCompatibilityValidator:
    """Field compatibility validator."""
    return FieldCompatibilityValidator()


@pytest.fixture
def synthesizer() -> SchemaSynthesizer:
    """Synthesizer with predictable identifiers (ta_1, comp_2, ...)."""
    counter = itertools.count(1)
    return SchemaSynthesizer(id_factory=lambda prefix: f"{prefix}_{next(counter)}")


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def factory(settings: Settings) -> ComponentFactory:
    """Component factory over isolated settings."""
    return ComponentFactory(settings)


# =============================================================================
# Field Fixtures
# =============================================================================


@pytest.fixture
def registration_fields() -> list[TemplateField]:
    """Customer registration fields: 8 flat fields and 3 complex ones."""
    return [
        TemplateField(name="firstName", type="text", required=True),
        TemplateField(name="lastName", type="text", required=True),
        TemplateField(name="email", type="email", required=True),
        TemplateField(name="phone", type="phone", required=False),
        TemplateField(name="birthDate", type="date", required=False),
        TemplateField(name="age", type="number", required=False),
        TemplateField(name="newsletter", type="boolean", required=False),
        TemplateField(name="website", type="url", required=False),
        TemplateField(
            name="address",
            type="text",
            required=False,
            path="customer.address.street",
            is_nested=True,
        ),
        TemplateField(
            name="discount",
            type="number",
            required=False,
            is_conditional=True,
            condition="hasDiscount",
        ),
        TemplateField(
            name="itemName",
            type="text",
            required=False,
            is_loop=True,
            loop_variable="items",
        ),
    ]
