"""Component Factory for strategy instantiation.

The Factory Pattern allows the engine to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from formsynth.core.config import Settings, get_settings
from formsynth.interfaces.template import (
    BaseFieldValidator,
    BaseSchemaSynthesizer,
    BaseTemplateParser,
)
from formsynth.strategies.template_engine import (
    FieldCompatibilityValidator,
    RecursiveTemplateParser,
    SchemaSynthesizer,
)

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating engine components based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        parser = factory.get_parser()
        validator = factory.get_validator()
        synthesizer = factory.get_synthesizer()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Engine settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._parser_cache: BaseTemplateParser | None = None
        self._validator_cache: BaseFieldValidator | None = None
        self._synthesizer_cache: BaseSchemaSynthesizer | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_parser(self, parser_type: str | None = None) -> BaseTemplateParser:
        """Get a template parser instance based on the specified type.

        Args:
            parser_type: The parser type to instantiate. If None, uses settings.

        Returns:
            A BaseTemplateParser implementation instance.

        Raises:
            ValueError: If the parser type is unknown.
        """
        if self._parser_cache is None or parser_type is not None:
            parser_type = parser_type or self._settings.parser_type

            logger.info(f"Instantiating template parser: {parser_type}")

            match parser_type:
                case "recursive":
                    self._parser_cache = RecursiveTemplateParser(
                        max_depth=self._settings.max_nesting_depth,
                        report_unterminated_blocks=self._settings.report_unterminated_blocks,
                        strict_dedup=self._settings.strict_dedup,
                    )
                case _:
                    raise ValueError(
                        f"Unknown parser type: {parser_type}. "
                        f"Valid options: 'recursive'"
                    )

        return self._parser_cache

    def get_validator(self) -> BaseFieldValidator:
        """Get a field compatibility validator instance."""
        if self._validator_cache is None:
            logger.info("Instantiating field validator")
            self._validator_cache = FieldCompatibilityValidator()
        return self._validator_cache

    def get_synthesizer(self) -> BaseSchemaSynthesizer:
        """Get a schema synthesizer instance."""
        if self._synthesizer_cache is None:
            logger.info("Instantiating schema synthesizer")
            self._synthesizer_cache = SchemaSynthesizer()
        return self._synthesizer_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._parser_cache = None
        self._validator_cache = None
        self._synthesizer_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
