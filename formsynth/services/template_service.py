"""Template processing service.

Runs one named template through parsing, validation and synthesis and
assembles the resulting analysis record. Text extraction from binary
documents happens upstream; this service only accepts plain text.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from formsynth.core.errors import TemplateTooLargeError, UnsupportedTemplateFileError
from formsynth.core.factory import ComponentFactory, get_factory
from formsynth.strategies.template_engine.models import TemplateAnalysis

logger = logging.getLogger(__name__)


class TemplateService:
    """Parses, validates and synthesizes schemas for extracted templates."""

    SUPPORTED_EXTENSIONS = frozenset({".txt", ".md"})

    def __init__(self, factory: ComponentFactory | None = None) -> None:
        """Initialize the service.

        Args:
            factory: Component factory to obtain strategies from. The shared
                global factory is used when omitted.
        """
        self._factory = factory or get_factory()

    def process(
        self,
        text: str,
        name: str,
        description: str | None = None,
    ) -> TemplateAnalysis:
        """Process extracted template text.

        Args:
            text: Plain text extracted from the template document.
            name: Human readable template name.
            description: Optional description, defaults to "DOCX template: <name>".

        Returns:
            A TemplateAnalysis. ``table`` and ``screen`` are None when no
            field is compatible with a flat table.

        Raises:
            TemplateTooLargeError: If the text exceeds ``max_content_size``.
        """
        limit = self._factory.settings.max_content_size
        if len(text) > limit:
            raise TemplateTooLargeError(len(text), limit)

        name = name.strip()
        logger.info(f"Processing template '{name}' ({len(text)} characters)")

        parsed = self._factory.get_parser().parse(text)
        validation = self._factory.get_validator().validate(parsed.fields)
        for warning in validation.warnings:
            logger.warning(warning)

        table = None
        screen = None
        if validation.has_compatible_fields:
            synthesizer = self._factory.get_synthesizer()
            table = synthesizer.create_table(validation.compatible_fields, f"{name} Data")
            screen = synthesizer.create_screen(validation.compatible_fields, table, name)
            logger.info(
                f"Created table with {len(validation.compatible_fields)} fields "
                f"and screen {screen.route}"
            )
        else:
            logger.warning(f"No compatible fields found in template '{name}'")

        return TemplateAnalysis(
            name=name,
            description=(description or "").strip() or f"DOCX template: {name}",
            parsed=parsed,
            validation=validation,
            table=table,
            screen=screen,
            created_at=datetime.now(timezone.utc),
        )

    def analyze_file(
        self,
        file_path: str | Path,
        name: str | None = None,
        description: str | None = None,
        encoding: str = "utf-8",
    ) -> TemplateAnalysis:
        """Process a file holding already-extracted template text.

        Args:
            file_path: Path to a .txt or .md file.
            name: Template name, defaults to the file stem.
            description: Optional template description.
            encoding: Character encoding of the file.

        Returns:
            The TemplateAnalysis of the file's text.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            UnsupportedTemplateFileError: If the file is not plain text.
            TemplateTooLargeError: If the text exceeds ``max_content_size``.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {file_path}")

        if path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            raise UnsupportedTemplateFileError(
                f"Unsupported template file '{path.name}': expected extracted text "
                f"({', '.join(sorted(self.SUPPORTED_EXTENSIONS))})"
            )

        logger.info(f"Reading template text: {file_path}")
        text = path.read_text(encoding=encoding)
        return self.process(text, name or path.stem, description)
