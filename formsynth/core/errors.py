"""Exceptions raised around the template engine.

The parser, inferencer, validator and synthesizer never raise for string
input. These errors belong to the service layer that guards the engine.
"""


class FormSynthError(Exception):
    """Base exception for formsynth service errors."""

    pass


class TemplateTooLargeError(FormSynthError):
    """Raised when template text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            f"Template text has {size} characters, exceeding the limit of {limit}"
        )


class UnsupportedTemplateFileError(FormSynthError):
    """Raised when a template file is not extracted plain text."""

    pass
