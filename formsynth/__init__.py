"""Template parsing and schema synthesis for extracted document text."""

__version__ = "0.1.0"
