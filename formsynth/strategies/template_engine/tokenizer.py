"""Placeholder tokenizer.

Recognizes the ``{{ }}`` placeholder syntax: simple fields, dotted nested
fields and the four block kinds (``#if``, ``#unless``, ``#each``,
``#with``). Patterns are compiled once and only ever used through
``finditer``, so every scan starts at the beginning of the fragment it is
given and no cursor is shared between recursive or concurrent calls.
"""

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"

# ``this.`` refers to the current loop item or scope, it is not part of the path
THIS_PREFIX = r"(?:this\.)?"

SIMPLE_FIELD_PATTERN = re.compile(r"\{\{\s*" + THIS_PREFIX + r"(" + IDENTIFIER + r")\s*\}\}")
NESTED_FIELD_PATTERN = re.compile(
    r"\{\{\s*" + THIS_PREFIX + r"(" + IDENTIFIER + r"(?:\." + IDENTIFIER + r")+)\s*\}\}"
)

# Handlebars control words that look like bare identifiers
RESERVED_WORDS = frozenset({"else", "this"})


class BlockKind(str, enum.Enum):
    """Block constructs, in the order the parser merges them."""

    IF = "if"
    UNLESS = "unless"
    EACH = "each"
    WITH = "with"


def _block_pattern(keyword: str) -> re.Pattern[str]:
    # Non-greedy body: a block closes at its nearest closing tag
    return re.compile(
        r"\{\{\s*#" + keyword + r"\s+([^{}]+?)\s*\}\}(.*?)\{\{\s*/" + keyword + r"\s*\}\}",
        re.DOTALL,
    )


BLOCK_PATTERNS: dict[BlockKind, re.Pattern[str]] = {
    kind: _block_pattern(kind.value) for kind in BlockKind
}

BLOCK_TAG_PATTERN = re.compile(
    r"\{\{\s*[#/]\s*(?:" + "|".join(kind.value for kind in BlockKind) + r")\b[^{}]*\}\}"
)


@dataclass(frozen=True)
class FieldToken:
    """A simple or nested field occurrence."""

    expression: str
    start: int
    end: int

    @property
    def is_nested(self) -> bool:
        return "." in self.expression


@dataclass(frozen=True)
class BlockToken:
    """A matched block with its guard/source expression and body."""

    kind: BlockKind
    expression: str
    body: str
    start: int
    end: int


def scan_simple_fields(text: str) -> Iterator[FieldToken]:
    """Yield simple field occurrences in ``text``, reserved words excluded."""
    for match in SIMPLE_FIELD_PATTERN.finditer(text):
        name = match.group(1)
        if name in RESERVED_WORDS:
            continue
        yield FieldToken(expression=name, start=match.start(), end=match.end())


def scan_nested_fields(text: str) -> Iterator[FieldToken]:
    """Yield dotted field occurrences in ``text``.

    A leading ``this.`` is dropped. ``{{this.name}}`` is a simple field.
    """
    for match in NESTED_FIELD_PATTERN.finditer(text):
        expression = match.group(1)
        if expression.partition(".")[0] in RESERVED_WORDS:
            continue
        yield FieldToken(expression=expression, start=match.start(), end=match.end())


def scan_blocks(text: str, kind: BlockKind) -> Iterator[BlockToken]:
    """Yield every block of ``kind`` in ``text`` in document order."""
    for match in BLOCK_PATTERNS[kind].finditer(text):
        yield BlockToken(
            kind=kind,
            expression=match.group(1).strip(),
            body=match.group(2),
            start=match.start(),
            end=match.end(),
        )


def scan_all_blocks(text: str) -> dict[BlockKind, list[BlockToken]]:
    """Collect blocks of every kind, keyed in merge order."""
    return {kind: list(scan_blocks(text, kind)) for kind in BlockKind}


def outermost_blocks(
    blocks: dict[BlockKind, list[BlockToken]],
) -> dict[BlockKind, list[BlockToken]]:
    """Drop blocks that sit inside another matched block.

    Inner blocks belong to the body of their enclosing block and are found
    again when that body is scanned.
    """
    spans = [(b.start, b.end) for tokens in blocks.values() for b in tokens]

    def enclosed(block: BlockToken) -> bool:
        return any(
            start <= block.start and block.end <= end and (start, end) != (block.start, block.end)
            for start, end in spans
        )

    return {
        kind: [block for block in tokens if not enclosed(block)]
        for kind, tokens in blocks.items()
    }


def mask_spans(text: str, spans: list[tuple[int, int]]) -> str:
    """Blank out ``spans`` of ``text`` while keeping offsets stable.

    Newlines inside a span are kept so line-based reporting stays aligned.
    """
    if not spans:
        return text

    chars = list(text)
    for start, end in spans:
        for i in range(start, end):
            if chars[i] != "\n":
                chars[i] = " "
    return "".join(chars)


def find_stray_block_tags(text: str) -> list[str]:
    """Return block openers/closers in ``text`` that belong to no block.

    ``text`` should already have its matched blocks masked out.
    """
    return [match.group(0) for match in BLOCK_TAG_PATTERN.finditer(text)]
