"""Recursive template parser strategy.

Drives the tokenizer over extracted document text, recurses into block
bodies and merges everything into one deduplicated field set with summary
metadata (conditionals, loops, nested object paths, placeholder count).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from formsynth.interfaces.template import BaseTemplateParser
from formsynth.strategies.template_engine.models import ParsedTemplate, TemplateField
from formsynth.strategies.template_engine.tokenizer import (
    BlockKind,
    BlockToken,
    find_stray_block_tags,
    mask_spans,
    outermost_blocks,
    scan_all_blocks,
    scan_nested_fields,
    scan_simple_fields,
)
from formsynth.strategies.template_engine.type_inference import infer_field_type

logger = logging.getLogger(__name__)

_PROVENANCE_ATTRS = (
    "type",
    "is_nested",
    "is_conditional",
    "is_loop",
    "condition",
    "loop_variable",
)


@dataclass
class _FieldCollector:
    """Ordered, first-wins field set for one fragment."""

    strict: bool = False
    fields: dict[str, TemplateField] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add(self, candidate: TemplateField) -> bool:
        key = candidate.dedup_key
        kept = self.fields.get(key)
        if kept is None:
            self.fields[key] = candidate
            return True

        if self.strict:
            differences = [
                attr
                for attr in _PROVENANCE_ATTRS
                if getattr(kept, attr) != getattr(candidate, attr)
            ]
            if differences:
                self.warnings.append(
                    f"Duplicate field '{key}' ignored: conflicts with first occurrence "
                    f"({', '.join(differences)})"
                )
        return False


@dataclass
class _Summary:
    """Summary lists gathered from block sub-parses."""

    conditionals: list[str] = field(default_factory=list)
    loops: list[str] = field(default_factory=list)
    nested_objects: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class RecursiveTemplateParser(BaseTemplateParser):
    """Parses ``{{ }}`` placeholders, recursing into block bodies.

    Each block body is parsed as an independent sub-template and its fields
    are re-tagged with the block's provenance before being merged. Fields
    are merged simple, nested, ``#if``, ``#unless``, ``#each``, ``#with``
    and the first occurrence of a dedup key wins, so a top-level field
    always beats the same name found inside a block.

    The parser holds configuration only. All scanning state is local to a
    call, so one instance can be shared across threads.
    """

    def __init__(
        self,
        max_depth: int = 10,
        report_unterminated_blocks: bool = True,
        strict_dedup: bool = False,
        type_inferencer: Callable[[str], str] = infer_field_type,
    ) -> None:
        """Initialize the parser.

        Args:
            max_depth: Deepest block nesting level whose body is parsed.
            report_unterminated_blocks: Warn about block tags that never close.
            strict_dedup: Warn when a dropped duplicate differs from the kept field.
            type_inferencer: Maps a leaf field name to a semantic type.
        """
        self._max_depth = max_depth
        self._report_unterminated = report_unterminated_blocks
        self._strict_dedup = strict_dedup
        self._infer_type = type_inferencer

        logger.debug(
            f"RecursiveTemplateParser initialized: max_depth={max_depth}, "
            f"strict_dedup={strict_dedup}"
        )

    def parse(self, text: str) -> ParsedTemplate:
        """Parse extracted document text into template fields.

        Never raises for string input: malformed or unterminated blocks are
        treated as absent and reported through ``warnings``.

        Args:
            text: Plain text extracted from a document.

        Returns:
            A ParsedTemplate with fields in discovery order.
        """
        result = self._parse_fragment(text, depth=0)
        warnings = list(dict.fromkeys(result.warnings))

        logger.info(
            f"Template parsed: {len(result.fields)} fields, "
            f"{result.total_placeholders} placeholders, "
            f"{len(result.conditionals)} conditionals, {len(result.loops)} loops"
        )
        for warning in warnings:
            logger.warning(warning)

        return result.model_copy(update={"warnings": warnings})

    def _parse_fragment(self, text: str, depth: int) -> ParsedTemplate:
        """Parse one fragment: the whole document or a block body."""
        collector = _FieldCollector(strict=self._strict_dedup)
        conditionals: list[str] = []
        loops: list[str] = []
        nested_objects: list[str] = []
        warnings: list[str] = []
        total = 0

        blocks = outermost_blocks(scan_all_blocks(text))
        # Field scans skip block bodies, those fields come from the sub-parses
        outside = mask_spans(
            text, [(block.start, block.end) for tokens in blocks.values() for block in tokens]
        )

        for token in scan_simple_fields(outside):
            total += 1
            collector.add(
                TemplateField(
                    name=token.expression,
                    type=self._infer_type(token.expression),
                    required=True,
                )
            )

        for token in scan_nested_fields(outside):
            total += 1
            owner, _, leaf = token.expression.rpartition(".")
            collector.add(
                TemplateField(
                    name=leaf,
                    type=self._infer_type(leaf),
                    required=True,
                    path=token.expression,
                    is_nested=True,
                    description=f"Nested field from {owner}",
                )
            )
            if owner not in nested_objects:
                nested_objects.append(owner)

        summary = _Summary()
        for kind, tokens in blocks.items():
            for block in tokens:
                total += 1
                match kind:
                    case BlockKind.IF:
                        conditionals.append(block.expression)
                    case BlockKind.UNLESS:
                        conditionals.append(f"NOT {block.expression}")
                    case BlockKind.EACH:
                        loops.append(block.expression)
                    case BlockKind.WITH:
                        if block.expression not in nested_objects:
                            nested_objects.append(block.expression)

                sub = self._parse_block_body(block, depth, summary)
                if sub is None:
                    continue
                for sub_field in sub.fields:
                    collector.add(self._retag(sub_field, block))

        if self._report_unterminated:
            for tag in find_stray_block_tags(outside):
                warnings.append(f"Unterminated or unmatched block tag ignored: {tag}")

        conditionals.extend(summary.conditionals)
        loops.extend(summary.loops)
        for path in summary.nested_objects:
            if path not in nested_objects:
                nested_objects.append(path)

        return ParsedTemplate(
            fields=list(collector.fields.values()),
            conditionals=conditionals,
            loops=loops,
            nested_objects=nested_objects,
            total_placeholders=total,
            warnings=warnings + collector.warnings + summary.warnings,
        )

    def _parse_block_body(
        self, block: BlockToken, depth: int, summary: _Summary
    ) -> ParsedTemplate | None:
        """Sub-parse a block body, folding its summary lists into ``summary``.

        Returns None when the body sits beyond the nesting limit.
        """
        if depth >= self._max_depth:
            summary.warnings.append(
                f"Maximum nesting depth {self._max_depth} exceeded: "
                f"body of '#{block.kind.value} {block.expression}' not parsed"
            )
            return None

        sub = self._parse_fragment(block.body, depth + 1)

        summary.conditionals.extend(sub.conditionals)
        summary.loops.extend(sub.loops)
        if block.kind is BlockKind.WITH:
            summary.nested_objects.extend(
                f"{block.expression}.{path}" for path in sub.nested_objects
            )
        else:
            summary.nested_objects.extend(sub.nested_objects)
        summary.warnings.extend(sub.warnings)
        return sub

    @staticmethod
    def _retag(sub_field: TemplateField, block: BlockToken) -> TemplateField:
        """Apply a block's provenance to a field found in its body."""
        match block.kind:
            case BlockKind.IF:
                update = {
                    "is_conditional": True,
                    "condition": block.expression,
                    "required": False,
                }
            case BlockKind.UNLESS:
                update = {
                    "is_conditional": True,
                    "condition": f"NOT {block.expression}",
                    "required": False,
                }
            case BlockKind.EACH:
                update = {
                    "is_loop": True,
                    "loop_variable": block.expression,
                    "required": False,
                }
            case BlockKind.WITH:
                update = {
                    "path": f"{block.expression}.{sub_field.path or sub_field.name}",
                    "is_nested": True,
                    "description": f"Field from {block.expression} context",
                }
        return sub_field.model_copy(update=update)
