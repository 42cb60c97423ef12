"""Conversion of tab-separated document segments into QuickStatement lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ontoenrich.log import Logger, get_logger
from ontoenrich.messages import get_message

_PLACEHOLDER = "\ufffd"


class ConversionError(ValueError):
    """Raised when a segment cannot be converted."""


@dataclass
class Entity:
    """A Wikibase entity."""

    id: str
    label: str = ""


@dataclass
class Property:
    """A Wikibase property."""

    id: str
    data_type: str = ""


@dataclass
class Statement:
    """A complete QuickStatement: subject, property and object."""

    subject: Entity
    property: Property
    object: Any = field(default="")


def _scan_lines(text: str) -> list[str]:
    """Split text into lines the way a line scanner does."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class QuickStatementConverter:
    """Turns tab-separated triples into QuickStatement TSV output."""

    def __init__(self, logger: Logger | None = None, include_positions: bool = False) -> None:
        self._logger = logger if logger is not None else get_logger()
        self.include_positions = include_positions

    def convert(self, segment: bytes | str, context: str, ontology: str) -> str:
        """Convert a segment of triples into QuickStatement TSV text."""
        log = self._logger
        log.debug(get_message("ConvertStarted"))
        text = segment.decode("utf-8", errors="replace") if isinstance(segment, bytes) else segment
        log.debug("Input segment:\n%s", text)

        try:
            statements = self._parse_segment(text)
        except ConversionError as exc:
            log.error(get_message("FailedToParseSegment") + ": %v", exc)
            raise ConversionError(f"{get_message('FailedToParseSegment')}: {exc}") from exc

        log.debug("Parsed %d statements", len(statements))
        result = "".join(self._format_statement(stmt) for stmt in statements)
        log.debug("Generated TSV output:\n%s", result)
        return result

    @staticmethod
    def _format_statement(stmt: Statement) -> str:
        object_parts = str(stmt.object).split("@")
        positions = "@" + object_parts[1] if len(object_parts) > 1 else ""
        return f"{stmt.subject.id}\t{stmt.property.id}\t{object_parts[0]}{positions}\n"

    def _parse_segment(self, text: str) -> list[Statement]:
        self._logger.debug(get_message("ParsingSegment"))
        statements = []
        for raw in _scan_lines(text):
            line = (
                raw.replace("\\\\", _PLACEHOLDER)
                .replace("\\t", "\t")
                .replace(_PLACEHOLDER, "\\")
            )
            parts = line.split("\t")
            if len(parts) < 3:
                self._logger.debug("Skipping invalid line: %s", line)
                continue
            statements.append(
                Statement(
                    subject=Entity(id=parts[0].strip()),
                    property=Property(id=parts[1].strip()),
                    object="\t".join(parts[2:]).strip(),
                )
            )
        if not statements:
            raise ConversionError(get_message("NoValidStatementsFound"))
        return statements