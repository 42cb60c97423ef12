"""Ontology elements with source positions, and their line-based text form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_position(text: str) -> int | None:
    """Parse a decimal integer strictly; return None if it is not one."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _unique(values: list[int]) -> list[int]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


@dataclass
class OntologyElement:
    """A named, typed element and the positions where it occurs."""

    name: str
    type: str
    positions: list[int] = field(default_factory=list)

    def add_position(self, position: int) -> None:
        self.positions.append(position)

    def __str__(self) -> str:
        return f"{self.name}|{self.type}@{','.join(map(str, self.positions))}"


@dataclass
class Ontology:
    """A collection of elements, unique by name."""

    elements: list[OntologyElement] = field(default_factory=list)

    def add_element(self, element: OntologyElement) -> None:
        """Add ``element``, or merge it into an existing element of the same name.

        A merge takes the new type and appends the new positions,
        dropping duplicates.
        """
        existing = self.get_element_by_name(element.name)
        if existing is None:
            self.elements.append(element)
            return
        existing.type = element.type
        existing.positions = _unique(existing.positions + element.positions)

    def get_element_by_name(self, name: str) -> OntologyElement | None:
        """Return the element called ``name``, or None."""
        return next((e for e in self.elements if e.name == name), None)

    def load_from_string(self, content: str) -> None:
        """Add elements from lines of the form ``name|type@p1,p2,...``.

        Malformed lines and positions that are not integers are skipped.
        """
        for line in content.split("\n"):
            parts = line.split("|")
            if len(parts) != 2:
                continue
            name, rest = parts
            type_parts = rest.split("@")
            if len(type_parts) != 2:
                continue
            element_type, positions_text = type_parts
            element = OntologyElement(name, element_type)
            for text in positions_text.split(","):
                position = _parse_position(text)
                if position is not None:
                    element.add_position(position)
            self.add_element(element)

    def to_string(self) -> str:
        """Render every element on its own line, in insertion order."""
        return "".join(f"{element}\n" for element in self.elements)