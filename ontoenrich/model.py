"""Ontology data model: elements, relations and their collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class OntologyElement:
    """A single named, typed element of an ontology."""

    name: str
    type: str
    positions: list[int] = field(default_factory=list)
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    source: str = ""


@dataclass
class Relation:
    """A typed relation between two ontology elements."""

    source: str
    type: str
    target: str
    description: str = ""
    weight: int = 0
    direction: str | None = None  # "forward", "backward" or "bidirectional"
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Ontology:
    """A collection of ontology elements and relations."""

    elements: list[OntologyElement] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)

    def add_element(self, element: OntologyElement) -> None:
        self.elements.append(element)

    def get_element_by_name(self, name: str) -> OntologyElement | None:
        """Return the first element with ``name``, or None."""
        return next((e for e in self.elements if e.name == name), None)

    def add_relation(self, relation: Relation) -> None:
        self.relations.append(relation)