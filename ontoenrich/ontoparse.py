"""Parsing of ontologies given as QuickStatement, RDF/XML or OWL/XML text."""

from __future__ import annotations

import itertools
import xml.etree.ElementTree as ET
from typing import Any

from ontoenrich.log import get_logger
from ontoenrich.messages import get_message

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
_XML_NS = "http://www.w3.org/XML/1998/namespace"
_RDF_SYNTAX_ATTRS = {
    f"{{{RDF_NS}}}{name}"
    for name in ("about", "ID", "nodeID", "resource", "parseType", "datatype", "type")
}


class OntologyParseError(ValueError):
    """Raised when an ontology cannot be parsed."""


def detect_ontology_format(ontology: str) -> str:
    """Guess the format of an ontology text."""
    if "Q" in ontology and "P" in ontology and "\t" in ontology:
        return "QuickStatement"
    if "<rdf:RDF" in ontology:
        return "RDF"
    if "<Ontology" in ontology:
        return "OWL"
    return "Unknown"


def parse_ontology(ontology: str) -> dict[str, Any]:
    """Parse an ontology string into a nested dictionary."""
    log = get_logger()
    log.debug(get_message("ParseOntologyStarted"))
    parsers = {
        "QuickStatement": _parse_quick_statement,
        "RDF": _parse_rdf,
        "OWL": _parse_owl,
    }
    parser = parsers.get(detect_ontology_format(ontology))
    if parser is None:
        raise OntologyParseError(get_message("UnknownOntologyFormat"))
    try:
        result = parser(ontology)
    except OntologyParseError as exc:
        raise OntologyParseError(f"{get_message('FailedToParseOntology')}: {exc}") from exc
    log.debug(get_message("ParseOntologyFinished"))
    return result


def _parse_quick_statement(ontology: str) -> dict[str, Any]:
    entities: dict[str, dict[str, str]] = {}
    for line in ontology.split("\n"):
        parts = line.split("\t")
        if len(parts) != 3:
            raise OntologyParseError(get_message("InvalidQuickStatementLine"))
        subject, predicate, obj = parts
        entities.setdefault(subject, {})[predicate] = obj
    return {"entities": entities}


def _iri(tag: str) -> str:
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace + local
    return tag


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


class _RDFReader:
    """Collects triples from an RDF/XML element tree."""

    def __init__(self) -> None:
        self.entities: dict[str, dict[str, str]] = {}
        self._blank_ids = itertools.count(1)

    def _emit(self, subject: str, predicate: str, obj: str) -> None:
        self.entities.setdefault(subject, {})[predicate] = obj

    def _new_blank(self) -> str:
        return f"_:b{next(self._blank_ids)}"

    @staticmethod
    def _property_attrs(elem: ET.Element) -> list[tuple[str, str]]:
        return [
            (name, value)
            for name, value in elem.attrib.items()
            if name not in _RDF_SYNTAX_ATTRS and not name.startswith(f"{{{_XML_NS}}}")
        ]

    def node(self, elem: ET.Element) -> str:
        about = elem.get(f"{{{RDF_NS}}}about")
        node_id = elem.get(f"{{{RDF_NS}}}ID")
        blank_id = elem.get(f"{{{RDF_NS}}}nodeID")
        if about is not None:
            subject = about
        elif node_id is not None:
            subject = "#" + node_id
        elif blank_id is not None:
            subject = "_:" + blank_id
        else:
            subject = self._new_blank()

        if elem.tag != f"{{{RDF_NS}}}Description":
            self._emit(subject, RDF_NS + "type", _iri(elem.tag))
        rdf_type = elem.get(f"{{{RDF_NS}}}type")
        if rdf_type is not None:
            self._emit(subject, RDF_NS + "type", rdf_type)
        for name, value in self._property_attrs(elem):
            self._emit(subject, _iri(name), value)

        members = itertools.count(1)
        for child in elem:
            self._property(subject, child, members)
        return subject

    def _property(self, subject: str, prop: ET.Element, members: itertools.count) -> None:
        predicate = _iri(prop.tag)
        if predicate == RDF_NS + "li":
            predicate = f"{RDF_NS}_{next(members)}"

        resource = prop.get(f"{{{RDF_NS}}}resource")
        blank_id = prop.get(f"{{{RDF_NS}}}nodeID")
        parse_type = prop.get(f"{{{RDF_NS}}}parseType")
        attrs = self._property_attrs(prop)

        if resource is not None or (blank_id is not None and len(prop) == 0):
            obj = resource if resource is not None else "_:" + blank_id
            for name, value in attrs:
                self._emit(obj, _iri(name), value)
        elif parse_type == "Resource":
            obj = self._new_blank()
            inner = itertools.count(1)
            for child in prop:
                self._property(obj, child, inner)
        elif len(prop) > 0:
            obj = self.node(prop[0])
        elif attrs:
            obj = self._new_blank()
            for name, value in attrs:
                self._emit(obj, _iri(name), value)
        else:
            obj = prop.text or ""
        self._emit(subject, predicate, obj)


def _parse_rdf(ontology: str) -> dict[str, Any]:
    try:
        root = ET.fromstring(ontology)
    except ET.ParseError as exc:
        raise OntologyParseError(f"{get_message('ErrorDecodingRDF')}: {exc}") from exc
    reader = _RDFReader()
    nodes = list(root) if root.tag == f"{{{RDF_NS}}}RDF" else [root]
    for elem in nodes:
        reader.node(elem)
    return {"entities": reader.entities}


def _parse_owl(ontology: str) -> dict[str, Any]:
    try:
        root = ET.fromstring(ontology)
    except ET.ParseError as exc:
        raise OntologyParseError(f"{get_message('ErrorParsingOWL')}: {exc}") from exc
    if _local(root.tag) != "Ontology":
        raise OntologyParseError(
            f"{get_message('ErrorParsingOWL')}: expected element type <Ontology> "
            f"but have <{_local(root.tag)}>"
        )
    classes: dict[str, dict[str, str]] = {}
    for declaration in root:
        if _local(declaration.tag) != "Declaration":
            continue
        for cls in declaration:
            if _local(cls.tag) != "Class":
                continue
            attrs = {_local(name): value for name, value in cls.attrib.items()}
            classes[attrs.get("IRI", "")] = {"label": attrs.get("label", "")}
    return {"classes": classes}