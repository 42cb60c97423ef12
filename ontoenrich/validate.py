"""Syntax checks for QuickStatement, RDF/XML and OWL/XML texts."""

from __future__ import annotations

import re

from ontoenrich.log import get_logger
from ontoenrich.messages import get_message

_ENTITY = re.compile(r"Q[0-9]+")
_PROPERTY = re.compile(r"P[0-9]+")


class _ValidationError(ValueError):
    pass


def _scan_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _check_quick_statement(statement: str) -> None:
    for number, line in enumerate(_scan_lines(statement), start=1):
        parts = line.split("\t")
        if len(parts) != 3:
            raise _ValidationError(f"{get_message('InvalidQuickStatementLine')} (line {number})")
        if not (_ENTITY.fullmatch(parts[0]) and _PROPERTY.fullmatch(parts[1])):
            raise _ValidationError(f"{get_message('InvalidEntityOrProperty')} (line {number})")


def _check_rdf(rdf: str) -> None:
    if "<rdf:RDF" not in rdf or "</rdf:RDF>" not in rdf:
        raise _ValidationError(get_message("MissingRDFTags"))
    if 'xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"' not in rdf:
        raise _ValidationError(get_message("MissingRDFNamespace"))


def _check_owl(owl: str) -> None:
    if "<owl:Ontology" not in owl or "</owl:Ontology>" not in owl:
        raise _ValidationError(get_message("MissingOWLTags"))
    if 'xmlns:owl="http://www.w3.org/2002/07/owl#"' not in owl:
        raise _ValidationError(get_message("MissingOWLNamespace"))


def _run(check, text: str, name: str) -> bool:
    log = get_logger()
    log.debug(get_message(f"Validate{name}Started"))
    try:
        check(text)
    except _ValidationError as exc:
        log.warning(get_message(f"Invalid{name}Syntax") + ": %v", exc)
        return False
    log.debug(get_message(f"Validate{name}Finished"))
    return True


def validate_quick_statement(statement: str) -> bool:
    """Return True if every line is ``Q<n>\\tP<n>\\t<value>``."""
    return _run(_check_quick_statement, statement, "QuickStatement")


def validate_rdf(rdf: str) -> bool:
    """Return True if the text has RDF root tags and the RDF namespace."""
    return _run(_check_rdf, rdf, "RDF")


def validate_owl(owl: str) -> bool:
    """Return True if the text has OWL ontology tags and the OWL namespace."""
    return _run(_check_owl, owl, "OWL")