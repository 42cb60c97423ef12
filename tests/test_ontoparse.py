import pytest

from ontoenrich.ontoparse import (
    RDF_NS,
    OntologyParseError,
    detect_ontology_format,
    parse_ontology,
)

RDF_DOC = f"""<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="{RDF_NS}" xmlns:ex="http://example.com/ns#">
  <rdf:Description rdf:about="http://example.com/a">
    <ex:name>Alpha</ex:name>
    <ex:knows rdf:resource="http://example.com/b"/>
  </rdf:Description>
  <ex:Person rdf:about="http://example.com/b">
    <ex:name>Beta</ex:name>
  </ex:Person>
</rdf:RDF>"""

OWL_DOC = """<Ontology xmlns="http://www.w3.org/2002/07/owl#">
  <Declaration><Class IRI="#Animal" label="Animal"/></Declaration>
  <Declaration><Class IRI="#Plant"/></Declaration>
</Ontology>"""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Q1\tP1\tx", "QuickStatement"),
        (RDF_DOC, "RDF"),
        ("<Ontology></Ontology>", "OWL"),
        ("plain text", "Unknown"),
    ],
)
def test_detect_format(text, expected):
    assert detect_ontology_format(text) == expected


def test_quick_statement_entities():
    result = parse_ontology("Q1\tP1\tfoo\nQ1\tP2\tbar\nQ2\tP1\tbaz")
    assert result == {
        "entities": {"Q1": {"P1": "foo", "P2": "bar"}, "Q2": {"P1": "baz"}}
    }


def test_quick_statement_later_value_wins():
    result = parse_ontology("Q1\tP1\tfoo\nQ1\tP1\tbar")
    assert result["entities"]["Q1"]["P1"] == "bar"


def test_quick_statement_bad_line_raises():
    with pytest.raises(OntologyParseError, match="InvalidQuickStatementLine"):
        parse_ontology("Q1\tP1\tfoo\n")


def test_rdf_entities():
    entities = parse_ontology(RDF_DOC)["entities"]
    a = entities["http://example.com/a"]
    assert a["http://example.com/ns#name"] == "Alpha"
    assert a["http://example.com/ns#knows"] == "http://example.com/b"
    b = entities["http://example.com/b"]
    assert b[RDF_NS + "type"] == "http://example.com/ns#Person"
    assert b["http://example.com/ns#name"] == "Beta"


def test_rdf_malformed_raises():
    with pytest.raises(OntologyParseError):
        parse_ontology("<rdf:RDF><unclosed>")


def test_owl_classes():
    result = parse_ontology(OWL_DOC)
    assert result == {
        "classes": {"#Animal": {"label": "Animal"}, "#Plant": {"label": ""}}
    }


def test_owl_wrong_root_raises():
    with pytest.raises(OntologyParseError):
        parse_ontology("<Other><Ontology/></Other>")


def test_unknown_format_raises():
    with pytest.raises(OntologyParseError, match="UnknownOntologyFormat"):
        parse_ontology("nothing recognisable")