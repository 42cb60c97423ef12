import pytest

from ontoenrich.validate import validate_owl, validate_quick_statement, validate_rdf

RDF_NS_ATTR = 'xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"'
OWL_NS_ATTR = 'xmlns:owl="http://www.w3.org/2002/07/owl#"'


@pytest.mark.parametrize(
    "text",
    ["Q1\tP2\tfoo", "Q1\tP2\tfoo\nQ30\tP400\tbar\n", "Q1\tP2\tfoo\r\n", ""],
)
def test_valid_quick_statements(text):
    assert validate_quick_statement(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "X1\tP2\tfoo",
        "Q1\tX2\tfoo",
        "Q1\tP2",
        "Q1\tP2\ta\tb",
        "Q\tP2\tfoo",
        "Q1\tP2\tfoo\n\nQ2\tP3\tbar",
        "Q１\tP2\tfoo",
    ],
)
def test_invalid_quick_statements(text):
    assert validate_quick_statement(text) is False


def test_valid_rdf():
    assert validate_rdf(f"<rdf:RDF {RDF_NS_ATTR}></rdf:RDF>") is True


@pytest.mark.parametrize(
    "text",
    [f"<rdf:RDF {RDF_NS_ATTR}>", "<rdf:RDF></rdf:RDF>", "plain"],
)
def test_invalid_rdf(text):
    assert validate_rdf(text) is False


def test_valid_owl():
    assert validate_owl(f"<owl:Ontology {OWL_NS_ATTR}></owl:Ontology>") is True


@pytest.mark.parametrize(
    "text",
    [f"<owl:Ontology {OWL_NS_ATTR}>", "<owl:Ontology></owl:Ontology>", "<Ontology></Ontology>"],
)
def test_invalid_owl(text):
    assert validate_owl(text) is False