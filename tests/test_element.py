import pytest

from ontoenrich.element import Ontology, OntologyElement


def test_str_joins_positions_with_commas():
    element = OntologyElement("Paris", "City", [3, 17, 42])
    assert str(element) == "Paris|City@3,17,42"


def test_str_without_positions_ends_with_at_sign():
    assert str(OntologyElement("Paris", "City")) == "Paris|City@"


def test_add_position_appends():
    element = OntologyElement("Paris", "City")
    element.add_position(5)
    element.add_position(1)
    assert element.positions == [5, 1]


def test_new_elements_do_not_share_positions():
    first = OntologyElement("a", "T")
    second = OntologyElement("b", "T")
    first.add_position(1)
    assert second.positions == []


def test_add_element_merges_by_name_and_removes_duplicates():
    onto = Ontology()
    onto.add_element(OntologyElement("Paris", "City", [1, 2]))
    onto.add_element(OntologyElement("Paris", "Capital", [2, 3]))
    assert len(onto.elements) == 1
    merged = onto.get_element_by_name("Paris")
    assert merged.type == "Capital"
    assert merged.positions == [1, 2, 3]


def test_add_element_keeps_distinct_names():
    onto = Ontology()
    onto.add_element(OntologyElement("Paris", "City"))
    onto.add_element(OntologyElement("Lyon", "City"))
    assert [e.name for e in onto.elements] == ["Paris", "Lyon"]


def test_get_element_by_name_missing_returns_none():
    onto = Ontology()
    onto.add_element(OntologyElement("Paris", "City"))
    assert onto.get_element_by_name("Rome") is None


def test_load_from_string_reads_elements():
    onto = Ontology()
    onto.load_from_string("Paris|City@1,2\nLyon|City@7\n")
    assert [e.name for e in onto.elements] == ["Paris", "Lyon"]
    assert onto.get_element_by_name("Paris").positions == [1, 2]
    assert onto.get_element_by_name("Lyon").positions == [7]


@pytest.mark.parametrize(
    "line",
    ["no separator here", "a|b|c@1", "Paris|City", "Paris|City@1@2", ""],
)
def test_load_from_string_skips_malformed_lines(line):
    onto = Ontology()
    onto.load_from_string(line)
    assert onto.elements == []


def test_load_from_string_skips_invalid_positions():
    onto = Ontology()
    onto.load_from_string("Paris|City@1,x, 2,+4,-3,")
    assert onto.get_element_by_name("Paris").positions == [1, 4, -3]


def test_load_from_string_keeps_element_with_empty_positions():
    onto = Ontology()
    onto.load_from_string("Paris|City@")
    element = onto.get_element_by_name("Paris")
    assert element.type == "City"
    assert element.positions == []


def test_load_from_string_merges_repeated_names():
    onto = Ontology()
    onto.load_from_string("Paris|City@1,2\nParis|Capital@2,9")
    assert len(onto.elements) == 1
    assert onto.elements[0].type == "Capital"
    assert onto.elements[0].positions == [1, 2, 9]


def test_to_string_round_trip():
    text = "Paris|City@1,2\nLyon|Town@7\nNice|City@\n"
    onto = Ontology()
    onto.load_from_string(text)
    assert onto.to_string() == text


def test_to_string_empty_ontology():
    assert Ontology().to_string() == ""