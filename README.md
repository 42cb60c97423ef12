# ontoenrich

Building blocks for turning documents into ontologies:

- **Document parsers** for plain text, Markdown (with YAML front matter), HTML and DOCX.
  Each one extracts text and records format metadata such as line, word and character counts,
  titles and authors.
- **A parser registry** that picks a parser by file extension and walks a directory,
  collecting parsed content and per-file metadata (SHA-256 hash, modification date, location).
- **Ontology models**: elements with types and source positions, and relations between them.
  Elements serialise to and from a compact `name|type@pos1,pos2` line format.
- **QuickStatement tools**: convert tab-separated statements, validate QuickStatement,
  RDF and OWL text, and parse existing ontologies in QuickStatement, RDF/XML or OWL form.

## Installation

```
pip install ontoenrich
```

To run the test suite:

```
pip install "ontoenrich[test]"
pytest
```

## Examples

Parse a file by extension:

```python
from ontoenrich.registry import get_parser

parser = get_parser(".md")
with open("notes.md", encoding="utf-8") as handle:
    text = parser.parse(handle)
print(parser.metadata["wordCount"])
```

Parse a directory and collect metadata:

```python
from ontoenrich.metadata import Generator
from ontoenrich.registry import parse_directory

contents, project = parse_directory("docs", False, Generator())
for file_meta in project.files.values():
    print(file_meta.source_file, file_meta.sha256_hash)
```

Work with ontology elements:

```python
from ontoenrich.element import Ontology

onto = Ontology()
onto.load_from_string("Paris|City@3,17\nFrance|Country@5\n")
onto.get_element_by_name("Paris").add_position(42)
print(onto.to_string())
```

Convert and validate QuickStatements:

```python
from ontoenrich.converter import QuickStatementConverter
from ontoenrich.validate import validate_quick_statement

tsv = QuickStatementConverter().convert(b"Q1\tP31\tQ5", "", "")
print(validate_quick_statement("Q1\tP31\tQ5"))
```

Detect and parse an existing ontology:

```python
from ontoenrich.ontoparse import detect_ontology_format, parse_ontology

print(detect_ontology_format("Q1\tP31\tQ5"))
print(parse_ontology("Q1\tP31\tQ5"))
```

Errors are raised as exceptions: `ParseError`, `ConversionError`,
`OntologyParseError` and `MetadataError`.