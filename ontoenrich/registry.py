"""Parser registry by file extension, and parsing of whole directories."""

from __future__ import annotations

import os
from typing import Callable

from ontoenrich.formats import MarkdownParser, ParseError, Parser, TextParser
from ontoenrich.log import get_logger
from ontoenrich.metadata import Generator, MetadataError, ProjectMetadata
from ontoenrich.office import DOCXParser, HTMLParser

ParserFactory = Callable[[], Parser]

_PARSERS: dict[str, ParserFactory] = {}


def register_parser(extension: str, factory: ParserFactory) -> None:
    """Register ``factory`` for files with ``extension`` (such as ".txt")."""
    _PARSERS[extension] = factory


def get_parser(extension: str) -> Parser:
    """Return a new parser for ``extension``; raises ParseError if unsupported."""
    key = extension.lower()
    if not key.startswith("."):
        key = "." + key
    factory = _PARSERS.get(key)
    if factory is None:
        raise ParseError(f"unsupported format: {key}")
    return factory()


def _walk(root: str, recursive: bool):
    """Yield file paths in lexical, depth-first order."""
    for name in sorted(os.listdir(root)):
        path = os.path.join(root, name)
        if os.path.isdir(path):
            if recursive:
                yield from _walk(path, recursive)
        else:
            yield path


def parse_directory(
    path: str, recursive: bool, metadata_gen: Generator
) -> tuple[list[bytes], ProjectMetadata]:
    """Parse every supported file under ``path``; return contents and their metadata."""
    log = get_logger()
    results: list[bytes] = []
    project = ProjectMetadata()
    if not os.path.isdir(path):
        os.stat(path)
        files = [path]
    else:
        files = list(_walk(path, recursive))

    for file_path in files:
        extension = os.path.splitext(file_path)[1].lower()
        try:
            parser = get_parser(extension)
        except ParseError:
            log.warning("Unsupported file type: %s, skipping", file_path)
            continue
        try:
            with open(file_path, "rb") as handle:
                content = parser.parse(handle)
        except OSError as exc:
            log.warning("Failed to open file: %s, error: %v", file_path, exc)
            continue
        except ParseError as exc:
            log.warning("Failed to parse file: %s, error: %v", file_path, exc)
            continue
        results.append(content)

        try:
            file_meta = metadata_gen.generate_single_file_metadata(file_path)
        except MetadataError as exc:
            log.warning("Failed to generate metadata for file: %s, error: %v", file_path, exc)
            continue
        file_meta.format_metadata.update(parser.format_metadata)
        project.files[file_meta.id] = file_meta

    return results, project


register_parser(".txt", TextParser)
register_parser(".md", MarkdownParser)
register_parser(".html", HTMLParser)
register_parser(".docx", DOCXParser)