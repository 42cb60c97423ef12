"""Document parsers for plain text and Markdown, and their common base."""

from __future__ import annotations

import abc
from typing import IO, Any, Union

import yaml

from ontoenrich.log import get_logger
from ontoenrich.messages import get_message

Source = Union[bytes, bytearray, str, IO[bytes], IO[str]]


class ParseError(Exception):
    """Raised when a document cannot be parsed."""


def read_all(reader: Source) -> bytes:
    """Return the whole content of ``reader`` as bytes."""
    if isinstance(reader, (bytes, bytearray)):
        return bytes(reader)
    if isinstance(reader, str):
        return reader.encode("utf-8")
    try:
        data = reader.read()
    except OSError as exc:
        raise ParseError(f"failed to read content: {exc}") from exc
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def scan_lines(text: str) -> list[str]:
    """Split text into lines, dropping a final empty line and trailing carriage returns."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _yaml_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Parser(abc.ABC):
    """Extracts text from a document and collects format metadata."""

    def __init__(self) -> None:
        self.format_metadata: dict[str, str] = {}

    @abc.abstractmethod
    def parse(self, reader: Source) -> bytes:
        """Return the text content of the document read from ``reader``."""


class TextParser(Parser):
    """Plain text: content is kept line by line, with counts as metadata."""

    def parse(self, reader: Source) -> bytes:
        log = get_logger()
        log.debug(get_message("ParseStarted") + ": %s", "Text")
        text = read_all(reader).decode("utf-8", errors="replace")
        lines = scan_lines(text)
        self.format_metadata["format"] = "Text"
        self.format_metadata["lineCount"] = str(len(lines))
        self.format_metadata["wordCount"] = str(sum(len(line.split()) for line in lines))
        self.format_metadata["charCount"] = str(sum(len(line) for line in lines))
        log.info(get_message("ParseCompleted") + ": %s", "Text")
        return "".join(line + "\n" for line in lines).encode("utf-8")


class MarkdownParser(Parser):
    """Markdown: YAML front matter becomes metadata, the rest is content."""

    def parse(self, reader: Source) -> bytes:
        log = get_logger()
        log.debug(get_message("ParseStarted") + ": %s", "Markdown")
        text = read_all(reader).decode("utf-8", errors="replace")
        content: list[str] = []
        front_matter: list[str] = []
        in_front_matter = False
        line_count = word_count = char_count = header_count = 0

        for line in scan_lines(text):
            if line_count == 0 and line == "---" and not in_front_matter:
                in_front_matter = True
                continue
            if in_front_matter:
                if line == "---":
                    in_front_matter = False
                    self._parse_front_matter("".join(front_matter))
                else:
                    front_matter.append(line + "\n")
                continue
            content.append(line + "\n")
            line_count += 1
            word_count += len(line.split())
            char_count += len(line.encode("utf-8"))
            if line.startswith("#"):
                header_count += 1

        self.format_metadata["format"] = "Markdown"
        self.format_metadata["lineCount"] = str(line_count)
        self.format_metadata["wordCount"] = str(word_count)
        self.format_metadata["charCount"] = str(char_count)
        self.format_metadata["headerCount"] = str(header_count)
        log.info(get_message("ParseCompleted") + ": %s", "Markdown")
        return "".join(content).encode("utf-8")

    def _parse_front_matter(self, front_matter: str) -> None:
        try:
            data = yaml.safe_load(front_matter)
        except yaml.YAMLError as exc:
            get_logger().warning("Failed to parse YAML front matter: %v", exc)
            return
        if not isinstance(data, dict):
            return
        for key, value in data.items():
            self.format_metadata[str(key)] = _yaml_str(value)