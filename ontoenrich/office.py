"""Document parsers for HTML and DOCX files."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
import zipfile
from html.parser import HTMLParser as _HTMLTokenizer

from ontoenrich.formats import ParseError, Parser, Source, read_all
from ontoenrich.log import get_logger
from ontoenrich.messages import get_message

_CORE_FIELDS = (
    "title",
    "subject",
    "creator",
    "keywords",
    "description",
    "lastModifiedBy",
    "revision",
    "created",
    "modified",
)


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


class _HTMLCollector(_HTMLTokenizer):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.text: list[str] = []
        self.meta: dict[str, str] = {}
        self.title: str | None = None
        self._in_title = False
        self._title_seen = False

    def handle_starttag(self, tag, attrs):
        if tag == "meta":
            name = content = ""
            for key, value in attrs:
                if key in ("name", "property"):
                    name = value or ""
                elif key == "content":
                    content = value or ""
            if name and content:
                self.meta[name] = content
        elif tag == "title":
            self._in_title = True

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)
        if tag == "title":
            self._in_title = False
            self._title_seen = True

    def handle_endtag(self, tag):
        if tag == "title":
            self._in_title = False
            self._title_seen = True

    def handle_data(self, data):
        self.text.append(data.strip() + " ")
        if self._in_title and not self._title_seen and self.title is None:
            self.title = data


class HTMLParser(Parser):
    """HTML: all text nodes, plus meta tags and title as metadata."""

    def parse(self, reader: Source) -> bytes:
        log = get_logger()
        log.debug(get_message("ParseStarted") + ": %s", "HTML")
        content = read_all(reader).decode("utf-8", errors="replace")
        collector = _HTMLCollector()
        collector.feed(content)
        collector.close()
        self.format_metadata["format"] = "HTML"
        self.format_metadata.update(collector.meta)
        if collector.title is not None:
            self.format_metadata["title"] = collector.title
        log.info(get_message("ParseCompleted") + ": %s", "HTML")
        return "".join(collector.text).encode("utf-8")


class DOCXParser(Parser):
    """DOCX: text runs from the document body, core properties as metadata."""

    def parse(self, reader: Source) -> bytes:
        log = get_logger()
        log.debug("Parse started for DOCX")
        content = read_all(reader)
        try:
            archive = zipfile.ZipFile(io.BytesIO(content))
        except zipfile.BadZipFile as exc:
            log.error("Failed to create zip reader: %v", exc)
            raise ParseError(f"failed to create zip reader: {exc}") from exc

        parts: list[str] = []
        with archive:
            for info in archive.infolist():
                if info.filename == "word/document.xml":
                    parts.append(self._extract_content(archive.read(info)))
                elif info.filename == "docProps/core.xml":
                    try:
                        self._extract_metadata(archive.read(info))
                    except ParseError as exc:
                        log.warning("Failed to extract metadata from docProps/core.xml: %v", exc)
        log.info("DOCX parsing completed")
        return "".join(parts).encode("utf-8")

    @staticmethod
    def _extract_content(data: bytes) -> str:
        out: list[str] = []
        try:
            for _event, elem in ET.iterparse(io.BytesIO(data), events=("end",)):
                name = _local(elem.tag)
                if name == "t":
                    out.append((elem.text or "") + " ")
                elif name == "p":
                    out.append("\n")
        except ET.ParseError as exc:
            get_logger().error("Error decoding XML: %v", exc)
            raise ParseError(f"error decoding document.xml: {exc}") from exc
        return "".join(out)

    def _extract_metadata(self, data: bytes) -> None:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise ParseError(f"failed to unmarshal core.xml: {exc}") from exc
        values: dict[str, str] = {}
        for child in root:
            name = _local(child.tag)
            if name in _CORE_FIELDS:
                values[name] = "".join(child.itertext())
        self.format_metadata["format"] = "DOCX"
        for name in _CORE_FIELDS:
            if values.get(name):
                self.format_metadata[name] = values[name]