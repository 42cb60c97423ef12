"""Metadata about source files and the project that processed them."""

from __future__ import annotations

import hashlib
import json
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, BinaryIO, Protocol

from ontoenrich.log import Logger, get_logger

_S3_PREFIX = "s3://"


class MetadataError(Exception):
    """Raised when metadata cannot be generated or saved."""


class Storage(Protocol):
    """What the generator needs from a storage back end."""

    def is_directory(self, path: str) -> bool: ...

    def stat(self, path: str) -> Any:
        """Return an object with an ``st_mtime`` attribute (seconds since the epoch)."""
        ...

    def get_reader(self, path: str) -> BinaryIO: ...

    def write(self, path: str, data: bytes) -> None: ...


def _is_s3(path: str) -> bool:
    return path.lower().startswith(_S3_PREFIX)


def _base(path: str) -> str:
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep if path else "."
    return os.path.basename(stripped)


def _dir(path: str) -> str:
    directory = os.path.dirname(path)
    return os.path.normpath(directory) if directory else "."


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _unique_id(source_path: str) -> str:
    seed = f"{source_path}{datetime.now().astimezone().isoformat()}{os.urandom(4).hex()}"
    return hashlib.sha256(seed.encode("utf-8")).hexdigest()[:12]


@dataclass
class FileMetadata:
    """Metadata of one source file."""

    id: str
    source_file: str
    directory: str
    file_date: datetime
    sha256_hash: str
    format_metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; empty format metadata is left out."""
        data: dict[str, Any] = {
            "id": self.id,
            "source_file": self.source_file,
            "directory": self.directory,
            "file_date": self.file_date.isoformat(),
            "sha256_hash": self.sha256_hash,
        }
        if self.format_metadata:
            data["format_metadata"] = dict(self.format_metadata)
        return data


@dataclass
class ProjectMetadata:
    """Metadata of a whole processing run."""

    ontology_file: str = ""
    context_file: str = ""
    processing_date: datetime | None = None
    files: dict[str, FileMetadata] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; an empty context file is left out."""
        data: dict[str, Any] = {"ontology_file": self.ontology_file}
        if self.context_file:
            data["context_file"] = self.context_file
        data["processing_date"] = (
            self.processing_date.isoformat() if self.processing_date is not None else None
        )
        data["files"] = {key: meta.to_dict() for key, meta in self.files.items()}
        return data


class Generator:
    """Builds and saves metadata for source files held in a storage."""

    def __init__(self, storage: Storage | None, logger: Logger | None = None) -> None:
        self.storage = storage
        self._logger = logger if logger is not None else get_logger()

    def generate_metadata(
        self, source_paths: list[str], ontology_file: str, context_file: str
    ) -> ProjectMetadata:
        """Collect metadata for every source path; failing paths are logged and skipped."""
        log = self._logger
        log.debug("Generating metadata for %d source files", len(source_paths))
        project = ProjectMetadata(
            ontology_file=ontology_file,
            context_file=context_file,
            processing_date=datetime.now().astimezone(),
        )
        for index, source_path in enumerate(source_paths):
            log.debug("Processing source path %d: %s", index, source_path)
            try:
                file_meta = self.generate_single_file_metadata(source_path)
            except MetadataError as exc:
                log.error("Failed to generate metadata for file %s: %v", source_path, exc)
                continue
            project.files[file_meta.id] = file_meta
            log.debug("Added metadata for file %d: %s (ID: %s)", index, source_path, file_meta.id)
        log.debug(
            "Generated metadata for %d files out of %d source paths",
            len(project.files),
            len(source_paths),
        )
        return project

    def generate_single_file_metadata(self, source_path: str) -> FileMetadata:
        """Build metadata for one file; directories and unreadable paths raise MetadataError."""
        log = self._logger
        log.debug("Generating metadata for source file: %s", source_path)
        if self.storage is None:
            raise MetadataError("storage is nil")

        if _is_s3(source_path):
            try:
                is_directory = self.storage.is_directory(source_path)
            except OSError as exc:
                log.error("Failed to check if S3 path is directory: %v", exc)
                raise MetadataError(f"failed to check if S3 path is directory: {exc}") from exc
            if is_directory:
                log.debug("%s is a S3 directory, skipping", source_path)
                raise MetadataError("cannot generate metadata for S3 directory")
            try:
                info = self.storage.stat(source_path)
            except OSError as exc:
                log.error("Failed to get file info for %s: %v", source_path, exc)
                raise MetadataError(f"failed to get file info: {exc}") from exc
        else:
            try:
                info = os.stat(source_path)
            except OSError as exc:
                log.error("Failed to get file info for %s: %v", source_path, exc)
                raise MetadataError(f"failed to get file info: {exc}") from exc
            if os.path.isdir(source_path):
                log.debug("%s is a directory, skipping", source_path)
                raise MetadataError("cannot generate metadata for directory")

        if info is None:
            raise MetadataError(f"fileInfo is nil for {source_path}")

        try:
            digest = self._calculate_sha256(source_path)
        except (OSError, MetadataError) as exc:
            log.warning("Failed to calculate SHA256 for %s: %v", source_path, exc)
            digest = ""

        metadata = FileMetadata(
            id=_unique_id(source_path),
            source_file=_base(source_path),
            directory=_dir(source_path),
            file_date=datetime.fromtimestamp(info.st_mtime).astimezone(),
            sha256_hash=digest,
        )
        log.debug("Generated metadata for %s: %v", source_path, metadata)
        return metadata

    def save_metadata(self, metadata: ProjectMetadata, output_path: str) -> None:
        """Write ``metadata`` as indented JSON to ``output_path`` in the storage."""
        log = self._logger
        log.debug("Saving project metadata to file: %s", output_path)
        data = json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")
        if self.storage is None:
            raise MetadataError("storage is nil")
        try:
            self.storage.write(output_path, data)
        except OSError as exc:
            log.error("Failed to write project metadata file: %v", exc)
            raise MetadataError(f"failed to write project metadata file: {exc}") from exc
        log.info("Project metadata saved successfully to: %s", output_path)

    def metadata_filename(self, source_path: str) -> str:
        """Return ``<name without extension>_meta.json`` for ``source_path``."""
        base = _base(source_path)
        return base[: len(base) - len(_extension(base))] + "_meta.json"

    def _calculate_sha256(self, file_path: str) -> str:
        assert self.storage is not None
        if _is_s3(file_path):
            try:
                if self.storage.is_directory(file_path):
                    return ""
            except OSError as exc:
                raise MetadataError(f"failed to check if S3 path is directory: {exc}") from exc
        else:
            try:
                os.stat(file_path)
            except OSError as exc:
                raise MetadataError(f"failed to get file info: {exc}") from exc
            if os.path.isdir(file_path):
                return ""

        digest = hashlib.sha256()
        try:
            with self.storage.get_reader(file_path) as reader:
                for chunk in iter(lambda: reader.read(65536), b""):
                    digest.update(chunk)
        except OSError as exc:
            raise MetadataError(f"failed to calculate hash: {exc}") from exc
        return digest.hexdigest()