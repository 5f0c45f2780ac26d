#!/usr/bin/env python3
"""
resolver.py
-----------
File sources and entry resolution.

An export arrives as a flat collection of files keyed by relative path.
Index links are relative to the index document, while the collection keys
usually carry an extra root folder (``Journal/Entries/4. Feb 2026.html``
for the link ``Entries/4. Feb 2026.html``). Entries are therefore resolved
by suffix match: the first path that ends with the link target wins.

When several paths end with the same target, the first one in the
source's iteration order is used. Directory and zip sources iterate in
sorted order, so the choice is stable for a given export; a well-formed
export never has two entries sharing a path suffix.

Sources:
    MappingFileSource: in-memory path -> content mapping
    DirectoryFileSource: an unpacked export folder
    ZipFileSource: a .zip of the export folder

Programmatic API:
    from journal2md.pipeline.resolver import open_source, find_index_document

    source = open_source(Path("~/Downloads/Journal.zip"))
    index_path = find_index_document(source)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Dict, Iterator, List, Mapping, Optional, Union

# --- Local imports ---
from journal2md.core.exceptions import MissingFileError, NoIndexFoundError
from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.configs import DEFAULT_CONFIG, ExtractionConfig


def decode_document(raw: bytes) -> str:
    """Decode document bytes as UTF-8, replacing undecodable sequences."""
    return raw.decode("utf-8", errors="replace")


class FileSource(ABC):
    """
    Read-only collection of export files keyed by relative POSIX path.

    Subclasses provide path iteration and reading; suffix lookup is shared.
    Nothing in the pipeline mutates a source.
    """

    @abstractmethod
    def paths(self) -> Iterator[str]:
        """Iterate over every file path in the source."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """
        Read one file.

        Raises:
            KeyError: If the path is not part of the source
            OSError: If the underlying storage cannot be read
        """

    def read_text(self, path: str) -> str:
        return decode_document(self.read_bytes(path))

    def __len__(self) -> int:
        return sum(1 for _ in self.paths())

    def find_by_suffix(self, suffix: str) -> Optional[str]:
        """
        Return the first path ending with ``suffix``, or None.

        Args:
            suffix: Link target as written in the index
        """
        if not suffix:
            return None
        return next((p for p in self.paths() if p.endswith(suffix)), None)


class MappingFileSource(FileSource):
    """
    Source backed by an in-memory mapping.

    Values may be text or bytes. Iteration follows the mapping's own order.
    """

    def __init__(self, files: Mapping[str, Union[str, bytes]]) -> None:
        self._files: Dict[str, Union[str, bytes]] = dict(files)

    def paths(self) -> Iterator[str]:
        return iter(self._files)

    def read_bytes(self, path: str) -> bytes:
        content = self._files[path]
        if isinstance(content, str):
            return content.encode("utf-8")
        return content

    def read_text(self, path: str) -> str:
        content = self._files[path]
        if isinstance(content, str):
            return content
        return decode_document(content)

    def __len__(self) -> int:
        return len(self._files)


class DirectoryFileSource(FileSource):
    """
    Source backed by an export folder on disk.

    Keys are paths relative to ``root``, with forward slashes, sorted.
    Files are only read when asked for.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise NoIndexFoundError(f"Export folder not found: {self.root}")
        self._paths: List[str] = sorted(
            p.relative_to(self.root).as_posix()
            for p in self.root.rglob("*")
            if p.is_file()
        )

    def paths(self) -> Iterator[str]:
        return iter(self._paths)

    def read_bytes(self, path: str) -> bytes:
        if path not in self._paths:
            raise KeyError(path)
        return (self.root / path).read_bytes()

    def __len__(self) -> int:
        return len(self._paths)


class ZipFileSource(FileSource):
    """
    Source backed by a .zip of the export folder.

    Directory members are skipped; member names are used as keys, sorted.
    """

    def __init__(self, archive_path: Path) -> None:
        self.archive_path = Path(archive_path)
        try:
            with zipfile.ZipFile(self.archive_path) as archive:
                self._paths: List[str] = sorted(
                    info.filename for info in archive.infolist() if not info.is_dir()
                )
        except (OSError, zipfile.BadZipFile) as e:
            raise NoIndexFoundError(
                f"Cannot open export archive {self.archive_path}: {e}"
            ) from e

    def paths(self) -> Iterator[str]:
        return iter(self._paths)

    def read_bytes(self, path: str) -> bytes:
        with zipfile.ZipFile(self.archive_path) as archive:
            return archive.read(path)

    def __len__(self) -> int:
        return len(self._paths)


def open_source(path: Path) -> FileSource:
    """
    Open an export folder or .zip archive as a FileSource.

    Raises:
        NoIndexFoundError: If the path is neither a folder nor a zip archive
    """
    path = Path(path).expanduser()
    if path.is_dir():
        return DirectoryFileSource(path)
    if path.is_file() and zipfile.is_zipfile(path):
        return ZipFileSource(path)
    raise NoIndexFoundError(f"Not an export folder or .zip archive: {path}")


def find_index_document(
    source: FileSource, config: ExtractionConfig = DEFAULT_CONFIG
) -> str:
    """
    Locate the index document near the root of the export.

    The index is the first path, in sorted order, whose basename is the
    configured index filename and which is at most ``index_max_depth``
    segments deep (``index.html`` or ``Journal/index.html``).

    Args:
        source: Export file source
        config: Extraction settings

    Returns:
        Path of the index document within the source

    Raises:
        NoIndexFoundError: If the source is empty or holds no index near its root
    """
    if len(source) == 0:
        raise NoIndexFoundError("The selected export contains no files")

    candidates = sorted(
        p for p in source.paths()
        if PurePosixPath(p).name == config.index_filename
        and len(PurePosixPath(p).parts) <= config.index_max_depth
    )
    if not candidates:
        raise NoIndexFoundError(
            f"Could not find {config.index_filename} in the selected export. "
            "Make sure you selected the root of the export."
        )
    return candidates[0]


def resolve_entry(source: FileSource, entry: IndexEntry) -> str:
    """
    Find the document backing an index entry.

    Args:
        source: Export file source
        entry: Entry whose ``href`` is matched as a path suffix

    Returns:
        Path of the entry document within the source

    Raises:
        MissingFileError: If no path ends with the entry's href
    """
    path = source.find_by_suffix(entry.href)
    if path is None:
        raise MissingFileError(f"File not found for entry: {entry.href}", entry)
    return path
