"""File sources for uploads and the helpers that turn them into multipart parts."""

import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import BinaryIO, Iterator, Union

OCTET_STREAM = "application/octet-stream"
_CHUNK_SIZE = 64 * 1024


class FileReadError(Exception):
    """A file could not be read for upload."""


class FileSaveError(Exception):
    """A file or directory could not be written."""


@dataclass(frozen=True)
class PathSource:
    """File contents read from a path on disk."""

    path: Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class BytesSource:
    """File contents held in memory under a file name."""

    filename: str
    data: bytes


InputSource = Union[PathSource, BytesSource]


@dataclass
class FilePart:
    """One file field of a multipart form."""

    file_name: str
    content: Union[bytes, Iterator[bytes]]
    mime_type: str = OCTET_STREAM


def _chunks(handle: BinaryIO) -> Iterator[bytes]:
    with handle:
        yield from iter(partial(handle.read, _CHUNK_SIZE), b"")


def file_stream_body(source: InputSource) -> Iterator[bytes]:
    """Open a path source and return an iterator over its bytes."""
    if not isinstance(source, PathSource):
        raise FileReadError("Cannot create stream from non-file source")
    try:
        handle = open(source.path, "rb")
    except OSError as exc:
        raise FileReadError(str(exc)) from exc
    return _chunks(handle)


def create_file_part(source: InputSource) -> FilePart:
    """Build the multipart part for a file source."""
    if isinstance(source, PathSource):
        file_name = Path(source.path).name
        if file_name in ("", ".."):
            raise FileReadError(f"cannot extract file name from {source.path}")
        return FilePart(file_name=file_name, content=file_stream_body(source))
    if isinstance(source, BytesSource):
        return FilePart(file_name=source.filename, content=bytes(source.data))
    raise FileReadError(f"unsupported file source {source!r}")


def create_all_dir(path: Union[str, "os.PathLike[str]"]) -> None:
    """Create a directory and its parents unless it already exists."""
    target = Path(path)
    try:
        exists = target.exists()
    except OSError as exc:
        raise FileSaveError(str(exc)) from exc
    if not exists:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSaveError(str(exc)) from exc