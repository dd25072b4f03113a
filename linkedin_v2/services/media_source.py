"""Media sources for asset uploads.

A media source is opened as a binary stream whose total length is known
before the upload starts, since the upload request must declare
``Content-Length`` up front.
"""

import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

import requests
from loguru import logger

from linkedin_v2.core.constants import DEFAULT_UPLOAD_TIMEOUT_SECONDS, DOWNLOAD_CHUNK_SIZE
from linkedin_v2.core.exceptions import ResourceError

Source = Union[str, Path, BinaryIO]


@dataclass(frozen=True)
class MediaSource:
    """An open binary stream and its length in bytes."""

    stream: BinaryIO
    length: int
    name: str


@contextmanager
def open_media(source: Source, timeout: float = DEFAULT_UPLOAD_TIMEOUT_SECONDS) -> Iterator[MediaSource]:
    """Open a media source for upload.

    Accepted sources:
        - local path (``str`` or ``Path``) or ``file://`` URL
        - ``http://`` / ``https://`` URL, downloaded to a temporary file first
        - an open binary file object, used from its current position

    Streams opened here are closed when the context exits, whatever the
    outcome. Streams passed in by the caller are left open.

    Args:
        source: Media location or open binary stream
        timeout: Download timeout for remote sources, in seconds

    Yields:
        MediaSource positioned at the first byte to upload

    Raises:
        ResourceError: If the source cannot be opened, downloaded or measured
    """
    if hasattr(source, "read"):
        name = str(getattr(source, "name", "<stream>"))
        yield MediaSource(stream=source, length=_measure(source, name), name=name)
        return

    name = os.fspath(source)
    stream = _open(name, timeout)
    try:
        yield MediaSource(stream=stream, length=_measure(stream, name), name=name)
    finally:
        stream.close()


def _open(source: str, timeout: float) -> BinaryIO:
    parts = urlsplit(source)

    if parts.scheme in ("http", "https"):
        return _download(source, timeout)

    path = url2pathname(parts.path) if parts.scheme == "file" else source
    try:
        return open(path, "rb")
    except OSError as e:
        raise ResourceError(f"Cannot open media file: {e}", source=source) from e


def _download(url: str, timeout: float) -> BinaryIO:
    """Download a remote source into a temporary file and rewind it."""
    logger.debug(f"Downloading media from {url}")
    buffer = tempfile.TemporaryFile()
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                buffer.write(chunk)
        buffer.seek(0)
    except (requests.RequestException, OSError) as e:
        buffer.close()
        raise ResourceError(f"Cannot download media: {e}", source=url) from e

    return buffer


def _measure(stream: BinaryIO, name: str) -> int:
    """Return the number of bytes between the current position and the end."""
    try:
        position = stream.tell()
        end = stream.seek(0, os.SEEK_END)
        stream.seek(position)
    except (OSError, ValueError, AttributeError) as e:
        raise ResourceError(f"Cannot determine media length: {e}", source=name) from e

    length = end - position
    if length <= 0:
        raise ResourceError("Media source is empty", source=name)
    return length
