"""Resource loading, dispatched on where a resource lives.

A :class:`ResourceURL` names a resource by *origin* — ``"file"`` for a
path on disk, ``"zip"`` for a member of a zip archive (a zip-imported
package, wheel, or zipapp). :func:`resource_data` looks up the loader
registered for the origin and returns a :class:`ResourceData` with an
open content handle plus whatever length and modification time the
origin can report.

Origins are open to extension::

    @register_origin("s3")
    def s3_resource(url: ResourceURL) -> ResourceData | None:
        ...

An origin with no registered loader raises :class:`UnsupportedOrigin`
rather than looking like a missing resource.

Handle ownership: a returned ``ResourceData`` hands its ``content`` to
the caller, who closes it after sending. Paths that return ``None`` or
raise leave nothing open.
"""

from __future__ import annotations

import logging
import os
import stat
import zipfile
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import BinaryIO, TypeAlias

from wren.errors import UnsupportedOrigin

logger = logging.getLogger("wren.resources")

# DOS date/time zero point; zip tools write it when no mtime is known
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class ResourceURL:
    """Where a resource lives.

    ``path`` is a filesystem path for the ``file`` origin and the member
    name for the ``zip`` origin, whose archive path is in ``archive``.
    """

    origin: str
    path: str
    archive: str | None = None

    @classmethod
    def for_file(cls, path: str | os.PathLike[str]) -> ResourceURL:
        return cls("file", os.fspath(path))


@dataclass(frozen=True, slots=True)
class ResourceData:
    """An opened resource: content handle and optional metadata."""

    content: BinaryIO
    content_length: int | None = None
    last_modified: datetime | None = None


Loader: TypeAlias = Callable[[ResourceURL], ResourceData | None]

_loaders: dict[str, Loader] = {}


def register_origin(origin: str) -> Callable[[Loader], Loader]:
    """Decorator: register *fn* as the loader for *origin*."""

    def decorator(fn: Loader) -> Loader:
        _loaders[origin] = fn
        return fn

    return decorator


def resource_data(url: ResourceURL) -> ResourceData | None:
    """Open the resource at *url*, or return ``None`` if it does not exist.

    Raises:
        UnsupportedOrigin: no loader is registered for ``url.origin``.
    """
    loader = _loaders.get(url.origin)
    if loader is None:
        raise UnsupportedOrigin(url.origin)
    return loader(url)


def file_data(path: Path) -> ResourceData | None:
    """Open a regular file with its size and modification time."""
    try:
        handle = open(path, "rb")  # noqa: SIM115 — ownership passes to the caller
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return None
    try:
        info = os.fstat(handle.fileno())
    except BaseException:
        handle.close()
        raise
    if not stat.S_ISREG(info.st_mode):
        handle.close()
        return None
    return ResourceData(
        content=handle,
        content_length=info.st_size,
        last_modified=datetime.fromtimestamp(info.st_mtime, tz=UTC),
    )


@register_origin("file")
def _file_resource(url: ResourceURL) -> ResourceData | None:
    path = Path(url.path)
    if path.is_dir():
        return None
    return file_data(path)


def _zip_last_modified(info: zipfile.ZipInfo) -> datetime | None:
    if info.date_time <= _ZIP_EPOCH:
        return None
    # zip timestamps are local time
    return datetime(*info.date_time).astimezone(UTC)


@register_origin("zip")
def _zip_resource(url: ResourceURL) -> ResourceData | None:
    if url.archive is None:
        return None
    try:
        archive = zipfile.ZipFile(url.archive)
    except FileNotFoundError:
        return None
    # An open member keeps the archive's file alive after close()
    try:
        entry = url.path.rstrip("/")
        names = set(archive.namelist())
        if url.path.endswith("/") or f"{entry}/" in names or entry not in names:
            logger.debug("No zip member %r in %s", url.path, url.archive)
            return None
        info = archive.getinfo(entry)
        return ResourceData(
            content=archive.open(info),
            content_length=info.file_size,
            last_modified=_zip_last_modified(info),
        )
    finally:
        archive.close()
