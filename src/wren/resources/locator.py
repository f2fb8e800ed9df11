"""Locate resources packaged inside an importable package.

Uses ``importlib.resources``, so the same logical path works whether the
package is installed as plain files or imported from a zip archive.
"""

import importlib.resources
import logging
import zipfile
from pathlib import Path

from wren.resources.loader import ResourceURL

logger = logging.getLogger("wren.resources")


def find_resource(path: str, package: str) -> ResourceURL | None:
    """Map *path* inside *package* to a :class:`ResourceURL`, or ``None``.

    Packages on disk give ``file`` URLs, zip-imported packages give ``zip``
    URLs. Any other kind of package reader gives a URL whose origin is
    the reader's traversable type, which the loader refuses loudly.
    """
    try:
        base = importlib.resources.files(package)
    except ModuleNotFoundError:
        logger.debug("Package %r is not importable", package)
        return None

    segments = [segment for segment in path.split("/") if segment]
    resource = base.joinpath(*segments) if segments else base

    if isinstance(resource, Path):
        return ResourceURL.for_file(resource) if resource.exists() else None
    if isinstance(resource, zipfile.Path):
        if not resource.exists():
            return None
        return ResourceURL("zip", resource.at, archive=resource.root.filename)
    if not (resource.is_file() or resource.is_dir()):
        return None
    return ResourceURL(type(resource).__name__, str(resource))
