"""Static file serving middleware.

Serves files from a directory, or resources packaged inside a Python
package, for matching URL prefixes. Directory requests serve their
``index.*`` file.

Falls through to the next handler for non-matching or missing paths.
Blocking filesystem work runs in a worker thread via ``anyio.to_thread``.
"""

import logging
import mimetypes
from dataclasses import replace
from pathlib import Path

import anyio.to_thread

from wren.config import ResourceOptions
from wren.http.request import Request
from wren.http.response import Response
from wren.middleware.protocol import Next
from wren.resources.responses import file_response, resource_response

logger = logging.getLogger("wren.middleware")


def _normalize_prefix(prefix: str) -> str:
    # Root prefix "/" normalizes to "" (every path is a candidate)
    stripped = "/" + prefix.strip("/")
    return stripped if stripped != "/" else ""


def _relative_path(prefix: str, path: str) -> str | None:
    """The part of *path* after *prefix*, or ``None`` if it does not match."""
    if not prefix:
        return path.lstrip("/")
    if path != prefix and not path.startswith(prefix + "/"):
        return None
    return path[len(prefix) :].lstrip("/")


def _finish(request: Request, response: Response) -> Response:
    """Add ``Content-Type`` and drop the body for HEAD requests."""
    name = getattr(response.body, "name", "")
    content_type, _ = mimetypes.guess_type(str(name))
    response = response.with_content_type(content_type or "application/octet-stream")
    if request.method == "HEAD":
        response.body.close()
        response = replace(response, body=b"")
    return response


class StaticFiles:
    """Middleware that serves static files from a directory.

    Files are served for paths matching the configured prefix.
    Non-matching paths fall through to the next handler.

    Security: resolves symlinks and verifies the final path is within
    the configured directory. With ``allow_symlinks`` a symlink may point
    outside it, but ``..`` segments are still refused.

    Usage::

        app.add_middleware(StaticFiles(directory="./static", prefix="/static"))
    """

    __slots__ = ("_options", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/static",
        *,
        index_files: bool = True,
        allow_symlinks: bool = False,
    ) -> None:
        self._options = ResourceOptions(
            root=Path(directory),
            index_files=index_files,
            allow_symlinks=allow_symlinks,
        )
        self._prefix = _normalize_prefix(prefix)

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        relative = _relative_path(self._prefix, request.path)
        if relative is None:
            return await next(request)

        response = await anyio.to_thread.run_sync(file_response, relative, self._options)
        if response is None:
            logger.debug("No static file for %s", request.path)
            return await next(request)
        return _finish(request, response)


class PackageResources:
    """Middleware that serves resources packaged inside a Python package.

    Works for packages installed as files and for zip-imported ones.

    Usage::

        app.add_middleware(PackageResources("myapp", prefix="/assets", root="static"))
    """

    __slots__ = ("_package", "_prefix", "_root")

    def __init__(self, package: str, prefix: str = "/", *, root: str = "") -> None:
        self._package = package
        self._root = root
        self._prefix = _normalize_prefix(prefix)

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a packaged resource or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        relative = _relative_path(self._prefix, request.path)
        if not relative:
            return await next(request)

        response = await anyio.to_thread.run_sync(
            resource_response, relative, self._package, self._root
        )
        if response is None:
            logger.debug("No packaged resource for %s", request.path)
            return await next(request)
        return _finish(request, response)
