"""Responses that serve files and packaged resources.

Each function returns a 200 :class:`~wren.http.response.Response` whose
body is an open binary handle, or ``None`` when there is nothing safe to
serve. ``None`` is the caller's cue for a fallback such as a 404.

``Content-Length`` and ``Last-Modified`` are set only when the origin
reports them; callers must not assume either is present.
"""

import logging
import os
import re
from datetime import datetime

from wren.config import ResourceOptions
from wren.http.dates import format_http_date
from wren.http.response import Response
from wren.resources.loader import ResourceData, ResourceURL, file_data, resource_data
from wren.resources.locator import find_resource
from wren.resources.paths import directory_traversal, find_file

logger = logging.getLogger("wren.resources")

_REPEATED_SLASHES = re.compile(r"/{2,}")

_DEFAULT_OPTIONS = ResourceOptions()


def _content_length(response: Response, length: int | None) -> Response:
    if length is None:
        return response
    return response.with_header("Content-Length", length)


def _last_modified(response: Response, last_modified: datetime | None) -> Response:
    if last_modified is None:
        return response
    return response.with_header("Last-Modified", format_http_date(last_modified))


def data_response(data: ResourceData) -> Response:
    """Build a 200 response from opened resource data."""
    response = Response(body=data.content)
    response = _content_length(response, data.content_length)
    return _last_modified(response, data.last_modified)


def file_response(
    path: str | os.PathLike[str],
    options: ResourceOptions = _DEFAULT_OPTIONS,
) -> Response | None:
    """Serve the file at *path*, resolved safely against ``options.root``.

    Usage::

        file_response("css/site.css", ResourceOptions(root="./public"))
    """
    file = find_file(os.fspath(path), options)
    if file is None:
        return None
    data = file_data(file)
    if data is None:
        return None
    return data_response(data)


def url_response(url: ResourceURL) -> Response | None:
    """Serve the resource at *url*, whatever its origin.

    Raises:
        UnsupportedOrigin: *url* has an origin with no registered loader.
    """
    data = resource_data(url)
    if data is None:
        return None
    return data_response(data)


def resource_response(path: str, package: str, root: str = "") -> Response | None:
    """Serve a resource packaged in *package*, at *path* under *root*.

    Usage::

        resource_response("app.js", "myapp", root="static")
    """
    full_path = _REPEATED_SLASHES.sub("/", f"{root}/{path}").lstrip("/")
    if directory_traversal(full_path):
        logger.debug("Refusing packaged resource %r: contains '..'", full_path)
        return None
    url = find_resource(full_path, package)
    if url is None:
        return None
    return url_response(url)
