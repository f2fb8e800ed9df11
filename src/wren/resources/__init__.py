"""Static resources — safe path resolution, loading, and responses.

Public API:
    find_file -- Resolve a relative path under a root, refusing traversal
    file_response -- Serve a file from the filesystem
    resource_response -- Serve a resource packaged inside a Python package
    url_response -- Serve a resource by ResourceURL
    register_origin -- Add a loader for a new resource origin
"""

from wren.resources.loader import (
    ResourceData,
    ResourceURL,
    register_origin,
    resource_data,
)
from wren.resources.locator import find_resource
from wren.resources.paths import find_file
from wren.resources.responses import (
    data_response,
    file_response,
    resource_response,
    url_response,
)

__all__ = [
    "ResourceData",
    "ResourceURL",
    "data_response",
    "file_response",
    "find_file",
    "find_resource",
    "register_origin",
    "resource_data",
    "resource_response",
    "url_response",
]
