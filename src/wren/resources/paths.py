"""Safe resolution of request paths to files under a root directory.

A path is safe when its canonical form (symlinks resolved, ``.`` and
``..`` collapsed) stays inside the canonical root. Unsafe paths are
reported as missing, never as an error: a file outside the root and no
file at all look the same to the caller.
"""

import logging
import re
from pathlib import Path

from wren.config import ResourceOptions

logger = logging.getLogger("wren.resources")

_SEPARATORS = re.compile(r"[/\\]")

_DEFAULT_OPTIONS = ResourceOptions()


def _join(root: str | Path, path: str) -> Path:
    # A leading separator must not discard the root
    return Path(root, path.lstrip("/\\"))


def safe_path(root: str | Path, path: str) -> bool:
    """Whether *path* joined onto *root* stays inside *root* once canonical."""
    try:
        canonical_root = Path(root).resolve()
        canonical = _join(root, path).resolve()
    except (OSError, RuntimeError, ValueError):
        # symlink loops, embedded NUL bytes
        return False
    return canonical.is_relative_to(canonical_root)


def directory_traversal(path: str) -> bool:
    """Whether *path* has a literal ``..`` segment."""
    return ".." in _SEPARATORS.split(path)


def find_index_file(directory: Path) -> Path | None:
    """Return the first ``index.*`` file in *directory*, by name, or ``None``.

    An unreadable directory has no index file.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        logger.debug("Cannot list %s for an index file", directory)
        return None
    for entry in entries:
        if entry.name.lower().startswith("index.") and entry.is_file():
            return entry
    return None


def safely_find_file(path: str, options: ResourceOptions = _DEFAULT_OPTIONS) -> Path | None:
    """Join *path* onto ``options.root`` if the result is allowed.

    With ``allow_symlinks`` a path may leave the root through a symlink,
    but a literal ``..`` segment is still refused. Without a root the path
    is trusted as given, but an empty path names nothing.
    """
    root = options.root
    if root is None:
        return Path(path) if path.strip("/\\") else None
    if safe_path(root, path):
        return _join(root, path)
    if options.allow_symlinks and not directory_traversal(path):
        return _join(root, path)
    logger.debug("Refusing %r: resolves outside root %s", path, root)
    return None


def find_file(path: str, options: ResourceOptions = _DEFAULT_OPTIONS) -> Path | None:
    """Resolve *path* to an existing regular file, or ``None``.

    Directories resolve to their index file when ``options.index_files``
    is set, and to ``None`` otherwise. An empty path or ``"/"`` names the
    root itself.
    """
    file = safely_find_file(path, options)
    if file is None:
        return None
    if file.is_dir():
        return find_index_file(file) if options.index_files else None
    if file.is_file():
        return file
    return None
