"""Response-construction configuration.

Frozen dataclasses — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from wren.errors import ConfigurationError
from wren.http.cookies import Decoder, Encoder, form_decode, form_encode


@dataclass(frozen=True, slots=True)
class ResourceOptions:
    """How a relative path is resolved against the filesystem.

    Override what you need::

        options = ResourceOptions(root="./public", allow_symlinks=True)
    """

    # Resolve paths relative to this directory; None trusts the path as given
    root: str | Path | None = None

    # Serve index.* files for directory paths
    index_files: bool = True

    # Follow symlinks out of root (literal ".." segments are still refused)
    allow_symlinks: bool = False

    def __post_init__(self) -> None:
        for name in ("index_files", "allow_symlinks"):
            if not isinstance(getattr(self, name), bool):
                msg = f"ResourceOptions.{name} must be a bool, got {getattr(self, name)!r}"
                raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class CookieOptions:
    """Cookie value codecs. Both default to URL form encoding."""

    decoder: Decoder = form_decode
    encoder: Encoder = form_encode
