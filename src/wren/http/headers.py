"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Keeps header pairs in insertion order with their original name case;
lookups compare names case-insensitively.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    ``set`` and ``add`` return new ``Headers``.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, object]] | Mapping[str, object] = ()) -> None:
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        object.__setattr__(self, "_pairs", tuple((name, str(value)) for name, value in pairs))

    @classmethod
    def from_raw(cls, raw: Iterable[tuple[bytes, bytes]]) -> Headers:
        """Build from ASGI-style raw byte pairs."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Headers is immutable")

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._pairs == other._pairs
        return Mapping.__eq__(self, other)

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {value!r}" for name, value in self._pairs)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = key.lower()
        return [value for name, value in self._pairs if name.lower() == key_lower]

    def set(self, key: str, value: object) -> Headers:
        """Return new headers with *key* holding exactly one *value*.

        The first existing occurrence keeps its position and name case;
        any further occurrences are dropped. A new key is appended.
        """
        key_lower = key.lower()
        pairs: list[tuple[str, object]] = []
        replaced = False
        for name, existing in self._pairs:
            if name.lower() != key_lower:
                pairs.append((name, existing))
            elif not replaced:
                pairs.append((name, value))
                replaced = True
        if not replaced:
            pairs.append((key, value))
        return Headers(pairs)

    def add(self, key: str, value: object) -> Headers:
        """Return new headers with another occurrence of *key* appended."""
        return Headers((*self._pairs, (key, value)))

    def remove(self, key: str) -> Headers:
        """Return new headers without any occurrence of *key*."""
        key_lower = key.lower()
        return Headers(pair for pair in self._pairs if pair[0].lower() != key_lower)

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """All ``(name, value)`` pairs in order, names as first written."""
        return self._pairs

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Header pairs as lowercase latin-1 bytes for ASGI."""
        return tuple(
            (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in self._pairs
        )
