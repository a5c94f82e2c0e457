"""Immutable, case-insensitive HTTP headers.

Built from the raw byte pairs of the ASGI scope. Names are lowercased
and values decoded once, at construction.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``headers["Content-Type"]`` returns the first value for the name;
    ``get_list`` returns every value, in the order received.
    """

    __slots__ = ("_pairs", "_raw")

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = raw
        self._pairs: tuple[tuple[str, str], ...] = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1")) for name, value in raw
        )

    def __getitem__(self, key: str) -> str:
        key = key.lower()
        for name, value in self._pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key = key.lower()
        return any(name == key for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._pairs))

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key = key.lower()
        return [value for name, value in self._pairs if name == key]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The undecoded ASGI header pairs."""
        return self._raw
