"""Named integer values handed from one scene to the next."""

from __future__ import annotations


class Parameter:
    """A mapping of string keys to integer values."""

    def __init__(self) -> None:
        self._values: dict[str, int] = {}

    def set(self, key: str, val: int) -> None:
        self._values[key] = val

    def get(self, key: str) -> int:
        """Return the value for ``key``; raise KeyError if it was never set."""
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"no parameter named {key!r}") from None