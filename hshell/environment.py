"""The shell's own copy of the process environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator


def _name_of(entry: str) -> str:
    """Name part of a ``NAME=value`` entry, ignoring leading ``=`` signs."""
    return entry.lstrip("=").partition("=")[0]


class Environment:
    """An ordered list of ``NAME=value`` entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @classmethod
    def from_os(cls) -> Environment:
        """Copy the environment of the running process."""
        return cls(f"{name}={value}" for name, value in os.environ.items())

    def get(self, name: str) -> str | None:
        """Value of *name*, or None when it is not set."""
        for entry in self._entries:
            entry_name, sep, value = entry.partition("=")
            if sep and entry_name == name:
                return value
        return None

    def set(self, name: str, value: str | None) -> None:
        """Set *name* to *value*, in place if present, else appended.

        A missing value is stored as the empty string.
        """
        text = "" if value is None else value
        for position, entry in enumerate(self._entries):
            entry_name = _name_of(entry)
            if entry_name == name:
                self._entries[position] = f"{entry_name}={text}"
                return
        self._entries.append(f"{name}={text}")

    def unset(self, name: str) -> None:
        """Remove *name*; raise KeyError when it is not set."""
        matches = [pos for pos, entry in enumerate(self._entries) if _name_of(entry) == name]
        if not matches:
            raise KeyError(name)
        del self._entries[matches[-1]]

    def entries(self) -> list[str]:
        """All entries, in order, as ``NAME=value`` strings."""
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and any(_name_of(e) == name for e in self._entries)