"""Undo history: a LIFO stack of session snapshots.

The stack is immutable. push and pop return a new stack and never touch the
one they were called on, so a SessionState holding a stack can be shared
freely. There is no depth limit.
"""

from typing import Iterator, Optional

from uigen.types import HistoryEntry


class HistoryStack:
    """LIFO stack of HistoryEntry snapshots."""

    __slots__ = ("_entries",)

    def __init__(self, entries: tuple[HistoryEntry, ...] = ()):
        self._entries = tuple(entries)

    def push(self, entry: HistoryEntry) -> "HistoryStack":
        return HistoryStack(self._entries + (entry,))

    def pop(self) -> tuple[Optional[HistoryEntry], "HistoryStack"]:
        """Return (top entry, remaining stack). Popping empty returns (None, self)."""
        if not self._entries:
            return None, self
        return self._entries[-1], HistoryStack(self._entries[:-1])

    def peek(self) -> Optional[HistoryEntry]:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        """Oldest first."""
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HistoryStack):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"HistoryStack(depth={len(self._entries)})"
