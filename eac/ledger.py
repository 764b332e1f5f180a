# eac/ledger.py
from __future__ import annotations

from typing import Dict, List, Mapping

Entry = Dict[str, str]


class Ledger:
    """
    Ordered list of finished entries plus the one being filled in.

    next() files the current entry (unless nothing was written to it) and starts
    a fresh one. Actions that contribute no record of their own simply never
    write, so no empty entry ever reaches the output.
    """

    def __init__(self) -> None:
        self._entries: List[Entry] = []
        self._e: Entry = {}

    def next(self) -> None:
        if self._e:
            self._entries.append(self._e)
        self._e = {}

    def write(self, key: str, value: str) -> None:
        self._e[key] = value

    def update(self, kv: Mapping[str, str]) -> None:
        for k, v in kv.items():
            self.write(k, v)

    def close(self) -> List[Entry]:
        """Commit the pending entry and return everything collected so far."""
        self.next()
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
