"""Memo of computed closures, keyed by queried role."""

from __future__ import annotations

import logging

logger = logging.getLogger("rolecalc.core.cache")


class ClosureCache:
    """Per-role closure memo.

    An entry is valid only while the inheritance graph is unchanged since it
    was computed. A new edge can change closures of unrelated roles through
    transitivity, so the owner clears the whole cache on every new edge.
    """

    def __init__(self) -> None:
        self._entries: dict[str, frozenset[str]] = {}

    def get(self, role: str) -> frozenset[str] | None:
        return self._entries.get(role)

    def store(self, role: str, closure: frozenset[str]) -> None:
        self._entries[role] = closure

    def clear(self) -> None:
        if self._entries:
            logger.debug(
                "Closure cache cleared", extra={"cache_size": len(self._entries)}
            )
        self._entries.clear()

    def __contains__(self, role: object) -> bool:
        return role in self._entries

    def __len__(self) -> int:
        return len(self._entries)
