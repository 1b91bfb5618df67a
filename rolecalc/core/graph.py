"""User-declared role inheritance graph.

Edges are keyed by base role so the closure walk can look up, in one step,
every role declared to extend the role it is currently visiting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from rolecalc.core.models import InheritanceEdge

logger = logging.getLogger("rolecalc.core.graph")


class InheritanceGraph:
    """In-memory, grow-only inheritance graph. Cycles are not rejected here."""

    def __init__(self) -> None:
        self._specializers: dict[str, set[str]] = {}
        self._edges: list[InheritanceEdge] = []

    def declare_edge(self, base: str, specialized: str) -> bool:
        """Record that *specialized* extends *base*.

        Returns ``True`` if the edge is new, ``False`` if it already existed.
        """
        if specialized in self._specializers.get(base, ()):
            return False
        edge = InheritanceEdge(base=base, specialized=specialized)
        self._specializers.setdefault(base, set()).add(specialized)
        self._edges.append(edge)
        logger.debug("Declared edge %s > %s", specialized, base)
        return True

    def direct_specializers(self, base: str) -> frozenset[str]:
        return frozenset(self._specializers.get(base, ()))

    def edges(self) -> Iterator[InheritanceEdge]:
        """Yield every declared edge in declaration order."""
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)
