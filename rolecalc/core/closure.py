"""Transitive closure of the role inheritance graph.

The closure of a role R is every role that satisfies a requirement of R:
roles declared (directly or transitively) to extend R, roles reached
through the resource/action rules, and the always-allowed roles.

The walk is breadth-first by generation. Each generation visits the roles
added by the previous one and collects, for each visited role ``r``:

1. ``generalize(r)``: ``resource`` for ``resource:action``, and
   ``resource:write`` for ``resource:read`` when write extends read.
2. Every role declared to extend ``r``.
3. When the query is ``child:A`` and ``parent`` extends the plain role
   ``child`` (with ``parent`` itself plain), the compound ``parent:A``.

The loop stops when a generation adds nothing. A chain of
``INHERITANCE_DEPTH_LIMIT`` extensions still resolves; one more raises
:class:`InheritanceDepthError`. Roles already present are never revisited,
so cycles in the declared edges terminate like any other graph.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rolecalc.core.cache import ClosureCache
from rolecalc.core.graph import InheritanceGraph
from rolecalc.core.resource_action import ResourceActionResolver
from rolecalc.exceptions import InheritanceDepthError

logger = logging.getLogger("rolecalc.core.closure")

INHERITANCE_DEPTH_LIMIT = 20


class ClosureCalculator:
    """Computes and memoizes closures over a graph and a resolver."""

    def __init__(
        self,
        graph: InheritanceGraph,
        resolver: ResourceActionResolver,
        always_allow: Iterable[str] = (),
        cache: ClosureCache | None = None,
    ) -> None:
        self.graph = graph
        self.resolver = resolver
        self.always_allow: frozenset[str] = frozenset(always_allow)
        self.cache = cache if cache is not None else ClosureCache()

    def closure_for(self, role: str) -> frozenset[str]:
        """Roles other than *role* that satisfy a requirement of *role*."""
        closure = self.cache.get(role)
        if closure is None:
            closure = self._compute(role)
            self.cache.store(role, closure)
        return closure

    def _compute(self, role: str) -> frozenset[str]:
        query_action = self.resolver.decompose(role).action

        result: set[str] = set(self.always_allow)
        result.add(role)
        frontier: set[str] = set(result)

        generation = 0
        while frontier:
            if generation > INHERITANCE_DEPTH_LIMIT:
                logger.warning(
                    "Inheritance depth limit exceeded",
                    extra={"role": role, "generations": generation},
                )
                raise InheritanceDepthError(role, INHERITANCE_DEPTH_LIMIT)
            generation += 1

            next_frontier: set[str] = set()
            for current in frontier:
                for candidate in self._candidates(current, query_action):
                    if candidate not in result:
                        result.add(candidate)
                        next_frontier.add(candidate)
            frontier = next_frontier

        result.discard(role)
        logger.debug(
            "Closure computed",
            extra={"role": role, "generations": generation, "closure_size": len(result)},
        )
        return frozenset(result)

    def _candidates(self, current: str, query_action: str | None) -> set[str]:
        candidates = self.resolver.generalize(current)
        specializers = self.graph.direct_specializers(current)
        candidates.update(specializers)

        if query_action is not None and not self.resolver.decompose(current).is_compound:
            for specializer in specializers:
                if not self.resolver.decompose(specializer).is_compound:
                    candidates.add(self.resolver.compose(specializer, query_action))
        return candidates
