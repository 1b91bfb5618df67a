"""Public entry point for role inheritance and authorization checks.

Typical usage::

    rc = RolesCalc(always_allow="admin", resource_actions=True, write_extends_read=True)
    rc.role("manager").extends("employee")
    rc.is_authorized("employee", ["manager"])       # True
    rc.is_authorized("reports:read", "reports")     # True
    rc.prune_redundant_roles(["employee", "manager"])  # ["manager"]

A ``RolesCalc`` owns its graph and closure cache. It does no locking; a host
that shares one instance across threads must serialize ``extends`` calls
against every read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from rolecalc.config import Settings
from rolecalc.core.cache import ClosureCache
from rolecalc.core.closure import INHERITANCE_DEPTH_LIMIT, ClosureCalculator
from rolecalc.core.evaluator import AuthorizationEvaluator
from rolecalc.core.graph import InheritanceGraph
from rolecalc.core.models import InheritanceEdge
from rolecalc.core.pruning import RedundancyPruner
from rolecalc.core.resource_action import ResourceActionResolver
from rolecalc.roles import (
    Roles,
    roles_to_dict,
    roles_to_iterable,
    roles_to_list,
    roles_to_set,
)

logger = logging.getLogger("rolecalc")

__all__ = ["INHERITANCE_DEPTH_LIMIT", "RoleModifier", "RolesCalc"]


class RoleModifier:
    """Builder returned by :meth:`RolesCalc.role`."""

    __slots__ = ("_calc", "_specialized")

    def __init__(self, calc: RolesCalc, specialized: Roles) -> None:
        self._calc = calc
        self._specialized = specialized

    def extends(self, *bases: Roles) -> int:
        """Declare that every specialized role extends every base role.

        Returns the number of edges that were new.
        """
        return self._calc.declare(self._specialized, *bases)


class RolesCalc:
    """Role inheritance graph with memoized closures and authorization checks."""

    roles_to_iterable = staticmethod(roles_to_iterable)
    roles_to_list = staticmethod(roles_to_list)
    roles_to_set = staticmethod(roles_to_set)
    roles_to_dict = staticmethod(roles_to_dict)

    def __init__(
        self,
        always_allow: Roles | None = None,
        resource_actions: bool = False,
        write_extends_read: bool = False,
        resource_action_separator: str | None = None,
    ) -> None:
        self._resolver = ResourceActionResolver(
            enabled=bool(resource_actions),
            write_extends_read=bool(write_extends_read),
            separator=resource_action_separator,
        )
        self._graph = InheritanceGraph()
        self._cache = ClosureCache()
        self._closure = ClosureCalculator(
            self._graph,
            self._resolver,
            always_allow=roles_to_set(always_allow or []),
            cache=self._cache,
        )
        self._evaluator = AuthorizationEvaluator(self._closure)
        self._pruner = RedundancyPruner(self._closure)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> RolesCalc:
        """Build a calculator from ``ROLECALC_*`` settings."""
        if settings is None:
            settings = Settings()
        return cls(
            always_allow=settings.always_allow_set,
            resource_actions=settings.resource_actions,
            write_extends_read=settings.write_extends_read,
            resource_action_separator=settings.resource_action_separator,
        )

    @property
    def always_allow(self) -> frozenset[str]:
        return self._closure.always_allow

    @property
    def resource_action_separator(self) -> str:
        return self._resolver.separator

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # ------------------------------------------------------------------
    # Graph mutation
    # ------------------------------------------------------------------

    def role(self, specialized: Roles) -> RoleModifier:
        """Start an edge declaration: ``rc.role("manager").extends("employee")``."""
        return RoleModifier(self, specialized)

    def declare(self, specialized: Roles, *bases: Roles) -> int:
        """Declare that every role in *specialized* extends every role in *bases*."""
        specialized_roles = roles_to_list(specialized)
        base_roles = roles_to_list(*bases) if bases else []
        added = 0
        for specialized_role in specialized_roles:
            for base_role in base_roles:
                if self._graph.declare_edge(base_role, specialized_role):
                    added += 1
        if added:
            self._cache.clear()
        return added

    def edges(self) -> Iterator[InheritanceEdge]:
        return self._graph.edges()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_authorized(self, required: Roles, actual: Roles) -> bool:
        """Return True when the *actual* roles satisfy every *required* role."""
        authorized = self._evaluator.is_authorized(required, actual)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Authorization %s",
                "granted" if authorized else "denied",
                extra={
                    "required": required if isinstance(required, str) else roles_to_list(required)
                },
            )
        return authorized

    def get_parent_roles_set(self, role: str) -> set[str]:
        """Roles other than *role* that satisfy it, as a fresh set."""
        return set(self._closure.closure_for(role))

    def get_role_and_parent_roles_set(self, role: str) -> set[str]:
        result = self.get_parent_roles_set(role)
        result.add(role)
        return result

    def prune_redundant_roles(self, roles: Roles) -> list[str]:
        """Remove roles implied by another role in the same collection.

        rc.role('manager').extends('employee')
        rc.prune_redundant_roles(['manager', 'employee']) -> ['manager']
        rc.prune_redundant_roles(['foo:write', 'foo:read']) -> ['foo:write']
        rc.prune_redundant_roles(['foo', 'foo:write']) -> ['foo']
        """
        return self._pruner.prune(roles)

    def prune_redundant_roles_set(self, roles: Roles) -> set[str]:
        return set(self._pruner.prune(roles))
