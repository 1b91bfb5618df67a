"""Removal of roles made redundant by a more general role in the same collection.

    manager > employee:        [employee, manager]        -> [manager]
    write extends read:        [foo:read, foo:write]      -> [foo:write]
    resource > resource:action [foo, foo:write]           -> [foo]
"""

from __future__ import annotations

from rolecalc.core.closure import ClosureCalculator
from rolecalc.roles import Roles, roles_to_list


class RedundancyPruner:
    def __init__(self, closure: ClosureCalculator) -> None:
        self.closure = closure

    def prune(self, roles: Roles) -> list[str]:
        """Deduplicate *roles* and drop each one subsumed by another survivor.

        Survivors keep their input order. If two roles subsume each other the
        one visited first is dropped.
        """
        pruned = dict.fromkeys(roles_to_list(roles))
        for candidate in list(pruned):
            parents = self.closure.closure_for(candidate)
            if any(parent in pruned for parent in parents):
                del pruned[candidate]
        return list(pruned)
