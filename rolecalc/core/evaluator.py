"""Authorization decisions over computed closures."""

from __future__ import annotations

from rolecalc.core.closure import ClosureCalculator
from rolecalc.roles import Roles, roles_to_iterable, roles_to_list


class AuthorizationEvaluator:
    """Decides whether held roles satisfy required roles.

    A single required role is satisfied when any held role equals it or is
    in its closure (OR across held roles). A collection of required roles is
    satisfied only when every member is (AND across required roles); an
    empty collection is vacuously satisfied.
    """

    def __init__(self, closure: ClosureCalculator) -> None:
        self.closure = closure

    def is_authorized(self, required: Roles, actual: Roles) -> bool:
        if isinstance(required, str):
            return self._satisfies(required, actual)
        return all(self._satisfies(role, actual) for role in roles_to_list(required))

    def _satisfies(self, required: str, actual: Roles) -> bool:
        parents = self.closure.closure_for(required)
        for role in roles_to_iterable(actual):
            if role == required or role in parents:
                return True
        return False
