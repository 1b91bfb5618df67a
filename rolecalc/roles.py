"""Role-collection normalization.

Callers hand roles to the engine in whatever shape their host application
keeps them:

    "admin"                               -- a single role
    ["admin", "auditor"]                  -- an ordered sequence (list/tuple)
    {"admin", "auditor"}                  -- a unique set (set/frozenset)
    {"admin": True, "auditor": False}     -- a flag mapping (truthy flags only)

Everything inside the engine consumes the iterable produced here; no other
module inspects input shapes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Set

from rolecalc.exceptions import InvalidRolesError

#: Any role-collection shape accepted by the public API.
Roles = str | list[str] | tuple[str, ...] | Set[str] | Mapping[str, bool]


def _iter_one(roles: Roles) -> Iterator[str]:
    if isinstance(roles, str):
        if not roles:
            raise InvalidRolesError("roles must be a non-empty string")
        yield roles
    elif isinstance(roles, Mapping):
        yield from _members(role for role, flag in roles.items() if flag)
    elif isinstance(roles, (list, tuple, Set)):
        yield from _members(roles)
    elif roles is None:
        raise InvalidRolesError("roles must not be None")
    else:
        raise InvalidRolesError(f"invalid roles argument: {roles!r}")


def _members(roles: Iterable[object]) -> Iterator[str]:
    for role in roles:
        if not isinstance(role, str) or not role:
            raise InvalidRolesError(f"invalid role in collection: {role!r}")
        yield role


def roles_to_iterable(*args: Roles) -> Iterator[str]:
    """Yield every role in *args*, in order, possibly with repeats.

    Raises :class:`InvalidRolesError` eagerly when no argument is given;
    shape errors surface as the offending argument is reached.
    """
    if not args:
        raise InvalidRolesError("at least one argument must be provided")
    return _chain(args)


def _chain(args: tuple[Roles, ...]) -> Iterator[str]:
    for roles in args:
        yield from _iter_one(roles)


def roles_to_list(*args: Roles) -> list[str]:
    """Deduplicated roles in first-seen order."""
    return list(dict.fromkeys(roles_to_iterable(*args)))


def roles_to_set(*args: Roles) -> set[str]:
    return set(roles_to_iterable(*args))


def roles_to_dict(*args: Roles) -> dict[str, bool]:
    """Flag-mapping view of *args*.

    A single mapping argument is copied unchanged, false flags included.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return dict(args[0])
    return {role: True for role in roles_to_iterable(*args)}
