"""Domain models for the role inheritance engine.

- InheritanceEdge: a declared "specialized extends base" relationship
- ResourceAction: the decomposition of a compound ``resource:action`` role
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class InheritanceEdge(BaseModel):
    """The specialized role possesses every permission the base role possesses."""

    model_config = ConfigDict(frozen=True)

    base: str = Field(min_length=1)
    specialized: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.specialized} > {self.base}"


class ResourceAction(NamedTuple):
    """Both fields are ``None`` for plain roles."""

    resource: str | None
    action: str | None

    @property
    def is_compound(self) -> bool:
        return self.resource is not None and self.action is not None


#: Decomposition result for plain (non-compound) roles.
PLAIN = ResourceAction(None, None)
