"""rolecalc: role inheritance and authorization decisions.

Roles inherit from other roles through declared edges, and hierarchical
``resource:action`` roles are generalized by two built-in rules.
"""

from rolecalc.calculator import INHERITANCE_DEPTH_LIMIT, RoleModifier, RolesCalc
from rolecalc.exceptions import (
    ConfigurationError,
    InheritanceDepthError,
    InvalidRolesError,
    RoleCalcError,
)
from rolecalc.roles import Roles, roles_to_dict, roles_to_iterable, roles_to_list, roles_to_set

__version__ = "0.1.0"

__all__ = [
    "INHERITANCE_DEPTH_LIMIT",
    "ConfigurationError",
    "InheritanceDepthError",
    "InvalidRolesError",
    "RoleCalcError",
    "RoleModifier",
    "Roles",
    "RolesCalc",
    "roles_to_dict",
    "roles_to_iterable",
    "roles_to_list",
    "roles_to_set",
]
