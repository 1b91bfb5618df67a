"""Resource/action decomposition of compound role names.

Two generalization rules point outward from a specific role toward the
more general roles that satisfy it:

    foo:bar   <- foo          a bare resource grants every action on it
    foo:read  <- foo:write    write grants read (opt-in)
"""

from __future__ import annotations

import re

from rolecalc.core.models import PLAIN, ResourceAction
from rolecalc.exceptions import ConfigurationError

DEFAULT_SEPARATOR = ":"


class ResourceActionResolver:
    """Splits roles on a single-character separator and applies the built-in rules."""

    def __init__(
        self,
        *,
        enabled: bool = False,
        write_extends_read: bool = False,
        separator: str | None = None,
    ) -> None:
        if separator is None:
            separator = DEFAULT_SEPARATOR
        if not isinstance(separator, str) or len(separator) != 1:
            raise ConfigurationError("resourceActionSeparator must be a single character")
        self.enabled = enabled
        self.write_extends_read = write_extends_read
        self.separator = separator
        sep = re.escape(separator)
        self._pattern = re.compile(f"^([^{sep}]+){sep}([^{sep}]+)$")

    def decompose(self, role: str) -> ResourceAction:
        if not self.enabled:
            return PLAIN
        match = self._pattern.match(role)
        if match is None:
            return PLAIN
        return ResourceAction(match.group(1), match.group(2))

    def compose(self, resource: str, action: str) -> str:
        return f"{resource}{self.separator}{action}"

    def generalize(self, role: str) -> set[str]:
        """Roles immediately implied by *role*'s compound structure.

        generalize('site:read')  -> {'site', 'site:write'}  (write extends read)
        generalize('site:write') -> {'site'}
        generalize('site')       -> set()
        """
        resource, action = self.decompose(role)
        if resource is None or action is None:
            return set()
        result = {resource}
        if self.write_extends_read and action == "read":
            result.add(self.compose(resource, "write"))
        return result
