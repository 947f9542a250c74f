"""Exception hierarchy for cf-permission-groups.

Failures raised by the Cloudflare provider call are never wrapped; these
types cover only what this package itself decides.
"""

from __future__ import annotations


class PermissionGroupsError(Exception):
    """Base exception for all cf-permission-groups errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(PermissionGroupsError):
    """Configuration validation or resolution failed."""


class PermissionGroupNotFoundError(PermissionGroupsError, KeyError):
    """A permission group name is not present in the requested scope."""

    def __init__(
        self,
        scope: str,
        name: str,
        *,
        suggestions: tuple[str, ...] = (),
    ) -> None:
        hint = None
        if suggestions:
            hint = "Did you mean: " + ", ".join(repr(s) for s in suggestions) + "?"
        super().__init__(
            f"No {scope} permission group named {name!r}",
            hint=hint,
        )
        self.scope = scope
        self.name = name
        self.suggestions = suggestions

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
