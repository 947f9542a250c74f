"""Domain models for permission-group catalog results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import difflib
from typing import Any, Literal

from cf_permission_groups.errors import PermissionGroupNotFoundError

ScopeName = Literal["account", "zone"]


@dataclass(frozen=True)
class PermissionGroupRecord:
    """A single permission group as listed by the Cloudflare catalog."""

    id: str
    name: str
    #: Dotted scope identifiers; membership matters, order does not.
    scopes: tuple[str, ...] = ()


@dataclass(frozen=True)
class PermissionGroupListResult:
    """One catalog listing for an account.

    Matches the attribute shape of the provider SDK's
    ``GetAccountApiTokenPermissionGroupsListResult``, so either can be fed to
    :func:`cf_permission_groups.mappers.map_to_structured_permission_groups`.
    """

    account_id: str
    id: str
    results: tuple[PermissionGroupRecord, ...] = ()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> PermissionGroupListResult:
        """Build a listing from a raw mapping.

        Accepts the camelCase wire shape (``accountId``) as well as
        snake_case keys. Items are not validated; a missing ``scopes`` becomes
        an empty tuple.
        """
        account_id = payload.get("account_id", payload.get("accountId", ""))
        records = tuple(
            PermissionGroupRecord(
                id=item.get("id", ""),
                name=item.get("name", ""),
                scopes=tuple(item.get("scopes") or ()),
            )
            for item in payload.get("results") or ()
        )
        return cls(account_id=account_id, id=payload.get("id", ""), results=records)


@dataclass(frozen=True)
class PermissionGroupRef:
    """Reference to a permission group by id."""

    id: str


@dataclass
class StructuredPermissionGroups:
    """Permission groups indexed by name, split by applicability scope."""

    account: dict[str, PermissionGroupRef] = field(default_factory=dict)
    zone: dict[str, PermissionGroupRef] = field(default_factory=dict)

    def lookup(self, scope: ScopeName, name: str) -> PermissionGroupRef:
        """Return the group named *name* in *scope*.

        Raises:
            PermissionGroupNotFoundError: *name* is not in that scope. The
                error hint lists close matches when there are any.
            ValueError: *scope* is neither ``"account"`` nor ``"zone"``.
        """
        if scope == "account":
            groups = self.account
        elif scope == "zone":
            groups = self.zone
        else:
            raise ValueError(f"Unknown scope: {scope!r} (expected 'account' or 'zone')")

        try:
            return groups[name]
        except KeyError:
            suggestions = tuple(difflib.get_close_matches(name, list(groups), n=3))
            raise PermissionGroupNotFoundError(
                scope, name, suggestions=suggestions
            ) from None

    def to_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        """Return plain nested dicts, e.g. for ``pulumi.export``."""
        return {
            "account": {name: {"id": ref.id} for name, ref in self.account.items()},
            "zone": {name: {"id": ref.id} for name, ref in self.zone.items()},
        }
