"""Reshape a flat permission-group listing into per-scope name indexes."""

from __future__ import annotations

import logging
from typing import Any

from cf_permission_groups.constants import ACCOUNT_SCOPE, ZONE_SCOPE
from cf_permission_groups.models import PermissionGroupRef, StructuredPermissionGroups

logger = logging.getLogger(__name__)


def map_to_structured_permission_groups(result: Any) -> StructuredPermissionGroups:
    """Group a catalog listing by scope, keyed by permission-group name.

    *result* is anything exposing ``.results`` whose items expose ``.id``,
    ``.name`` and ``.scopes``: the provider SDK result or a
    :class:`~cf_permission_groups.models.PermissionGroupListResult`.

    A record qualifies for ``account`` and ``zone`` independently. Records
    with neither scope (or no scopes at all) are dropped without error.
    Later records overwrite earlier ones sharing a name.
    """
    structured = StructuredPermissionGroups()
    records = result.results or ()
    for record in records:
        scopes = record.scopes or ()
        if ACCOUNT_SCOPE in scopes:
            structured.account[record.name] = PermissionGroupRef(id=record.id)
        if ZONE_SCOPE in scopes:
            structured.zone[record.name] = PermissionGroupRef(id=record.id)

    logger.debug(
        "Mapped %d permission groups: %d account, %d zone",
        len(records),
        len(structured.account),
        len(structured.zone),
    )
    return structured
