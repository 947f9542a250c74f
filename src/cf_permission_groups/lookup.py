"""Accessors: list an account's permission groups and map them by scope.

Both accessors issue exactly one call to the Cloudflare provider data
source and pass ``opts`` through untouched. Provider failures propagate
as-is; nothing here retries or wraps them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pulumi
import pulumi_cloudflare as cloudflare

from cf_permission_groups.config import Config
from cf_permission_groups.mappers import map_to_structured_permission_groups

if TYPE_CHECKING:
    from cf_permission_groups.models import StructuredPermissionGroups

logger = logging.getLogger(__name__)


def _resolve_account_id(account_id: pulumi.Input[str] | None) -> pulumi.Input[str]:
    if account_id is None:
        return Config().account_id  # type: ignore[return-value]
    return account_id


def get_structured_permission_groups(
    account_id: str | None = None,
    opts: pulumi.InvokeOptions | None = None,
) -> StructuredPermissionGroups:
    """Fetch the permission-group catalog and group it by scope.

    Args:
        account_id: Cloudflare account id. Falls back to
            ``CLOUDFLARE_ACCOUNT_ID`` when omitted.
        opts: Invoke options forwarded to the provider unchanged.

    Returns:
        StructuredPermissionGroups with ``account`` and ``zone`` indexes.

    Example:
        groups = get_structured_permission_groups(account_id="abc123")
        dns_write = groups.zone["DNS Write"].id
    """
    resolved = _resolve_account_id(account_id)
    logger.debug("Listing API token permission groups for account %s", resolved)
    result = cloudflare.get_account_api_token_permission_groups_list(
        account_id=resolved, opts=opts
    )
    return map_to_structured_permission_groups(result)


def get_structured_permission_groups_output(
    account_id: pulumi.Input[str] | None = None,
    opts: pulumi.InvokeOptions | None = None,
) -> pulumi.Output[StructuredPermissionGroups]:
    """Output form of :func:`get_structured_permission_groups`.

    *account_id* may itself be a pending ``Output``. The mapping runs once
    the listing resolves; this call never blocks.
    """
    resolved = _resolve_account_id(account_id)
    logger.debug("Registering deferred API token permission group listing")
    return cloudflare.get_account_api_token_permission_groups_list_output(
        account_id=resolved, opts=opts
    ).apply(map_to_structured_permission_groups)
