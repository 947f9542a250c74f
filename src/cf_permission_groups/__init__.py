"""cf-permission-groups: Cloudflare API-token permission groups by name.

Public API:
    - get_structured_permission_groups(): Plain lookup, returns the result
    - get_structured_permission_groups_output(): Pulumi ``Output`` variant
    - map_to_structured_permission_groups(): The underlying reshape
    - Config: Account-id resolution
"""

from __future__ import annotations

import logging

from cf_permission_groups.config import Config
from cf_permission_groups.constants import ACCOUNT_SCOPE, ZONE_SCOPE
from cf_permission_groups.errors import (
    ConfigurationError,
    PermissionGroupNotFoundError,
    PermissionGroupsError,
)
from cf_permission_groups.lookup import (
    get_structured_permission_groups,
    get_structured_permission_groups_output,
)
from cf_permission_groups.mappers import map_to_structured_permission_groups
from cf_permission_groups.models import (
    PermissionGroupListResult,
    PermissionGroupRecord,
    PermissionGroupRef,
    StructuredPermissionGroups,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("cf-permission-groups")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("cf_permission_groups").addHandler(logging.NullHandler())

__all__ = [
    "ACCOUNT_SCOPE",
    "ZONE_SCOPE",
    "Config",
    "ConfigurationError",
    "PermissionGroupListResult",
    "PermissionGroupNotFoundError",
    "PermissionGroupRecord",
    "PermissionGroupRef",
    "PermissionGroupsError",
    "StructuredPermissionGroups",
    "get_structured_permission_groups",
    "get_structured_permission_groups_output",
    "map_to_structured_permission_groups",
]
