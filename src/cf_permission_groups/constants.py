"""Scope identifiers and environment names used across the package."""

from __future__ import annotations

# Scope strings as issued by the Cloudflare API-token permission catalog.
ACCOUNT_SCOPE = "com.cloudflare.api.account"
ZONE_SCOPE = "com.cloudflare.api.account.zone"

ACCOUNT_ID_ENV_VAR = "CLOUDFLARE_ACCOUNT_ID"
