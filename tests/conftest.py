"""Pytest configuration and fixtures.

Provides environment isolation and shared catalog fixtures. Environment
fixtures are autouse; catalog fixtures are requested explicitly.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from cf_permission_groups.models import (
    PermissionGroupListResult,
    PermissionGroupRecord,
    PermissionGroupRef,
    StructuredPermissionGroups,
)

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_cloudflare_env(monkeypatch):
    """Clear CLOUDFLARE_* env vars to prevent test pollution."""
    for key in list(os.environ.keys()):
        if key.startswith("CLOUDFLARE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("grpc").setLevel(logging.WARNING)
    logging.getLogger("pulumi").setLevel(logging.WARNING)


# =============================================================================
# Catalog Fixtures
# =============================================================================

ACCOUNT_ID = "test-account-id"


@pytest.fixture
def account_id() -> str:
    return ACCOUNT_ID


@pytest.fixture
def api_result() -> PermissionGroupListResult:
    """A two-record listing: one account-scoped, one zone-scoped."""
    return PermissionGroupListResult(
        account_id=ACCOUNT_ID,
        id="result-id",
        results=(
            PermissionGroupRecord(
                id="perm-1",
                name="Account Analytics Read",
                scopes=("com.cloudflare.api.account",),
            ),
            PermissionGroupRecord(
                id="perm-2",
                name="Zone Read",
                scopes=("com.cloudflare.api.account.zone",),
            ),
        ),
    )


@pytest.fixture
def structured_result() -> StructuredPermissionGroups:
    """The mapped form of ``api_result``."""
    return StructuredPermissionGroups(
        account={"Account Analytics Read": PermissionGroupRef(id="perm-1")},
        zone={"Zone Read": PermissionGroupRef(id="perm-2")},
    )
