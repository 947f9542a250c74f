"""Configuration: frozen Config with account-id auto-resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from cf_permission_groups.constants import ACCOUNT_ID_ENV_VAR
from cf_permission_groups.errors import ConfigurationError

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Immutable lookup configuration.

    The account id is auto-resolved from ``CLOUDFLARE_ACCOUNT_ID`` when not
    passed explicitly.

    Example:
        config = Config()
        # account_id is read from CLOUDFLARE_ACCOUNT_ID
    """

    account_id: str | None = None

    def __post_init__(self) -> None:
        """Auto-resolve the account id and validate it."""
        if self.account_id is None:
            object.__setattr__(
                self, "account_id", os.environ.get(ACCOUNT_ID_ENV_VAR)
            )

        if not self.account_id:
            raise ConfigurationError(
                "Cloudflare account id required",
                hint=f"Set {ACCOUNT_ID_ENV_VAR} environment variable or pass account_id=...",
            )
