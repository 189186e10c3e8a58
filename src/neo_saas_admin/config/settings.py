"""
Runtime settings for neo-saas-admin.

Settings are read from environment variables (prefix ``SAAS_ADMIN_``) and an
optional ``.env`` file, following the platform's pydantic-settings pattern.
"""
from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SaasAdminSettings(BaseSettings):
    """Connection and paging defaults for the admin facades."""

    model_config = SettingsConfigDict(
        env_prefix="SAAS_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Backend
    api_base_url: str = Field(
        default="http://localhost:44300",
        min_length=1,
        description="Base URL of the REST backend."
    )
    http_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout per request (seconds).")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates.")
    default_headers: Dict[str, str] = Field(
        default_factory=lambda: {"Accept": "application/json"},
        description="Headers sent with every request."
    )

    # Multi-tenancy
    tenant_header_name: str = Field(default="__tenant", description="Header carrying the current tenant.")
    tenant_id: Optional[str] = Field(default=None, description="Tenant to act on behalf of, if any.")

    # Paging
    default_page_size: int = Field(default=10, ge=1, le=1000, description="Default max result count.")


@lru_cache()
def get_settings() -> SaasAdminSettings:
    """Get cached settings instance."""
    return SaasAdminSettings()
