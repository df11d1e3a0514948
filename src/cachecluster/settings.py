from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven overrides applied on top of the selected profile."""

    model_config = SettingsConfigDict(
        env_prefix="CACHECLUSTER_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_PROFILE"),
    )
    region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_REGION", "CACHE_PROVIDER_REGION"),
    )
    account_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_ACCOUNT_ID", "CACHE_PROVIDER_ACCOUNT_ID"),
    )
    api_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_API_TOKEN", "CACHE_PROVIDER_API_TOKEN"),
    )
    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_BASE_URL", "CACHE_PROVIDER_BASE_URL"),
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("CACHECLUSTER_REQUEST_TIMEOUT_SECONDS"),
    )
    verify_ssl: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("CACHECLUSTER_VERIFY_SSL"),
    )

    def profile_overrides(self) -> dict[str, object]:
        """Return the explicitly set profile fields, layered over the profile before it is re-validated."""

        overrides: dict[str, object] = {}
        for field in ("region", "account_id", "api_token", "base_url", "request_timeout_seconds", "verify_ssl"):
            value = getattr(self, field)
            if value is not None:
                overrides[field] = value
        return overrides
