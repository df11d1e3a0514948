from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, model_validator

from cachecluster.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT_SECONDS


class ProfileConfig(BaseModel):
    """Credentials and endpoint settings for one provider account."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    region: str | None = Field(default=None, validation_alias=AliasChoices("region", "default_region"))
    account_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("account_id", "accountId"),
    )
    api_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_token", "apiToken", "token"),
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias=AliasChoices("base_url", "baseUrl", "endpoint"))
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        gt=0,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds"),
    )
    verify_ssl: bool = Field(default=True, validation_alias=AliasChoices("verify_ssl", "verifySsl"))


class ProviderConfig(BaseModel):
    """Root configuration model holding named provider profiles."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = "1"
    default_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_profile", "defaultProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_flat_schema(cls, data: object) -> object:
        # A file holding a single profile's keys at the top level becomes the "default" profile.
        if not isinstance(data, Mapping):
            return data

        data_dict = dict(data)
        if isinstance(data_dict.get("profiles"), Mapping):
            return data_dict

        profile_keys = set(ProfileConfig.model_fields)
        for field in ProfileConfig.model_fields.values():
            if isinstance(field.validation_alias, AliasChoices):
                profile_keys.update(str(choice) for choice in field.validation_alias.choices)
        flat = {key: value for key, value in data_dict.items() if key in profile_keys}
        if not flat:
            return data_dict

        return {
            "version": data_dict.get("version", "1"),
            "default_profile": "default",
            "profiles": {"default": flat},
        }

    def get_profile(self, name: str | None = None) -> tuple[str, ProfileConfig | None]:
        selected = name or self.default_profile or "default"
        return selected, self.profiles.get(selected)


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: ProviderConfig


ConfigInput = ProviderConfig | dict[str, Any]
