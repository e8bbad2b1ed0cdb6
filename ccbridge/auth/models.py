"""Data models for the source and bridged credential files."""

from datetime import UTC, datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SkipValidation,
    field_validator,
    model_validator,
)


def _mask(value: Any) -> str:
    if not isinstance(value, str):
        return repr(value)
    return f"{value[:8]}...{value[-8:]}" if len(value) > 16 else "***"


class SourceOAuthToken(BaseModel):
    """OAuth token record as written by the Claude CLI.

    Field values are taken as-is from the JSON file and are not validated.
    Fields missing from the file stay unset, so they are also left out of
    the bridged record produced by :meth:`to_bridged`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: SkipValidation[str | None] = Field(None, alias="accessToken")
    refresh_token: SkipValidation[str | None] = Field(None, alias="refreshToken")
    expires_at: SkipValidation[int | None] = Field(None, alias="expiresAt")
    scopes: SkipValidation[list[str] | None] = Field(None)
    subscription_type: SkipValidation[str | None] = Field(
        None, alias="subscriptionType"
    )

    def __repr__(self) -> str:
        """Safe string representation that masks sensitive tokens."""
        return (
            f"SourceOAuthToken(access_token='{_mask(self.access_token)}', "
            f"refresh_token='{_mask(self.refresh_token)}', "
            f"expires_at={self.expires_at}, "
            f"scopes={self.scopes}, "
            f"subscription_type='{self.subscription_type}')"
        )

    @property
    def is_max(self) -> bool:
        return self.subscription_type == "max"

    @property
    def is_expired(self) -> bool:
        """Check if the token is expired.

        Tokens without a usable ``expiresAt`` value are treated as not expired.
        """
        if not isinstance(self.expires_at, int) or isinstance(self.expires_at, bool):
            return False
        now = datetime.now(UTC).timestamp() * 1000  # milliseconds
        return now >= self.expires_at

    @property
    def expires_at_datetime(self) -> datetime | None:
        """Get expiration as datetime object."""
        if not isinstance(self.expires_at, int) or isinstance(self.expires_at, bool):
            return None
        return datetime.fromtimestamp(self.expires_at / 1000, tz=UTC)

    def to_bridged(self) -> "BridgedOAuthToken":
        """Map this record onto the bridged schema.

        ``subscriptionType`` is replaced by ``isMax``; every other field that
        is present is copied verbatim.
        """
        data = self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude={"subscription_type"},
            warnings=False,
        )
        data["isMax"] = self.is_max
        return BridgedOAuthToken.model_validate(data)


class ClaudeCredentialsFile(BaseModel):
    """Claude credentials file (``~/.claude/.credentials.json``).

    Only JSON well-formedness is required of the file. A top level or a
    ``claudeAiOauth`` value that is not an object is read as if the section
    were absent.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    claude_ai_oauth: SourceOAuthToken | None = Field(None, alias="claudeAiOauth")

    @model_validator(mode="before")
    @classmethod
    def coerce_non_object(cls, data: Any) -> Any:
        return data if isinstance(data, dict | BaseModel) else {}

    @field_validator("claude_ai_oauth", mode="before")
    @classmethod
    def drop_non_object_token(cls, v: Any) -> Any:
        if isinstance(v, dict | SourceOAuthToken):
            return v
        return None

    def __repr__(self) -> str:
        return f"ClaudeCredentialsFile(claude_ai_oauth={repr(self.claude_ai_oauth)})"


class BridgedOAuthToken(BaseModel):
    """Normalized OAuth token record written for the GitHub workflow."""

    model_config = ConfigDict(frozen=True)

    access_token: SkipValidation[str | None] = Field(None, alias="accessToken")
    refresh_token: SkipValidation[str | None] = Field(None, alias="refreshToken")
    expires_at: SkipValidation[int | None] = Field(None, alias="expiresAt")
    scopes: SkipValidation[list[str] | None] = Field(None)
    is_max: bool = Field(..., alias="isMax")

    def __repr__(self) -> str:
        """Safe string representation that masks sensitive tokens."""
        return (
            f"BridgedOAuthToken(access_token='{_mask(self.access_token)}', "
            f"refresh_token='{_mask(self.refresh_token)}', "
            f"expires_at={self.expires_at}, "
            f"scopes={self.scopes}, "
            f"is_max={self.is_max})"
        )


class BridgedCredentialsFile(BaseModel):
    """Envelope persisted to the output file."""

    model_config = ConfigDict(frozen=True)

    claude_ai_oauth: BridgedOAuthToken = Field(..., alias="claudeAiOauth")

    def __repr__(self) -> str:
        return f"BridgedCredentialsFile(claude_ai_oauth={repr(self.claude_ai_oauth)})"
