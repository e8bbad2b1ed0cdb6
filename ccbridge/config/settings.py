"""Configuration models for the credential bridge."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


__all__ = ["BridgeConfig", "LoggingSettings"]


def _claude_dir() -> Path:
    return Path.home() / ".claude"


class BridgeConfig(BaseModel):
    """Filesystem locations and the refresh command used by the pipeline.

    Defaults point at the real Claude CLI installation; tests inject their
    own paths.
    """

    model_config = ConfigDict(frozen=True)

    tool_marker_path: Path = Field(
        default_factory=lambda: _claude_dir() / "local" / "claude",
        description="File whose existence means the Claude CLI is installed",
    )

    source_credentials_path: Path = Field(
        default_factory=lambda: _claude_dir() / ".credentials.json",
        description="Credentials file maintained by the Claude CLI",
    )

    output_path: Path = Field(
        default=Path("credentials.json"),
        description="Bridged credentials file, relative to the working directory",
    )

    refresh_command: list[str] = Field(
        default_factory=lambda: ["claude", "-p", "! pwd"],
        min_length=1,
        description="Command run to make the Claude CLI refresh its tokens",
    )

    refresh_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds before the refresh command is killed",
    )


class LoggingSettings(BaseModel):
    """Logging configuration for the CLI."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    format: str = Field(
        default="rich",
        description="Logging output format: 'rich' for the console, 'json' for machines",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper_v = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        lower_v = v.lower()
        valid_formats = ["rich", "json"]
        if lower_v not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return lower_v

    @property
    def json_logs(self) -> bool:
        return self.format == "json"
