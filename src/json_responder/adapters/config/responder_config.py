"""12-factor responder configuration using environment variables and TOML config."""

from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TOML_SECTION = "responder"


class ResponderConfig(BaseSettings):
    """Process-wide responder settings, fixed once built."""

    model_config = SettingsConfigDict(
        env_prefix="RESPONDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    return_nulls: bool = Field(
        default=True,
        description="Write a 'null' body for None payloads instead of an empty body",
    )
    default_status_code: int = Field(
        default=500,
        description="Status code for errors that do not carry their own",
    )
    default_error_message: str = Field(
        default="",
        description="Message for errors that do not carry their own (empty: status reason phrase)",
    )
    return_raw_error: bool = Field(
        default=False,
        description="Echo the error's own text in the 'rawError' field of error bodies",
    )

    @field_validator("default_status_code")
    @classmethod
    def validate_default_status_code(cls, v: int) -> int:
        """Validate the default status code is a valid HTTP status code."""
        if not 100 <= v <= 599:
            raise ValueError("default_status_code must be between 100 and 599")
        return v

    @classmethod
    def from_toml(cls, config_file: str | Path, **overrides: Any) -> "ResponderConfig":
        """Build a config from the ``[responder]`` table of a TOML file.

        Values from the file take precedence over environment variables, and
        ``overrides`` take precedence over both.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        section = toml_data.get(TOML_SECTION, {})
        known = {key: value for key, value in section.items() if key in cls.model_fields}
        return cls(**{**known, **overrides})
