"""Configuration settings for xmldoc-convert."""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Global settings for xmldoc-convert.

    Settings can be overridden via environment variables with XMLDOC_ prefix.
    Example: XMLDOC_DEFAULT_EMIT=projects
    """

    # Pipeline
    default_emit: str = Field(
        default="members",
        description="Output protocol when none is given: members, projects or none"
    )
    pivot_attach_roles: bool = Field(
        default=True,
        description="Attach (role, project) facts to pivoted members; false reproduces bare member lists"
    )

    # I/O
    input_encoding: str = Field(
        default="utf-8",
        description="Encoding used when reading an input file"
    )
    output_encoding: str = Field(
        default="utf-8",
        description="Encoding used when writing an output file"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)"
    )
    rich_tracebacks: bool = Field(
        default=False,
        description="Render tracebacks in log records with rich"
    )

    model_config = {
        "env_prefix": "XMLDOC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("default_emit")
    @classmethod
    def known_emit(cls, value: str) -> str:
        value = value.lower()
        if value not in ("members", "projects", "none"):
            raise ValueError(f"Unknown output protocol: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value


# Create singleton instance
settings = Settings()
