"""
Runtime configuration for distconform.

Values come from ``DISTCONFORM__`` prefixed environment variables or a ``.env``
file in the working directory, with ``__`` separating nested sections:

```sh
export DISTCONFORM__LOGGING__CONSOLE_LOG_LEVEL=INFO
export DISTCONFORM__CONFORMANCE__SAMPLE_COUNT=100000
```

The module level ``settings`` instance is shared by the package; call
``reload_settings`` after changing the environment to pick up new values.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "ConformanceSettings",
    "LoggingSettings",
    "Settings",
    "print_config",
    "reload_settings",
    "settings",
]


class LoggingSettings(BaseModel):
    """
    Sinks and levels for the package logger
    """

    disabled: bool = False
    clear_loggers: bool = True
    console_log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None


class ConformanceSettings(BaseModel):
    """
    Tolerance parameters shared by every conformance check in a run
    """

    sample_count: int = Field(
        default=10_000_000,
        description="Number of samples drawn from each distribution per check",
        gt=0,
    )
    bucket_count: int = Field(
        default=100,
        description="Number of equal-width histogram buckets compared to the CDF",
        gt=0,
    )
    sample_accuracy: float = Field(
        default=0.01,
        description=(
            "Maximum absolute difference allowed between the empirical and "
            "theoretical probability of a bucket"
        ),
        gt=0.0,
        lt=1.0,
    )
    seed: int = Field(
        default=1,
        description="Seed for the random source shared by all distributions",
        ge=0,
    )
    bit_generator: Literal["mt19937", "pcg64"] = Field(
        default="mt19937",
        description="Bit generator backing the seeded random source",
    )


class Settings(BaseSettings):
    """
    Top level settings, populated from the environment and ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="DISTCONFORM__",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
        env_file=".env",
    )

    logging: LoggingSettings = LoggingSettings()
    conformance: ConformanceSettings = ConformanceSettings()

    # console tables
    table_border_char: str = "="
    table_headers_border_char: str = "-"
    table_column_separator_char: str = "|"
    max_reported_violations: int = Field(
        default=10,
        description="Violating buckets listed per failed check in reports",
        ge=0,
    )

    @model_validator(mode="after")
    def default_log_file_level(self) -> Settings:
        if self.logging.log_file and not self.logging.log_file_level:
            self.logging.log_file_level = "INFO"
        return self

    def generate_env_file(self) -> str:
        """
        Render the current values as ``.env`` lines, plain fields of a section
        before its nested sections.

        :return: The ``.env`` file contents
        """
        lines = _env_lines(
            self,
            self.model_config["env_prefix"],  # type: ignore[typeddict-item]
            self.model_config["env_nested_delimiter"],  # type: ignore[typeddict-item]
        )
        return "".join(f"{line}\n" for line in lines)


def _env_lines(model: BaseModel, prefix: str, delimiter: str) -> Iterator[str]:
    sections = []
    for name, value in model:
        tag = f"{prefix}{name.upper()}"
        if isinstance(value, BaseModel):
            sections.append((f"{tag}{delimiter}", value))
        elif value is None:
            yield f"{tag}="
        elif isinstance(value, dict):
            yield f"{tag}={json.dumps(value)}"
        elif isinstance(value, Sequence) and not isinstance(value, str):
            yield f"{tag}={json.dumps([str(item) for item in value])}"
        else:
            yield f'{tag}="{value}"'

    for section_prefix, section in sections:
        yield from _env_lines(section, section_prefix, delimiter)


settings = Settings()


def reload_settings():
    """
    Re-read the environment into the shared ``settings`` instance
    """
    settings.__dict__.update(Settings().__dict__)


def print_config():
    """
    Print the effective settings in ``.env`` format
    """
    print(f"Settings: \n{settings.generate_env_file()}")  # noqa: T201
