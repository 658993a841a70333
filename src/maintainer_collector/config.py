"""Configuration for maintainer-collector.

Settings are read from environment variables prefixed with ``MAINTAINERS_``
(case-insensitive) and an optional ``.env`` file. List settings such as
``MAINTAINERS_PROJECTS`` are given as JSON arrays.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ORG = "docker"
RAW_BASE_URL = "https://raw.githubusercontent.com"
DEFAULT_BRANCH = "master"
DEFAULT_FILENAME = "MAINTAINERS"
DEFAULT_OUTPUT_PATH = "MAINTAINERS"
DEFAULT_OUTPUT_MODE = 0o755

DEFAULT_PROJECTS: tuple[str, ...] = (
    "boot2docker",
    "cli",
    "compose",
    "compose-on-kubernetes",
    "containerd/containerd",
    "distribution",
    "docker-bench-security",
    "docker-credential-helpers",
    "docker-py",
    "dockercraft",
    "go-connections",
    "go-events",
    "go-healthcheck",
    "go-p9p",
    "go-plugins-helpers",
    "go-units",
    "infrakit",
    "kitematic",
    "leadership",
    "leeroy",
    "libchan",
    "libcompose",
    "libkv",
    "libnetwork",
    "linuxkit/linuxkit",
    "machine",
    "migrator",
    "moby/datakit",
    "moby/hyperkit",
    "moby/moby",
    "moby/vpnkit",
    "spdystream",
    "swarm",
    "swarmkit",
    "swarm-frontends",
    "theupdateframework/notary",
    "toolbox",
    "v1.10-migrator",
)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}


class Settings(BaseSettings):
    """Runtime settings for a collection run."""

    model_config = SettingsConfigDict(
        env_prefix="MAINTAINERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    projects: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROJECTS),
        description="Project identifiers ('name' or 'org/name'), processed in order",
    )
    default_org: str = Field(
        default=DEFAULT_ORG,
        description="GitHub organization used when an identifier has no 'org/' prefix",
    )
    raw_base_url: str = Field(
        default=RAW_BASE_URL,
        description="Base URL serving raw repository files",
    )
    branch: str = Field(default=DEFAULT_BRANCH, description="Branch holding the MAINTAINERS file")
    filename: str = Field(default=DEFAULT_FILENAME, description="Per-project declaration file name")
    output_path: str = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Path of the combined MAINTAINERS file to write",
    )
    output_mode: int = Field(
        default=DEFAULT_OUTPUT_MODE, description="Permission bits of the output file"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log renderer: console or json")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v!r}")
        return lower

    @field_validator("projects")
    @classmethod
    def validate_projects(cls, v: list[str]) -> list[str]:
        for identifier in v:
            if not identifier or identifier.startswith("/") or identifier.endswith("/"):
                raise ValueError(f"invalid project identifier: {identifier!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
