"""Configuration for the file store."""

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from filestore.fs import Fs, InMemoryFs, LocalFs


ENV_PREFIX = "FILESTORE_"


class FileStoreConfig(BaseModel):
    """Settings for building a ``FileStore``."""

    base_path: str = Field(
        default="./data", description="Root directory for all store operations."
    )
    log_level: str = Field(default="INFO", description="Logging level name.")
    backend: Literal["local", "memory"] = Field(
        default="local",
        description=(
            "Which filesystem implementation to use. 'memory' lives only as "
            "long as the process, so it is meant for library use and tests."
        ),
    )

    @field_validator("base_path")
    @classmethod
    def _expand_base_path(cls, v: str) -> str:
        if not v:
            raise ValueError("base_path must not be empty")
        return os.path.expanduser(v)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "FileStoreConfig":
        """Load settings from ``<prefix>BASE_PATH``, ``<prefix>LOG_LEVEL`` and
        ``<prefix>BACKEND``, keeping the defaults for unset variables."""
        values: dict[str, str] = {}
        for field in cls.model_fields:
            value = os.getenv(f"{prefix}{field.upper()}")
            if value is not None:
                values[field] = value
        return cls(**values)

    def create_fs(self) -> Fs:
        """Return a new filesystem implementation for ``backend``."""
        if self.backend == "memory":
            return InMemoryFs()
        return LocalFs()
