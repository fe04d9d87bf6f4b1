# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("DelegationSettings", "settings")


class DelegationSettings(BaseSettings, frozen=True):
    """Delegation settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DELEGATION_STRICT_CONTRACTS: bool = Field(
        default=False,
        description="Reject delegates that do not implement every contract "
        "method, for slots that do not set `strict` themselves",
    )

    DELEGATION_LOG_LEVEL: str = Field(
        default="INFO",
        description="Level of the `delegation` package logger",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("DELEGATION_LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def log_level(self) -> int:
        """Numeric value of `DELEGATION_LOG_LEVEL`."""
        return logging.getLevelName(self.DELEGATION_LOG_LEVEL)


# Create a singleton instance
settings = DelegationSettings()
# Store the instance in the class variable for singleton pattern
DelegationSettings._instance = settings
