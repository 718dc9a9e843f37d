"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``tzstamp.toml`` only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = {"frozen": True}

    default_timezone: str = "Z"
    use_milliseconds: bool = False

    @field_validator("default_timezone")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_timezone must not be blank")
        return value

