"""Configuration models and YAML loader for the party planner."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from xivparty.core.schemas import MAX_PARTY_SIZE


class ApiConfig(BaseModel):
    """XIVAPI connection settings."""

    base_url: str = "https://xivapi.com"
    timeout_s: float = Field(default=15.0, ge=1.0, le=120.0)
    private_key: str | None = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            msg = "base_url must not be empty"
            raise ValueError(msg)
        return v


class PartyDefaults(BaseModel):
    """Values used to pre-fill the interactive prompts."""

    server: str | None = None
    characters: list[str] = Field(default_factory=list)

    @field_validator("characters")
    @classmethod
    def at_most_full_party(cls, v: list[str]) -> list[str]:
        names = [name.strip() for name in v if name.strip()]
        if len(names) > MAX_PARTY_SIZE:
            msg = f"at most {MAX_PARTY_SIZE} characters can be configured, got {len(names)}"
            raise ValueError(msg)
        return names


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    party: PartyDefaults = Field(default_factory=PartyDefaults)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    @classmethod
    def load(cls, path: str | Path | None, default_path: str | Path) -> "Settings":
        """Load an explicit config file, or the default one if it exists.

        An explicit path that does not exist is an error; a missing default
        file just means built-in defaults.
        """
        if path is not None:
            return cls.from_yaml(path)
        if Path(default_path).exists():
            return cls.from_yaml(default_path)
        return cls()
