"""eid.core.config

Two config surfaces only:
1) Environment variables (`EID_*`)
2) An optional YAML file (`config/default.yaml` by convention)

The active config is process-wide. Swap it with `configure()`, read it with `get_config()`.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ConfigError(Exception):
    """Configuration is missing, invalid, or inconsistent."""


def _check_renders(template: str, **fields: str) -> None:
    # Rendering happens while an exception is being built; it must not fail there.
    try:
        template.format(**fields)
    except (AttributeError, KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"Template {template!r} does not render: {exc!r}") from exc


class EidConfig(BaseSettings):
    """Rendering and fingerprint settings. Single source of truth."""

    # Rendering
    message_format: str = "[{id}|{message}]"
    eid_format: str = "[{id}]<{uniq}>"
    log_message_format: str = "{eid} => {message}"
    default_message: str = "This should not happen"

    # Fingerprint
    uniq_length: int = Field(default=8, ge=4, le=64)
    hash_algorithm: str = "sha256"

    model_config = {"env_prefix": "EID_", "frozen": True}

    @field_validator("message_format")
    @classmethod
    def message_format_must_carry_id(cls, v: str) -> str:
        # The id is the whole point of the message.
        if "{id}" not in v:
            raise ValueError("message_format must contain the {id} placeholder")
        _check_renders(v, id="", ref="", uniq="", message="")
        return v

    @field_validator("eid_format")
    @classmethod
    def eid_format_must_render(cls, v: str) -> str:
        _check_renders(v, id="", ref="", uniq="")
        return v

    @field_validator("log_message_format")
    @classmethod
    def log_message_format_must_render(cls, v: str) -> str:
        _check_renders(v, eid="", message="")
        return v

    @field_validator("default_message")
    @classmethod
    def default_message_cannot_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_message must not be empty")
        return v

    @field_validator("hash_algorithm")
    @classmethod
    def hash_algorithm_must_exist(cls, v: str) -> str:
        if v not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm: {v}")
        try:
            digest_size = hashlib.new(v).digest_size
        except ValueError as exc:
            raise ValueError(f"Unusable hash algorithm: {v}") from exc
        # Variable-length digests (shake_*) have no fixed hexdigest().
        if digest_size == 0:
            raise ValueError(f"Hash algorithm needs a fixed digest size: {v}")
        return v

    @classmethod
    def from_yaml(cls, path: Path) -> EidConfig:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        raw: Any = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must hold a mapping: {path}")

        return cls(**raw)

    @classmethod
    def from_repo_defaults(cls, repo_root: Path | None = None) -> EidConfig:
        root = repo_root or Path.cwd()
        return cls.from_yaml(root / "config" / "default.yaml")


_active: EidConfig | None = None


def get_config() -> EidConfig:
    """Return the active config, building it from the environment on first use."""
    global _active
    if _active is None:
        _active = EidConfig()
    return _active


def configure(config: EidConfig | None = None, **overrides: Any) -> EidConfig:
    """Install a new active config. Returns the previous one.

    ``configure()`` with no arguments re-reads the environment.
    """
    global _active
    previous = get_config()
    base = config if config is not None else EidConfig()
    _active = EidConfig.model_validate({**base.model_dump(), **overrides}) if overrides else base
    return previous
