"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global settings loaded from environment variables or .env files."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token required for the masking endpoints.",
    )
    strict_formats: bool = Field(
        default=False,
        description="Reject unknown format ids instead of passing values through unchanged.",
    )
    suggestion_limit: int = Field(
        default=3,
        ge=0,
        description="Maximum number of 'did you mean' format ids offered for an unknown id.",
    )
    suggestion_cutoff: float = Field(
        default=60.0,
        ge=0.0,
        le=100.0,
        description="Minimum fuzzy-match score (0-100) for a format id suggestion.",
    )
    server_host: str = Field(default="127.0.0.1", description="Bind address for `keymask serve`.")
    server_port: int = Field(default=8000, description="Port for `keymask serve`.")

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    payload: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        payload[key.strip()] = raw_value.strip().strip("'\"")
    return payload


# Environment variable -> (settings field, converter). A converter raising
# ValueError leaves the field at its default.
_ENV_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "KEYMASK_LOG_LEVEL": ("log_level", str),
    "KEYMASK_LOG_FORMAT": ("log_format", str),
    "KEYMASK_LOG_REQUESTS": ("log_requests", _coerce_bool),
    "KEYMASK_API_TOKEN": ("api_token", str),
    "KEYMASK_STRICT_FORMATS": ("strict_formats", _coerce_bool),
    "KEYMASK_SUGGESTION_LIMIT": ("suggestion_limit", int),
    "KEYMASK_SUGGESTION_CUTOFF": ("suggestion_cutoff", float),
    "KEYMASK_SERVER_HOST": ("server_host", str),
    "KEYMASK_SERVER_PORT": ("server_port", int),
}


def _load_from_env() -> dict[str, object]:
    """Collect overrides from the environment, falling back to .env files."""

    file_values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        file_values.update(_parse_env_file(candidate))

    payload: dict[str, object] = {}
    for key, (field_name, convert) in _ENV_FIELDS.items():
        raw = os.environ.get(key) or file_values.get(key)
        if not raw:
            continue
        try:
            payload[field_name] = convert(raw)
        except ValueError:
            continue
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
