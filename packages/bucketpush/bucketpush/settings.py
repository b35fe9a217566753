"""Store settings — backend selection and client tuning, layered from file, env and flags."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from bucketpush.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

_DEFAULT_DIR = os.path.expanduser("~/.bucketpush")
_SETTINGS_FILE = "settings.json"
_ENV_PREFIX = "BUCKETPUSH_"

# Field name -> BUCKETPUSH_* suffix.
_ENV_FIELDS = {
    "backend": "BACKEND",
    "region": "REGION",
    "endpoint_url": "ENDPOINT_URL",
    "local_root": "LOCAL_ROOT",
    "presign_ttl_seconds": "PRESIGN_TTL_SECONDS",
    "chunk_size": "CHUNK_SIZE",
}


def _env(name: str, default: str = "") -> str:
    return (os.getenv(_ENV_PREFIX + name, default) or "").strip()


class StoreSettings(BaseModel):
    """Which object store a push talks to, and how."""

    backend: Literal["s3", "local"] = "s3"

    # S3 and S3-compatible stores (MinIO, GCS interoperability endpoint)
    region: str | None = None
    endpoint_url: str | None = None
    presign_ttl_seconds: int = Field(default=900, ge=1)
    connect_timeout: float = Field(default=10.0, gt=0)
    read_timeout: float = Field(default=60.0, gt=0)

    # Local filesystem store
    local_root: str = Field(
        default_factory=lambda: os.path.expanduser("~/.bucketpush/objects")
    )

    chunk_size: int = Field(default=1024 * 1024, ge=1)


def env_overrides() -> dict[str, str]:
    """Settings values present in the environment, keyed by field name.

    Values stay strings; StoreSettings validation coerces them. AWS_REGION
    stands in when BUCKETPUSH_REGION is unset.
    """
    values = {field: _env(suffix) for field, suffix in _ENV_FIELDS.items()}
    if not values["region"]:
        values["region"] = (os.getenv("AWS_REGION") or "").strip()
    if values["backend"]:
        values["backend"] = values["backend"].lower()
    return {k: v for k, v in values.items() if v}


class SettingsManager:
    """Resolves StoreSettings for one run.

    Layers, lowest first: model defaults, ``<config_dir>/settings.json``,
    BUCKETPUSH_* environment variables, then explicit overrides (usually
    command line flags). ``None`` overrides are ignored.
    """

    def __init__(self, config_dir: str | None = None) -> None:
        self._config_dir = Path(config_dir or _DEFAULT_DIR)

    @property
    def settings_path(self) -> Path:
        return self._config_dir / _SETTINGS_FILE

    def file_values(self) -> dict[str, Any]:
        """Raw values from settings.json; empty when missing or unreadable."""
        path = self.settings_path
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text())
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load settings from %s: %s", path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings in %s: expected a JSON object", path)
            return {}
        return data

    def resolve(self, overrides: Mapping[str, Any] | None = None) -> StoreSettings:
        """Merge every layer and validate the result.

        Raises ConfigurationError naming the offending fields when the
        merged values do not form valid StoreSettings.
        """
        layers = (
            ("settings file", self.file_values()),
            ("environment", env_overrides()),
            ("overrides", {k: v for k, v in (overrides or {}).items() if v is not None}),
        )
        merged: dict[str, Any] = {}
        for source, values in layers:
            if values:
                logger.debug("Store settings from %s: %s", source, sorted(values))
            merged.update(values)
        try:
            return StoreSettings.model_validate(merged)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise ConfigurationError(f"Invalid store settings ({fields}): {exc}") from exc
