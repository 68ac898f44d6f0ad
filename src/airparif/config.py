"""Client configuration models and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from functools import lru_cache
import os
from pathlib import Path
import tomllib
from typing import Any, Mapping

DEFAULT_BASE_URL = "https://www.airparif.asso.fr/services/api/1.1"


@dataclass
class AirparifConfig:
    """Settings required to connect to the AirParif web services."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    request_timeout_seconds: float = 30.0


@dataclass
class Settings:
    """Top level settings object."""

    airparif: AirparifConfig = field(default_factory=AirparifConfig)

    def normalise(self) -> None:
        self.airparif.base_url = self.airparif.base_url.rstrip("/")

    @classmethod
    def for_testing(cls, base_url: str, api_key: str = "dummy") -> "Settings":
        """Settings pointing at a local mock server instead of the real service."""

        settings = cls(airparif=AirparifConfig(api_key=api_key, base_url=base_url))
        settings.normalise()
        return settings


def _apply_mapping(target: Any, updates: Mapping[str, Any]) -> None:
    for key, value in updates.items():
        if not hasattr(target, key):
            continue
        current = getattr(target, key)
        if is_dataclass(current) and isinstance(value, Mapping):
            _apply_mapping(current, value)
        else:
            target_field = next((f for f in fields(type(target)) if f.name == key), None)
            if target_field is not None and target_field.type == "float":
                setattr(target, key, float(value))
            else:
                setattr(target, key, value)


def _load_toml_settings(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _load_env_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    data: dict[str, str] = {}
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue
            key, value = stripped.split("=", 1)
            data[key.strip()] = value.strip().strip('"').strip("'")
    return data


def _apply_env_overrides(settings: Settings, env: Mapping[str, str]) -> None:
    mapping: dict[str, str] = {
        "AIRPARIF_API_KEY": "api_key",
        "AIRPARIF_BASE_URL": "base_url",
        "AIRPARIF_REQUEST_TIMEOUT_SECONDS": "request_timeout_seconds",
    }
    for env_key, attribute in mapping.items():
        if env_key not in env:
            continue
        raw_value = env[env_key]
        value: Any = float(raw_value) if attribute == "request_timeout_seconds" else raw_value
        setattr(settings.airparif, attribute, value)


def load_settings(project_root: Path, env: Mapping[str, str] | None = None) -> Settings:
    """Build settings from defaults, ``configs/settings.toml``, ``.env`` and the environment."""

    settings = Settings()

    toml_overrides = _load_toml_settings(project_root / "configs" / "settings.toml")
    if toml_overrides:
        _apply_mapping(settings, toml_overrides)

    env_values = dict(_load_env_file(project_root / ".env"))
    env_values.update(os.environ if env is None else env)
    _apply_env_overrides(settings, env_values)

    settings.normalise()
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return load_settings(Path.cwd())


__all__ = ["AirparifConfig", "DEFAULT_BASE_URL", "Settings", "get_settings", "load_settings"]
