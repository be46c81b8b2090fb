from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from dotenv import load_dotenv


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    timeout_seconds: float = 60.0
    max_connections: int = 10
    verify_ssl: bool = True
    image_base_url: str | None = None
    settings_path: str | None = None
    country_code: str = "998"

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()

    @property
    def storage_base_url(self) -> str:
        return (self.image_base_url or f"{self.api_base_url}/public/storage").rstrip("/")


def _require(values: dict[str, str | None], required: Iterable[str]) -> None:
    missing = [key for key in required if not values.get(key)]
    if missing:
        raise ConfigError(f"Missing required config values: {', '.join(missing)}")


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _read_optional(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("METRA_ENV") or "dev").strip()
    env_key = env_name.upper()

    # Only environment values, no hardcoded server address
    api_base_url = (
        (os.getenv(f"METRA_API_BASE_URL_{env_key}") or "").strip()
        or (os.getenv("METRA_API_BASE_URL") or "").strip()
    )

    timeout_seconds = _read_float("METRA_TIMEOUT_SECONDS", "60")
    _validate(
        timeout_seconds > 0,
        f"Invalid METRA_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    max_connections = _read_int("METRA_MAX_CONNECTIONS", "10")
    _validate(
        max_connections >= 1,
        f"Invalid METRA_MAX_CONNECTIONS: expected >= 1, got {max_connections}",
    )

    country_code = (os.getenv("METRA_COUNTRY_CODE") or "998").strip()
    _validate(
        country_code.isdigit(),
        f"Invalid METRA_COUNTRY_CODE: expected digits, got {country_code!r}",
    )

    verify_ssl = _coerce_bool(os.getenv("METRA_VERIFY_SSL"), True)

    values = {"METRA_API_BASE_URL": api_base_url}
    _require(values, ["METRA_API_BASE_URL"])

    image_base_url = _read_optional("METRA_IMAGE_BASE_URL")

    return ClientConfig(
        env_name=env_name,
        api_base_url=api_base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        max_connections=max_connections,
        verify_ssl=verify_ssl,
        image_base_url=image_base_url.rstrip("/") if image_base_url else None,
        settings_path=_read_optional("METRA_SETTINGS_PATH"),
        country_code=country_code,
    )
