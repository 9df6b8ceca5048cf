"""Settings schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from baseerror.core.constants import DEFAULT_CHAIN_SEPARATOR, DEFAULT_STACK_DEPTH, MAX_SCAN_DEPTH

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "BASEERROR_STACK_DEPTH",
    "BASEERROR_MAX_SCAN_DEPTH",
    "BASEERROR_CHAIN_SEPARATOR",
    "BASEERROR_BRACKET_EMPTY_CODE",
)


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.lower()
    if v in ("1", "true", "yes"):
        return True
    if v in ("0", "false", "no"):
        return False
    return None


def _parse_int(val: Any) -> int | None:
    if isinstance(val, bool):
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


class Settings:
    """Rendering and capture settings with env overrides."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any] | None, *, validate: bool = True) -> None:
        """Replace settings data and re-read env overrides."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Settings reloaded: {}", self.as_dict())

    def _validate(self) -> None:
        """Raise ConfigurationError on values that cannot be used."""
        from baseerror.error import ConfigurationError

        for key, env_key, code in (
            ("default_stack_depth", "BASEERROR_STACK_DEPTH", "invalid_stack_depth"),
            ("max_scan_depth", "BASEERROR_MAX_SCAN_DEPTH", "invalid_scan_depth"),
        ):
            raw = self._env.get(env_key) or self._data.get(key)
            if raw is None:
                continue
            value = _parse_int(raw)
            if value is None or value <= 0:
                raise ConfigurationError(
                    code,
                    f"{key} must be a positive integer",
                    details={"key": key, "value": raw},
                )

        sep = self._data.get("chain_separator")
        if sep is not None and not isinstance(sep, str):
            raise ConfigurationError(
                "invalid_chain_separator",
                "chain_separator must be a string",
                details={"type": type(sep).__name__},
            )

        bracket = self._data.get("bracket_empty_code")
        if bracket is not None and not isinstance(bracket, bool):
            raise ConfigurationError(
                "invalid_bracket_empty_code",
                "bracket_empty_code must be a boolean",
                details={"type": type(bracket).__name__},
            )
        env_bracket = self._env.get("BASEERROR_BRACKET_EMPTY_CODE", "")
        if env_bracket and _parse_bool_env(env_bracket) is None:
            raise ConfigurationError(
                "invalid_bracket_empty_code",
                "BASEERROR_BRACKET_EMPTY_CODE must be a boolean",
                details={"value": env_bracket},
            )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        obj: Any = self._data
        for part in key.split("."):
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def _positive_int(self, key: str, env_key: str, default: int) -> int:
        for raw in (self._env.get(env_key), self._data.get(key)):
            if raw in (None, ""):
                continue
            value = _parse_int(raw)
            if value is not None and value > 0:
                return value
        return default

    @property
    def default_stack_depth(self) -> int:
        return self._positive_int("default_stack_depth", "BASEERROR_STACK_DEPTH", DEFAULT_STACK_DEPTH)

    @property
    def max_scan_depth(self) -> int:
        return self._positive_int("max_scan_depth", "BASEERROR_MAX_SCAN_DEPTH", MAX_SCAN_DEPTH)

    @property
    def chain_separator(self) -> str:
        env = self._env.get("BASEERROR_CHAIN_SEPARATOR", "")
        if env:
            return env
        val = self._data.get("chain_separator")
        return val if isinstance(val, str) else DEFAULT_CHAIN_SEPARATOR

    @property
    def bracket_empty_code(self) -> bool:
        """Render ``"[] msg"`` for uncoded errors instead of plain ``msg``."""
        parsed = _parse_bool_env(self._env.get("BASEERROR_BRACKET_EMPTY_CODE", ""))
        if parsed is not None:
            return parsed
        return bool(self._data.get("bracket_empty_code", False))

    def as_dict(self) -> dict[str, Any]:
        """Effective settings after env overrides."""
        return {
            "default_stack_depth": self.default_stack_depth,
            "max_scan_depth": self.max_scan_depth,
            "chain_separator": self.chain_separator,
            "bracket_empty_code": self.bracket_empty_code,
        }


cfg = Settings()
