"""Layered configuration for the sandbox layer.

Settings are read with python-configuration. Priority (highest to lowest):
explicit overrides > OPTRES__ env vars > YAML file > defaults dict.

Usage:
    # Environment: OPTRES__SANDBOX__LOG_LEVEL=INFO
    settings = get_settings()

    # Scoped override, e.g. in tests or a single request handler
    with use_settings(log_tracebacks=True):
        safe(risky)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from optres.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator


_DEFAULTS: dict[str, object] = {
    "sandbox": {
        "log_level": "DEBUG",
        "log_tracebacks": False,
    },
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class SandboxSettings:
    """Logging behaviour of ``run()``/``safe()``.

    Attributes:
        log_level: Level used for records about converted failures.
        log_tracebacks: Attach exc_info to records about uncontrolled failures.
    """

    log_level: int = logging.DEBUG
    log_tracebacks: bool = False


def create_config(
    yaml_path: str = "optres.yaml",
    env_prefix: str = "OPTRES",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Args:
        yaml_path: Path to an optional YAML config file. Missing files are ignored.
        env_prefix: Prefix for environment variables (``OPTRES__SANDBOX__LOG_LEVEL``).
        defaults: Default configuration values.
        overrides: Values that take priority over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _parse_level(raw: object) -> int:
    if isinstance(raw, bool):
        raise ConfigurationError(f"sandbox.log_level must be a level name or number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise ConfigurationError(f"sandbox.log_level: unknown logging level {raw!r}")
    return level


def _parse_bool(key: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")


def load_sandbox_settings(cfg: ConfigurationSet | None = None) -> SandboxSettings:
    """Build SandboxSettings from a configuration set.

    Raises:
        ConfigurationError: If a value cannot be parsed.
    """
    if cfg is None:
        cfg = create_config()
    return SandboxSettings(
        log_level=_parse_level(cfg["sandbox.log_level"]),
        log_tracebacks=_parse_bool("sandbox.log_tracebacks", cfg["sandbox.log_tracebacks"]),
    )


_default_settings: SandboxSettings | None = None
_scoped_settings: ContextVar[SandboxSettings | None] = ContextVar("optres_settings", default=None)


def configure(settings: SandboxSettings | None) -> None:
    """Set the process-wide settings. ``None`` forces a reload on next use."""
    global _default_settings
    _default_settings = settings


def get_settings() -> SandboxSettings:
    """Return the active settings.

    The innermost ``use_settings`` scope wins; otherwise the process-wide
    settings are used, loading them from ``create_config()`` on first access.
    """
    global _default_settings
    scoped = _scoped_settings.get()
    if scoped is not None:
        return scoped
    if _default_settings is None:
        _default_settings = load_sandbox_settings()
    return _default_settings


@contextmanager
def use_settings(**overrides: int | bool | str) -> Generator[SandboxSettings]:
    """Override settings for the current scope. Outer settings are unchanged.

    Args:
        **overrides: SandboxSettings fields to replace. Values are parsed like
            configuration values, so ``log_level="INFO"`` is accepted.

    Raises:
        ConfigurationError: If an override cannot be parsed.
    """
    parsed: dict[str, object] = dict(overrides)
    if "log_level" in parsed:
        parsed["log_level"] = _parse_level(parsed["log_level"])
    if "log_tracebacks" in parsed:
        parsed["log_tracebacks"] = _parse_bool("log_tracebacks", parsed["log_tracebacks"])
    settings = replace(get_settings(), **parsed)  # type: ignore[arg-type]
    token = _scoped_settings.set(settings)
    try:
        yield settings
    finally:
        _scoped_settings.reset(token)
