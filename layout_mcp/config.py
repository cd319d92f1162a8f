"""Runtime configuration for the layout-mcp server.

Values come from ``LAYOUT_MCP_*`` environment variables; the entrypoint
may override them with command-line flags.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from layout_mcp.exceptions import ConfigurationError

ENV_PREFIX = "LAYOUT_MCP_"

BRIDGE_CHOICES = ("auto", "applescript", "dry-run")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_HOST_APP = "Adobe InDesign 2025"
DEFAULT_MAX_FRAME_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class ServerConfig:
    log_level: str = "INFO"
    bridge: str = "auto"
    host_app: str = DEFAULT_HOST_APP
    idle_timeout: Optional[float] = None
    max_frame_bytes: int = DEFAULT_MAX_FRAME_BYTES
    bridge_timeout: Optional[float] = None

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def with_overrides(self, **overrides) -> "ServerConfig":
        """Return a validated copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return _validate(replace(self, **changes))


def _optional_seconds(env: Mapping[str, str], name: str) -> Optional[float]:
    raw = env.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{ENV_PREFIX}{name} must be a number of seconds, got {raw!r}",
            details={"variable": ENV_PREFIX + name, "value": raw},
        ) from exc


def _validate(config: ServerConfig) -> ServerConfig:
    log_level = config.log_level.upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level {config.log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}",
            details={"log_level": config.log_level},
        )
    if config.bridge not in BRIDGE_CHOICES:
        raise ConfigurationError(
            f"Invalid bridge {config.bridge!r}. Expected one of: {', '.join(BRIDGE_CHOICES)}",
            details={"bridge": config.bridge},
        )
    if not config.host_app.strip():
        raise ConfigurationError("Host application name must not be empty")
    if config.max_frame_bytes <= 0:
        raise ConfigurationError(
            "Maximum frame size must be positive",
            details={"max_frame_bytes": config.max_frame_bytes},
        )
    for field_name in ("idle_timeout", "bridge_timeout"):
        value = getattr(config, field_name)
        if value is not None and value <= 0:
            raise ConfigurationError(
                f"{field_name} must be positive when set",
                details={field_name: value},
            )
    if log_level != config.log_level:
        config = replace(config, log_level=log_level)
    return config


def load_config(env: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build a ServerConfig from the environment.

    Raises:
        ConfigurationError: if any variable holds an unusable value
    """
    env = os.environ if env is None else env

    raw_max_frame = env.get(ENV_PREFIX + "MAX_FRAME_BYTES", "").strip()
    try:
        max_frame_bytes = int(raw_max_frame) if raw_max_frame else DEFAULT_MAX_FRAME_BYTES
    except ValueError as exc:
        raise ConfigurationError(
            f"{ENV_PREFIX}MAX_FRAME_BYTES must be an integer, got {raw_max_frame!r}",
            details={"variable": ENV_PREFIX + "MAX_FRAME_BYTES", "value": raw_max_frame},
        ) from exc

    config = ServerConfig(
        log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO").strip() or "INFO",
        bridge=(env.get(ENV_PREFIX + "BRIDGE", "auto").strip() or "auto").lower(),
        host_app=env.get(ENV_PREFIX + "HOST_APP", DEFAULT_HOST_APP).strip() or DEFAULT_HOST_APP,
        idle_timeout=_optional_seconds(env, "IDLE_TIMEOUT"),
        max_frame_bytes=max_frame_bytes,
        bridge_timeout=_optional_seconds(env, "BRIDGE_TIMEOUT"),
    )
    return _validate(config)
