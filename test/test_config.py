"""Tests for environment-driven server configuration."""

import logging

import pytest

from layout_mcp.config import (
    DEFAULT_HOST_APP,
    DEFAULT_MAX_FRAME_BYTES,
    ServerConfig,
    load_config,
)
from layout_mcp.exceptions import ConfigurationError


class TestLoadConfig:
    def test_defaults(self):
        config = load_config({})

        assert config == ServerConfig()
        assert config.bridge == "auto"
        assert config.host_app == DEFAULT_HOST_APP
        assert config.max_frame_bytes == DEFAULT_MAX_FRAME_BYTES
        assert config.idle_timeout is None
        assert config.logging_level == logging.INFO

    def test_reads_prefixed_variables(self):
        config = load_config(
            {
                "LAYOUT_MCP_LOG_LEVEL": "debug",
                "LAYOUT_MCP_BRIDGE": "DRY-RUN",
                "LAYOUT_MCP_HOST_APP": "Adobe InDesign 2024",
                "LAYOUT_MCP_IDLE_TIMEOUT": "2.5",
                "LAYOUT_MCP_MAX_FRAME_BYTES": "1024",
                "LAYOUT_MCP_BRIDGE_TIMEOUT": "30",
            }
        )

        assert config.log_level == "DEBUG"
        assert config.bridge == "dry-run"
        assert config.host_app == "Adobe InDesign 2024"
        assert config.idle_timeout == 2.5
        assert config.max_frame_bytes == 1024
        assert config.bridge_timeout == 30.0

    def test_blank_values_use_defaults(self):
        config = load_config({"LAYOUT_MCP_BRIDGE": "  ", "LAYOUT_MCP_IDLE_TIMEOUT": ""})

        assert config.bridge == "auto"
        assert config.idle_timeout is None

    @pytest.mark.parametrize(
        "env",
        [
            {"LAYOUT_MCP_LOG_LEVEL": "LOUD"},
            {"LAYOUT_MCP_BRIDGE": "telnet"},
            {"LAYOUT_MCP_IDLE_TIMEOUT": "soon"},
            {"LAYOUT_MCP_IDLE_TIMEOUT": "0"},
            {"LAYOUT_MCP_MAX_FRAME_BYTES": "big"},
            {"LAYOUT_MCP_MAX_FRAME_BYTES": "-1"},
        ],
    )
    def test_invalid_values_are_rejected(self, env):
        with pytest.raises(ConfigurationError):
            load_config(env)


class TestOverrides:
    def test_none_overrides_are_ignored(self):
        config = load_config({"LAYOUT_MCP_BRIDGE": "dry-run"})

        assert config.with_overrides(bridge=None, log_level=None) == config

    def test_overrides_are_validated(self):
        config = ServerConfig()

        assert config.with_overrides(log_level="warning").log_level == "WARNING"
        with pytest.raises(ConfigurationError, match="Invalid bridge"):
            config.with_overrides(bridge="carrier-pigeon")
