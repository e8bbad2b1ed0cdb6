"""Shared test fixtures and configuration for ccbridge tests.

Every fixture points the pipeline at files under ``tmp_path`` so the real
``~/.claude`` directory is never read or written.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ccbridge.config.settings import BridgeConfig
from ccbridge.core.logging import setup_logging


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Use the application logging pipeline so tests exercise the same processors
    setup_logging(json_logs=False, log_level_name="DEBUG")


@pytest.fixture
def source_token_data() -> dict[str, Any]:
    """Token record in the shape written by the Claude CLI."""
    return {
        "accessToken": "a",
        "refreshToken": "b",
        "expiresAt": 1700000000000,
        "scopes": ["user:inference"],
        "subscriptionType": "max",
    }


@pytest.fixture
def bridge_config(tmp_path: Path) -> BridgeConfig:
    """Pipeline configuration rooted in a temporary directory."""
    claude_dir = tmp_path / "home" / ".claude"
    return BridgeConfig(
        tool_marker_path=claude_dir / "local" / "claude",
        source_credentials_path=claude_dir / ".credentials.json",
        output_path=tmp_path / "workdir" / "credentials.json",
    )


@pytest.fixture
def install_tool(bridge_config: BridgeConfig) -> Path:
    """Create the Claude CLI marker file."""
    marker = bridge_config.tool_marker_path
    marker.parent.mkdir(parents=True, exist_ok=True)
    marker.write_text("#!/bin/sh\n")
    return marker


@pytest.fixture
def write_source(bridge_config: BridgeConfig) -> Callable[[Any], Path]:
    """Return a helper that writes the Claude credentials file.

    Strings are written verbatim; anything else is serialized as JSON.
    """

    def _write(content: Any) -> Path:
        path = bridge_config.source_credentials_path
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text)
        return path

    return _write
