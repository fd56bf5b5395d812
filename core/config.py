"""Configuration for Philips Hue Lab.

This module handles:
- The Config object built once at startup and passed to every component
- Environment variable names used as defaults for the global options
- Reading the optional user config file (never written by this tool)
"""

import json
from dataclasses import dataclass
from pathlib import Path

import click

# Environment variables used as fallbacks for the global CLI options
BRIDGE_ENV = 'HUE_BRIDGE'
API_KEY_ENV = 'HUE_API_KEY'
TIMEOUT_ENV = 'HUE_TIMEOUT'

# Optional read-only credentials file
USER_CONFIG_FILE = Path.home() / '.philips_hue_lab' / 'config.json'

DEFAULT_TIMEOUT = 5.0
DEFAULT_APP_NAME = 'philips_hue_lab#cli'


@dataclass(frozen=True)
class Config:
    """Settings for one invocation."""
    bridge: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    app_name: str = DEFAULT_APP_NAME


def load_user_config(path: Path | None = None) -> dict:
    """Load bridge IP and API token from the user config file.

    Returns:
        Dict with any of 'bridge_ip' and 'api_token', empty if the file is
        missing or unreadable
    """
    path = path or USER_CONFIG_FILE
    if not path.exists():
        return {}

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (ValueError, OSError) as e:
        click.echo(f"Warning: Failed to load config from {path}: {e}", err=True)
        return {}

    if not isinstance(data, dict):
        click.echo(f"Warning: Ignoring {path}, expected a JSON object", err=True)
        return {}

    return {
        key: value for key, value in data.items()
        if key in ('bridge_ip', 'api_token') and isinstance(value, str) and value
    }


def build_config(bridge: str | None = None, api_key: str | None = None,
                 timeout: float | None = None,
                 user_config_file: Path | None = None) -> Config:
    """Build the Config for this invocation.

    Values passed in come from the CLI (options or their environment
    variables) and take priority; anything still missing is filled from the
    user config file.
    """
    if not bridge or not api_key:
        stored = load_user_config(user_config_file)
        bridge = bridge or stored.get('bridge_ip')
        api_key = api_key or stored.get('api_token')

    return Config(
        bridge=bridge or None,
        api_key=api_key or None,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )
