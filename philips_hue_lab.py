#!/usr/bin/env python3
"""
Philips Hue Lab CLI
Experimental CLI tools for Philips Hue ZigBee IoT devices.
"""

import click

from core.config import API_KEY_ENV, BRIDGE_ENV, TIMEOUT_ENV, build_config

from commands.group import LabGroup
from commands.auth import create_key_command
from commands.inspection import list_command, discover_command
from commands.control import light_command


@click.group(
    cls=LabGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999  # Very wide to prevent wrapping on wide terminals
    }
)
@click.version_option(version='0.1.0', prog_name='Philips Hue Lab')
@click.option('--bridge', '-b', envvar=BRIDGE_ENV, metavar='ADDRESS',
              help=f'Bridge IP address (default: ${BRIDGE_ENV}, else discovery)')
@click.option('--key', '-k', envvar=API_KEY_ENV, metavar='API_KEY',
              help=f'Bridge API key (default: ${API_KEY_ENV})')
@click.option('--timeout', envvar=TIMEOUT_ENV, type=click.FloatRange(min=0, min_open=True),
              help='Per-request timeout in seconds (default: 5)')
@click.pass_context
def cli(ctx, bridge: str | None, key: str | None, timeout: float | None):
    """Philips Hue Lab - Discover Hue bridges and control lights, sockets and sensors.

Credentials: --bridge/--key → $HUE_BRIDGE/$HUE_API_KEY → ~/.philips_hue_lab/config.json
Run 'create-key' once (after pressing the bridge's link button) to get an API key.

Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    ctx.obj = build_config(bridge=bridge, api_key=key, timeout=timeout)


cli.add_command(create_key_command)
cli.add_command(list_command)
cli.add_command(light_command)
cli.add_command(discover_command)


if __name__ == '__main__':
    cli()
