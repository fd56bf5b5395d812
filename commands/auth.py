"""
Key creation command.

Runs the link button handshake once and prints the new API key so the user
can store it. The key is never written to disk by this tool.
"""

import click

from core.auth import create_key
from core.config import API_KEY_ENV, BRIDGE_ENV
from core.discovery import locate_bridge


@click.command(name='create-key')
@click.option('--app-name', '-a', help='Application identifier registered with the bridge')
@click.pass_obj
def create_key_command(config, app_name: str | None):
    """Create an API key using the bridge's link button.

    Press the round link button on the bridge, then run this command within
    30 seconds. Only one attempt is made: if the button was not pressed, press
    it and run the command again.

    \b
    Examples:
      philips-hue-lab create-key
      philips-hue-lab --bridge 192.168.1.20 create-key
    """
    bridge = locate_bridge(config, validate=True)
    label = f"{bridge.name} ({bridge.address})" if bridge.name else bridge.address
    click.echo(f"Requesting API key from {label}...", err=True)

    credential = create_key(bridge, app_name or config.app_name, config.timeout)

    click.secho("✓ Successfully created API key!", fg='green', bold=True, err=True)
    click.echo(err=True)
    click.echo("Store it in your environment:", err=True)
    click.echo(f"  export {BRIDGE_ENV}={credential.bridge_address}", err=True)
    click.echo(f"  export {API_KEY_ENV}={credential.api_key}", err=True)
    click.echo(err=True)
    # The bare key on stdout so scripts can capture it
    click.echo(credential.api_key)
