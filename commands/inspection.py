"""
Inspection commands for viewing bridges and devices.

Commands for listing the devices attached to a bridge and the bridges
visible on the network.
"""

import click

from core.controller import get_controller
from core.discovery import discover_bridges, probe_bridge
from core.dispatcher import describe_state
from core.errors import NoBridgeFound
from models.directory import fetch_devices
from models.types import DEVICE_KINDS, Light, MotionSensor, PowerSocket
from models.utils import display_width, format_timestamp

KIND_EMOJIS = {
    Light.kind: '💡',
    PowerSocket.kind: '🔌',
    MotionSensor.kind: '👋',
}


def display_device_table(devices) -> None:
    """Print devices as an aligned table."""
    rows = []
    for device in devices:
        state = describe_state(device)
        if isinstance(device, MotionSensor):
            state = state.split(',')[0]
            if device.last_triggered:
                state += f" ({format_timestamp(device.last_triggered)})"
        rows.append({
            'name': f"{KIND_EMOJIS[device.kind]} {device.name}",
            'type': device.kind,
            'state': state,
            'id': device.id,
        })

    col_name = max(max((display_width(r['name']) for r in rows), default=0), len("Name"))
    col_type = max(max((len(r['type']) for r in rows), default=0), len("Type"))
    col_state = max(max((len(r['state']) for r in rows), default=0), len("State"))

    header = (
        f"{'Name'.ljust(col_name)} │ "
        f"{'Type'.ljust(col_type)} │ "
        f"{'State'.ljust(col_state)} │ "
        f"ID"
    )
    click.secho(header, fg='cyan', bold=True)
    click.secho("─" * col_name + "─┼─" + "─" * col_type + "─┼─" + "─" * col_state + "─┼─" + "─" * 36, fg='cyan')

    for r in rows:
        padding = " " * (col_name - display_width(r['name']))
        click.echo(
            f"{r['name']}{padding} │ "
            f"{r['type'].ljust(col_type)} │ "
            f"{r['state'].ljust(col_state)} │ "
            f"{r['id']}"
        )


@click.command(name='list')
@click.option('--type', '-t', 'kind', type=click.Choice(DEVICE_KINDS), help='Only show one type of device')
@click.pass_obj
def list_command(config, kind: str | None):
    """List lights, power sockets and motion sensors on the bridge.

    \b
    Examples:
      philips-hue-lab list
      philips-hue-lab list -t motion-sensor
    """
    controller = get_controller(config)
    devices = fetch_devices(controller)

    if kind:
        devices = [d for d in devices if d.kind == kind]

    if not devices:
        click.echo("No devices found.")
        return

    click.echo()
    click.secho(f"=== Devices on {controller.bridge_ip} ===", fg='cyan', bold=True)
    click.echo()
    display_device_table(devices)
    click.echo()
    click.echo(f"{len(devices)} device{'s' if len(devices) != 1 else ''}")


@click.command(name='discover')
@click.pass_obj
def discover_command(config):
    """Find Hue bridges on the local network.

    With --bridge, checks that a bridge answers at that address instead.

    \b
    Examples:
      philips-hue-lab discover
      philips-hue-lab --bridge 192.168.1.20 discover
    """
    if config.bridge:
        bridge = probe_bridge(config.bridge, config.timeout)
        click.secho(f"✓ {bridge.name or 'Hue bridge'} at {bridge.address} (id {bridge.identifier})", fg='green')
        return

    bridges = discover_bridges(config.timeout)
    if not bridges:
        raise NoBridgeFound("No Hue bridge found on the network.")

    click.secho(f"Found {len(bridges)} Hue bridge{'s' if len(bridges) > 1 else ''}:", fg='cyan', bold=True)
    for bridge in bridges:
        click.echo(f"  {bridge.address}  {bridge.identifier or ''}".rstrip())
