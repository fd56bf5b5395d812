"""
Control command for lights and power sockets.

Also reads state, which is the only thing allowed on motion sensors.
"""

import click

from core.controller import get_controller
from core.dispatcher import build_command, describe_state, dispatch, read_state, validate_command
from models.directory import fetch_devices, resolve_device


@click.command(name='light')
@click.argument('device')
@click.option('--on', 'turn_on', is_flag=True, help='Turn the device on')
@click.option('--off', 'turn_off', is_flag=True, help='Turn the device off')
@click.option('--dim', type=int, metavar='0-100', help='Set brightness in percent (implies --on)')
@click.pass_obj
def light_command(config, device: str, turn_on: bool, turn_off: bool, dim: int | None):
    """Switch, dim or show a device by name or ID.

    DEVICE is a case-insensitive part of the device name, or its ID as
    shown by 'list'. With no flags the current state is shown.

    \b
    Examples:
      philips-hue-lab light "Bedroom" --on
      philips-hue-lab light kitchen --dim 40
      philips-hue-lab light "Hall sensor"
    """
    command = build_command(turn_on, turn_off, dim)

    controller = get_controller(config)
    target = resolve_device(fetch_devices(controller), device)

    # Reject before touching the bridge again
    validate_command(target, command)

    if command.is_empty:
        current = read_state(controller, target)
        click.echo(f"{current.name} [{current.kind}]: {describe_state(current)}")
        return

    dispatch(controller, target, command)

    if command.brightness is not None:
        click.secho(f"✓ {target.name} set to {command.brightness}%", fg='green')
    else:
        click.secho(f"✓ {target.name} turned {'ON' if command.on else 'OFF'}", fg='green')
