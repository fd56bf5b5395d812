"""
Command dispatch for resolved devices.

Validates a LightCommand against the device variant it targets, then sends
one state update to the bridge. Validation happens before any request, so
rejected input never reaches the network.
"""

from dataclasses import replace

from core.errors import BridgeError, InvalidParameter
from models.directory import motion_from_resource
from models.types import Device, Light, LightCommand, MotionSensor, PowerSocket

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


def build_command(on: bool, off: bool, dim: int | None) -> LightCommand:
    """Turn the --on/--off/--dim flags into a LightCommand."""
    if on and off:
        raise InvalidParameter("--on and --off cannot be used together.")
    if off and dim is not None:
        raise InvalidParameter("Cannot dim a device while turning it off.")
    check_brightness(dim)
    return LightCommand(on=True if on else False if off else None, brightness=dim)


def check_brightness(brightness: int | None) -> None:
    if brightness is not None and not MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS:
        raise InvalidParameter(
            f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {brightness}."
        )


def validate_command(device: Device, command: LightCommand) -> None:
    """Check that a command is legal for the device.

    Out-of-range brightness is rejected, never clamped.

    Raises:
        InvalidParameter: If the command cannot be sent to this device
    """
    check_brightness(command.brightness)

    if command.on is False and command.brightness is not None:
        raise InvalidParameter("Cannot dim a device while turning it off.")

    if isinstance(device, MotionSensor):
        if not command.is_empty:
            raise InvalidParameter(f"{device.name} is a motion sensor and can only be read.")
        return

    if isinstance(device, PowerSocket) and command.brightness is not None:
        raise InvalidParameter(f"{device.name} is a power socket and cannot be dimmed.")


def build_payload(command: LightCommand) -> dict:
    """Translate a command into a v2 light update body."""
    payload = {}
    if command.brightness is not None:
        # Dimming implies on
        payload['on'] = {'on': True}
        payload['dimming'] = {'brightness': float(command.brightness)}
    elif command.on is not None:
        payload['on'] = {'on': command.on}
    return payload


def dispatch(controller, device: Device, command: LightCommand) -> dict:
    """Validate and apply a command with a single request.

    Returns:
        The payload that was sent
    """
    validate_command(device, command)
    if command.is_empty:
        raise InvalidParameter("Nothing to do: pass --on, --off or --dim.")

    payload = build_payload(command)
    controller.set_light_state(device.service_id, payload)
    return payload


def read_state(controller, device: Device) -> Device:
    """Fetch a fresh snapshot of one device's state."""
    if isinstance(device, MotionSensor):
        motion = controller.get_motion(device.service_id)
        if not motion:
            raise BridgeError(f"Bridge returned no motion data for {device.name}")
        fresh = motion_from_resource({'id': device.id, 'metadata': {'name': device.name}}, motion)
        return replace(fresh, legacy_id=device.legacy_id)

    light = controller.get_light(device.service_id)
    if not light:
        raise BridgeError(f"Bridge returned no light data for {device.name}")

    is_on = light.get('on', {}).get('on', False)
    if isinstance(device, PowerSocket):
        return replace(device, on=is_on)
    return replace(device, on=is_on, brightness=light.get('dimming', {}).get('brightness'))


def describe_state(device: Device) -> str:
    """One-line human readable state."""
    if isinstance(device, MotionSensor):
        if not device.enabled:
            return "disabled"
        status = "motion" if device.motion else "no motion"
        if device.last_triggered:
            return f"{status}, last change {device.last_triggered}"
        return status

    status = "ON" if device.on else "OFF"
    if isinstance(device, Light) and device.on and device.brightness is not None:
        return f"{status} at {device.brightness:.0f}%"
    return status
