"""Device directory.

Joins the bridge's v2 device, light and motion resources into Device
snapshots and resolves a user-supplied name fragment or ID to exactly one
device. Snapshots are per invocation; nothing is cached.
"""

import re

from core.errors import AmbiguousDeviceName, DeviceNotFound
from models.types import Device, Light, MotionSensor, PowerSocket
from models.utils import find_similar_strings

UUID_PATTERN = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$', re.IGNORECASE)
LEGACY_ID_PATTERN = re.compile(r'^\d+$')


def looks_like_id(query: str) -> bool:
    """True if the query is a v2 UUID or a numeric v1 ID."""
    query = query.strip()
    return bool(UUID_PATTERN.match(query) or LEGACY_ID_PATTERN.match(query))


def legacy_id(resource: dict) -> str | None:
    """'/lights/3' -> '3'."""
    id_v1 = resource.get('id_v1')
    if not id_v1:
        return None
    return id_v1.rstrip('/').rsplit('/', 1)[-1] or None


def is_plug(device: dict) -> bool:
    product = device.get('product_data') or {}
    if product.get('product_archetype') == 'plug':
        return True
    if (device.get('metadata') or {}).get('archetype') == 'plug':
        return True
    return 'plug' in (product.get('product_name') or '').lower()


def service_ids(device: dict, rtype: str) -> list[str]:
    return [s['rid'] for s in (device.get('services') or []) if s.get('rtype') == rtype and s.get('rid')]


def light_from_resource(device: dict, light: dict) -> Light | PowerSocket:
    """Build a Light or PowerSocket from a device and its light service."""
    name = (device.get('metadata') or {}).get('name') or 'Unnamed'
    is_on = (light.get('on') or {}).get('on', False)

    if is_plug(device):
        return PowerSocket(
            id=device['id'],
            name=name,
            service_id=light['id'],
            on=is_on,
            legacy_id=legacy_id(device),
        )

    return Light(
        id=device['id'],
        name=name,
        service_id=light['id'],
        on=is_on,
        brightness=(light.get('dimming') or {}).get('brightness'),
        legacy_id=legacy_id(device),
    )


def motion_from_resource(device: dict, motion: dict) -> MotionSensor:
    """Build a MotionSensor from a device and its motion service."""
    state = motion.get('motion') or {}
    report = state.get('motion_report') or {}
    return MotionSensor(
        id=device['id'],
        name=(device.get('metadata') or {}).get('name') or 'Unnamed',
        service_id=motion['id'],
        motion=report.get('motion', state.get('motion', False)),
        last_triggered=report.get('changed'),
        enabled=motion.get('enabled', True),
        legacy_id=legacy_id(device),
    )


def build_devices(devices: list[dict], lights: list[dict], motions: list[dict]) -> list[Device]:
    """Join raw v2 resources into Device snapshots, sorted by name.

    Devices without a light or motion service (the bridge itself, wall
    switches) are left out.
    """
    lights_by_id = {l['id']: l for l in lights}
    motions_by_id = {m['id']: m for m in motions}

    result = []
    for device in devices:
        motion = next((motions_by_id[rid] for rid in service_ids(device, 'motion') if rid in motions_by_id), None)
        if motion:
            result.append(motion_from_resource(device, motion))
            continue

        light = next((lights_by_id[rid] for rid in service_ids(device, 'light') if rid in lights_by_id), None)
        if light:
            result.append(light_from_resource(device, light))

    return sorted(result, key=lambda d: (d.name.lower(), d.id))


def fetch_devices(controller) -> list[Device]:
    """Fetch the full device list from the bridge."""
    return build_devices(
        controller.get_devices(),
        controller.get_lights(),
        controller.get_motion_sensors(),
    )


def resolve_device(devices: list[Device], query: str) -> Device:
    """Resolve a name fragment or ID to a single device.

    IDs (UUID or numeric v1 ID) must match exactly. Anything else is a
    case-insensitive substring match on device names, and more than one
    hit is an error rather than a guess.

    Raises:
        DeviceNotFound: No device matches
        AmbiguousDeviceName: Several devices match
    """
    query = query.strip()
    if not query:
        raise DeviceNotFound(query)

    if looks_like_id(query):
        wanted = query.lower()
        matches = [
            d for d in devices
            if wanted in (d.id.lower(), d.service_id.lower(), (d.legacy_id or '').lower())
        ]
        if not matches:
            raise DeviceNotFound(query)
    else:
        wanted = query.lower()
        matches = [d for d in devices if wanted in d.name.lower()]
        if not matches:
            raise DeviceNotFound(query, find_similar_strings(query, [d.name for d in devices], limit=3))

    if len(matches) > 1:
        raise AmbiguousDeviceName(query, matches)

    return matches[0]
