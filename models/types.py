"""Type definitions for Philips Hue Lab.

This module provides the data types shared across the application: bridges,
credentials and the device variants returned by the device directory.
"""

from dataclasses import dataclass
from typing import TypedDict


class DiscoveredBridge(TypedDict):
    """Bridge information from N-UPnP discovery."""
    id: str
    internalipaddress: str
    port: int | None


@dataclass(frozen=True)
class Bridge:
    """A Hue bridge reachable on the local network."""
    address: str
    identifier: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class Credential:
    """API key issued by a bridge via the link button handshake."""
    bridge_address: str
    api_key: str


@dataclass(frozen=True)
class Light:
    """A dimmable (or at least switchable) light."""
    id: str
    name: str
    service_id: str
    on: bool
    brightness: float | None = None
    legacy_id: str | None = None
    kind = 'light'


@dataclass(frozen=True)
class PowerSocket:
    """A smart plug. Switchable, never dimmable."""
    id: str
    name: str
    service_id: str
    on: bool
    legacy_id: str | None = None
    kind = 'power-socket'


@dataclass(frozen=True)
class MotionSensor:
    """A motion sensor. Read only."""
    id: str
    name: str
    service_id: str
    motion: bool
    last_triggered: str | None = None
    enabled: bool = True
    legacy_id: str | None = None
    kind = 'motion-sensor'


Device = Light | PowerSocket | MotionSensor

DEVICE_KINDS = (Light.kind, PowerSocket.kind, MotionSensor.kind)


@dataclass(frozen=True)
class LightCommand:
    """A requested state change. None means 'leave unchanged'."""
    on: bool | None = None
    brightness: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.on is None and self.brightness is None
