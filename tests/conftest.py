"""Pytest configuration and fixtures for Philips Hue Lab tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from core.config import Config
from models.types import Light, MotionSensor, PowerSocket


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config():
    """Config with an explicit bridge and key, so nothing is discovered."""
    return Config(bridge='192.168.1.20', api_key='test-key', timeout=2)


@pytest.fixture
def raw_devices():
    """v2 /resource/device entries: a bulb, a plug, a motion sensor, the bridge."""
    return [
        {
            'id': 'dev-light',
            'id_v1': '/lights/1',
            'metadata': {'name': 'Kitchen Light', 'archetype': 'sultan_bulb'},
            'product_data': {'product_name': 'Hue white ambiance bulb', 'product_archetype': 'sultan_bulb'},
            'services': [
                {'rid': 'zigbee-1', 'rtype': 'zigbee_connectivity'},
                {'rid': 'light-1', 'rtype': 'light'},
            ],
        },
        {
            'id': 'dev-plug',
            'id_v1': '/lights/2',
            'metadata': {'name': 'Desk Plug', 'archetype': 'plug'},
            'product_data': {'product_name': 'Hue smart plug', 'product_archetype': 'plug'},
            'services': [{'rid': 'light-2', 'rtype': 'light'}],
        },
        {
            'id': 'dev-motion',
            'id_v1': '/sensors/5',
            'metadata': {'name': 'Kitchen Sensor', 'archetype': 'unknown_archetype'},
            'product_data': {'product_name': 'Hue motion sensor', 'product_archetype': 'unknown_archetype'},
            'services': [
                {'rid': 'motion-1', 'rtype': 'motion'},
                {'rid': 'temp-1', 'rtype': 'temperature'},
            ],
        },
        {
            'id': 'dev-bridge',
            'metadata': {'name': 'Hue Bridge', 'archetype': 'bridge_v2'},
            'product_data': {'product_name': 'Hue Bridge', 'product_archetype': 'bridge_v2'},
            'services': [{'rid': 'bridge-1', 'rtype': 'bridge'}],
        },
    ]


@pytest.fixture
def raw_lights():
    """v2 /resource/light entries."""
    return [
        {
            'id': 'light-1',
            'owner': {'rid': 'dev-light', 'rtype': 'device'},
            'on': {'on': True},
            'dimming': {'brightness': 62.5},
        },
        {
            'id': 'light-2',
            'owner': {'rid': 'dev-plug', 'rtype': 'device'},
            'on': {'on': False},
        },
    ]


@pytest.fixture
def raw_motions():
    """v2 /resource/motion entries."""
    return [
        {
            'id': 'motion-1',
            'owner': {'rid': 'dev-motion', 'rtype': 'device'},
            'enabled': True,
            'motion': {
                'motion': False,
                'motion_valid': True,
                'motion_report': {'changed': '2024-12-17T08:00:00.000Z', 'motion': False},
            },
        },
    ]


@pytest.fixture
def fake_controller(raw_devices, raw_lights, raw_motions):
    """A controller stand-in returning the sample resources."""
    controller = MagicMock()
    controller.bridge_ip = '192.168.1.20'
    controller.get_devices.return_value = raw_devices
    controller.get_lights.return_value = raw_lights
    controller.get_motion_sensors.return_value = raw_motions
    controller.set_light_state.return_value = [{'rid': 'light-1', 'rtype': 'light'}]
    return controller


@pytest.fixture
def kitchen_light():
    return Light(id='1', name='Kitchen Light', service_id='light-1', on=True, brightness=50.0)


@pytest.fixture
def kitchen_sensor():
    return MotionSensor(id='2', name='Kitchen Sensor', service_id='motion-1', motion=False,
                        last_triggered='2024-12-17T08:00:00.000Z')


@pytest.fixture
def desk_plug():
    return PowerSocket(id='3', name='Desk Plug', service_id='light-2', on=False)
