"""HueController class for managing Hue Bridge API interactions.

This module contains the controller class that handles all communication
with the Philips Hue Bridge using API v2. It is the only place that talks
to requests: transport failures are translated into HueLabError subclasses
here so the rest of the code never sees a requests exception.
"""

import requests
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from core.config import Config
from core.errors import BridgeError, NetworkError, NetworkTimeout, Unauthorized

# Disable SSL warnings for self-signed certificate
requests.packages.urllib3.disable_warnings(InsecureRequestWarning)


def error_descriptions(body) -> list[str]:
    """Extract vendor error descriptions from a v1 or v2 response body."""
    # v2: {"errors": [{"description": ...}], "data": [...]}
    if isinstance(body, dict):
        return [e.get('description', str(e)) for e in body.get('errors') or []]
    # v1: [{"error": {"type": 1, "description": ...}}]
    if isinstance(body, list):
        return [
            item['error'].get('description', 'Unknown error')
            for item in body
            if isinstance(item, dict) and 'error' in item
        ]
    return []


class HueController:
    """Manages connection and operations with Philips Hue Bridge using API v2."""

    def __init__(self, config: Config, bridge_ip: str | None = None,
                 session: requests.Session | None = None):
        """Initialise HueController.

        Args:
            config: Invocation config (API key and timeout)
            bridge_ip: Bridge address, defaults to config.bridge
            session: Optional pre-built session
        """
        self.bridge_ip = bridge_ip or config.bridge
        self.api_token = config.api_key
        self.timeout = config.timeout
        self.base_url = f"https://{self.bridge_ip}/clip/v2" if self.bridge_ip else None
        self.session = session or requests.Session()
        self.session.verify = False  # Accept self-signed certificate

    def send(self, method: str, url: str, **kwargs) -> requests.Response:
        """Send a single request, translating transport failures."""
        try:
            return self.session.request(method, url, timeout=self.timeout, verify=False, **kwargs)
        except requests.exceptions.Timeout:
            raise NetworkTimeout(f"Request to {url} timed out after {self.timeout:g}s")
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Could not reach {url}: {e}")

    def _request(self, method: str, endpoint: str, data: dict | None = None) -> list[dict]:
        """Make a request to the Hue Bridge API v2 and return its 'data' list."""
        if not self.base_url:
            raise BridgeError("Bridge address not set.")
        if not self.api_token:
            raise Unauthorized("No API key. Run 'create-key' and set HUE_API_KEY or pass --key.")

        url = f"{self.base_url}{endpoint}"
        headers = {"hue-application-key": self.api_token}
        response = self.send(method, url, headers=headers, json=data)

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code in (401, 403):
            raise Unauthorized(f"Bridge at {self.bridge_ip} rejected the API key.")

        errors = error_descriptions(body)
        if not response.ok:
            detail = "; ".join(errors) or response.text.strip() or response.reason
            raise BridgeError(f"Bridge returned HTTP {response.status_code}: {detail}",
                              status_code=response.status_code)
        if errors:
            raise BridgeError("Bridge reported: " + "; ".join(errors),
                              status_code=response.status_code)
        if not isinstance(body, dict):
            raise BridgeError(f"Unexpected response from {url}",
                              status_code=response.status_code)

        return body.get('data', [])

    def get_devices(self) -> list[dict]:
        """Get all devices (v2 API)."""
        return self._request('GET', '/resource/device')

    def get_lights(self) -> list[dict]:
        """Get all light services with their current state (v2 API)."""
        return self._request('GET', '/resource/light')

    def get_motion_sensors(self) -> list[dict]:
        """Get all motion services (v2 API)."""
        return self._request('GET', '/resource/motion')

    def get_light(self, light_id: str) -> dict | None:
        result = self._request('GET', f'/resource/light/{light_id}')
        return result[0] if result else None

    def get_motion(self, motion_id: str) -> dict | None:
        result = self._request('GET', f'/resource/motion/{motion_id}')
        return result[0] if result else None

    def set_light_state(self, light_id: str, state: dict) -> list[dict]:
        """Update a light service (v2 API).

        Args:
            light_id: Light service ID (not the device ID)
            state: v2 payload, e.g. {'on': {'on': True}, 'dimming': {'brightness': 50}}

        Returns:
            The bridge's list of updated resource references
        """
        return self._request('PUT', f'/resource/light/{light_id}', state)


def get_controller(config: Config) -> HueController:
    """Locate the bridge and return a controller for it.

    Raises:
        Unauthorized: If no API key is configured
        NoBridgeFound: If no bridge address is configured or discovered
    """
    from core.discovery import locate_bridge

    if not config.api_key:
        raise Unauthorized("No API key. Run 'create-key' and set HUE_API_KEY or pass --key.")

    bridge = locate_bridge(config)
    return HueController(config, bridge_ip=bridge.address)
