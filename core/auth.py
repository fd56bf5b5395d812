"""
Authentication module for Hue Bridge.

Handles the link button handshake that exchanges a physical button press
for a new API key. The key is returned to the caller and never stored.
"""

import requests

from core.controller import error_descriptions
from core.errors import BridgeError, LinkButtonNotPressed, NetworkError, NetworkTimeout
from models.types import Bridge, Credential

# Vendor error type for "link button not pressed"
LINK_BUTTON_ERROR = 101


def create_key(bridge: Bridge, app_name: str, timeout: float = 5) -> Credential:
    """Create new API user via link button authentication.

    Requires the user to press the physical link button on the Hue bridge
    shortly before calling. Makes exactly one attempt.

    Args:
        bridge: Bridge to register with
        app_name: Application identifier (devicetype)
        timeout: Request timeout in seconds

    Returns:
        Credential holding the new API key

    Raises:
        LinkButtonNotPressed: If the button was not pressed recently
        BridgeError: For any other error reported by the bridge
    """
    url = f"https://{bridge.address}/api"
    payload = {"devicetype": app_name, "generateclientkey": True}

    try:
        response = requests.post(
            url,
            json=payload,
            verify=False,  # Self-signed certificate
            timeout=timeout
        )
    except requests.exceptions.Timeout:
        raise NetworkTimeout(f"Link request to {bridge.address} timed out after {timeout:g}s")
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Could not reach {bridge.address}: {e}")

    try:
        data = response.json()
    except ValueError:
        raise BridgeError(f"Bridge returned HTTP {response.status_code} with no JSON body",
                          status_code=response.status_code)

    if isinstance(data, list) and data:
        first = data[0]
        if 'success' in first and first['success'].get('username'):
            return Credential(bridge_address=bridge.address, api_key=first['success']['username'])

        if 'error' in first and first['error'].get('type') == LINK_BUTTON_ERROR:
            raise LinkButtonNotPressed()

    errors = error_descriptions(data)
    detail = "; ".join(errors) if errors else f"unexpected response (HTTP {response.status_code})"
    raise BridgeError(f"Key creation failed: {detail}", status_code=response.status_code)
