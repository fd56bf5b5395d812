"""
Bridge discovery for Philips Hue Lab.

Finds bridges via the Philips N-UPnP discovery service or validates an
explicitly configured address. Each lookup is a single bounded request.
"""

import click
import requests

from core.config import Config
from core.errors import NoBridgeFound
from models.types import Bridge, DiscoveredBridge

DISCOVERY_URL = 'https://discovery.meethue.com/'


def bridge_from_entry(entry: DiscoveredBridge) -> Bridge:
    """Turn one discovery service entry into a Bridge.

    The port is only kept in the address when it is not the default 443.
    """
    address = entry['internalipaddress']
    port = entry.get('port')
    if port and port != 443:
        address = f"{address}:{port}"
    return Bridge(address=address, identifier=entry.get('id'))


def discover_bridges(timeout: float = 5) -> list[Bridge]:
    """Discover Hue bridges on the network using N-UPnP.

    Uses the Philips discovery service at https://discovery.meethue.com/
    to find bridges on the same network.

    Returns:
        List of Bridge, sorted by address. Empty list if discovery fails
        or no bridges found
    """
    try:
        response = requests.get(DISCOVERY_URL, timeout=timeout)
        response.raise_for_status()
        entries = response.json()
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            click.secho("⚠ Philips discovery service rate limit reached", fg='yellow', err=True)
            click.echo("Pass the bridge address with --bridge instead.", err=True)
        else:
            click.echo(f"Bridge discovery failed: {e}", err=True)
        return []
    except requests.exceptions.RequestException as e:
        click.echo(f"Bridge discovery failed: {e}", err=True)
        return []
    except ValueError as e:
        click.echo(f"Failed to parse discovery response: {e}", err=True)
        return []

    if not isinstance(entries, list):
        return []

    bridges = [
        bridge_from_entry(entry) for entry in entries
        if isinstance(entry, dict) and entry.get('internalipaddress')
    ]

    # Sort by IP address for consistency
    return sorted(bridges, key=lambda b: b.address)


def probe_bridge(address: str, timeout: float = 5) -> Bridge:
    """Check that a bridge answers at the given address.

    Reads the public part of the bridge config, which needs no API key.

    Raises:
        NoBridgeFound: If nothing answering like a Hue bridge is there
    """
    url = f"https://{address}/api/0/config"
    try:
        response = requests.get(url, timeout=timeout, verify=False)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        raise NoBridgeFound(f"No bridge reachable at {address}: {e}")
    except ValueError:
        raise NoBridgeFound(f"{address} did not answer like a Hue bridge")

    if not isinstance(data, dict) or 'bridgeid' not in data:
        raise NoBridgeFound(f"{address} did not answer like a Hue bridge")

    return Bridge(address=address, identifier=data.get('bridgeid'), name=data.get('name'))


def locate_bridge(config: Config, validate: bool = False) -> Bridge:
    """Return the bridge to talk to.

    Uses the configured address when there is one (probed if validate is
    set), otherwise the first bridge found by discovery.

    Raises:
        NoBridgeFound: If no address is configured and discovery finds nothing
    """
    if config.bridge:
        if validate:
            return probe_bridge(config.bridge, config.timeout)
        return Bridge(address=config.bridge)

    bridges = discover_bridges(config.timeout)
    if not bridges:
        raise NoBridgeFound("No Hue bridge found on the network. Pass --bridge or set HUE_BRIDGE.")

    if len(bridges) > 1:
        others = ", ".join(b.address for b in bridges[1:])
        click.secho(f"⚠ Found {len(bridges)} bridges, using {bridges[0].address}", fg='yellow', err=True)
        click.echo(f"Other bridges: {others}. Pass --bridge to pick one.", err=True)

    return bridges[0]
