"""Error types for Philips Hue Lab.

Every failure the tool can report is a HueLabError. They derive from
click.ClickException so the CLI prints the message to stderr and exits with
the error's exit code without any extra handling in the commands.
"""

import click

EXIT_UNEXPECTED = 1
EXIT_INVALID_INPUT = 2
EXIT_NOT_FOUND = 3
EXIT_AUTH = 4
EXIT_NETWORK = 5
EXIT_BRIDGE = 6


class HueLabError(click.ClickException):
    """Base class for all errors reported by the tool."""
    exit_code = EXIT_UNEXPECTED


class InvalidParameter(HueLabError):
    """User input was rejected before any request was made."""
    exit_code = EXIT_INVALID_INPUT


class NoBridgeFound(HueLabError):
    exit_code = EXIT_NOT_FOUND


class DeviceNotFound(HueLabError):
    exit_code = EXIT_NOT_FOUND

    def __init__(self, query: str, suggestions: list[str] | None = None):
        self.query = query
        self.suggestions = suggestions or []
        message = f"No device matches '{query}'."
        if self.suggestions:
            message += " Did you mean: " + ", ".join(self.suggestions) + "?"
        super().__init__(message)


class AmbiguousDeviceName(HueLabError):
    """More than one device name contains the query."""
    exit_code = EXIT_NOT_FOUND

    def __init__(self, query: str, matches: list):
        self.query = query
        self.matches = matches
        lines = [f"'{query}' matches {len(matches)} devices, use the ID to pick one:"]
        for device in matches:
            lines.append(f"  {device.name}  [{device.id}]")
        super().__init__("\n".join(lines))


class Unauthorized(HueLabError):
    """The bridge rejected the API key."""
    exit_code = EXIT_AUTH


class LinkButtonNotPressed(HueLabError):
    exit_code = EXIT_AUTH

    def __init__(self, message: str = "Link button not pressed. Press the button on the bridge and run create-key again within 30 seconds."):
        super().__init__(message)


class NetworkTimeout(HueLabError):
    exit_code = EXIT_NETWORK


class NetworkError(HueLabError):
    """Connection could not be established."""
    exit_code = EXIT_NETWORK


class BridgeError(HueLabError):
    """Bridge answered with a non-2xx status or a vendor error body."""
    exit_code = EXIT_BRIDGE

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
