class HueError(Exception):
    """Base exception for all huelink errors."""


class HueTransportError(HueError):
    """The request did not complete: the bridge was unreachable or the connection failed."""


class HueResponseError(HueTransportError):
    """The bridge answered with a body that is not JSON."""

    def __init__(self, url: str, body: str):
        self.url = url
        self.body = body
        preview = body if len(body) <= 200 else body[:200] + "..."
        super().__init__(f"Response from {url} is not valid JSON: {preview!r}")


class HueBridgeError(HueError):
    """The bridge processed the request and answered with one or more error entries."""

    def __init__(self, errors: list):
        self.errors = errors
        descriptions = "; ".join(f"{e.address}: {e.description} (type {e.type})" for e in errors)
        super().__init__(descriptions or "Bridge returned an error")


class HueDiscoveryError(HueError):
    """The discovery service answered with something other than a list of bridges."""


class HueConfigError(HueError):
    """Required settings are missing or invalid."""


class PairingError(HueError):
    """The bridge refused to create a user, usually because the link button was not pressed."""
