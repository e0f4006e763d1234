from huelink.api import Bridge, HttpClient, Method, Portal, User, user_from_settings
from huelink.config import HueSettings, load_settings
from huelink.exceptions import (
    HueBridgeError,
    HueConfigError,
    HueDiscoveryError,
    HueError,
    HueResponseError,
    HueTransportError,
    PairingError,
)

__all__ = [
    "Bridge",
    "HttpClient",
    "HueBridgeError",
    "HueConfigError",
    "HueDiscoveryError",
    "HueError",
    "HueResponseError",
    "HueSettings",
    "HueTransportError",
    "Method",
    "PairingError",
    "Portal",
    "User",
    "load_settings",
    "user_from_settings",
]
