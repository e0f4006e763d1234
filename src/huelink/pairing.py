"""Create a username on a bridge.

    python -m huelink.pairing

Uses HUE_BRIDGE_IP when set, otherwise the first bridge the discovery service
reports. Press the bridge's link button before confirming.
"""

import logging

from huelink.api.portal import Bridge, Portal
from huelink.config import load_settings
from huelink.exceptions import HueError, PairingError
from huelink.models.errors import find_errors, successes

logger = logging.getLogger(__name__)


def pair_bridge(bridge: Bridge, device_type: str) -> str:
    """Ask the bridge for a new username and return it."""
    response = bridge.create_user(device_type)

    errors = find_errors(response)
    if errors:
        raise PairingError(errors[0].description)

    for success in successes(response):
        if "username" in success:
            logger.info("Paired with %s as %s", bridge.address, device_type)
            return success["username"]

    raise PairingError(f"Unexpected answer from bridge: {response!r}")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings()
    portal = Portal.from_settings(settings)

    address = settings.bridge_ip
    if not address:
        print("Looking for a bridge ...")
        try:
            bridges = portal.discover_bridges()
        except HueError as e:
            print(f"Error finding bridges: {e}")
            bridges = []
        if not bridges:
            print("No bridge found via discovery. Set HUE_BRIDGE_IP to the bridge's address.")
            return 1
        address = bridges[0].internalipaddress
    print(f"Using bridge at {address}")

    input("Press the link button on the bridge, then press Enter -> ")
    try:
        username = pair_bridge(portal.bridge(address), settings.device_type)
    except HueError as e:
        print(f"Pairing failed: {e}")
        print("Press the link button and run this script again.")
        return 1

    print(f"HUE_USERNAME={username}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
