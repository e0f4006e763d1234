from huelink.models.bridge import BridgeDescriptor
from huelink.models.errors import BridgeErrorModel, find_errors, raise_for_errors, successes
from huelink.models.light import GroupModel, GroupStateModel, LightModel, LightStateModel

__all__ = [
    "BridgeDescriptor",
    "BridgeErrorModel",
    "GroupModel",
    "GroupStateModel",
    "LightModel",
    "LightStateModel",
    "find_errors",
    "raise_for_errors",
    "successes",
]
