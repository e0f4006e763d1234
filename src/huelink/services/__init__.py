from huelink.services.group_service import GroupService
from huelink.services.light_service import LightService
from huelink.services.state_sync import StateSyncThrottle

__all__ = ["GroupService", "LightService", "StateSyncThrottle"]
