"""Entry points to the bridge API: discovery, bridges and authenticated users.

    portal = Portal()
    user = portal.bridge("192.168.1.20").user("my-username")
    user.set_light_state(5, {"on": True})

Every operation returns the JSON the bridge sends back without looking at it.
Bridge errors such as ``unauthorized user`` arrive as a normal result shaped
``[{"error": {...}}]``; use :func:`huelink.models.errors.raise_for_errors` to
turn them into exceptions.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from huelink.api.endpoints import Endpoint, bind_url, verbs
from huelink.api.http_client import HttpClient, Method
from huelink.api.urls import child_object_url, object_url, slash
from huelink.config import DISCOVERY_URL, HueSettings
from huelink.exceptions import HueDiscoveryError
from huelink.models.bridge import BridgeDescriptor
from huelink.models.errors import raise_for_errors

logger = logging.getLogger(__name__)


class Portal:
    def __init__(self, client: Optional[HttpClient] = None, discovery_url: str = DISCOVERY_URL):
        self.client = client or HttpClient()
        self.discovery_url = discovery_url
        self.discover = Endpoint(request=verbs(self.client)[Method.GET], url=discovery_url)

    @classmethod
    def from_settings(cls, settings: HueSettings) -> "Portal":
        client = HttpClient(timeout=settings.timeout, verify=settings.verify)
        return cls(client, discovery_url=settings.discovery_url)

    def discover_bridges(self) -> list[BridgeDescriptor]:
        answer = raise_for_errors(self.discover())
        if not isinstance(answer, list):
            raise HueDiscoveryError(f"Expected a list of bridges from {self.discovery_url}, got {answer!r}")
        try:
            bridges = [BridgeDescriptor.model_validate(b) for b in answer]
        except ValidationError as e:
            raise HueDiscoveryError(f"Malformed bridge entry from {self.discovery_url}: {e}") from e
        logger.info("Discovered %d bridge(s)", len(bridges))
        return bridges

    def bridge(self, address: str) -> "Bridge":
        return Bridge(address, self.client)


class Bridge:
    def __init__(self, address: str, client: HttpClient):
        self.address = address
        self.client = client
        self.base_url = f"http://{address}/api"
        self._create_user = Endpoint(request=verbs(client)[Method.POST], url=self.base_url)

    def create_user(self, device_type: str, generate_client_key: bool = False):
        """Register a new user; the bridge's link button must have been pressed shortly before.

        Returns the raw answer, ``[{"success": {"username": ...}}]`` or
        ``[{"error": {...}}]``.
        """
        payload = {"devicetype": device_type}
        if generate_client_key:
            payload["generateclientkey"] = True
        return self._create_user(payload)

    def user(self, username: str) -> "User":
        return User(self, username)

    def __repr__(self):
        return f"Bridge({self.address!r})"


class User:
    """All resource operations for one username on one bridge."""

    def __init__(self, bridge: Bridge, username: str):
        self.bridge = bridge
        self.username = username
        self.base_url = slash(bridge.base_url, username)

        v = verbs(bridge.client)
        get, put, post, delete = v[Method.GET], v[Method.PUT], v[Method.POST], v[Method.DELETE]

        info_url = slash(self.base_url, "info")
        config_url = slash(self.base_url, "config")
        lights_url = slash(self.base_url, "lights")
        groups_url = slash(self.base_url, "groups")
        schedules_url = slash(self.base_url, "schedules")
        scenes_url = slash(self.base_url, "scenes")
        sensors_url = slash(self.base_url, "sensors")
        rules_url = slash(self.base_url, "rules")

        # bridge
        self.get_full_state = Endpoint(request=get, url=self.base_url)
        self.get_info = Endpoint(request=get, url=info_url)
        self.get_timezones = Endpoint(request=get, url=slash(info_url, "timezones"))
        self.get_config = Endpoint(request=get, url=config_url)
        self.set_config = Endpoint(request=put, url=config_url)
        self._delete_whitelist_entry = bind_url(delete, object_url(slash(config_url, "whitelist")))

        # lights
        self.get_lights = Endpoint(request=get, url=lights_url)
        self.get_new_lights = Endpoint(request=get, url=slash(lights_url, "new"))
        self.search_for_new_lights = Endpoint(request=post, url=lights_url)
        self.get_light = bind_url(get, object_url(lights_url))
        self.set_light = bind_url(put, object_url(lights_url))
        self.set_light_state = bind_url(put, object_url(lights_url, "state"))
        self.delete_light = bind_url(delete, object_url(lights_url))

        # groups
        self.get_groups = Endpoint(request=get, url=groups_url)
        self.create_group = Endpoint(request=post, url=groups_url)
        self.get_group = bind_url(get, object_url(groups_url))
        self.set_group = bind_url(put, object_url(groups_url))
        self.set_group_state = bind_url(put, object_url(groups_url, "action"))
        self.delete_group = bind_url(delete, object_url(groups_url))

        # schedules
        self.get_schedules = Endpoint(request=get, url=schedules_url)
        self.create_schedule = Endpoint(request=post, url=schedules_url)
        self.get_schedule = bind_url(get, object_url(schedules_url))
        self.set_schedule = bind_url(put, object_url(schedules_url))
        self.delete_schedule = bind_url(delete, object_url(schedules_url))

        # scenes
        self.get_scenes = Endpoint(request=get, url=scenes_url)
        self.create_scene = Endpoint(request=post, url=scenes_url)
        self.get_scene = bind_url(get, object_url(scenes_url))
        self.set_scene = bind_url(put, object_url(scenes_url))
        self.set_scene_light_state = bind_url(put, child_object_url(scenes_url, "lights", "state"), ids=2)
        self.delete_scene = bind_url(delete, object_url(scenes_url))

        # sensors
        self.get_sensors = Endpoint(request=get, url=sensors_url)
        self.create_sensor = Endpoint(request=post, url=sensors_url)
        self.search_for_new_sensors = Endpoint(request=post, url=sensors_url)
        self.get_new_sensors = Endpoint(request=get, url=slash(sensors_url, "new"))
        self.get_sensor = bind_url(get, object_url(sensors_url))
        self.set_sensor = bind_url(put, object_url(sensors_url))
        self.set_sensor_config = bind_url(put, object_url(sensors_url, "config"))
        self.set_sensor_state = bind_url(put, object_url(sensors_url, "state"))
        self.delete_sensor = bind_url(delete, object_url(sensors_url))

        # rules
        self.get_rules = Endpoint(request=get, url=rules_url)
        self.create_rule = Endpoint(request=post, url=rules_url)
        self.get_rule = bind_url(get, object_url(rules_url))
        self.set_rule = bind_url(put, object_url(rules_url))
        self.delete_rule = bind_url(delete, object_url(rules_url))

    def delete_user(self, username: Optional[str] = None):
        """Remove a whitelist entry, by default this session's own username."""
        return self._delete_whitelist_entry(username or self.username)

    def __repr__(self):
        return f"User({self.bridge.address!r}, {self.username!r})"


def user_from_settings(settings: HueSettings) -> User:
    return Portal.from_settings(settings).bridge(settings.require_bridge_ip()).user(settings.require_username())
