import logging
from typing import Optional

from huelink.api.portal import User
from huelink.commands.base import LightStateCommand
from huelink.models.errors import raise_for_errors
from huelink.models.light import LightStateModel

logger = logging.getLogger(__name__)


class LightService:
    def __init__(self, user: User):
        self.user = user

    def _send(self, light_id, command: LightStateCommand):
        return self.user.set_light_state(light_id, command.payload())

    def turn_on(self, light_id, transitiontime: Optional[int] = None):
        return self._send(light_id, LightStateCommand(on=True, transitiontime=transitiontime))

    def turn_off(self, light_id, transitiontime: Optional[int] = None):
        return self._send(light_id, LightStateCommand(on=False, transitiontime=transitiontime))

    def toggle(self, light_id):
        """Read the light's current state and send the opposite on/off value."""
        state = LightStateModel.model_validate(raise_for_errors(self.user.get_light(light_id))["state"])
        logger.debug("Toggling light %s (on=%s)", light_id, state.on)
        return self._send(light_id, LightStateCommand(on=not state.on))

    def set_brightness(self, light_id, bri: int, transitiontime: Optional[int] = None):
        return self._send(light_id, LightStateCommand(bri=bri, transitiontime=transitiontime))

    def set_hue(self, light_id, hue: int, sat: Optional[int] = None):
        return self._send(light_id, LightStateCommand(hue=hue, sat=sat))

    def set_color(self, light_id, xy: tuple[float, float], transitiontime: Optional[int] = None):
        return self._send(light_id, LightStateCommand(xy=xy, transitiontime=transitiontime))

    def set_color_temp(self, light_id, ct: int):
        return self._send(light_id, LightStateCommand(ct=ct))
