from typing import Optional

from huelink.api.portal import User
from huelink.commands.base import GroupActionCommand


class GroupService:
    def __init__(self, user: User):
        self.user = user

    def _send(self, group_id, command: GroupActionCommand):
        return self.user.set_group_state(group_id, command.payload())

    def turn_on(self, group_id, transitiontime: Optional[int] = None):
        return self._send(group_id, GroupActionCommand(on=True, transitiontime=transitiontime))

    def turn_off(self, group_id, transitiontime: Optional[int] = None):
        return self._send(group_id, GroupActionCommand(on=False, transitiontime=transitiontime))

    def set_brightness(self, group_id, bri: int, transitiontime: Optional[int] = 5):
        return self._send(group_id, GroupActionCommand(bri=bri, transitiontime=transitiontime))

    def set_color(self, group_id, xy: tuple[float, float], transitiontime: Optional[int] = None):
        return self._send(group_id, GroupActionCommand(xy=xy, transitiontime=transitiontime))

    def set_color_temp(self, group_id, ct: int):
        return self._send(group_id, GroupActionCommand(ct=ct))

    def recall_scene(self, group_id, scene_id: str):
        return self._send(group_id, GroupActionCommand(scene=scene_id))
