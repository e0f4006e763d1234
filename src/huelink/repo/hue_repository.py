from typing import Optional

from huelink.api.portal import User
from huelink.models.errors import raise_for_errors
from huelink.models.light import GroupModel, LightModel


class HueRepository:
    """Typed read access built from one or more raw calls on a :class:`User`.

    Unlike the raw endpoints, a bridge error in the answer raises
    :class:`~huelink.exceptions.HueBridgeError` here, since there is nothing to parse.
    """

    def __init__(self, user: User):
        self.user = user

    def get_lights(self) -> dict[int, LightModel]:
        lights = raise_for_errors(self.user.get_lights())
        return {int(number): LightModel.model_validate(light) for number, light in lights.items()}

    def get_light(self, light_id) -> LightModel:
        return LightModel.model_validate(raise_for_errors(self.user.get_light(light_id)))

    def get_group(self, group_id) -> GroupModel:
        return GroupModel.model_validate(raise_for_errors(self.user.get_group(group_id)))

    def get_group_lights(self, group_id) -> dict[int, LightModel]:
        # The group lists its members by number; one lights call fills in the details.
        group = self.get_group(group_id)
        lights = self.get_lights()
        return {int(number): lights[int(number)] for number in group.lights if int(number) in lights}

    def find_light_by_uniqueid(self, uniqueid: str) -> Optional[tuple[int, LightModel]]:
        for number, light in self.get_lights().items():
            if light.uniqueid == uniqueid:
                return number, light
        return None
