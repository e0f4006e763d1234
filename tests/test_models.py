import pytest
from pydantic import ValidationError

from huelink.commands.base import GroupActionCommand, LightStateCommand, as_payload
from huelink.exceptions import HueBridgeError
from huelink.models import BridgeDescriptor, LightModel, find_errors, raise_for_errors, successes
from huelink.models.errors import UNAUTHORIZED_USER

UNAUTHORIZED = [{"error": {"type": 1, "address": "/lights", "description": "unauthorized user"}}]


class TestErrors:
    def test_find_errors(self):
        (error,) = find_errors(UNAUTHORIZED)

        assert error.type == UNAUTHORIZED_USER
        assert error.address == "/lights"
        assert error.description == "unauthorized user"

    def test_mixed_results(self):
        payload = [
            {"success": {"/lights/1/state/on": True}},
            {"error": {"type": 7, "address": "/lights/1/state/bri", "description": "invalid value"}},
        ]

        assert [e.type for e in find_errors(payload)] == [7]
        assert successes(payload) == [{"/lights/1/state/on": True}]

    @pytest.mark.parametrize("payload", [{"1": {"name": "Desk"}}, [], [{"success": {}}], None, "text", 3])
    def test_no_errors(self, payload):
        assert find_errors(payload) == []
        assert raise_for_errors(payload) is payload

    def test_single_error_object(self):
        assert len(find_errors({"error": {"type": 3, "address": "/lights/9"}})) == 1

    def test_raise_for_errors(self):
        with pytest.raises(HueBridgeError) as info:
            raise_for_errors(UNAUTHORIZED)

        assert info.value.errors[0].type == UNAUTHORIZED_USER
        assert "unauthorized user" in str(info.value)


class TestCommands:
    def test_unset_fields_left_out(self):
        assert LightStateCommand(on=True).payload() == {"on": True}

    def test_xy_is_sent_as_list(self):
        assert LightStateCommand(xy=(0.3, 0.4)).payload() == {"xy": [0.3, 0.4]}

    @pytest.mark.parametrize(
        "fields",
        [{"bri": 0}, {"bri": 255}, {"hue": 70000}, {"sat": -1}, {"ct": 100}, {"xy": (1.2, 0.1)}, {"alert": "blink"}],
    )
    def test_out_of_range(self, fields):
        with pytest.raises(ValidationError):
            LightStateCommand(**fields)

    def test_group_action_scene(self):
        assert GroupActionCommand(scene="AbCd").payload() == {"scene": "AbCd"}

    def test_as_payload(self):
        assert as_payload(LightStateCommand(hue=100)) == {"hue": 100}
        assert as_payload({"hue": 100}) == {"hue": 100}


class TestResponseModels:
    def test_light(self):
        light = LightModel.model_validate(
            {
                "state": {"on": True, "bri": 144, "hue": 13088, "sat": 212, "xy": [0.5128, 0.4147], "reachable": True},
                "type": "Extended color light",
                "name": "Hue color lamp 7",
                "modelid": "LCT007",
                "uniqueid": "00:17:88:01:00:bd:c7:b9-0b",
                "pointsymbol": {},
            }
        )

        assert light.state.on is True
        assert light.state.xy == (0.5128, 0.4147)
        assert light.uniqueid == "00:17:88:01:00:bd:c7:b9-0b"

    def test_bridge_descriptor_requires_address(self):
        with pytest.raises(ValidationError):
            BridgeDescriptor.model_validate({"id": "x"})
