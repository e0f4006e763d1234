from huelink.commands.base import GroupActionCommand, LightStateCommand, as_payload

__all__ = ["GroupActionCommand", "LightStateCommand", "as_payload"]
