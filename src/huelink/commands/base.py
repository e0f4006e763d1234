from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class LightStateCommand(BaseModel):
    """Body for ``lights/{id}/state``. Unset fields are left out of the request."""

    on: Optional[bool] = None
    bri: Optional[int] = Field(None, ge=1, le=254)
    hue: Optional[int] = Field(None, ge=0, le=65535)
    sat: Optional[int] = Field(None, ge=0, le=254)
    xy: Optional[tuple[float, float]] = None
    ct: Optional[int] = Field(None, ge=153, le=500)
    alert: Optional[Literal["none", "select", "lselect"]] = None
    effect: Optional[Literal["none", "colorloop"]] = None
    # tenths of a second
    transitiontime: Optional[int] = Field(None, ge=0)
    bri_inc: Optional[int] = Field(None, ge=-254, le=254)

    @field_validator("xy")
    @classmethod
    def _xy_in_range(cls, value):
        if value is not None and not all(0.0 <= c <= 1.0 for c in value):
            raise ValueError("xy coordinates must be between 0 and 1")
        return value

    def payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class GroupActionCommand(LightStateCommand):
    """Body for ``groups/{id}/action``; ``scene`` recalls a stored scene on the group."""

    scene: Optional[str] = None


def as_payload(state) -> dict:
    if isinstance(state, LightStateCommand):
        return state.payload()
    return dict(state)
