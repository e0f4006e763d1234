from typing import Optional

from pydantic import BaseModel, ConfigDict


class LightStateModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    on: bool = False
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[tuple[float, float]] = None
    ct: Optional[int] = None
    alert: Optional[str] = None
    effect: Optional[str] = None
    colormode: Optional[str] = None
    reachable: bool = True


class LightModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    type: str  # e.g. "Extended color light"
    state: LightStateModel
    uniqueid: Optional[str] = None
    modelid: Optional[str] = None
    swversion: Optional[str] = None


class GroupStateModel(BaseModel):
    all_on: bool = False
    any_on: bool = False


class GroupModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    lights: list[str] = []
    type: Optional[str] = None
    action: Optional[LightStateModel] = None
    state: Optional[GroupStateModel] = None
