from typing import Optional

from pydantic import BaseModel, ConfigDict


class BridgeDescriptor(BaseModel):
    """One entry of the discovery service's answer."""

    model_config = ConfigDict(extra="allow")

    internalipaddress: str
    id: Optional[str] = None
    port: Optional[int] = None
