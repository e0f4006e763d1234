import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from huelink.exceptions import HueConfigError

DISCOVERY_URL = "https://discovery.meethue.com/"
DEFAULT_DEVICE_TYPE = "huelink#python"

# Environment variable -> settings field. APP_KEY is accepted for keys created by older pairing scripts.
ENV_FIELDS = {
    "HUE_BRIDGE_IP": "bridge_ip",
    "HUE_USERNAME": "username",
    "APP_KEY": "username",
    "HUE_TIMEOUT": "timeout",
    "HUE_VERIFY_TLS": "verify",
    "HUE_DISCOVERY_URL": "discovery_url",
    "HUE_DEVICE_TYPE": "device_type",
}


class HueSettings(BaseModel):
    bridge_ip: Optional[str] = None
    username: Optional[str] = None
    timeout: float = Field(5.0, gt=0)
    verify: bool = True
    discovery_url: str = DISCOVERY_URL
    device_type: str = DEFAULT_DEVICE_TYPE

    def require_bridge_ip(self) -> str:
        if not self.bridge_ip:
            raise HueConfigError("HUE_BRIDGE_IP is not set")
        return self.bridge_ip

    def require_username(self) -> str:
        if not self.username:
            raise HueConfigError("HUE_USERNAME (or APP_KEY) is not set")
        return self.username


def load_settings(environ=None, use_dotenv: bool = True) -> HueSettings:
    """Build settings from the process environment, reading a ``.env`` file first if one is found.

    Variables set in the real environment win over the ``.env`` file. When both
    ``HUE_USERNAME`` and ``APP_KEY`` are present, ``HUE_USERNAME`` is used.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values = {}
    for env_name, field in ENV_FIELDS.items():
        value = environ.get(env_name)
        if value is None or value == "" or field in values:
            continue
        values[field] = value

    try:
        return HueSettings(**values)
    except ValidationError as e:
        raise HueConfigError(f"Invalid huelink settings: {e}") from e
