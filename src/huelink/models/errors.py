"""Helpers for the bridge's error convention.

Write requests answer with a list of one-key dicts, each either
``{"success": {...}}`` or ``{"error": {"type": 1, "address": "/", "description": "unauthorized user"}}``.
Requests never raise on these by themselves; call :func:`raise_for_errors` where
a bridge-side failure should stop the caller.
"""

from typing import Any

from pydantic import BaseModel

from huelink.exceptions import HueBridgeError

UNAUTHORIZED_USER = 1
RESOURCE_NOT_AVAILABLE = 3
LINK_BUTTON_NOT_PRESSED = 101


class BridgeErrorModel(BaseModel):
    type: int
    address: str = ""
    description: str = ""


def find_errors(payload: Any) -> list[BridgeErrorModel]:
    if isinstance(payload, dict):
        entries = [payload]
    elif isinstance(payload, list):
        entries = payload
    else:
        return []

    return [
        BridgeErrorModel.model_validate(entry["error"])
        for entry in entries
        if isinstance(entry, dict) and isinstance(entry.get("error"), dict)
    ]


def raise_for_errors(payload: Any) -> Any:
    """Return ``payload`` unchanged, or raise :class:`HueBridgeError` if it carries error entries."""
    errors = find_errors(payload)
    if errors:
        raise HueBridgeError(errors)
    return payload


def successes(payload: Any) -> list[dict]:
    if not isinstance(payload, list):
        return []
    return [entry["success"] for entry in payload if isinstance(entry, dict) and "success" in entry]
