from huelink.api.endpoints import Endpoint, InstanceEndpoint, Request, bind_url
from huelink.api.http_client import HttpClient, Method
from huelink.api.portal import Bridge, Portal, User, user_from_settings
from huelink.api.urls import child_object_url, object_url, slash

__all__ = [
    "Bridge",
    "Endpoint",
    "HttpClient",
    "InstanceEndpoint",
    "Method",
    "Portal",
    "Request",
    "User",
    "bind_url",
    "child_object_url",
    "object_url",
    "slash",
    "user_from_settings",
]
