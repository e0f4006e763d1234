"""Request callables bound to a verb, a URL, or a URL generator.

Every operation on a :class:`~huelink.api.portal.User` is one of these values.
They are created once per session object, never change, and can be shared
freely between callers.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

from huelink.api.http_client import HttpClient, Method


BODYLESS = frozenset({Method.GET, Method.DELETE})


class _Bound(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Request(_Bound):
    """One HTTP verb bound to a client: ``request(url, payload=None)``."""

    client: HttpClient
    method: Method

    def __call__(self, url: str, payload: Optional[Any] = None):
        if payload is not None and self.method in BODYLESS:
            raise TypeError(f"{self.method.value} requests do not take a payload")
        return self.client.request(self.method, url, payload)


class Endpoint(_Bound):
    """A verb bound to a fixed URL: ``endpoint(payload=None)``."""

    request: Request
    url: str

    def __call__(self, payload: Optional[Any] = None):
        return self.request(self.url, payload)


class InstanceEndpoint(_Bound):
    """A request function whose URL is derived from the leading identifier argument(s).

    ``endpoint(identifier, *rest)`` calls ``request_fn(url_fn(identifier), *rest)``
    once and returns its result untouched. ``ids`` is the number of leading
    arguments handed to ``url_fn``.
    """

    request_fn: Callable[..., Any]
    url_fn: Callable[..., str]
    ids: int = 1

    def __call__(self, *args):
        if len(args) < self.ids:
            raise TypeError(f"expected at least {self.ids} identifier argument(s), got {len(args)}")
        url = self.url_fn(*args[: self.ids])
        return self.request_fn(url, *args[self.ids :])


def bind_url(request_fn: Callable[..., Any], url_fn: Callable[..., str], ids: int = 1) -> InstanceEndpoint:
    return InstanceEndpoint(request_fn=request_fn, url_fn=url_fn, ids=ids)


def verbs(client: HttpClient) -> dict[Method, Request]:
    return {method: Request(client=client, method=method) for method in Method}
