import json
import logging
from enum import Enum
from typing import Any, Optional

import requests
import urllib3

from huelink.exceptions import HueResponseError, HueTransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class Method(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class HttpClient:
    """Sends one request per call and returns the parsed JSON body.

    The bridge reports its own failures inside a 200 response, so status codes
    are not inspected here. Only a failed exchange or a body that is not JSON
    raises.
    """

    def __init__(self, headers: Optional[dict[str, str]] = None, *, timeout: float = 5, verify: bool = True):
        self.session = requests.Session()
        self.headers = {**JSON_HEADERS, **(headers or {})}
        self.timeout = timeout
        self.verify = verify
        if not verify:
            # bridges answer HTTPS with a self-signed certificate
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def request(self, method: Method, url: str, payload: Optional[Any] = None, *, timeout: Optional[float] = None):
        method = Method(method)
        body = None if payload is None else json.dumps(payload)
        logger.debug("%s %s", method.value, url)

        try:
            r = self.session.request(
                method.value,
                url,
                data=body,
                headers=self.headers,
                timeout=self.timeout if timeout is None else timeout,
                verify=self.verify,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method.value, url, e)
            raise HueTransportError(f"{method.value} {url} failed: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body (status %s)", method.value, url, r.status_code)
            raise HueResponseError(url, r.text) from e

    def get(self, url: str, *, timeout: Optional[float] = None):
        return self.request(Method.GET, url, timeout=timeout)

    def put(self, url: str, payload: Any, *, timeout: Optional[float] = None):
        return self.request(Method.PUT, url, payload, timeout=timeout)

    def post(self, url: str, payload: Optional[Any] = None, *, timeout: Optional[float] = None):
        return self.request(Method.POST, url, payload, timeout=timeout)

    def delete(self, url: str, *, timeout: Optional[float] = None):
        return self.request(Method.DELETE, url, timeout=timeout)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
