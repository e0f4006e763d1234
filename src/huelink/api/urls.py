from typing import Callable

SEPARATOR = "/"


def slash(*segments) -> str:
    """Join path segments with a single ``/``.

    Segments are used as given: nothing is escaped, empty segments are kept and
    no separator is added at either end.
    """
    return SEPARATOR.join(str(segment) for segment in segments)


def object_url(base_url: str, *suffix) -> Callable[..., str]:
    """Return a function mapping an identifier to ``base_url/{id}[/suffix...]``."""

    def url_for(identifier) -> str:
        return slash(base_url, identifier, *suffix)

    return url_for


def child_object_url(base_url: str, collection: str, *suffix) -> Callable[..., str]:
    """Return a function mapping ``(parent_id, child_id)`` to ``base_url/{parent}/collection/{child}[/suffix...]``."""

    def url_for(parent_id, child_id) -> str:
        return slash(base_url, parent_id, collection, child_id, *suffix)

    return url_for
