"""View interceptors for API endpoints.

An interceptor sees the object an endpoint returned before FastAPI serializes
it. When its predicate ``applies(result, method)`` holds, its ``transform``
produces the response that is sent instead; otherwise the endpoint's result
passes through untouched. Endpoints using ``with_view_interceptors`` must take
``request: Request`` and ``db: Session`` parameters.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from fastapi import Request
from sqlalchemy.orm import Session
from starlette.responses import Response


class ViewInterceptor(Protocol):
    def applies(self, result: Any, method: str) -> bool: ...

    def transform(self, result: Any, request: Request) -> Response: ...


def run_view_interceptors(
    result: Any,
    request: Request,
    interceptors: list[ViewInterceptor],
) -> Any:
    """Return the first matching interceptor's response, or ``result`` unchanged."""
    for interceptor in interceptors:
        if interceptor.applies(result, request.method):
            return interceptor.transform(result, request)
    return result


def with_view_interceptors(
    *factories: Callable[[Session], ViewInterceptor],
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Decorate an endpoint so its result runs through the given interceptors."""

    def decorator(endpoint: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @functools.wraps(endpoint)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await endpoint(*args, **kwargs)
            db: Session = kwargs["db"]
            return run_view_interceptors(
                result, kwargs["request"], [factory(db) for factory in factories]
            )

        return wrapper

    return decorator
