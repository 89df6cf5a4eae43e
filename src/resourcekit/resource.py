"""Resource - one endpoint, many methods.

A resource holds ordered (method -> handler) bindings and dispatches requests
by method. OPTIONS and unknown methods are answered by the resource itself,
using the bound methods as the `Allow` header.
"""

from __future__ import annotations

import inspect
import logging
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping

from .http.messages import HttpRequest, HttpResponse, ResponseWriter, error


logger = logging.getLogger(__name__)


Handler = Callable[[HttpRequest, ResponseWriter], Awaitable[None] | None]


class Resource:
    """
    An HTTP endpoint that responds to a set of methods.

    Dispatch order:
      - no bindings      -> 404 "Not found"
      - OPTIONS          -> 200, `Allow`, empty body (even if OPTIONS is bound)
      - bound method     -> handler(request, writer)
      - anything else    -> 405 "Not allowed", `Allow`

    Resources are built first and then served. `bind` swaps in a new mapping
    rather than mutating the old one, so an in-flight dispatch always sees a
    consistent set of bindings; concurrent binds are the caller's problem.

    Calling a resource with a request returns an HttpResponse, so it can be
    used anywhere a `request -> response` handler is expected.
    """

    # Read by dispatch when __init__ never ran: such a resource is just empty.
    _bindings: Mapping[str, Handler] = MappingProxyType({})

    def __init__(self, handlers: Mapping[str, Handler] | None = None):
        self._bindings = MappingProxyType({})
        for method, handler in (handlers or {}).items():
            self.bind(method, handler)

    @property
    def methods(self) -> tuple[str, ...]:
        return tuple(self._bindings)

    @property
    def allow(self) -> str:
        """Comma-joined bound methods, in the order they were first bound."""
        return ", ".join(self._bindings)

    def bind(self, method: str, handler: Handler) -> None:
        """Handle `method` with `handler`, replacing any existing handler for it."""
        if method in self._bindings:
            logger.debug("rebinding %s", method, extra={"method": method})
        else:
            logger.debug("binding %s", method, extra={"method": method})
        # Replacing an existing key keeps its position.
        self._bindings = MappingProxyType({**self._bindings, method: handler})

    def handles(self, method: str) -> Callable[[Handler], Handler]:
        """Decorator form of `bind`."""
        def decorator(handler: Handler) -> Handler:
            self.bind(method, handler)
            return handler
        return decorator

    async def serve(self, request: HttpRequest, writer: ResponseWriter) -> None:
        bindings = self._bindings
        if not bindings:
            logger.debug("no bindings, 404", extra={"method": request.method, "status": 404})
            error(writer, "Not found", 404)
            return

        allow = ", ".join(bindings)

        if request.method == "OPTIONS":
            logger.debug("options, 200", extra={"method": request.method, "status": 200})
            writer.headers["Allow"] = allow
            writer.write_header(200)
            return

        for method, handler in bindings.items():
            if request.method == method:
                result = handler(request, writer)
                if inspect.isawaitable(result):
                    await result
                return

        logger.debug(
            "%s not allowed, 405", request.method,
            extra={"method": request.method, "status": 405},
        )
        writer.headers["Allow"] = allow
        error(writer, "Not allowed", 405)

    async def __call__(self, request: HttpRequest) -> HttpResponse:
        writer = ResponseWriter()
        await self.serve(request, writer)
        return writer.to_response()

    def __repr__(self) -> str:
        return f"Resource({self.allow!r})"

