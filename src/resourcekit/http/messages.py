"""Request/response types the rest of resourcekit works over.

Handlers see an `HttpRequest` and write into a `ResponseWriter`; the writer
freezes into an immutable `HttpResponse` once the handler returns.

Features:
- Case-insensitive header map (names stored lower-cased)
- Buffered body, optionally streamed in through an AnyIO byte stream
- Status written once; writing body bytes implies 200
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Mapping

import anyio
from anyio.abc import ByteReceiveStream
from typing_extensions import override


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HttpRequest:
    method: str
    path: str = "/"
    version: str = "HTTP/1.1"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    stream: ByteReceiveStream | None = None


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status: int = 200
    headers: Mapping[str, str] | None = None
    body: bytes = b""

    @staticmethod
    def json(
        obj: Any,
        *,
        status: int = 200,
        headers: Mapping[str, str] | None = None,
    ) -> "HttpResponse":
        from ..codec import dumps

        merged: dict[str, str] = {"content-type": "application/json"}
        if headers:
            merged.update({k.lower(): v for k, v in headers.items()})
        return HttpResponse(status=status, headers=merged, body=dumps(obj))


class HeaderMap(MutableMapping[str, str]):
    """Header names are case-insensitive; they are stored lower-cased."""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._store: dict[str, str] = {}
        if initial:
            self.update(initial)

    @override
    def __getitem__(self, name: str) -> str:
        return self._store[name.lower()]

    @override
    def __setitem__(self, name: str, value: str) -> None:
        self._store[name.lower()] = value

    @override
    def __delitem__(self, name: str) -> None:
        del self._store[name.lower()]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    @override
    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"HeaderMap({self._store!r})"


class ResponseWriter:
    """
    Mutable response sink handed to handlers.

    Mirrors the usual header-map / status / body-stream shape:
      - mutate `headers`, then
      - `write_header(status)` commits the status and snapshots the headers,
      - `write(data)` appends body bytes (committing 200 if nothing was written).
    """

    def __init__(self):
        self.headers = HeaderMap()
        self._status: int | None = None
        self._committed: dict[str, str] = {}
        self._body = bytearray()

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def written(self) -> bool:
        return self._status is not None

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def write_header(self, status: int) -> None:
        if self._status is not None:
            logger.warning(
                "superfluous write_header(%d); status already %d", status, self._status
            )
            return
        self._status = status
        self._committed = dict(self.headers)

    def write(self, data: bytes) -> int:
        if self._status is None:
            self.write_header(200)
        self._body.extend(data)
        return len(data)

    def to_response(self) -> HttpResponse:
        # A handler that wrote nothing still produced an empty 200.
        if self._status is None:
            self.write_header(200)
        return HttpResponse(status=self._status, headers=dict(self._committed), body=self.body)


def error(writer: ResponseWriter, message: str, status: int) -> None:
    """Reply with a plain-text error body (`message` plus a trailing newline)."""
    writer.headers["Content-Type"] = "text/plain; charset=utf-8"
    writer.headers["X-Content-Type-Options"] = "nosniff"
    writer.write_header(status)
    writer.write(f"{message}\n".encode("utf-8"))


async def read_body(request: HttpRequest) -> bytes:
    """Return the full request body.

    With a stream attached, the stream is read to its end and appended to any
    bytes already buffered in `request.body`.
    """
    if request.stream is None:
        return request.body

    buf = bytearray(request.body)
    while True:
        try:
            chunk = await request.stream.receive()
        except anyio.EndOfStream:
            break
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)


_STATUS_TEXT: dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


def _status_line(status: int) -> str:
    text = _STATUS_TEXT.get(status, "")
    return f"HTTP/1.1 {status} {text}".rstrip() + "\r\n"


def render_response(response: HttpResponse) -> bytes:
    """Serialize a response to HTTP/1.1 wire bytes."""
    headers = {k.lower(): v for k, v in (response.headers or {}).items()}
    body = response.body or b""

    headers.setdefault("content-length", str(len(body)))

    start = _status_line(response.status).encode("ascii")
    head = b"".join(f"{k}: {v}\r\n".encode("latin-1") for k, v in headers.items())
    return start + head + b"\r\n" + body
