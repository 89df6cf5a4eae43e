"""
Resource example

Builds a `/items` resource with GET and POST handlers and drives a few
requests through it in-process, printing the raw HTTP responses.

Run:
  uv run python examples/resource_demo.py
"""

from __future__ import annotations

import anyio
from pydantic import BaseModel

from resourcekit import (
    DeserializationError,
    HttpRequest,
    ResponseWriter,
    Resource,
    decode_request,
    encode_response,
    error,
    setup_logging,
)
from resourcekit.http import render_response


class NewItem(BaseModel):
    name: str


items: list[dict] = [{"id": 1, "name": "first"}]
resource = Resource()


@resource.handles("GET")
async def list_items(_req: HttpRequest, w: ResponseWriter) -> None:
    encode_response(w, 200, items)


@resource.handles("POST")
async def create_item(req: HttpRequest, w: ResponseWriter) -> None:
    try:
        new = await decode_request(req, NewItem)
    except DeserializationError as e:
        error(w, f"bad request: {e.error_count()} error(s)", 400)
        return
    item = {"id": len(items) + 1, "name": new.name}
    items.append(item)
    encode_response(w, 201, item)


async def main() -> None:
    setup_logging("DEBUG")

    requests = [
        HttpRequest("GET", "/items"),
        HttpRequest("POST", "/items", body=b'{"name": "second"}'),
        HttpRequest("POST", "/items", body=b'{"name": 2}'),
        HttpRequest("OPTIONS", "/items"),
        HttpRequest("DELETE", "/items"),
    ]
    for req in requests:
        resp = await resource(req)
        print(f"--- {req.method} {req.path}")
        print(render_response(resp).decode("utf-8"))


if __name__ == "__main__":
    anyio.run(main)
