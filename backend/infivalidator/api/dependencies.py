"""Request adapter: turns a FastAPI request into a validator input tree."""

import json
from typing import Any

from fastapi import HTTPException, Request


def _query_dict(request: Request) -> dict[str, Any]:
    """Query parameters, with repeated keys collected into lists."""
    query: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        query[key] = values if len(values) > 1 else values[0]
    return query


async def build_request_input(request: Request) -> dict[str, Any]:
    """Collect the five request locations plus the caller's identity.

    ``currentUser`` is taken from ``request.state.user`` when an auth layer
    has set it; ``ip`` is the client host.
    """
    body: Any = {}
    if await request.body():
        try:
            body = await request.json()
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="Request body is not valid JSON")

    return {
        "params": dict(request.path_params),
        "query": _query_dict(request),
        "body": body,
        "headers": dict(request.headers),
        "cookies": dict(request.cookies),
        "ip": request.client.host if request.client else None,
        "currentUser": getattr(request.state, "user", None),
    }
