from __future__ import annotations

import logging
from typing import Optional

import httpx

from freshness._freshness import Freshness
from freshness._headers import Headers
from freshness._models import Response
from freshness._utils import BaseClock

__all__ = ("freshness_of", "httpx_to_internal", "internal_to_httpx")

logger = logging.getLogger("freshness.httpx")


def freshness_of(response: httpx.Response, clock: Optional[BaseClock] = None) -> Freshness:
    """
    Compute the freshness of a live httpx response.

    The httpx headers are used directly, so `Date` and `Age`
    written during the computation end up on the httpx response.
    """
    logger.debug(f"Calculating freshness of an httpx response with status code {response.status_code}.")
    return Freshness(response.status_code, response.headers, clock=clock)


def httpx_to_internal(value: httpx.Response, clock: Optional[BaseClock] = None) -> Response:
    """
    Convert httpx.Response to internal Response.
    """
    try:
        stream = iter([value.content])
    except httpx.ResponseNotRead:
        stream = iter(value.iter_raw())

    headers = Headers({})
    for key, header_value in value.headers.multi_items():
        headers.add(key, header_value)

    return Response(
        status_code=value.status_code,
        headers=headers,
        stream=stream,
        clock=clock,
    )


def internal_to_httpx(value: Response) -> httpx.Response:
    """
    Convert internal Response to httpx.Response.
    """
    return httpx.Response(
        status_code=value.status_code,
        headers=[(key, header_value) for key in value.headers for header_value in value.headers.get_list(key) or []],
        content=value.read(),
    )
