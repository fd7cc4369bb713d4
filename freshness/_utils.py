from __future__ import annotations

import calendar
import time
import typing as tp
from email.utils import formatdate, parsedate_tz
from typing import Iterable, Iterator

__all__ = ("BaseClock", "Clock", "parse_date", "generate_http_date")


class BaseClock:
    def now(self) -> int:
        raise NotImplementedError()


class Clock(BaseClock):
    def now(self) -> int:
        return int(time.time())


def parse_date(date: str) -> tp.Optional[int]:
    expires = parsedate_tz(date)
    if expires is None:
        return None
    try:
        timestamp = calendar.timegm(expires[:6])
    except (OverflowError, ValueError):
        return None
    if expires[9] is not None:
        timestamp -= expires[9]
    return timestamp


def generate_http_date(timestamp: tp.Optional[float] = None) -> str:
    """
    Generate a Date header value for HTTP responses.
    Returns date in RFC 1123 format (required by HTTP/1.1).

    Example output: 'Sun, 26 Oct 2025 12:34:56 GMT'
    """
    return formatdate(timeval=timestamp, localtime=False, usegmt=True)


def make_sync_iterator(iterable: Iterable[bytes]) -> Iterator[bytes]:
    for item in iterable:
        yield item
