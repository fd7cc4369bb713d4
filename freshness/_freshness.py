from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from freshness._headers import DirectiveMap, DirectiveValue, parse_cache_control, to_seconds
from freshness._utils import BaseClock, Clock, generate_http_date, parse_date

__all__ = ("CACHEABLE_STATUS_CODES", "Freshness")

CACHEABLE_STATUS_CODES = frozenset([200, 203, 300, 301, 302, 404, 410])

logger = logging.getLogger("freshness.core")


class Freshness:
    """
    Freshness and cacheability of a single HTTP response.

    The instance reads the `Cache-Control`, `Expires`, `Date` and `Age`
    headers from the mapping it was given, and writes `Date` (when missing)
    and `Age` back into it. Any case-insensitive `MutableMapping[str, str]`
    can be used, including `freshness.Headers` and `httpx.Headers`.

    Freshness is computed once on construction; call `recalculate_freshness`
    to update it, for example after the response picked up an `Age` header.

    Parameters:
    ----------
    status_code : int
        Status code of the response
    headers : MutableMapping[str, str]
        Response headers, owned by the response
    clock : Optional[BaseClock]
        Source of the current time, defaults to the system clock

    Examples:
    --------
    >>> headers = Headers({"Cache-Control": "max-age=60"})
    >>> freshness = Freshness(200, headers)
    >>> freshness.ttl
    60
    >>> freshness.is_fresh, freshness.is_original, freshness.is_cacheable
    (True, True, True)
    """

    def __init__(
        self,
        status_code: int,
        headers: MutableMapping[str, str],
        clock: Optional[BaseClock] = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers
        self._clock = clock if clock else Clock()

        self._original_response: Optional[bool] = None
        self._written_age: Optional[str] = None
        self._max_age_override: Optional[int] = None

        self._cache_control: Optional[DirectiveMap] = None
        self._expires_at: Optional[int] = None
        self._max_age: Optional[int] = None

        self._now = 0
        self._date = 0
        self._age = 0

        self.recalculate_freshness()

    @property
    def now(self) -> int:
        """The time at which the response is being processed."""
        return self._now

    @property
    def date(self) -> int:
        """The time at which the response was generated by the origin server."""
        return self._date

    @property
    def age(self) -> int:
        """Seconds elapsed between `date` and the moment the response started being processed."""
        return self._age

    @property
    def cache_control(self) -> DirectiveMap:
        if self._cache_control is None:
            self._cache_control = parse_cache_control(self.headers.get("cache-control"))
        return self._cache_control

    @property
    def expires_at(self) -> int:
        """
        The expiration time from the `Expires` header, or `date` when
        the header is missing or cannot be parsed.
        """
        if self._expires_at is None:
            expires = self.headers.get("expires")
            expires_at = parse_date(expires) if expires is not None else None
            self._expires_at = expires_at if expires_at is not None else self.date
        return self._expires_at

    @property
    def max_age(self) -> int:
        """
        Seconds from `date` during which the response is fresh.

        Uses the max-age directive when present and falls back to the
        `Expires` header. Without any freshness information this is 0.
        """
        if self._max_age_override is not None:
            return self._max_age_override

        if self._max_age is None:
            if "max-age" in self.cache_control:
                self._max_age = to_seconds(self.cache_control["max-age"])
            else:
                self._max_age = self.expires_at - self.date
        return self._max_age

    @max_age.setter
    def max_age(self, value: int) -> None:
        self._max_age_override = value

    @property
    def ttl(self) -> int:
        return self.max_age - self.age

    @ttl.setter
    def ttl(self, value: int) -> None:
        self.max_age = self.age + value

    @property
    def is_fresh(self) -> bool:
        return self.ttl > 0

    @property
    def is_stale(self) -> bool:
        return self.ttl <= 0

    @property
    def is_original(self) -> bool:
        """Whether the response comes straight from the origin rather than from a cache."""
        return self.age == 0

    @property
    def must_revalidate(self) -> DirectiveValue:
        return self.cache_control.get("must-revalidate", False)

    @property
    def no_cache(self) -> DirectiveValue:
        return self.cache_control.get("no-cache", False)

    @property
    def no_store(self) -> DirectiveValue:
        return self.cache_control.get("no-store", False)

    @property
    def is_cacheable(self) -> bool:
        if self.status_code not in CACHEABLE_STATUS_CODES:
            logger.debug(
                (
                    f"Considering the response as not cacheable since its status code ({self.status_code})"
                    " is not in the list of cacheable status codes."
                )
            )
            return False

        if self.no_store or self.no_cache:
            logger.debug(
                "Considering the response as not cacheable since it contains the no-store or no-cache directive."
            )
            return False

        return True

    def recalculate_freshness(self) -> None:
        now = self._clock.now()

        date_header = self.headers.get("date")
        date = parse_date(date_header) if date_header is not None else None
        if date is None:
            self.headers["Date"] = generate_http_date(now)
            date = now
        self._date = date

        age_header = self.headers.get("age")
        if self._original_response is False or (age_header is not None and age_header != self._written_age):
            self._original_response = False
            # a Date in the future counts as generated right now
            self._now = max(now, self._date)
            self._age = self._now - self._date
        else:
            self._original_response = True
            self._now = self._date
            self._age = 0

        self._written_age = str(self._age)
        self.headers["Age"] = self._written_age

        self._cache_control = None
        self._expires_at = None
        self._max_age = None

        logger.debug(
            f"Calculated freshness: date={self._date}, now={self._now}, age={self._age}, "
            f"original={self._original_response}."
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} status_code={self.status_code} age={self.age} ttl={self.ttl}>"
