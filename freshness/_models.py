from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
    cast,
)

from freshness._freshness import Freshness
from freshness._headers import Headers
from freshness._utils import BaseClock, make_sync_iterator

__all__ = ("Response", "activate")


@dataclass
class Response:
    """
    A response that knows its own freshness.

    The freshness is computed as soon as the response is created,
    which may add `Date` and `Age` to its headers.
    """

    status_code: int
    headers: Headers = field(default_factory=lambda: Headers({}))
    stream: Iterator[bytes] = field(default_factory=lambda: iter([]), compare=False)
    clock: Optional[BaseClock] = field(default=None, repr=False, compare=False)
    freshness: Freshness = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.freshness = Freshness(self.status_code, self.headers, clock=self.clock)

    def read(self) -> bytes:
        """
        Synchronously reads the entire response body without consuming the stream.
        """
        if hasattr(self, "collected_body"):
            return cast(bytes, getattr(self, "collected_body"))

        collected = b"".join([chunk for chunk in self.stream])
        setattr(self, "collected_body", collected)
        self.stream = make_sync_iterator([collected])
        return collected

    def persist(self) -> Tuple[int, Headers, Iterator[bytes]]:
        """
        Bundle the response back into a `(status, headers, body)` triple.
        """
        return self.status_code, self.headers, self.stream


def activate(
    value: Tuple[int, Mapping[str, Union[str, List[str]]], Union[bytes, Iterable[bytes]]],
    clock: Optional[BaseClock] = None,
) -> Response:
    """
    Build a `Response` from a `(status, headers, body)` triple.

    The headers are copied, so the caller's mapping is never modified.
    """
    status_code, headers, body = value

    stream: Iterator[bytes]
    if isinstance(body, bytes):
        stream = make_sync_iterator([body])
    else:
        stream = iter(body)

    return Response(
        status_code=status_code,
        headers=Headers(dict(headers)),
        stream=stream,
        clock=clock,
    )
