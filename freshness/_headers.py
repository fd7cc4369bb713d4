from __future__ import annotations

import re
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Union,
)

__all__ = (
    "MAX_DELTA_SECONDS",
    "DirectiveMap",
    "Headers",
    "parse_cache_control",
    "to_seconds",
)

DirectiveValue = Union[str, int, bool]
DirectiveMap = Dict[str, DirectiveValue]

_DIRECTIVE_SEPARATOR = re.compile(r"\s*,\s*")
_VALUE_SEPARATOR = re.compile(r"\s*=\s*")
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

MAX_DELTA_SECONDS = 2147483647
# CPython's default limit for int() on strings since 3.11
_MAX_INT_DIGITS = 4300


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive header mapping.

    Assigning a value replaces every previous value of that header,
    use `add` to append one instead.
    """

    def __init__(self, headers: Mapping[str, Union[str, List[str]]]) -> None:
        self._headers = {k.lower(): ([v] if isinstance(v, str) else v[:]) for k, v in headers.items()}

    def get_list(self, key: str) -> Optional[List[str]]:
        return self._headers.get(key.lower(), None)

    def add(self, key: str, value: str) -> None:
        self._headers.setdefault(key.lower(), []).append(value)

    def __getitem__(self, key: str) -> str:
        return ", ".join(self._headers[key.lower()])

    def __setitem__(self, key: str, value: str) -> None:
        self._headers[key.lower()] = [value]

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return repr(self._headers)

    def __str__(self) -> str:
        return str(self._headers)

    def __eq__(self, other_headers: Any) -> bool:
        return isinstance(other_headers, Headers) and self._headers == other_headers._headers  # type: ignore


def parse_directive_value(value: str) -> DirectiveValue:
    """Store delta-seconds style values as integers, everything else verbatim."""
    if value.isascii() and value.isdigit() and len(value) <= _MAX_INT_DIGITS:
        try:
            return int(value)
        except ValueError:
            # limit lowered with sys.set_int_max_str_digits
            return value
    return value


def parse_cache_control(value: Optional[str]) -> DirectiveMap:
    """
    Parse a Cache-Control header value into a mapping of directives.

    Directive names are lowercased. Valueless directives map to `True`,
    directives with a value keep it (as an integer when it is made only of digits).
    Tokens with an empty name are skipped and a repeated directive keeps
    its last value. Malformed input never raises.

    Args:
        value: The Cache-Control header value, or None when the header is absent

    Returns:
        A new dictionary of directives

    Examples:
        >>> parse_cache_control("max-age=60, must-revalidate")
        {'max-age': 60, 'must-revalidate': True}
        >>> parse_cache_control(" , max-age = 30 ")
        {'max-age': 30}
        >>> parse_cache_control('private="Set-Cookie"')
        {'private': '"Set-Cookie"'}
        >>> parse_cache_control(None)
        {}
    """
    directives: DirectiveMap = {}

    for token in _DIRECTIVE_SEPARATOR.split((value or "").strip()):
        name, *rest = _VALUE_SEPARATOR.split(token, maxsplit=1)
        name = name.strip().lower()

        if not name:
            continue

        directives[name] = parse_directive_value(rest[0].strip()) if rest else True

    return directives


def to_seconds(value: DirectiveValue) -> int:
    """
    Coerce a directive value into a number of seconds.

    Leading whitespace and an optional sign are accepted, followed by digits;
    anything after the digits is ignored. Values without leading digits,
    including valueless directives, are 0. The result is capped at
    2147483647 seconds in both directions (RFC 9111, Section 1.2.2).

    Examples:
        >>> to_seconds("60")
        60
        >>> to_seconds("60abc")
        60
        >>> to_seconds("abc")
        0
        >>> to_seconds("9" * 5000)
        2147483647
    """
    if isinstance(value, bool):
        return 0

    seconds: int
    if isinstance(value, int):
        seconds = value
    else:
        match = _LEADING_INTEGER.match(value)
        if match is None:
            return 0
        digits = match.group(1)
        try:
            seconds = int(digits)
        except ValueError:
            seconds = -MAX_DELTA_SECONDS if digits.startswith("-") else MAX_DELTA_SECONDS

    return max(-MAX_DELTA_SECONDS, min(seconds, MAX_DELTA_SECONDS))
