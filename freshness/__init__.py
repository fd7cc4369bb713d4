from freshness._freshness import CACHEABLE_STATUS_CODES as CACHEABLE_STATUS_CODES, Freshness as Freshness
from freshness._headers import (
    DirectiveMap as DirectiveMap,
    Headers as Headers,
    parse_cache_control as parse_cache_control,
    to_seconds as to_seconds,
)
from freshness._models import Response as Response, activate as activate
from freshness._utils import BaseClock as BaseClock, Clock as Clock

__all__ = (
    # Engine
    "Freshness",
    "CACHEABLE_STATUS_CODES",
    # Directives
    "DirectiveMap",
    "parse_cache_control",
    "to_seconds",
    # Models
    "Headers",
    "Response",
    "activate",
    # Clocks
    "BaseClock",
    "Clock",
)
