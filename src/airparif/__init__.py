"""Client for the AirParif pollution web services.

The module level helpers build a client for a single call::

    import airparif

    for measurement in airparif.indice("my-api-key"):
        print(measurement)
"""

from __future__ import annotations

from typing import Iterable

from .client import AirparifClient
from .config import AirparifConfig, Settings, get_settings
from .errors import (
    AirparifError,
    CallError,
    DateParseError,
    JsonError,
    MissingField,
    RequestError,
    UnexpectedDate,
    UnknownEnumValue,
    WrongType,
)
from .models import Alert, Criteria, Day, Kind, Level, Measurement, PollutantAlertDetail

__version__ = "0.1.0"


def _client(api_key: str | None) -> AirparifClient:
    base = get_settings().airparif
    config = AirparifConfig(
        api_key=base.api_key if api_key is None else api_key,
        base_url=base.base_url,
        request_timeout_seconds=base.request_timeout_seconds,
    )
    return AirparifClient(settings=config)


def indice(api_key: str | None = None) -> list[Measurement]:
    return _client(api_key).index()


def indice_day(day: Day, api_key: str | None = None) -> list[Measurement]:
    return _client(api_key).index_day(day)


def indice_city(cities: Iterable[str], api_key: str | None = None) -> list[Measurement]:
    return _client(api_key).index_city(cities)


def episode(api_key: str | None = None) -> list[Alert]:
    return _client(api_key).episode()


__all__ = [
    "AirparifClient",
    "AirparifConfig",
    "AirparifError",
    "Alert",
    "CallError",
    "Criteria",
    "DateParseError",
    "Day",
    "JsonError",
    "Kind",
    "Level",
    "Measurement",
    "MissingField",
    "PollutantAlertDetail",
    "RequestError",
    "Settings",
    "UnexpectedDate",
    "UnknownEnumValue",
    "WrongType",
    "__version__",
    "episode",
    "get_settings",
    "indice",
    "indice_city",
    "indice_day",
]
