"""HTTP client for the AirParif pollution web services."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from typing import Any, Iterable, Mapping
from urllib.parse import urlencode

import requests

from airparif.config import AirparifConfig
from airparif.dates import Clock, utc_today
from airparif.decoders import decode_city_index, decode_day_index, decode_episodes, decode_global_index
from airparif.errors import CallError, JsonError, RequestError
from airparif.json_access import dump
from airparif.models import Alert, Day, Measurement

logger = logging.getLogger(__name__)

USER_AGENT = "airparif-client/0.1"


@dataclass
class AirparifClient:
    """Small helper around the AirParif ``indice``, ``indiceJour``, ``idxville`` and ``episode`` endpoints.

    One instance owns one :class:`requests.Session`, reused across calls.
    """

    settings: AirparifConfig
    session: requests.Session = field(default_factory=requests.Session)
    clock: Clock = utc_today

    def __post_init__(self) -> None:
        self._headers = {"User-Agent": USER_AGENT}

    def index(self) -> list[Measurement]:
        """Global pollution index for yesterday, today and tomorrow."""

        logger.debug("Querying indice endpoint")
        payload = self.execute_query(self._build_url("indice"))
        return decode_global_index(payload, self.clock)

    def index_day(self, day: Day) -> list[Measurement]:
        """Per pollutant index for a single relative day."""

        logger.debug("Querying indiceJour endpoint for %s", day.token)
        payload = self.execute_query(self._build_url("indiceJour", {"date": day.token}))
        return decode_day_index(payload)

    def index_city(self, cities: Iterable[str]) -> list[Measurement]:
        """Index of each city, identified by INSEE code, for the three relative days."""

        joined = ",".join(cities)
        logger.debug("Querying idxville endpoint for %s", joined)
        payload = self.execute_query(self._build_url("idxville", {"villes": joined}))
        return decode_city_index(payload, self.clock)

    def episode(self) -> list[Alert]:
        """Pollution episodes (alerts) for the three relative days."""

        logger.debug("Querying episode endpoint")
        payload = self.execute_query(self._build_url("episode"))
        return decode_episodes(payload, self.clock)

    def execute_query(self, url: str) -> Any:
        """GET ``url`` and return its parsed JSON body.

        The body is parsed before the status is checked, so a failing call with
        a non-JSON body raises :class:`JsonError` rather than :class:`CallError`.
        """

        try:
            response = self.session.get(
                url, headers=self._headers, timeout=self.settings.request_timeout_seconds
            )
            status = response.status_code
            text = response.text
        except requests.RequestException as error:
            raise RequestError(url, error) from error

        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise JsonError(error) from error

        if not 200 <= status < 300:
            raise CallError(url, dump(data), status)
        return data

    def _build_url(self, endpoint: str, params: Mapping[str, str] | None = None) -> str:
        query = dict(params or {})
        query["key"] = self.settings.api_key
        base = self.settings.base_url.rstrip("/")
        return f"{base}/{endpoint}?{urlencode(query, safe=',')}"


__all__ = ["AirparifClient", "USER_AGENT"]
