"""Decoders turning AirParif JSON payloads into domain records.

Each decoder walks an already parsed JSON value (``json.loads`` output, whose
objects keep the key order of the response) and stops at the first invalid
element: either the whole list of records is returned or an
:class:`~airparif.errors.AirparifError` is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from airparif.dates import Clock, parse_absolute_date, resolve_day_token, resolve_json_day, utc_today
from airparif.errors import WrongType
from airparif.json_access import dump, optional_string, require_number, require_string, string_items
from airparif.models import GLOBAL_POLLUTANT, Alert, Criteria, Kind, Level, Measurement

logger = logging.getLogger(__name__)

DATE_KEY = "date"
DETAIL_KEY = "detail"
INSEE_KEY = "ninsee"
INDEX_KEY = "indice"
MAP_URL_KEY = "url_carte"
POLLUTANTS_KEY = "polluants"
KIND_KEY = "type"
LEVEL_KEY = "niveau"
CRITERIA_KEY = "criteres"


def _require_array(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise WrongType("array", dump(payload))
    return payload


def _field(record: Any, key: str) -> Any:
    # Non-objects and missing keys read as JSON null.
    if isinstance(record, Mapping):
        return record.get(key)
    return None


def decode_global_index(payload: Any, today: Clock = utc_today) -> list[Measurement]:
    """Decode the ``/indice`` response: one global reading per relative day."""

    logger.debug("Global index payload: %s", dump(payload))
    result: list[Measurement] = []
    for record in _require_array(payload):
        measured_on = resolve_json_day(_field(record, DATE_KEY), today)
        map_url = None
        if isinstance(record, Mapping) and MAP_URL_KEY in record:
            raw_url = record[MAP_URL_KEY]
            map_url = raw_url if isinstance(raw_url, str) else dump(raw_url)
        index = require_number(INDEX_KEY, record)
        result.append(Measurement(measured_on, map_url, (GLOBAL_POLLUTANT,), index))
    logger.debug("Decoded %d global measurements", len(result))
    return result


def decode_day_index(payload: Any) -> list[Measurement]:
    """Decode the ``/indiceJour`` response.

    The payload holds an absolute ``date`` and one object per pollutant, keyed
    by the pollutant name (``global`` included).
    """

    logger.debug("Day index payload: %s", dump(payload))
    if not isinstance(payload, Mapping):
        raise WrongType("object", dump(payload))
    measured_on = parse_absolute_date(require_string(DATE_KEY, payload))
    result: list[Measurement] = []
    for pollutant, value in payload.items():
        if pollutant == DATE_KEY:
            continue
        index = require_number(INDEX_KEY, value)
        map_url = optional_string(MAP_URL_KEY, value)
        result.append(Measurement(measured_on, map_url, (pollutant,), index))
    logger.debug("Decoded %d measurements for %s", len(result), measured_on)
    return result


def decode_city_index(payload: Any, today: Clock = utc_today) -> list[Measurement]:
    """Decode the ``/idxville`` response: per city, one reading per relative day."""

    logger.debug("City index payload: %s", dump(payload))
    result: list[Measurement] = []
    for city in _require_array(payload):
        insee = require_string(INSEE_KEY, city)
        for token, value in city.items():
            if token == INSEE_KEY:
                continue
            measured_on = resolve_day_token(token, today)
            index = require_number(INDEX_KEY, value)
            pollutants = string_items(POLLUTANTS_KEY, value)
            result.append(Measurement(measured_on, None, tuple(pollutants), index, insee))
    logger.debug("Decoded %d city measurements", len(result))
    return result


def decode_episodes(payload: Any, today: Clock = utc_today) -> list[Alert]:
    """Decode the ``/episode`` response into one :class:`Alert` per relative day."""

    logger.debug("Episode payload: %s", dump(payload))
    result: list[Alert] = []
    for record in _require_array(payload):
        alert_date = resolve_json_day(_field(record, DATE_KEY), today)
        detail = _field(record, DETAIL_KEY)
        if not isinstance(detail, str) or not detail:
            detail = None
        alert = Alert(alert_date, detail)
        for pollutant, value in record.items():
            if pollutant in (DATE_KEY, DETAIL_KEY):
                continue
            kind = Kind.parse(require_string(KIND_KEY, value))
            level = Level.parse(require_string(LEVEL_KEY, value))
            criteria = [Criteria.parse(token) for token in string_items(CRITERIA_KEY, value)]
            alert.add(pollutant, kind, level, criteria)
        result.append(alert)
    logger.debug("Decoded %d alerts", len(result))
    return result


__all__ = [
    "decode_city_index",
    "decode_day_index",
    "decode_episodes",
    "decode_global_index",
]
