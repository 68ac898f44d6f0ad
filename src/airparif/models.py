"""Domain records built from AirParif responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, Iterator

from airparif.errors import UnknownEnumValue

GLOBAL_POLLUTANT = "global"


@dataclass(frozen=True, slots=True)
class Measurement:
    """A pollution index reading for one date.

    ``pollutants`` lists the pollutants the reading aggregates; readings that
    are not pollutant specific use :data:`GLOBAL_POLLUTANT`. City readings may
    come without any pollutant. ``insee`` is only set for city scoped readings.
    """

    date: date
    map_url: str | None
    pollutants: tuple[str, ...]
    index: int
    insee: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pollutants", tuple(self.pollutants))
        if self.index < 0:
            raise ValueError(f"Index must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return (
            f"{self.date.isoformat()} (city: {self.insee}) : {list(self.pollutants)} = {self.index}"
            f" (map: {self.map_url})"
        )


class Day(Enum):
    """Relative day accepted by the day index endpoint."""

    YESTERDAY = "hier"
    TODAY = "jour"
    TOMORROW = "demain"

    @property
    def token(self) -> str:
        return self.value


class Kind(Enum):
    FORECAST = "forecast"
    OBSERVED = "observed"

    @classmethod
    def parse(cls, token: str) -> "Kind":
        try:
            return _KIND_TOKENS[token]
        except KeyError:
            raise UnknownEnumValue(token) from None


class Level(Enum):
    NORMAL = "normal"
    INFO = "info"
    ALERT = "alert"

    @classmethod
    def parse(cls, token: str) -> "Level":
        try:
            return _LEVEL_TOKENS[token]
        except KeyError:
            raise UnknownEnumValue(token) from None


class Criteria(Enum):
    """Threshold that triggered an alert."""

    AREA = "area"
    POPULATION = "population"

    @classmethod
    def parse(cls, token: str) -> "Criteria":
        try:
            return _CRITERIA_TOKENS[token]
        except KeyError:
            raise UnknownEnumValue(token) from None


_KIND_TOKENS = {"prevu": Kind.FORECAST, "constate": Kind.OBSERVED}
_LEVEL_TOKENS = {"normal": Level.NORMAL, "info": Level.INFO, "alerte": Level.ALERT}
_CRITERIA_TOKENS = {"km": Criteria.AREA, "pop": Criteria.POPULATION}


@dataclass(frozen=True, slots=True)
class PollutantAlertDetail:
    """Severity of an alert for a single pollutant."""

    pollutant: str
    kind: Kind
    level: Level
    criteria: tuple[Criteria, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "criteria", tuple(self.criteria))

    def __str__(self) -> str:
        criteria = ", ".join(item.value for item in self.criteria)
        return f"{self.pollutant} : {self.kind.value} {self.level.value} [{criteria}]"


@dataclass
class Alert:
    """A pollution episode for one date.

    Pollutant details are only appended through :meth:`add`.
    """

    date: date
    detail: str | None = None
    _details: list[PollutantAlertDetail] = field(default_factory=list, init=False)

    @property
    def pollutants(self) -> tuple[PollutantAlertDetail, ...]:
        return tuple(self._details)

    def add(
        self,
        pollutant: str,
        kind: Kind,
        level: Level,
        criteria: Iterable[Criteria] = (),
    ) -> PollutantAlertDetail:
        entry = PollutantAlertDetail(pollutant, kind, level, tuple(criteria))
        self._details.append(entry)
        return entry

    def __iter__(self) -> Iterator[PollutantAlertDetail]:
        return iter(self.pollutants)

    def __str__(self) -> str:
        details = "; ".join(str(item) for item in self.pollutants)
        return f"{self.date.isoformat()} [{details}] (detail: {self.detail})"


__all__ = [
    "Alert",
    "Criteria",
    "Day",
    "GLOBAL_POLLUTANT",
    "Kind",
    "Level",
    "Measurement",
    "PollutantAlertDetail",
]
