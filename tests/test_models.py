from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from airparif.errors import UnknownEnumValue
from airparif.models import Alert, Criteria, Day, Kind, Level, Measurement, PollutantAlertDetail


def test_enum_tokens() -> None:
    assert Kind.parse("prevu") is Kind.FORECAST
    assert Kind.parse("constate") is Kind.OBSERVED
    assert Level.parse("normal") is Level.NORMAL
    assert Level.parse("info") is Level.INFO
    assert Level.parse("alerte") is Level.ALERT
    assert Criteria.parse("km") is Criteria.AREA
    assert Criteria.parse("pop") is Criteria.POPULATION


@pytest.mark.parametrize("parser", [Kind.parse, Level.parse, Criteria.parse])
def test_enum_unknown_token(parser) -> None:
    with pytest.raises(UnknownEnumValue) as excinfo:
        parser("forecast")

    assert excinfo.value.token == "forecast"


def test_day_tokens() -> None:
    assert [day.token for day in Day] == ["hier", "jour", "demain"]


def test_measurement_is_immutable_value() -> None:
    measurement = Measurement(date(2020, 1, 1), None, ["o3"], 42, "75101")

    assert measurement.pollutants == ("o3",)
    assert measurement == Measurement(date(2020, 1, 1), None, ("o3",), 42, "75101")
    with pytest.raises(FrozenInstanceError):
        measurement.index = 3  # type: ignore[misc]
    assert str(measurement) == "2020-01-01 (city: 75101) : ['o3'] = 42 (map: None)"


def test_measurement_rejects_negative_index() -> None:
    with pytest.raises(ValueError):
        Measurement(date(2020, 1, 1), None, ("global",), -1)


def test_alert_iterates_details_in_insertion_order() -> None:
    alert = Alert(date(2020, 1, 1))
    alert.add("o3", Kind.OBSERVED, Level.INFO, [Criteria.AREA, Criteria.POPULATION])
    alert.add("so2", Kind.OBSERVED, Level.ALERT, [Criteria.POPULATION])
    alert.add("no2", Kind.OBSERVED, Level.NORMAL, [Criteria.AREA])

    assert [detail.pollutant for detail in alert] == ["o3", "so2", "no2"]
    assert tuple(alert) == alert.pollutants
    assert alert.pollutants[1] == PollutantAlertDetail("so2", Kind.OBSERVED, Level.ALERT, (Criteria.POPULATION,))
    assert str(alert.pollutants[0]) == "o3 : observed info [area, population]"


def test_alert_details_only_grow_through_add() -> None:
    alert = Alert(date(2020, 1, 1), "Evitez les déplacements")

    with pytest.raises(AttributeError):
        alert.pollutants = ()  # type: ignore[misc]
    with pytest.raises(TypeError):
        Alert(date(2020, 1, 1), None, [])  # type: ignore[call-arg]

    snapshot = alert.pollutants
    alert.add("o3", Kind.FORECAST, Level.INFO)

    assert snapshot == ()
    assert alert.pollutants == (PollutantAlertDetail("o3", Kind.FORECAST, Level.INFO, ()),)
    assert alert != Alert(date(2020, 1, 1), "Evitez les déplacements")
