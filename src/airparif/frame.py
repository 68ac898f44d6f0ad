"""Tabular views of decoded records."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from airparif.models import Alert, Measurement

MEASUREMENT_COLUMNS = ["date", "insee", "pollutants", "index", "map_url"]
ALERT_COLUMNS = ["date", "detail", "pollutant", "kind", "level", "criteria"]


def measurements_to_frame(measurements: Iterable[Measurement]) -> pd.DataFrame:
    """One row per measurement, pollutants joined with ``,``, ordered by date."""

    rows = [
        {
            "date": measurement.date,
            "insee": measurement.insee,
            "pollutants": ",".join(measurement.pollutants),
            "index": measurement.index,
            "map_url": measurement.map_url,
        }
        for measurement in measurements
    ]
    frame = pd.DataFrame.from_records(rows, columns=MEASUREMENT_COLUMNS)
    if not frame.empty:
        frame.sort_values("date", inplace=True, kind="stable")
        frame.reset_index(drop=True, inplace=True)
    return frame


def alerts_to_frame(alerts: Iterable[Alert]) -> pd.DataFrame:
    """One row per pollutant detail; an alert without details keeps a single row."""

    rows: list[dict[str, object]] = []
    for alert in alerts:
        details = list(alert)
        if not details:
            rows.append({"date": alert.date, "detail": alert.detail})
            continue
        for detail in details:
            rows.append(
                {
                    "date": alert.date,
                    "detail": alert.detail,
                    "pollutant": detail.pollutant,
                    "kind": detail.kind.value,
                    "level": detail.level.value,
                    "criteria": ",".join(item.value for item in detail.criteria),
                }
            )
    frame = pd.DataFrame.from_records(rows, columns=ALERT_COLUMNS)
    if not frame.empty:
        frame.sort_values("date", inplace=True, kind="stable")
        frame.reset_index(drop=True, inplace=True)
    return frame


__all__ = ["ALERT_COLUMNS", "MEASUREMENT_COLUMNS", "alerts_to_frame", "measurements_to_frame"]
