"""
Time series entry parsing and validation for forecasting, rejecting unparsable dates and non-finite values up front and converting entries into regression-ready points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Any, List, Mapping, Optional, Sequence, Union

from engine.enums import ErrorKind
from engine.errors import PredictionInputError
from engine.regression.linear import DataPoint


@dataclass(frozen=True)
class TimeSeriesEntry:
    date: str
    value: float
    unit: Optional[str] = None


EntryLike = Union[TimeSeriesEntry, Mapping[str, Any]]


def parse_date(text: Any, index: Optional[int] = None) -> date:
    where = f" at index {index}" if index is not None else ""
    if isinstance(text, datetime):
        return text.date()
    if isinstance(text, date):
        return text
    if not isinstance(text, str) or not text.strip():
        raise PredictionInputError(ErrorKind.invalid_date, f"Invalid date{where}: {text!r}", index)

    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        return datetime.fromisoformat(raw).date()
    except ValueError:
        raise PredictionInputError(ErrorKind.invalid_date, f"Invalid date{where}: {text}", index) from None


def date_to_numeric(text: Any) -> int:
    d = parse_date(text)
    return int(datetime(d.year, d.month, d.day, tzinfo=timezone.utc).timestamp() * 1000)


def numeric_to_date(ms: float) -> str:
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc).isoformat().replace("+00:00", "Z")


def _coerce_entry(raw: EntryLike, index: int) -> TimeSeriesEntry:
    if isinstance(raw, TimeSeriesEntry):
        return raw
    if not isinstance(raw, Mapping):
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Invalid series entry at index {index}: must be a mapping or TimeSeriesEntry",
            index,
        )
    if raw.get("date") is None or raw.get("value") is None:
        raise PredictionInputError(
            ErrorKind.invalid_argument,
            f"Invalid series entry at index {index}: missing required properties (date, value)",
            index,
        )
    return TimeSeriesEntry(date=raw["date"], value=raw["value"], unit=raw.get("unit"))


def validate_series(series: Sequence[EntryLike]) -> List[TimeSeriesEntry]:
    if isinstance(series, (str, bytes)) or not isinstance(series, Sequence):
        raise PredictionInputError(ErrorKind.invalid_argument, "Series must be a sequence of entries")

    entries: List[TimeSeriesEntry] = []
    for i, raw in enumerate(series):
        entry = _coerce_entry(raw, i)
        value = entry.value
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
            raise PredictionInputError(
                ErrorKind.non_finite_value,
                f"Invalid value at index {i}: {value!r} must be a finite number",
                i,
            )
        parse_date(entry.date, i)
        if not isinstance(entry.date, str):
            entry = replace(entry, date=entry.date.isoformat())
        entries.append(entry)
    return entries


def to_regression_points(entries: Sequence[TimeSeriesEntry]) -> List[DataPoint]:
    return [DataPoint(x=float(i), y=float(e.value)) for i, e in enumerate(entries)]
