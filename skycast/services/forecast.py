"""Group 3-hour forecast samples by calendar day and reduce each day to a summary."""

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, tzinfo

from ..models.weather import DayBucket, DaySummary, ForecastSample
from .labels import title_case
from .units import TemperatureUnit, convert, round_half_away

MAX_FORECAST_DAYS = 5


def day_key(timestamp: int, tz: tzinfo = UTC) -> str:
    """Calendar date (``YYYY-MM-DD``) of a unix timestamp in ``tz``."""
    return datetime.fromtimestamp(timestamp, tz).date().isoformat()


def group_by_day(samples: Iterable[ForecastSample], tz: tzinfo = UTC) -> list[DayBucket]:
    """Bucket samples by calendar day.

    Buckets come out in order of first occurrence and keep their samples in
    encounter order. Nothing is dropped or deduplicated.
    """
    by_day: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        by_day.setdefault(day_key(sample.timestamp, tz), []).append(sample)
    return [DayBucket(day_key=key, samples=tuple(items)) for key, items in by_day.items()]


def dominant_condition(descriptions: Iterable[str]) -> str:
    """Most frequent description, case-insensitive, title-cased.

    Ties go to whichever tied description was seen first.
    """
    counts = Counter(d.lower() for d in descriptions)
    if not counts:
        return ""
    # most_common keeps first-encountered order among equal counts
    best, _ = counts.most_common(1)[0]
    return title_case(best)


def summarize(bucket: DayBucket, unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT) -> DaySummary:
    """Reduce one day's samples to min/max temperature, condition and icon."""
    if not bucket.samples:
        raise ValueError(f"Cannot summarize empty bucket for {bucket.day_key}")

    temps = [convert(s.temperature_kelvin, unit) for s in bucket.samples]
    midpoint = bucket.samples[len(bucket.samples) // 2]

    return DaySummary(
        day_key=bucket.day_key,
        min_temperature=round_half_away(min(temps)),
        max_temperature=round_half_away(max(temps)),
        dominant_condition=dominant_condition(s.condition_description for s in bucket.samples),
        representative_icon_id=midpoint.icon_id,
    )


def summarize_days(
    buckets: Sequence[DayBucket],
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    limit: int = MAX_FORECAST_DAYS,
) -> list[DaySummary]:
    """Summarize the first ``limit`` days."""
    return [summarize(bucket, unit) for bucket in buckets[:limit]]
