from datetime import datetime, timedelta, timezone

from weatherdesk.models.weather import ForecastSample
from weatherdesk.services.forecast import bucket_forecast, day_label


def _sample(ts: datetime, temp: float, condition: str) -> ForecastSample:
    return ForecastSample(timestamp=ts, temperature=temp, condition=condition)


def test_middle_sample_condition_and_extremes():
    day1 = datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc)
    day2 = datetime(2024, 1, 2, 6, 0, tzinfo=timezone.utc)
    samples = [
        _sample(day1, 10, "rain"),
        _sample(day1 + timedelta(hours=3), 18, "clouds"),
        _sample(day1 + timedelta(hours=6), 14, "rain"),
        _sample(day2, 5, "snow"),
    ]

    days = bucket_forecast(samples)

    assert [d.model_dump() for d in days] == [
        {"date": "Mon, Jan 1", "high": 18, "low": 10, "condition": "clouds"},
        {"date": "Tue, Jan 2", "high": 5, "low": 5, "condition": "snow"},
    ]


def test_even_sized_group_uses_upper_middle():
    start = datetime(2024, 3, 5, 0, 0, tzinfo=timezone.utc)
    samples = [
        _sample(start + timedelta(hours=3 * i), 1.0, cond)
        for i, cond in enumerate(["clear", "clouds", "rain", "snow"])
    ]

    assert bucket_forecast(samples)[0].condition == "rain"


def test_keeps_only_five_days_sorted_by_date():
    start = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
    samples = [
        _sample(start + timedelta(hours=3 * i), float(i), "clear") for i in range(8 * 7)
    ]

    days = bucket_forecast(samples)

    assert len(days) == 5
    assert [d.date for d in days] == [
        day_label((start + timedelta(days=i)).date()) for i in range(5)
    ]


def test_sorts_by_date_not_label_or_arrival():
    # "Fri, Feb 2" sorts before "Wed, Jan 31" as text; date order must win.
    late = datetime(2024, 2, 2, 12, 0, tzinfo=timezone.utc)
    early = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)
    samples = [_sample(late, 3, "rain"), _sample(early, 7, "clear")]

    days = bucket_forecast(samples)

    assert [d.date for d in days] == ["Wed, Jan 31", "Fri, Feb 2"]


def test_groups_by_the_samples_own_utc_offset():
    tz = timezone(timedelta(hours=-5))
    # 23:00 and 02:00 local are on different days even though both are Jan 2 in UTC.
    samples = [
        _sample(datetime(2024, 1, 1, 23, 0, tzinfo=tz), 4, "clear"),
        _sample(datetime(2024, 1, 2, 2, 0, tzinfo=tz), 2, "snow"),
    ]

    days = bucket_forecast(samples)

    assert [d.date for d in days] == ["Mon, Jan 1", "Tue, Jan 2"]


def test_rounds_half_up():
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
    samples = [_sample(ts, 2.5, "clear"), _sample(ts, -3.5, "clear")]

    day = bucket_forecast(samples)[0]

    assert day.high == 3
    assert day.low == -3


def test_fewer_days_and_empty_input():
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert len(bucket_forecast([_sample(ts, 1, "clear")])) == 1
    assert bucket_forecast([]) == []


def test_output_is_deterministic():
    start = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
    samples = [
        _sample(start + timedelta(hours=3 * i), (i * 7) % 11 - 2.5, ["rain", "clear", "clouds"][i % 3])
        for i in range(40)
    ]

    first = [d.model_dump_json() for d in bucket_forecast(samples)]
    second = [d.model_dump_json() for d in bucket_forecast(list(samples))]

    assert first == second
