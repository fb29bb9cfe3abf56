from datetime import UTC, datetime, timedelta, timezone

from src.adapters.clock import FrozenClock, SystemClock, create_clock


def test_system_clock():
    clock = SystemClock()
    now = clock.now_utc()
    assert now.tzinfo is not None
    # Sanity check: is it close to real now?
    diff = abs((datetime.now(UTC) - now).total_seconds())
    assert diff < 1.0


def test_system_clock_local_zone():
    clock = create_clock("Africa/Johannesburg")
    assert clock.timezone_name == "Africa/Johannesburg"
    assert clock.now_local().utcoffset() == timedelta(hours=2)


def test_frozen_clock_naive_is_utc():
    clock = FrozenClock(datetime(2026, 10, 19, 8, 0))
    assert clock.now_utc() == datetime(2026, 10, 19, 8, 0, tzinfo=UTC)
    assert clock.now_local().hour == 10


def test_frozen_clock_normalizes_to_utc():
    plus_two = timezone(timedelta(hours=2))
    clock = FrozenClock(datetime(2026, 10, 19, 10, 0, tzinfo=plus_two))
    assert clock.now_utc().tzinfo == UTC
    assert clock.now_utc().hour == 8


def test_frozen_clock_advance():
    clock = FrozenClock(datetime(2026, 10, 19, 8, 0, tzinfo=UTC))
    clock.advance(timedelta(minutes=90))
    assert clock.now_utc() == datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


def test_unresolvable_zone_only_affects_local_time():
    clock = FrozenClock(datetime(2026, 10, 19, 8, 0, tzinfo=UTC), "Mars/Olympus_Mons")
    assert clock.now_utc() == datetime(2026, 10, 19, 8, 0, tzinfo=UTC)
    assert SystemClock("Mars/Olympus_Mons").now_utc().tzinfo is not None
