from datetime import date, datetime, timezone

from bookworm.shared.core.clock import FixedClock, SystemClock


def test_fixed_clock_from_date():
    clock = FixedClock(date(2024, 1, 2))

    assert clock.today() == date(2024, 1, 2)
    assert clock.now() == datetime(2024, 1, 2, 0, 0)


def test_fixed_clock_from_datetime():
    moment = datetime(2024, 1, 2, 15, 30, tzinfo=timezone.utc)

    assert FixedClock(moment).now() is moment
    assert FixedClock(moment).today() == date(2024, 1, 2)


def test_system_clock_uses_timezone():
    now = SystemClock(timezone.utc).now()

    assert now.tzinfo is timezone.utc
