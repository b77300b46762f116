from datetime import date, datetime

from salon_booking.booking.slots import (available_times, calendar_days, combine_date_and_time,
                                         generate_time_slots, is_past_date, is_past_time)


def _minutes(label):
    hours, minutes = label.split(':')
    return int(hours) * 60 + int(minutes)


def test_generates_half_hour_grid():
    slots = generate_time_slots(date(2025, 6, 10))

    assert len(slots) == 18
    assert len(set(slots)) == 18
    assert slots[0] == '09:00'
    assert slots[-1] == '17:30'
    assert all(_minutes(b) - _minutes(a) == 30 for a, b in zip(slots, slots[1:]))


def test_grid_does_not_depend_on_weekday():
    saturday = generate_time_slots(date(2025, 6, 14))
    sunday = generate_time_slots(date(2025, 6, 15))
    monday = generate_time_slots(date(2025, 6, 16))

    assert saturday == sunday == monday


def test_today_excludes_passed_times():
    now = datetime(2025, 6, 10, 14, 5)

    times = available_times(date(2025, 6, 10), now=now)

    assert '09:00' not in times
    assert '14:00' not in times
    assert times == ['14:30', '15:00', '15:30', '16:00', '16:30', '17:00', '17:30']


def test_other_days_offer_every_slot():
    now = datetime(2025, 6, 10, 14, 5)

    assert available_times(date(2025, 6, 11), now=now) == generate_time_slots()


def test_slot_at_current_minute_has_passed():
    now = datetime(2025, 6, 10, 14, 30)

    assert is_past_time('14:30', now)
    assert is_past_time('13:45', now)
    assert not is_past_time('15:00', now)
    assert available_times(date(2025, 6, 10), now=now)[0] == '15:00'


def test_after_closing_nothing_is_left_today():
    assert available_times(date(2025, 6, 10), now=datetime(2025, 6, 10, 18, 0)) == []


def test_past_date():
    today = date(2025, 6, 10)

    assert is_past_date(date(2025, 6, 9), today)
    assert not is_past_date(today, today)
    assert not is_past_date(datetime(2025, 6, 11, 9, 0), today)


def test_combine_date_and_time():
    assert combine_date_and_time(date(2025, 6, 10), '14:30') == datetime(2025, 6, 10, 14, 30)


def test_calendar_grid():
    # June 2025 starts on a Sunday
    days = calendar_days(2025, 6, today=date(2025, 6, 10))

    assert len(days) == 42
    assert days[0].day == 1 and days[0].current_month
    assert days[0].disabled
    assert days[9].day == 10 and not days[9].disabled
    assert days[29].day == 30 and days[29].current_month
    assert all(d.disabled and not d.current_month for d in days[30:])


def test_calendar_grid_pads_with_previous_month():
    # October 2026 starts on a Thursday
    days = calendar_days(2026, 10, today=date(2026, 9, 1))

    assert [d.day for d in days[:4]] == [27, 28, 29, 30]
    assert all(d.disabled and not d.current_month for d in days[:4])
    assert days[4].day == 1 and days[4].current_month and not days[4].disabled
