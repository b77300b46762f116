"""
Time-slot generation for the booking calendar.

The salon offers a fixed half-hour grid between opening and closing time,
the same for every day of the week. When the requested day is today, slots
whose time has already passed are left out.
"""
import calendar
from collections import namedtuple
from datetime import date, datetime, time, timedelta

OPENING_TIME = time(9, 0)
CLOSING_TIME = time(18, 0)
SLOT_INTERVAL = 30  # Minutes between time slots

# Cells shown by the month picker: 6 rows of 7 days
CALENDAR_CELLS = 42

CalendarDay = namedtuple('CalendarDay', ['day', 'current_month', 'disabled'])


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    return value


def generate_time_slots(day=None):
    """Return every HH:MM label in [OPENING_TIME, CLOSING_TIME), ascending.

    The grid does not depend on the day; the argument is accepted so callers
    can treat this and available_times() alike.
    """
    labels = []
    current = datetime.combine(date.min, OPENING_TIME)
    closing = datetime.combine(date.min, CLOSING_TIME)
    while current < closing:
        labels.append(current.strftime('%H:%M'))
        current += timedelta(minutes=SLOT_INTERVAL)
    return labels


def parse_time_label(label):
    """Split an 'HH:MM' label into (hour, minute)"""
    hours, minutes = label.split(':')
    return int(hours), int(minutes)


def is_past_time(label, now=None):
    """True when the label's time of day is not after the current time"""
    now = now or datetime.now()
    hour, minute = parse_time_label(label)
    if hour < now.hour:
        return True
    return hour == now.hour and minute <= now.minute


def is_past_date(day, today=None):
    today = _as_date(today) or date.today()
    return _as_date(day) < today


def available_times(day, now=None):
    """Slots that can still be offered for the given day"""
    now = now or datetime.now()
    labels = generate_time_slots(day)
    if _as_date(day) == now.date():
        labels = [label for label in labels if not is_past_time(label, now)]
    return labels


def combine_date_and_time(day, label):
    hour, minute = parse_time_label(label)
    return datetime.combine(_as_date(day), time(hour, minute))


def calendar_days(year, month, today=None):
    """Build the Sunday-first month grid used by the date picker.

    Days of the previous and next month pad the grid and are always disabled,
    as are days of the month before today.
    """
    today = _as_date(today) or date.today()
    days = []

    # Python weekday() is Monday=0, the grid starts on Sunday
    first_column = (date(year, month, 1).weekday() + 1) % 7
    prev_year, prev_month = (year - 1, 12) if month == 1 else (year, month - 1)
    prev_month_length = calendar.monthrange(prev_year, prev_month)[1]
    for offset in range(first_column - 1, -1, -1):
        days.append(CalendarDay(prev_month_length - offset, False, True))

    month_length = calendar.monthrange(year, month)[1]
    for day in range(1, month_length + 1):
        days.append(CalendarDay(day, True, date(year, month, day) < today))

    for day in range(1, CALENDAR_CELLS - len(days) + 1):
        days.append(CalendarDay(day, False, True))

    return days
