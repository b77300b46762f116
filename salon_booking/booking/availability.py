"""Per-day availability overrides set by an administrator."""
from datetime import datetime, time

from salon_booking.models import Availability


def start_of_day(value):
    """Normalize a date or datetime to midnight of the same calendar day"""
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time(0, 0))


def list_availability(storage):
    return storage.availability.list()


def get_availability(storage, day):
    """Return the record for the day, or an unsaved 'available' default.

    A missing record is never an error: days are open unless blocked.
    """
    record = storage.availability.first_by(date=start_of_day(day))
    if record is None:
        return Availability(date=start_of_day(day), is_available=True)
    return record


def is_day_available(storage, day):
    return get_availability(storage, day).is_available


def set_availability(storage, day, is_available):
    """Upsert the flag for a calendar day.

    Returns (record, created). Existing records are overwritten, so the last
    writer for a day wins.
    """
    day = start_of_day(day)
    existing = storage.availability.first_by(date=day)
    if existing is not None:
        return storage.availability.update(existing.id, {'is_available': is_available}), False
    return storage.availability.add(Availability(date=day, is_available=is_available)), True
