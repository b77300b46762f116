from datetime import date, datetime

from salon_booking.errors import ValidationError


def parse_day(value, field='date'):
    """Parse 'YYYY-MM-DD' (or a full ISO timestamp) into a date"""
    if not value:
        raise ValidationError('Invalid date', errors={field: ['This field is required.']})
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    except ValueError:
        raise ValidationError('Invalid date', errors={field: ['Invalid date format. Use YYYY-MM-DD.']}) from None
