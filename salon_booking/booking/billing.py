"""Revenue figures for the back office, computed from confirmed appointments."""
from collections import OrderedDict
from datetime import date, datetime, timedelta
from decimal import Decimal

from salon_booking.booking.appointments import appointments_with_details
from salon_booking.models.appointment import STATUS_CONFIRMED

CHART_DAYS = 7


def _day(value):
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.date() if isinstance(value, datetime) else value


def _total(rows):
    return sum((Decimal(row['service']['price']) for row in rows), Decimal('0'))


def revenue_summary(storage, today=None):
    """Daily, weekly (Sunday start) and monthly revenue up to and including today.

    Prices are read from the current catalog; no snapshot is taken at booking.
    """
    today = today or date.today()
    if isinstance(today, datetime):
        today = today.date()

    confirmed = appointments_with_details(storage, status=STATUS_CONFIRMED)
    for row in confirmed:
        row['day'] = _day(row['date'])

    week_start = today - timedelta(days=(today.weekday() + 1) % 7)
    month_start = today.replace(day=1)

    daily_chart = OrderedDict()
    for offset in range(CHART_DAYS - 1, -1, -1):
        daily_chart[today - timedelta(days=offset)] = Decimal('0')

    by_service = {}
    for row in confirmed:
        price = Decimal(row['service']['price'])
        if row['day'] in daily_chart:
            daily_chart[row['day']] += price
        entry = by_service.setdefault(row['service']['name'], {'name': row['service']['name'],
                                                               'total': Decimal('0'), 'count': 0})
        entry['total'] += price
        entry['count'] += 1

    return {
        'daily': _total(r for r in confirmed if r['day'] == today),
        'weekly': _total(r for r in confirmed if week_start <= r['day'] <= today),
        'monthly': _total(r for r in confirmed if month_start <= r['day'] <= today),
        'dailyChart': [{'date': day.isoformat(), 'total': total} for day, total in daily_chart.items()],
        'byService': sorted(by_service.values(), key=lambda entry: entry['total'], reverse=True),
    }
