from datetime import date, datetime
from decimal import Decimal

from salon_booking.booking.billing import revenue_summary
from salon_booking.models import Appointment, Client

TODAY = date(2025, 6, 11)  # A Wednesday; the week started on Sunday the 8th


def _appointment(storage, client, service_id, when, status='confirmed'):
    appointment = Appointment(client_id=client.id, service_id=service_id, date=when)
    appointment.set_status(status)
    return storage.appointments.add(appointment)


def test_revenue_counts_confirmed_appointments_only(storage):
    client = storage.clients.add(Client(name='Ana Silva', email='ana@example.com', phone='912345678'))
    _appointment(storage, client, 3, datetime(2025, 6, 11, 10, 0))               # Nail Art, today
    _appointment(storage, client, 1, datetime(2025, 6, 9, 15, 0))                # Gel Simples, this week
    _appointment(storage, client, 2, datetime(2025, 6, 2, 11, 30))               # Pedicure, this month
    _appointment(storage, client, 3, datetime(2025, 5, 30, 9, 0))                # Nail Art, last month
    _appointment(storage, client, 1, datetime(2025, 6, 11, 16, 0), 'pending')
    _appointment(storage, client, 1, datetime(2025, 6, 11, 17, 0), 'canceled')

    summary = revenue_summary(storage, today=TODAY)

    assert summary['daily'] == Decimal('35')
    assert summary['weekly'] == Decimal('60')
    assert summary['monthly'] == Decimal('90')
    assert summary['byService'][0] == {'name': 'Nail Art', 'total': Decimal('70'), 'count': 2}


def test_daily_chart_covers_last_week(storage):
    client = storage.clients.add(Client(name='Ana Silva', email='ana@example.com', phone='912345678'))
    _appointment(storage, client, 1, datetime(2025, 6, 5, 10, 0))

    chart = revenue_summary(storage, today=TODAY)['dailyChart']

    assert [point['date'] for point in chart][0] == '2025-06-05'
    assert chart[-1]['date'] == '2025-06-11'
    assert len(chart) == 7
    assert chart[0]['total'] == Decimal('25')
    assert sum(point['total'] for point in chart) == Decimal('25')


def test_empty_storage(storage):
    summary = revenue_summary(storage, today=TODAY)

    assert summary['daily'] == summary['weekly'] == summary['monthly'] == 0
    assert summary['byService'] == []
