from datetime import datetime
from decimal import Decimal

import pytest

from salon_booking.booking.appointments import (appointments_by_date, appointments_by_status,
                                                appointments_with_details, book_appointment,
                                                create_client, delete_appointment, update_appointment,
                                                update_client)
from salon_booking.booking.availability import set_availability
from salon_booking.errors import ConflictError, NotFoundError, ValidationError
from salon_booking.models import Appointment

from conftest import booking_payload


def test_booking_with_new_email_creates_client(storage):
    appointment = book_appointment(storage, booking_payload())

    clients = storage.clients.list()
    assert len(clients) == 1
    assert clients[0].name == 'Ana Silva'
    assert clients[0].total_spent == 0
    assert clients[0].last_visit is None
    assert appointment.client_id == clients[0].id
    assert appointment.status == 'pending'
    assert appointment.date == datetime(2025, 6, 10, 14, 30)
    assert len(storage.appointments.list()) == 1


def test_booking_with_known_email_reuses_client(storage):
    first = book_appointment(storage, booking_payload())
    second = book_appointment(storage, booking_payload(name='Ana S.', date='2025-06-12T10:00'))

    assert len(storage.clients.list()) == 1
    assert second.client_id == first.client_id
    assert second.id != first.id
    assert second.status == 'pending'
    # The stored name is not overwritten by later bookings
    assert storage.clients.get(first.client_id).name == 'Ana Silva'


def test_caller_cannot_choose_status(storage):
    appointment = book_appointment(storage, booking_payload(status='confirmed'))

    assert appointment.status == 'pending'


def test_same_slot_can_be_booked_twice(storage):
    book_appointment(storage, booking_payload())
    book_appointment(storage, booking_payload(email='rita@example.com', name='Rita'))

    assert len(appointments_by_date(storage, datetime(2025, 6, 10))) == 2


def test_notes_are_optional(storage):
    without = book_appointment(storage, booking_payload())
    with_notes = book_appointment(storage, booking_payload(notes='French tips'))

    assert without.notes is None
    assert with_notes.notes == 'French tips'


def test_utc_timestamp_is_accepted(storage):
    appointment = book_appointment(storage, booking_payload(date='2025-06-10T13:30:00.000Z'))

    assert appointment.date.tzinfo is None


def test_validation_reports_every_field(storage):
    with pytest.raises(ValidationError) as excinfo:
        book_appointment(storage, {'date': 'not-a-date', 'client': {'email': 'nope'}})

    errors = excinfo.value.errors
    assert excinfo.value.message == 'Invalid appointment data'
    assert set(errors) == {'service_id', 'date', 'client'}
    assert set(errors['client']) == {'name', 'email', 'phone'}
    assert storage.clients.list() == []
    assert storage.appointments.list() == []


def test_unknown_service_is_a_field_error(storage):
    with pytest.raises(ValidationError) as excinfo:
        book_appointment(storage, booking_payload(service_id=99))

    assert 'service_id' in excinfo.value.errors
    assert storage.clients.list() == []


def test_blocked_day_only_rejected_when_enforced(storage):
    set_availability(storage, datetime(2025, 6, 10), False)

    assert book_appointment(storage, booking_payload()).status == 'pending'
    with pytest.raises(ValidationError) as excinfo:
        book_appointment(storage, booking_payload(), enforce_availability=True)
    assert 'date' in excinfo.value.errors


def test_admin_transitions_keep_a_single_record(storage):
    appointment = book_appointment(storage, booking_payload())

    for status in ('confirmed', 'canceled', 'pending'):
        updated, _ = update_appointment(storage, appointment.id, {'status': status})
        assert updated.status == status
        assert len(storage.appointments.list()) == 1
        assert storage.appointments.get(appointment.id).status == status


def test_update_returns_previous_status(storage):
    appointment = book_appointment(storage, booking_payload())

    _, previous = update_appointment(storage, appointment.id, {'status': 'confirmed'})

    assert previous == 'pending'
    assert appointments_by_status(storage, 'confirmed') == [appointment]
    assert appointments_by_status(storage, 'pending') == []


def test_unknown_status_is_rejected(storage):
    appointment = book_appointment(storage, booking_payload())

    with pytest.raises(ValidationError):
        update_appointment(storage, appointment.id, {'status': 'done'})
    assert storage.appointments.get(appointment.id).status == 'pending'


def test_update_or_delete_missing_appointment(storage):
    with pytest.raises(NotFoundError):
        update_appointment(storage, 42, {'status': 'confirmed'})
    with pytest.raises(NotFoundError):
        delete_appointment(storage, 42)


def test_delete_appointment(storage):
    appointment = book_appointment(storage, booking_payload())

    delete_appointment(storage, appointment.id)

    assert storage.appointments.list() == []


def test_confirmation_leaves_client_totals_alone_by_default(storage):
    appointment = book_appointment(storage, booking_payload())

    update_appointment(storage, appointment.id, {'status': 'confirmed'})

    client = storage.clients.get(appointment.client_id)
    assert client.total_spent == 0
    assert client.last_visit is None


def test_spending_tracking(storage):
    appointment = book_appointment(storage, booking_payload())

    update_appointment(storage, appointment.id, {'status': 'confirmed'}, track_spending=True)
    client = storage.clients.get(appointment.client_id)
    assert client.total_spent == Decimal('35')
    assert client.last_visit == datetime(2025, 6, 10, 14, 30)

    update_appointment(storage, appointment.id, {'status': 'canceled'}, track_spending=True)
    assert storage.clients.get(appointment.client_id).total_spent == Decimal('0')


def test_details_join_client_and_service(storage):
    appointment = book_appointment(storage, booking_payload())
    storage.appointments.add(Appointment(client_id=77, service_id=88, date=datetime(2025, 6, 11, 9, 0)))

    rows = appointments_with_details(storage)

    assert rows[0]['id'] == appointment.id
    assert rows[0]['client']['name'] == 'Ana Silva'
    assert rows[0]['service']['name'] == 'Nail Art'
    assert rows[0]['service']['price'] == 35
    assert rows[1]['client'] == {'name': 'Unknown Client'}
    assert rows[1]['service'] == {'name': 'Unknown Service', 'price': 0}
    assert appointments_with_details(storage, status='confirmed') == []


def test_create_client_rejects_duplicate_email(storage):
    create_client(storage, 'Ana Silva', 'ana@example.com', '912345678')

    with pytest.raises(ConflictError):
        create_client(storage, 'Other Ana', 'ana@example.com', '900000000')


def test_update_client_keeps_email_unique(storage):
    ana = create_client(storage, 'Ana Silva', 'ana@example.com', '912345678')
    bia = create_client(storage, 'Bia', 'bia@example.com', '913333333')

    with pytest.raises(ConflictError):
        update_client(storage, bia.id, {'email': 'ana@example.com'})
    assert storage.clients.get(bia.id).email == 'bia@example.com'

    assert update_client(storage, ana.id, {'email': 'ana@example.com', 'phone': '911111111'}).phone == '911111111'
    with pytest.raises(NotFoundError):
        update_client(storage, 99, {'phone': '911111111'})
