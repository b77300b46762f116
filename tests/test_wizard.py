from datetime import date, datetime, timedelta

import pytest

from salon_booking.booking.appointments import book_appointment
from salon_booking.booking.wizard import (BookingWizard, BookingFlowError, IncompleteSelectionError,
                                          STEP_CONFIRMATION, STEP_DATETIME, STEP_DONE, STEP_SERVICE)

NEXT_WEEK = date.today() + timedelta(days=7)


@pytest.fixture
def wizard(storage):
    wizard = BookingWizard()
    wizard.select_category(storage.categories.get(1))
    wizard.select_service(storage.services.get(3))
    return wizard


def test_selecting_a_service_advances(wizard):
    assert wizard.step == STEP_DATETIME
    assert wizard.service.name == 'Nail Art'


def test_service_must_belong_to_category(storage):
    wizard = BookingWizard()
    wizard.select_category(storage.categories.get(2))

    with pytest.raises(BookingFlowError):
        wizard.select_service(storage.services.get(3))
    assert wizard.step == STEP_SERVICE


def test_continue_requires_date_and_time(wizard):
    with pytest.raises(IncompleteSelectionError) as excinfo:
        wizard.proceed()
    assert str(excinfo.value) == 'Please select a date and time to continue.'

    wizard.select_date(NEXT_WEEK)
    with pytest.raises(IncompleteSelectionError):
        wizard.proceed()
    assert wizard.step == STEP_DATETIME


def test_past_days_cannot_be_selected(wizard):
    with pytest.raises(BookingFlowError):
        wizard.select_date(date(2025, 6, 9), today=date(2025, 6, 10))
    assert wizard.date is None


def test_time_must_be_offered(wizard):
    wizard.select_date(date(2025, 6, 10), today=date(2025, 6, 10))

    with pytest.raises(BookingFlowError):
        wizard.select_time('18:00')
    with pytest.raises(BookingFlowError):
        wizard.select_time('14:00', now=datetime(2025, 6, 10, 14, 5))
    wizard.select_time('14:30', now=datetime(2025, 6, 10, 14, 5))
    assert wizard.appointment_date == datetime(2025, 6, 10, 14, 30)


def test_changing_date_resets_time(wizard):
    wizard.select_date(NEXT_WEEK)
    wizard.select_time('10:00')

    wizard.select_date(NEXT_WEEK + timedelta(days=1))

    assert wizard.time is None
    assert wizard.appointment_date is None


def test_back_keeps_selection(wizard):
    wizard.select_date(NEXT_WEEK)
    wizard.select_time('10:00')
    wizard.proceed()

    wizard.back()
    assert wizard.step == STEP_DATETIME
    assert wizard.time == '10:00'

    wizard.back()
    assert wizard.step == STEP_SERVICE
    assert wizard.service.name == 'Nail Art'
    assert wizard.date == NEXT_WEEK


def test_payload(wizard):
    wizard.select_date(NEXT_WEEK)
    wizard.select_time('10:00')
    wizard.proceed()

    payload = wizard.payload('Ana Silva', 'ana@example.com', '912345678', notes='Short nails')

    assert payload == {
        'serviceId': 3,
        'date': datetime.combine(NEXT_WEEK, datetime.min.time()).replace(hour=10).isoformat(),
        'client': {'name': 'Ana Silva', 'email': 'ana@example.com', 'phone': '912345678'},
        'notes': 'Short nails',
    }


def test_failed_submit_stays_on_confirmation(storage, wizard):
    wizard.select_date(NEXT_WEEK)
    wizard.select_time('10:00')
    wizard.proceed()
    submit = lambda payload: book_appointment(storage, payload)

    assert wizard.submit(submit, 'Ana Silva', 'not-an-email', '912345678') is None
    assert wizard.step == STEP_CONFIRMATION
    assert wizard.error == 'Invalid appointment data'
    assert storage.appointments.list() == []

    appointment = wizard.submit(submit, 'Ana Silva', 'ana@example.com', '912345678')
    assert appointment.status == 'pending'
    assert wizard.step == STEP_DONE
    assert wizard.error is None
    assert wizard.appointment is appointment
