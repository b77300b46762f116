"""
Appointment lifecycle: booking from the public flow and administrative
status changes.

Booking looks the client up by email (creating it on first visit) and then
inserts the appointment. The two writes are sequential and not atomic, and
nothing prevents two appointments in the same slot.
"""
import logging
from datetime import timedelta
from decimal import Decimal

from salon_booking.booking.availability import is_day_available, start_of_day
from salon_booking.client.forms import BookingForm
from salon_booking.errors import ConflictError, NotFoundError, ValidationError
from salon_booking.models import Appointment, Client
from salon_booking.models.appointment import STATUSES, STATUS_CONFIRMED
from salon_booking.utils.forms import validate_payload

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = {'name': 'Unknown Client'}
UNKNOWN_SERVICE = {'name': 'Unknown Service', 'price': 0}


def find_or_create_client(storage, name, email, phone):
    """Reuse the client registered with this email or create a new one.

    Returns (client, created).
    """
    existing = storage.clients.first_by(email=email)
    if existing is not None:
        return existing, False
    client = storage.clients.add(Client(name=name, email=email, phone=phone))
    logger.info(f"Created client {client.id} for {email}")
    return client, True


def create_client(storage, name, email, phone):
    if storage.clients.first_by(email=email) is not None:
        raise ConflictError('Client with this email already exists')
    return storage.clients.add(Client(name=name, email=email, phone=phone))


def update_client(storage, client_id, changes):
    """Edit a client's contact details; the email must stay unique"""
    client = storage.clients.get(client_id)
    if client is None:
        raise NotFoundError('Client not found')

    email = changes.get('email')
    if email is not None:
        owner = storage.clients.first_by(email=email)
        if owner is not None and owner.id != client.id:
            raise ConflictError('Client with this email already exists')

    return storage.clients.update(client_id, changes)


def book_appointment(storage, payload, enforce_availability=False):
    """Create a pending appointment from a booking payload.

    payload is {serviceId, date, notes?, client: {name, email, phone}}. Any
    status sent by the caller is ignored.
    """
    form = validate_payload(BookingForm, payload)

    service = storage.services.get(form.service_id.data)
    if service is None:
        raise ValidationError(BookingForm.error_message, errors={'service_id': ['Service not found.']})

    if enforce_availability and not is_day_available(storage, form.date.data):
        raise ValidationError(BookingForm.error_message,
                              errors={'date': ['The salon is not accepting appointments on this day.']})

    client_form = form.client.form
    client, _ = find_or_create_client(
        storage,
        name=client_form.name.data,
        email=client_form.email.data,
        phone=client_form.phone.data
    )

    appointment = storage.appointments.add(Appointment(
        client_id=client.id,
        service_id=service.id,
        date=form.date.data,
        notes=form.notes.data or None
    ))
    logger.info(f"Booked appointment {appointment.id} for client {client.id}: {service.name} at {appointment.date}")
    return appointment


def get_appointment(storage, appointment_id):
    appointment = storage.appointments.get(appointment_id)
    if appointment is None:
        raise NotFoundError('Appointment not found')
    return appointment


def appointments_by_status(storage, status):
    return storage.appointments.filter_by(status=status)


def appointments_by_date(storage, day):
    start = start_of_day(day)
    return storage.appointments.between('date', start, start + timedelta(days=1))


def update_appointment(storage, appointment_id, changes, track_spending=False):
    """Apply an administrator's changes to an appointment.

    Any status may move to any other status. Returns (appointment,
    previous_status).
    """
    status = changes.get('status')
    if status is not None and status not in STATUSES:
        raise ValidationError('Invalid appointment data',
                              errors={'status': [f"Status must be one of: {', '.join(STATUSES)}."]})

    appointment = get_appointment(storage, appointment_id)
    previous_status = appointment.status

    appointment = storage.appointments.update(appointment_id, changes)
    if status is not None and status != previous_status:
        logger.info(f"Appointment {appointment.id} moved from {previous_status} to {status}")
        if track_spending:
            _apply_client_spending(storage, appointment, previous_status)
    return appointment, previous_status


def delete_appointment(storage, appointment_id):
    if not storage.appointments.delete(appointment_id):
        raise NotFoundError('Appointment not found')


def _apply_client_spending(storage, appointment, previous_status):
    client = storage.clients.get(appointment.client_id)
    service = storage.services.get(appointment.service_id)
    if client is None or service is None:
        logger.warning(f"Cannot update spending for appointment {appointment.id}: missing client or service")
        return

    total = Decimal(client.total_spent or 0)
    price = Decimal(service.price)
    if appointment.status == STATUS_CONFIRMED:
        client.total_spent = total + price
        if client.last_visit is None or appointment.date > client.last_visit:
            client.last_visit = appointment.date
    elif previous_status == STATUS_CONFIRMED:
        client.total_spent = max(total - price, Decimal('0'))
    storage.clients.save(client)


def appointments_with_details(storage, status=None):
    """Every appointment joined with its client and service summaries"""
    clients = {client.id: client for client in storage.clients.list()}
    services = {service.id: service for service in storage.services.list()}

    appointments = storage.appointments.list()
    if status:
        appointments = [a for a in appointments if a.status == status]

    rows = []
    for appointment in appointments:
        client = clients.get(appointment.client_id)
        service = services.get(appointment.service_id)
        row = appointment.to_dict()
        row['client'] = client.to_dict() if client else dict(UNKNOWN_CLIENT)
        row['service'] = service.to_dict() if service else dict(UNKNOWN_SERVICE)
        rows.append(row)
    return rows
