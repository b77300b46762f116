"""Client notifications rendered from the editable message templates."""
import logging

from flask import current_app
from flask_mail import Message

from salon_booking import mail
from salon_booking.models.appointment import STATUS_CONFIRMED, STATUS_CANCELED
from salon_booking.models.message_template import TEMPLATE_CONFIRMATION, TEMPLATE_CANCELLATION

logger = logging.getLogger(__name__)

TEMPLATE_FOR_STATUS = {
    STATUS_CONFIRMED: TEMPLATE_CONFIRMATION,
    STATUS_CANCELED: TEMPLATE_CANCELLATION,
}


def render_message(text, appointment, client, service):
    """Fill the {placeholders} supported by message templates"""
    values = {
        'client_name': client.name if client else '',
        'appointment_date': appointment.date.strftime('%d/%m/%Y'),
        'appointment_time': appointment.date.strftime('%H:%M'),
        'service_name': service.name if service else '',
    }
    for key, value in values.items():
        text = text.replace('{' + key + '}', value)
    return text


def build_status_message(storage, appointment):
    """Message for the appointment's current status, or None if no template applies"""
    template_type = TEMPLATE_FOR_STATUS.get(appointment.status)
    if template_type is None:
        return None
    template = storage.templates.first_by(type=template_type)
    client = storage.clients.get(appointment.client_id)
    if template is None or client is None:
        return None

    service = storage.services.get(appointment.service_id)
    return Message(
        subject=render_message(template.subject, appointment, client, service),
        recipients=[client.email],
        body=render_message(template.body, appointment, client, service)
    )


def notify_status_change(storage, appointment, previous_status):
    """Email the client when an appointment is confirmed or canceled.

    Sending is best effort: failures are logged and never undo the change.
    """
    if not current_app.config.get('MAIL_NOTIFICATIONS_ENABLED'):
        return None
    if appointment.status == previous_status:
        return None

    message = build_status_message(storage, appointment)
    if message is None:
        return None
    try:
        mail.send(message)
    except Exception as e:
        logger.error(f"Failed to send {appointment.status} notification for appointment {appointment.id}: {e}")
        return None
    logger.info(f"Sent {appointment.status} notification for appointment {appointment.id}")
    return message
