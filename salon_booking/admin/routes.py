from flask import Blueprint, jsonify, request, current_app
from salon_booking.admin.forms import (AppointmentUpdateForm, AvailabilityForm, ServiceCategoryForm,
                                       ServiceForm, MessageTemplateForm)
from salon_booking.auth.tokens import admin_required
from salon_booking.booking.appointments import (appointments_by_date, appointments_by_status,
                                                appointments_with_details, delete_appointment,
                                                get_appointment, update_appointment, update_client)
from salon_booking.booking.availability import set_availability
from salon_booking.booking.billing import revenue_summary
from salon_booking.booking.notifications import notify_status_change
from salon_booking.client.forms import ClientForm
from salon_booking.errors import NotFoundError
from salon_booking.models import ServiceCategory, Service, MessageTemplate
from salon_booking.storage import get_storage
from salon_booking.utils.audit import log_audit
from salon_booking.utils.common import parse_day
from salon_booking.utils.forms import validate_payload

admin_bp = Blueprint('admin', __name__, url_prefix='/api')


def _get_or_404(repository, entity_id, message):
    entity = repository.get(entity_id)
    if entity is None:
        raise NotFoundError(message)
    return entity


# Appointments

@admin_bp.route('/appointments')
@admin_required
def appointments(auth):
    return jsonify([a.to_dict() for a in get_storage().appointments.list()])


@admin_bp.route('/appointments/status/<status>')
@admin_required
def appointments_with_status(status, auth):
    return jsonify([a.to_dict() for a in appointments_by_status(get_storage(), status)])


@admin_bp.route('/appointments/date/<day>')
@admin_required
def appointments_on_date(day, auth):
    return jsonify([a.to_dict() for a in appointments_by_date(get_storage(), parse_day(day))])


@admin_bp.route('/appointments/<int:appointment_id>')
@admin_required
def appointment(appointment_id, auth):
    return jsonify(get_appointment(get_storage(), appointment_id).to_dict())


@admin_bp.route('/appointments-with-details')
@admin_required
def appointments_details(auth):
    """Appointments joined with client and service, optionally for one status tab"""
    return jsonify(appointments_with_details(get_storage(), status=request.args.get('status')))


@admin_bp.route('/appointments/<int:appointment_id>', methods=['PUT'])
@admin_required
def update_appointment_view(appointment_id, auth):
    """Update an appointment, usually its status"""
    storage = get_storage()
    form = validate_payload(AppointmentUpdateForm, request.get_json(silent=True), partial=True)
    changes = form.changed_fields()

    appointment, old_status = update_appointment(
        storage, appointment_id, changes,
        track_spending=current_app.config['TRACK_CLIENT_SPENDING']
    )

    audit_details = {
        'changes': changes,
        'old_status': old_status,
        'new_status': appointment.status
    }
    log_audit(storage, 'update', 'appointment', appointment.id, audit_details, auth=auth)

    notify_status_change(storage, appointment, old_status)
    return jsonify(appointment.to_dict())


@admin_bp.route('/appointments/<int:appointment_id>', methods=['DELETE'])
@admin_required
def delete_appointment_view(appointment_id, auth):
    storage = get_storage()
    delete_appointment(storage, appointment_id)
    log_audit(storage, 'delete', 'appointment', appointment_id, auth=auth)
    return '', 204


# Availability

@admin_bp.route('/availability', methods=['POST'])
@admin_required
def update_availability(auth):
    """Open or block a day; one record per calendar day"""
    storage = get_storage()
    form = validate_payload(AvailabilityForm, request.get_json(silent=True))
    # Days are open unless explicitly blocked; null counts as not given
    is_available = form.is_available.data if form.is_available.data is not None else True

    record, created = set_availability(storage, form.date.data, is_available)

    audit_details = {
        'date': record.date.strftime('%Y-%m-%d'),
        'is_available': record.is_available
    }
    log_audit(storage, 'create' if created else 'update', 'availability', record.id, audit_details, auth=auth)

    return jsonify(record.to_dict()), 201 if created else 200


# Clients

@admin_bp.route('/clients')
@admin_required
def clients(auth):
    return jsonify([client.to_dict() for client in get_storage().clients.list()])


@admin_bp.route('/clients/<int:client_id>')
@admin_required
def client(client_id, auth):
    return jsonify(_get_or_404(get_storage().clients, client_id, 'Client not found').to_dict())


@admin_bp.route('/clients/<int:client_id>', methods=['PUT'])
@admin_required
def update_client_view(client_id, auth):
    storage = get_storage()
    form = validate_payload(ClientForm, request.get_json(silent=True), partial=True)
    changes = form.changed_fields()

    client = update_client(storage, client_id, changes)

    log_audit(storage, 'update', 'client', client.id, {'changes': changes}, auth=auth)
    return jsonify(client.to_dict())


# Service catalog

@admin_bp.route('/service-categories', methods=['POST'])
@admin_required
def create_service_category(auth):
    storage = get_storage()
    form = validate_payload(ServiceCategoryForm, request.get_json(silent=True))
    category = storage.categories.add(ServiceCategory(name=form.name.data, image=form.image.data))

    log_audit(storage, 'create', 'service_category', category.id, category.to_dict(), auth=auth)
    return jsonify(category.to_dict()), 201


@admin_bp.route('/service-categories/<int:category_id>', methods=['PUT'])
@admin_required
def update_service_category(category_id, auth):
    storage = get_storage()
    form = validate_payload(ServiceCategoryForm, request.get_json(silent=True), partial=True)
    changes = form.changed_fields()

    category = storage.categories.update(category_id, changes)
    if category is None:
        raise NotFoundError('Service category not found')

    log_audit(storage, 'update', 'service_category', category.id, {'changes': changes}, auth=auth)
    return jsonify(category.to_dict())


@admin_bp.route('/service-categories/<int:category_id>', methods=['DELETE'])
@admin_required
def delete_service_category(category_id, auth):
    storage = get_storage()
    if not storage.categories.delete(category_id):
        raise NotFoundError('Service category not found')
    log_audit(storage, 'delete', 'service_category', category_id, auth=auth)
    return '', 204


def _service_changes(form):
    changes = form.changed_fields()
    if 'duration' in changes:
        changes['duration_minutes'] = changes.pop('duration')
    return changes


@admin_bp.route('/services', methods=['POST'])
@admin_required
def create_service(auth):
    storage = get_storage()
    form = validate_payload(ServiceForm, request.get_json(silent=True))
    service = storage.services.add(Service(
        category_id=form.category_id.data,
        name=form.name.data,
        price=form.price.data,
        duration_minutes=form.duration.data,
        image=form.image.data
    ))

    log_audit(storage, 'create', 'service', service.id, service.to_dict(), auth=auth)
    return jsonify(service.to_dict()), 201


@admin_bp.route('/services/<int:service_id>', methods=['PUT'])
@admin_required
def update_service(service_id, auth):
    storage = get_storage()
    old_service = _get_or_404(storage.services, service_id, 'Service not found')
    old_values = old_service.to_dict()

    form = validate_payload(ServiceForm, request.get_json(silent=True), partial=True)
    service = storage.services.update(service_id, _service_changes(form))

    audit_details = {
        'old_values': old_values,
        'new_values': service.to_dict()
    }
    log_audit(storage, 'update', 'service', service.id, audit_details, auth=auth)
    return jsonify(service.to_dict())


@admin_bp.route('/services/<int:service_id>', methods=['DELETE'])
@admin_required
def delete_service(service_id, auth):
    storage = get_storage()
    if not storage.services.delete(service_id):
        raise NotFoundError('Service not found')
    log_audit(storage, 'delete', 'service', service_id, auth=auth)
    return '', 204


# Message templates

@admin_bp.route('/message-templates')
@admin_required
def message_templates(auth):
    return jsonify([template.to_dict() for template in get_storage().templates.list()])


@admin_bp.route('/message-templates/<int:template_id>')
@admin_required
def message_template(template_id, auth):
    template = _get_or_404(get_storage().templates, template_id, 'Message template not found')
    return jsonify(template.to_dict())


@admin_bp.route('/message-templates/type/<template_type>')
@admin_required
def message_template_by_type(template_type, auth):
    template = get_storage().templates.first_by(type=template_type)
    if template is None:
        raise NotFoundError('Message template not found')
    return jsonify(template.to_dict())


@admin_bp.route('/message-templates', methods=['POST'])
@admin_required
def create_message_template(auth):
    storage = get_storage()
    form = validate_payload(MessageTemplateForm, request.get_json(silent=True))
    template = storage.templates.add(MessageTemplate(
        type=form.type.data,
        subject=form.subject.data,
        body=form.body.data
    ))

    log_audit(storage, 'create', 'message_template', template.id, {'type': template.type}, auth=auth)
    return jsonify(template.to_dict()), 201


@admin_bp.route('/message-templates/<int:template_id>', methods=['PUT'])
@admin_required
def update_message_template(template_id, auth):
    storage = get_storage()
    form = validate_payload(MessageTemplateForm, request.get_json(silent=True), partial=True)
    changes = form.changed_fields()

    template = storage.templates.update(template_id, changes)
    if template is None:
        raise NotFoundError('Message template not found')

    log_audit(storage, 'update', 'message_template', template.id, {'changes': changes}, auth=auth)
    return jsonify(template.to_dict())


# Reports

@admin_bp.route('/billing/summary')
@admin_required
def billing_summary(auth):
    """Revenue from confirmed appointments for today, this week and this month"""
    return jsonify(revenue_summary(get_storage()))


@admin_bp.route('/audit-logs')
@admin_required
def audit_logs(auth):
    """Audit trail, newest first, optionally filtered by action and entity type"""
    criteria = {}
    if request.args.get('action'):
        criteria['action'] = request.args['action']
    if request.args.get('entity_type'):
        criteria['entity_type'] = request.args['entity_type']

    entries = get_storage().audit_logs.filter_by(**criteria)
    return jsonify([entry.to_dict() for entry in reversed(entries)])
