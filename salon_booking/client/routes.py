from datetime import date

from flask import Blueprint, jsonify, request, current_app
from salon_booking.booking.appointments import book_appointment, create_client
from salon_booking.booking.availability import get_availability, is_day_available, list_availability
from salon_booking.booking.slots import available_times, calendar_days, is_past_date
from salon_booking.client.forms import ClientForm
from salon_booking.errors import ValidationError
from salon_booking.storage import get_storage
from salon_booking.utils.common import parse_day
from salon_booking.utils.forms import validate_payload

client_bp = Blueprint('client', __name__, url_prefix='/api')


@client_bp.route('/available-times')
def get_available_times():
    """Time labels that can be offered for a day"""
    selected_date = parse_day(request.args.get('date'))

    if is_past_date(selected_date):
        times = []
    elif current_app.config['ENFORCE_AVAILABILITY'] and not is_day_available(get_storage(), selected_date):
        times = []
    else:
        times = available_times(selected_date)

    return jsonify({'date': selected_date.isoformat(), 'times': times})


@client_bp.route('/calendar')
def get_calendar():
    """Month grid for the date picker; past and out-of-month days are disabled"""
    today = date.today()
    try:
        year = int(request.args.get('year', today.year))
        month = int(request.args.get('month', today.month))
        if not 1 <= month <= 12 or not date.min.year <= year <= date.max.year:
            raise ValueError(month)
    except ValueError:
        raise ValidationError('Invalid calendar request', errors={'month': ['Year and month must name a valid calendar month.']}) from None

    days = calendar_days(year, month, today=today)
    return jsonify({
        'year': year,
        'month': month,
        'days': [{'day': d.day, 'currentMonth': d.current_month, 'disabled': d.disabled} for d in days]
    })


@client_bp.route('/appointments', methods=['POST'])
def create_appointment():
    """Book a new appointment; it always starts as pending"""
    appointment = book_appointment(
        get_storage(),
        request.get_json(silent=True),
        enforce_availability=current_app.config['ENFORCE_AVAILABILITY']
    )
    return jsonify(appointment.to_dict()), 201


@client_bp.route('/clients', methods=['POST'])
def register_client():
    form = validate_payload(ClientForm, request.get_json(silent=True))
    client = create_client(get_storage(), form.name.data, form.email.data, form.phone.data)
    return jsonify(client.to_dict()), 201


@client_bp.route('/availability')
def availability_list():
    return jsonify([record.to_dict() for record in list_availability(get_storage())])


@client_bp.route('/availability/<day>')
def availability_for_day(day):
    record = get_availability(get_storage(), parse_day(day))
    return jsonify(record.to_dict())
