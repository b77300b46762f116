from wtforms import StringField, TextAreaField, DecimalField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Length, Optional, NumberRange, AnyOf
from salon_booking.models.appointment import STATUSES
from salon_booking.utils.forms import ApiForm, IsoDateTimeField, JsonBooleanField


class AppointmentUpdateForm(ApiForm):
    """Administrative changes to an appointment; validated partially"""
    error_message = 'Invalid appointment data'

    client_id = IntegerField('Client', validators=[InputRequired()])
    service_id = IntegerField('Service', validators=[InputRequired()])
    date = IsoDateTimeField('Appointment Time', validators=[InputRequired()])
    notes = TextAreaField('Notes', validators=[Optional(), Length(max=500)])
    status = StringField('Status', validators=[
        DataRequired(),
        AnyOf(STATUSES, message='Status must be one of: %(values)s.')
    ])


class AvailabilityForm(ApiForm):
    """Open or block a whole day"""
    error_message = 'Invalid availability data'

    date = IsoDateTimeField('Date', validators=[InputRequired()])
    is_available = JsonBooleanField('Available')


class ServiceCategoryForm(ApiForm):
    error_message = 'Invalid service category data'

    name = StringField('Category Name', validators=[DataRequired(), Length(max=100)])
    image = StringField('Image', validators=[DataRequired(), Length(max=255)])


class ServiceForm(ApiForm):
    """Form for creating or updating a salon service"""
    error_message = 'Invalid service data'

    category_id = IntegerField('Category', validators=[InputRequired()])
    name = StringField('Service Name', validators=[DataRequired(), Length(max=100)])
    price = DecimalField('Price', places=2, validators=[InputRequired(), NumberRange(min=0)])
    duration = IntegerField('Duration (minutes)', validators=[
        InputRequired(),
        NumberRange(min=5, message='Service duration must be at least 5 minutes')
    ])
    image = StringField('Image', validators=[DataRequired(), Length(max=255)])


class MessageTemplateForm(ApiForm):
    error_message = 'Invalid message template data'

    type = StringField('Type', validators=[DataRequired(), Length(max=50)])
    subject = StringField('Subject', validators=[DataRequired(), Length(max=255)])
    body = TextAreaField('Body', validators=[DataRequired()])
