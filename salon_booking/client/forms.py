from wtforms import StringField, TextAreaField, IntegerField, FormField
from wtforms.validators import DataRequired, InputRequired, Length, Optional, Email
from salon_booking.utils.forms import ApiForm, IsoDateTimeField


class ClientForm(ApiForm):
    """Contact details captured on the confirmation step"""
    error_message = 'Invalid client data'

    name = StringField('Name', validators=[DataRequired(), Length(max=150)])
    email = StringField('Email', validators=[DataRequired(), Email(), Length(max=120)])
    phone = StringField('Phone Number', validators=[DataRequired(), Length(max=20)])


class BookingForm(ApiForm):
    """Form for booking a new appointment"""
    error_message = 'Invalid appointment data'

    service_id = IntegerField('Service', validators=[InputRequired()])
    date = IsoDateTimeField('Appointment Time', validators=[InputRequired()])
    notes = TextAreaField('Special Requests/Notes', validators=[Optional(), Length(max=500)])
    client = FormField(ClientForm)
