from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Length
from salon_booking.utils.forms import ApiForm


class LoginForm(ApiForm):
    error_message = 'Username and password are required'

    username = StringField('Username', validators=[DataRequired(), Length(max=80)])
    password = PasswordField('Password', validators=[DataRequired()])
