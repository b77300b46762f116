from datetime import datetime

from wtforms import Form, DateTimeField, Field

from salon_booking.errors import ValidationError
from salon_booking.utils.json_utils import json_formdata


class ApiForm(Form):
    """WTForms form fed from a JSON body instead of a submitted HTML form"""
    error_message = 'Invalid data'

    @classmethod
    def from_json(cls, payload):
        return cls(formdata=json_formdata(payload or {}))

    def submitted_fields(self):
        return {name: field for name, field in self._fields.items() if getattr(field, 'raw_data', None)}

    def changed_fields(self):
        """Data of the fields that were present in the payload"""
        return {name: field.data for name, field in self.submitted_fields().items()}

    def partial_errors(self):
        """Errors of the submitted fields only, for partial updates"""
        self.validate()
        return {name: field.errors for name, field in self.submitted_fields().items() if field.errors}


class IsoDateTimeField(DateTimeField):
    """Accepts ISO-8601 timestamps, including the trailing 'Z' browsers send.

    Aware values are converted to local time and stored naive, like every
    other datetime in the application.
    """
    def process_formdata(self, valuelist):
        if not valuelist:
            return
        try:
            value = datetime.fromisoformat(valuelist[0].strip().replace('Z', '+00:00'))
        except ValueError:
            self.data = None
            raise ValueError(self.gettext('Not a valid datetime value.'))
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        self.data = value


class JsonBooleanField(Field):
    """Accepts only JSON true/false; an absent or null value leaves data None"""
    def process_formdata(self, valuelist):
        if not valuelist:
            return
        if valuelist[0] not in ('true', 'false'):
            self.data = None
            raise ValueError(self.gettext('Not a valid boolean value.'))
        self.data = valuelist[0] == 'true'


def validate_payload(form_class, payload, partial=False):
    """Validate a JSON payload, raising ValidationError with every field error.

    With partial=True only the fields present in the payload are checked,
    which is what PUT handlers need.
    """
    form = form_class.from_json(payload)
    if partial:
        errors = form.partial_errors()
    else:
        errors = None if form.validate() else form.errors
    if errors:
        raise ValidationError(form_class.error_message, errors=errors)
    return form
