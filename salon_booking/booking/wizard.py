"""
Three-step booking wizard: service, then date and time, then client details.

The wizard is a plain value object owned by the caller and passed between
step handlers. Nothing is stored server-side until submit() succeeds.
"""
from datetime import date, datetime

from salon_booking.booking.slots import available_times, combine_date_and_time, is_past_date
from salon_booking.errors import ApiError

STEP_SERVICE = 1
STEP_DATETIME = 2
STEP_CONFIRMATION = 3
STEP_DONE = 4


class BookingFlowError(Exception):
    """A selection the wizard cannot accept in its current state"""


class IncompleteSelectionError(BookingFlowError):
    def __init__(self, message='Please select a date and time to continue.'):
        super().__init__(message)


class BookingWizard:

    def __init__(self):
        self.step = STEP_SERVICE
        self.category = None
        self.service = None
        self.date = None
        self.time = None
        self.appointment = None
        self.error = None

    @property
    def appointment_date(self):
        """Selected day and time combined, or None while incomplete"""
        if self.date is None or self.time is None:
            return None
        return combine_date_and_time(self.date, self.time)

    def _require_step(self, step):
        if self.step != step:
            raise BookingFlowError(f'Action not allowed on step {self.step}')

    def select_category(self, category):
        self._require_step(STEP_SERVICE)
        self.category = category

    def select_service(self, service):
        """Store the service and move on to picking a date"""
        self._require_step(STEP_SERVICE)
        if self.category is not None and service.category_id != self.category.id:
            raise BookingFlowError('Service does not belong to the selected category')
        self.service = service
        self.step = STEP_DATETIME

    def select_date(self, day, today=None):
        self._require_step(STEP_DATETIME)
        if isinstance(day, datetime):
            day = day.date()
        if is_past_date(day, today or date.today()):
            raise BookingFlowError('Past dates cannot be selected')
        self.date = day
        # A new day invalidates the time picked for the previous one
        self.time = None

    def available_times(self, now=None):
        if self.date is None:
            return []
        return available_times(self.date, now=now)

    def select_time(self, label, now=None):
        self._require_step(STEP_DATETIME)
        if self.date is None:
            raise IncompleteSelectionError()
        if label not in self.available_times(now=now):
            raise BookingFlowError(f'{label} is not available on {self.date.isoformat()}')
        self.time = label

    def proceed(self):
        """Continue to the confirmation step once both date and time are set"""
        self._require_step(STEP_DATETIME)
        if self.date is None or self.time is None:
            raise IncompleteSelectionError()
        self.step = STEP_CONFIRMATION

    def back(self):
        if self.step in (STEP_DATETIME, STEP_CONFIRMATION):
            self.step -= 1
            self.error = None

    def payload(self, name, email, phone, notes=None):
        if self.service is None or self.appointment_date is None:
            raise IncompleteSelectionError()
        body = {
            'serviceId': self.service.id,
            'date': self.appointment_date.isoformat(),
            'client': {'name': name, 'email': email, 'phone': phone},
        }
        if notes:
            body['notes'] = notes
        return body

    def submit(self, submit_fn, name, email, phone, notes=None):
        """Send the booking through submit_fn(payload).

        On failure the wizard stays on the confirmation step with error set so
        the client can correct the data and submit again.
        """
        self._require_step(STEP_CONFIRMATION)
        try:
            appointment = submit_fn(self.payload(name, email, phone, notes))
        except ApiError as e:
            self.error = e.message
            return None
        self.error = None
        self.appointment = appointment
        self.step = STEP_DONE
        return appointment
