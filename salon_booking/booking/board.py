"""Admin appointment list grouped by status tabs."""
from salon_booking.booking.appointments import appointments_with_details, update_appointment
from salon_booking.errors import ApiError
from salon_booking.models.appointment import STATUSES, STATUS_PENDING


class AppointmentBoard:
    """
    Holds the active status tab and the rows shown under it.

    Rows are only replaced by refresh(); a failed transition leaves them as
    they were and records the error instead.
    """

    def __init__(self, storage, status=STATUS_PENDING, track_spending=False):
        self.storage = storage
        self.track_spending = track_spending
        self.status = None
        self.appointments = []
        self.error = None
        self.select_tab(status)

    def select_tab(self, status):
        if status not in STATUSES:
            raise ValueError(f'Unknown appointment status: {status}')
        self.status = status
        self.refresh()

    def refresh(self):
        self.appointments = appointments_with_details(self.storage)

    @property
    def rows(self):
        return [row for row in self.appointments if row['status'] == self.status]

    def counts(self):
        totals = dict.fromkeys(STATUSES, 0)
        for row in self.appointments:
            totals[row['status']] = totals.get(row['status'], 0) + 1
        return totals

    def transition(self, appointment_id, status):
        """Ask for a status change; True on success"""
        try:
            update_appointment(self.storage, appointment_id, {'status': status},
                               track_spending=self.track_spending)
        except ApiError as e:
            self.error = e.message
            return False
        self.error = None
        self.refresh()
        return True
