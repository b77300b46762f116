from salon_booking import db

# Appointment status constants
STATUS_PENDING = 'pending'
STATUS_CONFIRMED = 'confirmed'
STATUS_CANCELED = 'canceled'

STATUSES = (STATUS_PENDING, STATUS_CONFIRMED, STATUS_CANCELED)


class Appointment(db.Model):
    __tablename__ = 'appointments'

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey('clients.id'), nullable=False)
    service_id = db.Column(db.Integer, db.ForeignKey('services.id'), nullable=False)
    date = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)
    notes = db.Column(db.Text, nullable=True)

    def __init__(self, client_id, service_id, date, notes=None):
        self.client_id = client_id
        self.service_id = service_id
        self.date = date
        self.notes = notes
        # New appointments always wait for an administrator
        self.status = STATUS_PENDING

    def set_status(self, status):
        """Move to any of the known states; there is no terminal state"""
        if status not in STATUSES:
            raise ValueError(f'Unknown appointment status: {status}')
        self.status = status

    def confirm(self):
        self.set_status(STATUS_CONFIRMED)

    def cancel(self):
        self.set_status(STATUS_CANCELED)

    def reopen(self):
        self.set_status(STATUS_PENDING)

    def is_confirmed(self):
        return self.status == STATUS_CONFIRMED

    def to_dict(self):
        return {
            'id': self.id,
            'clientId': self.client_id,
            'serviceId': self.service_id,
            'date': self.date.isoformat() if self.date else None,
            'status': self.status,
            'notes': self.notes
        }

    def __repr__(self):
        return f'<Appointment {self.id}: {self.date} ({self.status})>'
