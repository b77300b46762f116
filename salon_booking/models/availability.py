from salon_booking import db


class Availability(db.Model):
    """Per-day override of whether the salon accepts appointments"""
    __tablename__ = 'availability'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.DateTime, nullable=False, index=True)  # Always midnight of the day
    is_available = db.Column(db.Boolean, nullable=False, default=True)

    def __init__(self, date, is_available=True):
        self.date = date
        self.is_available = is_available

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat() if self.date else None,
            'isAvailable': self.is_available
        }

    def __repr__(self):
        if self.is_available:
            return f'<Availability: {self.date.date()} - OPEN>'
        return f'<Availability: {self.date.date()} - BLOCKED>'
