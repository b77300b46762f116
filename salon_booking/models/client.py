from decimal import Decimal
from salon_booking import db


class Client(db.Model):
    __tablename__ = 'clients'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True, index=True)
    phone = db.Column(db.String(20), nullable=False)
    last_visit = db.Column(db.DateTime, nullable=True)
    total_spent = db.Column(db.Numeric(10, 2), default=0)

    def __init__(self, name, email, phone):
        self.name = name
        self.email = email
        self.phone = phone
        self.last_visit = None
        self.total_spent = Decimal('0')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'lastVisit': self.last_visit.isoformat() if self.last_visit else None,
            'totalSpent': self.total_spent if self.total_spent is not None else Decimal('0')
        }

    def __repr__(self):
        return f'<Client {self.email}>'
