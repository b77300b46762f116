import json
from datetime import datetime

from salon_booking import db
from salon_booking.utils.json_utils import DecimalJSONProvider


class AuditLog(db.Model):
    """One administrative event in the salon back office.

    The acting admin is copied from the request's AuthContext, so entries
    stay readable after the account is renamed or removed.
    """
    __tablename__ = 'audit_logs'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    username = db.Column(db.String(80), nullable=True)  # None for anonymous events such as failed logins
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    action = db.Column(db.String(50), nullable=False)  # create, update, delete, attempt, perform
    entity_type = db.Column(db.String(50), nullable=False)  # appointment, availability, client, service, login
    entity_id = db.Column(db.Integer, nullable=True)
    details = db.Column(db.Text, nullable=True)
    ip_address = db.Column(db.String(50), nullable=True)

    def __init__(self, action, entity_type, entity_id=None, details=None,
                 user_id=None, username=None, ip_address=None):
        self.user_id = user_id
        self.username = username
        self.timestamp = datetime.utcnow()
        self.action = action
        self.entity_type = entity_type
        self.entity_id = entity_id
        # Money and appointment times are stored as plain JSON numbers and ISO strings
        if isinstance(details, (dict, list)):
            details = json.dumps(details, default=DecimalJSONProvider.default)
        self.details = details
        self.ip_address = ip_address

    @classmethod
    def from_auth(cls, auth, action, entity_type, entity_id=None, details=None):
        """Entry attributed to the caller described by an AuthContext (or nobody)"""
        return cls(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
            user_id=auth.user_id if auth else None,
            username=auth.username if auth else None,
            ip_address=auth.ip_address if auth else None
        )

    def get_details_dict(self):
        if not self.details:
            return {}
        try:
            return json.loads(self.details)
        except ValueError:
            return {'raw': self.details}

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'username': self.username,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'action': self.action,
            'entityType': self.entity_type,
            'entityId': self.entity_id,
            'details': self.get_details_dict(),
            'ipAddress': self.ip_address
        }

    def __repr__(self):
        return f'<AuditLog {self.action} {self.entity_type} {self.entity_id} by {self.username or "anonymous"}>'
