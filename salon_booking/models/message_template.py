from salon_booking import db

TEMPLATE_CONFIRMATION = 'confirmation'
TEMPLATE_CANCELLATION = 'cancellation'


class MessageTemplate(db.Model):
    __tablename__ = 'message_templates'

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(50), nullable=False)  # confirmation, cancellation, etc.
    subject = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)

    def __init__(self, type, subject, body):
        self.type = type
        self.subject = subject
        self.body = body

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'subject': self.subject,
            'body': self.body
        }

    def __repr__(self):
        return f'<MessageTemplate {self.type}>'
