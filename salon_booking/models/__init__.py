# Import all models here for easier imports elsewhere
from .user import User
from .client import Client
from .service import ServiceCategory, Service
from .appointment import Appointment
from .availability import Availability
from .message_template import MessageTemplate
from .audit import AuditLog
