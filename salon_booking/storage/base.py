"""
Repository interface the booking logic is written against.

Every entity gets the same capability set (get, list, create, update, delete
plus simple lookups). Backends decide where the rows live; business code
never touches a session or a dict directly.
"""
from abc import ABC, abstractmethod


class Repository(ABC):

    def __init__(self, model):
        self.model = model

    @abstractmethod
    def get(self, entity_id):
        """Return the row with this id, or None"""

    @abstractmethod
    def list(self):
        """Return all rows ordered by id"""

    @abstractmethod
    def filter_by(self, **criteria):
        """Return rows whose attributes equal every given value"""

    @abstractmethod
    def between(self, attribute, start, end):
        """Return rows with start <= attribute < end"""

    @abstractmethod
    def add(self, entity):
        """Insert a new row and return it with its id assigned"""

    @abstractmethod
    def update(self, entity_id, changes):
        """Apply changes to the row with this id; None if it does not exist"""

    @abstractmethod
    def save(self, entity):
        """Persist changes made directly on a row returned by this repository"""

    @abstractmethod
    def delete(self, entity_id):
        """Remove the row; True if something was deleted"""

    def first_by(self, **criteria):
        rows = self.filter_by(**criteria)
        return rows[0] if rows else None

    def _apply(self, entity, changes):
        for key, value in changes.items():
            if not hasattr(self.model, key) or key == 'id':
                raise AttributeError(f'{self.model.__name__} has no editable field {key!r}')
            setattr(entity, key, value)
        return entity


class Storage:
    """Bundle of repositories, one per entity"""

    repository_class = None

    def __init__(self):
        from salon_booking.models import (User, Client, ServiceCategory, Service, Appointment,
                                          Availability, MessageTemplate, AuditLog)

        self.users = self.repository_class(User)
        self.clients = self.repository_class(Client)
        self.categories = self.repository_class(ServiceCategory)
        self.services = self.repository_class(Service)
        self.appointments = self.repository_class(Appointment)
        self.availability = self.repository_class(Availability)
        self.templates = self.repository_class(MessageTemplate)
        self.audit_logs = self.repository_class(AuditLog)

    def is_empty(self):
        return not self.users.list() and not self.categories.list()
