from salon_booking import db
from salon_booking.storage.base import Repository, Storage


class SqlRepository(Repository):
    """Repository backed by the Flask-SQLAlchemy session; commits per operation"""

    def get(self, entity_id):
        return db.session.get(self.model, entity_id)

    def list(self):
        return self.model.query.order_by(self.model.id).all()

    def filter_by(self, **criteria):
        return self.model.query.filter_by(**criteria).order_by(self.model.id).all()

    def between(self, attribute, start, end):
        column = getattr(self.model, attribute)
        return self.model.query.filter(column >= start, column < end).order_by(self.model.id).all()

    def add(self, entity):
        db.session.add(entity)
        db.session.commit()
        return entity

    def update(self, entity_id, changes):
        entity = self.get(entity_id)
        if entity is None:
            return None
        self._apply(entity, changes)
        db.session.commit()
        return entity

    def save(self, entity):
        db.session.add(entity)
        db.session.commit()
        return entity

    def delete(self, entity_id):
        entity = self.get(entity_id)
        if entity is None:
            return False
        db.session.delete(entity)
        db.session.commit()
        return True


class SqlStorage(Storage):
    repository_class = SqlRepository
