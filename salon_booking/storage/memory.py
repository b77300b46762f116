from salon_booking.storage.base import Repository, Storage


class MemoryRepository(Repository):
    """Keeps rows in a dict keyed by id; ids are handed out sequentially"""

    def __init__(self, model):
        super().__init__(model)
        self._rows = {}
        self._next_id = 1

    def get(self, entity_id):
        return self._rows.get(entity_id)

    def list(self):
        return [self._rows[key] for key in sorted(self._rows)]

    def filter_by(self, **criteria):
        return [
            row for row in self.list()
            if all(getattr(row, key) == value for key, value in criteria.items())
        ]

    def between(self, attribute, start, end):
        return [row for row in self.list() if start <= getattr(row, attribute) < end]

    def add(self, entity):
        entity.id = self._next_id
        self._next_id += 1
        self._rows[entity.id] = entity
        return entity

    def update(self, entity_id, changes):
        entity = self.get(entity_id)
        if entity is None:
            return None
        return self._apply(entity, changes)

    def save(self, entity):
        self._rows[entity.id] = entity
        return entity

    def delete(self, entity_id):
        return self._rows.pop(entity_id, None) is not None


class MemoryStorage(Storage):
    repository_class = MemoryRepository
