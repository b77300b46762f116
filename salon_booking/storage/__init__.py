from flask import current_app

from salon_booking.storage.base import Repository, Storage
from salon_booking.storage.memory import MemoryStorage
from salon_booking.storage.sql import SqlStorage

BACKENDS = {
    'memory': MemoryStorage,
    'sql': SqlStorage,
}


def create_storage(backend):
    try:
        storage_class = BACKENDS[backend]
    except KeyError:
        raise ValueError(f'Unknown storage backend: {backend}') from None
    return storage_class()


def get_storage():
    """Storage bound to the current application"""
    return current_app.extensions['storage']
