import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///salon_booking.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "sql" for the database, "memory" for the process-wide in-memory store
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'sql')
    SEED_DEFAULTS = _env_flag('SEED_DEFAULTS', True)

    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')

    # Bearer tokens expire after 24 hours
    TOKEN_MAX_AGE = int(os.environ.get('TOKEN_MAX_AGE', 24 * 60 * 60))

    # Booking rules that are off unless explicitly enabled
    ENFORCE_AVAILABILITY = _env_flag('ENFORCE_AVAILABILITY')
    TRACK_CLIENT_SPENDING = _env_flag('TRACK_CLIENT_SPENDING')

    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'localhost')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 25))
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS')
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER', 'bookings@salon.local')
    MAIL_NOTIFICATIONS_ENABLED = _env_flag('MAIL_NOTIFICATIONS_ENABLED')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    STORAGE_BACKEND = 'memory'
    SEED_DEFAULTS = True
    ENFORCE_AVAILABILITY = False
    TRACK_CLIENT_SPENDING = False
    MAIL_SUPPRESS_SEND = True
    MAIL_NOTIFICATIONS_ENABLED = False
    LOG_LEVEL = 'DEBUG'
