from decimal import Decimal

import click
from flask import current_app
from flask.cli import with_appcontext

from salon_booking.models import User, ServiceCategory, Service, MessageTemplate
from salon_booking.models.message_template import TEMPLATE_CONFIRMATION, TEMPLATE_CANCELLATION

DEFAULT_CATEGORIES = [
    {'name': 'Manicure', 'image': 'https://images.unsplash.com/photo-1604902396830-aca29e19b067'},
    {'name': 'Pedicure', 'image': 'https://images.unsplash.com/photo-1621605817954-50e01ba60195'},
]

# (category name, service name, price, duration in minutes, image)
DEFAULT_SERVICES = [
    ('Manicure', 'Gel Simples', Decimal('25'), 45, 'https://images.unsplash.com/photo-1610992003053-45eb2cde1ca6'),
    ('Pedicure', 'Pedicure Básica', Decimal('30'), 50, 'https://images.unsplash.com/photo-1632345031435-8727f6897d53'),
    ('Manicure', 'Nail Art', Decimal('35'), 60, 'https://images.unsplash.com/photo-1631730442003-50af2b9aee97'),
]

DEFAULT_TEMPLATES = [
    {
        'type': TEMPLATE_CONFIRMATION,
        'subject': 'Confirmação de Agendamento',
        'body': 'Olá {client_name}, seu agendamento foi confirmado para {appointment_date} às '
                '{appointment_time}. Serviço: {service_name}. Obrigado!',
    },
    {
        'type': TEMPLATE_CANCELLATION,
        'subject': 'Cancelamento de Agendamento',
        'body': 'Olá {client_name}, seu agendamento para {appointment_date} às {appointment_time} '
                'foi cancelado. Caso queira reagendar, entre em contato conosco.',
    },
]


def seed_defaults(storage, admin_username=None, admin_password=None):
    """Create the admin account, the default catalog and message templates"""
    storage.users.add(User(
        username=admin_username or current_app.config['ADMIN_USERNAME'],
        password=admin_password or current_app.config['ADMIN_PASSWORD'],
        is_admin=True
    ))

    categories = {}
    for data in DEFAULT_CATEGORIES:
        category = storage.categories.add(ServiceCategory(**data))
        categories[category.name] = category

    for category_name, name, price, duration, image in DEFAULT_SERVICES:
        storage.services.add(Service(
            category_id=categories[category_name].id,
            name=name,
            price=price,
            duration_minutes=duration,
            image=image
        ))

    for data in DEFAULT_TEMPLATES:
        storage.templates.add(MessageTemplate(**data))


@click.command('seed')
@with_appcontext
def seed_command():
    """Seed the admin user, default services and message templates."""
    storage = current_app.extensions['storage']
    if not storage.is_empty():
        click.echo('Storage already contains data, nothing to do.')
        return
    seed_defaults(storage)
    click.echo('Default data created.')
