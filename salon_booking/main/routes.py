from flask import Blueprint, jsonify
from salon_booking.errors import NotFoundError
from salon_booking.storage import get_storage

main_bp = Blueprint('main', __name__, url_prefix='/api')


@main_bp.route('/service-categories')
def service_categories():
    """All service categories shown on the first booking step"""
    categories = get_storage().categories.list()
    return jsonify([category.to_dict() for category in categories])


@main_bp.route('/service-categories/<int:category_id>')
def service_category(category_id):
    category = get_storage().categories.get(category_id)
    if category is None:
        raise NotFoundError('Service category not found')
    return jsonify(category.to_dict())


@main_bp.route('/services')
def services():
    services_list = get_storage().services.list()
    return jsonify([service.to_dict() for service in services_list])


@main_bp.route('/services/category/<int:category_id>')
def services_by_category(category_id):
    """Services of one category; an unknown category simply has none"""
    services_list = get_storage().services.filter_by(category_id=category_id)
    return jsonify([service.to_dict() for service in services_list])


@main_bp.route('/services/<int:service_id>')
def service(service_id):
    service = get_storage().services.get(service_id)
    if service is None:
        raise NotFoundError('Service not found')
    return jsonify(service.to_dict())


@main_bp.route('/services-with-categories')
def services_with_categories():
    storage = get_storage()
    categories = {category.id: category for category in storage.categories.list()}

    result = []
    for service in storage.services.list():
        data = service.to_dict()
        category = categories.get(service.category_id)
        data['categoryName'] = category.name if category else 'Unknown'
        result.append(data)
    return jsonify(result)
