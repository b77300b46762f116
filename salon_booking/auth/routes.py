from flask import Blueprint, jsonify, request, current_app
from salon_booking.auth.forms import LoginForm
from salon_booking.auth.tokens import generate_auth_token
from salon_booking.errors import AuthenticationError
from salon_booking.storage import get_storage
from salon_booking.utils.audit import log_audit
from salon_booking.utils.forms import validate_payload

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/login', methods=['POST'])
def login():
    form = validate_payload(LoginForm, request.get_json(silent=True))
    storage = get_storage()

    user = storage.users.first_by(username=form.username.data)
    if user is None or not user.check_password(form.password.data):
        # Log failed login attempt
        audit_details = {
            'username': form.username.data,
            'reason': 'invalid_credentials',
            'ip_address': request.remote_addr
        }
        log_audit(storage, 'attempt', 'login', user.id if user else None, audit_details)
        current_app.logger.warning(f"Failed login for {form.username.data} from {request.remote_addr}")
        raise AuthenticationError('Invalid credentials')

    token = generate_auth_token(user)

    audit_details = {
        'username': user.username,
        'ip_address': request.remote_addr,
        'user_agent': request.user_agent.string
    }
    log_audit(storage, 'perform', 'login', user.id, audit_details)

    return jsonify({'token': token, 'user': user.to_dict()})
