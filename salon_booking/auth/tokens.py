from collections import namedtuple
from functools import wraps

from flask import current_app, request
from itsdangerous import BadSignature, URLSafeTimedSerializer

from salon_booking.errors import AuthenticationError, AuthorizationError
from salon_booking.storage import get_storage

TOKEN_SALT = 'admin-auth'

# Identity of the caller, handed to views explicitly
AuthContext = namedtuple('AuthContext', ['user_id', 'username', 'is_admin', 'ip_address'])


def get_token_serializer():
    """Creates a secure token serializer using the app's secret key"""
    secret_key = current_app.config['SECRET_KEY']
    return URLSafeTimedSerializer(secret_key)


def generate_auth_token(user):
    """Generate a timed bearer token for a user"""
    s = get_token_serializer()
    return s.dumps({'id': user.id, 'username': user.username, 'isAdmin': user.is_admin}, salt=TOKEN_SALT)


def verify_auth_token(token, max_age=None):
    """Return the token payload, or None if it is invalid or expired"""
    s = get_token_serializer()
    max_age = max_age or current_app.config['TOKEN_MAX_AGE']
    try:
        return s.loads(token, salt=TOKEN_SALT, max_age=max_age)
    except BadSignature:
        return None


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def authenticate_request():
    """Build the AuthContext for the current request or raise"""
    token = _bearer_token()
    if not token:
        raise AuthenticationError()

    payload = verify_auth_token(token)
    if payload is None:
        raise AuthorizationError()

    user = get_storage().users.get(payload.get('id'))
    if user is None:
        raise AuthorizationError()

    return AuthContext(
        user_id=user.id,
        username=user.username,
        is_admin=user.is_admin,
        ip_address=request.remote_addr
    )


# Decorator to ensure only administrators can access these routes
def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth = authenticate_request()
        if not auth.is_admin:
            raise AuthorizationError('Administrator access required')
        return f(*args, auth=auth, **kwargs)
    return decorated_function
