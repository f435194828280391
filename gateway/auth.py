"""
HTTP Basic authorization for the gateway routes.

Two tiers sit on top of the public endpoints:
- admin_required: the configured admin password (username empty or the admin name)
- owner_required: the player named by the `email` query parameter, or admin
"""
import hmac
from functools import wraps
from typing import Optional, Tuple

from flask import current_app, g, request

from .exceptions import MissingParameter, NotFound, Unauthorized


def get_basic_credentials() -> Tuple[Optional[str], Optional[str]]:
    """Extract (username, password) from the Authorization header."""
    auth = request.authorization
    if auth is None or auth.type != 'basic':
        return None, None
    return auth.username or '', auth.password or ''


def is_admin(username: Optional[str], password: Optional[str]) -> bool:
    if username is None or password is None:
        return False
    admin_username = current_app.config['ADMIN_USERNAME']
    admin_password = current_app.config['ADMIN_PASSWORD']
    if username not in ('', admin_username):
        return False
    return hmac.compare_digest(password.encode('utf-8'), admin_password.encode('utf-8'))


def admin_required(f):
    """Decorator to require the admin credentials."""
    @wraps(f)
    def decorated(*args, **kwargs):
        username, password = get_basic_credentials()
        if not is_admin(username, password):
            raise Unauthorized('Admin credentials required')
        g.is_admin = True
        return f(*args, **kwargs)
    return decorated


def owner_required(f):
    """Decorator to require the credentials of the player named by ?email, or admin."""
    @wraps(f)
    def decorated(*args, **kwargs):
        username, password = get_basic_credentials()
        registry = current_app.registry
        email = request.args.get('email')

        if is_admin(username, password):
            g.is_admin = True
        elif username and registry.check_credentials(username, password):
            g.is_admin = False
            if not email:
                raise MissingParameter('email')
            if email != username:
                # An authenticated player asking about an unknown email gets 404
                if not registry.is_registered(email):
                    raise NotFound(email)
                raise Unauthorized(f"Player {username} cannot act on {email}")
        else:
            raise Unauthorized()

        if not email:
            raise MissingParameter('email')
        return f(*args, **kwargs)
    return decorated
