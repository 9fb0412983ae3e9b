"""
Signed values for the auth_token cookie.

The cookie carries the username signed with the application SECRET_KEY and
a timestamp, so the server can tell which user it belongs to and refuse it
once it is older than AUTH_COOKIE_MAX_AGE, regardless of what the browser
does with the cookie's own expiry.
"""

from flask import current_app
from itsdangerous import BadSignature, URLSafeTimedSerializer

TOKEN_SALT = 'webgis-auth-token'


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def issue_auth_token(username):
    return _serializer().dumps(username)


def load_auth_token(token):
    """
    Return the username a token was issued for.

    Args:
        token: Cookie value

    Returns:
        str username, or None when the token is missing, tampered with,
        signed with another key or older than AUTH_COOKIE_MAX_AGE
    """
    if not token:
        return None
    try:
        username = _serializer().loads(token, max_age=current_app.config['AUTH_COOKIE_MAX_AGE'])
    except BadSignature:
        return None
    if not isinstance(username, str):
        return None
    return username
