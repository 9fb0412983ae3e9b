"""
User record model for the WebGIS application.

Users are not database rows: each one is an entry in the flat JSON user
file managed by UserStore. The model only adds the Flask-Login interface
and password checking on top of the stored fields.
"""

from flask_login import UserMixin
from werkzeug.security import check_password_hash


class User(UserMixin):
    """
    A registered user.

    Attributes:
        username: Unique key of the record, also the Flask-Login id
        email: Email address given at registration
        password_hash: Werkzeug password hash, never the plain password
    """

    def __init__(self, username, email, password_hash):
        self.username = username
        self.email = email
        self.password_hash = password_hash

    def get_id(self):
        return self.username

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_record(self):
        """Return the value stored under this user's key in the user file."""
        return {'email': self.email, 'password_hash': self.password_hash}

    @classmethod
    def from_record(cls, username, record):
        return cls(username, record.get('email', ''), record['password_hash'])

    def __repr__(self):
        return f'<User {self.username}>'
