"""
Thread-safe JSON user store.

All user records live in a single JSON file mapping each username to
{"email": ..., "password_hash": ...}. The file is read on every lookup so
edits made outside the running process are picked up, and it is rewritten
in full whenever a user registers.

Registration is a read-modify-write of the whole file. A lock serialises it
inside one process and the new content is written to a temporary file that
replaces the old one, so readers never see a half-written file.
"""

import json
import os
import tempfile
import threading

from .models import User


class UserStoreError(Exception):
    """Raised when the user file cannot be read or written."""


class DuplicateUserError(UserStoreError):
    """Raised when registering a username that already exists."""

    def __init__(self, username):
        super().__init__(f'Username already exists: {username}')
        self.username = username


class UserStore:
    """
    Flat-file user store.

    Attributes:
        path: File path to the users JSON file
        lock: Threading lock for synchronising rewrites
    """

    def __init__(self, path):
        """
        Initialise the store.

        The file is not created until the first user registers; a missing
        file is treated as an empty store.

        Args:
            path: Path to the users JSON file
        """
        self.path = path
        self.lock = threading.Lock()

    def _load(self):
        """
        Read every record from disk.

        Returns:
            Dictionary mapping username to its stored record

        Raises:
            UserStoreError: If the file is not a JSON object
        """
        try:
            with open(self.path, encoding='utf-8') as file:
                data = json.load(file)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            raise UserStoreError(f'Cannot read user file {self.path}: {exc}') from exc

        if not isinstance(data, dict):
            raise UserStoreError(f'User file {self.path} does not contain a JSON object')
        return data

    def _save(self, records):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmpPath = tempfile.mkstemp(dir=directory, prefix='.users-', suffix='.json')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as file:
                json.dump(records, file, indent=2, sort_keys=True)
            os.replace(tmpPath, self.path)
        except OSError as exc:
            if os.path.exists(tmpPath):
                os.remove(tmpPath)
            raise UserStoreError(f'Cannot write user file {self.path}: {exc}') from exc

    def get(self, username):
        """
        Look up a user by username.

        Returns:
            User if the username is registered, None otherwise
        """
        if not username:
            return None
        record = self._load().get(username)
        if record is None:
            return None
        try:
            return User.from_record(username, record)
        except (KeyError, TypeError, AttributeError) as exc:
            raise UserStoreError(f'Malformed record for {username!r} in {self.path}') from exc

    def exists(self, username):
        return bool(username) and username in self._load()

    def create(self, username, email, password_hash):
        """
        Register a new user and persist the whole file.

        Args:
            username: Unique username
            email: Email address
            password_hash: Already hashed password

        Returns:
            The created User

        Raises:
            DuplicateUserError: If the username is taken
        """
        with self.lock:
            records = self._load()
            if username in records:
                raise DuplicateUserError(username)

            user = User(username, email, password_hash)
            records[username] = user.to_record()
            self._save(records)
            return user
