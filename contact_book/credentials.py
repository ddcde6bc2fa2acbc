import logging
import os

from .storage import StorageError, read_yaml, write_yaml

logger = logging.getLogger(__name__)


class CredentialStore:
    """Username to bcrypt hash mapping kept in a YAML file.

    The web app only ever reads it; `add-user` on the command line is the one
    writer.
    """

    def __init__(self, path, bcrypt):
        self.path = path
        self.bcrypt = bcrypt

    def load(self):
        data = read_yaml(self.path)
        if not isinstance(data, dict):
            logger.error('Credentials file %s does not hold a mapping', self.path)
            raise StorageError(f'expected a username mapping in {self.path}')
        return {str(username): str(pw_hash) for username, pw_hash in data.items()}

    def exists(self, username):
        return username in self.load()

    def verify(self, username, password):
        credentials = self.load()
        if username not in credentials:
            return False
        try:
            return self.bcrypt.check_password_hash(credentials[username], password)
        except ValueError:
            logger.warning('Stored hash for %s is not a bcrypt hash', username)
            return False

    def hash_password(self, password):
        return self.bcrypt.generate_password_hash(password).decode('utf-8')

    def set_password(self, username, password):
        credentials = self.load() if os.path.exists(self.path) else {}
        credentials[username] = self.hash_password(password)
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        write_yaml(self.path, credentials)
