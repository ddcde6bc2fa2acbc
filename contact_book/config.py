import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.environ.get('CONTACT_BOOK_DATA_DIR', os.path.join(BASE_DIR, 'data'))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret')
    DATA_DIR = DATA_DIR
    CONTACTS_FILE = os.environ.get('CONTACTS_FILE', os.path.join(DATA_DIR, 'contacts.yml'))
    USERS_FILE = os.environ.get('USERS_FILE', os.path.join(DATA_DIR, 'users.yml'))
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', 12))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
