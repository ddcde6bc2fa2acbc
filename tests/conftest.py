import pytest
import yaml

from contact_book import create_app

CONTACTS = [
    {'name': 'Mimi', 'phone': '(999) 999-9999', 'email': 'mimi@gmail.com', 'category': 'family'},
    {'name': 'Hudson', 'phone': '(123) 456-7890', 'email': 'mrman@gmail.com', 'category': 'friend'},
    {'name': 'Ruby', 'phone': '(010) 101-0101', 'email': 'gems@gmail.com', 'category': 'work'},
    {'name': 'User', 'phone': '(555) 555-5555', 'email': 'user@mail.com', 'category': 'other'},
]


def write_contacts(path, records):
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(records, f, sort_keys=False)


@pytest.fixture
def app(tmp_path):
    contacts_file = tmp_path / 'contacts.yml'
    write_contacts(contacts_file, CONTACTS)
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'CONTACTS_FILE': str(contacts_file),
        'USERS_FILE': str(tmp_path / 'users.yml'),
        'BCRYPT_LOG_ROUNDS': 4,
    })
    app.extensions['credentials'].set_password('admin', 'secret')
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['_user_id'] = 'admin'
    return client


@pytest.fixture
def stored(app):
    def load():
        return app.extensions['contacts'].load()
    return load


@pytest.fixture
def flashes(client):
    def read():
        with client.session_transaction() as sess:
            return [message for _, message in sess.get('_flashes', [])]
    return read
