import logging
import os

import click
from flask import Flask

from .auth import bcrypt, login_manager
from .config import Config
from .credentials import CredentialStore
from .formatting import phone_digits
from .storage import StorageError, YamlContactRepository, create_empty

__all__ = ['create_app', 'StorageError']


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.getLogger(__name__).setLevel(app.config['LOG_LEVEL'].upper())

    bcrypt.init_app(app)
    login_manager.init_app(app)
    app.extensions['contacts'] = YamlContactRepository(app.config['CONTACTS_FILE'])
    app.extensions['credentials'] = CredentialStore(app.config['USERS_FILE'], bcrypt)

    app.add_template_filter(phone_digits)

    from . import routes
    app.register_blueprint(routes.bp)

    register_commands(app)
    return app


def register_commands(app):
    @app.cli.command('init-data')
    @click.option('--force', is_flag=True, help='Overwrite an existing contacts file.')
    def init_data(force):
        """Create an empty contacts file."""
        path = app.config['CONTACTS_FILE']
        if os.path.exists(path) and not force:
            raise click.ClickException(f'{path} already exists (use --force to overwrite)')
        create_empty(path)
        click.echo(f'Created {path}')

    @app.cli.command('add-user')
    @click.argument('username')
    @click.password_option()
    def add_user(username, password):
        """Add a user or reset their password."""
        app.extensions['credentials'].set_password(username, password)
        click.echo(f'Stored credentials for {username} in {app.config["USERS_FILE"]}')
