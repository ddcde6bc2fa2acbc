from flask import current_app, flash, redirect, request, url_for
from flask_bcrypt import Bcrypt
from flask_login import LoginManager, UserMixin

SIGNIN_REQUIRED = 'You must be signed in to perform that action.'

bcrypt = Bcrypt()
login_manager = LoginManager()


class User(UserMixin):
    def __init__(self, username):
        self.id = username
        self.username = username


@login_manager.user_loader
def load_user(user_id):
    if current_app.extensions['credentials'].exists(user_id):
        return User(user_id)
    return None


@login_manager.unauthorized_handler
def redirect_signed_out():
    flash(SIGNIN_REQUIRED)
    name = (request.view_args or {}).get('name') or request.values.get('name')
    if name:
        return redirect(url_for('contacts.entry', name=name))
    return redirect(url_for('contacts.index'))
