import logging

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from .auth import User
from .formatting import format_name, format_phone
from .models import Contact
from .validation import validate_for_create, validate_for_edit

logger = logging.getLogger(__name__)

bp = Blueprint('contacts', __name__)

# url segment -> (stored category, page title)
LISTINGS = {
    'all': (None, 'Contacts (All)'),
    'friends': ('friend', 'Contacts - Friends'),
    'family': ('family', 'Contacts - Family'),
    'work': ('work', 'Contacts - Work'),
    'other': ('other', 'Contacts - Other'),
}


def repository():
    return current_app.extensions['contacts']


def find_index(contacts, name):
    # last match wins when a name appears more than once
    index = None
    for i, contact in enumerate(contacts):
        if contact.name == name:
            index = i
    return index


def find_entry(contacts, name):
    index = find_index(contacts, name)
    return None if index is None else contacts[index]


def contact_from_form(form):
    return Contact(
        name=format_name(form['name']),
        phone=format_phone(form['phone']),
        email=form['email'].strip(),
        category=form['category'],
    )


# ---------- Pages ----------
@bp.route('/')
def index():
    return render_template('index.html')


@bp.route('/ping')
def ping():
    return 'pong'


@bp.route('/contacts/<any(all, friends, family, work, other):listing>')
def contact_list(listing):
    category, title = LISTINGS[listing]
    contacts = repository().load()
    if category:
        contacts = [c for c in contacts if c.category == category]
    contacts.sort(key=lambda c: c.name)
    return render_template('contacts.html', contacts=contacts, title=title)


@bp.route('/contacts/entry/<name>')
def entry(name):
    return render_template('contact.html', entry=find_entry(repository().load(), name))


# ---------- New ----------
@bp.route('/new', methods=['GET', 'POST'])
@login_required
def new():
    if request.method == 'GET':
        return render_template('new.html', form={})

    repo = repository()
    contacts = repo.load()
    error = validate_for_create(request.form, contacts)
    if error:
        return render_template('new.html', form=request.form, error=error), 422

    contact = contact_from_form(request.form)
    contacts.append(contact)
    repo.save(contacts)
    logger.info('Contact %r added by %s', contact.name, current_user.username)
    flash(f"Contact '{contact.name}' added")
    return redirect(url_for('contacts.index'))


# ---------- Edit ----------
@bp.route('/contacts/entry/<name>/edit')
@login_required
def edit_form(name):
    contact = find_entry(repository().load(), name)
    if contact is None:
        flash(f"Contact '{name}' not found.")
        return redirect(url_for('contacts.index'))
    return render_template('edit.html', form=contact.to_dict(), original_name=contact.name)


@bp.route('/edit', methods=['POST'])
@login_required
def edit():
    original_name = request.form.get('original_name', '')
    error = validate_for_edit(request.form)
    if error:
        return render_template('edit.html', form=request.form, original_name=original_name, error=error), 422

    repo = repository()
    contacts = repo.load()
    index = find_index(contacts, original_name)
    if index is not None:
        # the record the edit form was built from
        del contacts[index]
    contact = contact_from_form(request.form)
    contacts.append(contact)
    repo.save(contacts)
    logger.info('Contact %r edited (was %r) by %s', contact.name, original_name, current_user.username)
    flash(f"Contact '{contact.name}' edited.")
    return redirect(url_for('contacts.index'))


# ---------- Delete ----------
@bp.route('/contacts/entry/<name>/delete', methods=['POST'])
@login_required
def delete(name):
    repo = repository()
    contacts = repo.load()
    remaining = [c for c in contacts if c.name != name]
    repo.save(remaining)
    logger.info('Deleted %d contact(s) named %r', len(contacts) - len(remaining), name)
    flash(f"Contact '{name}' deleted.")
    return redirect(url_for('contacts.index'))


# ---------- Authentication ----------
@bp.route('/users/signin', methods=['GET', 'POST'])
def signin():
    if request.method == 'GET':
        return render_template('signin.html')

    username = request.form.get('username', '')
    if current_app.extensions['credentials'].verify(username, request.form.get('password', '')):
        login_user(User(username))
        logger.info('User %s signed in', username)
        flash('Welcome!')
        return redirect(url_for('contacts.index'))

    logger.warning('Failed sign-in attempt for %r', username)
    flash('Invalid credentials')
    return render_template('signin.html', username=username), 422


@bp.route('/users/signout', methods=['POST'])
def signout():
    if current_user.is_authenticated:
        logger.info('User %s signed out', current_user.username)
    logout_user()
    flash('You have been signed out.')
    return redirect(url_for('contacts.index'))
