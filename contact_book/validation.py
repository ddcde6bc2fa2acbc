from .formatting import format_name, phone_digits
from .models import CATEGORIES

NAME_BLANK = 'Name entry cannot be left blank.'
NAME_TAKEN = 'Name entry must be unique.'
PHONE_LENGTH = 'Phone number must contain 10 digits.'
EMAIL_BLANK = 'Email entry cannot be left blank.'
CATEGORY_MISSING = 'You must select a category.'


def is_duplicate(name, contacts):
    wanted = format_name(name).lower()
    return any(contact.name.lower() == wanted for contact in contacts)


def _check(fields, contacts=None):
    # order matters: the first failing rule is the one reported
    name = (fields.get('name') or '').strip()
    if not name:
        return NAME_BLANK
    if contacts is not None and is_duplicate(name, contacts):
        return NAME_TAKEN
    if len(phone_digits(fields.get('phone'))) != 10:
        return PHONE_LENGTH
    if not (fields.get('email') or '').strip():
        return EMAIL_BLANK
    if fields.get('category') not in CATEGORIES:
        return CATEGORY_MISSING
    return None


def validate_for_create(fields, contacts):
    """Return the error message for a new contact, or None if it is acceptable."""
    return _check(fields, contacts)


def validate_for_edit(fields):
    return _check(fields)
