from contact_book.models import Contact
from contact_book.validation import (
    CATEGORY_MISSING,
    EMAIL_BLANK,
    NAME_BLANK,
    NAME_TAKEN,
    PHONE_LENGTH,
    is_duplicate,
    validate_for_create,
    validate_for_edit,
)

EXISTING = [Contact('Hudson', '(123) 456-7890', 'mrman@gmail.com', 'friend')]


def fields(**overrides):
    data = {'name': 'link', 'phone': '1112223333', 'email': 'link@hyrule.com', 'category': 'work'}
    data.update(overrides)
    return data


def test_valid_contact_passes():
    assert validate_for_create(fields(), EXISTING) is None
    assert validate_for_edit(fields()) is None


def test_blank_name():
    assert validate_for_create(fields(name=''), EXISTING) == NAME_BLANK
    assert validate_for_edit(fields(name='   ')) == NAME_BLANK


def test_name_reported_before_phone():
    assert validate_for_create(fields(name='', phone='1'), EXISTING) == NAME_BLANK
    assert validate_for_edit(fields(name='', phone='1')) == NAME_BLANK


def test_duplicate_is_case_insensitive():
    assert validate_for_create(fields(name='hudson'), EXISTING) == NAME_TAKEN
    assert validate_for_create(fields(name='  HUDSON '), EXISTING) == NAME_TAKEN


def test_duplicate_reported_before_phone():
    assert validate_for_create(fields(name='hudson', phone='1'), EXISTING) == NAME_TAKEN


def test_edit_allows_existing_name():
    assert validate_for_edit(fields(name='hudson')) is None


def test_phone_must_have_ten_digits():
    assert validate_for_create(fields(phone='111'), EXISTING) == PHONE_LENGTH
    assert validate_for_create(fields(phone=''), EXISTING) == PHONE_LENGTH
    assert validate_for_create(fields(phone='11122233334444'), EXISTING) == PHONE_LENGTH
    assert validate_for_create(fields(phone='١١١٢٢٢٣٣٣٣'), EXISTING) == PHONE_LENGTH
    assert validate_for_create(fields(phone='１１１２２２３３３３'), EXISTING) == PHONE_LENGTH
    assert validate_for_create(fields(phone='(111) 222-3333'), EXISTING) is None


def test_blank_email():
    assert validate_for_create(fields(email=''), EXISTING) == EMAIL_BLANK


def test_category_required():
    assert validate_for_create(fields(category=None), EXISTING) == CATEGORY_MISSING
    assert validate_for_edit(fields(category='enemy')) == CATEGORY_MISSING


def test_email_reported_before_category():
    assert validate_for_edit(fields(email='', category=None)) == EMAIL_BLANK


def test_is_duplicate():
    assert is_duplicate('hudson', EXISTING)
    assert not is_duplicate('Hud', EXISTING)
