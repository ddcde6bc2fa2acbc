import re

NON_DIGITS = re.compile(r'[^0-9]')


def phone_digits(phone):
    return NON_DIGITS.sub('', phone or '')


def format_name(name):
    # str.capitalize lowercases the tail too: "mcDonald" -> "Mcdonald"
    return ' '.join(word.capitalize() for word in name.split())


def format_phone(phone):
    """Render a 10-digit number as ``(AAA) BBB-CCCC``.

    Callers validate first; any punctuation in the input is dropped.
    """
    digits = phone_digits(phone)
    return f'({digits[0:3]}) {digits[3:6]}-{digits[6:10]}'
