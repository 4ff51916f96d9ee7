# services/validators.py

import re

AADHAAR_PATTERN = re.compile(r'^\d{12}$', re.ASCII)
PAN_PATTERN = re.compile(r'^[A-Z]{5}[0-9]{4}[A-Z]$', re.ASCII)
MOBILE_PATTERN = re.compile(r'^[6-9]\d{9}$', re.ASCII)
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$', re.ASCII)
NAME_PATTERN = re.compile(r'^[a-zA-Z\s.]+$', re.ASCII)
OTP_PATTERN = re.compile(r'^\d{6}$', re.ASCII)

ENTERPRISE_NAME_MIN_LENGTH = 3
ENTERPRISE_NAME_MAX_LENGTH = 100


def _matches(pattern, value):
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_aadhaar(aadhaar):
    return _matches(AADHAAR_PATTERN, aadhaar)


def validate_pan(pan):
    """PAN is matched case-insensitively: the input is uppercased first."""
    return isinstance(pan, str) and _matches(PAN_PATTERN, pan.upper())


def validate_mobile(mobile):
    return _matches(MOBILE_PATTERN, mobile)


def validate_email(email):
    return _matches(EMAIL_PATTERN, email)


def validate_name(name):
    return _matches(NAME_PATTERN, name) and len(name) >= 2


def validate_otp(otp):
    return _matches(OTP_PATTERN, otp)


def validate_enterprise_name(name):
    return isinstance(name, str) and ENTERPRISE_NAME_MIN_LENGTH <= len(name) <= ENTERPRISE_NAME_MAX_LENGTH


# field id -> (validator, required message, format message)
FIELD_RULES = {
    'aadhaar': (
        validate_aadhaar,
        'Aadhaar number is required',
        'Aadhaar number must be exactly 12 digits',
    ),
    'pan': (
        validate_pan,
        'PAN is required',
        'PAN format: 5 letters, 4 numbers, 1 letter (e.g., ABCDE1234F)',
    ),
    'mobile': (
        validate_mobile,
        'Mobile number is required',
        'Mobile number must be 10 digits starting with 6-9',
    ),
    'email': (
        validate_email,
        'Email is required',
        'Please enter a valid email address',
    ),
    'nameAsPerAadhaar': (
        validate_name,
        'Name is required',
        'Name should contain only letters, spaces and dots',
    ),
    'otp': (
        validate_otp,
        'OTP is required',
        'OTP must be exactly 6 digits',
    ),
    'nameOfEnterprise': (
        validate_enterprise_name,
        'Enterprise name is required',
        'Enterprise name should be between 3 to 100 characters',
    ),
}


def get_validation_error(field, value):
    """
    Return None when ``value`` is valid for ``field``, otherwise a message
    suitable for showing next to the input.

    Unknown field ids are only checked for presence.
    """
    rule = FIELD_RULES.get(field)
    if rule is None:
        if not value:
            return f'{field} is required'
        return None

    validator, required_message, format_message = rule
    if not value:
        return required_message
    if not validator(value):
        return format_message
    return None
