# tests/test_validators.py

import pytest

from services.validators import (
    get_validation_error,
    validate_aadhaar,
    validate_email,
    validate_enterprise_name,
    validate_mobile,
    validate_name,
    validate_otp,
    validate_pan,
)


@pytest.mark.parametrize("aadhaar", ["123456789012", "000000000000", "999999999999"])
def test_aadhaar_accepts_twelve_digits(aadhaar):
    assert validate_aadhaar(aadhaar)


@pytest.mark.parametrize("aadhaar", ["12345678901", "1234567890123", "12345678901a", "", "1234 5678 9012", "١٢٣٤٥٦٧٨٩٠١٢"])
def test_aadhaar_rejects_wrong_length_or_non_digits(aadhaar):
    assert not validate_aadhaar(aadhaar)


def test_aadhaar_rejects_trailing_newline():
    assert not validate_aadhaar("123456789012\n")


def test_pan_format():
    assert validate_pan("ABCDE1234F")
    assert validate_pan("abcde1234f"), "Lowercase input is normalized before matching"
    assert not validate_pan("ABCD1234F")
    assert not validate_pan("ABCDE12345F")
    assert not validate_pan("12CDE1234F")


@pytest.mark.parametrize("mobile", ["9876543210", "6123456789", "7987654321", "8765432109"])
def test_mobile_accepts_numbers_starting_6_to_9(mobile):
    assert validate_mobile(mobile)


@pytest.mark.parametrize("mobile", ["5876543210", "987654321", "98765432100", "98765abcde"])
def test_mobile_rejects_invalid(mobile):
    assert not validate_mobile(mobile)


def test_email():
    assert validate_email("test@example.com")
    assert validate_email("first.last+tag@mail.example.co.in")
    assert not validate_email("invalid-email")
    assert not validate_email("test@")
    assert not validate_email("@example.com")
    assert not validate_email("test@example.c")


def test_name():
    assert validate_name("John Doe")
    assert validate_name("A. K. Sharma")
    assert not validate_name("J"), "Names need at least 2 characters"
    assert not validate_name("John123")
    assert not validate_name("John@Doe")


def test_otp():
    assert validate_otp("123456")
    assert not validate_otp("12345")
    assert not validate_otp("1234567")
    assert not validate_otp("12345a")


def test_enterprise_name_length_bounds():
    assert not validate_enterprise_name("AB")
    assert validate_enterprise_name("ABC")
    assert validate_enterprise_name("A" * 100)
    assert not validate_enterprise_name("A" * 101)


def test_validators_reject_non_strings():
    assert not validate_aadhaar(None)
    assert not validate_aadhaar(123456789012)
    assert not validate_pan(None)
    assert not validate_enterprise_name(None)


def test_get_validation_error_required_messages():
    assert get_validation_error("aadhaar", "") == "Aadhaar number is required"
    assert get_validation_error("pan", "") == "PAN is required"
    assert get_validation_error("nameOfEnterprise", None) == "Enterprise name is required"


def test_get_validation_error_format_messages():
    assert get_validation_error("aadhaar", "123") == "Aadhaar number must be exactly 12 digits"
    assert get_validation_error("mobile", "5876543210") == "Mobile number must be 10 digits starting with 6-9"
    assert get_validation_error("otp", "12") == "OTP must be exactly 6 digits"


def test_get_validation_error_valid_values():
    assert get_validation_error("aadhaar", "123456789012") is None
    assert get_validation_error("pan", "abcde1234f") is None
    assert get_validation_error("email", "test@example.com") is None


def test_get_validation_error_unknown_field():
    assert get_validation_error("gender", "") == "gender is required"
    assert get_validation_error("gender", "M") is None
