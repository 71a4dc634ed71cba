"""
Input validation utilities
Phone number, OTP code and session id checks, run before any provider call
"""
import re

INVALID_PHONE_MESSAGE = "Invalid phone number format. Please enter a valid 10-digit number."
INVALID_OTP_MESSAGE = "Please enter a valid 6-digit OTP code."
MISSING_SESSION_MESSAGE = "Session ID is required for verification."

_NON_DIGITS = re.compile(r"\D", re.ASCII)
_OTP_PATTERN = re.compile(r"\d{6}", re.ASCII)


def normalize_phone(phone) -> tuple[bool, str]:
    """
    Validate and clean a 10-digit phone number

    Returns: (is_valid, digits) or (False, error message)
    Separators are allowed: "98-7654-3210" -> "9876543210"
    """
    if not isinstance(phone, str):
        return False, INVALID_PHONE_MESSAGE

    digits = _NON_DIGITS.sub("", phone)
    if len(digits) != 10:
        return False, INVALID_PHONE_MESSAGE

    return True, digits


def validate_otp_code(otp) -> tuple[bool, str]:
    """
    Check an OTP code is exactly 6 digits, without stripping anything

    Returns: (is_valid, otp) or (False, error message)
    """
    if not isinstance(otp, str) or not _OTP_PATTERN.fullmatch(otp):
        return False, INVALID_OTP_MESSAGE
    return True, otp


def require_session_id(session_id) -> tuple[bool, str]:
    """Session id is opaque; only presence is checked"""
    if not isinstance(session_id, str) or not session_id:
        return False, MISSING_SESSION_MESSAGE
    return True, session_id
