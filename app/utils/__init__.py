"""
Utility Functions
"""
from .phone_validator import normalize_phone, validate_otp_code, require_session_id
from .error_messages import parse_send_error, parse_verification_error

__all__ = [
    "normalize_phone",
    "validate_otp_code",
    "require_session_id",
    "parse_send_error",
    "parse_verification_error",
]
