"""
User-facing messages for 2Factor errors

Provider error text is matched case-insensitively against ordered rule
tables. The first rule with a matching substring wins.
"""
from typing import Optional

NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection and try again."
REQUEST_TIMEOUT_MESSAGE = "Request timeout. Please try again."
SEND_FALLBACK_MESSAGE = "An unexpected error occurred. Please try again."
VERIFY_FALLBACK_MESSAGE = "An unexpected error occurred during verification. Please try again."
SEND_EMPTY_DETAIL_MESSAGE = "Failed to send OTP"
VERIFY_DEFAULT_MESSAGE = "Verification failed. Please try again or request a new code."

# (substrings, message), checked top to bottom
SEND_ERROR_RULES: list[tuple[tuple[str, ...], str]] = [
    (("invalid number", "invalid mobile"),
     "Invalid phone number format. Please check and try again."),
    (("dnd", "do not disturb"),
     "Your number is on DND. Please disable DND or try with a different number."),
    (("rate limit", "too many requests"),
     "Too many requests. Please wait a few minutes before trying again."),
    # billing problems are not shown to users
    (("insufficient balance", "low balance"),
     "Service temporarily unavailable. Please try again later."),
    (("operator issue", "carrier issue", "network error"),
     "Network issue with your carrier. Please try again in a few minutes."),
    (("blocked", "blacklist"),
     "This number cannot receive OTP messages. Please contact support."),
]

VERIFY_ERROR_RULES: list[tuple[tuple[str, ...], str]] = [
    (("invalid otp", "wrong otp", "incorrect", "otp mismatch"),
     "Invalid OTP code. Please check the code and try again."),
    (("expired", "timeout"),
     "OTP code has expired. Please request a new code."),
    (("already verified", "already used"),
     "This OTP code has already been used. Please request a new code."),
    (("session not found", "invalid session"),
     "Verification session not found. Please request a new OTP."),
]


def match_rule(error_message: str, rules: list[tuple[tuple[str, ...], str]]) -> Optional[str]:
    """Return the message of the first rule matching error_message, if any"""
    error = error_message.lower()
    for patterns, message in rules:
        if any(pattern in error for pattern in patterns):
            return message
    return None


def parse_send_error(error_message: Optional[str]) -> str:
    """
    Map a send-path provider error to a user-friendly message.
    Unrecognized messages are returned unchanged.
    """
    if not error_message:
        return SEND_EMPTY_DETAIL_MESSAGE
    return match_rule(error_message, SEND_ERROR_RULES) or error_message


def parse_verification_error(error_message: Optional[str]) -> str:
    """
    Map a verify-path provider error to a user-friendly message.
    Unrecognized messages are replaced by a generic one.
    """
    if not error_message:
        return VERIFY_DEFAULT_MESSAGE
    return match_rule(error_message, VERIFY_ERROR_RULES) or VERIFY_DEFAULT_MESSAGE
