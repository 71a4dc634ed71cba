"""
Services
"""
from .otp_service import OTPService

__all__ = ["OTPService"]
