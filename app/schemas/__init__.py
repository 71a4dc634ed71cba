"""
Request and response schemas
"""
from .otp import SendOtpRequest, VerifyOtpRequest, Success, Failure, Outcome, status_code_for

__all__ = ["SendOtpRequest", "VerifyOtpRequest", "Success", "Failure", "Outcome", "status_code_for"]
