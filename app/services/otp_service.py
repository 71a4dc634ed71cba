"""
OTP send / verify through the upstream provider

Every call returns an Outcome; errors never escape to the HTTP layer.
"""
import logging
from typing import Optional
import requests
from starlette.concurrency import run_in_threadpool
from app.core.errors import (
    ConfigurationError,
    OtpRelayError,
    ProviderRejection,
    ValidationError,
)
from app.schemas.otp import Failure, Outcome, Success
from app.utils.error_messages import (
    SEND_FALLBACK_MESSAGE,
    VERIFY_FALLBACK_MESSAGE,
    parse_send_error,
    parse_verification_error,
)
from app.utils.phone_validator import normalize_phone, require_session_id, validate_otp_code
from app.utils.sms import OTPProvider

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "Success"
SERVICE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable. Please try again later."


def _error_detail(data: dict) -> Optional[str]:
    """Provider error text: Details, falling back to message"""
    detail = data.get("Details") or data.get("message")
    if detail is None or detail == "":
        return None
    return detail if isinstance(detail, str) else str(detail)


def _mask(value: str) -> str:
    return value[:4] + "***" if len(value) > 4 else "***"


class OTPService:
    """
    Send and verify OTPs.

    provider is injected so tests can script the upstream responses.
    """

    def __init__(self, provider: OTPProvider, country_code: str = "+91"):
        self.provider = provider
        self.country_code = country_code

    async def send_otp(self, phone) -> Outcome:
        try:
            is_valid, value = normalize_phone(phone)
            if not is_valid:
                raise ValidationError(value)

            full_phone = f"{self.country_code}{value}"
            logger.info(f"[OTP] Sending OTP to {_mask(full_phone)}")

            data = await run_in_threadpool(self.provider.send_otp, full_phone)
            logger.info(f"[OTP] 2Factor send response status: {data.get('Status')}")

            if data.get("Status") != SUCCESS_STATUS:
                detail = _error_detail(data)
                logger.error(f"[OTP] 2Factor send error: {detail}")
                raise ProviderRejection(parse_send_error(detail))

            session_id = data.get("Details")
            if not isinstance(session_id, str) or not session_id:
                raise ProviderRejection(SEND_FALLBACK_MESSAGE)

            logger.info(f"[OTP] OTP sent successfully, session {_mask(session_id)}")
            return Success(payload={
                "sessionId": session_id,
                "message": "OTP sent successfully to your phone number.",
                "phone": full_phone,
            })
        except ConfigurationError as e:
            logger.error(f"[OTP] {e.message}")
            return Failure(message=SERVICE_UNAVAILABLE_MESSAGE)
        except OtpRelayError as e:
            return Failure(message=e.message)
        except requests.RequestException as e:
            logger.error(f"[OTP] Error sending OTP: {type(e).__name__}")
            response = getattr(e, "response", None)
            if response is not None:
                return Failure(message=parse_send_error(self._response_detail(response)))
            return Failure(message=SEND_FALLBACK_MESSAGE)
        except Exception:
            logger.exception("[OTP] Unexpected error sending OTP")
            return Failure(message=SEND_FALLBACK_MESSAGE)

    async def verify_otp(self, session_id, otp) -> Outcome:
        try:
            is_valid, value = require_session_id(session_id)
            if not is_valid:
                raise ValidationError(value)
            is_valid, value = validate_otp_code(otp)
            if not is_valid:
                raise ValidationError(value)

            logger.info(f"[OTP] Verifying OTP for session {_mask(session_id)}")

            data = await run_in_threadpool(self.provider.verify_otp, session_id, otp)
            logger.info(f"[OTP] 2Factor verify response status: {data.get('Status')}")

            if data.get("Status") != SUCCESS_STATUS:
                detail = _error_detail(data)
                logger.warning(f"[OTP] Verification failed: {detail}")
                raise ProviderRejection(parse_verification_error(detail))

            logger.info("[OTP] OTP verified successfully")
            return Success(payload={"message": "OTP verified successfully."})
        except ConfigurationError as e:
            logger.error(f"[OTP] {e.message}")
            return Failure(message=SERVICE_UNAVAILABLE_MESSAGE)
        except OtpRelayError as e:
            return Failure(message=e.message)
        except requests.RequestException as e:
            logger.error(f"[OTP] Error verifying OTP: {type(e).__name__}")
            response = getattr(e, "response", None)
            if response is not None:
                return Failure(message=parse_verification_error(self._response_detail(response)))
            return Failure(message=VERIFY_FALLBACK_MESSAGE)
        except Exception:
            logger.exception("[OTP] Unexpected error verifying OTP")
            return Failure(message=VERIFY_FALLBACK_MESSAGE)

    @staticmethod
    def _response_detail(response) -> Optional[str]:
        if response is None:
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        return _error_detail(data) if isinstance(data, dict) else None
