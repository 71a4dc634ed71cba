"""
OTP endpoints
Mounted under /api and, for older clients, at the root
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.schemas.otp import Outcome, SendOtpRequest, VerifyOtpRequest, status_code_for
from app.services.otp_service import OTPService
from app.utils.sms import TwoFactorProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["otp"])


def get_otp_service() -> OTPService:
    """Build the OTP service from settings"""
    provider = TwoFactorProvider(
        api_key=settings.TWOFACTOR_API_KEY,
        base_url=settings.TWOFACTOR_API_URL,
        timeout=settings.OTP_REQUEST_TIMEOUT,
    )
    return OTPService(provider, country_code=settings.OTP_COUNTRY_CODE)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _respond(outcome: Outcome) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(outcome), content=outcome.to_response())


async def _send(service: OTPService, phone: str) -> JSONResponse:
    try:
        outcome = await service.send_otp(phone)
    except Exception:
        logger.exception("Error in send-otp")
        return _error(500, "Internal server error while sending OTP")
    return _respond(outcome)


async def _verify(service: OTPService, session_id: str, otp: str) -> JSONResponse:
    try:
        outcome = await service.verify_otp(session_id, otp)
    except Exception:
        logger.exception("Error in verify-otp")
        return _error(500, "Internal server error while verifying OTP")
    return _respond(outcome)


@router.post("/send-otp")
async def send_otp(
    body: Optional[SendOtpRequest] = None,
    service: OTPService = Depends(get_otp_service)
):
    """
    Send OTP to phone number
    Body: {"phone": "9876543210"}
    """
    body = body or SendOtpRequest()
    if not body.phone:
        return _error(400, "Phone number is required")

    logger.info("OTP request received")
    return await _send(service, body.phone)


@router.post("/verify-otp")
async def verify_otp(
    body: Optional[VerifyOtpRequest] = None,
    service: OTPService = Depends(get_otp_service)
):
    """
    Verify OTP code
    Body: {"sessionId": "...", "otp": "123456"}
    """
    body = body or VerifyOtpRequest()
    if not body.sessionId:
        return _error(400, "Session ID is required")
    if not body.otp:
        return _error(400, "OTP code is required")

    logger.info("OTP verification request received")
    return await _verify(service, body.sessionId, body.otp)


# ==================== Legacy ====================

@router.post("/sendotp", deprecated=True)
async def legacy_send_otp(
    body: Optional[SendOtpRequest] = None,
    service: OTPService = Depends(get_otp_service)
):
    """Old clients send the number as phone, phoneNumber or mobile"""
    logger.info("Legacy /sendotp endpoint used")
    body = body or SendOtpRequest()
    phone = body.phone or body.phoneNumber or body.mobile
    if not phone:
        return _error(400, "Phone number is required")
    return await _send(service, phone)


@router.post("/verifyotp", deprecated=True)
async def legacy_verify_otp(
    body: Optional[VerifyOtpRequest] = None,
    service: OTPService = Depends(get_otp_service)
):
    logger.info("Legacy /verifyotp endpoint used")
    body = body or VerifyOtpRequest()
    if not body.sessionId or not body.otp:
        return _error(400, "Session ID and OTP are required")
    return await _verify(service, body.sessionId, body.otp)
