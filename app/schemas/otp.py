"""
Request bodies and operation outcomes for the OTP endpoints
"""
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, Field


class SendOtpRequest(BaseModel):
    """Body of /send-otp; phoneNumber and mobile are accepted by the legacy route"""
    phone: Optional[str] = None
    phoneNumber: Optional[str] = None
    mobile: Optional[str] = None


class VerifyOtpRequest(BaseModel):
    sessionId: Optional[str] = None
    otp: Optional[str] = None


class Success(BaseModel):
    payload: Dict[str, Any] = Field(default_factory=dict)

    def to_response(self) -> dict:
        return {"success": True, **self.payload}


class Failure(BaseModel):
    message: str = Field(..., min_length=1)

    def to_response(self) -> dict:
        return {"success": False, "error": self.message}


Outcome = Union[Success, Failure]


def status_code_for(outcome: Outcome) -> int:
    """
    HTTP status for an outcome.
    Every failure is a client error, whatever caused it.
    """
    return 200 if isinstance(outcome, Success) else 400
