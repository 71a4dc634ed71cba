"""
SMS OTP provider clients
"""
import logging
from abc import ABC, abstractmethod
from urllib.parse import quote
import requests
from app.core.errors import ConfigurationError, TransportError
from app.utils.error_messages import NETWORK_ERROR_MESSAGE, REQUEST_TIMEOUT_MESSAGE

logger = logging.getLogger(__name__)


class OTPProvider(ABC):
    """
    Upstream OTP provider.

    Both calls return the provider's JSON body ({"Status": ..., "Details": ...}).
    Connection failures and timeouts raise TransportError; any other
    requests error propagates to the caller.
    """

    @abstractmethod
    def send_otp(self, phone: str) -> dict:
        """Ask the provider to generate and send an OTP to phone (with country prefix)"""

    @abstractmethod
    def verify_otp(self, session_id: str, otp: str) -> dict:
        """Check otp against the provider session"""


class TwoFactorProvider(OTPProvider):
    """
    2Factor.in SMS OTP API

    Send:   GET {base}/{api_key}/SMS/{phone}/AUTOGEN/OTP1
    Verify: GET {base}/{api_key}/SMS/VERIFY/{session_id}/{otp}
    """

    def __init__(self, api_key: str, base_url: str = "https://2factor.in/API/V1", timeout: float = 10):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def send_otp(self, phone: str) -> dict:
        return self._get(f"SMS/{phone}/AUTOGEN/OTP1")

    def verify_otp(self, session_id: str, otp: str) -> dict:
        # keep the session id inside one path segment
        return self._get(f"SMS/VERIFY/{quote(session_id, safe='')}/{quote(otp, safe='')}")

    def _get(self, path: str) -> dict:
        if not self.api_key:
            raise ConfigurationError("2Factor.in API key not configured")

        url = f"{self.base_url}/{self.api_key}/{path}"
        try:
            response = requests.get(
                url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"}
            )
        # ConnectTimeout is also a ConnectionError, so timeouts go first
        except requests.Timeout as e:
            logger.error(f"[2Factor] Request timed out: {type(e).__name__}")
            raise TransportError(REQUEST_TIMEOUT_MESSAGE) from e
        except requests.ConnectionError as e:
            logger.error(f"[2Factor] Connection failed: {type(e).__name__}")
            raise TransportError(NETWORK_ERROR_MESSAGE) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            # Error statuses still carry a {"Status": "Error", "Details": ...} body
            return data

        response.raise_for_status()
        raise requests.RequestException(
            f"Unexpected response from 2Factor (HTTP {response.status_code})",
            response=response
        )
