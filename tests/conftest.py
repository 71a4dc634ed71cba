"""
Shared fixtures
"""
import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.routers.otp import get_otp_service
from app.services.otp_service import OTPService
from app.utils.sms import OTPProvider


class StubProvider(OTPProvider):
    """
    Scripted provider: returns the queued body, or raises it if it is an exception.
    Records every call.
    """

    def __init__(self, send_result=None, verify_result=None):
        self.send_result = send_result
        self.verify_result = verify_result
        self.send_calls = []
        self.verify_calls = []

    def send_otp(self, phone):
        self.send_calls.append(phone)
        return self._result(self.send_result)

    def verify_otp(self, session_id, otp):
        self.verify_calls.append((session_id, otp))
        return self._result(self.verify_result)

    @staticmethod
    def _result(result):
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def service(provider):
    return OTPService(provider, country_code="+91")


@pytest.fixture
def client(service):
    app.dependency_overrides[get_otp_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
