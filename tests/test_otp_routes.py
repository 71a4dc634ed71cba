"""
Tests for OTP endpoints
"""
import pytest
from app.core.config import settings
from app.core.errors import TransportError
from app.routers.otp import get_otp_service
from app.utils.error_messages import REQUEST_TIMEOUT_MESSAGE


@pytest.mark.parametrize("prefix", ["/api", ""])
def test_send_otp_success(client, provider, prefix):
    """Test send under both mounts"""
    provider.send_result = {"Status": "Success", "Details": "sess_abc"}

    response = client.post(f"{prefix}/send-otp", json={"phone": "98-7654-3210"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] == True
    assert data["sessionId"] == "sess_abc"
    assert data["phone"] == "+919876543210"
    assert provider.send_calls == ["+919876543210"]


def test_send_otp_missing_phone(client, provider):
    """Test missing phone is rejected before the service"""
    response = client.post("/api/send-otp", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Phone number is required"}
    assert provider.send_calls == []


def test_send_otp_no_body(client):
    """Test request without a body"""
    response = client.post("/api/send-otp")

    assert response.status_code == 400
    assert response.json()["error"] == "Phone number is required"


def test_send_otp_invalid_phone(client, provider):
    """Test invalid phone returns 400 with no provider call"""
    response = client.post("/api/send-otp", json={"phone": "12345"})

    assert response.status_code == 400
    assert response.json()["success"] == False
    assert response.json()["error"].startswith("Invalid phone number format")
    assert provider.send_calls == []


def test_send_otp_timeout(client, provider):
    """Test provider timeout"""
    provider.send_result = TransportError(REQUEST_TIMEOUT_MESSAGE)

    response = client.post("/api/send-otp", json={"phone": "9876543210"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Request timeout. Please try again."}


def test_send_otp_wrong_type(client):
    """Test malformed body gets the uniform error shape"""
    response = client.post("/api/send-otp", json={"phone": ["9876543210"]})

    assert response.status_code == 400
    assert response.json()["success"] == False
    assert response.json()["error"].startswith("Validation Error")


@pytest.mark.parametrize("field", ["phone", "phoneNumber", "mobile"])
def test_legacy_send_otp_field_names(client, provider, field):
    """Test legacy route accepts old field names"""
    provider.send_result = {"Status": "Success", "Details": "sess_abc"}

    response = client.post("/sendotp", json={field: "9876543210"})

    assert response.status_code == 200
    assert response.json()["sessionId"] == "sess_abc"


def test_verify_otp_success(client, provider):
    """Test successful verification"""
    provider.verify_result = {"Status": "Success", "Details": "OTP Matched"}

    response = client.post("/api/verify-otp", json={"sessionId": "sess_abc", "otp": "123456"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "OTP verified successfully."}


@pytest.mark.parametrize("body, error", [
    ({"otp": "123456"}, "Session ID is required"),
    ({"sessionId": "sess_abc"}, "OTP code is required"),
])
def test_verify_otp_missing_fields(client, provider, body, error):
    """Test missing fields"""
    response = client.post("/api/verify-otp", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": error}
    assert provider.verify_calls == []


def test_verify_otp_bad_format(client, provider):
    """Test malformed OTP never reaches the provider"""
    response = client.post("/api/verify-otp", json={"sessionId": "sess_abc", "otp": "12E456"})

    assert response.status_code == 400
    assert "valid 6-digit OTP" in response.json()["error"]
    assert provider.verify_calls == []


def test_verify_otp_session_not_found(client, provider):
    """Test provider session error mapping"""
    provider.verify_result = {"Status": "Failed", "Details": "Session Not Found"}

    response = client.post("/api/verify-otp", json={"sessionId": "sess_abc", "otp": "123456"})

    assert response.status_code == 400
    assert response.json()["error"] == "Verification session not found. Please request a new OTP."


def test_legacy_verify_otp_missing_fields(client):
    """Test legacy verify requires both fields"""
    response = client.post("/verifyotp", json={"sessionId": "sess_abc"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Session ID and OTP are required"}


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert "timestamp" in response.json()


def test_unknown_endpoint(client):
    """Test 404 shape"""
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Endpoint not found: /api/nope"}


def test_get_otp_service_uses_settings(monkeypatch):
    """Test the service dependency is built from settings"""
    monkeypatch.setattr(settings, "TWOFACTOR_API_KEY", "KEY")
    monkeypatch.setattr(settings, "TWOFACTOR_API_URL", "https://otp.example.com/API/V1")
    monkeypatch.setattr(settings, "OTP_REQUEST_TIMEOUT", 7)
    monkeypatch.setattr(settings, "OTP_COUNTRY_CODE", "+44")

    service = get_otp_service()

    assert service.country_code == "+44"
    assert service.provider.api_key == "KEY"
    assert service.provider.base_url == "https://otp.example.com/API/V1"
    assert service.provider.timeout == 7
