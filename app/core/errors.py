"""
Error taxonomy for the OTP relay

Each error carries a user-presentable message. They are raised inside the
provider/service layer and converted to Failure outcomes before reaching
the HTTP layer.
"""


class OtpRelayError(Exception):
    """Base class for all relay errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OtpRelayError):
    """Malformed caller input, detected before any network call"""


class ProviderRejection(OtpRelayError):
    """Provider answered with a non-success status"""


class TransportError(OtpRelayError):
    """Network unreachable, connection refused or timed out"""


class ConfigurationError(OtpRelayError):
    """Provider API key (or other required setting) is missing"""
