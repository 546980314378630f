from typing import Optional, Any


class AutoResponderError(Exception):
    """
    Base exception for the auto-responder application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidRequestError(AutoResponderError):
    """
    Raised when an inbound Slack payload fails token, type or event validation.
    """
    def __init__(self, message: str = "Invalid request", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_REQUEST", status_code=400, details=details)


class StorageUnavailableError(AutoResponderError):
    """
    Raised when the configuration store is unreachable or an operation times out.
    """
    def __init__(self, message: str = "Configuration storage unavailable", details: Optional[Any] = None):
        super().__init__(message, code="STORAGE_UNAVAILABLE", status_code=503, details=details)


class SendFailedError(AutoResponderError):
    """
    Raised when Slack rejects or never answers a chat.postMessage call.
    """
    def __init__(self, message: str = "Failed to send message", details: Optional[Any] = None):
        super().__init__(message, code="SEND_FAILED", status_code=502, details=details)
