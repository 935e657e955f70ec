"""
Custom exception hierarchy

Business-layer exceptions, kept apart from system errors.
Every custom exception derives from JournalBaseException.
"""

from typing import Any, Optional


class JournalBaseException(Exception):
    """
    Base business exception

    Carries a stable error code and a message for API responses.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None
    ):
        """
        Args:
            message: error message
            code: error code (used in API responses)
            details: extra error details
        """
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict for API responses"""
        result = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ==================== Data access ====================

class DataNotFoundError(JournalBaseException):
    """Data not found"""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            code="DATA_NOT_FOUND",
            details={"resource": resource, "identifier": identifier}
        )
        self.resource = resource
        self.identifier = identifier


class SignalNotFoundError(DataNotFoundError):
    """No signal with the requested id"""

    def __init__(self, signal_id: int):
        super().__init__(resource="Signal", identifier=signal_id)
        self.code = "SIGNAL_NOT_FOUND"
        self.signal_id = signal_id


class EndpointDisabledError(DataNotFoundError):
    """Optional endpoint switched off by configuration"""

    def __init__(self, endpoint: str):
        super().__init__(resource="Endpoint", identifier=endpoint)
        self.code = "ENDPOINT_DISABLED"


class DatabaseError(JournalBaseException):
    """Database operation failed"""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Database {operation} failed: {reason}",
            code="DATABASE_ERROR",
            details={"operation": operation, "reason": reason}
        )


# ==================== Business logic ====================

class BusinessLogicError(JournalBaseException):
    """Business rule violated"""

    def __init__(self, message: str, code: str = "BUSINESS_LOGIC_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(
            message=message,
            code=code,
            details=details
        )


class LifecycleError(BusinessLogicError):
    """Illegal signal state transition"""


class AlreadyAnalyzedError(LifecycleError):
    """Signal was analyzed before; analysis happens exactly once"""

    def __init__(self, signal_id: int, analyzed_by: Optional[str] = None):
        details: dict[str, Any] = {"signal_id": signal_id}
        if analyzed_by:
            details["analyzed_by"] = analyzed_by
        super().__init__(
            message="Signal already analyzed",
            code="ALREADY_ANALYZED",
            details=details
        )
        self.signal_id = signal_id
        self.analyzed_by = analyzed_by


# ==================== Authentication ====================

class AuthenticationError(JournalBaseException):
    """Authentication failed"""

    def __init__(self, reason: str = "Authentication failed"):
        super().__init__(
            message=reason,
            code="AUTHENTICATION_ERROR"
        )


# ==================== Service availability ====================

class ServiceUnavailableError(JournalBaseException):
    """Service unavailable"""

    def __init__(self, service: str, reason: str, code: str = "SERVICE_UNAVAILABLE"):
        super().__init__(
            message=f"Service {service} is unavailable: {reason}",
            code=code,
            details={"service": service, "reason": reason}
        )


class StoreUnreachableError(ServiceUnavailableError):
    """The backing database cannot be queried"""

    def __init__(self, reason: str):
        super().__init__(service="database", reason=reason, code="STORE_UNREACHABLE")
