"""
Custom exceptions for the fitness planner.

Each exception carries a descriptive message, an error code and optional
details for debugging. Malformed preference or profile data never raises;
these exceptions cover lookups performed by the service layer.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND = "NOT_FOUND"

    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROGRAM_NOT_FOUND = "PROGRAM_NOT_FOUND"


class FitnessPlannerError(Exception):
    """
    Base exception for all fitness planner errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Not Found Errors
# ============================================================================

class NotFoundError(FitnessPlannerError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        code: ErrorCode = ErrorCode.NOT_FOUND,
    ) -> None:
        super().__init__(
            message=f"{resource_type} not found: {resource_id}",
            code=code,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id, ErrorCode.USER_NOT_FOUND)


class ProgramNotFoundError(NotFoundError):
    """Raised when a training program is not found."""

    def __init__(self, program_id: str) -> None:
        super().__init__("Program", program_id, ErrorCode.PROGRAM_NOT_FOUND)
