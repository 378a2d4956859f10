"""
Custom Exceptions for ReliefHub
===============================

Every error raised by the services derives from ReliefHubError, which
carries a machine-readable code, an HTTP status for the API layer and a
`retryable` flag telling the caller whether re-reading and retrying can
succeed (only capacity races are retryable).

Usage:
    from reliefhub.core.exceptions import NeedNotFoundError, OverCommitError

    if not need:
        raise NeedNotFoundError(need_id)

    try:
        await coordinator.pledge_assistance(...)
    except OverCommitError as e:
        logger.warning(f"Pledge lost a capacity race: {e}")
        raise
"""

from typing import Optional, Any, Dict


class ReliefHubError(Exception):
    """Base exception for all ReliefHub errors"""

    status_code: int = 500
    retryable: bool = False

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "retryable": self.retryable,
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(ReliefHubError):
    """Caller could not be identified"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTH_FAILED")


class AuthorizationError(ReliefHubError):
    """Actor lacks the role or ownership for this action"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(ReliefHubError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ActorRoleError(AuthorizationError, ValidationError):
    """Actor's role does not allow the operation"""

    status_code = 403

    def __init__(self, required_role: str, actual_role: str):
        ReliefHubError.__init__(
            self,
            f"This action requires the '{required_role}' role (actor has '{actual_role}')",
            code="ROLE_NOT_PERMITTED",
            details={"required_role": required_role, "actual_role": actual_role},
        )


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(ReliefHubError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


NotFoundError = ResourceNotFoundError


class ProfileNotFoundError(ResourceNotFoundError):
    """Profile not found"""

    def __init__(self, profile_id: str):
        super().__init__("Profile", profile_id)


class CampNotFoundError(ResourceNotFoundError):
    """Camp not found"""

    def __init__(self, camp_id: str):
        super().__init__("Camp", camp_id)


class NeedNotFoundError(ResourceNotFoundError):
    """Camp need not found (or deleted concurrently)"""

    def __init__(self, need_id: str):
        super().__init__("Need", need_id)


class AssistanceNotFoundError(ResourceNotFoundError):
    """Assistance ledger entry not found"""

    def __init__(self, entry_id: str):
        super().__init__("Assistance", entry_id)


# ============================================
# Conflict Errors (409-type)
# ============================================

class OverCommitError(ReliefHubError):
    """Lost a capacity race; re-read and retry"""

    status_code = 409
    retryable = True

    def __init__(self, requested: int, remaining: int, message: Optional[str] = None):
        super().__init__(
            message or f"Requested quantity {requested} exceeds remaining need {remaining}",
            code="OVER_COMMIT",
            details={"requested": requested, "remaining": remaining}
        )


class CapacityExceededError(OverCommitError):
    """Not enough free seats in the camp"""

    def __init__(self, camp_id: str, requested: int, available: int):
        super().__init__(
            requested,
            available,
            message=f"Camp has {available} free seat(s), {requested} requested",
        )
        self.code = "CAPACITY_EXCEEDED"
        self.details["camp_id"] = camp_id


class InvalidTransitionError(ReliefHubError):
    """Illegal status change"""

    status_code = 409

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Cannot move delivery status from '{current}' to '{requested}'",
            code="INVALID_TRANSITION",
            details={"current": current, "requested": requested}
        )


class DuplicateRegistrationError(ReliefHubError):
    """Same volunteer registration already exists"""

    status_code = 409

    def __init__(self, user_id: str, camp_id: Optional[str], volunteer_type: str):
        super().__init__(
            "You're already registered for this camp"
            if camp_id else f"You're already registered as a {volunteer_type} volunteer",
            code="DUPLICATE_REGISTRATION",
            details={"user_id": user_id, "camp_id": camp_id, "volunteer_type": volunteer_type}
        )


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: ReliefHubError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "error": error.to_dict()
    }
