"""
Unit Tests for the exception hierarchy
"""
from reliefhub.core.exceptions import (
    ActorRoleError,
    AuthorizationError,
    CapacityExceededError,
    DuplicateRegistrationError,
    InvalidTransitionError,
    NeedNotFoundError,
    NotFoundError,
    OverCommitError,
    ReliefHubError,
    ValidationError,
    error_response,
)


class TestErrorTaxonomy:

    def test_overcommit_is_retryable_conflict(self):
        error = OverCommitError(requested=6, remaining=4)

        assert error.status_code == 409
        assert error.retryable is True
        assert error.details == {"requested": 6, "remaining": 4}

    def test_capacity_exceeded_is_overcommit(self):
        error = CapacityExceededError("camp-1", requested=2, available=0)

        assert isinstance(error, OverCommitError)
        assert error.retryable is True
        assert error.code == "CAPACITY_EXCEEDED"
        assert error.details["camp_id"] == "camp-1"

    def test_actor_role_error_is_validation_and_authorization(self):
        error = ActorRoleError("ngo", "user")

        assert isinstance(error, ValidationError)
        assert isinstance(error, AuthorizationError)
        assert error.status_code == 403
        assert error.details == {"required_role": "ngo", "actual_role": "user"}

    def test_need_not_found(self):
        error = NeedNotFoundError("n-1")

        assert isinstance(error, NotFoundError)
        assert error.status_code == 404
        assert error.code == "NEED_NOT_FOUND"

    def test_non_retryable_conflicts(self):
        assert InvalidTransitionError("delivered", "pledged").retryable is False
        assert DuplicateRegistrationError("u", "c", "camp_volunteer").retryable is False

    def test_duplicate_registration_message(self):
        error = DuplicateRegistrationError("u", "c", "camp_volunteer")
        assert error.message == "You're already registered for this camp"

    def test_validation_error_field(self):
        error = ValidationError("bad", field="quantity")
        assert error.details == {"field": "quantity"}
        assert error.status_code == 400


class TestErrorResponse:

    def test_shape(self):
        body = error_response(OverCommitError(requested=6, remaining=4))

        assert body["success"] is False
        assert body["error"]["code"] == "OVER_COMMIT"
        assert body["error"]["retryable"] is True
        assert "message" in body["error"]

    def test_base_error_defaults(self):
        error = ReliefHubError("boom")
        assert error.to_dict() == {
            "code": "INTERNAL_ERROR",
            "message": "boom",
            "details": {},
            "retryable": False,
        }
