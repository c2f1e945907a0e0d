import pytest

from input_guard.application import (
    UserInputRules,
    ValidateUserInputRequest,
    ValidateUserInputUseCase,
)


def test_all_valid_fields_pass(audit_capture) -> None:
    audit_logger, handler = audit_capture
    use_case = ValidateUserInputUseCase(audit_logger=audit_logger)

    result = use_case.execute(
        ValidateUserInputRequest(
            email="test@example.com",
            user_name="user123",
            password="Password1!",
            url="https://example.com",
        )
    )

    assert result.valid is True
    assert result.errors == {}
    assert handler.events[0]["action"] == "VALIDATION_PASSED"
    assert handler.events[0]["context"]["fields"] == ["email", "user_name", "password", "url"]


def test_every_failing_field_is_reported(audit_capture) -> None:
    audit_logger, handler = audit_capture
    use_case = ValidateUserInputUseCase(audit_logger=audit_logger)

    result = use_case.execute(
        ValidateUserInputRequest(email="a@b", user_name="user@123", password="Password1!")
    )

    assert result.valid is False
    assert result.errors == {
        "email": "Email must be at least 5 characters long.",
        "user_name": "Username must contain only letters and numbers.",
    }
    assert handler.events[0]["action"] == "VALIDATION_FAILED"


def test_rules_bound_lengths_and_domains(audit_capture) -> None:
    audit_logger, _ = audit_capture
    rules = UserInputRules(username_max_length=6, url_allowed_domains=("example.com",))
    use_case = ValidateUserInputUseCase(rules=rules, audit_logger=audit_logger)

    result = use_case.execute(
        ValidateUserInputRequest(user_name="user1234", url="https://other.org")
    )

    assert result.errors["user_name"] == "Username must not exceed 6 characters."
    assert result.errors["url"] == "URL must belong to one of the allowed domains: example.com."


def test_audit_event_never_contains_raw_password(audit_capture) -> None:
    audit_logger, handler = audit_capture
    use_case = ValidateUserInputUseCase(audit_logger=audit_logger)

    use_case.execute(ValidateUserInputRequest(password="weakpass"))

    assert "weakpass" not in str(handler.events)


def test_rules_reject_inverted_bounds() -> None:
    with pytest.raises(ValueError, match="password min length must not exceed max length"):
        UserInputRules(password_min_length=20, password_max_length=10)
