from collections.abc import Callable
from dataclasses import dataclass, field

from input_guard.domain import (
    InputValidationError,
    validate_email,
    validate_password,
    validate_url,
    validate_user_name,
)
from input_guard.shared.logging import ValidationAuditLogger


@dataclass(frozen=True, slots=True)
class UserInputRules:
    """Length bounds and URL allow-list applied by `ValidateUserInputUseCase`."""

    email_min_length: int = 5
    email_max_length: int = 64
    username_min_length: int = 5
    username_max_length: int = 32
    password_min_length: int = 8
    password_max_length: int = 128
    url_max_length: int = 2048
    url_allowed_domains: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        bounds = (
            ("email", self.email_min_length, self.email_max_length),
            ("username", self.username_min_length, self.username_max_length),
            ("password", self.password_min_length, self.password_max_length),
        )
        for name, min_length, max_length in bounds:
            if min_length > max_length:
                raise ValueError(f"{name} min length must not exceed max length")


@dataclass(frozen=True, slots=True)
class ValidateUserInputRequest:
    email: str | None = None
    user_name: str | None = None
    password: str | None = None
    url: str | None = None


@dataclass(frozen=True, slots=True)
class UserInputValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


class ValidateUserInputUseCase:
    """Run the fixed-format validators over every provided user field.

    Unlike the validators themselves, the use case collects one message per
    failing field instead of stopping at the first one.
    """

    def __init__(
        self,
        rules: UserInputRules | None = None,
        audit_logger: ValidationAuditLogger | None = None,
    ) -> None:
        self._rules = rules or UserInputRules()
        self._audit_logger = audit_logger or ValidationAuditLogger()

    def execute(self, request: ValidateUserInputRequest) -> UserInputValidationResult:
        """Validate every provided field; `None` fields are skipped."""
        rules = self._rules
        checks: list[tuple[str, str | None, Callable[[str], None]]] = [
            (
                "email",
                request.email,
                lambda value: validate_email(value, rules.email_min_length, rules.email_max_length),
            ),
            (
                "user_name",
                request.user_name,
                lambda value: validate_user_name(
                    value, rules.username_min_length, rules.username_max_length
                ),
            ),
            (
                "password",
                request.password,
                lambda value: validate_password(
                    value, rules.password_min_length, rules.password_max_length
                ),
            ),
            (
                "url",
                request.url,
                lambda value: validate_url(value, rules.url_max_length, rules.url_allowed_domains),
            ),
        ]

        errors: dict[str, str] = {}
        for field_name, value, check in checks:
            if value is None:
                continue
            try:
                check(value)
            except InputValidationError as exc:
                errors[field_name] = str(exc)

        checked_fields = [name for name, value, _ in checks if value is not None]
        if errors:
            self._audit_logger.log_validation_failed(
                operation="user_input",
                reason="; ".join(f"{name}: {message}" for name, message in errors.items()),
                context={"fields": checked_fields},
            )
        else:
            self._audit_logger.log_validation_passed(
                operation="user_input",
                context={"fields": checked_fields},
            )
        return UserInputValidationResult(errors=errors)
