import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

_SENSITIVE_TOKENS = (
    "email",
    "phone",
    "password",
    "token",
    "secret",
    "card",
    "cvv",
)


class ValidationAuditLogger:
    """Structured audit logger for validation outcomes with sensitive-data masking.

    Core validators never log; use cases report through this collaborator.

    Example:
        ```python
        audit = ValidationAuditLogger()
        audit.log_validation_failed(operation="user_input", reason="Invalid URL.")
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("input_guard.audit")
        self._clock = clock or (lambda: datetime.now(UTC))

    def log_validation_passed(
        self,
        *,
        operation: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit validation success audit event."""
        self._emit(action="VALIDATION_PASSED", operation=operation, context=context or {})

    def log_validation_failed(
        self,
        *,
        operation: str,
        reason: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit validation failure audit event with the human-readable reason."""
        base_context = dict(context or {})
        base_context["reason"] = reason
        self._emit(action="VALIDATION_FAILED", operation=operation, context=base_context)

    def log_input_sanitized(
        self,
        *,
        operation: str,
        changed: bool,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Emit sanitization audit event; `changed` tells if any pass rewrote the input."""
        base_context = dict(context or {})
        base_context["changed"] = changed
        self._emit(action="INPUT_SANITIZED", operation=operation, context=base_context)

    def _emit(
        self,
        *,
        action: str,
        operation: str,
        context: Mapping[str, Any],
    ) -> None:
        event = {
            "timestamp": self._clock().astimezone(UTC).isoformat(),
            "action": action,
            "operation": operation,
            "context": self.mask_sensitive_data(dict(context)),
        }
        self._logger.info("audit_event", extra={"audit_event": event})

    @classmethod
    def mask_sensitive_data(cls, value: Any, key: str | None = None) -> Any:
        """Recursively mask sensitive values based on key names."""
        if isinstance(value, dict):
            return {k: cls.mask_sensitive_data(v, key=k) for k, v in value.items()}
        if isinstance(value, list):
            return [cls.mask_sensitive_data(item, key=key) for item in value]
        if isinstance(value, tuple):
            return tuple(cls.mask_sensitive_data(item, key=key) for item in value)
        if isinstance(value, str) and cls._is_sensitive_key(key):
            return cls._mask_string(value, key or "")
        return value

    @staticmethod
    def _is_sensitive_key(key: str | None) -> bool:
        if not isinstance(key, str) or not key:
            return False
        lowered = key.lower()
        return any(token in lowered for token in _SENSITIVE_TOKENS)

    @staticmethod
    def _mask_string(raw: str, key: str) -> str:
        if "email" in key.lower():
            local_part, _, domain = raw.partition("@")
            if not domain:
                return "***"
            return f"{local_part[:1] or '*'}***@{domain}"
        return "***MASKED***"
