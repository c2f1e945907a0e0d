from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from input_guard.domain import InputTooLongError
from input_guard.shared.logging import ValidationAuditLogger
from input_guard.shared.security import SanitizerPass, sanitize_payload

# SQL escaping must run before HTML escaping: `&#39;` contains `;`.
DEFAULT_PASSES = (SanitizerPass.SQL, SanitizerPass.HTML)


@dataclass(frozen=True, slots=True)
class SanitizeInputRequest:
    payload: Any
    passes: tuple[SanitizerPass, ...] = DEFAULT_PASSES


@dataclass(frozen=True, slots=True)
class SanitizeInputResult:
    sanitized: Any
    changed: bool


class SanitizeInputUseCase:
    """Bound input length and apply the sanitizer passes to every text value.

    Example:
        ```python
        use_case = SanitizeInputUseCase(max_input_length=1_000)
        result = use_case.execute(SanitizeInputRequest(payload="<b>hi</b>"))
        assert result.sanitized == "&lt;b&gt;hi&lt;/b&gt;"
        ```
    """

    def __init__(
        self,
        max_input_length: int = 10_000,
        audit_logger: ValidationAuditLogger | None = None,
    ) -> None:
        if max_input_length <= 0:
            raise ValueError("max_input_length must be greater than zero")
        self._max_input_length = max_input_length
        self._audit_logger = audit_logger or ValidationAuditLogger()

    def execute(self, request: SanitizeInputRequest) -> SanitizeInputResult:
        """Return the sanitized payload; raise `InputTooLongError` on oversized text."""
        self._enforce_max_length(request.payload)
        sanitized = sanitize_payload(request.payload, request.passes)
        changed = _payload_changed(request.payload, sanitized)
        self._audit_logger.log_input_sanitized(
            operation="sanitize",
            changed=changed,
            context={"passes": [str(sanitizer_pass) for sanitizer_pass in request.passes]},
        )
        return SanitizeInputResult(sanitized=sanitized, changed=changed)

    def _enforce_max_length(self, payload: Any) -> None:
        if isinstance(payload, str):
            if len(payload) > self._max_input_length:
                raise InputTooLongError(len(payload), self._max_input_length)
        elif isinstance(payload, Mapping):
            for value in payload.values():
                self._enforce_max_length(value)
        elif isinstance(payload, (list, tuple)):
            for item in payload:
                self._enforce_max_length(item)


def _payload_changed(original: Any, sanitized: Any) -> bool:
    """Compare text leaves by value and every other leaf by identity.

    `sanitize_payload` returns non-text leaves untouched, so identity holds for
    them even when equality does not (`nan != nan`).
    """
    if isinstance(original, str):
        return original != sanitized
    if isinstance(original, Mapping):
        return any(_payload_changed(value, sanitized[key]) for key, value in original.items())
    if isinstance(original, (list, tuple)):
        return any(_payload_changed(item, new) for item, new in zip(original, sanitized))
    return original is not sanitized
