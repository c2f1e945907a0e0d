from input_guard.shared.security.input_sanitizer import (
    SanitizerPass,
    is_js_script,
    is_sql_injection,
    sanitize_payload,
    sanitize_text,
)

__all__ = [
    "SanitizerPass",
    "is_js_script",
    "is_sql_injection",
    "sanitize_payload",
    "sanitize_text",
]
