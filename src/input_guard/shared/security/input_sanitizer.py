"""Best-effort SQL and HTML/script escaping for untrusted text.

These are pattern filters, not a parser-based defense: they do not replace
parameterized queries or context-aware output encoding.
"""

import re
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

SQL_INJECTION_PATTERN = re.compile(
    r"\b("
    r"DROP\s+TABLE|SHOW\s+TABLES|UNION\s+SELECT|INSERT\s+INTO|"
    r"SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|TRUNCATE|EXECUTE|EXEC|UNION|"
    r"OR|AND|LIMIT|OFFSET|HAVING|WAITFOR|LIKE|IN|BETWEEN|CONCAT|"
    r"--|/\*|\*/|\#|;"
    r")\b",
    re.IGNORECASE | re.ASCII,
)
SQL_PUNCTUATION_PATTERN = re.compile(r"([;#/*\-])")

SCRIPT_TAG_PATTERN = re.compile(r"<\s*script[^>]*>(.*?)</\s*script>", re.IGNORECASE | re.DOTALL)
HTML_SPECIAL_PATTERN = re.compile(r"&(?!(?:amp|lt|gt|quot|#39);)|[<>\"']")
HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


class SanitizerPass(StrEnum):
    SQL = "sql"
    HTML = "html"


def is_sql_injection(text: str) -> str:
    """Backslash-escape `; # / * -` inside matched SQL tokens.

    Keywords are detected as whole words but left textually unchanged; only
    the punctuation inside a matched token is escaped.

    Example:
        ```python
        assert is_sql_injection("a--b") == "a\\\\-\\\\-b"
        assert is_sql_injection("hello world") == "hello world"
        ```
    """
    return SQL_INJECTION_PATTERN.sub(
        lambda match: SQL_PUNCTUATION_PATTERN.sub(r"\\\1", match.group(0)),
        text,
    )


def is_js_script(text: str) -> str:
    """Strip `<script>` tags keeping their content, then HTML-escape the result.

    Stripping runs first so that the tag pattern still sees raw `<`. Existing
    `&amp; &lt; &gt; &quot; &#39;` entities are not escaped again.

    Example:
        ```python
        assert is_js_script('<script>alert("x")</script>') == "alert(&quot;x&quot;)"
        ```
    """
    stripped = SCRIPT_TAG_PATTERN.sub(lambda match: match.group(1), text)
    return HTML_SPECIAL_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], stripped)


_PASS_FUNCTIONS = {
    SanitizerPass.SQL: is_sql_injection,
    SanitizerPass.HTML: is_js_script,
}


def sanitize_text(text: str, passes: Sequence[SanitizerPass]) -> str:
    """Apply the given sanitizer passes to `text` in order."""
    for sanitizer_pass in passes:
        text = _PASS_FUNCTIONS[SanitizerPass(sanitizer_pass)](text)
    return text


def sanitize_payload(payload: Any, passes: Sequence[SanitizerPass]) -> Any:
    """Recursively sanitize all text values from nested payloads."""
    if isinstance(payload, dict):
        return {key: sanitize_payload(value, passes) for key, value in payload.items()}
    if isinstance(payload, list):
        return [sanitize_payload(item, passes) for item in payload]
    if isinstance(payload, tuple):
        return tuple(sanitize_payload(item, passes) for item in payload)
    if isinstance(payload, str):
        return sanitize_text(payload, passes)
    return payload
