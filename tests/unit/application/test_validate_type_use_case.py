import pytest

from input_guard.application import (
    UnknownTypeNameError,
    ValidateTypeRequest,
    ValidateTypeUseCase,
)


@pytest.mark.parametrize(
    ("type_name", "value"),
    [
        ("string", "abc"),
        ("number", 1),
        ("number", 2.5),
        ("integer", 7),
        ("boolean", True),
        ("object", {"a": 1}),
        ("array", [1, 2]),
        ("null", None),
    ],
)
def test_matching_values_are_valid(audit_capture, type_name: str, value) -> None:
    audit_logger, _ = audit_capture
    result = ValidateTypeUseCase(audit_logger=audit_logger).execute(
        ValidateTypeRequest(type_name=type_name, value=value)
    )

    assert result.valid is True
    assert result.message is None


def test_mismatch_returns_type_guard_message(audit_capture) -> None:
    audit_logger, handler = audit_capture
    result = ValidateTypeUseCase(audit_logger=audit_logger).execute(
        ValidateTypeRequest(type_name="integer", value=True)
    )

    assert result.valid is False
    assert result.message == "Type of int does not match boolean"
    assert handler.events[0]["context"]["type_name"] == "integer"


def test_unknown_type_name_raises() -> None:
    with pytest.raises(UnknownTypeNameError, match="Unknown type name: decimal"):
        ValidateTypeUseCase().execute(ValidateTypeRequest(type_name="decimal", value=1))
