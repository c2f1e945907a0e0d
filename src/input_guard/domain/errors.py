class InputValidationError(ValueError):
    """Raised when an input value violates a validation rule."""

    pass


class TypeMismatchError(InputValidationError, TypeError):
    """Raised when a value does not satisfy a type descriptor."""

    pass


class EmptyValueError(InputValidationError):
    """Raised when a required value is null, empty or has no content."""

    pass


class InputTooLongError(InputValidationError):
    """Raised at the integration boundary when text exceeds the allowed length."""

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(f"Input length {length} exceeds the maximum of {max_length} characters")
        self.length = length
        self.max_length = max_length
