from input_guard.domain.enums.value_category import ValueCategory, category_of, is_array

__all__ = [
    "ValueCategory",
    "category_of",
    "is_array",
]
