"""Утилиты для генератора"""

from .naming import (
    capitalize_first,
    enum_member_name,
    identifier,
    operation_name,
    pascal_case,
    property_name,
    safe_identifier,
)

__all__ = [
    "capitalize_first",
    "enum_member_name",
    "identifier",
    "operation_name",
    "pascal_case",
    "property_name",
    "safe_identifier",
]
