"""Validation module"""

from .date_validator import validate_date_context, MAX_RANGE_DAYS
from ._dataclass.validation_result import ValidationResult

__all__ = [
    'validate_date_context',
    'MAX_RANGE_DAYS',
    'ValidationResult',
]
