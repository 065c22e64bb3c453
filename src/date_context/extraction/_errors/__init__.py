from .extraction_error import DateExtractionError

__all__ = [
    'DateExtractionError',
]
