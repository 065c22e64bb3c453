"""Date context value object"""

from ._dataclass.date_context import DateContext

__all__ = [
    'DateContext',
]
