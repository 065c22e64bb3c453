"""Date context resolution: three-tier cascade"""

from .date_resolver import DateContextResolver, Extractor, Validator
from ._dataclass.extraction_attempt import ExtractionAttempt, ResolutionTier
from ._dataclass.resolution_result import ResolutionResult
from ._dataclass.resolution_events import (
    ExtractionSucceeded,
    ExtractionCorrected,
    ValidationUncorrected,
    ExtractorFailed,
    ExtractionDefaulted,
    ValidatorFailed,
)

__all__ = [
    'DateContextResolver',
    'Extractor',
    'Validator',
    'ExtractionAttempt',
    'ResolutionTier',
    'ResolutionResult',
    'ExtractionSucceeded',
    'ExtractionCorrected',
    'ValidationUncorrected',
    'ExtractorFailed',
    'ExtractionDefaulted',
    'ValidatorFailed',
]
