"""Date context resolution for chat messages"""

# Configuration
from .resolver_config import ResolverConfig
from .logging_config import configure_logging

# Constants
from .constants import DEFAULT_TIMEZONE, FUTURE_DATE_PHRASES, partition_issues

# Data model
from .context._dataclass.date_context import DateContext
from .validation._dataclass.validation_result import ValidationResult

# Validation
from .validation.date_validator import validate_date_context

# Resolution
from .resolution.date_resolver import DateContextResolver
from .resolution._dataclass.extraction_attempt import ExtractionAttempt, ResolutionTier
from .resolution._dataclass.resolution_result import ResolutionResult
from .resolution._dataclass.resolution_events import (
    ExtractionSucceeded,
    ExtractionCorrected,
    ValidationUncorrected,
    ExtractorFailed,
    ExtractionDefaulted,
    ValidatorFailed,
)

# Extraction
from .extraction.llm_date_extractor import LLMDateExtractor
from .extraction.hybrid_date_extractor import HybridDateExtractor
from .extraction.factory import create_llm_extractor, create_resolver
from .extraction._errors.extraction_error import DateExtractionError

__all__ = [
    # Configuration
    'ResolverConfig',
    'configure_logging',

    # Constants
    'DEFAULT_TIMEZONE',
    'FUTURE_DATE_PHRASES',
    'partition_issues',

    # Data model
    'DateContext',
    'ValidationResult',

    # Validation
    'validate_date_context',

    # Resolution
    'DateContextResolver',
    'ExtractionAttempt',
    'ResolutionTier',
    'ResolutionResult',
    'ExtractionSucceeded',
    'ExtractionCorrected',
    'ValidationUncorrected',
    'ExtractorFailed',
    'ExtractionDefaulted',
    'ValidatorFailed',

    # Extraction
    'LLMDateExtractor',
    'HybridDateExtractor',
    'create_llm_extractor',
    'create_resolver',
    'DateExtractionError',
]
