"""Date extraction: model adapter and hybrid regex/model extractor."""

from .llm_date_extractor import LLMDateExtractor, DATE_EXTRACTION_PROMPT
from .hybrid_date_extractor import HybridDateExtractor
from .factory import create_llm_extractor, create_resolver
from ._errors.extraction_error import DateExtractionError

__all__ = [
    'LLMDateExtractor',
    'DATE_EXTRACTION_PROMPT',
    'HybridDateExtractor',
    'create_llm_extractor',
    'create_resolver',
    'DateExtractionError',
]
