"""
Hybrid extraction: regex first, model only for unconfident results.

Regex is free and instant. The model is consulted when the regex result is
below the confidence threshold or found no date reference at all, and then
only if the message carries an ambiguous cue or the regex confidence is
very low.
"""
import logging
import re
from datetime import datetime
from typing import Callable

from ..constants import PERIOD_NONE
from ..context._dataclass.date_context import DateContext


# Phrasings regex handles poorly: bare weekdays, "that day", "recently", "when did ..."
AMBIGUOUS_PATTERNS = [
    re.compile(r'\b(on|last|this)?\s*(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b', re.IGNORECASE),
    re.compile(r'\b(that|this)\s+(day|time|morning|afternoon|evening)\b', re.IGNORECASE),
    re.compile(r'\b(recently|lately|earlier|before)\b', re.IGNORECASE),
    re.compile(r'\b(when|what\s+time)\s+(did|was|were)\b', re.IGNORECASE),
]


def has_ambiguous_pattern(
        message: str ) -> bool:

    return any(p.search(message or "") for p in AMBIGUOUS_PATTERNS)


class HybridDateExtractor:

    """
    Primary-tier extractor combining a regex extractor with a model extractor.

    Regex failures propagate (the resolver falls back); model failures are
    logged and the regex result is kept.
    """

    def __init__(self,
            regex_extractor,
            llm_extractor=None,
            confidence_threshold: float                     = 0.9,
            min_confidence: float                           = 0.7,
            ambiguity_check: Callable[[str], bool] | None   = None,
            logger: logging.Logger | None                   = None ) -> None:

        self.regex_extractor      = regex_extractor
        self.llm_extractor        = llm_extractor
        self.confidence_threshold = confidence_threshold
        self.min_confidence       = min_confidence
        self.ambiguity_check      = ambiguity_check or has_ambiguous_pattern
        self.logger               = logger or logging.getLogger(__name__)


    def __call__(self,
            message: str,
            client_timestamp: datetime | str | None,
            timezone: str ) -> DateContext:

        regex_result = self.regex_extractor(message, client_timestamp, timezone)

        if self.llm_extractor is None or not self._needs_llm(message, regex_result):
            return regex_result

        self.logger.info(
            f'[DateContext] Low confidence ({regex_result.confidence}) '
            f'or no match, using LLM extraction'
        )

        try:
            llm_result = self.llm_extractor(message, client_timestamp, timezone)
        except Exception as e:
            self.logger.warning(f'[DateContext] LLM extraction failed, using regex result: {e}')
            return regex_result

        if llm_result.confidence > regex_result.confidence:
            self.logger.info(f'[DateContext] Using LLM result (confidence: {llm_result.confidence})')
            return llm_result

        if llm_result.has_date_reference and not regex_result.has_date_reference:
            self.logger.info('[DateContext] Using LLM result (found date reference)')
            return llm_result

        return regex_result


    def _needs_llm(self,
            message: str,
            result: DateContext ) -> bool:

        if result.confidence >= self.confidence_threshold and result.period != PERIOD_NONE:
            return False

        return result.confidence < self.min_confidence or self.ambiguity_check(message)
