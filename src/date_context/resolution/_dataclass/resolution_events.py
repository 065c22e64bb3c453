"""
Structured log records emitted while resolving a date context.

One record type per event kind so the emitted shape is fixed. Each record
knows its own log level; the resolver only forwards it to the logger.
"""
import logging
from dataclasses import dataclass, field
from typing import ClassVar

from ...context._dataclass.date_context import DateContext
from .extraction_attempt import ResolutionTier


@dataclass
class ExtractionSucceeded:
    """An extractor produced the context that will be returned"""

    kind: ClassVar[str] = "extraction_succeeded"

    tier:        ResolutionTier
    context:     DateContext
    duration_ms: float

    @property
    def level(self ) -> int:
        return logging.INFO

    @property
    def message(self ) -> str:
        if self.tier is ResolutionTier.PRIMARY:
            return "Successfully extracted date context"
        return "Fallback extraction successful"

    def to_dict(self ) -> dict:
        return {
            'event':       self.kind,
            'tier':        self.tier.value,
            'context':     self.context.to_dict(),
            'duration_ms': round(self.duration_ms, 3),
        }


@dataclass
class ExtractionCorrected:
    """
    Validation failed and the corrected context was adopted.

    `expected` is True when every issue was a future-date issue.
    """

    kind: ClassVar[str] = "extraction_corrected"

    tier:      ResolutionTier
    issues:    list[str]
    original:  DateContext
    corrected: DateContext
    expected:  bool

    @property
    def level(self ) -> int:
        # Fallback output is already a degraded path; don't escalate it
        if self.expected or self.tier is ResolutionTier.FALLBACK:
            return logging.INFO
        return logging.WARNING

    @property
    def message(self ) -> str:
        if self.tier is ResolutionTier.FALLBACK:
            return "Fallback result corrected"
        if self.expected:
            return "Auto-corrected future date(s) to current time (expected behavior)"
        return "Validation issues found, using corrected dates"

    def to_dict(self ) -> dict:
        return {
            'event':     self.kind,
            'tier':      self.tier.value,
            'issues':    list(self.issues),
            'expected':  self.expected,
            'original':  self.original.range_dict(),
            'corrected': self.corrected.range_dict(),
        }


@dataclass
class ValidationUncorrected:
    """Validation failed with no correction; the original context is kept"""

    kind: ClassVar[str] = "validation_uncorrected"

    tier:    ResolutionTier
    issues:  list[str]
    context: DateContext

    @property
    def level(self ) -> int:
        return logging.ERROR

    @property
    def message(self ) -> str:
        return "Validation failed but no correction available"

    def to_dict(self ) -> dict:
        return {
            'event':   self.kind,
            'tier':    self.tier.value,
            'issues':  list(self.issues),
            'context': {
                **self.context.range_dict(),
                'has_date_reference': self.context.has_date_reference,
            },
        }


@dataclass
class ExtractorFailed:
    """An extractor raised; resolution moves to the next tier"""

    kind: ClassVar[str] = "extractor_failed"

    tier:             ResolutionTier
    error_message:    str
    error_type:       str
    stack:            str | None = None
    message_excerpt:  str        = ""
    client_timestamp: str | None = None

    @property
    def level(self ) -> int:
        return logging.WARNING

    @property
    def message(self ) -> str:
        if self.tier is ResolutionTier.PRIMARY:
            return "Primary extraction failed, falling back to regex-only extraction"
        return "Fallback extraction failed"

    def to_dict(self ) -> dict:
        return {
            'event':            self.kind,
            'tier':             self.tier.value,
            'error':            self.error_message,
            'error_type':       self.error_type,
            'stack':            self.stack,
            'message':          self.message_excerpt,
            'client_timestamp': self.client_timestamp,
        }


@dataclass
class ExtractionDefaulted:
    """Both extractors raised; the synthesized "today" context is returned"""

    kind: ClassVar[str] = "extraction_defaulted"

    primary_error:   str
    fallback_error:  str
    message_excerpt: str
    context:         DateContext
    tier:            ResolutionTier = field(default=ResolutionTier.DEFAULT)

    @property
    def level(self ) -> int:
        return logging.ERROR

    @property
    def message(self ) -> str:
        return "Both primary and fallback extraction failed, using default (today)"

    def to_dict(self ) -> dict:
        return {
            'event':          self.kind,
            'tier':           self.tier.value,
            'primary_error':  self.primary_error,
            'fallback_error': self.fallback_error,
            'message':        self.message_excerpt,
            'context':        self.context.to_dict(),
        }


@dataclass
class ValidatorFailed:
    """The validator itself raised; the context is kept unvalidated"""

    kind: ClassVar[str] = "validator_failed"

    tier:          ResolutionTier
    error_message: str
    error_type:    str

    @property
    def level(self ) -> int:
        return logging.ERROR

    @property
    def message(self ) -> str:
        return "Validator raised, keeping unvalidated context"

    def to_dict(self ) -> dict:
        return {
            'event':      self.kind,
            'tier':       self.tier.value,
            'error':      self.error_message,
            'error_type': self.error_type,
        }


ResolutionEvent = (
    ExtractionSucceeded
    | ExtractionCorrected
    | ValidationUncorrected
    | ExtractorFailed
    | ExtractionDefaulted
    | ValidatorFailed
)
