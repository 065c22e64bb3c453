"""Outcome of one extractor call"""
from dataclasses import dataclass
from enum import Enum

from ...context._dataclass.date_context import DateContext


class ResolutionTier(Enum):
    """Which tier produced the final context"""
    PRIMARY  = "primary"
    FALLBACK = "fallback"
    DEFAULT  = "default"


@dataclass
class ExtractionAttempt:
    """
    Tagged result of calling an extractor.

    Exactly one of context / error is set; `succeeded` is the tag.
    """

    tier:       ResolutionTier
    context:    DateContext | None = None
    error:      BaseException | None = None
    elapsed_ms: float = 0.0

    @property
    def succeeded(self ) -> bool:

        return self.error is None and self.context is not None


    @property
    def error_message(self ) -> str | None:

        if self.error is None:
            return None

        return str(self.error) or type(self.error).__name__


    def to_dict(self ) -> dict:

        return {
            'tier':       self.tier.value,
            'succeeded':  self.succeeded,
            'context':    self.context.to_dict() if self.context else None,
            'error':      self.error_message,
            'elapsed_ms': self.elapsed_ms,
        }
