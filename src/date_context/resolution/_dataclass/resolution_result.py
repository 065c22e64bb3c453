"""Full outcome of resolving one message"""
from dataclasses import dataclass, field

from ...context._dataclass.date_context import DateContext
from ...validation._dataclass.validation_result import ValidationResult
from .extraction_attempt import ExtractionAttempt, ResolutionTier


@dataclass
class ResolutionResult:

    context:     DateContext
    tier:        ResolutionTier
    attempts:    list[ExtractionAttempt]  = field(default_factory=list)
    validation:  ValidationResult | None  = None
    corrected:   bool                     = False  # context came from the validator's correction
    duration_ms: float                    = 0.0

    def to_dict(self ) -> dict:

        return {
            'context':     self.context.to_dict(),
            'tier':        self.tier.value,
            'attempts':    [a.to_dict() for a in self.attempts],
            'issues':      list(self.validation.issues) if self.validation else [],
            'corrected':   self.corrected,
            'duration_ms': self.duration_ms,
        }
