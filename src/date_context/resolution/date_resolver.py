"""
Tiered date context resolution for chat messages.

Tier 1: Primary extractor (regex + model)  → validate
Tier 2: Fallback extractor (regex only)    → validate
Tier 3: Synthesized "today"                (no validation)

Every tier runs strictly after the previous one raised. Validation
failures never move resolution to the next tier.
"""
import logging
import time
import traceback
from dataclasses import replace
from datetime import datetime
from typing import Callable

from ..constants import PERIOD_NONE, DEFAULT_HUMAN_READABLE, only_future_date_issues
from ..context._dataclass.date_context import DateContext
from ..resolver_config import ResolverConfig
from ..utils.date.date_utils import utc_now, start_of_day_utc, end_of_day_utc, excerpt
from ..validation.date_validator import validate_date_context
from ..validation._dataclass.validation_result import ValidationResult
from ._dataclass.extraction_attempt import ExtractionAttempt, ResolutionTier
from ._dataclass.resolution_result import ResolutionResult
from ._dataclass.resolution_events import (
    ExtractionSucceeded,
    ExtractionCorrected,
    ValidationUncorrected,
    ExtractorFailed,
    ExtractionDefaulted,
    ValidatorFailed,
    ResolutionEvent,
)


Extractor = Callable[[str, datetime | str | None, str], DateContext]
Validator = Callable[[DateContext], ValidationResult]


class DateContextResolver:

    """
    Resolve a DateContext from a free-text message. Never raises.

    Primary and fallback extractors share the signature
    (message, client_timestamp, timezone) -> DateContext and may raise
    anything. The timezone is fixed at construction from the config.
    """

    def __init__(self,
            primary: Extractor,
            fallback: Extractor,
            validator: Validator                          = validate_date_context,
            config: ResolverConfig | None                 = None,
            logger: logging.Logger | None                 = None,
            clock: Callable[[], datetime] | None          = None,
            on_event: Callable[[ResolutionEvent], None] | None = None ) -> None:

        self.primary   = primary
        self.fallback  = fallback
        self.validator = validator
        self.config    = config or ResolverConfig()
        self.timezone  = self.config.timezone
        self.logger    = logger or logging.getLogger(__name__)
        self.clock     = clock or utc_now
        self.on_event  = on_event


    def resolve(self,
            message: str,
            client_timestamp: datetime | str | None = None ) -> DateContext:

        """
        Resolve the date context for one message.

        Args:
            message:          Raw user message
            client_timestamp: Client-side "now", passed through to the extractors

        Returns:
            DateContext whose timezone is always the configured timezone
        """

        return self.resolve_with_details(message, client_timestamp).context


    def resolve_with_details(self,
            message: str,
            client_timestamp: datetime | str | None = None ) -> ResolutionResult:

        """Resolve and also return which tier answered, every attempt, and the validation."""

        start    = time.perf_counter()
        attempts: list[ExtractionAttempt] = []

        # ── Tier 1: Primary ──────────────────────────────────────
        primary = self._attempt(ResolutionTier.PRIMARY, self.primary, message, client_timestamp)
        attempts.append(primary)

        if primary.succeeded:
            context, validation = self._validate_primary(primary.context)
            self._emit(ExtractionSucceeded(
                tier=ResolutionTier.PRIMARY,
                context=context,
                duration_ms=self._elapsed_ms(start),
            ))
            return ResolutionResult(
                context=context,
                tier=ResolutionTier.PRIMARY,
                attempts=attempts,
                validation=validation,
                corrected=context is not primary.context,
                duration_ms=self._elapsed_ms(start),
            )

        self._emit(self._failure_event(primary, message, client_timestamp))

        # ── Tier 2: Fallback ─────────────────────────────────────
        fallback = self._attempt(ResolutionTier.FALLBACK, self.fallback, message, client_timestamp)
        attempts.append(fallback)

        if fallback.succeeded:
            context, validation = self._validate_fallback(fallback.context)
            self._emit(ExtractionSucceeded(
                tier=ResolutionTier.FALLBACK,
                context=context,
                duration_ms=self._elapsed_ms(start),
            ))
            return ResolutionResult(
                context=context,
                tier=ResolutionTier.FALLBACK,
                attempts=attempts,
                validation=validation,
                corrected=context is not fallback.context,
                duration_ms=self._elapsed_ms(start),
            )

        self._emit(self._failure_event(fallback, message, client_timestamp))

        # ── Tier 3: Default ──────────────────────────────────────
        context = self._default_context()
        self._emit(ExtractionDefaulted(
            primary_error=primary.error_message,
            fallback_error=fallback.error_message,
            message_excerpt=excerpt(message, self.config.excerpt_chars),
            context=context,
        ))

        return ResolutionResult(
            context=context,
            tier=ResolutionTier.DEFAULT,
            attempts=attempts,
            duration_ms=self._elapsed_ms(start),
        )


    # ── Tier helpers ──────────────────────────────────────────────

    def _attempt(self,
            tier: ResolutionTier,
            extractor: Extractor,
            message: str,
            client_timestamp ) -> ExtractionAttempt:

        """Call an extractor and capture its outcome as a tagged result."""

        start = time.perf_counter()

        try:
            context = extractor(message, client_timestamp, self.timezone)
        except Exception as e:
            return ExtractionAttempt(tier=tier, error=e, elapsed_ms=self._elapsed_ms(start))

        if not isinstance(context, DateContext):
            error = TypeError(f"{tier.value} extractor returned {type(context).__name__}, expected DateContext")
            return ExtractionAttempt(tier=tier, error=error, elapsed_ms=self._elapsed_ms(start))

        return ExtractionAttempt(tier=tier, context=self._pin_timezone(context), elapsed_ms=self._elapsed_ms(start))


    def _validate_primary(self,
            context: DateContext ) -> tuple[DateContext, ValidationResult | None]:

        """Apply the correction policy to a primary-tier context."""

        validation = self._run_validator(ResolutionTier.PRIMARY, context)

        if validation is None or validation.is_valid:
            return context, validation

        if validation.corrected is not None:
            corrected = self._pin_timezone(validation.corrected)

            # Nothing to report when the validator gave no reason
            if not validation.issues:
                return corrected, validation

            self._emit(ExtractionCorrected(
                tier=ResolutionTier.PRIMARY,
                issues=list(validation.issues),
                original=context,
                corrected=corrected,
                expected=only_future_date_issues(validation.issues),
            ))
            return corrected, validation

        # Not fatal: the uncorrected context still carries useful information
        self._emit(ValidationUncorrected(
            tier=ResolutionTier.PRIMARY,
            issues=list(validation.issues),
            context=context,
        ))

        return context, validation


    def _validate_fallback(self,
            context: DateContext ) -> tuple[DateContext, ValidationResult | None]:

        """Fallback tier: adopt a correction if offered, otherwise keep as-is."""

        validation = self._run_validator(ResolutionTier.FALLBACK, context)

        if validation is None or validation.is_valid or validation.corrected is None:
            return context, validation

        corrected = self._pin_timezone(validation.corrected)
        self._emit(ExtractionCorrected(
            tier=ResolutionTier.FALLBACK,
            issues=list(validation.issues),
            original=context,
            corrected=corrected,
            expected=only_future_date_issues(validation.issues),
        ))

        return corrected, validation


    def _run_validator(self,
            tier: ResolutionTier,
            context: DateContext ) -> ValidationResult | None:

        try:
            return self.validator(context)
        except Exception as e:
            self._emit(ValidatorFailed(
                tier=tier,
                error_message=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            ))
            return None


    def _default_context(self ) -> DateContext:

        """Whole current UTC day, no date reference."""

        now = self.clock()

        return DateContext(
            has_date_reference=False,
            period=PERIOD_NONE,
            start_date=start_of_day_utc(now),
            end_date=end_of_day_utc(now),
            human_readable=DEFAULT_HUMAN_READABLE,
            timezone=self.timezone,
            confidence=self.config.default_confidence,
        )


    def _pin_timezone(self,
            context: DateContext ) -> DateContext:

        """Contexts leaving the resolver always carry the configured timezone."""

        if context.timezone == self.timezone:
            return context

        return replace(context, timezone=self.timezone)


    def _failure_event(self,
            attempt: ExtractionAttempt,
            message: str,
            client_timestamp ) -> ExtractorFailed:

        error = attempt.error

        return ExtractorFailed(
            tier=attempt.tier,
            error_message=attempt.error_message,
            error_type=type(error).__name__,
            stack="".join(traceback.format_exception(type(error), error, error.__traceback__)),
            message_excerpt=excerpt(message, self.config.excerpt_chars),
            client_timestamp=str(client_timestamp) if client_timestamp is not None else None,
        )


    def _emit(self,
            event: ResolutionEvent ) -> None:

        """Forward an event record to the logger and the optional callback."""

        self.logger.log(event.level, f"[DateContext] {event.message}", extra={"date_event": event.to_dict()})

        if self.on_event:
            try:
                self.on_event(event)
            except Exception as e:
                self.logger.warning(f"[DateContext] on_event callback failed: {e}")


    @staticmethod
    def _elapsed_ms(
            start: float ) -> float:

        return (time.perf_counter() - start) * 1000
