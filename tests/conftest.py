"""
Shared fixtures for date context tests.

Extractors are plain callables; the model SDK clients are replaced by
SimpleNamespace fakes exposing the attributes the adapter touches.
"""
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from date_context import DateContext, ResolverConfig, ValidationResult


LAGOS = "Africa/Lagos"
NOW   = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_context(
        start: datetime = datetime(2026, 1, 14, tzinfo=timezone.utc),
        end: datetime = datetime(2026, 1, 14, 23, 59, 59, 999000, tzinfo=timezone.utc),
        period: str = "yesterday",
        human_readable: str = "yesterday",
        has_date_reference: bool = True,
        confidence: float = 0.95,
        tz: str = LAGOS ) -> DateContext:

    return DateContext(
        has_date_reference=has_date_reference,
        period=period,
        start_date=start,
        end_date=end,
        human_readable=human_readable,
        timezone=tz,
        confidence=confidence,
    )


class StubExtractor:
    """Returns a fixed context (or raises) and records every call"""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error  = error
        self.calls: list[tuple] = []

    def __call__(self, message, client_timestamp, tz):
        self.calls.append((message, client_timestamp, tz))
        if self.error is not None:
            raise self.error
        return self.result


class StubValidator:
    """Returns a fixed ValidationResult and records what it saw"""

    def __init__(self, result: ValidationResult | None = None):
        self.result = result or ValidationResult(is_valid=True)
        self.seen: list[DateContext] = []

    def __call__(self, context):
        self.seen.append(context)
        return self.result


class NetworkError(Exception):
    pass


@pytest.fixture
def config():
    return ResolverConfig()


@pytest.fixture
def clock():
    return lambda: NOW


def anthropic_client(text: str):
    """Fake Anthropic client whose messages.create returns one text block"""

    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])

    return SimpleNamespace(messages=SimpleNamespace(create=create), calls=calls)


def openai_client(text: str | None):
    """Fake OpenAI client whose chat.completions.create returns one choice"""

    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        message = SimpleNamespace(content=text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    return SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create)),
        calls=calls,
    )
