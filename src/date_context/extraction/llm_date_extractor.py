"""
Model-backed date extraction.

Sends the message to Anthropic or OpenAI with the current instant and the
user's timezone, and parses the JSON reply into a DateContext. Failures
raise; retrying or falling back is the caller's job.
"""
import json
import logging
import re
from datetime import datetime
from typing import Callable

from anthropic import Anthropic
from openai import OpenAI

from ..context._dataclass.date_context import DateContext
from ..utils.date.date_utils import utc_now, try_parse_timestamp, format_timestamp
from ._errors.extraction_error import DateExtractionError


DEFAULT_MODELS = {
    "anthropic": "claude-sonnet-4-5-20250929",
    "openai":    "gpt-5-mini",
}

# Used when the reply omits a field
REPLY_DEFAULTS = {
    "hasDateReference": False,
    "period":           "none",
    "humanReadable":    "current",
    "confidence":       0.7,
}

DATE_EXTRACTION_PROMPT = (
    "You are a date extraction assistant. Extract date/time references from user messages "
    "and return structured date ranges.\n\n"
    "Current date/time: {now_iso}\n"
    "User's timezone: {timezone}.\n\n"
    "Return a JSON object with:\n"
    "- hasDateReference: boolean\n"
    "- period: 'today' | 'yesterday' | 'this_week' | 'last_week' | 'this_month' | 'last_month' | 'custom' | 'none'\n"
    "- startDate: ISO string (start of day in UTC)\n"
    "- endDate: ISO string (end of day in UTC)\n"
    "- humanReadable: string (e.g., \"yesterday\", \"last 3 days\")\n"
    "- confidence: number (0-1)\n\n"
    "Examples (relative to 2026-01-15):\n"
    "- \"yesterday\" → {{\"hasDateReference\": true, \"period\": \"yesterday\", "
    "\"startDate\": \"2026-01-14T00:00:00Z\", \"endDate\": \"2026-01-14T23:59:59Z\", "
    "\"humanReadable\": \"yesterday\", \"confidence\": 0.95}}\n"
    "- \"last week\" → {{\"hasDateReference\": true, \"period\": \"last_week\", "
    "\"startDate\": \"2026-01-05T00:00:00Z\", \"endDate\": \"2026-01-11T23:59:59Z\", "
    "\"humanReadable\": \"last week\", \"confidence\": 0.9}}\n\n"
    "Be smart about ambiguous dates:\n"
    "- \"Monday\" without context → most recent Monday (today if today is Monday)\n"
    "- \"last Monday\" → previous Monday\n"
    "- Relative dates like \"3 days ago\" → calculate from the current date\n\n"
    "Return ONLY valid JSON, no other text."
)


class LLMDateExtractor:

    """
    Extractor callable backed by a chat model.

    Signature matches every other extractor:
        extractor(message, client_timestamp, timezone) -> DateContext
    """

    def __init__(self,
            client: Anthropic | OpenAI,
            model: str | None                    = None,
            provider: str | None                 = None,
            max_tokens: int                      = 200,
            temperature: float                   = 0.1,
            logger: logging.Logger | None        = None,
            clock: Callable[[], datetime] | None = None ) -> None:

        self.client      = client
        self.provider    = provider or self._detect_provider(client)
        self.model       = model or DEFAULT_MODELS[self.provider]
        self.max_tokens  = max_tokens
        self.temperature = temperature
        self.logger      = logger or logging.getLogger(__name__)
        self.clock       = clock or utc_now


    def __call__(self,
            message: str,
            client_timestamp: datetime | str | None,
            timezone: str ) -> DateContext:

        return self.extract(message, client_timestamp, timezone)


    def extract(self,
            message: str,
            client_timestamp: datetime | str | None,
            timezone: str ) -> DateContext:

        """
        Ask the model for the date range referenced by message.

        Raises:
            DateExtractionError: empty or unusable reply
            anthropic/openai API errors propagate unchanged
        """

        now    = try_parse_timestamp(client_timestamp) or self.clock()
        system = DATE_EXTRACTION_PROMPT.format(now_iso=format_timestamp(now), timezone=timezone)
        prompt = f'Extract date context from this message: "{message}"\n\nReturn JSON:'

        if self.provider == "anthropic":
            raw = self._get_anthropic_response(system, prompt)
        else:
            raw = self._get_openai_response(system, prompt)

        raw = (raw or "").strip()

        if not raw:
            raise DateExtractionError(f"Empty response from {self.provider}")

        context = self._parse_response(raw, now, timezone)

        self.logger.debug(
            f'[Date Extraction LLM] {self.provider}/{self.model} → '
            f'{context.period} ({context.confidence:.2f})'
        )

        return context


    # ── Provider calls ────────────────────────────────────────────

    def _get_anthropic_response(self,
            system: str,
            prompt: str ) -> str:

        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system,
            messages=[{"role": "user", "content": prompt}],
        )

        for block in response.content:
            if block.type == "text":
                return block.text

        return ""


    def _get_openai_response(self,
            system: str,
            prompt: str ) -> str:

        # GPT-5 takes max_completion_tokens and only its default temperature
        if "gpt-5" in self.model:
            kwargs = {"max_completion_tokens": self.max_tokens, "temperature": 1.0}
        else:
            kwargs = {"max_tokens": self.max_tokens, "temperature": self.temperature}

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            **kwargs,
        )

        return response.choices[0].message.content or ""


    # ── Helpers ───────────────────────────────────────────────────

    @staticmethod
    def _detect_provider(
            client ) -> str:

        if isinstance(client, Anthropic):
            return "anthropic"

        if isinstance(client, OpenAI):
            return "openai"

        raise ValueError("Invalid client type")


    @staticmethod
    def _parse_response(
            raw: str,
            now: datetime,
            timezone: str ) -> DateContext:

        """Parse a (possibly fenced) JSON object into a DateContext."""

        cleaned = raw
        fenced  = re.search(r'```(?:json)?\s*([\s\S]*?)\s*```', raw)

        if fenced:
            cleaned = fenced.group(1)

        try:
            payload = json.loads(cleaned.strip())
        except json.JSONDecodeError as e:
            raise DateExtractionError(f"Unparseable JSON from model: {e}", raw_response=raw) from e

        if not isinstance(payload, dict):
            raise DateExtractionError("Model reply is not a JSON object", raw_response=raw)

        data = {**REPLY_DEFAULTS, **{k: v for k, v in payload.items() if v is not None}}

        # Falsy values fall back the same way a missing key does
        for key, default in REPLY_DEFAULTS.items():
            if not data.get(key):
                data[key] = default

        for key in ("startDate", "endDate"):
            if not data.get(key) and not payload.get(_snake(key)):
                data[key] = now

        try:
            return DateContext.from_dict(data, timezone=timezone)
        except (TypeError, ValueError) as e:
            raise DateExtractionError(f"Invalid date context from model: {e}", raw_response=raw) from e


def _snake(
        camel: str ) -> str:

    return re.sub(r'(?<!^)([A-Z])', r'_\1', camel).lower()
