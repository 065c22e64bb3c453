"""Shared configuration for date context resolution"""
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from .constants import DEFAULT_TIMEZONE


@dataclass
class ResolverConfig:
    """All tunable parameters for the resolver and its model-backed extractor"""

    # Timezone stamped on every context; fixed per deployment, never per message
    timezone: str = DEFAULT_TIMEZONE

    # Diagnostics
    excerpt_chars: int = 100

    # Tier 3 default
    default_confidence: float = 0.5

    # API
    llm_provider:      str = "auto"  # auto, anthropic, openai
    anthropic_api_key: str = ""
    openai_api_key:    str = ""

    # Models
    llm_model:                str | None = None
    llm_max_tokens:           int        = 200
    llm_temperature:          float      = 0.1
    llm_confidence_threshold: float      = 0.9
    llm_min_confidence:       float      = 0.7   # below this the model runs even without an ambiguous cue

    def __post_init__(self ) -> None:

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA timezone: {self.timezone!r}") from e

        if not 0.0 <= self.default_confidence <= 1.0:
            raise ValueError(f"default_confidence must be within [0, 1], got {self.default_confidence!r}")

        if self.excerpt_chars < 0:
            raise ValueError("excerpt_chars must be non-negative")

        if self.llm_provider not in ("auto", "anthropic", "openai"):
            raise ValueError(f"Invalid llm_provider: {self.llm_provider!r}")


    @classmethod
    def from_env(cls,
            env_file: str | None = None ) -> 'ResolverConfig':

        """
        Build from environment variables, loading a .env file first.

        Reads ANTHROPIC_API_KEY, OPENAI_API_KEY, DATE_LLM_PROVIDER and
        DATE_LLM_MODEL. The timezone is not read from the environment.
        """

        load_dotenv(env_file)

        return cls(
            llm_provider=os.getenv("DATE_LLM_PROVIDER", "auto").strip().lower() or "auto",
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            llm_model=os.getenv("DATE_LLM_MODEL") or None,
        )
