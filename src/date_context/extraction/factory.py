"""Builders that wire extractors from a ResolverConfig"""
import logging

from anthropic import Anthropic
from openai import OpenAI

from ..resolution.date_resolver import DateContextResolver
from ..resolver_config import ResolverConfig
from ..validation.date_validator import validate_date_context
from .hybrid_date_extractor import HybridDateExtractor
from .llm_date_extractor import LLMDateExtractor


def resolve_provider(
        config: ResolverConfig ) -> str | None:

    """Provider whose key is present: the configured one, or the first found on "auto"."""

    if config.llm_provider == "auto":
        if config.anthropic_api_key:
            return "anthropic"
        if config.openai_api_key:
            return "openai"
        return None

    keys = {"anthropic": config.anthropic_api_key, "openai": config.openai_api_key}

    return config.llm_provider if keys[config.llm_provider] else None


def create_llm_extractor(
        config: ResolverConfig,
        logger: logging.Logger | None = None ) -> LLMDateExtractor:

    """
    Factory function to create the model-backed extractor

    Args:
        config: llm_provider is "openai", "anthropic", or "auto" (first key found wins)
        logger: Optional logger

    Returns:
        Configured LLMDateExtractor
    """

    provider = resolve_provider(config)

    if provider is None:
        if config.llm_provider == "auto":
            raise ValueError("No API key provided for any supported provider")
        raise ValueError(f"No API key provided for provider '{config.llm_provider}'")

    if provider == "anthropic":
        client = Anthropic(api_key=config.anthropic_api_key)
    else:
        client = OpenAI(api_key=config.openai_api_key)

    return LLMDateExtractor(
        client=client,
        model=config.llm_model,
        max_tokens=config.llm_max_tokens,
        temperature=config.llm_temperature,
        logger=logger,
    )


def create_resolver(
        regex_extractor,
        config: ResolverConfig | None = None,
        logger: logging.Logger | None = None,
        use_llm: bool = True,
        **resolver_kwargs ) -> DateContextResolver:

    """
    Wire the standard cascade: hybrid(regex + model) → regex → today.

    Without a key for the configured provider the primary tier runs regex-only.
    """

    config = config or ResolverConfig()
    llm    = None

    if use_llm and resolve_provider(config) is not None:
        llm = create_llm_extractor(config, logger=logger)

    primary = HybridDateExtractor(
        regex_extractor,
        llm_extractor=llm,
        confidence_threshold=config.llm_confidence_threshold,
        min_confidence=config.llm_min_confidence,
        logger=logger,
    )

    resolver_kwargs.setdefault("validator", validate_date_context)

    return DateContextResolver(
        primary=primary,
        fallback=regex_extractor,
        config=config,
        logger=logger,
        **resolver_kwargs,
    )
