"""Tests for the regex-first, model-second primary extractor."""
import pytest

from date_context import HybridDateExtractor

from conftest import LAGOS, StubExtractor, make_context


class TestHybridDateExtractor:

    def test_confident_regex_skips_model(self):
        regex = StubExtractor(make_context(confidence=0.95))
        llm   = StubExtractor(make_context(confidence=0.99))

        result = HybridDateExtractor(regex, llm)("yesterday", None, LAGOS)

        assert result is regex.result
        assert llm.calls == []

    def test_no_reference_consults_model(self):
        regex = StubExtractor(make_context(period="none", has_date_reference=False, confidence=0.95))
        llm   = StubExtractor(make_context(period="custom", confidence=0.85))

        result = HybridDateExtractor(regex, llm)("the day before the storm", None, LAGOS)

        assert result is llm.result

    def test_more_confident_model_wins(self):
        regex = StubExtractor(make_context(confidence=0.7))
        llm   = StubExtractor(make_context(confidence=0.85, period="custom"))

        assert HybridDateExtractor(regex, llm)("on monday", None, LAGOS) is llm.result

    def test_less_confident_model_loses(self):
        regex = StubExtractor(make_context(confidence=0.8))
        llm   = StubExtractor(make_context(confidence=0.6))

        assert HybridDateExtractor(regex, llm)("on monday", None, LAGOS) is regex.result

    def test_model_failure_keeps_regex(self, caplog):
        regex = StubExtractor(make_context(confidence=0.7))
        llm   = StubExtractor(error=TimeoutError("model timed out"))

        result = HybridDateExtractor(regex, llm)("on monday", None, LAGOS)

        assert result is regex.result
        assert "LLM extraction failed" in caplog.text

    def test_regex_failure_propagates(self):
        regex = StubExtractor(error=ValueError("bad pattern"))

        with pytest.raises(ValueError):
            HybridDateExtractor(regex, StubExtractor(make_context()))("yesterday", None, LAGOS)

    def test_without_model_returns_regex(self):
        regex = StubExtractor(make_context(confidence=0.5))

        assert HybridDateExtractor(regex)("hmm", None, LAGOS) is regex.result

    def test_arguments_forwarded(self):
        regex = StubExtractor(make_context(confidence=0.5))
        llm   = StubExtractor(make_context(confidence=0.9))

        HybridDateExtractor(regex, llm)("hmm", "2026-01-15T10:30:00Z", LAGOS)

        assert llm.calls == [("hmm", "2026-01-15T10:30:00Z", LAGOS)]


class TestModelGate:
    """Between the floor and the threshold the model runs only on ambiguous wording."""

    def test_plain_wording_keeps_regex(self):
        regex = StubExtractor(make_context(period="last_week", confidence=0.85))
        llm   = StubExtractor(make_context(confidence=0.95))

        result = HybridDateExtractor(regex, llm)("show me last week's trips", None, LAGOS)

        assert result is regex.result
        assert llm.calls == []

    @pytest.mark.parametrize("message", [
        "what happened on tuesday",
        "how far did I drive that morning",
        "did I stop anywhere recently",
        "when did I park",
    ])
    def test_ambiguous_wording_consults_model(self, message):
        regex = StubExtractor(make_context(confidence=0.85))
        llm   = StubExtractor(make_context(confidence=0.95, period="custom"))

        assert HybridDateExtractor(regex, llm)(message, None, LAGOS) is llm.result

    def test_below_floor_consults_model_without_cue(self):
        regex = StubExtractor(make_context(confidence=0.6))
        llm   = StubExtractor(make_context(confidence=0.9, period="custom"))

        assert HybridDateExtractor(regex, llm)("show me the trips", None, LAGOS) is llm.result

    def test_custom_ambiguity_check(self):
        regex = StubExtractor(make_context(confidence=0.8))
        llm   = StubExtractor(make_context(confidence=0.9, period="custom"))

        extractor = HybridDateExtractor(regex, llm, ambiguity_check=lambda m: "around" in m)

        assert extractor("around christmas", None, LAGOS) is llm.result
        assert extractor("last week", None, LAGOS) is regex.result

    def test_no_reference_without_cue_keeps_regex(self):
        regex = StubExtractor(make_context(period="none", has_date_reference=False, confidence=0.95))
        llm   = StubExtractor(make_context(confidence=0.9))

        assert HybridDateExtractor(regex, llm)("how much fuel is left", None, LAGOS) is regex.result
        assert llm.calls == []
