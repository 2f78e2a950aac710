"""
Unit tests for the Output Assembler - concealment, alternatives, follow-up, metadata.
"""

import re

import pytest

from outreach_agent.agents.message_writer import count_words
from outreach_agent.agents.output_assembler import (
    add_distinguishing_sentence, assemble_output, conceal_reasoning,
    ensure_distinct_alternatives, follow_up_description, generate_alternatives,
    has_uncertainty_qualifier, sanitize_metadata, suggest_follow_up,
)
from outreach_agent.agents.phrase_bank import FALLBACK_SUMMARIES
from outreach_agent.agents.strategy_selector import select_strategy
from outreach_agent.models import AuditStatus, AuditTrail, Confidence, FollowUpTiming, Hypothesis

PRIMARY = "Hi Sarah,\n\nCongrats on the round at PayFlow.\n\nHappy to share more.\n\nBest regards"


def _sentences(text):
    return [s for s in re.split(r"(?<=[.!?])\s+", text) if s]


class TestFollowUp:

    @pytest.mark.parametrize("confidence, timing", [
        (Confidence.HIGH, FollowUpTiming.ONE_WEEK),
        (Confidence.MEDIUM, FollowUpTiming.TWO_WEEKS),
        (Confidence.LOW, FollowUpTiming.ONE_MONTH),
    ])
    def test_timing(self, confidence, timing):
        assert suggest_follow_up(confidence) == timing

    def test_descriptions(self):
        assert follow_up_description(FollowUpTiming.TWO_WEEKS) == "Follow up in 2-3 weeks"
        assert follow_up_description("one_month") == "Follow up in about one month"


class TestConcealReasoning:

    def test_internal_vocabulary_removed(self):
        raw = ("Step 2: The pipeline algorithm flagged strong funding evidence. "
               "Audit metadata follows here. Third sentence is extra.")
        result = conceal_reasoning(raw, Confidence.HIGH)
        for term in ("step 2", "pipeline", "algorithm", "audit", "metadata"):
            assert term not in result.lower()
        assert len(_sentences(result)) <= 2

    def test_fallback_when_nothing_left(self):
        assert conceal_reasoning("Pipeline.", Confidence.HIGH) in FALLBACK_SUMMARIES
        assert conceal_reasoning("", Confidence.MEDIUM) in FALLBACK_SUMMARIES

    def test_low_confidence_gets_qualifier(self):
        raw = ("Low confidence assessment based on available signals. "
               "Timing may be appropriate for general business discussion")
        result = conceal_reasoning(raw, Confidence.LOW)
        assert has_uncertainty_qualifier(result)
        assert len(_sentences(result)) == 2
        assert result.endswith(".")

    def test_high_confidence_left_plain(self):
        raw = ("High confidence assessment based on available signals. "
               "Recent funding may enable new initiatives and investments")
        result = conceal_reasoning(raw, Confidence.HIGH)
        assert not has_uncertainty_qualifier(result)
        assert result == raw + "."


class TestAlternatives:

    def test_generated_alternatives_differ(self, prospect):
        hypothesis = Hypothesis(primary_reason="Recent funding may enable new initiatives and investments")
        alternatives = generate_alternatives(select_strategy(Confidence.MEDIUM), hypothesis, prospect)
        assert len(alternatives) == 2
        assert alternatives[0] != alternatives[1]

    def test_duplicates_are_distinguished(self):
        alts = ensure_distinct_alternatives(PRIMARY, [PRIMARY, PRIMARY])
        assert len({PRIMARY, *alts}) == 3
        assert alts[0].endswith("Best regards")
        assert "resonate with your current priorities" in alts[0]

    def test_wrong_count_rejected(self):
        with pytest.raises(ValueError):
            ensure_distinct_alternatives(PRIMARY, [PRIMARY])

    def test_distinguishing_sentence_respects_limit(self):
        long_message = "\n\n".join(["Hi Sarah,", " ".join(["word"] * 118) + ".", "Best regards"])
        result = add_distinguishing_sentence(long_message, "analytical", 120)
        assert count_words(result) <= 120
        assert "where the market is heading" in result


class TestMetadataAndAssembly:

    def _trail(self):
        trail = AuditTrail()
        for step in ("signal_weighing", "authenticity_review"):
            trail = trail.record(step, AuditStatus.STARTED)
            trail = trail.record(step, AuditStatus.COMPLETED, {"internal": True})
        return trail

    def test_metadata_uses_labels_without_details(self):
        meta = sanitize_metadata({"request_id": "abc", "audit_entries": self._trail().entries})
        assert meta["workflow_steps"] == ["Signal Analysis", "Quality Review"]
        assert all("details" not in e for e in meta["audit_log"])
        assert meta["audit_log"][0]["step"] == "Signal Analysis"
        assert meta["audit_log"][0]["status"] == "started"

    def test_assemble(self):
        out = assemble_output(PRIMARY, Confidence.LOW,
                              "Low confidence assessment based on available signals.",
                              ["Alt one text here.", "Alt two text here."],
                              {"request_id": "abc", "audit_entries": self._trail().entries})
        assert out.confidence == Confidence.LOW
        assert out.follow_up_timing == FollowUpTiming.ONE_MONTH
        assert has_uncertainty_qualifier(out.reasoning_summary)
        assert out.alternatives == ("Alt one text here.", "Alt two text here.")
        assert out.to_dict()["follow_up_timing"] == "one_month"
