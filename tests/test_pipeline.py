"""
End-to-end tests for the reasoning pipeline and agent facade.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from outreach_agent.agent import OutreachAgent, create_agent
from outreach_agent.agents.message_writer import count_words, find_banned_phrases
from outreach_agent.agents.output_assembler import has_uncertainty_qualifier
from outreach_agent.agents.phrase_bank import MESSAGE_HEDGES
from outreach_agent.agents.reasoning_pipeline import OutreachPipeline
from outreach_agent.models import (
    AuthenticityVerdict, Confidence, FinalOutput, FollowUpTiming, ProcessingFailure,
)

INTERNAL_WORDS = ("pipeline", "algorithm", "audit", "metadata", "hypothesis formation")


def _assert_well_formed(out):
    assert isinstance(out, FinalOutput), f"Expected FinalOutput, got {out}"
    assert count_words(out.message) <= 120
    assert find_banned_phrases(out.message) == []
    assert len(out.alternatives) == 2
    assert len({out.message, *out.alternatives}) == 3
    for alt in out.alternatives:
        assert count_words(alt) <= 120
    for word in INTERNAL_WORDS:
        assert word not in out.reasoning_summary.lower()


class TestScenarios:

    def test_strong_fresh_evidence(self, prospect, strong_signals, now):
        out = OutreachPipeline().process(prospect, strong_signals, now=now)
        _assert_well_formed(out)
        assert out.confidence == Confidence.HIGH
        assert out.follow_up_timing == FollowUpTiming.ONE_WEEK
        assert "PayFlow" in out.message
        assert out.message.startswith("Hi Sarah,")

    def test_weak_stale_evidence(self, prospect, weak_signals, now):
        out = OutreachPipeline().process(prospect, weak_signals, now=now)
        _assert_well_formed(out)
        assert out.confidence == Confidence.LOW
        assert out.follow_up_timing == FollowUpTiming.ONE_MONTH
        assert any(h in out.message.lower() for h in MESSAGE_HEDGES)
        assert has_uncertainty_qualifier(out.reasoning_summary)

    def test_no_signals(self, prospect, now):
        out = OutreachPipeline().process(prospect, [], now=now)
        _assert_well_formed(out)
        assert out.confidence == Confidence.LOW
        assert "?" not in out.message
        assert has_uncertainty_qualifier(out.reasoning_summary)

    def test_mixed_evidence_is_medium(self, prospect, signal_factory, now):
        signals = [
            signal_factory("tech_adoption", "Migrating the scheduling platform to AWS", 0.85, days_ago=10),
            signal_factory("growth", "Hiring for six platform roles as part of an expansion", 0.6, days_ago=25),
        ]
        out = OutreachPipeline().process(prospect, signals, now=now)
        _assert_well_formed(out)
        assert out.confidence == Confidence.MEDIUM
        assert out.follow_up_timing == FollowUpTiming.TWO_WEEKS

    def test_deterministic(self, prospect, strong_signals, now):
        pipeline = OutreachPipeline()
        first = pipeline.process(prospect, strong_signals, now=now)
        second = pipeline.process(prospect, strong_signals, now=now)
        assert first.to_dict()["message"] == second.to_dict()["message"]
        assert first.alternatives == second.alternatives
        assert first.reasoning_summary == second.reasoning_summary
        assert first.confidence == second.confidence


class TestAuditAndMetadata:

    def test_workflow_steps_in_order(self, prospect, strong_signals, now):
        out = OutreachPipeline().process(prospect, strong_signals, now=now)
        assert out.metadata["workflow_steps"] == [
            "Signal Analysis", "Intent Analysis", "Confidence Assessment", "Approach Selection",
            "Message Creation", "Quality Review", "Alternative Creation", "Output Preparation",
        ]
        assert out.metadata["version"] == "1.0.0"
        statuses = {e["status"] for e in out.metadata["audit_log"]}
        assert statuses == {"started", "completed"}

    def test_best_effort_revisions_recorded(self, prospect, strong_signals, now):
        never_good = lambda message, confidence: AuthenticityVerdict(
            score=40, acceptable=False, must_revise=True)
        out = OutreachPipeline(evaluate_fn=never_good).process(prospect, strong_signals, now=now)
        assert isinstance(out, FinalOutput)
        steps = [e["step"] for e in out.metadata["audit_log"]]
        assert "Quality Review (revision 1)" in steps
        assert "Quality Review (revision 2)" in steps
        assert "Quality Review (revision 3)" not in steps

    def test_concurrent_requests_do_not_share_audit(self, prospect, strong_signals, now):
        pipeline = OutreachPipeline()
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: pipeline.process(prospect, strong_signals, now=now),
                                    range(8)))
        lengths = {len(r.metadata["audit_log"]) for r in results}
        assert len(lengths) == 1
        assert len({r.metadata["request_id"] for r in results}) == 8


class TestFailures:

    def test_step_failure_halts(self, prospect, strong_signals, now):
        def broken(strategy, hypothesis, prospect, seed="", max_words=None):
            raise RuntimeError("drafter offline")

        out = OutreachPipeline(draft_fn=broken).process(prospect, strong_signals, now=now)
        assert isinstance(out, ProcessingFailure)
        assert out.code == "MESSAGE_DRAFTING_ERROR"
        assert out.failed_step == "message_drafting"
        assert out.remediation
        log = out.context["audit_log"]
        assert log[-1]["status"] == "failed"
        assert not any(e["step"] == "Quality Review" for e in log)

    def test_timeout(self, prospect, strong_signals, now, stalled_draft):
        pipeline = OutreachPipeline({"processing_timeout_seconds": 0.05}, draft_fn=stalled_draft)
        out = pipeline.process(prospect, strong_signals, now=now)
        assert isinstance(out, ProcessingFailure)
        assert out.code == "PROCESSING_TIMEOUT"
        assert "audit_log" not in out.context


class TestAgentFacade:

    def test_validation_failure(self, prospect, strong_signals, now):
        out = create_agent().process(prospect, strong_signals[:1], now=now)
        assert isinstance(out, ProcessingFailure)
        assert out.code == "VALIDATION_FAILED"
        assert out.failed_step == "input_validation"
        assert out.context["errors"][0]["code"] == "INSUFFICIENT_INTENT_SIGNALS"

    def test_success_and_determinism(self, prospect, strong_signals, now):
        agent = create_agent({"verbose_logging": True})
        assert agent.process(prospect, strong_signals, now=now).confidence == Confidence.HIGH
        assert agent.is_deterministic(prospect, strong_signals, now=now)

    def test_config_and_health(self):
        agent = OutreachAgent({"max_revision_attempts": 2})
        assert agent.get_config()["max_revision_attempts"] == 2
        agent.update_config(max_words=100)
        assert agent.get_health_status()["config"]["max_words"] == 100
        assert agent.get_health_status()["status"] == "healthy"
        with pytest.raises(ValueError):
            agent.update_config(processing_timeout_seconds=0)
        with pytest.raises(ValueError):
            OutreachAgent({"max_words": -1})
