#!/usr/bin/env python3
"""
End-to-end run: Validate -> Weigh -> Hypothesize -> Classify -> Draft for sample prospects.
Runs entirely offline. No network calls required.

Usage:
    python scripts/run_outreach.py
    python scripts/run_outreach.py --json              # Print full results as JSON
    python scripts/run_outreach.py --prospect Sarah    # Run a single sample prospect
"""

import argparse
import json
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from outreach_agent.agent import create_agent
from outreach_agent.agents.output_assembler import follow_up_description
from outreach_agent.logging_config import setup_logging
from outreach_agent.models import FinalOutput, make_prospect, make_signal


# ─── SAMPLE PROSPECTS ──────────────────────────────────────────

def sample_requests():
    return [
        {
            "label": "strong, fresh evidence",
            "prospect": make_prospect(
                role="VP of Engineering", company_name="PayFlow", industry="FinTech",
                contact_name="Sarah Chen", email="sarah.chen@payflow.com",
                company_size="medium",
            ),
            "signals": [
                make_signal("funding_event", "PayFlow raised a $45M Series B funding round led by Accel",
                            0.95, "press_release", days_ago=3),
                make_signal("role_change", "Sarah Chen was appointed VP of Engineering",
                            0.9, "linkedin", days_ago=1),
            ],
        },
        {
            "label": "mixed evidence",
            "prospect": make_prospect(
                role="Head of Platform", company_name="HealthBridge", industry="Healthcare",
                contact_name="Mike Torres", email="mike@healthbridge.io",
                company_size="large",
            ),
            "signals": [
                make_signal("tech_adoption", "HealthBridge is migrating its scheduling platform to AWS",
                            0.85, "news", days_ago=10),
                make_signal("growth", "Hiring for six platform roles as part of an expansion",
                            0.6, "job_board", days_ago=25),
            ],
        },
        {
            "label": "weak, stale evidence",
            "prospect": make_prospect(
                role="Operations Manager", company_name="Northwind", industry="Logistics",
                contact_name="Priya Patel", email="priya@northwind.example",
                company_size="small",
            ),
            "signals": [
                make_signal("industry_trend", "Logistics sector may be seeing some regulation changes",
                            0.3, "blog", days_ago=75),
                make_signal("growth", "Possibly expanding, maybe hiring",
                            0.25, "forum", days_ago=80),
            ],
        },
    ]


def main():
    parser = argparse.ArgumentParser(description="Run the outreach agent on sample prospects")
    parser.add_argument("--json", action="store_true", help="Print full results as JSON")
    parser.add_argument("--prospect", help="Only run the sample whose contact name contains this")
    args = parser.parse_args()

    setup_logging()
    agent = create_agent()

    requests = sample_requests()
    if args.prospect:
        requests = [r for r in requests
                    if args.prospect.lower() in r["prospect"].contact_name.lower()]

    results = []
    for req in requests:
        result = agent.process(req["prospect"], req["signals"])
        results.append(result.to_dict())
        if args.json:
            continue

        print("=" * 60)
        print(f"{req['prospect'].contact_name} @ {req['prospect'].company_name} ({req['label']})")
        print("=" * 60)
        if not isinstance(result, FinalOutput):
            print(f"FAILED: {result.code} at {result.failed_step} - {result.message}")
            continue
        print(f"Confidence: {result.confidence.value}")
        print(f"Reasoning:  {result.reasoning_summary}")
        print(f"Follow-up:  {follow_up_description(result.follow_up_timing)}")
        print("\n--- Message ---")
        print(result.message)
        for i, alt in enumerate(result.alternatives, 1):
            print(f"\n--- Alternative {i} ---")
            print(alt)
        print()

    if args.json:
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
