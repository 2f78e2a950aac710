#!/usr/bin/env python3
"""
Unified test runner for the Intent Outreach Agent.

Runs pytest per suite, reports results, and exits with non-zero on failure.

Usage:
    python scripts/run_tests.py              # Run all tests
    python scripts/run_tests.py reasoning    # Weigher, hypothesis, confidence, strategy
    python scripts/run_tests.py messages     # Drafting, quality gate, revisions, output
    python scripts/run_tests.py pipeline     # End-to-end and API
"""

import subprocess
import sys
import os
import time

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), "..")

TEST_SUITES = {
    "reasoning": [
        "tests/unit/test_signal_weigher.py",
        "tests/unit/test_hypothesis_former.py",
        "tests/unit/test_confidence_classifier.py",
        "tests/unit/test_strategy_selector.py",
    ],
    "messages": [
        "tests/unit/test_message_writer.py",
        "tests/unit/test_quality_gate.py",
        "tests/unit/test_revision_loop.py",
        "tests/unit/test_output_assembler.py",
    ],
    "pipeline": [
        "tests/unit/test_input_validator.py",
        "tests/unit/test_config_logging.py",
        "tests/test_pipeline.py",
        "tests/test_api.py",
    ],
}


def run_suite(path):
    """Run a single test file under pytest and return (passed, output)."""
    full = os.path.join(PROJECT_ROOT, path)
    if not os.path.exists(full):
        return False, f"  SKIP: {path} (file not found)"
    try:
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "-q", full],
            capture_output=True, text=True, timeout=120,
            cwd=PROJECT_ROOT,
        )
        last_line = result.stdout.strip().split("\n")[-1] if result.stdout.strip() else ""
        if result.returncode == 0:
            return True, f"  PASS: {path} -- {last_line}"
        return False, f"  FAIL: {path} -- {last_line or 'unknown error'}"
    except subprocess.TimeoutExpired:
        return False, f"  TIMEOUT: {path}"


def main():
    groups = list(TEST_SUITES.keys())

    if len(sys.argv) > 1:
        requested = sys.argv[1].lower()
        if requested in TEST_SUITES:
            groups = [requested]
        else:
            print(f"Unknown group '{requested}'. Available: {', '.join(TEST_SUITES.keys())}")
            sys.exit(1)

    print("=" * 60)
    print("OUTREACH AGENT TEST RUNNER")
    print("=" * 60)

    start = time.time()
    total_passed = 0
    failures = []

    for group in groups:
        print(f"\n--- {group.upper()} ---")
        for f in TEST_SUITES[group]:
            passed, msg = run_suite(f)
            print(msg)
            if passed:
                total_passed += 1
            else:
                failures.append(f)

    elapsed = time.time() - start
    print(f"\n{'=' * 60}")
    print(f"RESULTS: {total_passed} passed, {len(failures)} failed ({elapsed:.1f}s)")
    if failures:
        print("FAILURES:")
        for f in failures:
            print(f"  - {f}")
    print("=" * 60)

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
