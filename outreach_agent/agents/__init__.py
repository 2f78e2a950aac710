# Reasoning engines, in pipeline order:
#   signal_weigher.py        - freshness, relevance, and weight per signal
#   hypothesis_former.py     - single best-supported hypothesis, or the conservative fallback
#   confidence_classifier.py - High / Medium / Low
#   strategy_selector.py     - confidence -> strategy and tone variants
#   message_writer.py        - drafting (with tone_engine.py, cta_engine.py, phrase_bank.py)
#   quality_gate.py          - authenticity review
#   revision_loop.py         - bounded redrafting
#   output_assembler.py      - caller-facing result
#   reasoning_pipeline.py    - runs the steps with audit trail and timeout
