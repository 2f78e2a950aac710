"""
Deterministic phrase selection.

Drafts vary between revision attempts by hashing the evolving draft text,
never by randomness, so the same input always yields the same output.
"""

import hashlib


def stable_hash(text: str) -> int:
    """Stable integer hash of text (same value across processes and runs)."""
    return int(hashlib.sha256(text.encode("utf-8")).hexdigest()[:16], 16)


def select_variant(candidates, seed: str = "", slot: str = ""):
    """Pick one candidate deterministically.

    An empty seed always returns the first candidate. Otherwise the pick is
    driven by a content hash of the seed and the slot name, so different slots
    of the same draft can land on different positions.
    """
    candidates = list(candidates)
    if not candidates:
        raise ValueError("select_variant needs at least one candidate")
    if not seed:
        return candidates[0]
    return candidates[stable_hash(f"{slot}|{seed}") % len(candidates)]
