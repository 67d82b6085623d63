"""
Bot common - Shared Non-Player helpers.

All randomness goes through state["rng"] so a seeded game replays
identically.
"""


def random_select(state, candidates):
    """Select one candidate from equal-priority options using state RNG.

    Args:
        state: Game state dict (must have state["rng"]).
        candidates: Sequence of candidates (must be non-empty).

    Returns:
        One selected candidate.

    Raises:
        ValueError: If candidates is empty.
    """
    if not candidates:
        raise ValueError("Cannot random_select from empty candidates")
    if len(candidates) == 1:
        return candidates[0]
    idx = state["rng"].randint(0, len(candidates) - 1)
    return candidates[idx]
