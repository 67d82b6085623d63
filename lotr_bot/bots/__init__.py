"""Bot infrastructure - Non-Player decision strategies.

Provides:
- bot_common: Shared NP helpers (seeded random selection)
- random_bot: Default strategy (random attack-first moves, random cards)
- bot_dispatch: Strategy registry and routing
"""
