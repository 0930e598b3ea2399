"""
Motivation message selection.

Total lookup from a streak length to an encouragement string. The tier table
is configuration; product copy changes should not need engine changes.
"""

import json
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union


@dataclass(frozen=True)
class MotivationTier:
    min_streak: int
    message: str  # may contain {streak}


def _to_tier(raw: Union[MotivationTier, Sequence]) -> MotivationTier:
    if isinstance(raw, MotivationTier):
        min_streak, message = raw.min_streak, raw.message
    else:
        try:
            min_streak, message = raw
        except (TypeError, ValueError) as e:
            raise ValueError(f"motivation tier must be a (min_streak, message) pair, got {raw!r}") from e
    # bool is an int subclass
    if isinstance(min_streak, bool) or not isinstance(min_streak, int):
        raise ValueError(f"motivation tier threshold must be an integer, got {min_streak!r}")
    if not isinstance(message, str):
        raise ValueError(f"motivation tier message must be a string, got {message!r}")
    return MotivationTier(min_streak, message)


class MotivationTable:
    """Ordered (min_streak, message) tiers. First tier must start at 0."""

    def __init__(self, tiers: Iterable[Union[MotivationTier, Sequence]]):
        parsed = tuple(_to_tier(t) for t in tiers)
        if not parsed:
            raise ValueError("motivation table needs at least one tier")
        if parsed[0].min_streak != 0:
            raise ValueError("first motivation tier must start at streak 0")
        for lower, upper in zip(parsed, parsed[1:]):
            if upper.min_streak <= lower.min_streak:
                raise ValueError(
                    f"motivation tiers must be strictly increasing ({lower.min_streak} then {upper.min_streak})"
                )
        self.tiers: Tuple[MotivationTier, ...] = parsed

    @classmethod
    def from_json(cls, raw: str) -> "MotivationTable":
        """Parse '[[0, "Start"], [1, "Day one"]]'."""
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"motivation tiers are not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise ValueError("motivation tiers must be a JSON list of [min_streak, message] pairs")
        return cls(data)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MotivationTable) and self.tiers == other.tiers

    def __repr__(self) -> str:
        return f"MotivationTable({list(self.tiers)!r})"


DEFAULT_MOTIVATION_TABLE = MotivationTable(
    [
        MotivationTier(0, "Start your journey today! 🌟"),
        MotivationTier(1, "Great start! Keep it going! 💪"),
        MotivationTier(2, "{streak} days strong! Building momentum 🔥"),
        MotivationTier(7, "Amazing {streak}-day streak! 🎯"),
        MotivationTier(14, "Incredible {streak}-day streak! 🚀"),
        MotivationTier(30, "Legendary {streak}-day streak! 🏆"),
    ]
)


def select_message(current_streak: int, table: MotivationTable = DEFAULT_MOTIVATION_TABLE) -> str:
    """Message of the highest tier whose min_streak <= current_streak."""
    if current_streak < 0:
        raise ValueError(f"current_streak must be >= 0, got {current_streak}")
    chosen = table.tiers[0]
    for tier in table.tiers:
        if tier.min_streak > current_streak:
            break
        chosen = tier
    return chosen.message.replace("{streak}", str(current_streak))
