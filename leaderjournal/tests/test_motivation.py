"""Tests for the motivation message selector."""

import pytest

from leaderjournal.features.streaks.motivation import (
    DEFAULT_MOTIVATION_TABLE,
    MotivationTable,
    MotivationTier,
    select_message,
)


@pytest.mark.parametrize(
    "streak,expected",
    [
        (0, "Start your journey today! 🌟"),
        (1, "Great start! Keep it going! 💪"),
        (2, "2 days strong! Building momentum 🔥"),
        (6, "6 days strong! Building momentum 🔥"),
        (7, "Amazing 7-day streak! 🎯"),
        (13, "Amazing 13-day streak! 🎯"),
        (14, "Incredible 14-day streak! 🚀"),
        (30, "Legendary 30-day streak! 🏆"),
        (45, "Legendary 45-day streak! 🏆"),
    ],
)
def test_default_tiers(streak, expected):
    assert select_message(streak) == expected


def test_total_for_large_values():
    assert select_message(10_000).startswith("Legendary")


def test_negative_streak_rejected():
    with pytest.raises(ValueError):
        select_message(-1)


def test_deterministic():
    assert select_message(9) == select_message(9)


class TestCustomTable:
    def test_custom_thresholds_are_respected(self):
        table = MotivationTable([(0, "zero"), (5, "five plus"), (10, "ten plus")])

        assert select_message(4, table) == "zero"
        assert select_message(5, table) == "five plus"
        assert select_message(99, table) == "ten plus"

    def test_from_json(self):
        table = MotivationTable.from_json('[[0, "Begin"], [3, "{streak} in a row"]]')

        assert table.tiers == (MotivationTier(0, "Begin"), MotivationTier(3, "{streak} in a row"))
        assert select_message(4, table) == "4 in a row"

    def test_message_with_other_braces_is_left_alone(self):
        table = MotivationTable([(0, "{not a placeholder} {streak}")])

        assert select_message(0, table) == "{not a placeholder} 0"

    @pytest.mark.parametrize(
        "tiers",
        [
            [],
            [(1, "must start at zero")],
            [(0, "a"), (5, "b"), (5, "duplicate")],
            [(0, "a"), (5, "b"), (3, "decreasing")],
            [(0,)],
        ],
    )
    def test_invalid_tables_rejected(self, tiers):
        with pytest.raises(ValueError):
            MotivationTable(tiers)

    @pytest.mark.parametrize("raw", ["not json", '{"0": "a"}'])
    def test_invalid_json_rejected(self, raw):
        with pytest.raises(ValueError):
            MotivationTable.from_json(raw)


def test_default_table_starts_at_zero():
    assert DEFAULT_MOTIVATION_TABLE.tiers[0].min_streak == 0


@pytest.mark.parametrize(
    "tiers",
    [
        [(0, "a"), (1.9, "fractional threshold")],
        [(0, "a"), ("3", "string threshold")],
        [(False, "bool threshold")],
        [(0, 42)],
    ],
)
def test_thresholds_must_be_integers_and_messages_strings(tiers):
    with pytest.raises(ValueError):
        MotivationTable(tiers)


def test_fractional_threshold_in_json_rejected():
    with pytest.raises(ValueError):
        MotivationTable.from_json('[[0, "a"], [1.9, "b"]]')
