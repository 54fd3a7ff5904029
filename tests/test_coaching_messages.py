"""Tests for coaching and daily-inspiration messages."""

import random
from datetime import date
from unittest.mock import Mock

import pytest

from domains.coaching.config import COACHING_MESSAGES, DAILY_MESSAGES, DEFAULT_INSPIRATION, INSPIRATIONAL_QUOTES
from domains.coaching.messages import (
    build_inspiration_plain,
    build_inspiration_script,
    generate_coaching_message,
    generate_daily_message,
    mood_category,
    personalize,
)


@pytest.mark.parametrize("mood,expected", [
    (0, "low"),
    (32, "low"),
    (33, "moderate"),
    (65, "moderate"),
    (66, "high"),
    (100, "high"),
])
def test_mood_category(mood, expected):
    assert mood_category(mood) == expected


class TestPersonalize:

    def test_replaces_you_and_your(self):
        assert personalize("You did it, and your plan works for you.", "Sam") == \
            "Sam did it, and Sam's plan works for Sam."

    def test_leaves_words_containing_you(self):
        assert personalize("Trust yourself", "Sam") == "Trust yourself"

    @pytest.mark.parametrize("name", [None, "", "there"])
    def test_no_name(self, name):
        assert personalize("You can", name) == "You can"


class TestCoachingMessage:

    def test_message_from_mood_bucket(self):
        result = generate_coaching_message("wise", 10, rng=random.Random(1))

        assert result["style"] == "wise"
        assert result["greeting"] == COACHING_MESSAGES["wise"]["greeting"]
        assert result["message"] in COACHING_MESSAGES["wise"]["low"]

    def test_personalized(self):
        last = Mock()
        last.choice.side_effect = lambda seq: seq[-1]

        result = generate_coaching_message("calm", 80, user_name="Ana", rng=last)

        assert result["message"] == (
            "This is the perfect time for creative thinking and peaceful productivity. "
            "Trust Ana's intuition to guide Ana."
        )

    def test_invalid_style(self):
        with pytest.raises(ValueError, match="Invalid coaching style"):
            generate_coaching_message("angry", 50)


class TestDailyMessage:

    def test_shape(self):
        result = generate_daily_message("Ana", 50, rng=random.Random(3), today=date(2026, 10, 19))

        assert result["message"].startswith("Good morning, Ana! ")
        assert result["message"][len("Good morning, Ana! "):] in DAILY_MESSAGES["moderate"]
        assert (result["quote"], result["author"]) in INSPIRATIONAL_QUOTES
        assert result["date"] == "Monday, October 19, 2026"

    def test_anonymous_greeting(self):
        result = generate_daily_message(None, 10, today=date(2026, 10, 19))
        assert result["message"].startswith("Good morning! ")


class TestInspirationScript:

    def test_script_paces_and_credits(self):
        script = build_inspiration_script({"message": "Rise, shine.", "quote": "Go", "author": "Me"})

        assert script.startswith("Good morning... ")
        assert "Rise,  shine... " in script
        assert 'Here\'s something to reflect on: "Go"' in script
        assert "This wisdom comes from Me." in script
        assert script.endswith("Take a moment to let this inspire your day.")

    def test_defaults(self):
        assert DEFAULT_INSPIRATION["author"] in build_inspiration_script()
        assert build_inspiration_plain().endswith(f"by {DEFAULT_INSPIRATION['author']}")
