"""Coaching and daily-inspiration message generation."""

import random
import re
from datetime import date
from typing import Optional

from .config import (
    COACHING_MESSAGES,
    DAILY_MESSAGES,
    DEFAULT_INSPIRATION,
    INSPIRATIONAL_QUOTES,
    LOW_MOOD_BELOW,
    MODERATE_MOOD_BELOW,
)


def mood_category(mood: float) -> str:
    """Bucket a 0-100 mood score into low / moderate / high."""
    if mood < LOW_MOOD_BELOW:
        return "low"
    if mood < MODERATE_MOOD_BELOW:
        return "moderate"
    return "high"


def personalize(message: str, user_name: Optional[str]) -> str:
    """Address the message to the user by name.

    "you"/"You" become the name and "your" becomes "<name>'s". Left alone
    when there is no name or the placeholder name "there".
    """
    if not user_name or user_name == "there":
        return message
    message = re.sub(r"\b(you|You)\b", user_name, message)
    return re.sub(r"\byour\b", f"{user_name}'s", message)


def generate_coaching_message(style: str, mood: float, user_name: Optional[str] = None,
                              rng: Optional[random.Random] = None) -> dict:
    """Pick a coaching message for a style and mood.

    Raises:
        ValueError: for an unknown style
    """
    selected = COACHING_MESSAGES.get(style)
    if selected is None:
        raise ValueError("Invalid coaching style")

    rng = rng or random
    message = rng.choice(selected[mood_category(mood)])

    return {
        "message": personalize(message, user_name),
        "greeting": selected["greeting"],
        "style": style,
    }


def generate_daily_message(user_name: Optional[str], mood: float,
                           rng: Optional[random.Random] = None,
                           today: Optional[date] = None) -> dict:
    """Build today's inspiration: a mood-based message plus a quote."""
    rng = rng or random
    today = today or date.today()

    quote, author = rng.choice(INSPIRATIONAL_QUOTES)
    personal = rng.choice(DAILY_MESSAGES[mood_category(mood)])
    greeting = f"Good morning, {user_name}!" if user_name and user_name != "there" else "Good morning!"

    return {
        "message": f"{greeting} {personal}",
        "quote": quote,
        "author": author,
        "date": f"{today:%A}, {today:%B} {today.day}, {today.year}",
    }


def build_inspiration_script(daily: Optional[dict] = None) -> str:
    """Turn a daily message into a paced script for premium voices.

    Sentence breaks become long pauses, then the quote and its author are
    read, followed by a short closing line.
    """
    daily = daily or DEFAULT_INSPIRATION

    text = f"Good morning. {daily['message']}"
    text = text.replace(".", "... ").replace(",", ", ")
    text += f'... Here\'s something to reflect on: "{daily["quote"]}"... This wisdom comes from {daily["author"]}.'
    text += "... Take a moment to let this inspire your day."
    return text


def build_inspiration_plain(daily: Optional[dict] = None) -> str:
    """Plain text of a daily message for local speech."""
    daily = daily or DEFAULT_INSPIRATION
    return f"{daily['message']} {daily['quote']} by {daily['author']}"
