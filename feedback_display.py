from typing import Dict, Optional

from guess_engine import CLOSE, CORRECT, DEFAULT, EXACT, HIGH, LOW, VERY_CLOSE

CORRECT_COLOR = "green"
HINT_COLOR = "#666"

FEEDBACK_ICONS = {
    CORRECT: "✅",
    VERY_CLOSE: "🔥",
    CLOSE: "💡",
    LOW: "⬇️",
    HIGH: "⬆️",
}

FEEDBACK_COLORS = {
    CORRECT: CORRECT_COLOR,
    VERY_CLOSE: HINT_COLOR,
    CLOSE: HINT_COLOR,
    LOW: HINT_COLOR,
    HIGH: HINT_COLOR,
}

HISTORY_COLORS = {
    EXACT: "#28a745",
    VERY_CLOSE: "#ffc107",
    CLOSE: "#17a2b8",
    DEFAULT: "#ddd",
}


def feedback_message(feedback: str, target: int, attempts: int) -> str:
    if feedback == CORRECT:
        return f"Correct! It was {target}. You guessed it in {attempts} tries."
    if feedback == VERY_CLOSE:
        return "Very close! You are nearly there."
    if feedback == CLOSE:
        return "You are getting warm..."
    if feedback == LOW:
        return "Too low. Try again."
    if feedback == HIGH:
        return "Too high. Try again."
    return ""


def feedback_color(feedback: str) -> str:
    return FEEDBACK_COLORS.get(feedback, HINT_COLOR)


def feedback_view(feedback: str, target: int, attempts: int) -> Optional[Dict[str, str]]:
    """Icon, text and color for a feedback category, or None before the first guess."""
    if feedback not in FEEDBACK_ICONS:
        return None
    return {
        "icon": FEEDBACK_ICONS[feedback],
        "text": feedback_message(feedback, target, attempts),
        "color": feedback_color(feedback),
    }


def history_color(tier: str) -> str:
    return HISTORY_COLORS.get(tier, HISTORY_COLORS[DEFAULT])
