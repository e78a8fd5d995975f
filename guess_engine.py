import logging
import random
import re
from typing import List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------
# Rules
# -----------------------------
LOWEST = 1
HIGHEST = 100
VERY_CLOSE_RANGE = 5
CLOSE_RANGE = 15

# Plain ASCII digits, optional sign
GUESS_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Feedback categories
NONE = ""
CORRECT = "correct"
VERY_CLOSE = "very-close"
CLOSE = "close"
LOW = "low"
HIGH = "high"

# History tiers
EXACT = "exact"
DEFAULT = "default"

PLAYING = "playing"
WON = "won"


# =============================
# ERRORS
# =============================
class GuessError(ValueError):
    title = "Guess Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(GuessError):
    title = "Invalid Input"

    def __init__(self, raw: str = ""):
        super().__init__(f"Please enter a number between {LOWEST} and {HIGHEST}.")
        self.raw = raw


class DuplicateGuess(GuessError):
    title = "Repeated Guess"

    def __init__(self, value: int):
        super().__init__(f"You already tried {value}. Try something else.")
        self.value = value


# =============================
# PURE HELPERS
# =============================
class GuessResult(NamedTuple):
    feedback: str
    won: bool


class GameState(NamedTuple):
    target: int
    attempts: int
    history: Tuple[int, ...]
    feedback: str


def parse_guess(raw) -> int:
    """Turn raw text entry into a guess, raising InvalidInput when it is not one."""
    text = "" if raw is None else str(raw).strip()
    if not GUESS_PATTERN.fullmatch(text):
        raise InvalidInput(text)
    value = int(text)
    if value < LOWEST or value > HIGHEST:
        raise InvalidInput(text)
    return value


def evaluate_guess(value: int, target: int) -> str:
    # Equality, then the proximity bands, then direction.
    if value == target:
        return CORRECT
    diff = abs(value - target)
    if diff <= VERY_CLOSE_RANGE:
        return VERY_CLOSE
    if diff <= CLOSE_RANGE:
        return CLOSE
    if value < target:
        return LOW
    return HIGH


def classify_history_entry(value: int, target: int) -> str:
    """Display tier for a past guess; same bands as evaluate_guess, no direction."""
    feedback = evaluate_guess(value, target)
    if feedback == CORRECT:
        return EXACT
    if feedback in (VERY_CLOSE, CLOSE):
        return feedback
    return DEFAULT


# =============================
# ENGINE
# =============================
class GameEngine:
    """
    One round of guess-the-number for a single session.

    State only changes through submit_guess() and reset(). Once the target is
    found the round is won and further guesses are ignored until reset().
    """

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.target = 0
        self.attempts = 0
        self.history: List[int] = []
        self.feedback = NONE
        self.pending = ""
        self.reset()

    @property
    def won(self) -> bool:
        return self.feedback == CORRECT

    @property
    def state(self) -> str:
        return WON if self.won else PLAYING

    def set_pending(self, text: str):
        self.pending = text or ""

    def submit_guess(self, raw: Optional[str] = None) -> GuessResult:
        if self.won:
            logger.debug("Guess %r ignored, round already won", raw)
            return GuessResult(self.feedback, True)

        if raw is None:
            raw = self.pending

        try:
            value = parse_guess(raw)
        except InvalidInput:
            logger.info("Rejected guess %r: not a number in range", raw)
            raise

        if value in self.history:
            logger.info("Rejected guess %d: already tried", value)
            raise DuplicateGuess(value)

        self.history.append(value)
        self.attempts += 1
        self.feedback = evaluate_guess(value, self.target)
        self.pending = ""

        if self.won:
            logger.info("Round won in %d attempts", self.attempts)
        else:
            logger.debug("Guess %d -> %s (attempt %d)", value, self.feedback, self.attempts)
        return GuessResult(self.feedback, self.won)

    def reset(self):
        self.target = self._rng.randint(LOWEST, HIGHEST)
        self.attempts = 0
        self.history = []
        self.feedback = NONE
        self.pending = ""
        logger.debug("New round started, target=%d", self.target)

    def classify(self, value: int) -> str:
        return classify_history_entry(value, self.target)

    def snapshot(self) -> GameState:
        return GameState(self.target, self.attempts, tuple(self.history), self.feedback)
