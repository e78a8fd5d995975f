import logging
import sys

import streamlit as st

import guess_engine
from feedback_display import feedback_view, history_color
from guess_engine import HIGHEST, LOWEST, GameEngine, GuessError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []  # script reruns on every interaction

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger


setup_logger(guess_engine.logger.name)

# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Guess the Number", page_icon="🎯", layout="centered")

# -----------------------------
# Global styling
# -----------------------------
st.markdown(
    """
    <style>
    .block-container { max-width: 640px; padding-top: 1.0rem; padding-bottom: 2.5rem; }

    div[data-testid="stToolbar"] { visibility: hidden; height: 0%; position: fixed; }
    #MainMenu { visibility: hidden; }
    footer { visibility: hidden; }

    html, body, [class*="css"] {
        font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
        background-color: #f7f9fc;
    }

    .hero { text-align: center; margin-bottom: 12px; }
    .hero-title { font-size: 1.75rem; font-weight: 800; margin: 0; }
    .hero-sub { margin: 0.25rem 0 0 0; color: #444; font-size: 1.0rem; }

    .result { text-align: center; margin: 20px 0; }
    .result-icon { font-size: 28px; }
    .result-text { font-size: 1.0rem; margin-top: 6px; }

    .history-label { font-weight: 600; color: #333; margin-top: 20px; }
    .guesses { display: flex; flex-wrap: nowrap; overflow-x: auto; gap: 8px; padding: 6px 0; }
    .guess {
        padding: 6px 12px;
        border-radius: 20px;
        font-size: 1.0rem;
        color: #333;
        white-space: nowrap;
    }

    .stButton button {
        border-radius: 12px !important;
        font-weight: 600 !important;
        padding: 0.55rem 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# =============================
# SESSION STATE
# =============================
def gkey(name: str) -> str:
    return f"guess::{name}"


def init_state():
    # One engine per browser session.
    if gkey("engine") not in st.session_state:
        st.session_state[gkey("engine")] = GameEngine()
    if gkey("error") not in st.session_state:
        st.session_state[gkey("error")] = ""
    if gkey("text_rev") not in st.session_state:
        st.session_state[gkey("text_rev")] = 0


def engine() -> GameEngine:
    return st.session_state[gkey("engine")]


def handle_guess():
    try:
        engine().submit_guess()
    except GuessError as e:
        st.session_state[gkey("error")] = f"**{e.title}**: {e.message}"
        return
    st.session_state[gkey("error")] = ""
    # New widget key clears the text box.
    st.session_state[gkey("text_rev")] += 1


def reset_game():
    engine().reset()
    st.session_state[gkey("error")] = ""
    st.session_state[gkey("text_rev")] += 1


# =============================
# RENDERING
# =============================
def render_feedback(game: GameEngine):
    view = feedback_view(game.feedback, game.target, game.attempts)
    if view is None:
        return
    weight = "600" if game.won else "400"
    st.markdown(
        f"""
        <div class="result">
            <div class="result-icon">{view["icon"]}</div>
            <div class="result-text" style="color:{view["color"]}; font-weight:{weight};">{view["text"]}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_history(game: GameEngine):
    if not game.history:
        return
    pills = [
        f'<span class="guess" style="background:{history_color(game.classify(num))};">{num}</span>'
        for num in game.history
    ]
    st.markdown('<div class="history-label">🕘 Previous Guesses:</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="guesses">{"".join(pills)}</div>', unsafe_allow_html=True)
    st.caption(f"Attempts: {game.attempts}")


# =============================
# UI
# =============================
init_state()
game = engine()

st.markdown(
    f"""
    <div class="hero">
        <div class="hero-title">🎯 Guess the Number</div>
        <div class="hero-sub">Enter a number between {LOWEST} and {HIGHEST}</div>
    </div>
    """,
    unsafe_allow_html=True,
)

rev = st.session_state[gkey("text_rev")]
typed = st.text_input(
    "Your guess",
    value=game.pending,
    key=f"{gkey('typed')}::{rev}",
    placeholder="Your guess...",
    label_visibility="collapsed",
    disabled=game.won,
)
if (typed or "") != game.pending:
    game.set_pending(typed)
    st.session_state[gkey("error")] = ""

if st.button("Submit Guess", width="stretch", type="primary", disabled=game.won):
    handle_guess()
    st.rerun()

if st.session_state[gkey("error")]:
    st.warning(st.session_state[gkey("error")])

render_feedback(game)
render_history(game)

if game.won:
    if st.button("🔄 Play Again", width="stretch"):
        reset_game()
        st.rerun()
