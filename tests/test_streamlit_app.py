"""
Smoke tests for the Streamlit page, driven through AppTest.
"""

import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import guess_engine
from guess_engine import CORRECT, GameEngine

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")
ENGINE_KEY = "guess::engine"


@pytest.fixture
def at():
    app = AppTest.from_file(APP_PATH, default_timeout=10)
    app.run()
    assert not app.exception
    return app


def submit(at, text):
    at.text_input[0].input(text)
    at.button[0].click()
    at.run()


class TestGuessPage:
    """End-to-end checks of the guess page."""

    def test_initial_render(self, at):
        engine = at.session_state[ENGINE_KEY]
        assert isinstance(engine, GameEngine)
        assert engine.attempts == 0
        assert len(at.text_input) == 1
        assert len(at.button) == 1
        assert len(at.warning) == 0

    def test_engine_logger_configured(self, at):
        handlers = guess_engine.logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert guess_engine.logger.level == logging.INFO

    def test_invalid_input_warns(self, at):
        submit(at, "abc")
        assert not at.exception
        assert "Invalid Input" in at.warning[0].value
        assert at.session_state[ENGINE_KEY].history == []

    def test_duplicate_warns(self, at):
        engine = at.session_state[ENGINE_KEY]
        guess = 1 if engine.target != 1 else 2
        submit(at, str(guess))
        submit(at, str(guess))
        assert "Repeated Guess" in at.warning[0].value
        assert engine.history == [guess]

    def test_win_and_play_again(self, at):
        engine = at.session_state[ENGINE_KEY]
        submit(at, str(engine.target))
        assert engine.feedback == CORRECT
        assert at.button[0].disabled
        assert len(at.button) == 2

        at.button[1].click()
        at.run()
        assert engine.attempts == 0
        assert engine.history == []
        assert len(at.button) == 1
