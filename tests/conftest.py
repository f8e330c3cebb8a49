"""Shared pytest fixtures and configuration."""

import logging

import pytest

from roster.core.roll_counter import RollCounter
from roster.persistence.repositories import StudentRepository


@pytest.fixture(autouse=True)
def reset_roster_logger():
    """Drop handlers installed by setup_logging so tests do not leak streams."""
    yield
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def counter() -> RollCounter:
    return RollCounter()


@pytest.fixture
def repository(counter: RollCounter) -> StudentRepository:
    return StudentRepository(counter)


@pytest.fixture
def scripted_input(monkeypatch):
    """Replace input() with a fixed list of answers.

    Returns a function taking the answers; it returns the list the prompts
    are recorded into. Running out of answers raises EOFError, like a
    closed stdin.
    """
    def feed(*answers: str):
        queue = list(answers)
        prompts = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return feed
