"""Shared fixtures: a simulated actor board."""

import logging

import pytest

from orchestra.config import reset_config
from orchestra.playback import PlaybackController
from orchestra.simulated import LoopbackRadio, RadioMedium, SimulatedDisplay, SimulatedMusic


@pytest.fixture
def music():
    return SimulatedMusic(tempo=120)


@pytest.fixture
def display():
    return SimulatedDisplay()


@pytest.fixture
def playback(music, display):
    return PlaybackController(music, display, actor="test")


@pytest.fixture
def medium():
    return RadioMedium()


@pytest.fixture
def conductor_radio(medium):
    return LoopbackRadio(medium)


@pytest.fixture
def listener_radio(medium):
    return LoopbackRadio(medium)


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload configuration from the environment for every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging() during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("orchestra", "notation"):
        logging.getLogger(name).setLevel(logging.NOTSET)
