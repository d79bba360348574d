from unittest import mock

import pygame
import pytest

from ffge.config import GAME_TITLE
from ffge.engine import Engine, EngineError


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_escape_key_requests_exit():
    engine = Engine()
    assert engine.should_exit({"escape"}) is True
    assert engine.should_exit({"left", "z"}) is False


def test_request_exit_is_sticky():
    engine = Engine()
    engine.request_exit()
    assert engine.should_exit(set()) is True
    assert engine.should_exit({"left"}) is True


def test_elapsed_before_start_raises():
    with pytest.raises(RuntimeError):
        Engine().elapsed_ms()


def test_start_sets_title_and_clock(headless):
    engine = Engine()
    engine.start()
    try:
        assert engine.running is True
        assert pygame.display.get_caption()[0] == GAME_TITLE
        first = engine.elapsed_ms()
        second = engine.elapsed_ms()
        assert 0 <= first <= second
    finally:
        engine.shutdown()
    assert engine.running is False
    with pytest.raises(RuntimeError):
        engine.elapsed_ms()


def test_custom_title(headless):
    engine = Engine(title="Arena")
    engine.start()
    try:
        assert engine.running is True
        assert engine.elapsed_ms() >= 0
        assert pygame.display.get_caption()[0] == "Arena"
    finally:
        engine.shutdown()
    assert engine.running is False


def test_start_fails_without_display(headless):
    engine = Engine()
    with mock.patch("pygame.display.get_init", return_value=False):
        with pytest.raises(EngineError):
            engine.start()
    pygame.quit()
    assert engine.running is False