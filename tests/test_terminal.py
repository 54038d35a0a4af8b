import os
from unittest import mock

import pytest

from glyphscreen import terminal
from glyphscreen.terminal import (
    ColorSupport,
    Dimensions,
    color_support,
    compute_color_support,
    reset_color_support_cache,
    set_fallback_size,
    terminal_size,
)


@pytest.fixture
def restore_fallback():
    saved = terminal._fallback_size
    yield
    set_fallback_size(saved)


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"COLORTERM": "truecolor"}, ColorSupport.TRUE_COLOR),
        ({"COLORTERM": "24bit"}, ColorSupport.TRUE_COLOR),
        ({"COLORTERM": "24bit", "TERM": "xterm-256color"}, ColorSupport.TRUE_COLOR),
        ({"TERM": "xterm-256color"}, ColorSupport.PALETTE256),
        ({"COLORTERM": "256"}, ColorSupport.PALETTE256),
        ({"TERM": "xterm"}, ColorSupport.PALETTE16),
        ({}, ColorSupport.PALETTE16),
    ],
)
def test_compute_color_support(environ, expected):
    assert compute_color_support(environ) == expected


def test_color_support_ordering():
    true_color = compute_color_support({"COLORTERM": "truecolor"})
    palette256 = compute_color_support({"TERM": "xterm-256color"})
    palette16 = compute_color_support({})
    assert palette16 < palette256 < true_color
    assert true_color >= ColorSupport.PALETTE256
    assert palette16 < ColorSupport.PALETTE256


def test_color_support_is_cached(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    reset_color_support_cache()
    assert color_support() == ColorSupport.TRUE_COLOR

    monkeypatch.delenv("COLORTERM")
    monkeypatch.setenv("TERM", "xterm")
    assert color_support() == ColorSupport.TRUE_COLOR

    reset_color_support_cache()
    assert color_support() == ColorSupport.PALETTE16
    reset_color_support_cache()


def test_terminal_size_detected(restore_fallback):
    with mock.patch("os.get_terminal_size", return_value=os.terminal_size((120, 40))):
        assert terminal_size() == Dimensions(120, 40)


def test_terminal_size_falls_back_on_error(restore_fallback):
    set_fallback_size(Dimensions(33, 11))
    with mock.patch("os.get_terminal_size", side_effect=OSError):
        assert terminal_size() == Dimensions(33, 11)


def test_terminal_size_falls_back_on_zero(restore_fallback):
    set_fallback_size(Dimensions(50, 20))
    with mock.patch("os.get_terminal_size", return_value=os.terminal_size((0, 30))):
        assert terminal_size() == Dimensions(50, 20)
    with mock.patch("os.get_terminal_size", return_value=os.terminal_size((30, 0))):
        assert terminal_size() == Dimensions(50, 20)


def test_default_fallback_width():
    with mock.patch("os.get_terminal_size", side_effect=OSError):
        assert terminal_size().dimx == 80