#!/usr/bin/env python3
"""Tests for the cancellable decay ticker."""

import sys
import threading
import time
sys.path.insert(0, '.')

import pytest

from tesseract_viewer.core.ticker import DecayTicker


def test_runs_until_callback_returns_false():
    ticker = DecayTicker(1)
    calls = []
    done = threading.Event()

    def callback():
        calls.append(time.monotonic())
        if len(calls) == 3:
            done.set()
            return False
        return True

    ticker.start(callback)
    assert done.wait(2.0)
    ticker.stop()
    assert len(calls) == 3
    assert not ticker.running


def test_stop_halts_ticking():
    ticker = DecayTicker(1)
    calls = []
    ticker.start(lambda: calls.append(1) or True)
    time.sleep(0.02)
    ticker.stop()
    count = len(calls)
    time.sleep(0.02)
    assert len(calls) == count
    assert not ticker.running


def test_stop_is_idempotent():
    ticker = DecayTicker(16)
    ticker.stop()
    ticker.start(lambda: True)
    ticker.stop()
    ticker.stop()
    assert not ticker.running


def test_restart_replaces_previous_task():
    ticker = DecayTicker(1)
    first, second = [], []
    ticker.start(lambda: first.append(1) or True)
    time.sleep(0.01)
    ticker.start(lambda: second.append(1) or True)
    count = len(first)
    time.sleep(0.02)
    ticker.stop()
    assert len(first) == count
    assert second


def test_stop_from_inside_callback():
    ticker = DecayTicker(1)
    done = threading.Event()

    def callback():
        ticker.stop()
        done.set()
        return True

    ticker.start(callback)
    assert done.wait(2.0)
    time.sleep(0.01)
    assert not ticker.running


def test_callback_error_is_logged_not_raised(caplog):
    ticker = DecayTicker(1)

    def callback():
        raise RuntimeError("boom")

    ticker.start(callback)
    thread = ticker.thread
    thread.join(1.0)
    assert not thread.is_alive()
    assert "boom" in caplog.text


def test_invalid_interval():
    with pytest.raises(ValueError):
        DecayTicker(0)


if __name__ == "__main__":
    test_runs_until_callback_returns_false()
    test_stop_halts_ticking()
    print("Ticker tests passed")
