from collections import defaultdict

import pygame
import pytest

from core.errors import UnknownKeyError
from core.input import Keyboard, KeyStateTracker


def make_tracker(keys, *names):
    tracker = KeyStateTracker(names)
    for name in names:
        tracker.bind_source(name, keys.source(name))
    return tracker


def test_unknown_key_fails_fast(keys):
    tracker = make_tracker(keys, "A")
    with pytest.raises(UnknownKeyError):
        tracker.is_active("B")
    with pytest.raises(UnknownKeyError):
        tracker.pressed("B")
    with pytest.raises(UnknownKeyError):
        tracker.released("B")
    with pytest.raises(UnknownKeyError):
        tracker.inject("B")
    with pytest.raises(UnknownKeyError):
        tracker.bind_source("B", lambda: True)


def test_duplicate_names_share_a_slot():
    tracker = KeyStateTracker(["A", "B", "A"])
    assert tracker.keys == ("A", "B")
    assert tracker.slot("A") == 0
    assert tracker.slot("B") == 1


def test_edges_compare_against_previous_frame_only(keys):
    tracker = make_tracker(keys, "A")

    keys.press("A")
    tracker.update()
    assert tracker.is_active("A")
    assert tracker.pressed("A")
    assert not tracker.released("A")

    tracker.update()
    assert tracker.is_active("A")
    assert not tracker.pressed("A")

    keys.release("A")
    tracker.update()
    assert not tracker.is_active("A")
    assert tracker.released("A")

    tracker.update()
    assert not tracker.released("A")


def test_inject_lasts_exactly_one_frame(keys):
    tracker = make_tracker(keys, "A")

    tracker.inject("A")
    tracker.update()
    assert tracker.pressed("A")

    tracker.update()
    assert not tracker.is_active("A")
    assert tracker.released("A")


def test_inject_is_ored_with_sources(keys):
    tracker = make_tracker(keys, "A")
    keys.press("A")
    tracker.update()

    tracker.inject("A")
    tracker.update()
    # already held: no new edge
    assert tracker.is_active("A")
    assert not tracker.pressed("A")


def test_any_source_activates_key():
    tracker = KeyStateTracker(["A"])
    state = {"pad": False, "key": False}
    tracker.bind_source("A", lambda: state["key"])
    tracker.bind_source("A", lambda: state["pad"])

    state["pad"] = True
    tracker.update()
    assert tracker.is_active("A")


def test_reset_clears_state(keys):
    tracker = make_tracker(keys, "A")
    keys.press("A")
    tracker.update()
    tracker.reset()
    assert not tracker.is_active("A")
    assert not tracker.released("A")


def test_keyboard_source_reads_snapshot(monkeypatch):
    held = defaultdict(bool)
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: held)

    kb = Keyboard()
    up_or_w = kb.source(pygame.K_w, pygame.K_UP)
    assert up_or_w() is False

    held[pygame.K_UP] = True
    assert up_or_w() is False  # snapshot not taken yet
    kb.update()
    assert up_or_w() is True
    assert not kb.is_down(pygame.K_s)
