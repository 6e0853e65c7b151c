from core.press_window import PressWindows


def test_first_press_opens_window():
    w = PressWindows(0.5)
    assert w.press("A") == 1
    t = w.get("A")
    assert t.count == 1
    assert t.elapsed == 0.0


def test_next_press_counts_and_resets_elapsed():
    w = PressWindows(0.5)
    w.press("A")
    w.advance(0.25)
    assert w.get("A").elapsed == 0.25

    assert w.press("A") == 2
    assert w.get("A").elapsed == 0.0
    assert len(w) == 1


def test_window_closes_at_interval():
    w = PressWindows(0.5)
    w.press("A")
    assert w.advance(0.25) == []
    expired = w.advance(0.25)
    assert [(t.key, t.count) for t in expired] == [("A", 1)]
    assert "A" not in w

    # a fresh press starts over
    assert w.press("A") == 1


def test_windows_are_per_key():
    w = PressWindows(0.5)
    w.press("A")
    w.advance(0.25)
    w.press("B")
    w.press("B")

    expired = w.advance(0.25)
    assert [t.key for t in expired] == ["A"]
    assert w.get("B").count == 2
    assert w.get("B").elapsed == 0.25


def test_clear():
    w = PressWindows(0.5)
    w.press("A")
    w.clear()
    assert len(w) == 0
    assert w.timers() == []
