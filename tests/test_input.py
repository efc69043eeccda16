"""Tests for edge-triggered key latches."""

from tetris_input import Controls, EdgeLatch, InputLatches


def test_edge_latch_fires_on_press_only():
    latch = EdgeLatch()
    assert [latch.update(p) for p in (False, True, True, True, False, True)] == \
        [False, True, False, False, False, True]


def test_soft_drop_is_level_triggered():
    latches = InputLatches()
    held = Controls(soft_drop=True)
    assert latches.update(held).soft_drop
    assert latches.update(held).soft_drop
    assert not latches.update(Controls()).soft_drop


def test_controls_latch_independently():
    latches = InputLatches()
    first = latches.update(Controls(rotate=True, left=True))
    assert first.rotate and first.left and not first.right
    second = latches.update(Controls(rotate=True, right=True))
    assert not second.rotate and not second.left and second.right


def test_both_directions_held_leaves_latches_untouched():
    latches = InputLatches()
    latches.update(Controls(left=True))
    both = latches.update(Controls(left=True, right=True))
    assert not both.left and not both.right
    # right fires once left lets go
    assert latches.update(Controls(right=True)).right
    assert not latches.update(Controls(right=True)).right
