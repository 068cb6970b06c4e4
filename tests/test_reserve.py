"""Unit tests for :mod:`merit.storage`."""
from __future__ import annotations

from typing import List

import pytest

from merit.errors import FrameOutOfRangeError
from merit.storage import ConstantDecay, NoDecay, ProportionalDecay, Reserve


def test_reserve_assigns_volume_when_created() -> None:
    assert Reserve.without_decay(4.0).volume == 4.0


def test_reserve_starts_empty() -> None:
    res = Reserve.without_decay(5.0)

    assert res.at(0) == 0.0
    assert res.resolved_frames() == 1


def test_reserve_adds_energy() -> None:
    res = Reserve.without_decay(5.0)
    res.add(0, 2.0)

    assert res.at(0) == 2.0


def test_reserve_carries_previous_values() -> None:
    res = Reserve.without_decay(5.0)
    res.add(0, 2.0)

    for frame in range(1, 3):
        assert res.at(frame) == 2.0


@pytest.mark.parametrize("frame", [10, 8759])
def test_reserve_resolves_distant_frames(frame: int) -> None:
    res = Reserve.without_decay(5.0)
    res.add(0, 1.5)

    assert res.at(frame) == 1.5
    assert res.resolved_frames() == frame + 1


def test_reserve_volume_limit() -> None:
    res = Reserve.without_decay(2.0)

    for amount, added, stored in [
        (1.0, 1.0, 1.0),
        (1.0, 1.0, 2.0),
        (1.0, 0.0, 2.0),
        (1.0, 0.0, 2.0),
    ]:
        assert res.add(0, amount) == added
        assert res.at(0) == stored


def test_reserve_add_clamps_partial_amount() -> None:
    res = Reserve.without_decay(2.0)
    res.add(0, 1.5)

    assert res.add(0, 1.0) == pytest.approx(0.5)
    assert res.at(0) == pytest.approx(2.0)


def test_reserve_add_ignores_negative_amount() -> None:
    res = Reserve.without_decay(5.0)
    res.add(0, 1.0)

    assert res.add(0, -3.0) == 0.0
    assert res.at(0) == 1.0


@pytest.mark.parametrize(
    "amount, taken",
    [
        (3.0, 3.0),  # less than stored
        (5.0, 5.0),  # full amount stored
        (7.0, 5.0),  # more than stored
        (-1.0, 0.0),  # negative
    ],
)
def test_reserve_take(amount: float, taken: float) -> None:
    res = Reserve.without_decay(10.0)
    res.set(0, 5.0)

    assert res.take(0, amount) == taken
    assert res.at(0) == 5.0 - taken


def test_reserve_set_ignores_volume() -> None:
    res = Reserve.without_decay(1.0)
    res.set(0, 3.0)

    assert res.at(0) == 3.0


def test_reserve_decay() -> None:
    res = Reserve(10.0, ConstantDecay(2.0))
    res.add(0, 3.0)

    for frame, decay, stored in [
        (0, 0.0, 3.0),
        (1, 2.0, 1.0),
        (2, 1.0, 0.0),
        (3, 0.0, 0.0),
    ]:
        assert (frame, res.decay_at(frame)) == (frame, decay)
        assert (frame, res.at(frame)) == (frame, stored)


def test_reserve_decay_with_plain_function() -> None:
    res = Reserve(10.0, lambda frame, stored: 2.0)
    res.add(0, 3.0)

    assert res.at(1) == 1.0
    assert res.at(2) == 0.0


def test_reserve_decay_rule_called_once_per_frame() -> None:
    calls: List[int] = []

    def rule(frame: int, stored: float) -> float:
        calls.append(frame)
        return 0.5

    res = Reserve(10.0, rule, horizon=10)
    res.add(0, 4.0)

    assert res.at(5) == pytest.approx(1.5)
    assert res.at(5) == pytest.approx(1.5)
    assert res.decay_at(3) == 0.5
    assert res.at(3) == pytest.approx(2.5)
    assert calls == [1, 2, 3, 4, 5]


def test_reserve_resolves_from_nearest_cached_frame() -> None:
    res = Reserve(10.0, ConstantDecay(1.0), horizon=10)
    res.set(4, 6.0)

    assert res.at(6) == 4.0
    assert res.resolved_frames() == 4  # frames 0, 4, 5 and 6
    assert res.at(2) == 0.0


def test_reserve_proportional_decay() -> None:
    res = Reserve(100.0, ProportionalDecay(0.1), horizon=4)
    res.add(0, 50.0)

    assert res.decay_at(1) == pytest.approx(5.0)
    assert res.at(1) == pytest.approx(45.0)
    assert res.at(2) == pytest.approx(40.5)


def test_reserve_stays_within_volume() -> None:
    volume = 5.0
    res = Reserve(volume, ConstantDecay(0.75), horizon=48)

    for frame in range(48):
        if frame % 3 == 0:
            res.add(frame, 4.0)
        elif frame % 5 == 0:
            before = res.at(frame)
            assert res.take(frame, 2.5) == min(2.5, before)
            assert res.at(frame) == pytest.approx(before - min(2.5, before))

    for frame in range(48):
        assert 0.0 <= res.at(frame) <= volume


@pytest.mark.parametrize("frame", [-1, 4])
def test_reserve_rejects_frames_outside_horizon(frame: int) -> None:
    res = Reserve.without_decay(1.0, horizon=4)

    with pytest.raises(FrameOutOfRangeError):
        res.at(frame)
    with pytest.raises(FrameOutOfRangeError):
        res.set(frame, 1.0)
    with pytest.raises(FrameOutOfRangeError):
        res.add(frame, 1.0)
    with pytest.raises(FrameOutOfRangeError):
        res.take(frame, 1.0)
    with pytest.raises(FrameOutOfRangeError):
        res.decay_at(frame)
    assert res.resolved_frames() == 1


def test_reserve_rejects_negative_volume() -> None:
    with pytest.raises(ValueError):
        Reserve.without_decay(-1.0)


def test_decay_rules() -> None:
    assert NoDecay()(5, 10.0) == 0.0
    assert ConstantDecay(2.0)(5, 10.0) == 2.0
    assert ProportionalDecay(0.25)(5, 8.0) == 2.0

    with pytest.raises(ValueError):
        ConstantDecay(-1.0)
    with pytest.raises(ValueError):
        ProportionalDecay(1.5)


def test_reserve_ignores_nan_amounts() -> None:
    res = Reserve.without_decay(5.0)
    res.add(0, 2.0)

    assert res.add(0, float("nan")) == 0.0
    assert res.take(0, float("nan")) == 0.0
    assert res.at(0) == 2.0


def test_reserve_infinite_amounts_are_clamped() -> None:
    res = Reserve.without_decay(5.0)

    assert res.add(0, float("inf")) == 5.0
    assert res.at(0) == 5.0
    assert res.take(0, float("inf")) == 5.0
    assert res.at(0) == 0.0
