import random

import pytest

from gridsnake.vector import IVec2, random_position


class _FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


def test_add_combines_components():
    assert IVec2(3, 4) + IVec2(1, -2) == IVec2(4, 2)


def test_sub_is_inverse_of_add():
    a = IVec2(7, -3)
    b = IVec2(2, 9)
    assert (a + b) - b == a


def test_equality_and_hash():
    assert IVec2(5, 6) == IVec2(5, 6)
    assert IVec2(5, 6) != IVec2(6, 5)
    assert len({IVec2(1, 1), IVec2(1, 1), IVec2(2, 1)}) == 2


def test_vectors_are_immutable():
    vec = IVec2(1, 2)
    with pytest.raises(AttributeError):
        vec.x = 3
    assert vec.x == 1
    assert vec.y == 2
    assert vec == IVec2(1, 2)


def test_add_rejects_non_vectors():
    with pytest.raises(TypeError):
        IVec2(1, 2) + (1, 2)


def test_random_position_is_one_based():
    position = random_position(10, 20, _FixedRng([0, 19]))
    assert position == IVec2(1, 20)


@pytest.mark.parametrize("seed", range(5))
def test_random_position_stays_in_range(seed):
    rng = random.Random(seed)
    for _ in range(200):
        position = random_position(4, 7, rng)
        assert 1 <= position.x <= 4
        assert 1 <= position.y <= 7


def test_random_position_covers_whole_range():
    rng = random.Random(1)
    seen = {random_position(3, 2, rng) for _ in range(500)}
    assert seen == {IVec2(x, y) for x in range(1, 4) for y in range(1, 3)}


@pytest.mark.parametrize("max_x, max_y", [(0, 5), (5, 0), (-1, 3)])
def test_random_position_rejects_non_positive_bounds(max_x, max_y):
    with pytest.raises(ValueError):
        random_position(max_x, max_y, random.Random(0))