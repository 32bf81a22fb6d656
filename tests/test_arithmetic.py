import math

import pytest

from algorithmics.arithmetic import gcd, hanoi_moves


@pytest.mark.parametrize(
    "m, n", [(48, 18), (18, 48), (17, 5), (100, 10), (270, 192), (7, 7), (0, 9)]
)
def test_gcd_matches_math(m, n):
    assert gcd(m, n) == math.gcd(m, n)


def test_gcd_divides_both():
    result = gcd(1071, 462)
    assert 1071 % result == 0
    assert 462 % result == 0


def test_gcd_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        gcd(5, 0)


def _simulate(disks, moves, pegs=("A", "B", "C")):
    stacks = {peg: [] for peg in pegs}
    stacks[pegs[0]] = list(range(disks, 0, -1))
    for disk, src, dst in moves:
        assert stacks[src][-1] == disk
        stacks[src].pop()
        assert not stacks[dst] or stacks[dst][-1] > disk
        stacks[dst].append(disk)
    return stacks


@pytest.mark.parametrize("disks", [0, 1, 2, 3, 5, 8])
def test_hanoi_moves_are_legal_and_complete(disks):
    moves = list(hanoi_moves(disks, "A", "B", "C"))
    assert len(moves) == 2**disks - 1
    stacks = _simulate(disks, moves)
    assert stacks["C"] == list(range(disks, 0, -1))
    assert stacks["A"] == [] and stacks["B"] == []


def test_hanoi_single_disk():
    assert list(hanoi_moves(1)) == [(1, "A", "C")]


def test_hanoi_custom_pegs():
    moves = list(hanoi_moves(3, "x", "y", "z"))
    stacks = _simulate(3, moves, pegs=("x", "y", "z"))
    assert stacks["z"] == [3, 2, 1]


def test_hanoi_negative_disks_rejected():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))