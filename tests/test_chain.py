# tests/test_chain.py

import pytest

from seqglue.assembly.chain import Direction, build_chain
from seqglue.assembly.overlap import Overlap, Sequence

R1 = Sequence("r1", "ATTAGACCTG")
R2 = Sequence("r2", "AGACCTGCCG")
R3 = Sequence("r3", "CCTGCCGGAA")


def test_right_chain_appends_in_order():
    chain = build_chain(R1, {R2, R3}, Direction.RIGHT)
    assert chain == [Overlap(R1, R2, 7), Overlap(R2, R3, 7)]


def test_left_chain_reads_left_to_right():
    chain = build_chain(R3, {R1, R2}, Direction.LEFT)
    assert chain == [Overlap(R1, R2, 7), Overlap(R2, R3, 7)]


def test_direction_accepts_plain_string():
    assert build_chain(R1, [R2, R3], "right") == build_chain(R1, [R2, R3], Direction.RIGHT)


def test_consecutive_overlaps_share_an_endpoint():
    chain = build_chain(R1, [R3, R2], Direction.RIGHT)
    for prev, nxt in zip(chain, chain[1:]):
        assert prev.right == nxt.left


def test_pool_is_not_mutated():
    pool = {R2, R3}
    listed = [R3, R2]
    build_chain(R1, pool, Direction.RIGHT)
    build_chain(R1, listed, Direction.LEFT)
    assert pool == {R2, R3}
    assert listed == [R3, R2]


def test_stops_when_nothing_is_gluable():
    # R3 overlaps R1 by 4 bases only, under the 5 needed
    assert build_chain(R1, [R3], Direction.RIGHT) == []
    assert build_chain(R1, [], Direction.RIGHT) == []
    assert build_chain(R1, [], Direction.LEFT) == []


def test_stops_when_pool_is_exhausted():
    chain = build_chain(R1, [R2], Direction.RIGHT)
    assert chain == [Overlap(R1, R2, 7)]


def test_start_in_pool_is_ignored():
    same = Sequence("s", "ACGTACGT")
    assert build_chain(same, [same], Direction.RIGHT) == []


def test_longest_gluable_overlap_is_picked():
    start = Sequence("s", "GGGGACGTAC")
    short = Sequence("a", "ACGTACTTTT")   # overlap 6
    long = Sequence("b", "GACGTACCCC")    # overlap 7
    chain = build_chain(start, [short, long], Direction.RIGHT)
    assert chain[0] == Overlap(start, long, 7)


def test_ties_go_to_the_first_name():
    start = Sequence("s", "AAACCCCC")
    x = Sequence("c", "CCCCCGGG")
    y = Sequence("b", "CCCCCTTT")
    chain = build_chain(start, [x, y], Direction.RIGHT)
    # both overlap by 5; "b" sorts before "c"
    assert chain == [Overlap(start, y, 5)]


def test_tie_break_is_stable_across_input_order():
    start = Sequence("s", "AAACCCCC")
    x = Sequence("c", "CCCCCGGG")
    y = Sequence("b", "CCCCCTTT")
    assert build_chain(start, [x, y], Direction.RIGHT) == build_chain(start, [y, x], Direction.RIGHT)


def test_unknown_direction_rejected():
    with pytest.raises(ValueError):
        build_chain(R1, [R2], "up")
