# tests/test_overlap.py

import pytest

from seqglue.assembly.overlap import Overlap, Sequence, find_overlap, is_gluable, overlap_length


def S(bases: str, name: str = "r") -> Sequence:
    return Sequence(name=name, bases=bases)


def test_exact_overlap():
    assert overlap_length(S("ATTAGACCTG"), S("AGACCTGCCG")) == 7


def test_non_overlapping_reads():
    a, b = S("GATTACA"), S("TATAGAC")
    assert overlap_length(a, b) == 0
    assert overlap_length(b, a) == 0


def test_empty_read_scores_zero():
    assert overlap_length(S(""), S("ACGT")) == 0
    assert overlap_length(S("ACGT"), S("")) == 0
    assert overlap_length(S(""), S("")) == 0


def test_case_sensitive():
    assert overlap_length(S("AAACGT"), S("cgtAAA")) == 0
    assert overlap_length(S("AAACGT"), S("CGTAAA")) == 3


def test_identical_reads_overlap_fully():
    assert overlap_length(S("ACGTACGT"), S("ACGTACGT")) == 8


def test_longest_match_wins():
    # "A", "AA" and "AAA" all match; the longest is reported
    assert overlap_length(S("CCAAA"), S("AAAGG")) == 3


def test_suffix_longer_than_right_read():
    assert overlap_length(S("GGGGACGT"), S("CGT")) == 3
    assert overlap_length(S("T"), S("TTTT")) == 1


@pytest.mark.parametrize("a,b", [
    ("ACGTTGCA", "TGCAACGT"),
    ("AAAA", "AAAAAAAA"),
    ("GATTACA", "ACAGATT"),
    ("C", "G"),
])
def test_bounds(a, b):
    n = overlap_length(S(a), S(b))
    assert 0 <= n <= min(len(a), len(b))
    assert a[len(a) - n:] == b[:n]


def test_find_overlap_builds_record():
    a, b = S("ATTAGACCTG", "a"), S("AGACCTGCCG", "b")
    ov = find_overlap(a, b)
    assert ov == Overlap(left=a, right=b, length=7)


def test_gluable_threshold_even_length():
    a = S("A" * 10)
    b = S("C" * 13)
    # shorter read is 10 long -> more than 5 bases needed
    assert not is_gluable(Overlap(a, b, 5))
    assert is_gluable(Overlap(a, b, 6))
    assert is_gluable(Overlap(a, b, 7))


def test_gluable_threshold_odd_length():
    a = S("A" * 7)
    b = S("C" * 20)
    # 7 // 2 == 3
    assert not Overlap(a, b, 3).is_gluable
    assert Overlap(a, b, 4).is_gluable


def test_zero_overlap_never_gluable():
    assert not is_gluable(Overlap(S("A"), S("C"), 0))
    assert not is_gluable(Overlap(S(""), S(""), 0))


def test_sequences_compare_by_value():
    assert S("ACGT", "x") == S("ACGT", "x")
    assert S("ACGT", "x") != S("ACGT", "y")
    assert len({S("ACGT", "x"), S("ACGT", "x")}) == 1
