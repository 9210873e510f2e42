"""Tests for longest-match-first segmentation."""
from translit.text.rule_table import RuleTable
from translit.text.segmenter import Cluster, ClusterSegmenter


def test_segments_cover_input(ka_table):
    clusters = list(ClusterSegmenter(ka_table).segment("kaka"))
    assert [(c.start, c.length, c.output) for c in clusters] == [(0, 2, "ka"), (2, 2, "ka")]
    assert all(c.matched for c in clusters)


def test_longest_match_not_first_match():
    table = RuleTable.build([("s", "s"), ("h", "h"), ("sh", "sh")])
    clusters = list(ClusterSegmenter(table).segment("sh"))
    assert clusters == [Cluster(0, 2, "sh", matched=True)]


def test_unmapped_units_pass_through():
    table = RuleTable.build([("a", "X")])
    clusters = list(ClusterSegmenter(table).segment("bab"))
    assert clusters == [
        Cluster(0, 1, "b", matched=False),
        Cluster(1, 1, "X", matched=True),
        Cluster(2, 1, "b", matched=False),
    ]


def test_contiguous_spans():
    table = RuleTable.build([("abc", "1"), ("b", "2"), ("cd", "3")])
    text = "xabcbcdq"
    clusters = list(ClusterSegmenter(table).segment(text))
    offset = 0
    for c in clusters:
        assert c.start == offset
        offset = c.end
    assert offset == len(text)


def test_pattern_longer_than_remaining_input():
    table = RuleTable.build([("abcd", "L"), ("a", "s")])
    clusters = list(ClusterSegmenter(table).segment("ab"))
    assert [c.output for c in clusters] == ["s", "b"]


def test_segment_is_lazy_and_restartable(ka_table):
    segmenter = ClusterSegmenter(ka_table)
    gen = segmenter.segment("kak")
    assert next(gen) == Cluster(0, 2, "ka", matched=True)
    # A new call starts over from the beginning
    assert [c.start for c in segmenter.segment("kak")] == [0, 2]


def test_empty_input_yields_nothing(ka_table):
    assert list(ClusterSegmenter(ka_table).segment("")) == []


def test_multi_unit_character_kept_whole():
    # Astral character followed by a combining mark, declared as one pattern
    table = RuleTable.build([("\U0001F600\u0301", "smile")])
    clusters = list(ClusterSegmenter(table).segment("\U0001F600\u0301!"))
    assert [c.output for c in clusters] == ["smile", "!"]
