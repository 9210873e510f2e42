"""Tests for the transliteration engine."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from translit.errors import InvalidTableError
from translit.text.engine import TransliterationEngine, transliterate
from translit.text.rule_table import RuleTable


def test_kaka(ka_table):
    assert transliterate("kaka", ka_table) == "kaka"


def test_longest_match_precedence():
    table = RuleTable.build([("a", "X"), ("ab", "Y")])
    assert transliterate("ab", table) == "Y"


def test_sh_single_match():
    table = RuleTable.build([("sh", "sh"), ("s", "s"), ("h", "h")])
    engine = TransliterationEngine(table)
    assert engine.transliterate("sh") == "sh"
    assert [c.length for c in engine.clusters("sh")] == [2]


def test_empty_input(ka_table):
    assert transliterate("", ka_table) == ""


def test_unmapped_input_is_identity():
    table = RuleTable.build([("क", "ka")])
    assert transliterate("hello, world", table) == "hello, world"
    assert transliterate("  hello  ", table) == "hello"


def test_surrounding_whitespace_trimmed():
    table = RuleTable.build([("a", "X"), ("ab", "Y")])
    assert transliterate(" ab ", table) == transliterate("ab", table) == "Y"


def test_fragment_whitespace_trimmed():
    table = RuleTable.build([("।", " . ")])
    assert transliterate("।", table) == "."


def test_silent_element_dropped():
    table = RuleTable.build([("x", ""), ("a", "a")])
    assert transliterate("axa", table) == "aa"


def test_fragments_longer_than_estimate():
    # Output grows past the initial buffer without failing
    table = RuleTable.build([("a", "a"), ("b", "bbbbbbbbbb")])
    assert transliterate("ab", table) == "a" + "b" * 10


def test_case_modes():
    table = RuleTable.build([("क", "Ka")])
    assert transliterate("क", table) == "Ka"
    assert transliterate("क", table, case="lower") == "ka"
    assert transliterate("क", table, case="upper") == "KA"
    engine = TransliterationEngine(table, case="lower")
    assert engine.transliterate("क", case="upper") == "KA"


def test_unknown_case_mode():
    with pytest.raises(ValueError):
        TransliterationEngine(RuleTable.build([]), case="title")


@pytest.mark.parametrize("table", [None, {"a": "b"}, "not a table"])
def test_invalid_table(table):
    with pytest.raises(InvalidTableError):
        transliterate("abc", table)


def test_invalid_table_even_for_empty_input():
    with pytest.raises(InvalidTableError):
        transliterate("", None)


def test_concurrent_calls_share_table():
    table = RuleTable.build([("sh", "SH"), ("a", "A")])
    engine = TransliterationEngine(table)
    inputs = ["sha" * i for i in range(1, 200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(engine.transliterate, inputs))
    assert results == ["SHA" * i for i in range(1, 200)]


def test_transliterate_with_clusters_matches_plain_output():
    table = RuleTable.build([("sh", "sh"), ("a", "A")])
    engine = TransliterationEngine(table, case="upper")
    output, clusters = engine.transliterate_with_clusters(" sha ")
    assert output == engine.transliterate(" sha ") == "SHA"
    assert [(c.start, c.length) for c in clusters] == [(0, 1), (1, 2), (3, 1), (4, 1)]


def test_transliterate_with_clusters_empty_input():
    assert TransliterationEngine(RuleTable.build([])).transliterate_with_clusters("") == ("", [])
