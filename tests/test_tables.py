from dataclasses import FrozenInstanceError

import pytest

from khipro.tables import (
    CLUSTERS,
    MAX_KEY_LENGTH,
    RULE_TABLES,
    RuleTable,
    RuleTableError,
    TokenGroup,
)


def test_every_group_has_a_table():
    assert set(RULE_TABLES) == set(TokenGroup)
    for group, table in RULE_TABLES.items():
        assert table.group is group


@pytest.mark.parametrize(
    "group,size,max_key_length",
    [
        (TokenGroup.VOWEL, 46, 6),
        (TokenGroup.CONSONANT, 36, 3),
        (TokenGroup.CLUSTER, 405, 7),
        (TokenGroup.REPH, 2, 2),
        (TokenGroup.SUBJOIN, 2, 1),
        (TokenGroup.VOWEL_SIGN, 32, 4),
        (TokenGroup.DIGIT, 20, 2),
        (TokenGroup.DIACRITIC, 10, 3),
        (TokenGroup.SENTENCE_PUNCT, 10, 3),
        (TokenGroup.SEPARATOR, 2, 2),
        (TokenGroup.VOWEL_CLUSTER_FORM, 1, 2),
    ],
)
def test_table_sizes(group, size, max_key_length):
    table = RULE_TABLES[group]
    assert len(table) == size
    assert table.max_key_length == max_key_length
    assert table.max_key_length <= MAX_KEY_LENGTH


@pytest.mark.parametrize(
    "group,key,expected",
    [
        (TokenGroup.VOWEL, "a", "আ"),
        (TokenGroup.VOWEL_SIGN, "a", "া"),
        (TokenGroup.VOWEL_SIGN, "o", ""),  # inherent vowel writes nothing
        (TokenGroup.CONSONANT, "k", "ক"),
        (TokenGroup.CLUSTER, "kkh", "ক্ষ"),
        (TokenGroup.CLUSTER, "ksh", "কশ"),  # impossible cluster, plain letters
        (TokenGroup.REPH, "rr", "র্"),
        (TokenGroup.DIGIT, "0", "০"),
        (TokenGroup.DIACRITIC, "`", "\u200c"),  # ZWNJ
        (TokenGroup.DIACRITIC, "``", "\u200d"),  # ZWJ
        (TokenGroup.SENTENCE_PUNCT, "$", "৳"),
        (TokenGroup.SEPARATOR, ";", ""),
        (TokenGroup.VOWEL_CLUSTER_FORM, "ae", "\u200d্যা"),
    ],
)
def test_lookup(group, key, expected):
    table = RULE_TABLES[group]
    assert key in table
    assert table.get(key) == expected


def test_absent_key_is_not_an_error():
    table = RULE_TABLES[TokenGroup.CONSONANT]
    assert table.get("!") is None
    assert "!" not in table
    assert 5 not in table


def test_tables_are_read_only():
    table = RULE_TABLES[TokenGroup.DIGIT]
    with pytest.raises(TypeError):
        table.entries["x"] = "y"
    with pytest.raises(FrozenInstanceError):
        table.max_key_length = 1
    with pytest.raises(TypeError):
        RULE_TABLES[TokenGroup.DIGIT] = table


def test_table_copies_its_source():
    source = {"a": "আ"}
    table = RuleTable(TokenGroup.VOWEL, source)
    source["b"] = "ব"
    assert "b" not in table
    assert len(table) == 1


def test_module_tables_are_independent_of_source_dicts():
    assert dict(RULE_TABLES[TokenGroup.CLUSTER].entries) == CLUSTERS
    assert RULE_TABLES[TokenGroup.CLUSTER].entries is not CLUSTERS


def test_table_from_pairs():
    table = RuleTable(TokenGroup.DIGIT, [("1", "১"), ("10", "১০")])
    assert table.get("10") == "১০"
    assert table.max_key_length == 2


@pytest.mark.parametrize(
    "group,entries,message",
    [
        ("vowel", {"a": "আ"}, "Unknown token group"),
        (TokenGroup.VOWEL, {}, "is empty"),
        (TokenGroup.VOWEL, {"": "আ"}, "non-empty string"),
        (TokenGroup.VOWEL, {1: "আ"}, "non-empty string"),
        (TokenGroup.VOWEL, {"abcdefgh": "আ"}, "longer than"),
        (TokenGroup.VOWEL, {"আ": "আ"}, "printable ASCII"),
        (TokenGroup.VOWEL, {"a b": "আ"}, "printable ASCII"),
        (TokenGroup.VOWEL, {"a\n": "আ"}, "printable ASCII"),
        (TokenGroup.VOWEL, {"a": None}, "must be a string"),
        (TokenGroup.VOWEL, [("a", "আ"), ("a", "া")], "duplicate key"),
    ],
)
def test_malformed_tables_fail_fast(group, entries, message):
    with pytest.raises(RuleTableError, match=message):
        RuleTable(group, entries)


def test_rule_table_error_is_value_error():
    assert issubclass(RuleTableError, ValueError)
