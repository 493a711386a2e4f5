"""Tests for the standalone utility routines."""

import pytest

from src.kata import annotate, from_roman, is_balanced, private_key, public_key, secret, to_roman, translate


def test_translate_stops_at_stop_codon():
    assert translate("AUGUUUUCUUAAAUG") == ["Methionine", "Phenylalanine", "Serine"]


def test_translate_empty_and_none():
    assert translate("") == []
    assert translate(None) == []


def test_translate_rejects_unknown_codon():
    with pytest.raises(ValueError):
        translate("XYZ")
    with pytest.raises(ValueError):
        translate("AUGU")


def test_translate_ignores_garbage_after_stop():
    assert translate("UGGUAGUU") == ["Tryptophan"]


def test_annotate_counts_adjacent_mines():
    board = [
        "·*·*·",
        "··*··",
        "··*··",
        "·····",
    ]
    assert annotate(board) == [
        "1*3*1",
        "13*31",
        " 2*2 ",
        " 111 ",
    ]


def test_annotate_empty_and_mine_only():
    assert annotate([]) == []
    assert annotate(["*"]) == ["*"]
    assert annotate([" "]) == [" "]


def test_diffie_hellman_shared_secret():
    prime, base = 23, 5
    alice = private_key(prime)
    bob = private_key(prime)
    assert 2 <= alice < prime and 2 <= bob < prime
    assert public_key(prime, base, 6) == 8
    assert secret(prime, 19, 6) == 2
    assert secret(prime, public_key(prime, base, bob), alice) == secret(prime, public_key(prime, base, alice), bob)


def test_private_key_rejects_tiny_prime():
    with pytest.raises(ValueError):
        private_key(2)


def test_roman_round_values():
    assert to_roman(1996) == "MCMXCVI"
    assert to_roman(4) == "IV"
    assert to_roman(0) == ""
    assert from_roman("MCMXCVI") == 1996
    assert from_roman("XLII") == 42


def test_roman_rejects_negative():
    with pytest.raises(ValueError):
        to_roman(-1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("{}", True),
        ("{[(0987)]}", True),
        ("{[(0987])}", False),
        ("(", False),
        (")(", False),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected
