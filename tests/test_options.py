"""Tests for option identity and label filtering."""

from pickbox.options import Option, filter_options, index_of, visible_indices
from tests.conftest import A, B, C

OPTIONS = (A, B, C)


def test_option_identity_is_by_value():
    assert Option("a", "Apple").same_as(Option("a", "Something else"))
    assert not Option("a", "Apple").same_as(Option("b", "Apple"))


def test_filter_empty_search_matches_all():
    assert filter_options(OPTIONS, "", True) == list(OPTIONS)


def test_filter_not_searchable_ignores_text():
    for text in ("", "zzz", "app", "CHERRY"):
        assert filter_options(OPTIONS, text, False) == list(OPTIONS)


def test_filter_is_case_insensitive_substring():
    assert filter_options(OPTIONS, "AN", True) == [B]
    assert filter_options(OPTIONS, "e", True) == [A, C]


def test_filter_preserves_order():
    options = [Option(1, "zeta"), Option(2, "alpha"), Option(3, "beta")]
    assert filter_options(options, "eta", True) == [options[0], options[2]]


def test_filter_no_match():
    assert filter_options(OPTIONS, "zzz", True) == []


def test_visible_indices_point_into_full_list():
    assert visible_indices(OPTIONS, "rr", True) == [2]
    assert visible_indices(OPTIONS, "rr", False) == [0, 1, 2]


def test_index_of():
    assert index_of((A, C), Option("c", "renamed")) == 1
    assert index_of((A, C), B) == -1
