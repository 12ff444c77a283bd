"""Tests for SelectConfig defaults and mapping input."""

import pytest

from pickbox.config import ConfigError, SelectConfig, coerce_option
from pickbox.options import Option
from tests.conftest import A, B, C


# --- defaults ---


def test_single_defaults_to_first_option():
    config = SelectConfig(options=[A, B, C])
    assert config.initial_selected == (A,)
    assert config.initial_search_value == "Apple"
    assert config.initial_highlighted_index == 0
    assert config.name == "my-select"


def test_searchable_single_defaults_to_empty_search():
    config = SelectConfig(options=[A, B], is_searchable=True)
    assert config.initial_selected == (A,)
    assert config.initial_search_value == ""


def test_multi_defaults_to_empty_selection():
    config = SelectConfig(options=[A, B], multi=True)
    assert config.initial_selected == ()
    assert config.initial_search_value == ""


def test_empty_options_defaults():
    config = SelectConfig()
    assert config.options == ()
    assert config.initial_selected == ()
    assert config.initial_search_value == ""
    assert config.initial_highlighted_index == 0


def test_explicit_values_are_kept():
    config = SelectConfig(
        options=[A, B, C],
        initial_selected=[B],
        initial_search_value="ban",
        initial_highlighted_index=2,
    )
    assert config.initial_selected == (B,)
    assert config.initial_search_value == "ban"
    assert config.initial_highlighted_index == 2


def test_single_mode_truncates_initial_selection():
    config = SelectConfig(options=[A, B, C], initial_selected=[B, C])
    assert config.initial_selected == (B,)


def test_highlighted_index_is_clamped():
    assert SelectConfig(options=[A, B], initial_highlighted_index=9).initial_highlighted_index == 1
    assert SelectConfig(options=[A, B], initial_highlighted_index=-3).initial_highlighted_index == 0


# --- from_mapping ---


def test_from_mapping_accepts_camel_case():
    config = SelectConfig.from_mapping(
        {
            "options": [{"value": "a", "label": "Apple"}, {"value": "b", "label": "Banana"}],
            "isSearchable": True,
            "multi": True,
            "name": "fruit",
            "initialSelectedItem": ["b"],
            "initialHighlightedIndex": 1,
        }
    )
    assert config.options == (A, B)
    assert config.is_searchable
    assert config.multi
    assert config.name == "fruit"
    assert config.initial_selected == (B,)
    assert config.initial_highlighted_index == 1


def test_from_mapping_accepts_strings_and_pairs():
    config = SelectConfig.from_mapping({"options": ["red", ("Green", "g")]})
    assert config.options == (Option("red", "red"), Option("g", "Green"))


def test_from_mapping_wraps_single_initial_selection():
    config = SelectConfig.from_mapping({"options": ["red", "green"], "initialSelectedItem": "green"})
    assert config.initial_selected == (Option("green", "green"),)


def test_from_mapping_wraps_scalar_initial_selection():
    config = SelectConfig.from_mapping({"options": [{"value": 1, "label": "One"}], "initial_selected": 1})
    assert config.initial_selected == (Option(1, "One"),)


def test_from_mapping_label_defaults_to_value():
    config = SelectConfig.from_mapping({"options": [{"value": 3}]})
    assert config.options == (Option(3, "3"),)


def test_from_mapping_rejects_unknown_key():
    with pytest.raises(ConfigError, match="unknown"):
        SelectConfig.from_mapping({"options": [], "colour": "red"})


def test_from_mapping_rejects_duplicate_spellings():
    with pytest.raises(ConfigError, match="twice"):
        SelectConfig.from_mapping({"multi": True, "is_searchable": True, "isSearchable": False})


def test_from_mapping_rejects_non_list_options():
    with pytest.raises(ConfigError):
        SelectConfig.from_mapping({"options": "abc"})


def test_from_mapping_rejects_bad_flags():
    with pytest.raises(ConfigError):
        SelectConfig.from_mapping({"multi": "yes"})
    with pytest.raises(ConfigError):
        SelectConfig.from_mapping({"name": ""})
    with pytest.raises(ConfigError):
        SelectConfig.from_mapping({"initialHighlightedIndex": "2"})


def test_coerce_option_errors():
    with pytest.raises(ConfigError):
        coerce_option({"label": "no value"})
    with pytest.raises(ConfigError):
        coerce_option(("a", "b", "c"))
    with pytest.raises(ConfigError):
        coerce_option(object())


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
