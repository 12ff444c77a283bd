"""Tests for the binding descriptors and their accessibility attributes."""

from pickbox.config import SelectConfig
from pickbox.engine import SelectEngine
from pickbox.options import Option
from tests.conftest import A, B, C, FakeRegion


def _engine(**kwargs):
    return SelectEngine(SelectConfig(options=[A, B, C], name="fruit", **kwargs))


# --- input ---


def test_input_aria_contract():
    props = _engine().bind_input().props
    assert props["role"] == "combobox"
    assert props["aria-autocomplete"] == "list"
    assert props["aria-expanded"] is False
    assert props["aria-haspopup"] is True
    assert props["aria-labelledby"] == "fruit"
    assert props["aria-controls"] == "fruit-options"
    assert props["id"] == "fruit"
    assert props["tabIndex"] == "0"
    assert props["autoComplete"] == "off"
    assert props["type"] == "text"
    assert props["value"] == "Apple"


def test_input_reflects_open_state():
    engine = _engine()
    engine.open()
    assert engine.bind_input().props["aria-expanded"] is True


def test_input_callbacks_drive_engine():
    engine = _engine(is_searchable=True)
    props = engine.bind_input().props
    props["onFocus"]()
    assert engine.is_open
    props["onChange"]("ch")
    assert engine.search_value == "ch"
    assert props["onKeyDown"]("down") is True


def test_input_ref_registers_region():
    engine = _engine(multi=True)
    region = FakeRegion()
    engine.bind_input().props["ref"](region)
    engine.select_or_deselect(A)
    assert region.focus_calls == 1


def test_overlay_order():
    engine = _engine()
    calls = []

    def custom_handlers(**context):
        calls.append(context)
        return {"role": "custom", "data-x": 1}

    props = engine.bind_input(custom_handlers, {"data-x": 2, "id": "over"}).props
    assert calls == [{}]
    assert props["role"] == "custom"
    assert props["data-x"] == 2
    assert props["id"] == "over"
    assert props["aria-controls"] == "fruit-options"


# --- option ---


def test_option_binding():
    engine = _engine()
    binding = engine.bind_option(1, B)
    assert binding.props["role"] == "option"
    assert binding.props["aria-selected"] is False
    assert binding.props["value"] == "b"
    assert binding.props["key"] == "b"
    assert binding.props["id"] == "fruit-option-b"
    assert binding.meta["is_selected"] is False
    assert binding.meta["is_active"] is False
    assert binding.meta["option"] is B
    assert binding.meta["index"] == 1


def test_option_selected_and_active():
    engine = _engine()
    binding = engine.bind_option(0, A)
    assert binding.props["aria-selected"] is True
    assert binding.meta["is_selected"] is True
    assert binding.meta["is_active"] is True


def test_option_explicit_is_selected_wins_for_aria():
    binding = _engine().bind_option(1, B, is_selected=True)
    assert binding.props["aria-selected"] is True
    assert binding.meta["is_selected"] is False


def test_option_click_selects_and_highlights():
    engine = _engine()
    engine.open()
    engine.bind_option(2, C).props["onClick"]()
    assert engine.selected_options == (C,)
    assert engine.highlighted_index == 2
    assert not engine.is_open


def test_option_click_accepts_event_argument():
    engine = _engine(multi=True)
    engine.bind_option(1, B).props["onClick"]("click-event")
    assert engine.selected_options == (B,)


def test_option_handle_option_click_meta():
    engine = _engine(multi=True)
    engine.bind_option(0, A).meta["handle_option_click"](A)
    assert engine.selected_options == (A,)


def test_option_custom_handlers_get_context():
    seen = []
    _engine().bind_option(2, C, custom_handlers=lambda **ctx: seen.append(ctx) or {})
    assert seen == [{"index": 2, "option": C}]


def test_option_key_fallback_when_value_missing():
    binding = _engine().bind_option(0, Option(None, "None"), key="k0")
    assert binding.props["key"] == "k0"


def test_option_key_keeps_falsy_value():
    binding = _engine().bind_option(0, Option(0, "Zero"), key="k0")
    assert binding.props["key"] == 0


def test_bind_options_uses_full_list_indices():
    engine = _engine(is_searchable=True)
    engine.search("err")
    bindings = engine.bind_options()
    assert [b.meta["index"] for b in bindings] == [2]
    assert bindings[0].meta["is_active"] is True


# --- label / menu ---


def test_label_binding():
    assert _engine().bind_label().props == {"htmlFor": "fruit"}


def test_label_overrides():
    props = _engine().bind_label(prop_overrides={"class": "lbl"}).props
    assert props == {"htmlFor": "fruit", "class": "lbl"}


def test_menu_binding():
    engine = _engine()
    binding = engine.bind_menu()
    assert binding.props["role"] == "listbox"
    assert binding.props["id"] == "fruit-options"
    assert binding.props["aria-labelledby"] == "fruit"
    assert binding.props["aria-expanded"] is False
    assert binding.meta == {}
    engine.open()
    assert engine.bind_menu().props["aria-expanded"] is True


def test_expanded_mirrored_on_input_and_menu():
    engine = _engine()
    for event in (engine.open, engine.close, engine.navigate_down, engine.dismiss):
        event()
        assert engine.bind_input().props["aria-expanded"] == engine.bind_menu().props["aria-expanded"]


# --- selected chip ---


def test_chip_binding():
    engine = _engine(multi=True)
    engine.select_or_deselect(A)
    engine.select_or_deselect(C)
    binding = engine.bind_selected_option(C, 1)
    assert binding.props["id"] == "fruit-selected-1"
    assert binding.meta["selected_option"] is C
    assert binding.meta["index"] == 1
    binding.meta["remove_selected_option"]()
    assert engine.selected_options == (A,)


def test_chip_focus_and_blur():
    engine = _engine(multi=True)
    binding = engine.bind_selected_option(A, 0)
    binding.props["onFocus"]()
    assert engine.is_open
    binding.props["onBlur"]()
    assert not engine.is_open


def test_stale_chip_removal_is_noop():
    engine = _engine(multi=True)
    engine.select_or_deselect(A)
    remove = engine.bind_selected_option(A, 0).meta["remove_selected_option"]
    remove()
    remove()
    assert engine.selected_options == ()


def test_chip_custom_handlers_get_context():
    seen = []
    _engine(multi=True).bind_selected_option(B, 3, custom_handlers=lambda **ctx: seen.append(ctx) or {"x": 1})
    assert seen == [{"selected_option": B, "index": 3}]
