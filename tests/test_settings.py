"""Tests for settings descriptors, validators and resolution."""

from dom import Document
from model import (
    DrawerSettings,
    KnobSettings,
    read_element_settings,
    resolve_drawer_settings,
    resolve_knob_settings,
    urlify,
)
from model.validators import INVALID, is_valid_hash


class TestDefaults:
    """Test default settings values."""

    def test_drawer_defaults(self):
        s = DrawerSettings()
        assert s.states == ["open", "closed"]
        assert s.init_state == "open"
        assert s.hidden_states == ["closed"]
        assert s.hash == ""
        assert s.hash_state == "open"
        assert s.knobs == []
        assert s.knobs_cycle is True
        assert s.knob_accessibility is True
        assert s.actions == []

    def test_default_lists_not_shared(self):
        a = DrawerSettings()
        b = DrawerSettings()
        a.states.append("peek")
        assert b.states == ["open", "closed"]

    def test_uuid_generates_ids(self):
        s = DrawerSettings()
        assert s.uuid() != s.uuid()

    def test_knob_defaults(self):
        s = KnobSettings()
        assert s.cycle is True
        assert s.accessibility is True
        assert s.actions == []

    def test_class_access_returns_descriptor(self):
        assert DrawerSettings.hash.attribute == "data-hash"
        assert "initState" in DrawerSettings.init_state.aliases


class TestFailOpen:
    """Invalid values leave the prior value in place."""

    def test_init_state_outside_states_ignored(self):
        s = DrawerSettings()
        s.init_state = "closed"
        s.init_state = "nope"
        assert s.init_state == "closed"

    def test_empty_states_ignored(self):
        s = DrawerSettings()
        s.states = []
        assert s.states == ["open", "closed"]

    def test_states_with_non_strings_ignored(self):
        s = DrawerSettings()
        s.states = ["a", 3]
        assert s.states == ["open", "closed"]

    def test_hash_non_string_ignored(self):
        s = DrawerSettings(hash="faq")
        s.hash = 12
        assert s.hash == "faq"

    def test_empty_hash_ignored(self):
        s = DrawerSettings(hash="faq")
        s.hash = ""
        assert s.hash == "faq"

    def test_hidden_hash_state_rejected(self):
        s = DrawerSettings()
        s.hash_state = "closed"
        assert s.hash_state == "open"

    def test_non_callable_actions_ignored(self):
        s = DrawerSettings()
        s.actions = ["not callable"]
        assert s.actions == []

    def test_unknown_keys_ignored(self):
        s = DrawerSettings(bogus=1, hash="x")
        assert "bogus" not in s.as_dict()
        assert s.hash == "x"

    def test_non_mapping_settings_ignored(self):
        assert DrawerSettings.normalize(["hash", "x"]) == {}


class TestCoercion:
    """Test what validators accept and how they coerce."""

    def test_states_string_appends(self):
        s = DrawerSettings()
        s.states = "peek"
        assert s.states == ["open", "closed", "peek"]

    def test_states_list_replaces_and_dedupes(self):
        s = DrawerSettings(states=["a", "b", "a"])
        assert s.states == ["a", "b"]

    def test_hidden_states_filtered_to_states(self):
        s = DrawerSettings(states=["a", "b", "c"], hidden_states=["c", "zzz", "a"])
        assert s.hidden_states == ["a", "c"]

    def test_hidden_states_follow_states_changes(self):
        s = DrawerSettings()
        s.states = ["a", "b"]
        assert s.hidden_states == []
        assert s.init_state == "a"

    def test_hidden_state_string_appends(self):
        s = DrawerSettings(states=["a", "b", "c"], hidden_states=["a"])
        s.hidden_states = "b"
        assert s.hidden_states == ["a", "b"]

    def test_hash_is_urlified(self):
        assert DrawerSettings(hash="Shipping Info!").hash == "shipping-info"

    def test_hash_state_defaults_to_first_visible_state(self):
        s = DrawerSettings(states=["closed", "peek", "open"], hidden_states=["closed"])
        assert s.hash_state == "peek"

    def test_hash_state_empty_when_all_hidden(self):
        s = DrawerSettings(states=["a"], hidden_states=["a"])
        assert s.hash_state == ""

    def test_bool_strings(self):
        assert KnobSettings(cycle="false").cycle is False
        assert KnobSettings(cycle="off").cycle is False
        assert KnobSettings(cycle="yes").cycle is True
        assert KnobSettings(cycle=0).cycle is False

    def test_single_action_wrapped(self):
        def action(records, drawer, observer):
            pass

        assert DrawerSettings(actions=action).actions == [action]

    def test_knobs_accepts_selector_and_setup(self):
        setup = {"elements": "#k", "settings": {"cycle": False}}
        assert DrawerSettings(knobs="#a").knobs == ["#a"]
        assert DrawerSettings(knobs=["#a", setup]).knobs == ["#a", setup]
        assert DrawerSettings(knobs=[{"settings": {}}]).knobs == []


class TestAliases:
    """camelCase spellings map to the Python names."""

    def test_drawer_aliases(self):
        s = DrawerSettings(
            states=["x", "y", "z"],
            initState="y",
            hiddenStates=["x"],
            hashState="z",
            knobsCycle=False,
            knobAccessibility=False,
        )
        assert s.init_state == "y"
        assert s.hidden_states == ["x"]
        assert s.hash_state == "z"
        assert s.knobs_cycle is False
        assert s.knob_accessibility is False

    def test_knob_defaults_from_drawer(self):
        s = DrawerSettings(knobsCycle=False)
        assert s.knob_defaults() == {"cycle": False, "accessibility": True, "actions": []}

    def test_knob_aliases(self):
        s = KnobSettings(knobsCycle=False, knobAccessibility=False)
        assert s.cycle is False
        assert s.accessibility is False

    def test_canonical_name(self):
        assert DrawerSettings.canonical_name("hashState") == "hash_state"
        assert DrawerSettings.canonical_name("hash_state") == "hash_state"
        assert DrawerSettings.canonical_name("nope") is None


class TestExplicitValues:
    """Track which settings were assigned."""

    def test_explicit_values(self):
        s = DrawerSettings(hash="x")
        assert s.explicit_values() == {"hash": "x"}

    def test_rejected_value_not_explicit(self):
        s = DrawerSettings(init_state="nope")
        assert s.explicit_values() == {}

    def test_settings_instance_contributes_explicit_values(self):
        assert DrawerSettings.normalize(DrawerSettings(hash="x")) == {"hash": "x"}


class TestResolution:
    """Element-declared settings versus caller settings."""

    def test_reads_declared_attributes(self):
        el = Document().create_element(
            "section",
            {"data-state": "closed", "data-hash": "faq", "data-hash-state": "open", "data-knob": "#k"},
        )
        assert read_element_settings(el, DrawerSettings) == {
            "init_state": "closed",
            "hash": "faq",
            "hash_state": "open",
            "knobs": "#k",
        }

    def test_element_values_apply(self):
        el = Document().create_element("section", {"data-state": "closed", "data-hash": "My Drawer"})
        s = resolve_drawer_settings(el)
        assert s.init_state == "closed"
        assert s.hash == "my-drawer"

    def test_explicit_settings_win(self):
        el = Document().create_element("section", {"data-state": "closed"})
        assert resolve_drawer_settings(el, {"init_state": "open"}).init_state == "open"

    def test_invalid_explicit_keeps_element_value(self):
        el = Document().create_element("section", {"data-state": "closed"})
        assert resolve_drawer_settings(el, {"initState": "bogus"}).init_state == "closed"

    def test_explicit_empty_hash_keeps_element_hash(self):
        el = Document().create_element("section", {"data-hash": "faq"})
        assert resolve_drawer_settings(el, {"hash": ""}).hash == "faq"

    def test_element_state_checked_against_caller_states(self):
        """Caller states land before the element's data-state is validated."""
        el = Document().create_element("section", {"data-state": "peek"})
        s = resolve_drawer_settings(el, {"states": ["closed", "peek"]})
        assert s.init_state == "peek"

    def test_user_knobs_replace_element_knobs(self):
        el = Document().create_element("section", {"data-knob": "#a"})
        assert resolve_drawer_settings(el, {"knobs": "#b"}).knobs == ["#b"]

    def test_knob_settings_from_caller(self):
        el = Document().create_element("button")
        assert resolve_knob_settings(el, {"cycle": False}).cycle is False

    def test_knob_settings_from_element(self):
        el = Document().create_element("button", {"data-cycle": "false", "data-accessibility": "false"})
        assert read_element_settings(el, KnobSettings) == {"cycle": "false", "accessibility": "false"}
        s = resolve_knob_settings(el)
        assert s.cycle is False
        assert s.accessibility is False

    def test_caller_knob_settings_beat_element(self):
        el = Document().create_element("button", {"data-cycle": "false", "data-accessibility": "false"})
        s = resolve_knob_settings(el, {"cycle": True, "knobAccessibility": True})
        assert s.cycle is True
        assert s.accessibility is True


class TestHelpers:
    """Test urlify and hash helpers."""

    def test_urlify(self):
        assert urlify("Hello  World!") == "hello-world"
        assert urlify("  Leading and trailing  ") == "leading-and-trailing"
        assert urlify("a -- b") == "a-b"
        assert urlify("") == ""

    def test_is_valid_hash(self):
        assert is_valid_hash("faq")
        assert not is_valid_hash("")
        assert not is_valid_hash(None)

    def test_invalid_sentinel_is_falsy(self):
        assert not INVALID
        assert repr(INVALID) == "INVALID"
