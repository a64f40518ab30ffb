"""Tests for URL fragment binding."""

import pytest

from cabinet import Cabinet
from controller.hashing import clear_hash, extract_hash, set_hash, wipe_hash
from dom import Document, Location


class TestHashFunctions:
    """Test the location helpers."""

    def test_set_hash_replaces_entry(self):
        loc = Location(pathname="/faq")
        set_hash(loc, "shipping")
        assert extract_hash(loc) == "shipping"
        assert loc.history == ["/faq#shipping"]

    def test_clear_hash_only_when_equal(self):
        loc = Location(pathname="/faq", fragment="returns")
        clear_hash(loc, "shipping")
        assert loc.fragment == "returns"
        clear_hash(loc, "returns")
        assert loc.fragment == ""
        assert loc.pathname == "/faq"

    def test_wipe_hash(self):
        loc = Location(pathname="/faq", fragment="anything")
        wipe_hash(loc)
        assert loc.href == "/faq"


class TestHashOwnership:
    """A drawer only clears the fragment it still owns."""

    @pytest.fixture
    def drawers(self, cabinet, document):
        a_el = document.create_element("section", {"id": "a"})
        b_el = document.create_element("section", {"id": "b"})
        a = cabinet.create_drawer(a_el, {"hash": "foo", "init_state": "closed"})
        b = cabinet.create_drawer(b_el, {"hash": "bar", "init_state": "closed"})
        document.flush()
        return a, b

    def test_last_writer_wins_and_no_foreign_clear(self, drawers, document):
        a, b = drawers
        assert document.location.fragment == ""

        a.set_state("open")
        document.flush()
        assert document.location.fragment == "foo"

        b.set_state("open")
        document.flush()
        assert document.location.fragment == "bar"

        a.set_state("closed")
        document.flush()
        assert document.location.fragment == "bar"

    def test_owner_clears_on_leaving_hash_state(self, drawers, document):
        a, _ = drawers
        a.set_state("open")
        document.flush()
        a.set_state("closed")
        document.flush()
        assert document.location.fragment == ""
        assert document.location.href == "/faq"

    def test_toggling_never_adds_history(self, drawers, document):
        a, b = drawers
        for _ in range(4):
            a.cycle()
            b.cycle()
            document.flush()
        assert len(document.location.history) == 1

    def test_owns_fragment(self, drawers, document):
        a, b = drawers
        a.set_state("open")
        document.flush()
        assert a.hasher.owns_fragment()
        assert not b.hasher.owns_fragment()


class TestHashSettings:
    """Test hash, hash_state and the empty hash."""

    def test_empty_hash_disables_hashing(self, cabinet, document, drawer_el):
        document.location.replace("#keep")
        drawer = cabinet.create_drawer(drawer_el, {"hash": "", "init_state": "closed"})
        document.flush()
        drawer.set_state(drawer.hash_state)
        document.flush()
        assert document.location.fragment == "keep"
        drawer.set_state("closed")
        document.flush()
        assert document.location.fragment == "keep"

    def test_explicit_hash_state(self, cabinet, document, drawer_el):
        drawer = cabinet.create_drawer(
            drawer_el,
            {
                "states": ["closed", "peek", "open"],
                "hidden_states": ["closed"],
                "hash": "faq",
                "hash_state": "open",
            },
        )
        document.flush()
        drawer.set_state("peek")
        document.flush()
        assert document.location.fragment == ""
        drawer.set_state("open")
        document.flush()
        assert document.location.fragment == "faq"
        drawer.set_state("peek")
        document.flush()
        assert document.location.fragment == ""

    def test_data_hash_attribute(self, cabinet, document):
        el = document.create_element("section", {"id": "d", "data-hash": "Shipping Info"})
        cabinet.create_drawer(el)
        document.flush()
        assert document.location.fragment == "shipping-info"

    def test_hash_changed_at_runtime(self, cabinet, document, drawer_el):
        drawer = cabinet.create_drawer(drawer_el, {"init_state": "closed"})
        document.flush()
        drawer.hash = "New Hash"
        drawer.set_state("open")
        document.flush()
        assert document.location.fragment == "new-hash"

    def test_wipe_url(self, cabinet, document, drawer_el):
        drawer = cabinet.create_drawer(drawer_el, {"hash": "faq"})
        document.flush()
        document.location.replace("#other")
        drawer.hasher.wipe_url()
        assert document.location.href == "/faq"


class TestReconcile:
    """The fragment present at activation picks the initial state."""

    def test_matching_fragment_overrides_init_state(self):
        document = Document(location=Location(pathname="/faq", fragment="shipping"))
        el = document.create_element("section", {"id": "s", "data-state": "closed", "data-hash": "shipping"})
        drawer = Cabinet(document).create_drawer(el, {"states": ["closed", "open"]})
        document.flush()
        assert drawer.state == "open"
        assert not drawer.hidden
        assert document.location.fragment == "shipping"
        assert len(document.location.history) == 1

    def test_other_fragment_leaves_init_state(self):
        document = Document(location=Location(fragment="returns"))
        el = document.create_element("section", {"id": "s", "data-hash": "shipping"})
        drawer = Cabinet(document).create_drawer(el, {"states": ["closed", "open"]})
        document.flush()
        assert drawer.state == "closed"
        assert document.location.fragment == "returns"

    def test_no_hash_state_no_override(self):
        document = Document(location=Location(fragment="s"))
        el = document.create_element("section", {"id": "s", "data-hash": "s"})
        drawer = Cabinet(document).create_drawer(el, {"states": ["x"], "hidden_states": ["x"]})
        assert drawer.hasher.reconcile() is False
