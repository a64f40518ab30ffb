"""Shared fixtures for cabinet tests."""

import pytest

from cabinet import Cabinet
from dom import Document, Location


@pytest.fixture
def document():
    """Document without a scheduler; tests call flush() themselves."""
    return Document(location=Location(pathname="/faq"))


@pytest.fixture
def cabinet(document):
    """Cabinet bound to the test document."""
    return Cabinet(document)


@pytest.fixture
def drawer_el(document):
    """A drawer element with an id and no declared settings."""
    return document.create_element("section", {"id": "faq", "data-module": "drawer"})


@pytest.fixture
def knob_el(document):
    """A knob element with an id."""
    return document.create_element("button", {"id": "toggle", "class": "knob"})


@pytest.fixture
def closed_drawer(cabinet, document, drawer_el):
    """Two-state drawer that starts closed (and hidden once flushed)."""
    drawer = cabinet.create_drawer(
        drawer_el, {"states": ["closed", "open"], "hidden_states": ["closed"]}
    )
    document.flush()
    return drawer
