"""Observable attribute source: elements, documents, and the page location."""

from dom.observer import AttributeObserver, MutationRecord
from dom.element import Element
from dom.location import Location
from dom.document import Document
from dom.selectors import matches, resolve

__all__ = [
    "AttributeObserver",
    "Document",
    "Element",
    "Location",
    "MutationRecord",
    "matches",
    "resolve",
]
