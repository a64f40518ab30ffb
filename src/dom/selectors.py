"""Selector matching and target resolution.

Supports comma-separated groups of compound selectors built from:
tag, `*`, `#id`, `.class`, `[attr]`, `[attr=value]` and `[attr="value"]`.
There are no combinators: documents are flat.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dom.document import Document
    from dom.element import Element

_TOKEN_RE = re.compile(
    r"""
    (?P<tag>^[A-Za-z][\w-]*|^\*)
    | \#(?P<id>[\w-]+)
    | \.(?P<cls>[\w-]+)
    | \[\s*(?P<attr>[\w-]+)\s*(?:=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\]\s]+))\s*)?\]
    """,
    re.VERBOSE,
)


def _parse_compound(selector: str) -> list[tuple[str, str, str | None]] | None:
    """Split one compound selector into (kind, name, value) tests.

    Returns None when the selector uses syntax we don't understand.
    """
    tests: list[tuple[str, str, str | None]] = []
    pos = 0
    while pos < len(selector):
        match = _TOKEN_RE.match(selector, pos)
        if match is None or match.end() == pos:
            return None
        if match.group("tag"):
            if match.group("tag") != "*":
                tests.append(("tag", match.group("tag").lower(), None))
        elif match.group("id"):
            tests.append(("id", match.group("id"), None))
        elif match.group("cls"):
            tests.append(("class", match.group("cls"), None))
        else:
            value = match.group("dq")
            if value is None:
                value = match.group("sq")
            if value is None:
                value = match.group("bare")
            tests.append(("attr", match.group("attr"), value))
        pos = match.end()
    return tests


def matches(element: Element, selector: str) -> bool:
    """Check whether an element matches a selector group."""
    for compound in selector.split(","):
        compound = compound.strip()
        if not compound:
            continue
        tests = _parse_compound(compound)
        if tests is None:
            continue
        if all(_passes(element, kind, name, value) for kind, name, value in tests):
            return True
    return False


def _passes(element: Element, kind: str, name: str, value: str | None) -> bool:
    if kind == "tag":
        return element.tag == name
    if kind == "id":
        return element.id == name
    if kind == "class":
        return name in element.classes
    if value is None:
        return element.has(name)
    return element.read(name) == value


def resolve(target: Any, document: Document | None) -> list[Element]:
    """Resolve a selector, element, or list of them to a list of elements.

    Unknown input resolves to an empty list.
    """
    from dom.element import Element

    if isinstance(target, Element):
        return [target]
    if isinstance(target, str):
        return document.select(target) if document is not None else []
    if isinstance(target, (list, tuple)):
        found: list[Element] = []
        for item in target:
            for element in resolve(item, document):
                if element not in found:
                    found.append(element)
        return found
    return []
