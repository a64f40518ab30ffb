"""The page location: pathname plus the single URL fragment slot."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Location:
    """Page location with a history list.

    `fragment` is stored without the leading '#'. `replace()` rewrites the
    current history entry, `push()` adds a new one.
    """

    pathname: str = "/"
    fragment: str = ""
    history: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(self.href)

    @property
    def hash(self) -> str:
        return f"#{self.fragment}" if self.fragment else ""

    @property
    def href(self) -> str:
        return f"{self.pathname}{self.hash}"

    def _apply(self, url: str) -> None:
        path, sep, fragment = url.partition("#")
        if path:
            self.pathname = path
        self.fragment = fragment if sep else ""

    def replace(self, url: str) -> None:
        """Navigate without creating a history entry."""
        self._apply(url)
        self.history[-1] = self.href

    def push(self, url: str) -> None:
        """Navigate and record a new history entry."""
        self._apply(url)
        self.history.append(self.href)
