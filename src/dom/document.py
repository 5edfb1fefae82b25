"""
src/dom/document.py
───────────────────
Capabilities the translator needs from a page.

Any object satisfying these protocols can be translated: the Dash component
tree adapter used by the app, or a plain in-memory fake in tests.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class Event:
    type: str
    target: Any = None
    default_prevented: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True


Listener = Callable[[Event], None]


class Element(Protocol):
    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    @property
    def text_content(self) -> str: ...

    @text_content.setter
    def text_content(self, value: str) -> None: ...

    def has_class(self, name: str) -> bool: ...

    def toggle_class(self, name: str, force: bool) -> None: ...

    def add_event_listener(self, event_type: str, listener: Listener) -> None: ...


class Document(Protocol):
    @property
    def document_element(self) -> Element: ...

    def query(
        self, *, attribute: str | None = None, class_name: str | None = None
    ) -> Iterable[Element]:
        """Elements carrying `attribute` and/or `class_name`, in tree order."""
        ...


class Location(Protocol):
    @property
    def origin(self) -> str: ...

    @property
    def pathname(self) -> str: ...

    def assign(self, path: str) -> None: ...
