"""
src/dom/dash_tree.py
────────────────────
Document adapter over a Dash component tree.

The page layout is built server-side as Dash components; wrapping it in a
DashDocument lets the translator read and rewrite it before it is returned
from a callback.

  - `class` maps to the `className` prop
  - text content is the concatenation of all descendant strings
  - setting text content replaces `children`
  - click listeners are stored per component and run via `dispatch()`
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dash.development.base_component import Component

from src.dom.document import Event, Listener

_PROP_ALIASES = {"class": "className"}


def _prop(name: str) -> str:
    return _PROP_ALIASES.get(name, name)


def _children(node) -> list:
    if node is None:
        return []
    if isinstance(node, (list, tuple)):
        return list(node)
    return [node]


def _walk(component: Component) -> Iterator[Component]:
    yield component
    for child in _children(getattr(component, "children", None)):
        if isinstance(child, Component):
            yield from _walk(child)


def _text(node) -> str:
    if node is None or isinstance(node, bool):
        return ""
    if isinstance(node, (str, int, float)):
        return str(node)
    if isinstance(node, Component):
        return _text(getattr(node, "children", None))
    return "".join(_text(child) for child in _children(node))


class DashElement:
    def __init__(self, component: Component, document: DashDocument) -> None:
        self.component = component
        self._document = document

    def get_attribute(self, name: str) -> str | None:
        value = getattr(self.component, _prop(name), None)
        return None if value is None else str(value)

    def set_attribute(self, name: str, value: str) -> None:
        setattr(self.component, _prop(name), value)

    @property
    def text_content(self) -> str:
        return _text(self.component)

    @text_content.setter
    def text_content(self, value: str) -> None:
        self.component.children = value

    def _classes(self) -> list[str]:
        return (getattr(self.component, "className", None) or "").split()

    def has_class(self, name: str) -> bool:
        return name in self._classes()

    def toggle_class(self, name: str, force: bool) -> None:
        classes = [c for c in self._classes() if c != name]
        if force:
            classes.append(name)
        self.component.className = " ".join(classes)

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._document.listen(self.component, event_type, listener)


class DashDocument:
    def __init__(self, root: Component) -> None:
        self.root = root
        self._listeners: dict[tuple[int, str], list[Listener]] = {}

    @property
    def document_element(self) -> DashElement:
        return DashElement(self.root, self)

    def query(
        self, *, attribute: str | None = None, class_name: str | None = None
    ) -> list[DashElement]:
        matches = []
        for component in _walk(self.root):
            element = DashElement(component, self)
            if attribute is not None and element.get_attribute(attribute) is None:
                continue
            if class_name is not None and not element.has_class(class_name):
                continue
            matches.append(element)
        return matches

    def listen(self, component: Component, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault((id(component), event_type), []).append(listener)

    def dispatch(self, component_id, event: Event) -> Event:
        """Run the listeners of every component whose `id` equals `component_id`."""
        for component in _walk(self.root):
            if getattr(component, "id", None) != component_id:
                continue
            event.target = DashElement(component, self)
            for listener in self._listeners.get((id(component), event.type), []):
                listener(event)
        return event


@dataclass
class DashLocation:
    """Records navigation instead of performing it; callbacks return `assigned`."""

    origin: str
    pathname: str
    assigned: str | None = None

    def assign(self, path: str) -> None:
        self.assigned = path
