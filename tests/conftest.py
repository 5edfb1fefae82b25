"""
tests/conftest.py
─────────────────
Shared pytest fixtures: an in-memory document, a recording location, and
httpx clients backed by MockTransport.
"""
from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from src.dom.document import Event

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
ORIGIN = "http://localhost:1234"


class FakeElement:
    def __init__(self, text: str = "", **attributes: str) -> None:
        self._text = text
        self.attributes = {k.replace("_", "-"): v for k, v in attributes.items()}
        self.listeners: dict[str, list] = {}

    def get_attribute(self, name):
        return self.attributes.get(name)

    def set_attribute(self, name, value):
        self.attributes[name] = value

    @property
    def text_content(self):
        return self._text

    @text_content.setter
    def text_content(self, value):
        self._text = value

    def _classes(self):
        return self.attributes.get("class", "").split()

    def has_class(self, name):
        return name in self._classes()

    def toggle_class(self, name, force):
        classes = [c for c in self._classes() if c != name]
        if force:
            classes.append(name)
        self.attributes["class"] = " ".join(classes)

    def add_event_listener(self, event_type, listener):
        self.listeners.setdefault(event_type, []).append(listener)

    def click(self):
        event = Event("click", target=self)
        for listener in self.listeners.get("click", []):
            listener(event)
        return event


class FakeDocument:
    def __init__(self, *elements: FakeElement) -> None:
        self.document_element = FakeElement()
        self.elements = list(elements)

    def query(self, *, attribute=None, class_name=None):
        return [
            el
            for el in self.elements
            if (attribute is None or el.get_attribute(attribute) is not None)
            and (class_name is None or el.has_class(class_name))
        ]


class FakeLocation:
    def __init__(self, pathname: str = "/", origin: str = ORIGIN) -> None:
        self.origin = origin
        self.pathname = pathname
        self.assigned: list[str] = []

    def assign(self, path):
        self.assigned.append(path)


def json_transport(bundles: dict[str, object], requests: list | None = None) -> httpx.MockTransport:
    """Serve `bundles` keyed by URL path; anything else is a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if request.url.path not in bundles:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json=bundles[request.url.path])

    return httpx.MockTransport(handler)


@pytest.fixture
def sample_bundle() -> dict:
    return {
        "nav": {"home": "Головна", "about": "Про мене"},
        "form": {"name": "Ваше ім'я"},
        "img": {"logo": "Логотип"},
        "a": {"b": "X", "empty": "", "nothing": None},
    }


@pytest.fixture
def site_bundles() -> dict:
    return {
        f"/locales/{lang}.json": json.loads((LOCALES_DIR / f"{lang}.json").read_text(encoding="utf-8"))
        for lang in ("en", "uk")
    }


@pytest.fixture
def site_client(site_bundles) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=json_transport(site_bundles))


@pytest.fixture
def page_elements() -> dict[str, FakeElement]:
    return {
        "home": FakeElement("Home", data_i18n="nav.home"),
        "missing": FakeElement("Original", data_i18n="nav.missing"),
        "unkeyed": FakeElement("Untouched", data_i18n=""),
        "name": FakeElement(data_i18n_placeholder="form.name", placeholder="Name"),
        "logo": FakeElement(data_i18n_alt="img.logo", alt="Logo"),
        "link_en": FakeElement("EN", **{"class": "lang-link", "data-lang": "en"}),
        "link_uk": FakeElement("UK", **{"class": "lang-link active", "data-lang": "uk"}),
    }


@pytest.fixture
def document(page_elements) -> FakeDocument:
    return FakeDocument(*page_elements.values())
