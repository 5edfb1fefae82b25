"""
src/i18n/translator.py
───────────────────────
Page translator: one instance per page load.

Usage:
    translator = Translator(document, location)
    await translator.init()        # detect → load → apply → links → bind

    translator.t("nav.home")                # → "Головна" on /uk
    translator.t("nav.missing")             # → "nav.missing"
    translator.t("nav.missing", "Home")     # → "Home"

A failed bundle load never raises: the page keeps its original text and
lookups fall back to the provided default or the key itself.
"""
from __future__ import annotations

import logging

import httpx

from config.i18n import (
    ACTIVE_CLASS,
    ATTR_ALT,
    ATTR_LANG,
    ATTR_PLACEHOLDER,
    ATTR_TEXT,
    LANG_LINK_CLASS,
)
from config.settings import settings
from src.dom.document import Document, Element, Event, Location
from src.i18n.detector import detect_language
from src.i18n.loader import BundleLoadError, fetch_bundle, get_locales_url
from src.i18n.models import Bundle, Locale, Node, TranslatorState
from src.i18n.resolver import resolve

logger = logging.getLogger(__name__)


def switch_target(lang: str, pathname: str) -> str | None:
    """Canonical path to navigate to, or None when already under it."""
    target = Locale.coerce(lang).path
    if pathname == target or pathname.startswith(f"{target}/"):
        return None
    return target


class Translator:
    def __init__(
        self,
        document: Document,
        location: Location,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.document = document
        self.location = location
        self._client = client
        self.translations: Bundle = {}
        self.current_lang: Locale = Locale.EN
        self.state = TranslatorState.UNINITIALIZED

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    async def init(self) -> None:
        self.state = TranslatorState.DETECTING
        lang = detect_language(self.location.pathname)

        self.state = TranslatorState.LOADING
        await self.load_translations(lang)

        self.apply_translations()
        self.update_language_links()
        self.bind_language_switch()
        self.state = TranslatorState.READY

    # ── Bundle ────────────────────────────────────────────────────────────────

    def _commit(self, lang: Locale, bundle: Bundle) -> None:
        self.current_lang = lang
        self.translations = bundle

    async def load_translations(self, lang: str) -> Bundle:
        """Fetch the bundle for `lang`; an empty bundle on any failure."""
        locale = Locale.coerce(lang)
        url = get_locales_url(self.location.origin, locale)
        try:
            if self._client is not None:
                bundle = await fetch_bundle(self._client, url)
            else:
                async with httpx.AsyncClient(timeout=settings.LOCALES_TIMEOUT_S) as client:
                    bundle = await fetch_bundle(client, url)
        except BundleLoadError as exc:
            logger.error("Error loading translations: %s", exc)
            bundle = {}
        else:
            logger.debug("Loaded %d top-level keys for %s", len(bundle), locale.value)

        self._commit(locale, bundle)
        return bundle

    def t(self, key: str, fallback: str | None = None) -> Node:
        return resolve(self.translations, key, fallback)

    # ── Document ──────────────────────────────────────────────────────────────

    def _translate_attribute(self, marker: str, attribute: str) -> None:
        for element in self.document.query(attribute=marker):
            key = element.get_attribute(marker)
            if not key:
                continue
            current = element.get_attribute(attribute) or ""
            element.set_attribute(attribute, str(self.t(key, current)))

    def apply_translations(self) -> None:
        for element in self.document.query(attribute=ATTR_TEXT):
            key = element.get_attribute(ATTR_TEXT)
            if not key:
                continue
            element.text_content = str(self.t(key, element.text_content))

        self._translate_attribute(ATTR_PLACEHOLDER, "placeholder")
        self._translate_attribute(ATTR_ALT, "alt")

        self.document.document_element.set_attribute("lang", self.current_lang.value)

    def update_language_links(self) -> None:
        for link in self.document.query(class_name=LANG_LINK_CLASS):
            link.toggle_class(ACTIVE_CLASS, link.get_attribute(ATTR_LANG) == self.current_lang.value)

    def _on_switch_click(self, link: Element, event: Event) -> None:
        lang = link.get_attribute(ATTR_LANG)
        if not lang:
            return
        event.prevent_default()

        target = switch_target(lang, self.location.pathname)
        if target is None:
            return
        logger.info("Switching locale: %s → %s", self.location.pathname, target)
        self.location.assign(target)

    def bind_language_switch(self) -> None:
        for link in self.document.query(attribute=ATTR_LANG, class_name=LANG_LINK_CLASS):
            link.add_event_listener("click", lambda event, link=link: self._on_switch_click(link, event))
