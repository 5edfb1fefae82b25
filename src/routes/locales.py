"""
src/routes/locales.py
─────────────────────
Serves translation bundles at `/locales/<lang>.json` on the Flask server
behind Dash. Responses are never cached so clients always revalidate.
"""
from __future__ import annotations

import logging

import flask

from config.i18n import LOCALES_PATH
from config.settings import settings
from src.i18n.models import Locale

logger = logging.getLogger(__name__)

SUPPORTED = {locale.value for locale in Locale}


def register(app) -> None:
    server: flask.Flask = app.server

    @server.route(f"{LOCALES_PATH}/<lang>.json")
    def serve_locale(lang: str):
        if lang not in SUPPORTED:
            logger.warning("Unknown locale requested: %s", lang)
            flask.abort(404)
        response = flask.send_from_directory(settings.LOCALES_DIR, f"{lang}.json", max_age=0)
        response.headers["Cache-Control"] = "no-cache"
        return response
