"""
src/callbacks/navigation.py — page rendering and language switch callbacks.

Rendering fetches `/locales/<lang>.json` over HTTP while the page request is
still in flight. When the bundles come from this same server it must serve
concurrent requests: Flask's threaded dev server does, and under gunicorn
run more than one worker or thread (`--workers 2` or `--threads 4`).
A single sync worker waits on itself until `LOCALES_TIMEOUT_S` and renders
untranslated copy. Alternatively point `SITE_ORIGIN` at a separate static
host serving `/locales/`.
"""
from __future__ import annotations

import asyncio

import flask
import httpx
from dash import ALL, Input, Output, State, ctx, html, no_update

from config.i18n import LANG_LINK_CLASS
from config.settings import settings
from src.dom.dash_tree import DashDocument, DashLocation
from src.dom.document import Event
from src.i18n.translator import Translator
from src.layout.main import create_page


def request_origin() -> str:
    """Configured public origin, else the origin of the current request."""
    return (settings.SITE_ORIGIN or flask.request.host_url).rstrip("/")


async def render_page(
    pathname: str, origin: str, client: httpx.AsyncClient | None = None
) -> html.Div:
    """Build the page for `pathname` and run the translator over it."""
    page = create_page(pathname)
    location = DashLocation(origin=origin, pathname=pathname)
    await Translator(DashDocument(page), location, client).init()
    return page


def switch_language(link_id, pathname: str, origin: str) -> str | None:
    """Replay a click on the switch link `link_id`; the path to navigate to, if any."""
    document = DashDocument(create_page(pathname))
    location = DashLocation(origin=origin, pathname=pathname)
    Translator(document, location).bind_language_switch()
    document.dispatch(link_id, Event("click"))
    return location.assigned


def register(app) -> None:
    """Register page routing + language switch callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str | None):
        return asyncio.run(render_page(pathname or "/", request_origin()))

    # ── Language switch ───────────────────────────────────────────────────────
    @app.callback(
        Output("url", "pathname"),
        Input({"type": LANG_LINK_CLASS, "lang": ALL}, "n_clicks"),
        State("url", "pathname"),
        prevent_initial_call=True,
    )
    def on_lang_click(n_clicks: list[int | None], pathname: str | None):
        if ctx.triggered_id is None or not any(n_clicks):
            return no_update
        target = switch_language(ctx.triggered_id, pathname or "/", request_origin())
        return target or no_update
