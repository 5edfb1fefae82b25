"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing (full reload on locale switch)
  - page container filled per request by the navigation callback
  - create_page(): navbar + section + footer for one URL path
"""
from dash import dcc, html

from src.i18n.detector import detect_language
from src.layout.navbar import create_navbar
from src.pages import about, home

PAGE_ROOT_ID = "page-root"

SECTIONS = {
    "": home.layout,
    "about": about.layout,
}


def section_of(pathname: str) -> str:
    """Second path segment: `/uk/about` → "about"."""
    parts = (pathname or "").split("/")
    return parts[2].lower() if len(parts) > 2 else ""


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=True),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(id="page-content"),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )


def create_page(pathname: str) -> html.Div:
    """Untranslated page tree for `pathname`; the root is the document element."""
    locale = detect_language(pathname)
    section = SECTIONS.get(section_of(pathname), home.layout)
    return html.Div(
        [
            create_navbar(locale),

            html.Main(section(), style={"minHeight": "calc(100vh - 60px)", "padding": "1.5rem"}),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                html.Span("Available in English and Ukrainian", **{"data-i18n": "footer.note"}),
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        id=PAGE_ROOT_ID,
    )
