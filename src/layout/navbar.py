"""
src/layout/navbar.py
─────────────────────
Navigation bar with page links and the EN / UK language switch.
"""

import dash_bootstrap_components as dbc
from dash import html

from config.i18n import LANG_LINK_CLASS
from src.i18n.models import Locale

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"


def lang_link(locale: Locale) -> html.A:
    """Switch link; no href, navigation happens in the switch callback."""
    return html.A(
        locale.value.upper(),
        id={"type": LANG_LINK_CLASS, "lang": locale.value},
        className=LANG_LINK_CLASS,
        n_clicks=0,
        role="button",
        style=_lang_link_style(),
        **{"data-lang": locale.value},
    )


def create_navbar(locale: Locale) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                dbc.NavbarBrand(
                    html.Span("Portfolio", **{"data-i18n": "nav.brand"}),
                    href=locale.path,
                    style={"color": ACCENT, "textDecoration": "none", "fontWeight": "700"},
                ),
                dbc.Nav(
                    [
                        dbc.NavItem(
                            dbc.NavLink(
                                html.Span("Home", **{"data-i18n": "nav.home"}),
                                href=locale.path,
                                id="nav-home",
                                active="exact",
                            )
                        ),
                        dbc.NavItem(
                            dbc.NavLink(
                                html.Span("About", **{"data-i18n": "nav.about"}),
                                href=f"{locale.path}/about",
                                id="nav-about",
                                active="exact",
                            )
                        ),
                        # Language switch
                        dbc.NavItem(
                            html.Div(
                                [lang_link(Locale.EN), lang_link(Locale.UK)],
                                className="lang-switch",
                                style={
                                    "display": "flex",
                                    "gap": "4px",
                                    "alignItems": "center",
                                    "marginLeft": "12px",
                                },
                            )
                        ),
                    ],
                    className="ms-auto",
                    navbar=True,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )


def _lang_link_style() -> dict:
    return {
        "border": f"1px solid {BORDER}",
        "borderRadius": "4px",
        "fontSize": ".72rem",
        "fontWeight": "700",
        "padding": "2px 8px",
        "cursor": "pointer",
        "textDecoration": "none",
    }
