"""
src/pages/home.py
──────────────────
Landing page.

Default English copy is written inline; `data-i18n*` attributes name the
bundle keys that replace it.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

CARD_BG = "#161b22"
BORDER = "#30363d"


def layout() -> html.Div:
    return html.Div(
        [
            # ── Hero ──────────────────────────────────────────────────────────
            html.Div(
                [
                    html.H1("Hello, I'm a web developer", className="page-title", **{"data-i18n": "hero.title"}),
                    html.P(
                        "I build fast, accessible websites.",
                        className="page-subtitle",
                        **{"data-i18n": "hero.subtitle"},
                    ),
                    html.Img(
                        src="/assets/avatar.svg",
                        alt="Portrait",
                        height=96,
                        **{"data-i18n-alt": "hero.avatar_alt"},
                    ),
                ],
                className="page-header",
            ),
            # ── Contact form ──────────────────────────────────────────────────
            html.Div(
                [
                    html.H3("Get in touch", className="chart-title", **{"data-i18n": "contact.title"}),
                    dbc.Row(
                        [
                            dbc.Col(
                                dcc.Input(
                                    id="contact-name",
                                    type="text",
                                    placeholder="Your name",
                                    **{"data-i18n-placeholder": "contact.name"},
                                ),
                                md=6,
                            ),
                            dbc.Col(
                                dcc.Input(
                                    id="contact-email",
                                    type="email",
                                    placeholder="Email",
                                    **{"data-i18n-placeholder": "contact.email"},
                                ),
                                md=6,
                            ),
                        ],
                        className="g-3",
                    ),
                ],
                style={
                    "backgroundColor": CARD_BG,
                    "border": f"1px solid {BORDER}",
                    "borderRadius": "8px",
                    "padding": "14px",
                },
            ),
        ]
    )
