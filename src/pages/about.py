"""
src/pages/about.py
───────────────────
About page: short bio and skills list.
"""

from dash import html

MUTED = "#8b949e"

SKILLS = ("python", "dash", "i18n")


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("About me", className="page-title", **{"data-i18n": "about.title"}),
                    html.P(
                        "Developer based in Kyiv, working with English and Ukrainian clients.",
                        className="page-subtitle",
                        **{"data-i18n": "about.bio"},
                    ),
                ],
                className="page-header",
            ),
            html.H4("Skills", style={"color": MUTED}, **{"data-i18n": "about.skills.title"}),
            html.Ul(
                [
                    html.Li(skill.capitalize(), **{"data-i18n": f"about.skills.{skill}"})
                    for skill in SKILLS
                ]
            ),
        ]
    )
