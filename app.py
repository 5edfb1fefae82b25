"""
app.py
──────
Two-locale (EN / UK) portfolio site — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Create Dash app with DARKLY bootstrap theme
  3. Register the locale bundle route and page callbacks
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Portfolio",
)

server = app.server  # gunicorn entry point: needs >1 worker or thread, see src/callbacks/navigation.py
app.layout = create_layout()

# ── 3. Routes and callbacks ───────────────────────────────────────────────────
from src.callbacks import navigation
from src.routes import locales

locales.register(app)
navigation.register(app)
logger.info("Serving bundles from %s", settings.LOCALES_DIR)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
