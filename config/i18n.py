"""
config/i18n.py
──────────────
Markup contract shared by the page layouts and the translator.
"""

# Attributes naming a dotted bundle key
ATTR_TEXT = "data-i18n"
ATTR_PLACEHOLDER = "data-i18n-placeholder"
ATTR_ALT = "data-i18n-alt"

# Locale switch links: class="lang-link" data-lang="en|uk"
LANG_LINK_CLASS = "lang-link"
ATTR_LANG = "data-lang"
ACTIVE_CLASS = "active"

LOCALES_PATH = "/locales"
