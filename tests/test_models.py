"""
tests/test_models.py
─────────────────────
Tests for locale and bundle models.
"""
import pytest
from pydantic import ValidationError

from src.i18n.models import BundleAdapter, Locale, TranslatorState


class TestLocale:
    def test_coerce_uk(self):
        assert Locale.coerce("uk") is Locale.UK

    @pytest.mark.parametrize("value", ["en", "UK", "fr", "", None])
    def test_coerce_defaults_to_en(self, value):
        assert Locale.coerce(value) is Locale.EN

    def test_coerce_accepts_locale(self):
        assert Locale.coerce(Locale.UK) is Locale.UK

    def test_canonical_paths(self):
        assert Locale.EN.path == "/en"
        assert Locale.UK.path == "/uk"

    def test_str_enum_compares_to_value(self):
        assert Locale.UK == "uk"


class TestBundleAdapter:
    def test_nested_object_is_valid(self):
        bundle = BundleAdapter.validate_python({"nav": {"home": "Home"}})
        assert bundle["nav"]["home"] == "Home"

    def test_list_is_rejected(self):
        with pytest.raises(ValidationError):
            BundleAdapter.validate_python(["nav", "home"])

    def test_string_is_rejected(self):
        with pytest.raises(ValidationError):
            BundleAdapter.validate_python("nav.home")


def test_states_in_lifecycle_order():
    assert [s.value for s in TranslatorState] == ["uninitialized", "detecting", "loading", "ready"]
