"""Tests for key translation and countable translation."""

from __future__ import annotations

import logging

import pytest

from transchoice.catalog import CatalogStore, MemoryLocaleMirror
from transchoice.translator import Translator


@pytest.fixture
def sample_messages() -> dict[str, dict]:
    return {
        "en": {
            "greeting": "Hello, {name}!",
            "errors": {"not_found": "File not found: {path}"},
            "cart": {
                "items": "{0} Your cart is empty|{1} One item|[2,*] {count} items",
                "apples": "apple|apples",
            },
            "Save changes": "Save your changes",
        },
        "de": {
            "greeting": "Hallo, {name}!",
            "cart": {"apples": "Apfel|Äpfel"},
        },
    }


@pytest.fixture
def store(sample_messages: dict) -> CatalogStore:
    store = CatalogStore(fallback_locale="en")
    for locale_code, tree in sample_messages.items():
        store.set_catalog(locale_code, tree)
    return store


@pytest.fixture
def translator(store: CatalogStore) -> Translator:
    return Translator(store)


class TestTranslate:
    """Test plain translation."""

    def test_path_key(self, translator: Translator):
        assert translator.translate("errors.not_found", {"path": "a.txt"}) == "File not found: a.txt"

    def test_uses_active_locale(self, store: CatalogStore, translator: Translator):
        store.set_active_locale("de")

        assert translator.translate("greeting", {"name": "Ada"}) == "Hallo, Ada!"

    def test_missing_key_in_active_locale_does_not_fall_back(
        self, store: CatalogStore, translator: Translator
    ):
        store.set_active_locale("de")

        assert translator.translate("errors.not_found") == "errors.not_found"

    def test_phrase_key_present(self, translator: Translator):
        assert translator.translate("Save changes") == "Save your changes"

    def test_phrase_key_absent_returns_itself(self, translator: Translator):
        assert translator.translate("Nothing to show yet") == "Nothing to show yet"

    def test_phrase_key_substituted(self, translator: Translator):
        assert translator.translate("Hi there {name}", {"name": "Bo"}) == "Hi there Bo"

    def test_missing_path_key_returns_key(self, translator: Translator):
        assert translator.translate("errors.gone") == "errors.gone"

    def test_path_to_node_returns_key(self, translator: Translator):
        assert translator.translate("errors") == "errors"

    def test_missing_key_logs_warning(self, translator: Translator, caplog):
        with caplog.at_level(logging.WARNING, logger="transchoice.i18n"):
            translator.translate("errors.gone")

        assert "errors.gone" in caplog.text

    def test_idempotent(self, translator: Translator):
        first = translator.translate("greeting", {})
        second = translator.translate("greeting", {})

        assert first == second == "Hello, {name}!"


class TestFallbackChaining:
    """Test active -> fallback -> key degradation."""

    def test_unloaded_active_uses_fallback(self):
        store = CatalogStore(fallback_locale="en", mirror=MemoryLocaleMirror(initial="ko"))
        store.set_catalog("en", {"greeting": "Hello"})
        translator = Translator(store)

        assert store.active_locale == "ko"
        assert translator.translate("greeting") == "Hello"

    def test_no_catalogs_returns_key(self, caplog):
        translator = Translator(CatalogStore())

        with caplog.at_level(logging.WARNING, logger="transchoice.i18n"):
            result = translator.translate("user.name")

        assert result == "user.name"
        assert "Translation for user.name not found" in caplog.text

    def test_no_catalogs_still_substitutes(self):
        translator = Translator(CatalogStore())

        assert translator.translate("Hello {name}", {"name": "Ada"}) == "Hello Ada"

    def test_missing_fallback_catalog(self):
        store = CatalogStore(fallback_locale="xx")
        translator = Translator(store)

        assert translator.translate("any.key") == "any.key"


class TestTranslateCountable:
    """Test countable translation."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "Your cart is empty"), (1, "One item"), (7, "7 items")],
    )
    def test_explicit_rules(self, translator: Translator, count: int, expected: str):
        result = translator.translate_countable("cart.items", count, {"count": count})
        assert result == expected

    def test_substitution_before_split(self, translator: Translator):
        # A substituted value containing a separator creates extra variants.
        store = translator.store
        store.set_catalog("en", {"pick": "{choice}"})

        assert translator.translate_countable("pick", 2, {"choice": "one|two"}) == "two"

    def test_implicit_rules(self, translator: Translator):
        assert translator.translate_countable("cart.apples", 1) == "apple"
        assert translator.translate_countable("cart.apples", 0) == "apples"
        assert translator.translate_countable("cart.apples", 99) == "apples"

    def test_active_locale(self, store: CatalogStore, translator: Translator):
        store.set_active_locale("de")

        assert translator.translate_countable("cart.apples", 3) == "Äpfel"

    def test_missing_key(self, translator: Translator):
        assert translator.translate_countable("cart.pears", 2) == "cart.pears"

    def test_phrase_key_as_countable_message(self, translator: Translator):
        assert translator.translate_countable("one file|many files", 4) == "many files"
