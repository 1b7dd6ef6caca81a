"""Translation of lookup keys into display strings.

Pipeline:
    key -> message tree of the active locale (or the fallback locale when
    the active one has no catalog) -> stored string (or the key itself) ->
    placeholder substitution -> [countable only] phrase variant selection

Lookups never raise. Misses are reported through the ``transchoice.i18n``
logger and degrade to displaying the key.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from transchoice.catalog import CatalogStore
from transchoice.formatting import substitute
from transchoice.plural import choose
from transchoice.resolver import is_phrase_key, resolve_key
from transchoice.types import MessageTree

logger = logging.getLogger("transchoice.i18n")


class Translator:
    """Resolves keys against the catalogs of a ``CatalogStore``.

    Example:
        store = CatalogStore()
        store.set_catalog("en", {"cart": {"items": "{n} item|{n} items"}})
        translator = Translator(store)

        translator.translate("cart.items", {"n": 3})
        # -> "3 item|3 items"
        translator.translate_countable("cart.items", 3, {"n": 3})
        # -> "3 items"
    """

    def __init__(self, store: CatalogStore):
        self._store = store

    @property
    def store(self) -> CatalogStore:
        return self._store

    def _messages(self) -> tuple[str, MessageTree] | None:
        """Pick the tree to resolve against: active locale, then fallback."""
        active = self._store.active_locale
        tree = self._store.get_catalog(active)
        if tree is not None:
            return active, tree

        fallback = self._store.fallback_locale
        tree = self._store.get_catalog(fallback)
        if tree is not None:
            return fallback, tree

        return None

    def translate(self, key: str, options: Mapping[str, Any] | None = None) -> str:
        """Translate a key.

        Args:
            key: Phrase key or dotted path key
            options: Placeholder values

        Returns:
            Stored string with placeholders substituted, or the key itself
            (also substituted) when nothing is stored for it.
        """
        found = self._messages()
        if found is None:
            logger.warning(f"Translation for {key} not found")
            return substitute(key, options)

        locale_code, tree = found
        translation = resolve_key(key, tree)

        if translation is None:
            logger.warning(f"Translation not found: {key} (locale: {locale_code})")
            translation = key
        elif translation == key and is_phrase_key(key):
            logger.debug(f"Using phrase key as its own text: {key!r}")

        return substitute(translation, options)

    def translate_countable(
        self,
        key: str,
        count: int | float,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Translate a key and pick the phrase variant for a count.

        Placeholders are substituted on the whole stored string before it is
        split into variants.

        Args:
            key: Phrase key or dotted path key
            count: Quantity to select for
            options: Placeholder values

        Returns:
            Selected variant, or the substituted string when no variant
            covers the count.
        """
        translation = self.translate(key, options)
        logger.debug(f"Choosing variant of {translation!r} for count {count}")
        return choose(translation, count)


__all__ = ["Translator"]
