"""Translation facade.

``I18n`` bundles a catalog store, a translator and a locale service behind
the two lookup functions UI code calls (``t`` and ``tc``) and the two
locale switches (``set_locale`` and ``set_locale_sync``).

Example:
    from transchoice import I18n, I18nConfig

    i18n = I18n.setup(
        I18nConfig(translation_url="https://example.com/api/translations"),
        messages={"en": {"greeting": "Hello, {name}!"}},
    )

    i18n.t("greeting", {"name": "Ada"})         # "Hello, Ada!"
    i18n.tc("{0} none|{1} one|[2,*] many", 5)    # "many"
    i18n.set_locale_sync("de")
"""

from __future__ import annotations

from typing import Any, Mapping

from transchoice.catalog import CatalogStore, LocaleMirror, MemoryLocaleMirror
from transchoice.config import I18nConfig
from transchoice.loader import CatalogFetcher, HttpCatalogFetcher
from transchoice.service import LocaleService
from transchoice.translator import Translator
from transchoice.types import MessageTree


class I18n:
    """Main internationalization interface.

    Instances are independent; create one per application and pass it to
    the code that renders text.
    """

    def __init__(
        self,
        config: I18nConfig | None = None,
        *,
        fetcher: CatalogFetcher | None = None,
        mirror: LocaleMirror | None = None,
        messages: Mapping[str, MessageTree] | None = None,
    ):
        """Initialize I18n.

        Args:
            config: Engine configuration
            fetcher: Catalog source (default: HTTP when a translation URL
                is configured, otherwise none)
            mirror: Receiver of active-locale changes
            messages: Catalogs to store up front, keyed by locale
        """
        self.config = config or I18nConfig()

        if fetcher is None and self.config.remote_enabled:
            fetcher = HttpCatalogFetcher.from_config(self.config)

        self.store = CatalogStore(
            fallback_locale=self.config.fallback_locale,
            mirror=mirror or MemoryLocaleMirror(default=self.config.default_locale),
        )
        self.translator = Translator(self.store)
        self.service = LocaleService(self.store, fetcher)

        for locale_code, tree in (messages or {}).items():
            self.store.set_catalog(locale_code, tree)

    @classmethod
    def setup(
        cls,
        config: I18nConfig | None = None,
        *,
        fetcher: CatalogFetcher | None = None,
        mirror: LocaleMirror | None = None,
        messages: Mapping[str, MessageTree] | None = None,
    ) -> "I18n":
        """Create an instance and load the catalog of the mirrored locale.

        Raises:
            CatalogFetchError: If the initial load fails.
        """
        i18n = cls(config, fetcher=fetcher, mirror=mirror, messages=messages)
        i18n.load_translations_sync(i18n.locale)
        return i18n

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def t(self, key: str, options: Mapping[str, Any] | None = None) -> str:
        """Translate a key. See ``Translator.translate``."""
        return self.translator.translate(key, options)

    def tc(
        self,
        key: str,
        count: int | float,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Translate a countable key. See ``Translator.translate_countable``."""
        return self.translator.translate_countable(key, count, options)

    translate = t
    translate_countable = tc

    # -------------------------------------------------------------------------
    # Locale state
    # -------------------------------------------------------------------------

    @property
    def locale(self) -> str:
        """Active locale code."""
        return self.store.active_locale

    @property
    def fallback_locale(self) -> str:
        return self.store.fallback_locale

    @fallback_locale.setter
    def fallback_locale(self, value: str) -> None:
        self.store.fallback_locale = value

    @property
    def locales(self) -> list[str]:
        """Loaded locale codes."""
        return self.store.list_locales()

    def set_messages(self, locale_code: str, tree: MessageTree) -> None:
        """Store (or replace) the catalog of a locale without activating it."""
        self.store.set_catalog(locale_code, tree)

    def load_translations_sync(self, locale_code: str, force: bool = False) -> None:
        self.service.load_translations_sync(locale_code, force=force)

    async def load_translations(self, locale_code: str, force: bool = False) -> None:
        await self.service.load_translations(locale_code, force=force)

    def set_locale_sync(self, locale_code: str) -> None:
        """Switch locale, fetching its catalog first if needed (blocking)."""
        self.service.set_locale_sync(locale_code)

    async def set_locale(self, locale_code: str) -> None:
        """Switch locale, fetching its catalog first if needed."""
        await self.service.set_locale(locale_code)


__all__ = ["I18n"]
