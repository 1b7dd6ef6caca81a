"""Catalog loading and locale switching.

``LocaleService`` connects a ``CatalogStore`` to a catalog fetcher. Loading
a locale fetches its catalog, replaces the stored tree and activates the
locale. Fetch failures propagate to the caller unchanged and leave the
active locale as it was.

Concurrent loads of the same locale are not coordinated: each one fetches,
and the last to finish wins.
"""

from __future__ import annotations

import logging

from transchoice.catalog import CatalogStore
from transchoice.loader import CatalogFetcher
from transchoice.types import MessageTree

logger = logging.getLogger("transchoice.service")


class LocaleService:
    """Loads catalogs on demand and switches the active locale.

    Example:
        service = LocaleService(store, HttpCatalogFetcher(url))
        service.set_locale_sync("de")       # blocking
        await service.set_locale("fr")      # non-blocking
    """

    def __init__(self, store: CatalogStore, fetcher: CatalogFetcher | None = None):
        """Initialize locale service.

        Args:
            store: Catalog store to populate
            fetcher: Catalog source. Without one, loads are no-ops and only
                catalogs already in the store can be activated.
        """
        self._store = store
        self._fetcher = fetcher

    @property
    def fetcher(self) -> CatalogFetcher | None:
        return self._fetcher

    def _needs_fetch(self, locale_code: str, force: bool) -> bool:
        if self._fetcher is None:
            return False
        return force or not self._store.has_catalog(locale_code)

    def _set_translation(self, locale_code: str, tree: MessageTree) -> None:
        self._store.set_catalog(locale_code, tree)
        self._store.set_active_locale(locale_code)
        logger.info(f"Loaded translations for {locale_code}")

    def load_translations_sync(self, locale_code: str, force: bool = False) -> None:
        """Fetch and activate a locale's catalog, blocking until done.

        Does nothing when no fetcher is configured, or when the locale is
        already loaded and ``force`` is false.

        Args:
            locale_code: Locale to load
            force: Fetch again even if already loaded

        Raises:
            CatalogFetchError: If the fetcher fails.
        """
        if not self._needs_fetch(locale_code, force):
            return
        tree = self._fetcher.fetch(locale_code)
        self._set_translation(locale_code, tree)

    async def load_translations(self, locale_code: str, force: bool = False) -> None:
        """Async variant of ``load_translations_sync``."""
        if not self._needs_fetch(locale_code, force):
            return
        tree = await self._fetcher.fetch_async(locale_code)
        self._set_translation(locale_code, tree)

    def set_locale_sync(self, locale_code: str) -> None:
        """Load a locale if needed, then make it active.

        Raises:
            CatalogFetchError: If loading fails.
            LocaleNotLoadedError: If the locale has no catalog and none
                could be fetched.
        """
        self.load_translations_sync(locale_code)
        self._store.set_active_locale(locale_code)

    async def set_locale(self, locale_code: str) -> None:
        """Async variant of ``set_locale_sync``."""
        await self.load_translations(locale_code)
        self._store.set_active_locale(locale_code)


__all__ = ["LocaleService"]
