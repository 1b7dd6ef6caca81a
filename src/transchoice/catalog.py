"""Catalog store and active-locale state.

The store holds one message tree per locale code, the active locale and the
fallback locale. It is an explicit object created by the caller; nothing in
this package keeps a process-wide instance.

The active locale is mirrored to a ``LocaleMirror`` so the surrounding host
can persist or display it. The mirror is write-through only: the store is
the source of truth once it has been created.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Protocol, runtime_checkable

from transchoice.config import DEFAULT_LOCALE
from transchoice.errors import LocaleNotLoadedError
from transchoice.types import MessageTree

logger = logging.getLogger("transchoice.catalog")


# =============================================================================
# Locale Mirror
# =============================================================================


@runtime_checkable
class LocaleMirror(Protocol):
    """External mirror of the active locale."""

    def get(self) -> str:
        """Return the mirrored locale code."""
        ...

    def set(self, locale_code: str) -> None:
        """Record a new active locale code."""
        ...


class MemoryLocaleMirror:
    """Keeps the mirrored locale in memory."""

    def __init__(self, initial: str | None = None, default: str = DEFAULT_LOCALE):
        self._value = initial
        self._default = default

    def get(self) -> str:
        return self._value or self._default

    def set(self, locale_code: str) -> None:
        self._value = locale_code


# =============================================================================
# Catalog Store
# =============================================================================


class CatalogStore:
    """Per-locale message trees plus active and fallback locale.

    Example:
        store = CatalogStore(fallback_locale="en")
        store.set_catalog("de", {"greeting": "Hallo {name}"})
        store.set_active_locale("de")
    """

    def __init__(
        self,
        fallback_locale: str = DEFAULT_LOCALE,
        mirror: LocaleMirror | None = None,
    ):
        """Initialize the store.

        Args:
            fallback_locale: Locale consulted when the active one is not loaded
            mirror: Receiver of active-locale changes (default: in memory)
        """
        self._mirror = mirror or MemoryLocaleMirror()
        self._catalogs: dict[str, MessageTree] = {}
        self._active = self._mirror.get()
        self._fallback = fallback_locale
        self._lock = threading.RLock()

    @property
    def mirror(self) -> LocaleMirror:
        return self._mirror

    @property
    def active_locale(self) -> str:
        """Currently active locale code."""
        return self._active

    @property
    def fallback_locale(self) -> str:
        """Fallback locale code."""
        return self._fallback

    @fallback_locale.setter
    def fallback_locale(self, value: str) -> None:
        # No existence check: a missing fallback only degrades lookups.
        self._fallback = value

    def set_catalog(self, locale_code: str, tree: MessageTree) -> None:
        """Store the complete message tree for a locale.

        Any previous tree for the locale is replaced wholesale, never merged.

        Args:
            locale_code: Locale code
            tree: Message tree
        """
        stored = copy.deepcopy(dict(tree))
        with self._lock:
            replaced = locale_code in self._catalogs
            self._catalogs[locale_code] = stored
        action = "Replaced" if replaced else "Stored"
        logger.debug(f"{action} catalog for {locale_code} ({len(stored)} top-level entries)")

    def get_catalog(self, locale_code: str) -> MessageTree | None:
        """Get the stored tree for a locale, or None if not loaded."""
        return self._catalogs.get(locale_code)

    def has_catalog(self, locale_code: str) -> bool:
        """Check whether a locale has a stored catalog."""
        return locale_code in self._catalogs

    def set_active_locale(self, locale_code: str) -> None:
        """Activate a loaded locale.

        Args:
            locale_code: Locale code to activate

        Raises:
            LocaleNotLoadedError: If no catalog is stored for the locale.
                The active locale is left unchanged.
        """
        with self._lock:
            if not self.has_catalog(locale_code):
                raise LocaleNotLoadedError(locale_code)
            self._active = locale_code
        self._mirror.set(locale_code)
        logger.info(f"Active locale set to {locale_code}")

    def list_locales(self) -> list[str]:
        """List loaded locale codes in load order."""
        return list(self._catalogs.keys())

    def __contains__(self, locale_code: object) -> bool:
        return locale_code in self._catalogs


__all__ = ["LocaleMirror", "MemoryLocaleMirror", "CatalogStore"]
