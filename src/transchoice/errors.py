"""Exceptions raised by the translation engine.

Only catalog management fails hard. Lookup-time misses (unknown keys,
plural counts with no matching rule) are recovered locally and never
surface as exceptions.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base translation error.

    Attributes:
        locale: Locale code the failing operation targeted.
    """

    def __init__(self, message: str, locale: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.locale = locale


class LocaleNotLoadedError(TranslationError):
    """Raised when activating a locale that has no stored catalog."""

    def __init__(self, locale: str) -> None:
        super().__init__(
            f"Translations for language {locale} is not loaded yet. "
            f"Call 'load_translations(\"{locale}\")' to load them.",
            locale=locale,
        )


class CatalogFetchError(TranslationError):
    """Raised when a catalog source fails to deliver a catalog.

    Attributes:
        status: HTTP status code, when the source is remote.
        reason: Status text or failure description.
        url: Requested location, when known.
    """

    def __init__(
        self,
        locale: str,
        reason: str,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        if status is not None:
            message = f"Error {status}: {reason}"
        else:
            message = f"Error: {reason}"
        super().__init__(message, locale=locale)
        self.status = status
        self.reason = reason
        self.url = url


__all__ = ["TranslationError", "LocaleNotLoadedError", "CatalogFetchError"]
