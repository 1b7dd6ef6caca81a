"""Configuration for the translation engine.

Example:
    >>> config = I18nConfig(
    ...     translation_url="https://example.com/api/translations",
    ...     lang_param="lang",
    ...     fallback_locale="en",
    ... )
    >>> config = I18nConfig.from_env()
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_LOCALE = "en"
DEFAULT_LANG_PARAM = "lang"


@dataclass(frozen=True)
class I18nConfig:
    """Translation engine configuration.

    Attributes:
        translation_url: Endpoint serving catalogs as JSON. Empty disables
            remote loading.
        lang_param: Query parameter carrying the requested locale.
        fallback_locale: Locale consulted when the active one has no catalog.
        default_locale: Locale reported when nothing has been mirrored yet.
        timeout_seconds: Timeout for a single catalog request.
    """

    translation_url: str = ""
    lang_param: str = DEFAULT_LANG_PARAM
    fallback_locale: str = DEFAULT_LOCALE
    default_locale: str = DEFAULT_LOCALE
    timeout_seconds: float = 30.0

    @property
    def remote_enabled(self) -> bool:
        """Whether catalogs can be fetched from ``translation_url``."""
        return bool(self.translation_url)

    def with_overrides(self, **kwargs: Any) -> "I18nConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, prefix: str = "TRANSCHOICE_") -> "I18nConfig":
        """Create configuration from environment variables.

        Environment variables:
            {prefix}TRANSLATION_URL: Catalog endpoint
            {prefix}LANG_PARAM: Locale query parameter name
            {prefix}FALLBACK_LOCALE: Fallback locale code
            {prefix}DEFAULT_LOCALE: Default locale code
            {prefix}TIMEOUT: Request timeout in seconds

        Args:
            prefix: Environment variable prefix

        Returns:
            Configured instance
        """
        config = cls()

        if val := os.environ.get(f"{prefix}TRANSLATION_URL"):
            config = config.with_overrides(translation_url=val)

        if val := os.environ.get(f"{prefix}LANG_PARAM"):
            config = config.with_overrides(lang_param=val)

        if val := os.environ.get(f"{prefix}FALLBACK_LOCALE"):
            config = config.with_overrides(fallback_locale=val)

        if val := os.environ.get(f"{prefix}DEFAULT_LOCALE"):
            config = config.with_overrides(default_locale=val)

        if val := os.environ.get(f"{prefix}TIMEOUT"):
            config = config.with_overrides(timeout_seconds=float(val))

        return config


__all__ = ["I18nConfig", "DEFAULT_LOCALE", "DEFAULT_LANG_PARAM"]
