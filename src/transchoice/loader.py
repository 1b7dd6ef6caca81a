"""Catalog sources.

A catalog fetcher delivers the complete message tree for one locale. The
engine calls it once per load request and stores the result as is; it does
not cache, merge or deduplicate fetches.

Fetchers:
- HttpCatalogFetcher: GET ``<translation_url>?<lang_param>=<locale>``
  returning a JSON object
- FileCatalogFetcher: ``<directory>/<locale>.json`` (or ``.yaml``/``.yml``)
- DictCatalogFetcher: in-memory mapping of locale -> tree

Every fetcher has a blocking ``fetch`` and a non-blocking ``fetch_async``
that runs the blocking path in the default executor.
"""

from __future__ import annotations

import asyncio
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

import yaml

from transchoice.config import DEFAULT_LANG_PARAM, I18nConfig
from transchoice.errors import CatalogFetchError
from transchoice.types import MessageTree

logger = logging.getLogger("transchoice.loader")


@runtime_checkable
class CatalogFetcher(Protocol):
    """Protocol for catalog sources."""

    def fetch(self, locale_code: str) -> MessageTree:
        """Fetch the message tree for a locale (blocking).

        Raises:
            CatalogFetchError: If the source cannot deliver the catalog.
        """
        ...

    async def fetch_async(self, locale_code: str) -> MessageTree:
        """Fetch the message tree for a locale without blocking the loop."""
        ...


class BaseCatalogFetcher(ABC):
    """Base class providing the async path on top of ``fetch``."""

    @abstractmethod
    def fetch(self, locale_code: str) -> MessageTree:
        """Fetch the message tree for a locale (blocking)."""

    async def fetch_async(self, locale_code: str) -> MessageTree:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.fetch, locale_code)


def _ensure_tree(locale_code: str, data: Any, source: str) -> MessageTree:
    if not isinstance(data, Mapping):
        raise CatalogFetchError(
            locale_code,
            f"Catalog from {source} is not an object (got {type(data).__name__})",
            url=source,
        )
    return data


# =============================================================================
# HTTP
# =============================================================================


class HttpCatalogFetcher(BaseCatalogFetcher):
    """Fetches catalogs from an HTTP endpoint.

    The locale is passed as a query parameter. Other query parameters in
    the configured URL are kept.

    Example:
        fetcher = HttpCatalogFetcher("https://example.com/i18n?app=web")
        fetcher.build_url("de")
        # -> "https://example.com/i18n?app=web&lang=de"
    """

    def __init__(
        self,
        url: str,
        lang_param: str = DEFAULT_LANG_PARAM,
        timeout_seconds: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ):
        """Initialize HTTP fetcher.

        Args:
            url: Catalog endpoint
            lang_param: Query parameter carrying the locale
            timeout_seconds: Request timeout
            headers: Extra request headers
        """
        self.url = url
        self.lang_param = lang_param
        self.timeout_seconds = timeout_seconds
        self.headers = {"Accept": "application/json", **(headers or {})}

    @classmethod
    def from_config(cls, config: I18nConfig) -> "HttpCatalogFetcher":
        return cls(
            config.translation_url,
            lang_param=config.lang_param,
            timeout_seconds=config.timeout_seconds,
        )

    def build_url(self, locale_code: str) -> str:
        """Build the request URL for a locale."""
        parts = urllib.parse.urlsplit(self.url)
        query = [
            (name, value)
            for name, value in urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
            if name != self.lang_param
        ]
        query.append((self.lang_param, locale_code))
        return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query)))

    def fetch(self, locale_code: str) -> MessageTree:
        url = self.build_url(locale_code)
        request = urllib.request.Request(url, headers=self.headers, method="GET")
        logger.debug(f"Fetching catalog for {locale_code} from {url}")

        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as response:
                status_code = response.status
                reason = response.reason
                body = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise CatalogFetchError(locale_code, str(e.reason), status=e.code, url=url) from e
        except urllib.error.URLError as e:
            raise CatalogFetchError(locale_code, str(e.reason), url=url) from e
        except UnicodeDecodeError as e:
            raise CatalogFetchError(locale_code, f"Response is not valid UTF-8: {e}", url=url) from e
        except OSError as e:
            # Read timeouts surface as TimeoutError, not URLError.
            raise CatalogFetchError(locale_code, f"Request failed: {e}", url=url) from e

        if status_code != 200:
            raise CatalogFetchError(locale_code, str(reason), status=status_code, url=url)

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise CatalogFetchError(
                locale_code, f"Invalid JSON in response: {e}", status=status_code, url=url
            ) from e

        return _ensure_tree(locale_code, data, url)


# =============================================================================
# Files
# =============================================================================


def load_catalog_file(path: Path | str, locale_code: str | None = None) -> MessageTree:
    """Read a JSON or YAML catalog file.

    Args:
        path: Catalog file
        locale_code: Locale the file belongs to (default: file stem)

    Returns:
        Message tree

    Raises:
        CatalogFetchError: If the file is missing, unreadable or not a mapping.
    """
    path = Path(path)
    locale_code = locale_code or path.stem

    if not path.is_file():
        raise CatalogFetchError(locale_code, f"Catalog file not found: {path}", url=str(path))

    suffix = path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise CatalogFetchError(locale_code, f"Unsupported catalog format: {suffix}", url=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (UnicodeDecodeError, OSError) as e:
        raise CatalogFetchError(locale_code, f"Failed to read {path}: {e}", url=str(path)) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogFetchError(locale_code, f"Failed to parse {path}: {e}", url=str(path)) from e

    return _ensure_tree(locale_code, data, str(path))


class FileCatalogFetcher(BaseCatalogFetcher):
    """Fetches catalogs from files in a directory.

    File naming convention:
    - {locale}.json (e.g., de.json)
    - {locale}.yaml / {locale}.yml
    """

    def __init__(
        self,
        directory: str | Path,
        filename_pattern: str = "{locale}",
        extensions: tuple[str, ...] = (".json", ".yaml", ".yml"),
    ):
        self.directory = Path(directory)
        self.filename_pattern = filename_pattern
        self.extensions = extensions

    def _get_file_path(self, locale_code: str) -> Path | None:
        base_name = self.filename_pattern.format(locale=locale_code)
        for ext in self.extensions:
            path = self.directory / f"{base_name}{ext}"
            if path.exists():
                return path
        return None

    def fetch(self, locale_code: str) -> MessageTree:
        path = self._get_file_path(locale_code)
        if path is None:
            raise CatalogFetchError(
                locale_code,
                f"No catalog file for {locale_code} in {self.directory}",
                url=str(self.directory),
            )
        return load_catalog_file(path, locale_code)


# =============================================================================
# In-memory
# =============================================================================


class DictCatalogFetcher(BaseCatalogFetcher):
    """Serves catalogs from a mapping of locale code to message tree."""

    def __init__(self, catalogs: Mapping[str, MessageTree]):
        self._catalogs = catalogs

    def fetch(self, locale_code: str) -> MessageTree:
        if locale_code not in self._catalogs:
            raise CatalogFetchError(locale_code, f"No catalog for locale {locale_code}")
        return self._catalogs[locale_code]


__all__ = [
    "CatalogFetcher",
    "BaseCatalogFetcher",
    "HttpCatalogFetcher",
    "FileCatalogFetcher",
    "DictCatalogFetcher",
    "load_catalog_file",
]
