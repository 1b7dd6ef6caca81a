"""transchoice - key-based translation with range-driven phrase selection.

This package provides:
- Per-locale message catalogs with active and fallback locale
- Phrase keys and dotted path keys
- ``{name}`` placeholder substitution
- Countable messages: ``"{0} none|{1} one|[2,*] many"``
- Catalog loading over HTTP, from files or from memory (blocking and async)

Example:
    from transchoice import I18n

    i18n = I18n(messages={"en": {"cart": {"items": "{n} item|{n} items"}}})
    i18n.tc("cart.items", 3, {"n": 3})  # "3 items"
"""

from transchoice.catalog import CatalogStore, LocaleMirror, MemoryLocaleMirror
from transchoice.config import I18nConfig
from transchoice.errors import CatalogFetchError, LocaleNotLoadedError, TranslationError
from transchoice.formatting import substitute
from transchoice.i18n import I18n
from transchoice.loader import (
    CatalogFetcher,
    DictCatalogFetcher,
    FileCatalogFetcher,
    HttpCatalogFetcher,
    load_catalog_file,
)
from transchoice.plural import (
    ChoiceRule,
    RuleKind,
    UNBOUNDED,
    choose,
    parse_choice_rules,
    select_rule,
)
from transchoice.resolver import resolve_key, resolve_path
from transchoice.service import LocaleService
from transchoice.translator import Translator

__version__ = "0.1.0"

__all__ = [
    # Facade
    "I18n",
    "I18nConfig",
    # Catalogs
    "CatalogStore",
    "LocaleMirror",
    "MemoryLocaleMirror",
    # Resolution
    "Translator",
    "resolve_key",
    "resolve_path",
    "substitute",
    # Pluralization
    "ChoiceRule",
    "RuleKind",
    "UNBOUNDED",
    "parse_choice_rules",
    "select_rule",
    "choose",
    # Loading
    "LocaleService",
    "CatalogFetcher",
    "HttpCatalogFetcher",
    "FileCatalogFetcher",
    "DictCatalogFetcher",
    "load_catalog_file",
    # Errors
    "TranslationError",
    "LocaleNotLoadedError",
    "CatalogFetchError",
]
