"""Text domain engine - runtime translation catalogs.

Resolves source strings, optionally disambiguated by context and plural count,
to their localized equivalent within a text domain, falling back to the source
text whenever no catalog or entry exists.

Main components:
- models: EntryKey, TranslationEntry, DeferredPlural
- catalog: BaseCatalog, Catalog and NullCatalog
- registry: DomainRegistry owning loaded catalogs per domain
- translator: Translator façade and deferred plural helpers
- loader: CatalogLoader and YAMLCatalogLoader
"""

from textdomain.catalog import BaseCatalog, Catalog, NullCatalog
from textdomain.exceptions import (
    CatalogFormatError,
    SourceUnreadableError,
    TextDomainError,
)
from textdomain.loader import CatalogLoader, YAMLCatalogLoader, available_locales
from textdomain.models import DeferredPlural, EntryKey, TranslationEntry
from textdomain.reader import CachedFileReader
from textdomain.registry import DomainRegistry
from textdomain.translator import (
    Translator,
    before_last_bar,
    deferred_plural,
    deferred_plural_with_context,
)

__all__ = [
    "BaseCatalog",
    "Catalog",
    "NullCatalog",
    "TextDomainError",
    "SourceUnreadableError",
    "CatalogFormatError",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "available_locales",
    "EntryKey",
    "TranslationEntry",
    "DeferredPlural",
    "CachedFileReader",
    "DomainRegistry",
    "Translator",
    "before_last_bar",
    "deferred_plural",
    "deferred_plural_with_context",
]
