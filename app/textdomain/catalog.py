"""Translation catalogs.

Defines the catalog capability set, the real in-memory Catalog and the
NullCatalog used for domains without loaded translations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, Mapping, Optional, Union

from textdomain.models import EntryKey, TranslationEntry

EntryLike = Union[TranslationEntry, Mapping]


def _as_entry(entry: EntryLike) -> TranslationEntry:
    if isinstance(entry, TranslationEntry):
        return entry
    return TranslationEntry.from_dict(entry)


class BaseCatalog(ABC):
    """Capability set shared by every catalog-shaped object.

    Implements the default English-like plural policy: form 0 for a count of
    one, form 1 otherwise. Catalogs built from richer locale metadata override
    select_plural_form() and get_plural_forms_count() together.
    """

    @abstractmethod
    def add_entry(self, entry: EntryLike) -> bool:
        pass

    @abstractmethod
    def add_entry_or_merge(self, entry: EntryLike) -> bool:
        pass

    @abstractmethod
    def set_header(self, name: str, value: str) -> None:
        pass

    def set_headers(self, headers: Mapping[str, str]) -> None:
        """Set several headers, last write wins per name.

        Args:
            headers: Mapping of header name to value.
        """
        for name, value in headers.items():
            self.set_header(name, value)

    @abstractmethod
    def get_header(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def translate_entry(self, lookup: TranslationEntry) -> Optional[TranslationEntry]:
        pass

    @abstractmethod
    def translate(self, singular: str, context: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def translate_plural(
        self,
        singular: str,
        plural: str,
        count: int,
        context: Optional[str] = None,
    ) -> str:
        pass

    @abstractmethod
    def merge_with(self, other: "BaseCatalog") -> None:
        pass

    @abstractmethod
    def merge_originals_with(self, other: "BaseCatalog") -> None:
        pass

    @abstractmethod
    def copy(self) -> "Catalog":
        """Return a mutable Catalog independent of this one."""

    def select_plural_form(self, count: int) -> int:
        """Return the 0-based plural form index for a count.

        Args:
            count: Number of items.

        Returns:
            0 when count is 1, otherwise 1.
        """
        return 0 if count == 1 else 1

    def get_plural_forms_count(self) -> int:
        return 2


class Catalog(BaseCatalog):
    """In-memory set of translation entries and headers for one domain.

    Every stored entry satisfies entries[k].key() == k.

    Attributes:
        entries: Mapping of EntryKey to TranslationEntry.
        headers: Catalog metadata such as "Plural-Forms" or "Content-Type".
    """

    def __init__(
        self,
        entries: Optional[Mapping[EntryKey, TranslationEntry]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.entries: Dict[EntryKey, TranslationEntry] = {}
        self.headers: Dict[str, str] = {}
        for entry in (entries or {}).values():
            self.add_entry(entry)
        if headers:
            self.set_headers(headers)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[TranslationEntry]:
        return iter(self.entries.values())

    def __repr__(self) -> str:
        return f"Catalog(entries={len(self.entries)}, headers={len(self.headers)})"

    def add_entry(self, entry: EntryLike) -> bool:
        """Add an entry, replacing any entry stored under the same key.

        Args:
            entry: TranslationEntry or raw field mapping.

        Returns:
            True on success, False if the entry has no key.
        """
        entry = _as_entry(entry)
        key = entry.key()
        if key is None:
            return False
        self.entries[key] = entry
        return True

    def add_entry_or_merge(self, entry: EntryLike) -> bool:
        """Add an entry, merging variant coverage into an existing one.

        Args:
            entry: TranslationEntry or raw field mapping.

        Returns:
            True on success, False if the entry has no key.
        """
        entry = _as_entry(entry)
        key = entry.key()
        if key is None:
            return False
        if key in self.entries:
            self.entries[key].merge_with(entry)
        else:
            self.entries[key] = entry
        return True

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def translate_entry(self, lookup: TranslationEntry) -> Optional[TranslationEntry]:
        """Look up the stored entry matching a lookup entry.

        Args:
            lookup: Entry carrying the singular text and context to find.

        Returns:
            The stored TranslationEntry, or None if not found.
        """
        key = lookup.key()
        if key is None:
            return None
        return self.entries.get(key)

    def translate(self, singular: str, context: Optional[str] = None) -> str:
        """Translate a single string.

        Args:
            singular: Source text.
            context: Optional disambiguating context.

        Returns:
            The first recorded variant, or the source text when the entry is
            missing or has no non-empty variant.
        """
        translated = self.translate_entry(
            TranslationEntry(singular=singular, context=context)
        )
        if translated and translated.translations and translated.translations[0]:
            return translated.translations[0]
        return singular

    def translate_plural(
        self,
        singular: str,
        plural: str,
        count: int,
        context: Optional[str] = None,
    ) -> str:
        """Translate a singular/plural pair for a count.

        Falls back to the source text chosen by the raw count when the entry
        is missing, the selected form is out of range, or the entry has no
        variant recorded at that form.

        Args:
            singular: Singular source text.
            plural: Plural source text.
            count: Number of items.
            context: Optional disambiguating context.

        Returns:
            Localized variant or the source singular/plural.
        """
        translated = self.translate_entry(
            TranslationEntry(singular=singular, plural=plural, context=context)
        )
        index = self.select_plural_form(count)
        if (
            translated
            and 0 <= index < self.get_plural_forms_count()
            and index < len(translated.translations)
            and translated.translations[index]
        ):
            return translated.translations[index]
        return singular if count == 1 else plural

    def merge_with(self, other: BaseCatalog) -> None:
        """Merge another catalog's entries into this one; other wins.

        Entries of other replace entries stored under the same key. Headers
        are left untouched.

        Args:
            other: Catalog whose entries are copied in.
        """
        for entry in _entries_of(other):
            self.entries[entry.key()] = entry.copy()

    def merge_originals_with(self, other: BaseCatalog) -> None:
        """Merge another catalog's entries into this one; self wins.

        Entries missing here are copied in. Entries present in both keep this
        catalog's fields and gain the variants only other has.

        Args:
            other: Catalog whose entries are merged in.
        """
        for entry in _entries_of(other):
            key = entry.key()
            if key not in self.entries:
                self.entries[key] = entry.copy()
            else:
                self.entries[key].merge_with(entry)

    def copy(self) -> "Catalog":
        """Return an independent copy of this catalog.

        Entries are copied, so mutating the copy never affects the original.
        """
        clone = type(self)()
        clone.entries = {key: entry.copy() for key, entry in self.entries.items()}
        clone.headers = dict(self.headers)
        return clone


class NullCatalog(BaseCatalog):
    """Catalog-shaped object that stores nothing and translates nothing.

    Returned for domains without loaded translations so callers never branch
    on whether a catalog exists.
    """

    @property
    def entries(self) -> Mapping[EntryKey, TranslationEntry]:
        return {}

    @property
    def headers(self) -> Mapping[str, str]:
        return {}

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "NullCatalog()"

    def add_entry(self, entry: EntryLike) -> bool:
        return True

    def add_entry_or_merge(self, entry: EntryLike) -> bool:
        return True

    def set_header(self, name: str, value: str) -> None:
        pass

    def get_header(self, name: str) -> Optional[str]:
        return None

    def translate_entry(self, lookup: TranslationEntry) -> Optional[TranslationEntry]:
        return None

    def translate(self, singular: str, context: Optional[str] = None) -> str:
        return singular

    def translate_plural(
        self,
        singular: str,
        plural: str,
        count: int,
        context: Optional[str] = None,
    ) -> str:
        return singular if count == 1 else plural

    def merge_with(self, other: BaseCatalog) -> None:
        pass

    def merge_originals_with(self, other: BaseCatalog) -> None:
        pass

    def copy(self) -> Catalog:
        return Catalog()


def _entries_of(catalog: BaseCatalog) -> Iterator[TranslationEntry]:
    return iter(list(catalog.entries.values()))
