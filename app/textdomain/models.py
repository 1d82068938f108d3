"""Translation models for the text domain engine.

Defines the catalog key, the translation entry record and the deferred plural
value passed around until a count is known.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, List, Mapping, Optional

CONTEXT_SEPARATOR = "\x04"


@dataclass(frozen=True)
class EntryKey:
    """Identity of a translatable unit within a catalog.

    An absent context is None. The empty string is a real context and never
    compares equal to an absent one.

    Attributes:
        singular: Source text.
        context: Disambiguating context, or None.
    """

    singular: str
    context: Optional[str] = None

    def __str__(self) -> str:
        """Return the gettext form of the key.

        Returns:
            "context\\x04singular", or just the singular without context.
        """
        if self.context is None:
            return self.singular
        return f"{self.context}{CONTEXT_SEPARATOR}{self.singular}"


@dataclass
class TranslationEntry:
    """One catalog record.

    Attributes:
        singular: Source text. Required for the entry to be keyable.
        plural: Plural source text, set only for plural pairs.
        context: Disambiguating context, or None.
        translations: Localized variants indexed by plural form.
        translator_comments: Comments written by translators.
        extracted_comments: Comments extracted from source code.
        references: Source locations the string was found at.
        flags: Format flags such as "php-format".
    """

    singular: str = ""
    plural: Optional[str] = None
    context: Optional[str] = None
    translations: List[str] = field(default_factory=list)
    translator_comments: str = ""
    extracted_comments: str = ""
    references: List[str] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TranslationEntry":
        """Build an entry from a raw field mapping.

        Unknown fields are ignored. A None value leaves the field at its
        default. List fields are copied.

        Args:
            raw: Mapping of field name to value.

        Returns:
            TranslationEntry instance.

        Raises:
            TypeError: If a list field holds a string or another non-list value.
        """
        known = {f.name for f in fields(cls)}
        values = {
            name: value
            for name, value in raw.items()
            if name in known and value is not None
        }
        for name in ("translations", "references", "flags"):
            if name not in values:
                continue
            if not isinstance(values[name], (list, tuple)):
                raise TypeError(f"Entry field '{name}' must be a list")
            values[name] = list(values[name])
        return cls(**values)

    @property
    def is_plural(self) -> bool:
        return self.plural is not None

    def key(self) -> Optional[EntryKey]:
        """Return the catalog key of this entry.

        Returns:
            EntryKey, or None when the singular text is empty.
        """
        if not self.singular:
            return None
        return EntryKey(singular=self.singular, context=self.context)

    def merge_with(self, other: "TranslationEntry") -> None:
        """Extend this entry with variants and metadata it does not have yet.

        Values are compared by content, not by index. Singular, plural and
        context are left untouched.

        Args:
            other: Entry describing the same string.
        """
        for name in ("translations", "references", "flags"):
            current = getattr(self, name)
            for value in getattr(other, name):
                if value not in current:
                    current.append(value)

    def copy(self) -> "TranslationEntry":
        return replace(
            self,
            translations=list(self.translations),
            references=list(self.references),
            flags=list(self.flags),
        )


@dataclass(frozen=True)
class DeferredPlural:
    """Plural strings registered now and translated once the count is known.

    Attributes:
        singular: Singular form to be localized.
        plural: Plural form to be localized.
        context: Context for the translators, or None.
        domain: Domain overriding the one given at resolution time, or None.
    """

    singular: str
    plural: str
    context: Optional[str] = None
    domain: Optional[str] = None
