"""Tests for textdomain.models module."""

import pytest

from textdomain.models import DeferredPlural, EntryKey, TranslationEntry
from tests.factories.textdomain import make_entry


class TestEntryKey:
    """Tests for EntryKey model."""

    def test_str_without_context(self):
        """__str__() returns the singular text when there is no context."""
        assert str(EntryKey("Post")) == "Post"

    def test_str_with_context(self):
        """__str__() joins context and singular with EOT."""
        assert str(EntryKey("Post", "verb")) == "verb\x04Post"

    def test_empty_context_is_not_absent_context(self):
        """An empty-string context is distinct from no context."""
        assert EntryKey("Post", "") != EntryKey("Post")
        assert str(EntryKey("Post", "")) == "\x04Post"

    def test_hashable_and_frozen(self):
        """EntryKey can be used as dict key and is immutable."""
        d = {EntryKey("Post", "verb"): 1}
        assert d[EntryKey("Post", "verb")] == 1
        with pytest.raises(AttributeError):
            EntryKey("Post").singular = "Page"


class TestTranslationEntry:
    """Tests for TranslationEntry model."""

    def test_key(self):
        """key() combines singular and context."""
        entry = make_entry("Post", context="verb")
        assert entry.key() == EntryKey("Post", "verb")

    def test_key_ignores_plural(self):
        """key() does not depend on the plural text."""
        assert make_entry("%s item", plural="%s items").key() == EntryKey("%s item")

    def test_key_empty_singular(self):
        """key() returns None when singular text is empty."""
        assert TranslationEntry(singular="").key() is None

    def test_is_plural(self):
        """is_plural is set only for entries with plural text."""
        assert make_entry(plural="Posts").is_plural
        assert not make_entry().is_plural

    def test_from_dict_ignores_unknown_fields(self):
        """from_dict() builds an entry from raw fields."""
        raw = {
            "singular": "Post",
            "context": "noun",
            "translations": ("Article",),
            "is_obsolete": True,
        }
        entry = TranslationEntry.from_dict(raw)
        assert entry.singular == "Post"
        assert entry.context == "noun"
        assert entry.translations == ["Article"]

    def test_from_dict_none_lists(self):
        """from_dict() treats None list fields as empty."""
        entry = TranslationEntry.from_dict({"singular": "Post", "translations": None})
        assert entry.translations == []

    def test_from_dict_none_text_fields(self):
        """from_dict() treats None text fields as their defaults."""
        entry = TranslationEntry.from_dict(
            {"singular": "Post", "translator_comments": None, "context": None}
        )
        assert entry.translator_comments == ""
        assert entry.context is None

    @pytest.mark.parametrize("value", ["Article", 5, {"0": "Article"}])
    def test_from_dict_rejects_non_list_translations(self, value):
        """from_dict() never splits a scalar into a list of characters."""
        with pytest.raises(TypeError):
            TranslationEntry.from_dict({"singular": "Post", "translations": value})

    def test_merge_with_adds_missing_variants(self):
        """merge_with() appends only variants not already present."""
        entry = make_entry(translations=["A"])
        entry.merge_with(make_entry(translations=["B", "A", "C"]))
        assert entry.translations == ["A", "B", "C"]

    def test_merge_with_keeps_scalar_fields(self):
        """merge_with() never changes singular, plural or context."""
        entry = make_entry("Post", plural="Posts", context="noun")
        entry.merge_with(make_entry("Page", plural="Pages", context="verb"))
        assert (entry.singular, entry.plural, entry.context) == (
            "Post",
            "Posts",
            "noun",
        )

    def test_merge_with_unions_references_and_flags(self):
        """merge_with() also extends references and flags."""
        entry = TranslationEntry(singular="Post", references=["a.py:1"], flags=["x"])
        other = TranslationEntry(
            singular="Post", references=["a.py:1", "b.py:2"], flags=["python-format"]
        )
        entry.merge_with(other)
        assert entry.references == ["a.py:1", "b.py:2"]
        assert entry.flags == ["x", "python-format"]

    def test_copy_is_independent(self):
        """copy() does not share list fields."""
        entry = make_entry(translations=["A"])
        clone = entry.copy()
        clone.translations.append("B")
        assert entry.translations == ["A"]
        assert clone == make_entry(translations=["A", "B"])


class TestDeferredPlural:
    """Tests for DeferredPlural model."""

    def test_defaults(self):
        """DeferredPlural has no context and no domain by default."""
        deferred = DeferredPlural("%s post", "%s posts")
        assert deferred.context is None
        assert deferred.domain is None

    def test_frozen(self):
        """DeferredPlural is immutable."""
        deferred = DeferredPlural("%s post", "%s posts")
        with pytest.raises(AttributeError):
            deferred.domain = "blog"
