"""Translation façade over a domain registry.

All lookups degrade to the source text: a missing domain, a missing entry or
a missing plural variant never raises.
"""

from typing import Any, Optional

from textdomain.models import DeferredPlural
from textdomain.registry import DomainRegistry
from textdomain.schema import translate_settings_with_schema

DEFAULT_DOMAIN = "default"


def deferred_plural(
    singular: str, plural: str, domain: Optional[str] = None
) -> DeferredPlural:
    """Register plural strings without translating them.

    Example:
        message = deferred_plural("%s post", "%s posts", "blog")
        ...
        translator.resolve_deferred_plural(message, count) % count

    Args:
        singular: Singular form to be localized.
        plural: Plural form to be localized.
        domain: Optional domain overriding the one used at resolution time.

    Returns:
        DeferredPlural value.
    """
    return DeferredPlural(singular=singular, plural=plural, domain=domain)


def deferred_plural_with_context(
    singular: str, plural: str, context: str, domain: Optional[str] = None
) -> DeferredPlural:
    """Register plural strings with context without translating them.

    Args:
        singular: Singular form to be localized.
        plural: Plural form to be localized.
        context: Context information for the translators.
        domain: Optional domain overriding the one used at resolution time.

    Returns:
        DeferredPlural value.
    """
    return DeferredPlural(
        singular=singular, plural=plural, context=context, domain=domain
    )


def before_last_bar(text: str) -> str:
    """Remove the last item of a pipe-delimited string.

    "Role name|User role" becomes "Role name". Text without a pipe is
    returned unchanged.
    """
    head, bar, _ = text.rpartition("|")
    return head if bar else text


class Translator:
    """Public lookup operations bound to a DomainRegistry.

    Attributes:
        registry: DomainRegistry providing catalogs by domain.
        default_domain: Domain used when a call names none.
    """

    def __init__(
        self, registry: DomainRegistry, default_domain: str = DEFAULT_DOMAIN
    ):
        self.registry = registry
        self.default_domain = default_domain

    def _domain(self, domain: Optional[str]) -> str:
        return domain if domain is not None else self.default_domain

    def translate(self, text: str, domain: Optional[str] = None) -> str:
        """Retrieve the translation of text.

        Args:
            text: Text to translate.
            domain: Text domain (default: default_domain).

        Returns:
            Translated text, or text itself when no translation exists.
        """
        return self.registry.get(self._domain(domain)).translate(text)

    def translate_with_context(
        self, text: str, context: str, domain: Optional[str] = None
    ) -> str:
        """Retrieve the translation of text in a context.

        Args:
            text: Text to translate.
            context: Context information for the translators.
            domain: Text domain (default: default_domain).

        Returns:
            Translated text, or text itself when no translation exists.
        """
        return self.registry.get(self._domain(domain)).translate(text, context)

    def translate_plural(
        self,
        singular: str,
        plural: str,
        count: int,
        domain: Optional[str] = None,
    ) -> str:
        """Translate the singular or plural form for a count.

        Args:
            singular: Text used when the count is singular.
            plural: Text used when the count is plural.
            count: Number of items.
            domain: Text domain (default: default_domain).

        Returns:
            The translated form, or the source form chosen by count.
        """
        return self.registry.get(self._domain(domain)).translate_plural(
            singular, plural, count
        )

    def translate_plural_with_context(
        self,
        singular: str,
        plural: str,
        count: int,
        context: str,
        domain: Optional[str] = None,
    ) -> str:
        """Translate the singular or plural form for a count, with context.

        Args:
            singular: Text used when the count is singular.
            plural: Text used when the count is plural.
            count: Number of items.
            context: Context information for the translators.
            domain: Text domain (default: default_domain).

        Returns:
            The translated form, or the source form chosen by count.
        """
        return self.registry.get(self._domain(domain)).translate_plural(
            singular, plural, count, context
        )

    def resolve_deferred_plural(
        self,
        deferred: DeferredPlural,
        count: int,
        domain: Optional[str] = None,
    ) -> str:
        """Translate plural strings registered with deferred_plural().

        A domain stored in the deferred value overrides the domain argument.

        Args:
            deferred: Value returned by deferred_plural() or
                deferred_plural_with_context().
            count: Number of items.
            domain: Text domain (default: default_domain).

        Returns:
            The translated form, or the source form chosen by count.
        """
        if deferred.domain:
            domain = deferred.domain

        if deferred.context is not None:
            return self.translate_plural_with_context(
                deferred.singular, deferred.plural, count, deferred.context, domain
            )
        return self.translate_plural(deferred.singular, deferred.plural, count, domain)

    def translate_settings(
        self, schema: Any, settings: Any, domain: Optional[str] = None
    ) -> Any:
        """Translate nested settings values described by an i18n schema.

        See translate_settings_with_schema() for the schema rules.
        """
        return translate_settings_with_schema(
            self.translate_with_context, schema, settings, self._domain(domain)
        )
