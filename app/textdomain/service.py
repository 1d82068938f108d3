"""Translation service for dependency injection.

Provides a class-based interface to the engine for easier DI and testing, plus
module-level functions bound to a process-wide default service.
"""

from functools import lru_cache
from typing import Any, Optional

from textdomain.factory import create_translator
from textdomain.models import DeferredPlural
from textdomain.registry import DomainRegistry
from textdomain.translator import Translator


class TranslationService:
    """Class-based translation service.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by the factory.

    Usage:
        service = TranslationService()
        service.registry.load_file("admin", "locales/admin.fr-FR.yml")
        label = service.translate_plural("%s user", "%s users", 3, "admin")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(self, text: str, domain: Optional[str] = None) -> str:
        return self._translator.translate(text, domain)

    def translate_with_context(
        self, text: str, context: str, domain: Optional[str] = None
    ) -> str:
        return self._translator.translate_with_context(text, context, domain)

    def translate_plural(
        self,
        singular: str,
        plural: str,
        count: int,
        domain: Optional[str] = None,
    ) -> str:
        return self._translator.translate_plural(singular, plural, count, domain)

    def translate_plural_with_context(
        self,
        singular: str,
        plural: str,
        count: int,
        context: str,
        domain: Optional[str] = None,
    ) -> str:
        return self._translator.translate_plural_with_context(
            singular, plural, count, context, domain
        )

    def resolve_deferred_plural(
        self,
        deferred: DeferredPlural,
        count: int,
        domain: Optional[str] = None,
    ) -> str:
        return self._translator.resolve_deferred_plural(deferred, count, domain)

    def translate_settings(
        self, schema: Any, settings: Any, domain: Optional[str] = None
    ) -> Any:
        return self._translator.translate_settings(schema, settings, domain)

    @property
    def registry(self) -> DomainRegistry:
        """Registry holding the loaded catalogs."""
        return self._translator.registry

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator


@lru_cache
def get_translation_service() -> TranslationService:
    """Get the process-wide default translation service.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Use get_translation_service.cache_clear() to rebuild it after changing
    settings.

    Returns:
        TranslationService: Cached service backed by create_translator().
    """
    return TranslationService()


def translate(text: str, domain: Optional[str] = None) -> str:
    return get_translation_service().translate(text, domain)


def translate_with_context(
    text: str, context: str, domain: Optional[str] = None
) -> str:
    return get_translation_service().translate_with_context(text, context, domain)


def translate_plural(
    singular: str, plural: str, count: int, domain: Optional[str] = None
) -> str:
    return get_translation_service().translate_plural(singular, plural, count, domain)


def translate_plural_with_context(
    singular: str,
    plural: str,
    count: int,
    context: str,
    domain: Optional[str] = None,
) -> str:
    return get_translation_service().translate_plural_with_context(
        singular, plural, count, context, domain
    )


def resolve_deferred_plural(
    deferred: DeferredPlural, count: int, domain: Optional[str] = None
) -> str:
    return get_translation_service().resolve_deferred_plural(deferred, count, domain)
