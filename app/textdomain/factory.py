"""Factory functions for creating text domain components.

Builds registries and translators from the l10n settings, with optional
overrides for tests and embedding applications.
"""

from pathlib import Path
from typing import Iterable, Optional

import structlog
from core.config import settings
from textdomain.loader import YAMLCatalogLoader
from textdomain.registry import DomainRegistry
from textdomain.translator import Translator

logger = structlog.get_logger()


def create_registry(
    translations_dir: Optional[Path] = None,
    locale: Optional[str] = None,
    jit_loading: Optional[bool] = None,
    preload_domains: Optional[Iterable[str]] = None,
    use_cache: bool = True,
) -> DomainRegistry:
    """Create and configure a DomainRegistry.

    Arguments left as None are taken from settings.l10n. When the
    translations directory does not exist the registry has no loader: every
    lookup then falls back to the source text.

    Args:
        translations_dir: Directory of YAML catalogs (default: L10N_LOCALES_DIR)
        locale: Locale to load catalogs for (default: L10N_LOCALE)
        jit_loading: Load absent domains on first lookup (default: L10N_JIT_LOADING)
        preload_domains: Domains loaded immediately (default: L10N_PRELOAD_DOMAINS)
        use_cache: Whether the loader caches parsed catalogs (default: True)

    Returns:
        DomainRegistry: Configured registry

    Usage:
        # Use defaults from the environment
        registry = create_registry()

        # Explicit directory, no just-in-time loading
        registry = create_registry(Path("/srv/locales"), "fr-FR", jit_loading=False)
    """
    l10n = settings.l10n
    translations_dir = Path(translations_dir or l10n.LOCALES_DIR)
    locale = locale or l10n.LOCALE
    if jit_loading is None:
        jit_loading = l10n.JIT_LOADING
    if preload_domains is None:
        preload_domains = l10n.PRELOAD_DOMAINS

    loader = None
    if translations_dir.is_dir():
        loader = YAMLCatalogLoader(translations_dir, use_cache=use_cache)
    else:
        logger.warning(
            "translations_dir_missing",
            translations_dir=str(translations_dir),
        )

    registry = DomainRegistry(loader=loader, locale=locale, jit_loading=jit_loading)

    if loader is not None:
        for domain in preload_domains:
            registry.load_file(domain, loader.path_for(domain, locale))

    logger.info(
        "domain_registry_created",
        translations_dir=str(translations_dir),
        locale=locale,
        jit_loading=jit_loading,
        domain_count=len(registry.domains()),
    )
    return registry


def create_translator(
    registry: Optional[DomainRegistry] = None,
    default_domain: Optional[str] = None,
) -> Translator:
    """Create a Translator bound to a registry.

    Args:
        registry: Registry to use (default: create_registry())
        default_domain: Domain for calls naming none (default: L10N_DEFAULT_DOMAIN)

    Returns:
        Translator: Configured translator instance
    """
    return Translator(
        registry=registry or create_registry(),
        default_domain=default_domain or settings.l10n.DEFAULT_DOMAIN,
    )
