"""Catalog loading interface and implementations.

Defines the contract for turning a catalog source into a Catalog and provides
a YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml

import structlog
from textdomain.catalog import Catalog
from textdomain.exceptions import CatalogFormatError, SourceUnreadableError
from textdomain.reader import CachedFileReader

logger = structlog.get_logger()

CATALOG_SUFFIX = ".yml"

TEXT_FIELDS = (
    "singular",
    "plural",
    "context",
    "translator_comments",
    "extracted_comments",
)
LIST_FIELDS = ("translations", "references", "flags")


def _check_entry_fields(raw: dict, source_file: Path) -> None:
    """Reject entry fields whose YAML type does not match the entry model.

    Raises:
        CatalogFormatError: If a text field is not a string or a list field
            is not a list of strings.
    """
    for name in TEXT_FIELDS:
        value = raw.get(name)
        if value is not None and not isinstance(value, str):
            raise CatalogFormatError(
                f"Catalog entry field '{name}' must be a string", path=source_file
            )
    for name in LIST_FIELDS:
        value = raw.get(name)
        if value is not None and not (
            isinstance(value, list) and all(isinstance(item, str) for item in value)
        ):
            raise CatalogFormatError(
                f"Catalog entry field '{name}' must be a list of strings",
                path=source_file,
            )


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define where catalogs for a domain and locale live and
    how their sources are parsed.
    """

    @abstractmethod
    def load(self, domain: str, locale: str) -> Catalog:
        """Load the catalog of a domain for a locale.

        Args:
            domain: Text domain.
            locale: Locale code (e.g., "fr-FR").

        Returns:
            Catalog with loaded entries and headers.

        Raises:
            SourceUnreadableError: If the source is missing or unparsable.
        """
        pass

    @abstractmethod
    def load_file(self, path: Union[str, Path]) -> Catalog:
        """Load a catalog from an explicit source path.

        Raises:
            SourceUnreadableError: If the source is missing or unparsable.
        """
        pass


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalog files.

    Expects files named <domain>.<locale>.yml in the translations directory,
    each holding a mapping like:

        headers:
          Plural-Forms: "nplurals=2; plural=(n != 1);"
        entries:
          - singular: "%s item"
            plural: "%s items"
            context: "cart"
            translations: ["%s article", "%s articles"]

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Parsed catalogs keyed by (domain, locale).
    """

    def __init__(
        self,
        translations_dir: Union[str, Path],
        use_cache: bool = True,
    ):
        """Initialize YAML catalog loader.

        Args:
            translations_dir: Path to directory with YAML catalog files.
            use_cache: Whether to cache parsed catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, str], Catalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_catalog_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def path_for(self, domain: str, locale: str) -> Path:
        return self.translations_dir / f"{domain}.{locale}{CATALOG_SUFFIX}"

    def load(self, domain: str, locale: str) -> Catalog:
        """Load <domain>.<locale>.yml from the translations directory.

        Cached catalogs are returned as copies so callers may mutate them.

        Args:
            domain: Text domain.
            locale: Locale code.

        Returns:
            Catalog with loaded entries and headers.

        Raises:
            SourceUnreadableError: If the file is missing or unreadable.
            CatalogFormatError: If the file does not describe a catalog.
        """
        cache_key = (domain, locale)
        if self.use_cache and cache_key in self.cache:
            logger.debug("loaded_catalog_from_cache", domain=domain, locale=locale)
            return self.cache[cache_key].copy()

        catalog = self.load_file(self.path_for(domain, locale))

        if self.use_cache:
            self.cache[cache_key] = catalog.copy()

        return catalog

    def load_file(self, path: Union[str, Path]) -> Catalog:
        """Parse a YAML catalog file.

        Unkeyable entries are skipped without aborting the file.

        Args:
            path: YAML file to parse.

        Returns:
            Catalog with loaded entries and headers.

        Raises:
            SourceUnreadableError: If the file is missing, unreadable or not YAML.
            CatalogFormatError: If the file does not describe a catalog.
        """
        reader = CachedFileReader(path)
        try:
            data = yaml.safe_load(reader.text())
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise SourceUnreadableError(
                f"Failed to parse {path}: {e}", path=path
            ) from e

        catalog = self._build_catalog(data or {}, Path(path))

        logger.info(
            "loaded_catalog",
            file=str(path),
            entry_count=len(catalog),
            header_count=len(catalog.headers),
        )
        return catalog

    def _build_catalog(self, data: object, source_file: Path) -> Catalog:
        """Build a Catalog from parsed YAML data.

        Args:
            data: Parsed YAML data.
            source_file: Source file (for errors and logging).

        Returns:
            Populated Catalog.

        Raises:
            CatalogFormatError: If the data has the wrong shape.
        """
        if not isinstance(data, dict):
            raise CatalogFormatError(
                "Catalog file must contain a mapping", path=source_file
            )

        headers = data.get("headers") or {}
        if not isinstance(headers, dict) or not all(
            isinstance(value, str) for value in headers.values()
        ):
            raise CatalogFormatError(
                "Catalog 'headers' must map names to strings", path=source_file
            )

        entries = data.get("entries") or []
        if not isinstance(entries, list):
            raise CatalogFormatError(
                "Catalog 'entries' must be a list", path=source_file
            )

        catalog = Catalog()
        catalog.set_headers({str(name): value for name, value in headers.items()})

        skipped = 0
        for raw in entries:
            if not isinstance(raw, dict):
                raise CatalogFormatError(
                    "Catalog entries must be mappings", path=source_file
                )
            _check_entry_fields(raw, source_file)
            if not catalog.add_entry_or_merge(raw):
                skipped += 1

        if skipped:
            logger.warning(
                "skipped_unkeyable_entries",
                file=str(source_file),
                skipped_count=skipped,
            )

        return catalog

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_catalog_cache")


def available_locales(
    translations_dir: Union[str, Path], domain: Optional[str] = None
) -> List[str]:
    """Get the locales that have catalog files in a directory.

    Locale codes are taken from <domain>.<locale>.yml file names.

    Args:
        translations_dir: Directory to search.
        domain: Only consider files of this domain, if given.

    Returns:
        Sorted list of locale codes; empty if the directory does not exist.
    """
    directory = Path(translations_dir)
    if not directory.is_dir():
        return []

    locales = set()
    for catalog_file in directory.glob(f"*{CATALOG_SUFFIX}"):
        # "admin.fr-FR.yml" -> ("admin", "fr-FR")
        parts = catalog_file.stem.rsplit(".", 1)
        if len(parts) != 2 or not all(parts):
            continue
        file_domain, locale = parts
        if domain is None or file_domain == domain:
            locales.add(locale)

    return sorted(locales)
