"""Domain registry owning the lifetime of loaded catalogs.

Each domain name is in one of three states: absent (never loaded, eligible for
just-in-time loading), loaded, or unloaded for good. A load always moves the
domain back to loaded.
"""

import threading
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from core.logging import get_module_logger
from textdomain.catalog import BaseCatalog, Catalog, NullCatalog
from textdomain.exceptions import SourceUnreadableError
from textdomain.loader import CatalogLoader

logger = get_module_logger()

NULL_CATALOG = NullCatalog()


class DomainRegistry:
    """Thread-safe mapping from domain name to active catalog.

    Attributes:
        loader: Optional CatalogLoader used by load_file() and just-in-time loading.
        locale: Locale requested from the loader for just-in-time loading.
        jit_loading: Whether get() loads absent domains through the loader.
    """

    def __init__(
        self,
        loader: Optional[CatalogLoader] = None,
        locale: Optional[str] = None,
        jit_loading: bool = False,
    ):
        self.loader = loader
        self.locale = locale
        self.jit_loading = jit_loading
        self._loaded: Dict[str, Catalog] = {}
        self._unloaded: Set[str] = set()
        self._jit_missed: Set[str] = set()
        self._lock = threading.RLock()

    def load(self, domain: str, catalog: BaseCatalog) -> bool:
        """Make a parsed catalog the active catalog of a domain.

        When the domain is already loaded, the stored catalog is the incoming
        one with the existing entries merged over it: on a key collision the
        entry loaded first wins. The caller's catalog is never stored or
        mutated; a copy is.

        Args:
            domain: Text domain.
            catalog: Parsed catalog to load.

        Returns:
            True.
        """
        with self._lock:
            merged = catalog.copy()
            existing = self._loaded.get(domain)
            if existing is not None:
                merged.merge_with(existing)

            self._unloaded.discard(domain)
            self._jit_missed.discard(domain)
            self._loaded[domain] = merged

        logger.info(
            "textdomain_loaded",
            domain=domain,
            entry_count=len(merged),
            merged=existing is not None,
        )
        return True

    def load_file(self, domain: str, path: Union[str, Path]) -> bool:
        """Parse a catalog source with the loader and load it into a domain.

        Args:
            domain: Text domain.
            path: Catalog source path.

        Returns:
            True on success, False if the source could not be read or parsed.
            Registry state is unchanged on failure.

        Raises:
            ValueError: If the registry has no loader.
        """
        if self.loader is None:
            raise ValueError("DomainRegistry has no loader configured")

        try:
            catalog = self.loader.load_file(path)
        except SourceUnreadableError as e:
            logger.warning(
                "textdomain_load_failed",
                domain=domain,
                path=str(path),
                error=str(e),
            )
            return False

        return self.load(domain, catalog)

    def unload(self, domain: str, reloadable: bool = False) -> bool:
        """Unload the catalog of a domain.

        Args:
            domain: Text domain.
            reloadable: Whether the domain may be loaded just-in-time again.

        Returns:
            True if the domain was loaded, False otherwise.
        """
        with self._lock:
            if domain not in self._loaded:
                return False

            del self._loaded[domain]
            self._jit_missed.discard(domain)
            if not reloadable:
                self._unloaded.add(domain)

        logger.info("textdomain_unloaded", domain=domain, reloadable=reloadable)
        return True

    def get(self, domain: str) -> BaseCatalog:
        """Get the catalog of a domain.

        Args:
            domain: Text domain.

        Returns:
            The loaded Catalog, or the shared NullCatalog when none is loaded.
        """
        with self._lock:
            catalog = self._loaded.get(domain)
            if catalog is None and self._can_load_just_in_time(domain):
                catalog = self._load_just_in_time(domain)
            return catalog if catalog is not None else NULL_CATALOG

    def is_loaded(self, domain: str) -> bool:
        with self._lock:
            return domain in self._loaded

    def is_unloaded(self, domain: str) -> bool:
        """Check whether a domain was unloaded without permission to reload.

        Returns:
            True if the domain is excluded from just-in-time loading.
        """
        with self._lock:
            return domain in self._unloaded

    def domains(self) -> List[str]:
        with self._lock:
            return sorted(self._loaded)

    def clear(self) -> None:
        """Drop every catalog and every unload marker."""
        with self._lock:
            self._loaded.clear()
            self._unloaded.clear()
            self._jit_missed.clear()
        logger.debug("domain_registry_cleared")

    def _can_load_just_in_time(self, domain: str) -> bool:
        return (
            self.jit_loading
            and self.loader is not None
            and self.locale is not None
            and domain not in self._unloaded
            and domain not in self._jit_missed
        )

    def _load_just_in_time(self, domain: str) -> Optional[Catalog]:
        try:
            catalog = self.loader.load(domain, self.locale)
        except SourceUnreadableError as e:
            # Remembered so a missing source is not re-read on every lookup
            self._jit_missed.add(domain)
            logger.debug(
                "textdomain_jit_load_missed",
                domain=domain,
                locale=self.locale,
                error=str(e),
            )
            return None

        self.load(domain, catalog)
        return self._loaded[domain]
