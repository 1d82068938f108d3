"""Feature-level fixtures for text domain engine tests."""

import pytest

from textdomain import DomainRegistry, Translator, YAMLCatalogLoader
from tests.factories.textdomain import make_catalog, write_catalog_file


@pytest.fixture
def catalog():
    """Small French catalog with plain, contextual and plural entries."""
    return make_catalog()


@pytest.fixture
def registry():
    """Empty registry without loader."""
    return DomainRegistry()


@pytest.fixture
def translator(registry, catalog):
    """Translator with the sample catalog loaded into the "default" domain."""
    registry.load("default", catalog)
    return Translator(registry)


@pytest.fixture
def temp_catalogs_dir(tmp_path):
    """Create a directory with sample YAML catalogs.

    Returns a directory structure like:
    - default.fr-FR.yml
    - admin.fr-FR.yml
    - admin.de-DE.yml
    """
    write_catalog_file(tmp_path, "default", "fr-FR")
    write_catalog_file(
        tmp_path,
        "admin",
        "fr-FR",
        {
            "headers": {"Language": "fr"},
            "entries": [
                {"singular": "Settings", "translations": ["Réglages"]},
                {
                    "singular": "Settings",
                    "context": "menu",
                    "translations": ["Paramètres"],
                },
            ],
        },
    )
    write_catalog_file(
        tmp_path,
        "admin",
        "de-DE",
        {"entries": [{"singular": "Settings", "translations": ["Einstellungen"]}]},
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_catalogs_dir):
    """Create YAMLCatalogLoader for the temporary catalogs directory."""
    return YAMLCatalogLoader(temp_catalogs_dir, use_cache=False)
