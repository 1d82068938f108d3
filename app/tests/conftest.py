import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from textdomain.service import get_translation_service


@pytest.fixture(autouse=True)
def reset_translation_service():
    """Rebuild the process-wide translation service for every test."""
    get_translation_service.cache_clear()
    yield
    get_translation_service.cache_clear()
