"""Product catalog adapter factory.

Provides get_catalogue() / set_catalogue() to swap implementations:
- FakeCatalogue for development and testing (default)
- HttpCatalogue when CATALOGUE_ADAPTER=http, calling CATALOGUE_SERVICE_URL
"""

import os

from shopping.catalogue.port import CataloguePort

_current_catalogue: CataloguePort | None = None


def get_catalogue() -> CataloguePort:
    """Return the configured catalog adapter (singleton)."""
    global _current_catalogue
    if _current_catalogue is None:
        adapter = os.environ.get("CATALOGUE_ADAPTER", "fake")
        if adapter == "fake":
            from shopping.catalogue.fake_adapter import FakeCatalogue

            _current_catalogue = FakeCatalogue()
        elif adapter == "http":
            from shopping.catalogue.http_adapter import HttpCatalogue

            _current_catalogue = HttpCatalogue(os.environ.get("CATALOGUE_SERVICE_URL", "http://localhost:8000"))
        else:
            raise ValueError(f"Unknown catalogue adapter: {adapter}")
    return _current_catalogue


def set_catalogue(catalogue: CataloguePort) -> None:
    """Override the active adapter (useful for tests)."""
    global _current_catalogue
    _current_catalogue = catalogue


def reset_catalogue() -> None:
    """Reset the singleton so the next call re-reads the environment."""
    global _current_catalogue
    _current_catalogue = None
