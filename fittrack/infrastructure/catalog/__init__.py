"""wger exercise catalog adapter."""

from .wger_client import WgerCatalogClient

__all__ = ["WgerCatalogClient"]
