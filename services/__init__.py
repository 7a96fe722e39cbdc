"""Services package - Loading logic layer"""

from services.catalog_service import optimize_items
from services.fetch_service import FetchScheduler, MenuPool
from services.loader_service import LoaderService, LoadSummary, build_default_query

__all__ = [
    "optimize_items",
    "FetchScheduler",
    "MenuPool",
    "LoaderService",
    "LoadSummary",
    "build_default_query",
]
