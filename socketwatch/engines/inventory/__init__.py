"""Inventory fetcher engine — paginated dependency search."""

from socketwatch.engines.inventory.fetcher import fetch_all_dependencies
from socketwatch.engines.inventory.models import DependencyRecord

__all__ = ["DependencyRecord", "fetch_all_dependencies"]
