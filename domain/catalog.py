"""
Normalized item catalog of a run.

Surrogates are zero-based and assigned in first-seen order. The store keeps
them as one-based ranks (surrogate + 1), both for dimension ids and for the
foreign keys that point at them.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple


class DimensionMapping:
    """Append-only mapping of distinct string values to dense surrogates."""

    def __init__(self, name: str):
        self.name = name
        self._surrogates: Dict[str, int] = {}

    def add(self, value: Optional[str]) -> Optional[int]:
        """
        Register a value and return its surrogate.

        The first sight of a value gets the mapping's current size; later
        sights return the recorded surrogate unchanged. Missing values are
        not registered.
        """
        if value is None:
            return None
        surrogate = self._surrogates.get(value)
        if surrogate is None:
            surrogate = len(self._surrogates)
            self._surrogates[value] = surrogate
        return surrogate

    def get(self, value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        return self._surrogates.get(value)

    def rank(self, value: Optional[str]) -> Optional[int]:
        """Persisted id of a registered value (surrogate + 1)"""
        surrogate = self.get(value)
        return None if surrogate is None else surrogate + 1

    def ranks(self) -> Iterator[Tuple[str, int]]:
        """(value, rank) pairs in first-seen order"""
        for value, surrogate in self._surrogates.items():
            yield value, surrogate + 1

    def __contains__(self, value) -> bool:
        return value in self._surrogates

    def __len__(self) -> int:
        return len(self._surrogates)

    def __repr__(self) -> str:
        return f"DimensionMapping({self.name!r}, size={len(self)})"


@dataclass(frozen=True)
class CatalogItem:
    """Deduplicated identity of a catalog item, holding zero-based surrogates"""

    item_id: str
    type: Optional[int] = None
    category: Optional[int] = None
    name: Optional[int] = None
    primary_filling_name: Optional[int] = None


def to_rank(surrogate: Optional[int]) -> Optional[int]:
    return None if surrogate is None else surrogate + 1


class OptimizedItems:
    """All dimension mappings of a run plus the items table keyed by item id"""

    def __init__(self):
        self.items: Dict[str, CatalogItem] = {}
        self.item_types = DimensionMapping("item_types")
        self.item_categories = DimensionMapping("item_categories")
        self.item_names = DimensionMapping("item_names")
        self.primary_filling_names = DimensionMapping("primary_filling_names")
        self.content_groups = DimensionMapping("content_groups")

    def add_item(self, item: CatalogItem) -> CatalogItem:
        """Record an item the first time its id is seen; later sights are ignored"""
        return self.items.setdefault(item.item_id, item)

    def add_content_group(self, name: Optional[str]) -> Optional[int]:
        return self.content_groups.add(name)

    def dimensions(self) -> List[DimensionMapping]:
        return [
            self.item_types,
            self.item_categories,
            self.item_names,
            self.primary_filling_names,
            self.content_groups,
        ]
