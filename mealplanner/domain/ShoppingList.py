"""ShoppingList aggregate: ingredient name -> number of occurrences across the planned meals."""
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple


class ShoppingList:
    def __init__(self):
        self._counts: Dict[str, int] = defaultdict(int)

    def add_item(self, name: str, count: int = 1):
        '''
        Adds occurrences of an ingredient. Names are compared exactly (no case folding).
        '''
        if count < 1:
            raise ValueError(f"Count must be positive: {count}")
        self._counts[name] += count

    def get_count(self, name: str) -> int:
        return self._counts.get(name, 0)

    def get_items(self) -> List[Tuple[str, int]]:
        '''
        Returns (name, count) pairs sorted alphabetically by name.
        '''
        return sorted(self._counts.items())

    def total(self) -> int:
        return sum(self._counts.values())

    def is_empty(self) -> bool:
        return not self._counts

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.get_items())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, name) -> bool:
        return name in self._counts

    def to_dict(self) -> Dict[str, int]:
        return dict(self.get_items())

    def __str__(self) -> str:
        items_str = ",\n\t".join(f"{name}: {count}" for name, count in self.get_items())
        return f"Shopping List Items:\n\t{items_str}"

    __repr__ = __str__
