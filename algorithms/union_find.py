"""
union_find.py — Disjoint-Set Forest
====================================
Answers "are these two nodes already connected?" in near-constant time.
Kruskal uses it to reject edges that would close a cycle.

    uf = UnionFind(["A", "B", "C"])
    uf.union("A", "B")    → True   (merged)
    uf.union("B", "A")    → False  (already one set → would form a cycle)
"""

from typing import Dict, Iterable


class UnionFind:
    """Union by rank + path compression."""

    def __init__(self, items: Iterable[str] = ()):
        self._parent: Dict[str, str] = {}
        self._rank:   Dict[str, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: str) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item]   = 0

    def find(self, item: str) -> str:
        """Root of item's set.  Unknown items become singleton sets."""
        self.add(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # compress the walked path straight onto the root
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a]   = rank_a + 1
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)

    def set_count(self) -> int:
        return sum(1 for item in self._parent if self._parent[item] == item)

    def __len__(self) -> int:
        return len(self._parent)
