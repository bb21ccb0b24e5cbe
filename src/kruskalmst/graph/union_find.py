"""Disjoint-set (Union-Find) structure used for cycle detection."""

from collections.abc import Hashable, Iterable

from kruskalmst.errors import NotFoundError

__all__ = ["DisjointSet"]


class DisjointSet:
    """Union-Find with path compression and union by rank.

    Unlike a lazily-populated DSU, every element must be registered with
    ``make_set`` (or passed to the constructor) before it is used; touching
    an unknown element raises ``NotFoundError``.

    Attributes
    ----------
    parent : dict[Hashable, Hashable]
        Parent pointers for each element. Roots point to themselves.
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        """Initialize one singleton set per element.

        Parameters
        ----------
        elements : Iterable[Hashable], optional
            Elements to register, by default none.
        """
        self.parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        for element in elements:
            self.make_set(element)

    def make_set(self, x: Hashable) -> None:
        """Create a new set containing element x.

        Registering an existing element is a no-op.

        Parameters
        ----------
        x : Hashable
            Element to add.
        """
        if x not in self.parent:
            self.parent[x] = x
            self._rank[x] = 0

    def find(self, x: Hashable) -> Hashable:
        """Find root of set containing x with path compression.

        Walks up to the root, then walks the same chain a second time
        pointing every visited element directly at the root.

        Parameters
        ----------
        x : Hashable
            Element to find.

        Returns
        -------
        Hashable
            Root of set containing x.

        Raises
        ------
        NotFoundError
            If x was never registered.
        """
        parent = self.parent
        if x not in parent:
            raise NotFoundError(x)

        root = x
        while parent[root] != root:
            root = parent[root]

        while x != root:
            next_x = parent[x]
            parent[x] = root
            x = next_x

        return root

    def union(self, x: Hashable, y: Hashable) -> Hashable | None:
        """Union sets containing x and y using union by rank.

        On equal rank the root of y is attached under the root of x.

        Parameters
        ----------
        x : Hashable
            First element.
        y : Hashable
            Second element.

        Returns
        -------
        Hashable | None
            Root of the merged set, or None if x and y were already in
            the same set.

        Raises
        ------
        NotFoundError
            If either element was never registered.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return None

        if self._rank[root_x] < self._rank[root_y]:
            self.parent[root_x] = root_y
            return root_y

        self.parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return root_x

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)

    def rank(self, x: Hashable) -> int:
        """Return the stored rank of x (meaningful for roots only)."""
        if x not in self._rank:
            raise NotFoundError(x)
        return self._rank[x]

    def get_components(self) -> list[list[Hashable]]:
        """Get all disjoint sets.

        Returns
        -------
        list[list[Hashable]]
            One list per set, in first-registered order.
        """
        components_dict: dict[Hashable, list[Hashable]] = {}

        for element in self.parent:
            components_dict.setdefault(self.find(element), []).append(element)

        return list(components_dict.values())

    def __contains__(self, x: object) -> bool:
        return x in self.parent

    def __len__(self) -> int:
        return len(self.parent)
