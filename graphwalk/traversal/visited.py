"""Visited set keyed by node identity."""

from typing import Any, Callable, Hashable, Iterator, Set


def node_id(node: Any) -> Hashable:
    return node.id


class VisitedSet:
    """
    Identities of nodes already discovered during one traversal.

    Membership is decided by `key(node)` (the node id by default), never by
    structural equality, so two node objects sharing an id collapse to a
    single entry.
    """

    def __init__(self, key: Callable[[Any], Hashable] = node_id):
        self._key = key
        self._seen: Set[Hashable] = set()

    def insert(self, node: Any) -> bool:
        """
        Record a node.

        Returns:
            True if the node's identity was not present before this call
        """
        identity = self._key(node)
        if identity in self._seen:
            return False
        self._seen.add(identity)
        return True

    def __contains__(self, node: Any) -> bool:
        return self._key(node) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._seen)
