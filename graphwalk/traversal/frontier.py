"""
Traversal Frontier

Pending-node container whose dequeue policy decides the traversal order:
FIFO gives breadth-first, LIFO gives depth-first.
"""

from collections import deque
from enum import Enum
from typing import Any, Deque, Optional


class Discipline(str, Enum):
    """Dequeue policy of a Frontier"""
    FIFO = "fifo"  # Oldest first -> BFS
    LIFO = "lifo"  # Newest first -> DFS

    @classmethod
    def from_order(cls, order: str) -> "Discipline":
        """Map a traversal order name ('bfs'/'dfs') or a discipline value to a Discipline"""
        aliases = {"bfs": cls.FIFO, "dfs": cls.LIFO}
        key = order.lower()
        if key in aliases:
            return aliases[key]
        return cls(key)


class Frontier:
    """
    Nodes discovered but not yet visited.

    Duplicates are never rejected here; de-duplication is the visited set's
    job. Not safe for concurrent use.
    """

    def __init__(self, discipline: Discipline):
        self.discipline = Discipline(discipline)
        self._data: Deque[Any] = deque()

    def enqueue(self, node: Any) -> None:
        self._data.append(node)

    def dequeue(self) -> Optional[Any]:
        """
        Remove and return the next pending node.

        Returns:
            The next node per the discipline, or None when nothing is pending
        """
        if not self._data:
            return None
        if self.discipline is Discipline.FIFO:
            return self._data.popleft()
        return self._data.pop()

    def peek(self) -> Optional[Any]:
        """Return the node dequeue() would return, without removing it"""
        if not self._data:
            return None
        if self.discipline is Discipline.FIFO:
            return self._data[0]
        return self._data[-1]

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"Frontier(discipline={self.discipline.value}, pending={len(self._data)})"
