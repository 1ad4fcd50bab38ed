"""
Circular doubly-linked list ordering nodes by recency.

The head is the most recently used node. Because the list is circular,
head.previous is the least recently used node, so the eviction candidate
is found in O(1) without a separate tail pointer.
"""

from typing import Iterator, Optional
from ..models.node import Node


class EvictionList:
    """
    Intrusive circular list of Node objects.

    Every operation is pure reference rewiring on the nodes themselves;
    the list only stores the head and a count.
    """

    def __init__(self):
        self._head: Optional[Node] = None
        self._count = 0

    @property
    def head(self) -> Optional[Node]:
        """Most recently used node, or None when empty"""
        return self._head

    @property
    def tail(self) -> Optional[Node]:
        """Least recently used node (the eviction candidate), or None when empty"""
        if self._head is None:
            return None
        return self._head._previous

    def link_at_head(self, node: Node) -> None:
        """
        Link node as the new head.

        Args:
            node: An unlinked node
        """
        head = self._head
        if head is None:
            node._previous = node
            node._next = node
        else:
            # Splice in just before the current head
            tail = head._previous
            node._previous = tail
            node._next = head
            tail._next = node
            head._previous = node

        node._owner = self
        self._head = node
        self._count += 1

    def unlink(self, node: Node) -> None:
        """
        Remove node from the list and clear its links.

        Args:
            node: A node currently linked in this list
        """
        if node._next is node:
            self._head = None
        else:
            node._previous._next = node._next
            node._next._previous = node._previous
            if node is self._head:
                self._head = node._next

        node._previous = None
        node._next = None
        node._owner = None
        self._count -= 1

    def promote(self, node: Node) -> None:
        """Move node to the head, marking it most recently used."""
        if node is self._head:
            return
        self.unlink(node)
        self.link_at_head(node)

    def __iter__(self) -> Iterator[Node]:
        """
        Walk nodes from most to least recently used.

        The caller may unlink the node just yielded; any other mutation
        during the walk gives undefined order.
        """
        node = self._head
        remaining = self._count
        while remaining > 0:
            following = node._next
            yield node
            remaining -= 1
            node = following

    def __len__(self) -> int:
        return self._count

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and node._owner is self
