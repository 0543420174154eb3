"""Intrusive circular doubly-linked list primitives with a sentinel anchor."""

from collections.abc import Iterator


class ListHead:
    """
    A link node in a circular doubly-linked list.

    The same type serves as the anchor (sentinel) of a list and as the node
    embedded in every element. A fresh node points to itself on both sides,
    so links are never None. An anchor whose ``next`` is itself is an empty
    list.
    """

    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: ListHead = self
        self.next: ListHead = self

    def init(self) -> None:
        """Make the node self-circular (detached / empty). O(1)."""
        self.prev = self
        self.next = self

    def is_empty(self) -> bool:
        """Return True if no node is linked after this anchor."""
        return self.next is self

    def is_singular(self) -> bool:
        """Return True if exactly one node is linked after this anchor."""
        return self.next is not self and self.next is self.prev

    @staticmethod
    def _link_between(node: "ListHead", before: "ListHead", after: "ListHead") -> None:
        after.prev = node
        node.next = after
        node.prev = before
        before.next = node

    def add(self, node: "ListHead") -> None:
        """Link node right after this one (new first element of an anchor). O(1)."""
        self._link_between(node, self, self.next)

    def add_tail(self, node: "ListHead") -> None:
        """Link node right before this one (new last element of an anchor). O(1)."""
        self._link_between(node, self.prev, self)

    def unlink(self) -> None:
        """Remove this node from its chain and leave it self-circular. O(1)."""
        self.prev.next = self.next
        self.next.prev = self.prev
        self.init()

    def move(self, head: "ListHead") -> None:
        """Unlink this node and relink it right after head. O(1)."""
        self.unlink()
        head.add(self)

    def move_tail(self, head: "ListHead") -> None:
        """Unlink this node and relink it right before head. O(1)."""
        self.unlink()
        head.add_tail(self)

    def swap_links(self) -> None:
        """Exchange this node's own forward and backward references."""
        self.next, self.prev = self.prev, self.next

    def first(self) -> "ListHead | None":
        """Return the node after the anchor, or None if the list is empty."""
        return None if self.is_empty() else self.next

    def last(self) -> "ListHead | None":
        """Return the node before the anchor, or None if the list is empty."""
        return None if self.is_empty() else self.prev

    def __iter__(self) -> Iterator["ListHead"]:
        """
        Iterate the nodes after this anchor, front to back.

        The successor is captured before each node is yielded, so the
        current node may be unlinked (or released) by the loop body.
        """
        node = self.next
        while node is not self:
            successor = node.next
            yield node
            node = successor

    def __reversed__(self) -> Iterator["ListHead"]:
        """Iterate the nodes before this anchor, back to front (removal-safe)."""
        node = self.prev
        while node is not self:
            predecessor = node.prev
            yield node
            node = predecessor
