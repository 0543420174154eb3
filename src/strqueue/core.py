"""Queue operations on a sentinel-anchored circular list of text elements.

Every function takes the list anchor as a handle. An absent handle (None)
never faults: each operation degrades to its documented empty result.
Nothing here allocates except insertion, which builds exactly one Element.
"""

import logging
from typing import cast

from strqueue.element import Element, copy_value, release
from strqueue.linkedlist import ListHead
from strqueue.types import DEFAULT_BUFSIZE, ElementHandle, QueueHandle

logger = logging.getLogger(__name__)

__all__ = [
    "create",
    "destroy",
    "insert_head",
    "insert_tail",
    "remove_head",
    "remove_tail",
    "release",
    "size",
    "delete_middle",
    "delete_duplicates",
    "swap_pairs",
    "reverse",
    "sort",
    "values",
    "check_links",
]


def _value(node: ListHead) -> str:
    return cast(Element, node).value


def create() -> ListHead | None:
    """
    Create an empty queue.

    Returns:
        A self-circular anchor, or None if it could not be allocated
    """
    try:
        head = ListHead()
    except MemoryError:
        logger.warning("Could not allocate queue anchor")
        return None
    logger.debug("Created queue %#x", id(head))
    return head


def destroy(head: QueueHandle) -> None:
    """Release every element of the queue and leave the anchor empty."""
    if head is None:
        return
    released = 0
    for node in head:
        release(cast(Element, node))
        released += 1
    head.init()
    logger.debug("Destroyed queue %#x (%d elements released)", id(head), released)


def _insert(head: QueueHandle, s: str | None, *, tail: bool) -> bool:
    if head is None:
        logger.debug("Insert on absent queue ignored")
        return False
    if s is None:
        logger.debug("Insert of absent value ignored")
        return False

    # Build the element completely before touching the chain
    try:
        element = Element(s)
    except MemoryError:
        logger.warning("Could not allocate element of %d characters", len(s))
        return False

    if tail:
        head.add_tail(element)
    else:
        head.add(element)
    return True


def insert_head(head: QueueHandle, s: str | None) -> bool:
    """
    Insert a copy of s at the head of the queue.

    Args:
        head: Queue anchor
        s: Text to store

    Returns:
        True on success, False if the queue is absent, s is None, or the
        element could not be allocated (the queue is then unchanged)
    """
    return _insert(head, s, tail=False)


def insert_tail(head: QueueHandle, s: str | None) -> bool:
    """Insert a copy of s at the tail of the queue. Same contract as insert_head()."""
    return _insert(head, s, tail=True)


def _remove(
    head: QueueHandle,
    sp: bytearray | None,
    bufsize: int,
    *,
    tail: bool,
) -> ElementHandle:
    if head is None or head.is_empty():
        return None

    element = cast(Element, head.prev if tail else head.next)
    if sp is not None:
        copy_value(element, sp, bufsize)

    # Remove only unlinks; ownership passes to the caller
    element.unlink()
    return element


def remove_head(
    head: QueueHandle,
    sp: bytearray | None = None,
    bufsize: int = DEFAULT_BUFSIZE,
) -> ElementHandle:
    """
    Remove the first element of the queue without releasing it.

    Args:
        head: Queue anchor
        sp: Optional buffer that receives the removed value, truncated to
            bufsize - 1 bytes and zero-terminated
        bufsize: Capacity of sp, terminator included

    Returns:
        The detached element (now owned by the caller), or None if the
        queue is absent or empty
    """
    return _remove(head, sp, bufsize, tail=False)


def remove_tail(
    head: QueueHandle,
    sp: bytearray | None = None,
    bufsize: int = DEFAULT_BUFSIZE,
) -> ElementHandle:
    """Remove the last element of the queue. Same contract as remove_head()."""
    return _remove(head, sp, bufsize, tail=True)


def size(head: QueueHandle) -> int:
    """Return the number of elements, counted by a full traversal."""
    if head is None:
        return 0
    count = 0
    for _ in head:
        count += 1
    return count


def delete_middle(head: QueueHandle) -> bool:
    """
    Delete the middle element, the one at 0-based index n // 2.

    Two cursors walk inward from both ends; the backward one stops on the
    middle. For six elements that is the fourth one.

    Returns:
        True if an element was deleted, False if the queue is absent or empty
    """
    if head is None or head.is_empty():
        return False

    forward = head.next
    backward = head.prev
    while forward is not backward and forward.next is not backward:
        forward = forward.next
        backward = backward.prev

    release(cast(Element, backward))
    return True


def delete_duplicates(head: QueueHandle, keep_first: bool = False) -> bool:
    """
    Delete every element whose value occurs more than once.

    The queue must already be sorted, so equal values are adjacent. Each run
    of two or more equal values is deleted entirely, first occurrence
    included; singletons keep their relative order.

    Args:
        head: Queue anchor
        keep_first: Keep the first element of each run, leaving one copy of
            every distinct value

    Returns:
        False if the queue is absent, True otherwise
    """
    if head is None:
        return False

    deleted = 0
    node = head.next
    while node is not head:
        run_end = node.next
        while run_end is not head and _value(run_end) == _value(node):
            run_end = run_end.next

        if run_end is node.next:
            node = run_end
            continue

        if keep_first:
            node = node.next
        while node is not run_end:
            successor = node.next
            release(cast(Element, node))
            deleted += 1
            node = successor

    if deleted:
        logger.debug("Deleted %d duplicate elements", deleted)
    return True


def swap_pairs(head: QueueHandle) -> None:
    """Swap every two adjacent elements by relinking; an odd last one stays."""
    if head is None:
        return

    first = head.next
    while first is not head and first.next is not head:
        second = first.next
        second.move_tail(first)
        first = first.next


def reverse(head: QueueHandle) -> None:
    """Reverse the queue in place by swapping the links of every node."""
    if head is None or head.is_empty():
        return

    for node in head:
        node.swap_links()
    head.swap_links()


def _precedes(a: ListHead, b: ListHead, descend: bool) -> bool:
    # Ties keep a first so equal values stay in input order.
    # str ordering by code point matches byte-wise UTF-8 ordering.
    if descend:
        return _value(a) >= _value(b)
    return _value(a) <= _value(b)


def _merge(a: ListHead, b: ListHead, end: ListHead, descend: bool) -> ListHead:
    """Merge two non-empty forward chains that both terminate at end."""
    if _precedes(a, b, descend):
        first, a = a, a.next
    else:
        first, b = b, b.next

    tail = first
    while a is not end and b is not end:
        if _precedes(a, b, descend):
            tail.next = a
            tail = a
            a = a.next
        else:
            tail.next = b
            tail = b
            b = b.next

    tail.next = a if a is not end else b
    return first


def _merge_sort(first: ListHead, end: ListHead, descend: bool) -> ListHead:
    """Sort a forward chain ending at end; prev links are ignored."""
    if first is end or first.next is end:
        return first

    slow = first
    fast = first.next
    while fast is not end and fast.next is not end:
        slow = slow.next
        fast = fast.next.next

    second = slow.next
    slow.next = end
    return _merge(
        _merge_sort(first, end, descend),
        _merge_sort(second, end, descend),
        end,
        descend,
    )


def sort(head: QueueHandle, descend: bool = False) -> None:
    """
    Stable merge sort of the queue by value, in place on the links.

    The forward chain already ends at the anchor, so it is sorted through
    ``next`` alone and the ``prev`` links are rebuilt in a final pass.

    Args:
        head: Queue anchor
        descend: Sort in descending instead of ascending order
    """
    if head is None or head.is_empty() or head.is_singular():
        return

    first = _merge_sort(head.next, head, descend)

    head.next = first
    prev = head
    node = first
    while node is not head:
        node.prev = prev
        prev = node
        node = node.next
    head.prev = prev


def values(head: QueueHandle) -> list[str]:
    """Return the queue's values from head to tail."""
    if head is None:
        return []
    return [_value(node) for node in head]


def check_links(head: QueueHandle) -> bool:
    """
    Verify the circular invariant for every node reachable from the anchor.

    Returns:
        True if ``n.next.prev is n`` and ``n.prev.next is n`` for every node
        and the walk returns to the anchor without revisiting a node
    """
    if head is None:
        return True

    seen: set[int] = set()
    node = head
    while True:
        if node.next.prev is not node or node.prev.next is not node:
            return False
        seen.add(id(node))
        node = node.next
        if node is head:
            return True
        if id(node) in seen:
            return False
