"""Tests for the circular doubly-linked list primitives."""

from strqueue.linkedlist import ListHead


def assert_circular(head: ListHead) -> None:
    """Assert every node reachable from head is consistently linked."""
    node = head
    while True:
        assert node.next.prev is node
        assert node.prev.next is node
        node = node.next
        if node is head:
            break


def test_new_node_is_self_circular() -> None:
    """Test that a fresh node links to itself on both sides."""
    node = ListHead()
    assert node.next is node
    assert node.prev is node
    assert node.is_empty()
    assert not node.is_singular()


def test_empty_anchor() -> None:
    """Test empty anchor behavior."""
    head = ListHead()
    assert head.first() is None
    assert head.last() is None
    assert list(head) == []
    assert list(reversed(head)) == []


def test_add() -> None:
    """Test linking nodes after the anchor."""
    head = ListHead()
    node1 = ListHead()
    node2 = ListHead()

    head.add(node1)
    assert head.is_singular()
    head.add(node2)
    assert not head.is_singular()

    # Most recently added comes first
    assert list(head) == [node2, node1]
    assert head.first() is node2
    assert head.last() is node1
    assert_circular(head)


def test_add_tail() -> None:
    """Test linking nodes before the anchor."""
    head = ListHead()
    nodes = [ListHead() for _ in range(3)]
    for node in nodes:
        head.add_tail(node)

    assert list(head) == nodes
    assert list(reversed(head)) == nodes[::-1]
    assert_circular(head)


def test_unlink_middle() -> None:
    """Test unlinking a node between two others."""
    head = ListHead()
    nodes = [ListHead() for _ in range(3)]
    for node in nodes:
        head.add_tail(node)

    nodes[1].unlink()
    assert list(head) == [nodes[0], nodes[2]]
    assert_circular(head)

    # Unlinked node is detached, not dangling
    assert nodes[1].next is nodes[1]
    assert nodes[1].prev is nodes[1]


def test_unlink_last_node_empties_list() -> None:
    """Test that unlinking the only node collapses to the empty anchor."""
    head = ListHead()
    node = ListHead()
    head.add(node)

    node.unlink()
    assert head.is_empty()
    assert head.next is head
    assert head.prev is head


def test_unlink_during_iteration() -> None:
    """Test that the current node may be unlinked while iterating."""
    head = ListHead()
    nodes = [ListHead() for _ in range(5)]
    for node in nodes:
        head.add_tail(node)

    visited = []
    for node in head:
        visited.append(node)
        node.unlink()

    assert visited == nodes
    assert head.is_empty()


def test_move_and_move_tail() -> None:
    """Test relinking a node relative to another position."""
    head = ListHead()
    a, b, c = ListHead(), ListHead(), ListHead()
    for node in (a, b, c):
        head.add_tail(node)

    c.move(head)
    assert list(head) == [c, a, b]

    c.move_tail(head)
    assert list(head) == [a, b, c]

    # Moving before a non-anchor node
    c.move_tail(a)
    assert list(head) == [c, a, b]
    assert_circular(head)


def test_swap_links() -> None:
    """Test that swapping links on every node reverses traversal."""
    head = ListHead()
    nodes = [ListHead() for _ in range(4)]
    for node in nodes:
        head.add_tail(node)

    for node in list(head):
        node.swap_links()
    head.swap_links()

    assert list(head) == nodes[::-1]
    assert_circular(head)


def test_init_resets_node() -> None:
    """Test that init() detaches an anchor's view of its chain."""
    head = ListHead()
    head.add(ListHead())
    head.init()
    assert head.is_empty()
