"""Basic usage example for strqueue."""

import logging

from strqueue import StringQueue


def main() -> None:
    """Demonstrate queue operations."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== Basic StringQueue Example ===\n")

    with StringQueue(["pear", "apple", "fig", "apple", "kiwi"]) as queue:
        print(f"Queue: {list(queue)} (size {len(queue)})")

        queue.sort()
        print(f"Sorted: {list(queue)}")

        queue.delete_duplicates()
        print(f"Without duplicates: {list(queue)}")

        queue.push_head("banana")
        queue.push_tail("plum")
        print(f"After pushes: {list(queue)}")

        queue.swap_pairs()
        print(f"Pairs swapped: {list(queue)}")

        queue.reverse()
        print(f"Reversed: {list(queue)}")

        queue.delete_middle()
        print(f"Middle deleted: {list(queue)}\n")

        while queue:
            print(f"  Popped {queue.pop_head()}")

    print(f"\nClosed: {queue.closed}")


if __name__ == "__main__":
    main()
