"""StringQueue: object interface over the handle-based queue operations."""

import codecs
from collections.abc import Iterable, Iterator
from types import TracebackType

from strqueue import core
from strqueue.errors import (
    EmptyQueueError,
    InvalidValueError,
    OutOfMemoryError,
    QueueClosedError,
)
from strqueue.linkedlist import ListHead


class StringQueue:
    """
    Double-ended queue of strings stored in a circular doubly-linked list.

    Wraps one list anchor and reports failures as exceptions, where the
    module-level functions in ``strqueue.core`` return False/None instead.
    Not thread-safe: callers sharing a queue across threads must serialize
    access themselves.
    """

    def __init__(self, values: Iterable[str] = (), *, bufsize: int | None = None) -> None:
        """
        Initialize the queue.

        Args:
            values: Initial values, inserted at the tail in order
            bufsize: If set, values returned by pop_head()/pop_tail() are
                copied through a buffer of this capacity, i.e. truncated to
                bufsize - 1 UTF-8 bytes. None returns values unmodified.

        Raises:
            ValueError: If bufsize is smaller than 1
            OutOfMemoryError: If the queue could not be allocated
        """
        if bufsize is not None and bufsize < 1:
            raise ValueError(f"bufsize must be at least 1, got {bufsize}")
        self._bufsize = bufsize

        head = core.create()
        if head is None:
            raise OutOfMemoryError("Could not allocate queue")
        self._head: ListHead | None = head

        for value in values:
            self.push_tail(value)

    def close(self) -> None:
        """Release every element. Further operations raise QueueClosedError."""
        if self._head is None:
            return
        core.destroy(self._head)
        self._head = None

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._head is None

    def __enter__(self) -> "StringQueue":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.close()

    def _live_head(self) -> ListHead:
        if self._head is None:
            raise QueueClosedError("Cannot operate on a closed queue")
        return self._head

    def _push(self, value: str, *, tail: bool) -> None:
        head = self._live_head()
        if not isinstance(value, str):
            raise InvalidValueError(f"Queue values must be str, not {type(value).__name__}")
        inserted = core.insert_tail(head, value) if tail else core.insert_head(head, value)
        if not inserted:
            raise OutOfMemoryError(f"Could not allocate element for {value[:32]!r}")

    def push_head(self, value: str) -> None:
        """
        Insert value at the head of the queue.

        Raises:
            InvalidValueError: If value is not a str
            OutOfMemoryError: If the element could not be allocated
            QueueClosedError: If the queue is closed
        """
        self._push(value, tail=False)

    def push_tail(self, value: str) -> None:
        """Insert value at the tail of the queue. Raises like push_head()."""
        self._push(value, tail=True)

    def _pop(self, *, tail: bool) -> str:
        head = self._live_head()
        remove = core.remove_tail if tail else core.remove_head
        buf = bytearray(self._bufsize) if self._bufsize is not None else None
        element = remove(head, buf, len(buf)) if buf is not None else remove(head)
        if element is None:
            raise EmptyQueueError("Cannot pop from an empty queue")

        if buf is None:
            value = element.value
        else:
            # A cut inside a multi-byte sequence drops the partial character
            decoder = codecs.getincrementaldecoder("utf-8")(errors="surrogatepass")
            value = decoder.decode(bytes(buf[: buf.index(0)]), final=False)
        core.release(element)
        return value

    def pop_head(self) -> str:
        """
        Remove and return the value at the head of the queue.

        Raises:
            EmptyQueueError: If the queue is empty
            QueueClosedError: If the queue is closed
        """
        return self._pop(tail=False)

    def pop_tail(self) -> str:
        """Remove and return the value at the tail of the queue. Raises like pop_head()."""
        return self._pop(tail=True)

    def delete_middle(self) -> None:
        """
        Delete the element at index len(self) // 2.

        Raises:
            EmptyQueueError: If the queue is empty
            QueueClosedError: If the queue is closed
        """
        if not core.delete_middle(self._live_head()):
            raise EmptyQueueError("Cannot delete from an empty queue")

    def delete_duplicates(self, *, keep_first: bool = False) -> None:
        """Delete every value that occurs more than once. The queue must be sorted."""
        core.delete_duplicates(self._live_head(), keep_first)

    def swap_pairs(self) -> None:
        """Swap every two adjacent elements."""
        core.swap_pairs(self._live_head())

    def reverse(self) -> None:
        """Reverse the queue in place."""
        core.reverse(self._live_head())

    def sort(self, *, descend: bool = False) -> None:
        """Stable in-place sort by value."""
        core.sort(self._live_head(), descend)

    def __len__(self) -> int:
        """Return the number of elements in the queue."""
        return core.size(self._live_head())

    def __bool__(self) -> bool:
        """Return True if the queue is non-empty."""
        return not self._live_head().is_empty()

    def __iter__(self) -> Iterator[str]:
        """Iterate a snapshot of the values from head to tail."""
        return iter(core.values(self._live_head()))

    def __reversed__(self) -> Iterator[str]:
        """Iterate a snapshot of the values from tail to head."""
        return reversed(core.values(self._live_head()))

    def __repr__(self) -> str:
        if self._head is None:
            return "StringQueue(<closed>)"
        return f"StringQueue({core.values(self._head)!r})"
