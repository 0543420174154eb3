"""Queue elements: an owned text value carried by its own list node."""

from strqueue.linkedlist import ListHead
from strqueue.types import ElementHandle


class Element(ListHead):
    """
    A queue element. The element is its own list node.

    The stored value is a private copy of the caller's text, cut at the first
    NUL character so it behaves like a terminated string.
    """

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        super().__init__()
        self.value: str = value.split("\0", 1)[0]

    def __repr__(self) -> str:
        return f"Element({self.value!r})"


def release(element: ElementHandle) -> None:
    """
    Release an element, ending its life.

    A still-linked element is unlinked first so the chain it belonged to
    stays consistent. Releasing None does nothing.
    """
    if element is None:
        return
    if element.next is not element:
        element.unlink()
    element.value = ""


def copy_value(element: Element, buf: bytearray, bufsize: int) -> int:
    """
    Copy an element's value into a caller buffer, bounded and terminated.

    At most ``bufsize - 1`` bytes of the UTF-8 encoded value are written,
    followed by a zero byte. ``bufsize`` is clamped to ``len(buf)``. Lone
    surrogates are encoded as their code points (``surrogatepass``).

    Args:
        element: Element whose value is copied
        buf: Destination buffer
        bufsize: Capacity of the destination, terminator included

    Returns:
        Number of value bytes written (terminator excluded)
    """
    capacity = min(bufsize, len(buf))
    if capacity <= 0:
        return 0
    data = element.value.encode("utf-8", errors="surrogatepass")[: capacity - 1]
    buf[: len(data)] = data
    buf[len(data)] = 0
    return len(data)
