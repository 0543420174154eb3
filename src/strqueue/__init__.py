"""strqueue - Queue of owned strings on an intrusive circular doubly-linked list."""

from strqueue.core import (
    check_links,
    create,
    delete_duplicates,
    delete_middle,
    destroy,
    insert_head,
    insert_tail,
    release,
    remove_head,
    remove_tail,
    reverse,
    size,
    sort,
    swap_pairs,
    values,
)
from strqueue.element import Element, copy_value
from strqueue.errors import (
    EmptyQueueError,
    InvalidHandleError,
    InvalidValueError,
    OutOfMemoryError,
    QueueClosedError,
    StrQueueError,
)
from strqueue.linkedlist import ListHead
from strqueue.stringqueue import StringQueue
from strqueue.types import DEFAULT_BUFSIZE

__version__ = "0.0.1"

__all__ = [
    "StringQueue",
    "ListHead",
    "Element",
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
    "copy_value",
    "DEFAULT_BUFSIZE",
    "StrQueueError",
    "OutOfMemoryError",
    "EmptyQueueError",
    "InvalidHandleError",
    "QueueClosedError",
    "InvalidValueError",
]
