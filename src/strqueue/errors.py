"""Exception classes for strqueue."""


class StrQueueError(Exception):
    """Base exception for all strqueue errors."""


class OutOfMemoryError(StrQueueError):
    """Raised when an element could not be allocated; the queue is left unchanged."""


class EmptyQueueError(StrQueueError):
    """Raised when removing or deleting from an empty queue."""


class InvalidHandleError(StrQueueError):
    """Raised when an operation needs a live queue or element and gets none."""


class QueueClosedError(InvalidHandleError):
    """Raised when operations are attempted on a closed queue."""


class InvalidValueError(StrQueueError, TypeError):
    """Raised when a value that is not text is pushed."""
