"""Type definitions for strqueue."""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from strqueue.element import Element
    from strqueue.linkedlist import ListHead

# Handles accepted by the queue API; None stands for an absent handle
QueueHandle: TypeAlias = "ListHead | None"
ElementHandle: TypeAlias = "Element | None"

# Capacity used by remove_head()/remove_tail() when the caller gives none
DEFAULT_BUFSIZE = 1024
