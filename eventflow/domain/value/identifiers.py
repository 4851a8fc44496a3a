"""Strongly typed identifiers for EventFlow domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

InviteId = NewType("InviteId", UUID)
EventId = NewType("EventId", UUID)
UserId = NewType("UserId", UUID)
