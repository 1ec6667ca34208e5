from enum import StrEnum


class Edge(StrEnum):
    """A link slot on a segment."""

    PREV = "prev"
    NEXT = "next"


class Role(StrEnum):
    """The part a segment plays in a concat or link operation."""

    HEAD = "head"
    TAIL = "tail"
    FIRST = "first"
    SECOND = "second"


class EdgeOccupiedError(ValueError):
    """Raised when a joining edge of a segment is already linked.

    ``concat`` requires ``head.next`` and ``tail.prev`` to be free, and ``link``
    requires ``first.next`` and ``second.prev`` to be free. The check happens
    before anything is built or mutated.
    """

    def __init__(self, role: Role, edge: Edge) -> None:
        self.role = role
        self.edge = edge

        super().__init__(f"{role}.{edge} is not None.")


class SegmentNotFoundError(KeyError):
    """Raised when a handle does not name a segment in an arena."""
