from collections.abc import Sequence
from typing import Generic, TypeAlias, TypeVar

from pydantic import UUID4, BaseModel

T = TypeVar("T")

SegmentHandle: TypeAlias = UUID4
"""The id of a segment held by a :class:`~seqlink.arena.SegmentArena`."""


class SequenceModel(BaseModel, Generic[T]):
    """A class representing the fields of a sequence segment."""

    sequence: Sequence[T]
    """The elements of the segment, in insertion order."""

    prev: SegmentHandle | None = None
    """The segment linked before this one.

    This is `None` if the segment is the head of its chain or has not been linked.
    """

    next: SegmentHandle | None = None
    """The segment linked after this one.

    This is `None` if the segment is the tail of its chain or has not been linked.
    """
