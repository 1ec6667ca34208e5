import copy
from collections.abc import Iterator
from typing import Generic

from pydantic import ConfigDict

from seqlink.models import SequenceModel, T


class SequenceVal(SequenceModel[T], Generic[T]):
    """An immutable snapshot of a sequence segment.

    Values are produced by :meth:`SequenceBuilder.build` and :func:`concat`. Their
    ``prev`` and ``next`` handles only change when an arena links the nodes it
    holds, which it does by storing a replacement value.

    Iterating a segment yields its elements rather than pydantic's field pairs, so
    ``dict(value)`` does not work. Use ``value.model_dump()`` to get the fields.
    """

    model_config = ConfigDict(frozen=True)

    sequence: tuple[T, ...] = ()
    """The elements of the segment."""

    def iter(self) -> "SequenceValIterator[T]":
        """Return a new single-pass iterator over this segment's own elements."""
        return SequenceValIterator(self)

    def __iter__(self) -> "SequenceValIterator[T]":
        return self.iter()

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        return "".join(repr(element) for element in self.sequence)


class SequenceValIterator(Iterator[T], Generic[T]):
    """A forward-only cursor over the elements of one :class:`SequenceVal`.

    Each element is returned as a shallow copy. The iterator never follows the
    segment's ``prev`` or ``next`` links, and once exhausted it stays exhausted.
    """

    def __init__(self, owner: SequenceVal[T]) -> None:
        self._owner = owner
        self._cursor = 0

    def __next__(self) -> T:
        if self._cursor < len(self._owner.sequence):
            item = copy.copy(self._owner.sequence[self._cursor])
            self._cursor += 1

            return item

        raise StopIteration
