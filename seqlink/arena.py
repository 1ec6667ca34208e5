from collections.abc import Iterator
from uuid import uuid4

import structlog

from seqlink.errors import Edge, EdgeOccupiedError, Role, SegmentNotFoundError
from seqlink.models import SegmentHandle
from seqlink.segment import SequenceVal

logger = structlog.get_logger("arena")


class SegmentArena:
    """A store of linkable segments addressed by handle.

    Segments in a chain refer to their neighbours through the ``prev`` and ``next``
    handles rather than holding each other directly. Linking two segments replaces
    both stored values, so anyone holding a handle sees the new links on their next
    lookup.
    """

    def __init__(self) -> None:
        self._segments_by_id: dict[SegmentHandle, SequenceVal] = {}

    def __contains__(self, handle: object) -> bool:
        return handle in self._segments_by_id

    def __getitem__(self, handle: SegmentHandle) -> SequenceVal:
        try:
            return self._segments_by_id[handle]
        except KeyError:
            raise SegmentNotFoundError(handle) from None

    def __len__(self) -> int:
        return len(self._segments_by_id)

    @property
    def handles(self) -> list[SegmentHandle]:
        """The handles of all stored segments in insertion order."""
        return list(self._segments_by_id.keys())

    def insert(self, segment: SequenceVal) -> SegmentHandle:
        """Store ``segment`` and return the handle it can be looked up by."""
        handle = uuid4()

        self._segments_by_id[handle] = segment

        logger.debug("Inserted segment.", handle=str(handle), length=len(segment))

        return handle

    def get(self, handle: SegmentHandle) -> SequenceVal | None:
        """Get the segment associated with ``handle``.

        Returns ``None`` if no such segment exists.
        """
        return self._segments_by_id.get(handle)

    def link(self, first: SegmentHandle, second: SegmentHandle) -> None:
        """Link ``first`` to ``second`` without copying their elements.

        Afterwards ``first.next`` is ``second`` and ``second.prev`` is ``first``.

        :param first: the handle of the segment that comes first
        :param second: the handle of the segment that comes second
        :raises SegmentNotFoundError: if either handle is unknown
        :raises EdgeOccupiedError: if ``first.next`` or ``second.prev`` is set
        """
        link_logger = logger.bind(first=str(first), second=str(second))

        if self[first].next is not None:
            link_logger.error("First segment is already linked to a next segment.")
            raise EdgeOccupiedError(Role.FIRST, Edge.NEXT)

        if self[second].prev is not None:
            link_logger.error("Second segment is already linked to a previous segment.")
            raise EdgeOccupiedError(Role.SECOND, Edge.PREV)

        # Re-read second after updating first in case they are the same segment.
        self._segments_by_id[first] = self[first].model_copy(update={"next": second})
        self._segments_by_id[second] = self[second].model_copy(update={"prev": first})

        link_logger.debug("Linked segments.")

    def next_of(self, handle: SegmentHandle) -> SegmentHandle | None:
        """Return the handle linked after ``handle``, if any."""
        return self[handle].next

    def prev_of(self, handle: SegmentHandle) -> SegmentHandle | None:
        """Return the handle linked before ``handle``, if any."""
        return self[handle].prev

    def walk(
        self, handle: SegmentHandle, reverse: bool = False
    ) -> Iterator[SegmentHandle]:
        """Yield the handles of the chain starting at ``handle``.

        ``next`` links are followed, or ``prev`` links if ``reverse`` is set. Each
        handle is yielded once, so looped chains end when they return to a segment
        that has already been visited.

        Segments may be inserted with links to handles this arena does not hold,
        such as a merged segment that kept ``head.prev``. The walk stops before
        such a handle.

        :raises SegmentNotFoundError: if ``handle`` itself is unknown
        """
        if handle not in self._segments_by_id:
            raise SegmentNotFoundError(handle)

        edge = Edge.PREV if reverse else Edge.NEXT
        visited = set()

        current: SegmentHandle | None = handle

        while current in self._segments_by_id and current not in visited:
            visited.add(current)

            yield current

            current = getattr(self._segments_by_id[current], edge)

    def head_of(self, handle: SegmentHandle) -> SegmentHandle:
        """Return the first segment of the chain that contains ``handle``."""
        head = handle

        for head in self.walk(handle, reverse=True):
            pass

        return head
