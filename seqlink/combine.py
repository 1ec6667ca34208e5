import structlog

from seqlink.errors import Edge, EdgeOccupiedError, Role
from seqlink.models import T
from seqlink.segment import SequenceVal

logger = structlog.get_logger("combine")


def concat(head: SequenceVal[T], tail: SequenceVal[T]) -> SequenceVal[T]:
    """Merge two segments into a new segment.

    The elements of ``head`` are followed by the elements of ``tail``. The new
    segment keeps ``head.prev`` and ``tail.next``. Neither input is modified.

    :param head: the segment whose elements come first
    :param tail: the segment whose elements come last
    :return: the merged segment
    :raises EdgeOccupiedError: if ``head.next`` or ``tail.prev`` is set
    """
    concat_logger = logger.bind(head_length=len(head), tail_length=len(tail))

    if head.next is not None:
        concat_logger.error("Head segment is already linked to a next segment.")
        raise EdgeOccupiedError(Role.HEAD, Edge.NEXT)

    if tail.prev is not None:
        concat_logger.error("Tail segment is already linked to a previous segment.")
        raise EdgeOccupiedError(Role.TAIL, Edge.PREV)

    buffer = []

    for element in head.iter():
        buffer.append(element)

    for element in tail.iter():
        buffer.append(element)

    concat_logger.debug("Concatenated segments.", length=len(buffer))

    return SequenceVal(sequence=tuple(buffer), prev=head.prev, next=tail.next)
