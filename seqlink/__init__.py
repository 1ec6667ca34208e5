from seqlink.arena import SegmentArena
from seqlink.builders.sequence import SequenceBuilder
from seqlink.combine import concat
from seqlink.errors import Edge, EdgeOccupiedError, Role, SegmentNotFoundError
from seqlink.models import SegmentHandle
from seqlink.segment import SequenceVal, SequenceValIterator

__all__ = [
    "Edge",
    "EdgeOccupiedError",
    "Role",
    "SegmentArena",
    "SegmentHandle",
    "SegmentNotFoundError",
    "SequenceBuilder",
    "SequenceVal",
    "SequenceValIterator",
    "concat",
]
