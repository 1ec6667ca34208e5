import pytest
import structlog

from seqlink.arena import SegmentArena
from seqlink.builders.sequence import SequenceBuilder
from seqlink.segment import SequenceVal


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield

    structlog.reset_defaults()


@pytest.fixture()
def arena() -> SegmentArena:
    return SegmentArena()


@pytest.fixture()
def build_from():
    """Return a function that builds a segment from a list of elements."""

    def func(elements: list) -> SequenceVal:
        return SequenceBuilder().push(elements).build()

    return func
