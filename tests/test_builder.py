import pytest
from pydantic import ValidationError

from seqlink.builders.sequence import SequenceBuilder
from seqlink.segment import SequenceVal


def test_default():
    """Test that a new builder is empty and unlinked."""
    builder = SequenceBuilder()

    assert builder.sequence == []
    assert builder.prev is None
    assert builder.next is None


@pytest.mark.parametrize(
    "pushes",
    [
        [[1, 2], [3]],
        [[], [1], []],
        [["a"], ["b", "a"], ["c"]],
        [],
    ],
)
def test_push_then_build(pushes: list[list]):
    """Test that a built segment contains every pushed element in order."""
    builder = SequenceBuilder()

    for raw in pushes:
        builder.push(raw)

    expected = tuple(element for raw in pushes for element in raw)

    assert builder.build().sequence == expected


def test_push_chains():
    """Test that push returns the same builder."""
    builder = SequenceBuilder()

    assert builder.push([1]).push([2]) is builder
    assert builder.sequence == [1, 2]


def test_push_accepts_iterables():
    builder = SequenceBuilder().push(range(3)).push(x for x in "ab")

    assert builder.sequence == [0, 1, 2, "a", "b"]


def test_push_copies_elements():
    """Test that mutating a pushed element does not change the builder."""
    raw = [[1]]

    builder = SequenceBuilder().push(raw)

    raw[0].append(2)

    assert builder.sequence == [[1]]


def test_build_is_idempotent():
    """Test that repeated builds return equal, independent values."""
    builder = SequenceBuilder().push([1, 2, 3])

    first = builder.build()
    second = builder.build()

    assert first == second
    assert first is not second
    assert builder.sequence == [1, 2, 3]


def test_build_does_not_consume():
    """Test that the builder keeps accumulating after a build."""
    builder = SequenceBuilder().push([1])

    before = builder.build()

    builder.push([2])

    assert before.sequence == (1,)
    assert builder.build().sequence == (1, 2)


def test_build_scenario():
    builder = SequenceBuilder[int]()
    builder.push([1, 2])
    builder.push([3])

    value = builder.build()

    assert isinstance(value, SequenceVal)
    assert value.sequence == (1, 2, 3)
    assert value.prev is None
    assert value.next is None
    assert list(value) == [1, 2, 3]


def test_build_keeps_links():
    """Test that links set on the builder are carried into the snapshot."""
    builder = SequenceBuilder(
        prev="3e2f3f36-2f5b-4d4c-9d0e-2b1f8a7f6c11",
        next="a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d",
    ).push([1])

    value = builder.build()

    assert value.prev == builder.prev
    assert value.next == builder.next


def test_link_assignment_validated():
    """Test that assigning something other than a UUID4 to a link fails."""
    builder = SequenceBuilder()

    with pytest.raises(ValidationError):
        builder.prev = "not-a-uuid"


def test_push_own_elements():
    """Test that a builder can push its own elements without growing forever."""
    builder = SequenceBuilder().push([1, 2])

    builder.push(builder.sequence)

    assert builder.sequence == [1, 2, 1, 2]
    assert builder.build().sequence == (1, 2, 1, 2)


def test_push_validates_parametrized():
    """Test that a parametrized builder rejects elements of the wrong type."""
    builder = SequenceBuilder[int]().push([1])

    with pytest.raises(ValidationError):
        builder.push(["a"])

    assert builder.sequence == [1]
