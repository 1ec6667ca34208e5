import copy
from collections.abc import Iterable
from typing import Generic, Self

import structlog
from pydantic import ConfigDict, Field

from seqlink.models import SequenceModel, T
from seqlink.segment import SequenceVal

logger = structlog.get_logger("builders.sequence")


class SequenceBuilder(SequenceModel[T], Generic[T]):
    """Represents a mutable sequence segment that has not been finalized."""

    model_config = ConfigDict(validate_assignment=True)

    sequence: list[T] = Field(default_factory=list)
    """The elements pushed so far."""

    def push(self, raw: Iterable[T]) -> Self:
        """Append a copy of every element in ``raw`` and return the builder.

        Links are left alone, so calls can be chained freely::

            builder.push([1, 2]).push([3])

        ``raw`` is copied before anything is appended, so a builder can push its own
        elements. The new list is assigned back to the model, which validates the
        elements of a parametrized builder such as ``SequenceBuilder[int]``.

        :raises ValidationError: if an element does not match the builder's type
        """
        pushed = [copy.copy(element) for element in raw]

        self.sequence = [*self.sequence, *pushed]

        return self

    def build(self) -> SequenceVal[T]:
        """Return an immutable snapshot of the builder.

        The builder is not changed and can keep accumulating elements.
        """
        logger.debug(
            "Building sequence segment.",
            length=len(self.sequence),
            prev=self.prev,
            next=self.next,
        )

        return SequenceVal(
            sequence=tuple(copy.copy(element) for element in self.sequence),
            prev=self.prev,
            next=self.next,
        )
