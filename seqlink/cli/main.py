import itertools

import click

from seqlink.arena import SegmentArena
from seqlink.builders.sequence import SequenceBuilder
from seqlink.combine import concat as concat_segments
from seqlink.logs import configure_logger
from seqlink.segment import SequenceVal


class ElementListParamType(click.ParamType):
    """A comma-separated list of integers, such as ``1,2,3``."""

    name = "elements"

    def convert(self, value, param, ctx) -> list[int]:
        if isinstance(value, list):
            return value

        try:
            return [int(part) for part in value.split(",") if part.strip()]
        except ValueError:
            self.fail(f"{value!r} is not a comma-separated list of integers", param, ctx)


ELEMENT_LIST = ElementListParamType()


def build_segment(elements: list[int]) -> SequenceVal[int]:
    """Build a segment containing ``elements``."""
    return SequenceBuilder[int]().push(elements).build()


@click.group()
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    count=True,
    help="Increase log verbosity. Pass twice for debug output.",
)
@click.option("--no-color", is_flag=True, help="Disable colored log output.")
def entry(verbosity: int, no_color: bool) -> None:
    """Build, merge and link sequence segments."""
    configure_logger(verbosity, no_color)


@entry.command()
@click.argument("head", type=ELEMENT_LIST)
@click.argument("tail", type=ELEMENT_LIST)
def concat(head: list[int], tail: list[int]) -> None:
    """Merge HEAD and TAIL into a single segment."""
    merged = concat_segments(build_segment(head), build_segment(tail))

    click.echo(list(merged))


@entry.command()
@click.argument("segments", nargs=-1, required=True, type=ELEMENT_LIST)
def chain(segments: tuple[list[int], ...]) -> None:
    """Link SEGMENTS in order and print the resulting chain."""
    arena = SegmentArena()

    handles = [arena.insert(build_segment(elements)) for elements in segments]

    for first, second in itertools.pairwise(handles):
        arena.link(first, second)

    click.echo(
        " -> ".join(
            str(list(arena[handle]))
            for handle in arena.walk(arena.head_of(handles[-1]))
        )
    )
