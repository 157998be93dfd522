"""
Integer range generation for script axes.

A RangeSpec is pure data; every call to generate() starts a fresh sequence
from the top, so the same spec can be iterated any number of times.
"""

from collections.abc import Iterator

from attrs import field, frozen

from magickscript.exceptions import InvalidStepError


@frozen
class RangeSpec:
    """Start, exclusive end and step of an integer sequence.

    Params:
        start: First value of the sequence
        end: Exclusive bound, None for an unbounded sequence
        step: Non-zero increment; a negative step counts down towards end
    """

    start: int = 0
    end: int | None = None
    step: int = field(default=1)

    @step.validator
    def _check_step(self, attribute, value):
        if value == 0:
            raise InvalidStepError()

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    def __len__(self) -> int:
        if self.end is None:
            raise TypeError("unbounded RangeSpec has no length")
        return max(0, -((self.start - self.end) // self.step))

    def __iter__(self) -> Iterator[int]:
        return generate(self)


@frozen
class AxisRange:
    """A RangeSpec bound to a named axis."""

    axis: str
    spec: RangeSpec


def _before_end(value: int, spec: RangeSpec) -> bool:
    if spec.end is None:
        return True
    if spec.step > 0:
        return value < spec.end
    return value > spec.end


def generate(spec: RangeSpec) -> Iterator[int]:
    """
    Yield the values described by a RangeSpec.

    Params:
        spec: Range to generate

    Returns:
        Lazy iterator over start, start+step, ... up to (excluding) end
    """
    value = spec.start
    while _before_end(value, spec):
        yield value
        value += spec.step


def cycle(spec: RangeSpec) -> Iterator[int]:
    """
    Repeat generate(spec) forever.

    An empty spec yields nothing instead of spinning.
    """
    while True:
        empty = True
        for value in generate(spec):
            empty = False
            yield value
        if empty:
            return
