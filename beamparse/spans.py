# -*- coding: utf-8 -*-

"""Character offset intervals."""

from typing import NamedTuple, Union

__author__ = 'Beamparse Developers'
__all__ = [
    'Span',
]


_Span = NamedTuple('Span', [('start', int), ('end', int)])


class Span(_Span):
    """
    An immutable half-open interval [start, end) of character offsets.

    Spans compare and sort by (start, end), like the tuples they are.
    """

    __slots__ = ()

    def __new__(cls, start: int, end: int) -> 'Span':
        if start > end:
            raise ValueError("Span start %s is greater than its end %s." % (start, end))
        return super().__new__(cls, start, end)

    def __str__(self) -> str:
        return '%s..%s' % (self.start, self.end)

    def __repr__(self) -> str:
        return '%s(%r, %r)' % (type(self).__name__, self.start, self.end)

    @property
    def length(self) -> int:
        """The number of offsets covered by the span."""
        return self.end - self.start

    def contains(self, other: Union['Span', int]) -> bool:
        """Return whether the other span (or offset) lies entirely within this one."""
        if isinstance(other, Span):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other < self.end

    def intersects(self, other: 'Span') -> bool:
        """Return whether the two spans share any offsets, or one contains the other."""
        return (self.contains(other) or other.contains(self) or
                self.start <= other.start < self.end or
                self.start < other.end <= self.end)

    def crosses(self, other: 'Span') -> bool:
        """Return whether the spans overlap without either containing the other."""
        return (not self.contains(other) and not other.contains(self) and
                (self.start <= other.start < self.end or self.start < other.end <= self.end))
