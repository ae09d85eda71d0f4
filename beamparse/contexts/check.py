from typing import List, Optional, Sequence

from beamparse.labels import END_OF_SENTENCE
from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'CheckContextGenerator',
]


class CheckContextGenerator:
    """Generates the predictive context for deciding whether a sequence of constituents is
    complete, i.e. should be reduced to a single new constituent."""

    @staticmethod
    def _surround(constituent: Optional[Parse], offset: int, type: str,
                  features: List[str]) -> None:
        if constituent is None:
            features.append('s%s=%s|%s|%s' % (offset, END_OF_SENTENCE, type, END_OF_SENTENCE))
            features.append('s%s*=%s|%s' % (offset, type, END_OF_SENTENCE))
        else:
            head = constituent.head
            features.append('s%s=%s|%s|%s' % (offset, head, type, head.type))
            features.append('s%s*=%s|%s' % (offset, type, head.type))

    @staticmethod
    def _check_constituent(constituent: Parse, position: str, type: str,
                           features: List[str]) -> None:
        features.append('c%s=%s|%s|%s' % (position, constituent.type, constituent.head, type))
        features.append('c%s*=%s|%s' % (position, constituent.type, type))

    @staticmethod
    def _check_pair(first: Parse, last: Parse, type: str, features: List[str]) -> None:
        features.append('cil=%s,%s|%s,%s|%s' % (type, first.type, first.head, last.type, last.head))
        features.append('ci*l=%s,%s,%s|%s' % (type, first.type, last.type, last.head))
        features.append('cil*=%s,%s|%s,%s' % (type, first.type, first.head, last.type))
        features.append('ci*l*=%s,%s,%s' % (type, first.type, last.type))

    def get_context(self, constituents: Sequence[Parse], type: str, first: int,
                    last: int) -> List[str]:
        """
        Return the context for deciding whether the constituents from the first index through the
        last (inclusive) form a complete constituent of the given type.
        """
        count = len(constituents)
        features = ['default']

        start = constituents[first]
        end = constituents[last]
        self._check_constituent(start, 'begin', type, features)
        self._check_constituent(end, 'last', type, features)

        production = [type, '->']
        for index in range(first, last):
            constituent = constituents[index]
            self._check_pair(constituent, end, type, features)
            production.append(constituent.type)
            production.append(',')
        production.append(end.type)
        features.append(''.join(production))

        previous_previous = constituents[first - 2] if first - 2 >= 0 else None
        previous = constituents[first - 1] if first - 1 >= 0 else None
        following = constituents[last + 1] if last + 1 < count else None
        following_following = constituents[last + 2] if last + 2 < count else None

        self._surround(previous, -1, type, features)
        self._surround(previous_previous, -2, type, features)
        self._surround(following, 1, type, features)
        self._surround(following_following, 2, type, features)
        return features
