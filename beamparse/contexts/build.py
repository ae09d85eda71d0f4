from typing import List, Optional, Sequence

from beamparse.labels import END_OF_SENTENCE, START_PREFIX
from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'BuildContextGenerator',
]


class BuildContextGenerator:
    """Generates the predictive context for deciding how a constituent is combined with its
    neighbors into larger constituents."""

    # Pairs of (closing token, opening token) and the predicate emitted when they match up
    PUNCTUATION_MATCHES = (
        ('-RRB-', '-LRB-', 'bracketsmatch'),
        ('-RCB-', '-LCB-', 'bracketsmatch'),
        ("''", '``', 'quotesmatch'),
        ("'", '`', 'quotesmatch'),
        (',', ',', 'iscomma'),
    )

    @staticmethod
    def make_constituent(constituent: Optional[Parse], offset: int) -> str:
        if constituent is None:
            return '%s=%s|%s|%s' % (offset, END_OF_SENTENCE, END_OF_SENTENCE, END_OF_SENTENCE)
        if offset < 0:
            return '%s=%s|%s|%s' % (offset, constituent.label or '', constituent.type,
                                    constituent.head)
        return '%s=%s|%s' % (offset, constituent.type, constituent.head)

    @staticmethod
    def make_constituent_back_off(constituent: Optional[Parse], offset: int) -> str:
        if constituent is None:
            return '%s*=%s|%s' % (offset, END_OF_SENTENCE, END_OF_SENTENCE)
        if offset < 0:
            return '%s*=%s|%s' % (offset, constituent.label or '', constituent.type)
        return '%s*=%s' % (offset, constituent.type)

    def get_context(self, constituents: Sequence[Parse], index: int) -> List[str]:
        """Return the context for building the constituent at the given index out of the
        constituents which have yet to be combined."""
        count = len(constituents)
        window = [constituents[index + offset] if 0 <= index + offset < count else None
                  for offset in range(-2, 3)]

        p2, p1, c0, n1, n2 = [self.make_constituent(constituent, offset)
                              for offset, constituent in zip(range(-2, 3), window)]
        p2b, p1b, c0b, n1b, n2b = [self.make_constituent_back_off(constituent, offset)
                                   for offset, constituent in zip(range(-2, 3), window)]

        features = ['default', p2, p2b, p1, p1b, c0, c0b, n1, n1b, n2, n2b]

        # cons(-1,0), cons(0,1)
        features.append(p1 + ',' + c0)
        features.append(p1b + ',' + c0)
        features.append(p1 + ',' + c0b)
        features.append(p1b + ',' + c0b)

        features.append(c0 + ',' + n1)
        features.append(c0b + ',' + n1)
        features.append(c0 + ',' + n1b)
        features.append(c0b + ',' + n1b)

        # cons(-2,-1,0), cons(-1,0,1), cons(0,1,2)
        features.append(p2 + ',' + p1 + ',' + c0)
        features.append(p2b + ',' + p1 + ',' + c0)
        features.append(p2 + ',' + p1b + ',' + c0)
        features.append(p2b + ',' + p1b + ',' + c0)
        features.append(p2b + ',' + p1b + ',' + c0b)

        features.append(p1 + ',' + c0 + ',' + n1)
        features.append(p1b + ',' + c0 + ',' + n1)
        features.append(p1 + ',' + c0 + ',' + n1b)
        features.append(p1b + ',' + c0 + ',' + n1b)
        features.append(p1b + ',' + c0b + ',' + n1b)

        features.append(c0 + ',' + n1 + ',' + n2)
        features.append(c0 + ',' + n1b + ',' + n2)
        features.append(c0 + ',' + n1 + ',' + n2b)
        features.append(c0 + ',' + n1b + ',' + n2b)
        features.append(c0b + ',' + n1b + ',' + n2b)

        self._add_punctuation_features(constituents, index, features)
        return features

    def _add_punctuation_features(self, constituents: Sequence[Parse], index: int,
                                  features: List[str]) -> None:
        word = str(constituents[index])
        for closing, opening, predicate in self.PUNCTUATION_MATCHES:
            if word != closing:
                continue
            for previous in reversed(constituents[:index]):
                if str(previous) == opening:
                    features.append(predicate)
                    break
                if (previous.label or '').startswith(START_PREFIX):
                    break

        if word == '.' and index == len(constituents) - 1:
            for previous_index in range(index - 1, -1, -1):
                if (constituents[previous_index].label or '').startswith(START_PREFIX):
                    if previous_index == 0:
                        features.append('endofsentence')
                    break
