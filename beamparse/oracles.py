# -*- coding: utf-8 -*-

"""
Interfaces for the collaborators the parser consults: the probability models that score build and
check decisions, the part of speech tagger, and the chunker.
"""

import math
from abc import ABCMeta, abstractmethod
from typing import Iterable, List, Sequence as SequenceType, Tuple

__author__ = 'Beamparse Developers'
__all__ = [
    'ProbabilityModel',
    'Sequence',
    'ParserTagger',
    'ParserChunker',
    'log_probability',
]


def log_probability(probability: float) -> float:
    """Return the natural log of a probability, with a probability of zero mapping to -inf."""
    if probability <= 0:
        return -math.inf
    return math.log(probability)


class ProbabilityModel(metaclass=ABCMeta):
    """Abstract interface for a model assigning probabilities to a fixed set of outcomes, given a
    context of string predicates."""

    @abstractmethod
    def evaluate(self, context: SequenceType[str]) -> SequenceType[float]:
        """Return the probability of each outcome, indexed like the outcome names."""
        raise NotImplementedError()

    @property
    @abstractmethod
    def outcome_count(self) -> int:
        """The number of outcomes the model distinguishes."""
        raise NotImplementedError()

    @abstractmethod
    def get_outcome_name(self, index: int) -> str:
        """Return the name of the outcome at the given index."""
        raise NotImplementedError()

    @abstractmethod
    def get_outcome_index(self, name: str) -> int:
        """Return the index of the named outcome, or -1 if the model does not know it."""
        raise NotImplementedError()


class Sequence:
    """A sequence of outcomes, with the probability of each and the log probability of the
    whole."""

    def __init__(self, outcomes: Iterable[str] = (), probabilities: Iterable[float] = None):
        self._outcomes = tuple(outcomes)
        if probabilities is None:
            self._probabilities = (1.0,) * len(self._outcomes)
        else:
            self._probabilities = tuple(float(probability) for probability in probabilities)
        if len(self._probabilities) != len(self._outcomes):
            raise ValueError("Each outcome must have exactly one probability.")
        self._score = sum(log_probability(probability) for probability in self._probabilities)

    def __repr__(self) -> str:
        return '%s(%r, %r)' % (type(self).__name__, self._outcomes, self._probabilities)

    def __len__(self) -> int:
        return len(self._outcomes)

    # Sequences sort with the highest score first.
    def __lt__(self, other: 'Sequence') -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._score > other._score

    @property
    def outcomes(self) -> Tuple[str, ...]:
        return self._outcomes

    @property
    def probabilities(self) -> Tuple[float, ...]:
        return self._probabilities

    @property
    def score(self) -> float:
        """The sum of the log probabilities of the outcomes."""
        return self._score

    def extend(self, outcome: str, probability: float) -> 'Sequence':
        """Return a new sequence with the given outcome appended."""
        result = Sequence.__new__(Sequence)
        result._outcomes = self._outcomes + (outcome,)
        result._probabilities = self._probabilities + (float(probability),)
        result._score = self._score + log_probability(probability)
        return result


class ParserTagger(metaclass=ABCMeta):
    """Abstract interface for a part of speech tagger used by the parser."""

    @abstractmethod
    def top_k_sequences(self, tokens: SequenceType[str]) -> List[Sequence]:
        """Return the best tag sequences for the tokens, best first."""
        raise NotImplementedError()


class ParserChunker(metaclass=ABCMeta):
    """Abstract interface for a chunker used by the parser."""

    @abstractmethod
    def top_k_sequences(self, tokens: SequenceType[str], tags: SequenceType[str],
                        min_score: float) -> List[Sequence]:
        """Return the best chunk sequences for the tagged tokens, best first, leaving out any
        whose score does not exceed the minimum."""
        raise NotImplementedError()
