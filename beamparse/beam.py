# -*- coding: utf-8 -*-

"""
Beam search over outcome sequences, and the chunker built on it.

The search labels a sequence of tokens one position at a time. At each position, the best
sequences found so far are each extended with their most probable outcomes, and only the best of
the extended sequences are carried forward to the next position.
"""

from typing import Any, List, Optional, Sequence as SequenceType

from beamparse.contexts.chunk import ChunkContextGenerator
from beamparse.labels import CONTINUE_PREFIX, START_PREFIX
from beamparse.oracles import ParserChunker, ProbabilityModel, Sequence
from beamparse.utility import BoundedCache, BoundedHeap

__author__ = 'Beamparse Developers'
__all__ = [
    'ZERO_LOG',
    'BeamSearch',
    'ChunkBeamSearch',
    'MaximumEntropyParserChunker',
]


# Stands in for log(0) as the default minimum sequence score
ZERO_LOG = -100000.0


def _by_score(sequence: Sequence) -> float:
    return -sequence.score


class BeamSearch:
    """Beam search over the outcomes of a probability model."""

    def __init__(self, size: int, context_generator: Any, model: ProbabilityModel,
                 cache_size: int = 0):
        if size <= 0:
            raise ValueError("Beam size must be positive.")
        self._size = size
        self._context_generator = context_generator
        self._model = model
        self._cache = BoundedCache(cache_size) if cache_size > 0 else None

    @property
    def size(self) -> int:
        return self._size

    @property
    def model(self) -> ProbabilityModel:
        return self._model

    def get_context(self, index: int, tokens: SequenceType, outcomes: SequenceType[str],
                    additional_context: SequenceType) -> List[str]:
        """Return the context for labeling the token at the given index."""
        return self._context_generator.get_context(index, tokens, outcomes, additional_context)

    def valid_sequence(self, index: int, tokens: SequenceType, outcomes: SequenceType[str],
                       outcome: str) -> bool:
        """Return whether the outcome may follow the outcomes already assigned."""
        return True

    def _evaluate(self, context: List[str]) -> SequenceType[float]:
        if self._cache is None:
            return self._model.evaluate(context)
        key = tuple(context)
        scores = self._cache.get(key)
        if scores is None:
            scores = tuple(self._model.evaluate(context))
            self._cache.put(key, scores)
        return scores

    def best_sequences(self, count: int, tokens: SequenceType,
                       additional_context: Optional[SequenceType] = None,
                       min_sequence_score: float = ZERO_LOG) -> List[Sequence]:
        """Return up to count of the best sequences of outcomes for the tokens, best first."""
        if additional_context is None:
            additional_context = ()
        previous = BoundedHeap(self._size, _by_score, [Sequence()])
        for index in range(len(tokens)):
            following = BoundedHeap(self._size, _by_score)
            for sequence in previous:
                outcomes = sequence.outcomes
                context = self.get_context(index, tokens, outcomes, additional_context)
                scores = self._evaluate(context)

                # Only the top outcomes of each sequence are advanced.
                ranked = sorted(scores)
                minimum = ranked[max(0, len(ranked) - self._size)]
                for outcome_index, score in enumerate(scores):
                    if score >= minimum:
                        self._advance(sequence, index, tokens, outcome_index, score,
                                      min_sequence_score, following)

                if not following:
                    # Nothing made the cut, so try every valid outcome.
                    for outcome_index, score in enumerate(scores):
                        self._advance(sequence, index, tokens, outcome_index, score,
                                      min_sequence_score, following)
            previous = following
        return [sequence for _, sequence in zip(range(count), previous)]

    def _advance(self, sequence: Sequence, index: int, tokens: SequenceType, outcome_index: int,
                 score: float, min_sequence_score: float, heap: BoundedHeap) -> None:
        if score <= 0:
            return
        outcome = self._model.get_outcome_name(outcome_index)
        if not self.valid_sequence(index, tokens, sequence.outcomes, outcome):
            return
        extended = sequence.extend(outcome, score)
        if extended.score > min_sequence_score:
            heap.add(extended)

    def best_sequence(self, tokens: SequenceType,
                      additional_context: Optional[SequenceType] = None) -> Optional[Sequence]:
        """Return the single best sequence of outcomes for the tokens, or None if there is
        none."""
        sequences = self.best_sequences(1, tokens, additional_context)
        return sequences[0] if sequences else None


class ChunkBeamSearch(BeamSearch):
    """
    Beam search over chunk labels.

    A continue label is only valid directly after a start or continue label of the same type.
    """

    def __init__(self, size: int, context_generator: ChunkContextGenerator,
                 model: ProbabilityModel, cache_size: int = 0):
        super().__init__(size, context_generator, model, cache_size)
        self._continue_start_map = {}
        for index in range(model.outcome_count):
            outcome = model.get_outcome_name(index)
            if outcome.startswith(CONTINUE_PREFIX):
                self._continue_start_map[outcome] = (START_PREFIX +
                                                     outcome[len(CONTINUE_PREFIX):])

    def get_context(self, index: int, tokens: SequenceType, outcomes: SequenceType[str],
                    additional_context: SequenceType) -> List[str]:
        tags = additional_context[0]
        return self._context_generator.get_context(index, tokens, tags, outcomes)

    def valid_sequence(self, index: int, tokens: SequenceType, outcomes: SequenceType[str],
                       outcome: str) -> bool:
        start = self._continue_start_map.get(outcome)
        if start is None:
            return True
        if not outcomes:
            return False
        last = outcomes[-1]
        return last == outcome or last == start


class MaximumEntropyParserChunker(ParserChunker):
    """A chunker for the parser, labeling tagged tokens with the outcomes of a probability
    model."""

    DEFAULT_BEAM_SIZE = 10
    DEFAULT_CACHE_SIZE = 10

    def __init__(self, model: ProbabilityModel, beam_size: int = DEFAULT_BEAM_SIZE,
                 cache_size: int = DEFAULT_CACHE_SIZE):
        self._beam_size = beam_size
        self._search = ChunkBeamSearch(beam_size, ChunkContextGenerator(cache_size), model)

    @property
    def beam_size(self) -> int:
        return self._beam_size

    def top_k_sequences(self, tokens: SequenceType[str], tags: SequenceType[str],
                        min_score: float = ZERO_LOG) -> List[Sequence]:
        """Return the best chunk sequences for the tagged tokens, best first."""
        return self._search.best_sequences(self._beam_size, tokens, (tags,), min_score)

    def chunk(self, tokens: SequenceType[str], tags: SequenceType[str]) -> List[str]:
        """Return the best chunk labels for the tagged tokens."""
        sequence = self._search.best_sequence(tokens, (tags,))
        if sequence is None:
            return []
        return list(sequence.outcomes)
