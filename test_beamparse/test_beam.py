"""Tests for sequence beam search and the chunker built on it."""

import math

from beamparse.beam import BeamSearch, MaximumEntropyParserChunker
from beamparse.oracles import Sequence


CHUNK_OUTCOMES = ('S-NP', 'C-NP', 'O')


def current_tag(context):
    # The first predicate about the current position is the word and its tag.
    feature = next(feature for feature in context if feature.startswith('0='))
    return feature.split('|')[1]


def noun_phrase_rule(context):
    tag = current_tag(context)
    if tag == 'DT':
        return {'S-NP': 0.9, 'O': 0.1}
    if tag == 'NN':
        return {'C-NP': 0.8, 'S-NP': 0.1, 'O': 0.1}
    return {'O': 0.9, 'S-NP': 0.1}


def test_chunk(make_model):
    chunker = MaximumEntropyParserChunker(make_model(CHUNK_OUTCOMES, noun_phrase_rule))
    labels = chunker.chunk(['The', 'dog', 'barks'], ['DT', 'NN', 'VBZ'])
    assert labels == ['S-NP', 'C-NP', 'O']


def test_top_k_sequences_are_ordered(make_model):
    chunker = MaximumEntropyParserChunker(make_model(CHUNK_OUTCOMES, noun_phrase_rule),
                                          beam_size=3)
    sequences = chunker.top_k_sequences(['The', 'dog', 'barks'], ['DT', 'NN', 'VBZ'])
    assert 0 < len(sequences) <= 3
    scores = [sequence.score for sequence in sequences]
    assert scores == sorted(scores, reverse=True)
    assert math.isclose(sequences[0].score, math.log(0.9 * 0.8 * 0.9))
    assert all(len(sequence) == 3 for sequence in sequences)


def test_continuation_cannot_start_sequence(make_model):
    def continue_rule(context):
        return {'C-NP': 0.9, 'O': 0.1}

    chunker = MaximumEntropyParserChunker(make_model(CHUNK_OUTCOMES, continue_rule))
    assert chunker.chunk(['dogs', 'bark'], ['NNS', 'VBP']) == ['O', 'O']


def test_minimum_score_filters_sequences(make_model):
    chunker = MaximumEntropyParserChunker(make_model(CHUNK_OUTCOMES, noun_phrase_rule))
    sequences = chunker.top_k_sequences(['The', 'dog'], ['DT', 'NN'], math.log(0.5))
    assert [sequence.outcomes for sequence in sequences] == [('S-NP', 'C-NP')]


def test_model_results_are_cached(make_model):
    model = make_model(('A', 'B'), lambda context: {'A': 0.6, 'B': 0.4})

    class WordContext:
        def get_context(self, index, tokens, outcomes, additional_context):
            return ['w=' + tokens[index]]

    search = BeamSearch(2, WordContext(), model, cache_size=5)
    sequences = search.best_sequences(4, ['x', 'x', 'x'])
    # Sequences with one B each score the same, so only the best is certain.
    assert len(sequences) == 2
    assert sequences[0].outcomes == ('A', 'A', 'A')
    assert len(model.contexts) == 1


def test_sequence():
    sequence = Sequence().extend('A', 0.5).extend('B', 0.5)
    assert sequence.outcomes == ('A', 'B')
    assert math.isclose(sequence.score, math.log(0.25))
    assert Sequence(['A'], [0.9]) < sequence
    assert Sequence(['A', 'B']).score == 0.0
