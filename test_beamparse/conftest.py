"""Scripted stand-ins for the parser's probability models, tagger and chunker."""

from typing import Callable, Dict, List, Sequence as SequenceType

import pytest

from beamparse.head_rules import EnglishHeadRules
from beamparse.oracles import ParserChunker, ParserTagger, ProbabilityModel, Sequence


HEAD_RULES = """\
# count type direction tags...
3 S 1 VP S SBAR
3 VP 1 VBZ VBD VB
2 PP 1 IN TO
"""

BUILD_OUTCOMES = ('S-S', 'C-S', 'S-TOP', 'S-NP', 'C-NP', 'S-VP', 'C-VP')
CHECK_OUTCOMES = ('c', 'i')


class ScriptedModel(ProbabilityModel):
    """A model whose outcome probabilities are computed by a function of the context."""

    def __init__(self, outcomes: SequenceType[str],
                 rule: Callable[[SequenceType[str]], Dict[str, float]]):
        self._outcomes = list(outcomes)
        self._rule = rule
        self.contexts = []  # type: List[List[str]]

    def evaluate(self, context):
        self.contexts.append(list(context))
        probabilities = self._rule(context)
        return [probabilities.get(outcome, 0.0) for outcome in self._outcomes]

    @property
    def outcome_count(self):
        return len(self._outcomes)

    def get_outcome_name(self, index):
        return self._outcomes[index]

    def get_outcome_index(self, name):
        try:
            return self._outcomes.index(name)
        except ValueError:
            return -1


class FixedTagger(ParserTagger):
    def __init__(self, sequences: List[Sequence]):
        self._sequences = sequences

    def top_k_sequences(self, tokens):
        return list(self._sequences)


class FixedChunker(ParserChunker):
    def __init__(self, sequences: List[Sequence]):
        self._sequences = sequences
        self.min_scores = []  # type: List[float]

    def top_k_sequences(self, tokens, tags, min_score):
        self.min_scores.append(min_score)
        return list(self._sequences)


def sentence_build_rule(context):
    """Start an S at the first constituent and continue it to the end of the sentence."""
    if any(feature.startswith('0=S|') for feature in context):
        return {'S-TOP': 1.0}
    if '-1=eos|eos|eos' in context:
        return {'S-S': 1.0}
    return {'C-S': 1.0}


def sentence_check_rule(context):
    """A constituent is complete when nothing follows it."""
    if any(feature.startswith('s1=eos|') for feature in context):
        return {'c': 1.0}
    return {'i': 1.0}


@pytest.fixture
def head_rules():
    return EnglishHeadRules.from_lines(HEAD_RULES.splitlines(), filename='<test>')


@pytest.fixture
def build_model():
    return ScriptedModel(BUILD_OUTCOMES, sentence_build_rule)


@pytest.fixture
def check_model():
    return ScriptedModel(CHECK_OUTCOMES, sentence_check_rule)


@pytest.fixture
def tagger():
    return FixedTagger([Sequence(['DT', 'NN', 'VBZ', '.'])])


@pytest.fixture
def chunker():
    return FixedChunker([Sequence(['S-NP', 'C-NP', 'S-VP', 'O'])])


@pytest.fixture
def make_tagger():
    return FixedTagger


@pytest.fixture
def make_chunker():
    return FixedChunker


@pytest.fixture
def make_model():
    return ScriptedModel
