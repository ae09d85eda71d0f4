# -*- coding: utf-8 -*-

"""Node types and outcome labels shared by the parser, its models and its training events."""

__author__ = 'Beamparse Developers'
__all__ = [
    'TOP_NODE',
    'TOKEN_NODE',
    'INCOMPLETE_NODE',
    'NONE_NODE',
    'START_PREFIX',
    'CONTINUE_PREFIX',
    'OTHER_OUTCOME',
    'COMPLETE_OUTCOME',
    'INCOMPLETE_OUTCOME',
    'TOP_START',
    'END_OF_SENTENCE',
    'DEFAULT_BEAM_SIZE',
    'DEFAULT_ADVANCE_PERCENTAGE',
]


TOP_NODE = 'TOP'
TOKEN_NODE = 'TK'
INCOMPLETE_NODE = 'INC'

# Treebank elision marker. Subtrees of this type are dropped when reading treebank strings.
NONE_NODE = '-NONE-'

# Build and chunk outcomes
START_PREFIX = 'S-'
CONTINUE_PREFIX = 'C-'
OTHER_OUTCOME = 'O'

# Check outcomes
COMPLETE_OUTCOME = 'c'
INCOMPLETE_OUTCOME = 'i'

TOP_START = START_PREFIX + TOP_NODE

# Filler used by the context generators for positions outside the sentence
END_OF_SENTENCE = 'eos'

DEFAULT_BEAM_SIZE = 20
DEFAULT_ADVANCE_PERCENTAGE = 0.95
