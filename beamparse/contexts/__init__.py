# -*- coding: utf-8 -*-

"""
Context generators, which turn the local structure around a parsing decision into the string
predicates the probability models are evaluated on.

The predicate strings must match those the models were trained with, character for character.
"""

from beamparse.contexts.build import BuildContextGenerator
from beamparse.contexts.check import CheckContextGenerator
from beamparse.contexts.chunk import ChunkContextGenerator

__author__ = 'Beamparse Developers'
__all__ = [
    'BuildContextGenerator',
    'CheckContextGenerator',
    'ChunkContextGenerator',
]
