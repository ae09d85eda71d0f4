# -*- coding: utf-8 -*-

"""
Beamparse
=========
A statistical shift-reduce constituency parser for natural language.

MIT License (http://opensource.org/licenses/MIT)

Beamparse builds labeled constituent trees for tagged sentences in the manner of Ratnaparkhi's
maximum entropy parser. A flat sentence is first assigned part of speech tags, then grouped into
flat chunks, and finally built up into a full tree through a repeated sequence of build and check
decisions. Every partial derivation carries the log probability of the decisions that produced it,
and only the most promising derivations are kept at each step of the search. The probability
models, the tagger and the chunker are supplied by the caller; beamparse provides the trees, the
head rules, the feature extraction that drives the models, and the search itself.
"""


__author__ = 'Beamparse Developers'
__copyright__ = "Copyright (c) 2024-2026, Beamparse Developers"
__credits__ = ['Beamparse Developers']
__license__ = 'MIT'
__version__ = '1.0'
__maintainer__ = 'Beamparse Developers'
__email__ = 'beamparse@users.noreply.github.com'
__status__ = 'Production'

__all__ = [
    '__author__',
    '__copyright__',
    '__credits__',
    '__license__',
    '__version__',
    '__maintainer__',
    '__email__',
    '__status__',
]
