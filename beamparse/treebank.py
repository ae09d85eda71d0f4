# -*- coding: utf-8 -*-

"""
Reading of Penn Treebank style bracketed parse strings, and construction of the flat parses the
parser starts from.
"""

import re
from typing import List, Optional, Sequence, Tuple

from beamparse.exceptions import ParseError
from beamparse.labels import INCOMPLETE_NODE, NONE_NODE, TOKEN_NODE, TOP_NODE
from beamparse.spans import Span
from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'BRACKET_TOKENS',
    'convert_token',
    'from_parse_string',
    'make_flat_parse',
]


# Base constituent label of a labeled constituent, e.g. NP in NP-SBJ=2
_TYPE_PATTERN = re.compile(r'^([^ =-]+)')

# Token of a pre-terminal, e.g. dog in "NN dog)"
_TOKEN_PATTERN = re.compile(r'^[^ ()]+ ([^ ()]+)\s*\)')

# Labels that would otherwise be cut short by the hyphens in them
_LITERAL_TYPES = ('-LCB-', '-RCB-', '-LRB-', '-RRB-', NONE_NODE)

BRACKET_TOKENS = {
    '(': '-LRB-',
    ')': '-RRB-',
    '{': '-LCB-',
    '}': '-RCB-',
}


def convert_token(token: str) -> str:
    """Replace a bracket token with its treebank escape."""
    return BRACKET_TOKENS.get(token, token)


def _get_type(rest: str) -> Optional[str]:
    for literal in _LITERAL_TYPES:
        if rest.startswith(literal):
            return literal
    match = _TYPE_PATTERN.match(rest)
    if match:
        return match.group(1)
    return None


def _get_token(rest: str) -> Optional[str]:
    match = _TOKEN_PATTERN.match(rest)
    if match:
        return match.group(1)
    return None


def from_parse_string(parse_string: str) -> Parse:
    """
    Build a parse tree from a treebank style parse string.

    The text of the tree is rebuilt from the tokens, each followed by a single space. Subtrees
    labeled -NONE- are left out.
    """
    text_pieces = []
    offset = 0
    stack = []  # type: List[Tuple[str, int]]
    constituents = []  # type: List[Tuple[str, Span]]
    for index, char in enumerate(parse_string):
        if char == '(':
            rest = parse_string[index + 1:]
            type_name = _get_type(rest)
            if type_name is None:
                raise ParseError("No type for constituent at offset %s: %r" % (index, rest))
            token = _get_token(rest)
            stack.append((type_name, offset))
            if token is not None and type_name != NONE_NODE:
                constituents.append((TOKEN_NODE, Span(offset, offset + len(token))))
                text_pieces.append(token)
                text_pieces.append(' ')
                offset += len(token) + 1
        elif char == ')':
            if not stack:
                raise ParseError("Unbalanced ')' at offset %s of %r" % (index, parse_string))
            type_name, start = stack.pop()
            # Constituents covering nothing but elided material are dropped along with it.
            if type_name != NONE_NODE and offset > start:
                constituents.append((type_name, Span(start, offset - 1)))
    text = ''.join(text_pieces)
    root = Parse(text, Span(0, len(text)), TOP_NODE, 0.0)
    for type_name, span in constituents:
        if type_name != TOP_NODE:
            root.insert(Parse(text, span, type_name, 0.0))
    return root


def make_flat_parse(tokens: Sequence[str]) -> Parse:
    """Build the flat parse of a sentence: a root with one token node per token."""
    if not tokens:
        raise ValueError("Cannot build a parse for an empty sentence.")
    text = ' '.join(tokens)
    root = Parse(text, Span(0, len(text)), INCOMPLETE_NODE, 0.0)
    start = 0
    for token in tokens:
        root.insert(Parse(text, Span(start, start + len(token)), TOKEN_NODE, 0.0))
        start += len(token) + 1
    return root
