# -*- coding: utf-8 -*-

"""
Parse tree-related classes.

A parse tree is a hierarchy of constituents, each covering a span of a single shared sentence
string. During the search, many competing derivations of the same sentence are alive at once.
They are forked from one another by cloning, which copies a node's list of children but not the
children themselves, so that each fork can be modified at its top level without disturbing any of
the others. Deeper nodes are shared between derivations and must be treated as immutable once
they have been placed into a tree, with the exception of the non-owning parent link.
"""

from typing import List, Optional, Iterator, Tuple, TYPE_CHECKING

from beamparse.exceptions import ParseError
from beamparse.labels import TOKEN_NODE
from beamparse.spans import Span

if TYPE_CHECKING:
    from beamparse.head_rules import HeadRules

__author__ = 'Beamparse Developers'
__all__ = [
    'Parse',
]


class Parse:
    """A constituent of a parse tree, together with the derivation state that produced it."""

    def __init__(self, text: str, span: Span, type: str, probability: float = 0.0,
                 head: 'Parse' = None):
        if not isinstance(span, Span):
            raise TypeError(span, Span)
        self._text = text
        self._span = span
        self.type = type
        self._probability = float(probability)
        self._head = self if head is None else head
        self._children = []  # type: List[Parse]
        self.label = None  # type: Optional[str]
        self.parent = None  # type: Optional[Parse]
        self._derivation = None  # type: Optional[List[str]]

    def __repr__(self) -> str:
        return '%s(%r, %r, %r, %r)' % (type(self).__name__, self._text, self._span, self.type,
                                       self._probability)

    def __str__(self) -> str:
        return self._text[self._span.start:self._span.end]

    # Parses sort with the most probable first. Equal probabilities are neither less nor greater,
    # so sorting is stable with respect to the order the parses were produced in.
    def __lt__(self, other: 'Parse') -> bool:
        if not isinstance(other, Parse):
            return NotImplemented
        return self._probability > other._probability

    def __gt__(self, other: 'Parse') -> bool:
        if not isinstance(other, Parse):
            return NotImplemented
        return self._probability < other._probability

    def __le__(self, other: 'Parse') -> bool:
        if not isinstance(other, Parse):
            return NotImplemented
        return self._probability >= other._probability

    def __ge__(self, other: 'Parse') -> bool:
        if not isinstance(other, Parse):
            return NotImplemented
        return self._probability <= other._probability

    @staticmethod
    def sort_key(parse: 'Parse') -> float:
        """Key function giving the same ordering as the comparison operators."""
        return -parse._probability

    @property
    def text(self) -> str:
        """The sentence this parse is based on. Shared by every node of every parse of it."""
        return self._text

    @property
    def span(self) -> Span:
        """The character offsets of this constituent in the text."""
        return self._span

    @property
    def value(self) -> str:
        """The text covered by this constituent."""
        return str(self)

    @property
    def head(self) -> 'Parse':
        """The lexical head of this constituent. A parse can be its own head."""
        return self._head

    @property
    def probability(self) -> float:
        """The log of the product of the probabilities of all decisions that formed this parse."""
        return self._probability

    @property
    def derivation(self) -> Optional[str]:
        """The recorded derivation of this parse, if derivation recording is enabled."""
        if self._derivation is None:
            return None
        return ''.join(self._derivation)

    @property
    def children(self) -> Tuple['Parse', ...]:
        """The sub-constituents of this parse."""
        return tuple(self._children)

    @property
    def child_count(self) -> int:
        """The number of sub-constituents of this parse."""
        return len(self._children)

    @property
    def is_leaf(self) -> bool:
        """Whether this parse has no sub-constituents."""
        return not self._children

    @property
    def is_pos_tag(self) -> bool:
        """Whether this parse is a part of speech tag, i.e. a node with a single token child."""
        return len(self._children) == 1 and self._children[0].type == TOKEN_NODE

    @property
    def is_complete(self) -> bool:
        """Whether the derivation has collapsed into a single top-most constituent."""
        return len(self._children) == 1

    def add_probability(self, log_probability: float) -> None:
        """Add the log probability of a decision made on this parse."""
        self._probability += log_probability

    def init_derivation(self) -> None:
        """Start recording the derivation of this parse."""
        self._derivation = []

    def append_derivation(self, data: str) -> None:
        """Record a step of the derivation, if recording is enabled."""
        if self._derivation is not None:
            self._derivation.append(data)

    def clone(self) -> 'Parse':
        """
        Return a copy of this parse having its own list of children.

        The children themselves, the head, the parent and the text are shared with the original.
        Adding, removing or replacing children of the copy never affects the original.
        """
        result = object.__new__(type(self))
        result.__dict__.update(self.__dict__)
        result._children = list(self._children)
        if self._derivation is not None:
            result._derivation = list(self._derivation)
        return result

    def set_child(self, index: int, label: str) -> None:
        """Replace the child at the given index with a copy of it having the given label."""
        child = self._children[index].clone()
        child.label = label
        self._children[index] = child

    def index_of(self, child: 'Parse') -> int:
        """Return the index of the given child, or -1 if it is not a child of this parse."""
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        return -1

    def insert(self, constituent: 'Parse') -> None:
        """
        Insert a constituent into this parse according to its span.

        Children covered by the constituent become its children. If an existing child covers the
        constituent instead, the constituent is inserted into that child. The constituent's span
        must lie within this parse's span.
        """
        span = constituent.span
        if not self._span.contains(span):
            raise ParseError("Inserting constituent %s not contained in %s." % (span, self._span))
        index = 0
        while index < len(self._children):
            child = self._children[index]
            child_span = child.span
            if child_span.start > span.end:
                break
            if span.contains(child_span):
                del self._children[index]
                constituent._children.append(child)
                child.parent = constituent
                continue
            if child_span.contains(span):
                child.insert(constituent)
                return
            index += 1
        self._children.insert(index, constituent)
        constituent.parent = self

    def show(self) -> str:
        """Render this parse in Penn Treebank bracket notation."""
        pieces = []
        start = self._span.start
        if self.type != TOKEN_NODE:
            pieces.append('(')
            pieces.append(self.type + ' ')
        for child in self._children:
            child_span = child.span
            if start < child_span.start:
                pieces.append(self._text[start:child_span.start])
            pieces.append(child.show())
            start = child_span.end
        pieces.append(self._text[start:self._span.end])
        if self.type != TOKEN_NODE:
            pieces.append(')')
        return ''.join(pieces)

    def update_heads(self, rules: 'HeadRules') -> None:
        """Recompute the heads of this parse and all its descendants, from the bottom up."""
        if self._children:
            for child in self._children:
                child.update_heads(rules)
            head = rules.get_head(self._children, self.type)
            self._head = self if head is None else head
        else:
            self._head = self

    def update_child_parents(self) -> None:
        """Point the parent link of every descendant at the node that currently holds it."""
        for child in self._children:
            child.parent = self
            child.update_child_parents()

    def get_common_parent(self, node: 'Parse') -> Optional['Parse']:
        """
        Return the deepest shared ancestor of this node and the given one.

        If the nodes are identical their parent is returned. If one node is an ancestor of the
        other, the ancestor is returned.
        """
        if node is self:
            return self.parent
        ancestors = set()
        ancestor = self
        while ancestor is not None:
            ancestors.add(id(ancestor))
            ancestor = ancestor.parent
        while node is not None:
            if id(node) in ancestors:
                return node
            node = node.parent
        return None

    def get_tag_nodes(self) -> List['Parse']:
        """Return the part of speech tag nodes under this parse, from left to right."""
        tags = []
        pending = list(self._children)
        while pending:
            node = pending.pop(0)
            if node.is_pos_tag:
                tags.append(node)
            else:
                pending[0:0] = node._children
        return tags

    def get_tag_sequence_probability(self) -> float:
        """Return the log probability of the tag sequence assigned to this parse."""
        if self.is_pos_tag:
            return self._probability
        if not self._children:
            raise ParseError("Reached a leaf that is not under a tag: %r" % self)
        return sum(child.get_tag_sequence_probability() for child in self._children)

    def iter_nodes(self) -> Iterator['Parse']:
        """Iterate over this parse and its descendants in pre-order."""
        yield self
        for child in self._children:
            yield from child.iter_nodes()
