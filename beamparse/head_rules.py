# -*- coding: utf-8 -*-

"""
Head rules, which select the child of a constituent that carries its lexical head.

Head rules files hold one rule per line, in the format

    <tag count> <constituent type> <direction> <tag 1> <tag 2> ... <tag N>

where a direction of 1 means the children are searched from left to right, and any other value
means right to left. The tags are listed in order of priority.
"""

import logging
from abc import ABCMeta, abstractmethod
from typing import Dict, Iterable, Mapping, NamedTuple, Optional, Sequence, Tuple, TYPE_CHECKING

from beamparse.exceptions import HeadRulesSyntaxError
from beamparse.labels import TOKEN_NODE

if TYPE_CHECKING:
    from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'HeadRule',
    'HeadRules',
    'EnglishHeadRules',
]


LOGGER = logging.getLogger(__name__)


HeadRule = NamedTuple('HeadRule', [('left_to_right', bool), ('tags', Tuple[str, ...])])


class HeadRules(metaclass=ABCMeta):
    """Abstract interface for head percolation rules."""

    @abstractmethod
    def get_head(self, constituents: 'Sequence[Parse]', type: str) -> 'Optional[Parse]':
        """Return the head of a constituent of the given type having the given children, or None
        if the constituent has no head at this level."""
        raise NotImplementedError()


class EnglishHeadRules(HeadRules):
    """Head rules for the English Penn Treebank."""

    NOUN_PHRASE_TYPES = frozenset(['NP', 'NX'])
    POSSESSIVE_TAG = 'POS'

    # Noun phrases are special cased. Each group is searched in turn.
    NOUN_TAGS = ('NN', 'NNP', 'NNPS', 'NNS', 'NX', 'JJR', 'POS')
    NOUN_MODIFIER_TAGS = ('$', 'ADJP', 'PRN')
    ADJECTIVE_TAGS = ('JJ', 'JJS', 'RB', 'QP')

    def __init__(self, rules: Mapping[str, HeadRule] = None):
        self._rules = {}  # type: Dict[str, HeadRule]
        if rules:
            for type_name, rule in rules.items():
                left_to_right, tags = rule
                self._rules[type_name] = HeadRule(bool(left_to_right), tuple(tags))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._rules

    def __getitem__(self, type_name: str) -> HeadRule:
        return self._rules[type_name]

    @classmethod
    def from_file(cls, path: str) -> 'EnglishHeadRules':
        """Load head rules from a file."""
        with open(path, encoding='utf-8') as rules_file:
            return cls.from_lines(rules_file, filename=path)

    @classmethod
    def from_lines(cls, lines: Iterable[str], filename: str = None) -> 'EnglishHeadRules':
        """Parse head rules from the lines of a head rules file."""
        rules = {}
        for line_number, line in enumerate(lines, 1):
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            try:
                type_name, rule = cls.parse_rule(stripped)
            except HeadRulesSyntaxError as exc:
                exc.set_info(filename=filename, lineno=line_number, text=line.rstrip('\n'))
                raise
            if type_name in rules:
                LOGGER.warning("Head rule for %s on line %s of %s replaces an earlier rule.",
                               type_name, line_number, filename or '<lines>')
            rules[type_name] = rule
        return cls(rules)

    @staticmethod
    def parse_rule(line: str) -> Tuple[str, HeadRule]:
        """Parse a single line of a head rules file."""
        fields = line.split()
        if len(fields) < 3:
            raise HeadRulesSyntaxError("Expected: tag count, constituent type, and direction")
        count_str, type_name, direction = fields[:3]
        tags = tuple(fields[3:])
        try:
            count = int(count_str)
        except ValueError:
            raise HeadRulesSyntaxError("Expected: integer tag count", offset=1) from None
        if count != len(tags):
            raise HeadRulesSyntaxError("Expected %s tags but found %s" % (count, len(tags)),
                                       offset=len(line) + 1)
        return type_name, HeadRule(direction == '1', tags)

    def save(self, path: str) -> None:
        """Write the rules to a file in the same format they are read in."""
        with open(path, 'w', encoding='utf-8') as rules_file:
            for type_name in sorted(self._rules):
                rule = self._rules[type_name]
                fields = [str(len(rule.tags)), type_name, '1' if rule.left_to_right else '0']
                fields.extend(rule.tags)
                rules_file.write(' '.join(fields))
                rules_file.write('\n')

    @staticmethod
    def _find_last(constituents: 'Sequence[Parse]', tags: Sequence[str]) -> 'Optional[Parse]':
        # Rightmost constituent matching any of the tags
        for constituent in reversed(constituents):
            if constituent.type in tags:
                return constituent
        return None

    def get_head(self, constituents: 'Sequence[Parse]', type: str) -> 'Optional[Parse]':
        """Return the head of a constituent of the given type having the given children, or None
        if the constituent has no head at this level."""
        if not constituents:
            raise ValueError("A constituent must have at least one child to have a head.")
        if constituents[0].type == TOKEN_NODE:
            return None

        if type in self.NOUN_PHRASE_TYPES:
            if constituents[-1].type == self.POSSESSIVE_TAG:
                return None
            match = self._find_last(constituents, self.NOUN_TAGS)
            if match is None:
                for constituent in constituents:
                    if constituent.type == 'NP':
                        match = constituent
                        break
            if match is None:
                match = self._find_last(constituents, self.NOUN_MODIFIER_TAGS)
            if match is None:
                match = self._find_last(constituents, self.ADJECTIVE_TAGS)
            if match is None:
                match = constituents[-1]
            return match.head

        rule = self._rules.get(type)
        if rule is None:
            return constituents[-1].head
        if rule.left_to_right:
            ordered = constituents
        else:
            ordered = list(reversed(constituents))
        for tag in rule.tags:
            for constituent in ordered:
                if constituent.type == tag:
                    return constituent.head
        return ordered[0].head
