# -*- coding: utf-8 -*-

"""
The shift-reduce parser.

Parsing proceeds by derivation steps. The first step assigns part of speech tags to the tokens of
a flat parse, the second groups the tagged tokens into flat chunks, and each step after that
labels the next unlabeled constituent as the start or continuation of a larger constituent and
then decides whether the constituent under construction is complete. A complete constituent is
reduced, i.e. inserted into the tree over the constituents it spans. Once a derivation has
collapsed into a single constituent, it is labeled TOP and set aside as a finished parse.

At every step each surviving derivation forks into several, one per plausible decision, and only
the most probable derivations go on to the next step.
"""

import logging
from typing import Dict, List, Optional, Sequence

from beamparse.contexts.build import BuildContextGenerator
from beamparse.contexts.check import CheckContextGenerator
from beamparse.head_rules import HeadRules
from beamparse.labels import COMPLETE_OUTCOME, CONTINUE_PREFIX, DEFAULT_ADVANCE_PERCENTAGE, \
    DEFAULT_BEAM_SIZE, INCOMPLETE_OUTCOME, START_PREFIX, TOP_NODE, TOP_START
from beamparse.oracles import ParserChunker, ParserTagger, ProbabilityModel, log_probability
from beamparse.spans import Span
from beamparse.trees import Parse
from beamparse.utility import BoundedHeap

__author__ = 'Beamparse Developers'
__all__ = [
    'MaximumEntropyParser',
]


LOGGER = logging.getLogger(__name__)


# Approximates log(0) as the probability of the best complete parse before one is found
_NO_COMPLETE_PARSE = -100000.0


class MaximumEntropyParser:
    """
    A shift-reduce parser based on Adwait Ratnaparkhi's 1998 thesis.

    The beam size bounds both the number of derivations advanced at each step and the number of
    complete parses collected before the search stops. The advance percentage is the share of a
    decision's probability mass that the advanced outcomes must account for; outcomes beyond
    that share are not explored.
    """

    def __init__(self, build_model: ProbabilityModel, check_model: ProbabilityModel,
                 tagger: ParserTagger, chunker: ParserChunker, head_rules: HeadRules,
                 beam_size: int = DEFAULT_BEAM_SIZE,
                 advance_percentage: float = DEFAULT_ADVANCE_PERCENTAGE,
                 create_derivation: bool = False):
        if beam_size < 1:
            raise ValueError("Beam size must be at least 1.")
        if not 0 < advance_percentage <= 1:
            raise ValueError("Advance percentage must be in the interval (0, 1].")

        self._build_model = build_model
        self._check_model = check_model
        self._tagger = tagger
        self._chunker = chunker
        self._head_rules = head_rules

        # The number of complete parses to collect, and the number of derivations advanced at
        # each step
        self._m = beam_size
        self._k = beam_size
        self._q = advance_percentage

        self._create_derivation = bool(create_derivation)

        self._build_context_generator = BuildContextGenerator()
        self._check_context_generator = CheckContextGenerator()

        self._start_type_map = {}  # type: Dict[str, str]
        self._continue_type_map = {}  # type: Dict[str, str]
        for index in range(build_model.outcome_count):
            outcome = build_model.get_outcome_name(index)
            if outcome.startswith(START_PREFIX):
                self._start_type_map[outcome] = outcome[len(START_PREFIX):]
            elif outcome.startswith(CONTINUE_PREFIX):
                self._continue_type_map[outcome] = outcome[len(CONTINUE_PREFIX):]

        self._top_start_index = build_model.get_outcome_index(TOP_START)
        self._complete_index = check_model.get_outcome_index(COMPLETE_OUTCOME)
        self._incomplete_index = check_model.get_outcome_index(INCOMPLETE_OUTCOME)
        if self._top_start_index < 0:
            raise ValueError("Build model has no %r outcome." % TOP_START)
        if self._complete_index < 0 or self._incomplete_index < 0:
            raise ValueError("Check model must have both %r and %r outcomes." %
                             (COMPLETE_OUTCOME, INCOMPLETE_OUTCOME))

    @property
    def beam_size(self) -> int:
        return self._m

    @property
    def advance_percentage(self) -> float:
        return self._q

    @property
    def head_rules(self) -> HeadRules:
        return self._head_rules

    def full_parse(self, flat_parse: Parse, parse_count: int = 1) -> List[Parse]:
        """
        Parse a flat parse, i.e. a root whose children are the tokens of a sentence.

        Returns up to parse_count complete parses, most probable first. If no complete parse is
        found, the best partial derivation reached after chunking is returned instead. If there
        isn't one of those either, the result is empty.
        """
        if parse_count < 1:
            raise ValueError("At least one parse must be requested.")
        if self._create_derivation:
            flat_parse.init_derivation()

        old_derivations = BoundedHeap(None, Parse.sort_key, [flat_parse])
        completed = BoundedHeap(self._m, Parse.sort_key)

        derivation_length = 0
        max_derivation_length = 2 * flat_parse.child_count + 3
        guess = None  # type: Optional[Parse]
        best_complete = _NO_COMPLETE_PARSE

        while len(completed) < self._m and derivation_length < max_derivation_length:
            if not old_derivations:
                break
            new_derivations = BoundedHeap(None, Parse.sort_key)
            for processed, derivation in enumerate(old_derivations):
                if processed >= self._k:
                    break
                if derivation.probability < best_complete:
                    # Neither this derivation nor any that follow it can win.
                    break
                if guess is None and derivation_length == 2:
                    guess = derivation

                if derivation_length == 0:
                    advanced = self._advance_tags(derivation)
                elif derivation_length == 1:
                    if len(new_derivations) < self._k:
                        min_score = best_complete
                    else:
                        min_score = new_derivations.last().probability
                    advanced = self._advance_chunks(derivation, min_score)
                else:
                    advanced = self._advance_parses(derivation)

                if not advanced:
                    LOGGER.debug("Couldn't advance parse at derivation step %s: %s",
                                 derivation_length, derivation.show())

                for new_derivation in advanced:
                    if new_derivation.is_complete:
                        self._advance_top(new_derivation)
                        if new_derivation.probability > best_complete:
                            best_complete = new_derivation.probability
                        completed.add(new_derivation)
                    else:
                        new_derivations.add(new_derivation)
            derivation_length += 1
            old_derivations = new_derivations

        if not completed:
            LOGGER.warning("Couldn't find parse for: %s", flat_parse)
            if guess is None:
                return []
            return [guess]

        results = []
        for parse in completed:
            if len(results) >= parse_count:
                break
            parse.update_child_parents()
            results.append(parse)
        return results

    def _advance_top(self, parse: Parse) -> None:
        children = parse.children
        probabilities = self._build_model.evaluate(
            self._build_context_generator.get_context(children, 0)
        )
        parse.add_probability(log_probability(probabilities[self._top_start_index]))
        probabilities = self._check_model.evaluate(
            self._check_context_generator.get_context(children, TOP_NODE, 0, 0)
        )
        parse.add_probability(log_probability(probabilities[self._complete_index]))
        parse.type = TOP_NODE

    def _advance_parses(self, parse: Parse) -> List[Parse]:
        """Advance the parse by labeling its first unlabeled constituent, returning the
        resulting derivations whose probabilities account for the advance percentage of the
        probability mass."""
        q_opp = 1 - self._q
        children = parse.children
        child_count = len(children)

        # The most recent start of a constituent, with its index and type. Start outcomes tried
        # for the constituent being labeled take over as the most recent start.
        last_start_node = None  # type: Optional[Parse]
        last_start_index = -1
        last_start_type = None  # type: Optional[str]

        # Find the constituent to be labeled at this step.
        advance_index = None
        for index, child in enumerate(children):
            if child.label is None:
                advance_index = index
                break
            start_type = self._start_type_map.get(child.label)
            if start_type is not None:
                last_start_node = child
                last_start_index = index
                last_start_type = start_type
        if advance_index is None:
            return []
        advance_node = children[advance_index]

        build_probabilities = list(self._build_model.evaluate(
            self._build_context_generator.get_context(children, advance_index)
        ))

        new_derivations = []
        probability_mass = 0.0
        while probability_mass < self._q:
            # The most probable outcome not yet tried. The first one wins ties.
            best_index = max(range(len(build_probabilities)),
                             key=build_probabilities.__getitem__)
            best_probability = build_probabilities[best_index]
            if best_probability <= 0:
                break
            build_probabilities[best_index] = 0.0
            probability_mass += best_probability

            if best_index == self._top_start_index:
                # Can't have TOP until the parse is complete.
                continue

            outcome = self._build_model.get_outcome_name(best_index)
            if outcome in self._start_type_map:
                last_start_node = advance_node
                last_start_index = advance_index
                last_start_type = self._start_type_map[outcome]
            elif outcome in self._continue_type_map:
                if last_start_node is None or last_start_type != self._continue_type_map[outcome]:
                    # A continuation must match the constituent it continues.
                    continue
            else:
                continue
            start_node = last_start_node
            start_index = last_start_index
            start_type = last_start_type

            shifted = parse.clone()
            if self._create_derivation:
                shifted.append_derivation('%s-' % best_index)
            shifted.set_child(advance_index, outcome)
            shifted.add_probability(log_probability(best_probability))

            check_probabilities = self._check_model.evaluate(
                self._check_context_generator.get_context(shifted.children, start_type,
                                                          start_index, advance_index)
            )
            complete_probability = check_probabilities[self._complete_index]
            incomplete_probability = check_probabilities[self._incomplete_index]

            if complete_probability > q_opp:
                reduced = self._reduce(parse, shifted, children, start_node, start_index,
                                       start_type, advance_node, advance_index,
                                       complete_probability)
                if reduced is not None:
                    new_derivations.append(reduced)

            if incomplete_probability > q_opp:
                if self._create_derivation:
                    shifted.append_derivation('0.')
                # The last constituent can't be shifted.
                if advance_index != child_count - 1:
                    shifted.add_probability(log_probability(incomplete_probability))
                    new_derivations.append(shifted)

        return new_derivations

    def _reduce(self, parse: Parse, shifted: Parse, children: Sequence[Parse], start_node: Parse,
                start_index: int, start_type: str, advance_node: Parse, advance_index: int,
                complete_probability: float) -> Optional[Parse]:
        members = list(children[start_index:advance_index + 1])
        members[0] = start_node
        members[-1] = advance_node

        # Constituents made up entirely of their own heads are flat chunks, which are the
        # chunker's responsibility.
        if all(member.type == member.head.type for member in members):
            return None

        reduced = shifted.clone()
        if self._create_derivation:
            reduced.append_derivation('1.')
        log_complete = log_probability(complete_probability)
        reduced.add_probability(log_complete)
        span = Span(start_node.span.start, advance_node.span.end)
        head = self._head_rules.get_head(members, start_type)
        reduced.insert(Parse(parse.text, span, start_type, log_complete, head))
        return reduced

    def _advance_chunks(self, parse: Parse, min_chunk_score: float) -> List[Parse]:
        """Return the derivations for the best chunk sequences of a tagged parse."""
        children = parse.children
        words = [str(child.head) for child in children]
        tags = [child.type for child in children]
        sequences = self._chunker.top_k_sequences(words, tags,
                                                  min_chunk_score - parse.probability)
        new_derivations = []
        for sequence_index, sequence in enumerate(sequences):
            labels = sequence.outcomes
            probabilities = sequence.probabilities
            if len(labels) != len(children):
                raise ValueError("Chunk sequence length %s does not match sentence length %s." %
                                 (len(labels), len(children)))
            derivation = parse.clone()
            if self._create_derivation:
                derivation.append_derivation('%s.' % sequence_index)

            start = end = 0
            chunk_type = None
            for index in range(len(labels) + 1):
                if index < len(labels):
                    derivation.add_probability(log_probability(probabilities[index]))
                if index < len(labels) and labels[index].startswith(CONTINUE_PREFIX):
                    end = index
                    continue

                # Close off the previous chunk, if any.
                if chunk_type is not None:
                    members = children[start:end + 1]
                    span = Span(members[0].span.start, members[-1].span.end)
                    head = self._head_rules.get_head(members, chunk_type)
                    derivation.insert(Parse(parse.text, span, chunk_type, 0.0, head))

                if index < len(labels):
                    if labels[index].startswith(START_PREFIX):
                        chunk_type = labels[index][len(START_PREFIX):]
                        start = end = index
                    else:
                        chunk_type = None
            new_derivations.append(derivation)
        return new_derivations

    def _advance_tags(self, parse: Parse) -> List[Parse]:
        """Return the derivations for the best tag sequences of a flat parse."""
        children = parse.children
        words = [str(child) for child in children]
        sequences = self._tagger.top_k_sequences(words)
        if not sequences:
            LOGGER.warning("No tag sequence for: %s", parse)
            return []
        new_derivations = []
        for sequence_index, sequence in enumerate(sequences):
            tags = sequence.outcomes
            probabilities = sequence.probabilities
            if len(tags) != len(children):
                raise ValueError("Tag sequence length %s does not match sentence length %s." %
                                 (len(tags), len(children)))
            derivation = parse.clone()
            if self._create_derivation:
                derivation.append_derivation('%s.' % sequence_index)
            for child, tag, probability in zip(children, tags, probabilities):
                log_word_probability = log_probability(probability)
                derivation.insert(Parse(child.text, child.span, tag, log_word_probability))
                derivation.add_probability(log_word_probability)
            new_derivations.append(derivation)
        return new_derivations
