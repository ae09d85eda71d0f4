# -*- coding: utf-8 -*-

"""
Extraction of training events for the parser's models from treebank parses.

Each event pairs the outcome that a model should predict with the context the parser would
present to the model at that point of the derivation of the parse.
"""

import enum
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple

from beamparse.contexts import BuildContextGenerator, CheckContextGenerator, \
    ChunkContextGenerator
from beamparse.head_rules import HeadRules
from beamparse.labels import COMPLETE_OUTCOME, CONTINUE_PREFIX, INCOMPLETE_OUTCOME, \
    OTHER_OUTCOME, START_PREFIX, TOP_NODE
from beamparse.treebank import from_parse_string
from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'EventType',
    'Event',
    'ParserEventStream',
]


class EventType(enum.Enum):
    """The models the parser consults, each of which is trained on its own events."""
    BUILD = 'build'
    CHECK = 'check'
    CHUNK = 'chunk'


Event = NamedTuple('Event', [('outcome', str), ('context', Tuple[str, ...])])


class ParserEventStream:
    """
    The training events of a single type for a sequence of parses, one Penn Treebank style parse
    string per line.
    """

    def __init__(self, lines: Iterable[str], head_rules: HeadRules, event_type: EventType):
        if not isinstance(event_type, EventType):
            raise TypeError(event_type, EventType)
        self._lines = lines
        self._head_rules = head_rules
        self._event_type = event_type
        if event_type is EventType.BUILD:
            self._context_generator = BuildContextGenerator()
        elif event_type is EventType.CHECK:
            self._context_generator = CheckContextGenerator()
        else:
            self._context_generator = ChunkContextGenerator()

    @property
    def event_type(self) -> EventType:
        return self._event_type

    def __iter__(self) -> Iterator[Event]:
        for line in self._lines:
            line = line.strip()
            if not line:
                continue
            yield from self.get_events(line)

    def get_events(self, parse_string: str) -> List[Event]:
        """Return the events for a single parse string."""
        root = from_parse_string(parse_string)
        root.update_heads(self._head_rules)
        chunks = self.get_initial_chunks(root)
        if self._event_type is EventType.CHUNK:
            return self._get_chunk_events(chunks)
        return self._get_parse_events(chunks)

    @classmethod
    def get_initial_chunks(cls, parse: Parse) -> List[Parse]:
        """Return the constituents the chunker would produce for the parse: its part of speech
        tags, except where they are grouped under a constituent made up only of tags."""
        if parse.is_pos_tag:
            return [parse]
        children = parse.children
        if all(child.is_pos_tag for child in children):
            return [parse]
        chunks = []
        for child in children:
            chunks.extend(cls.get_initial_chunks(child))
        return chunks

    def _get_parse_events(self, chunks: Sequence[Parse]) -> List[Event]:
        events = []
        chunks = list(chunks)
        index = 0
        while index < len(chunks):
            chunk = chunks[index]
            parent = chunk.parent
            if parent is not None:
                type_name = parent.type
                siblings = parent.children
                if siblings[0] is chunk:
                    outcome = START_PREFIX + type_name
                else:
                    outcome = CONTINUE_PREFIX + type_name
                chunk.label = outcome
                if self._event_type is EventType.BUILD:
                    context = self._context_generator.get_context(chunks, index)
                    events.append(Event(outcome, tuple(context)))

                # The first of the chunks under construction as part of the parent
                start = index - 1
                while start >= 0 and chunks[start].parent is parent:
                    start -= 1
                start += 1

                if siblings[-1] is chunk:
                    if self._event_type is EventType.CHECK:
                        context = self._context_generator.get_context(chunks, type_name, start,
                                                                      index)
                        events.append(Event(COMPLETE_OUTCOME, tuple(context)))
                    if type_name == TOP_NODE:
                        break
                    # Reduce, then continue from the new constituent.
                    chunks[start:index + 1] = [parent]
                    index = start
                    continue
                if self._event_type is EventType.CHECK:
                    context = self._context_generator.get_context(chunks, type_name, start, index)
                    events.append(Event(INCOMPLETE_OUTCOME, tuple(context)))
            index += 1
        return events

    def _get_chunk_events(self, chunks: Sequence[Parse]) -> List[Event]:
        words = []
        tags = []
        labels = []
        for chunk in chunks:
            if chunk.is_pos_tag:
                words.append(str(chunk))
                tags.append(chunk.type)
                labels.append(OTHER_OUTCOME)
            else:
                for position, tag_node in enumerate(chunk.children):
                    words.append(str(tag_node))
                    tags.append(tag_node.type)
                    if position == 0:
                        labels.append(START_PREFIX + chunk.type)
                    else:
                        labels.append(CONTINUE_PREFIX + chunk.type)
        return [Event(labels[index],
                      tuple(self._context_generator.get_context(index, words, tags, labels)))
                for index in range(len(words))]
