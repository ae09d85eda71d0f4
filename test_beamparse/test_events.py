"""Tests for training event extraction."""

import pytest

from beamparse.events import Event, EventType, ParserEventStream
from beamparse.treebank import from_parse_string


PARSE = '(TOP (S (NP (DT The) (NN dog)) (VP (VBZ barks)) (. .)))'


def outcomes(event_type, head_rules, lines=(PARSE,)):
    return [event.outcome for event in ParserEventStream(lines, head_rules, event_type)]


def test_build_events(head_rules):
    assert outcomes(EventType.BUILD, head_rules) == ['S-S', 'C-S', 'C-S', 'S-TOP']


def test_check_events(head_rules):
    assert outcomes(EventType.CHECK, head_rules) == ['i', 'i', 'c', 'c']


def test_chunk_events(head_rules):
    assert outcomes(EventType.CHUNK, head_rules) == ['S-NP', 'C-NP', 'S-VP', 'O']


def test_build_event_contexts(head_rules):
    events = list(ParserEventStream([PARSE], head_rules, EventType.BUILD))
    assert all(isinstance(event, Event) for event in events)
    first = events[0]
    assert first.context[0] == 'default'
    assert '0=NP|dog' in first.context
    second = events[1]
    # Labels assigned by earlier events are visible to later ones.
    assert '-1=S-S|NP|dog' in second.context
    top = events[-1]
    assert '0=S|barks' in top.context


def test_check_event_contexts(head_rules):
    events = list(ParserEventStream([PARSE], head_rules, EventType.CHECK))
    assert 'S->NP,VP,.' in events[2].context
    assert 'TOP->S' in events[3].context


def test_blank_lines_are_skipped(head_rules):
    lines = ['', PARSE, '   ', PARSE]
    assert len(outcomes(EventType.CHUNK, head_rules, lines)) == 8


def test_invalid_event_type(head_rules):
    with pytest.raises(TypeError):
        ParserEventStream([PARSE], head_rules, 'build')


def test_initial_chunks(head_rules):
    events = ParserEventStream([], head_rules, EventType.CHUNK)
    assert events.event_type is EventType.CHUNK
    parse = from_parse_string('(TOP (S (NP (DT The) (NN dog)) (VP (VBD ran) (PP (IN to) '
                              '(NP (NN town))))))')
    chunks = events.get_initial_chunks(parse)
    assert [chunk.type for chunk in chunks] == ['NP', 'VBD', 'IN', 'NP']
