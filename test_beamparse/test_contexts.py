"""Tests for the feature generators consulted by the parser's models."""

import pytest

from beamparse.contexts import BuildContextGenerator, CheckContextGenerator, \
    ChunkContextGenerator
from beamparse.treebank import from_parse_string


@pytest.fixture
def constituents(head_rules):
    parse = from_parse_string('(TOP (S (NP (DT The) (NN dog)) (VP (VBZ barks)) (. .)))')
    parse.update_heads(head_rules)
    sentence, = parse.children
    return list(sentence.children)


def test_build_context_window(constituents):
    context = BuildContextGenerator().get_context(constituents, 0)
    assert context[:11] == [
        'default',
        '-2=eos|eos|eos', '-2*=eos|eos',
        '-1=eos|eos|eos', '-1*=eos|eos',
        '0=NP|dog', '0*=NP',
        '1=VP|barks', '1*=VP',
        '2=.|.', '2*=.',
    ]
    assert '-1=eos|eos|eos,0=NP|dog' in context
    assert '0*=NP,1*=VP,2*=.' in context
    assert len(context) == 34


def test_build_context_shows_labels_of_preceding_constituents(constituents):
    constituents[0].label = 'S-S'
    context = BuildContextGenerator().get_context(constituents, 1)
    assert '-1=S-S|NP|dog' in context
    assert '-1*=S-S|NP' in context
    assert '-2=eos|eos|eos' in context


def test_build_context_end_of_sentence(constituents):
    constituents[0].label = 'S-S'
    constituents[1].label = 'C-S'
    context = BuildContextGenerator().get_context(constituents, 2)
    assert context[-1] == 'endofsentence'


def test_build_context_punctuation(head_rules):
    parse = from_parse_string('(TOP (S (-LRB- -LRB-) (NN aside) (-RRB- -RRB-)))')
    parse.update_heads(head_rules)
    sentence, = parse.children
    constituents = list(sentence.children)
    context = BuildContextGenerator().get_context(constituents, 2)
    assert 'bracketsmatch' in context

    # A constituent start between the brackets hides the opening bracket.
    constituents[1].label = 'S-NP'
    context = BuildContextGenerator().get_context(constituents, 2)
    assert 'bracketsmatch' not in context


def test_check_context(constituents):
    context = CheckContextGenerator().get_context(constituents, 'S', 0, 1)
    assert context == [
        'default',
        'cbegin=NP|dog|S', 'cbegin*=NP|S',
        'clast=VP|barks|S', 'clast*=VP|S',
        'cil=S,NP|dog,VP|barks', 'ci*l=S,NP,VP|barks', 'cil*=S,NP|dog,VP', 'ci*l*=S,NP,VP',
        'S->NP,VP',
        's-1=eos|S|eos', 's-1*=S|eos',
        's-2=eos|S|eos', 's-2*=S|eos',
        's1=.|S|.', 's1*=S|.',
        's2=eos|S|eos', 's2*=S|eos',
    ]


def test_check_context_single_constituent(constituents):
    context = CheckContextGenerator().get_context(constituents, 'VP', 1, 1)
    assert 'VP->VP' in context
    assert not any(feature.startswith('cil=') for feature in context)
    assert 's-1=dog|VP|NN' in context


def test_chunk_context():
    words = ['The', 'dog', 'barks']
    tags = ['DT', 'NN', 'VBZ']
    context = ChunkContextGenerator().get_context(1, words, tags, ['S-NP'])
    assert context[:11] == [
        'default',
        '-2=eos|eos|eos', '-2*=eos|eos',
        '-1=The|DT|S-NP', '-1*=DT|S-NP',
        '0=dog|NN', '0*=NN',
        '1=barks|VBZ', '1*=VBZ',
        '2=eos|eos', '2*=eos',
    ]


def test_chunk_context_cache_is_per_sentence():
    generator = ChunkContextGenerator(cache_size=10)
    tags = ['DT', 'NN']
    first = generator.get_context(0, ['The', 'dog'], tags, [])
    second = generator.get_context(0, ['A', 'cat'], tags, [])
    assert '0=The|DT' in first
    assert '0=A|DT' in second


def test_chunk_context_cache_returns_copies():
    generator = ChunkContextGenerator(cache_size=10)
    words = ['The', 'dog']
    tags = ['DT', 'NN']
    first = generator.get_context(0, words, tags, [])
    first.append('extra')
    second = generator.get_context(0, words, tags, [])
    assert 'extra' not in second
    assert second == first[:-1]
