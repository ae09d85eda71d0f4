"""Tests for the treebank parser front end."""

from beamparse.config import ParserConfig
from beamparse.parsing import MaximumEntropyParser
from beamparse.pipeline import TreebankParser


EXPECTED = '(TOP (S (NP (DT The) (NN dog)) (VP (VBZ barks)) (. .)))'


def test_parse_line(build_model, check_model, tagger, chunker, head_rules):
    parser = TreebankParser(MaximumEntropyParser(build_model, check_model, tagger, chunker,
                                                 head_rules))
    top, = parser.parse_line('The dog barks .')
    assert top.show() == EXPECTED
    assert parser.parse_line('   ') == []


def test_brackets_are_converted(build_model, check_model, tagger, chunker, head_rules):
    parser = TreebankParser(MaximumEntropyParser(build_model, check_model, tagger, chunker,
                                                 head_rules))
    top, = parser.parse_tokens(['(', 'dog', ')', '.'])
    assert top.text == '-LRB- dog -RRB- .'


def test_show_parses(build_model, check_model, tagger, chunker, head_rules):
    parser = TreebankParser(MaximumEntropyParser(build_model, check_model, tagger, chunker,
                                                 head_rules))
    assert parser.show_parses(['The dog barks .', '']) == EXPECTED + '\n'
    assert parser.show_parses(['The dog barks .'], count=2) == \
        'The dog barks . 0.0 ' + EXPECTED


def test_from_config(tmp_path, build_model, check_model, tagger, make_model, head_rules):
    head_rules.save(str(tmp_path / 'rules.txt'))
    config_path = tmp_path / 'parser.ini'
    config_path.write_text('[Parser]\nBeam Size = 4\nHead Rules File = rules.txt\n'
                           '[Chunker]\nBeam Size = 2\n', encoding='utf-8')

    def chunk_rule(context):
        feature = next(feature for feature in context if feature.startswith('0='))
        tag = feature.split('|')[1]
        if tag == 'DT':
            return {'S-NP': 1.0}
        if tag == 'NN':
            return {'C-NP': 1.0}
        if tag == 'VBZ':
            return {'S-VP': 1.0}
        return {'O': 1.0}

    chunk_model = make_model(('S-NP', 'C-NP', 'S-VP', 'C-VP', 'O'), chunk_rule)
    parser = TreebankParser.from_config(ParserConfig(str(config_path)), build_model,
                                        check_model, tagger, chunk_model)
    assert parser.parser.beam_size == 4
    assert len(parser.parser.head_rules) == 3
    top, = parser.parse_line('The dog barks .')
    assert top.show() == EXPECTED


def test_from_config_with_chunker(tmp_path, build_model, check_model, tagger, chunker,
                                  head_rules):
    head_rules.save(str(tmp_path / 'rules.txt'))
    config_path = tmp_path / 'parser.ini'
    config_path.write_text('[Parser]\nHead Rules File = rules.txt\n', encoding='utf-8')
    parser = TreebankParser.from_config(ParserConfig(str(config_path)), build_model,
                                        check_model, tagger, chunker)
    assert parser.parser.beam_size == 20
    top, = parser.parse_line('The dog barks .')
    assert top.show() == EXPECTED
    assert chunker.min_scores
