# -*- coding: utf-8 -*-

"""
A front end to the parser which accepts raw sentences and renders parses in treebank notation.
"""

import logging
from typing import Iterable, List, Sequence, Union

from beamparse.beam import MaximumEntropyParserChunker
from beamparse.config import ParserConfig
from beamparse.oracles import ParserChunker, ParserTagger, ProbabilityModel
from beamparse.parsing import MaximumEntropyParser
from beamparse.treebank import convert_token, make_flat_parse
from beamparse.trees import Parse

__author__ = 'Beamparse Developers'
__all__ = [
    'TreebankParser',
]


LOGGER = logging.getLogger(__name__)


class TreebankParser:
    """Parses sentences of whitespace separated tokens into Penn Treebank style trees."""

    def __init__(self, parser: MaximumEntropyParser):
        self._parser = parser

    @classmethod
    def from_config(cls, config: ParserConfig, build_model: ProbabilityModel,
                    check_model: ProbabilityModel, tagger: ParserTagger,
                    chunker: Union[ParserChunker, ProbabilityModel]) -> 'TreebankParser':
        """
        Create a treebank parser as described by a configuration. The chunker can be given
        either as a chunker or as the probability model for one, in which case the chunker is
        built using the chunker settings of the configuration.
        """
        if isinstance(chunker, ProbabilityModel):
            chunker = MaximumEntropyParserChunker(chunker, config.chunker_beam_size,
                                                  config.chunker_cache_size)
        head_rules = config.load_head_rules()
        LOGGER.info("Loaded %s head rules from %s.", len(head_rules), config.head_rules_file)
        parser = MaximumEntropyParser(build_model, check_model, tagger, chunker, head_rules,
                                      beam_size=config.beam_size,
                                      advance_percentage=config.advance_percentage,
                                      create_derivation=config.derivation_logging)
        return cls(parser)

    @property
    def parser(self) -> MaximumEntropyParser:
        return self._parser

    def parse_tokens(self, tokens: Sequence[str], count: int = 1) -> List[Parse]:
        """Return up to count parses of a tokenized sentence, most probable first."""
        tokens = [convert_token(token) for token in tokens]
        if not tokens:
            return []
        return self._parser.full_parse(make_flat_parse(tokens), count)

    def parse_line(self, line: str, count: int = 1) -> List[Parse]:
        """Return up to count parses of a sentence whose tokens are separated by whitespace."""
        return self.parse_tokens(line.split(), count)

    def show_parses(self, lines: Iterable[str], count: int = 1) -> str:
        """
        Parse each line and render the results in treebank notation, one parse per line. When more
        than one parse per sentence is requested, each parse is preceded by the sentence and the
        log probability of the parse.
        """
        rendered = []
        for line in lines:
            tokens = line.split()
            if not tokens:
                rendered.append('')
                continue
            parses = self.parse_tokens(tokens, count)
            if not parses:
                LOGGER.warning("No parse for line: %r", line)
                rendered.append('')
                continue
            sentence = ' '.join(convert_token(token) for token in tokens)
            for parse in parses:
                if count > 1:
                    rendered.append('%s %s %s' % (sentence, parse.probability, parse.show()))
                else:
                    rendered.append(parse.show())
        return '\n'.join(rendered)
